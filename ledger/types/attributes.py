"""Priority and deadline read models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class PriorityView(BaseModel):
    level: int = Field(ge=1)


class DeadlineView(BaseModel):
    target_height: int = Field(ge=0)
    alerted: bool = False
