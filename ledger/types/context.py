"""Ambient call context models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CallContext(BaseModel):
    """Authenticated caller plus the height at which the call executes."""

    model_config = ConfigDict(frozen=True)

    caller: str = Field(min_length=1)
    height: int = Field(default=0, ge=0)
