"""Milestone read models."""

from __future__ import annotations

from pydantic import BaseModel


class MilestoneView(BaseModel):
    """Description and completion flag of one milestone record."""

    description: str
    completed: bool = False


class InspectionReport(BaseModel):
    """Presence report for the caller's own record; absence is data, not failure."""

    exists: bool = False
    content_length: int = 0
    is_finished: bool = False
