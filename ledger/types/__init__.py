"""Typed ledger payload models."""

from ledger.types.attributes import DeadlineView, PriorityView
from ledger.types.context import CallContext
from ledger.types.milestone import InspectionReport, MilestoneView

__all__ = [
    "CallContext",
    "DeadlineView",
    "InspectionReport",
    "MilestoneView",
    "PriorityView",
]
