"""Ambient height for ledger calls."""

from __future__ import annotations

from ledger.types import CallContext


class HeightClock:
    """Height at which one CLI invocation executes its calls."""

    def __init__(self, start: int = 0) -> None:
        if start < 0:
            raise ValueError("Height must be non-negative.")
        self.current_height = start

    def context_for(self, caller: str) -> CallContext:
        """Build a call context for ``caller`` at the current height."""
        return CallContext(caller=caller, height=self.current_height)
