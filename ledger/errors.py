"""Ledger error kinds.

Every failed call raises exactly one of these before any store is touched.
The ``code`` attribute is an opaque tag callers can match on.
"""

from __future__ import annotations


class LedgerError(Exception):
    """Base class for rejected ledger calls."""

    code = "ledger-error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ObjectiveNotFound(LedgerError):
    """The addressed identity has no matching entry."""

    code = "objective-not-found"


class DuplicateMilestone(LedgerError):
    """A milestone record already exists for the identity."""

    code = "duplicate-milestone"


class ParameterViolation(LedgerError):
    """An input failed field-level validation."""

    code = "parameter-violation"
