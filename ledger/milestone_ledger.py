"""Milestone ledger over the three per-identity SQL stores."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.orm import Session

from ledger.errors import DuplicateMilestone, LedgerError, ObjectiveNotFound
from ledger.schemas import DeadlineRecord, MilestoneRecord, PriorityRecord
from ledger.stores.sql_store import SQLStore
from ledger.types import CallContext, DeadlineView, InspectionReport, MilestoneView, PriorityView
from ledger.validation import (
    DESCRIPTION_MAX_BYTES,
    PRIORITY_MAX,
    PRIORITY_MIN,
    validate_completed,
    validate_description,
    validate_level,
    validate_offset,
)

logger = logging.getLogger("ml.ledger")


class MilestoneLedger:
    """Registers, amends and reports one milestone per identity.

    Each public method is a single transaction. Existence checks run first,
    then field validation, and only then are rows written, so a rejected call
    leaves every store as it was. Priority and deadline entries have their own
    lifecycle and survive deletion of the milestone they were attached to.
    """

    def __init__(
        self,
        sql_store: SQLStore,
        description_max_bytes: int = DESCRIPTION_MAX_BYTES,
        priority_min: int = PRIORITY_MIN,
        priority_max: int = PRIORITY_MAX,
    ) -> None:
        # Configuration may narrow the limits, never widen them.
        if not PRIORITY_MIN <= priority_min <= priority_max <= PRIORITY_MAX:
            raise ValueError(
                f"Priority bounds must satisfy {PRIORITY_MIN} <= priority_min <= priority_max <= {PRIORITY_MAX}."
            )
        if not 1 <= description_max_bytes <= DESCRIPTION_MAX_BYTES:
            raise ValueError(f"description_max_bytes must be between 1 and {DESCRIPTION_MAX_BYTES}.")
        self.sql_store = sql_store
        self.sql_store.create_all()
        self.description_max_bytes = description_max_bytes
        self.priority_min = priority_min
        self.priority_max = priority_max

    def register(self, description: str, *, ctx: CallContext) -> str:
        """Create the caller's own milestone."""
        return self._create("register", ctx.caller, description, ctx=ctx)

    def transfer(self, target: str, description: str, *, ctx: CallContext) -> str:
        """Create a milestone keyed by ``target``.

        Any caller may do this for any identity that has no record yet; the
        new record belongs to ``target`` from then on.
        """
        return self._create("transfer", target, description, ctx=ctx)

    def modify(self, description: str, completed: bool, *, ctx: CallContext) -> str:
        """Overwrite description and completion flag of the caller's milestone."""
        with self._operation("modify", ctx) as sess:
            row = self._require_milestone(sess, ctx.caller)
            description = validate_description(description, self.description_max_bytes)
            completed = validate_completed(completed)
            row.description = description
            row.completed = completed
        logger.info("modify: %s completed=%s", ctx.caller, completed)
        return "Milestone updated."

    def delete(self, *, ctx: CallContext) -> str:
        """Remove the caller's milestone. Priority and deadline entries are kept."""
        with self._operation("delete", ctx) as sess:
            row = self._require_milestone(sess, ctx.caller)
            sess.delete(row)
        logger.info("delete: %s", ctx.caller)
        return "Milestone deleted."

    def set_priority(self, level: int, *, ctx: CallContext) -> str:
        """Insert or replace the caller's priority level."""
        with self._operation("set_priority", ctx) as sess:
            self._require_milestone(sess, ctx.caller)
            level = validate_level(level, self.priority_min, self.priority_max)
            row = sess.get(PriorityRecord, ctx.caller)
            if row is None:
                sess.add(PriorityRecord(identity=ctx.caller, level=level))
            else:
                row.level = level
        logger.info("set_priority: %s level=%d", ctx.caller, level)
        return "Priority set."

    def set_deadline(self, offset: int, *, ctx: CallContext) -> str:
        """Insert or replace the caller's deadline at ``ctx.height + offset``."""
        with self._operation("set_deadline", ctx) as sess:
            self._require_milestone(sess, ctx.caller)
            offset = validate_offset(offset)
            target_height = ctx.height + offset
            row = sess.get(DeadlineRecord, ctx.caller)
            if row is None:
                sess.add(DeadlineRecord(identity=ctx.caller, target_height=target_height, alerted=False))
            else:
                row.target_height = target_height
                row.alerted = False
        logger.info("set_deadline: %s target_height=%d", ctx.caller, target_height)
        return "Deadline set."

    def get(self, identity: str) -> MilestoneView:
        """Return the milestone stored for ``identity``."""
        with self.sql_store.session() as sess:
            row = self._require_milestone(sess, identity)
            return self._milestone_to_view(row)

    def is_completed(self, identity: str) -> bool:
        with self.sql_store.session() as sess:
            return bool(self._require_milestone(sess, identity).completed)

    def inspect(self, *, ctx: CallContext) -> InspectionReport:
        """Report on the caller's milestone without ever failing."""
        with self.sql_store.session() as sess:
            row = sess.get(MilestoneRecord, ctx.caller)
            if row is None:
                return InspectionReport()
            return InspectionReport(
                exists=True,
                content_length=len(row.description),
                is_finished=bool(row.completed),
            )

    def get_priority(self, identity: str) -> PriorityView:
        """Return the priority entry for ``identity``, including orphaned ones."""
        with self.sql_store.session() as sess:
            row = sess.get(PriorityRecord, identity)
            if row is None:
                raise ObjectiveNotFound(f"No priority set for {identity}.")
            return PriorityView(level=row.level)

    def get_deadline(self, identity: str) -> DeadlineView:
        """Return the deadline entry for ``identity``, including orphaned ones."""
        with self.sql_store.session() as sess:
            row = sess.get(DeadlineRecord, identity)
            if row is None:
                raise ObjectiveNotFound(f"No deadline set for {identity}.")
            return DeadlineView(target_height=row.target_height, alerted=bool(row.alerted))

    def _create(self, operation: str, identity: str, description: str, *, ctx: CallContext) -> str:
        with self._operation(operation, ctx) as sess:
            if sess.get(MilestoneRecord, identity) is not None:
                raise DuplicateMilestone(f"Milestone already registered for {identity}.")
            description = validate_description(description, self.description_max_bytes)
            sess.add(MilestoneRecord(identity=identity, description=description, completed=False))
        if identity == ctx.caller:
            logger.info("%s: %s", operation, identity)
        else:
            logger.info("%s: %s on behalf of %s", operation, ctx.caller, identity)
        return "Milestone registered."

    @contextmanager
    def _operation(self, name: str, ctx: CallContext) -> Iterator[Session]:
        try:
            with self.sql_store.session() as sess:
                yield sess
        except LedgerError as exc:
            logger.warning("%s rejected for %s at height %d: [%s] %s", name, ctx.caller, ctx.height, exc.code, exc)
            raise

    @staticmethod
    def _require_milestone(sess: Session, identity: str) -> MilestoneRecord:
        row = sess.get(MilestoneRecord, identity)
        if row is None:
            raise ObjectiveNotFound(f"No milestone registered for {identity}.")
        return row

    @staticmethod
    def _milestone_to_view(row: MilestoneRecord) -> MilestoneView:
        return MilestoneView(description=row.description, completed=bool(row.completed))
