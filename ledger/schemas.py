"""SQLAlchemy schemas for the milestone ledger stores."""

from __future__ import annotations

from sqlalchemy import Boolean, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

IDENTITY_LENGTH = 128


class Base(DeclarativeBase):
    """Declarative base."""


class MilestoneRecord(Base):
    """Base milestone store: one description/completion pair per identity."""

    __tablename__ = "milestones"

    identity: Mapped[str] = mapped_column(String(IDENTITY_LENGTH), primary_key=True)
    description: Mapped[str] = mapped_column(String(100))
    completed: Mapped[bool] = mapped_column(Boolean, default=False)


class PriorityRecord(Base):
    """Priority classification store."""

    __tablename__ = "priorities"

    identity: Mapped[str] = mapped_column(String(IDENTITY_LENGTH), primary_key=True)
    level: Mapped[int] = mapped_column(Integer)


class DeadlineRecord(Base):
    """Temporal boundary store (absolute target height)."""

    __tablename__ = "deadlines"

    identity: Mapped[str] = mapped_column(String(IDENTITY_LENGTH), primary_key=True)
    target_height: Mapped[int] = mapped_column(Integer)
    alerted: Mapped[bool] = mapped_column(Boolean, default=False)
