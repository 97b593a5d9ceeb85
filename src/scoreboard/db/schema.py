"""Database schema for the scoreboard.

Three tables: competition items, colleges and the points each college
earned on each item. A unique constraint keeps one entry per
(college_id, item_id). Every table has an autoincrement seq column that
records insertion order; the string ids are the public identities.
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class CompetitionItem(Base):
    """A scored event within a stream (and category, for categorized streams)."""

    __tablename__ = "competition_items"

    seq: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    item_id: Mapped[str] = mapped_column(String(64), unique=True, nullable=False)
    name: Mapped[str] = mapped_column(String(256), nullable=False)
    stream: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    category: Mapped[str | None] = mapped_column(String(32), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=lambda: datetime.now(timezone.utc)
    )


class College(Base):
    """A college competing within one stream."""

    __tablename__ = "colleges"

    seq: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    college_id: Mapped[str] = mapped_column(String(64), unique=True, nullable=False)
    name: Mapped[str] = mapped_column(String(256), nullable=False)
    stream: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=lambda: datetime.now(timezone.utc)
    )


class PointsEntry(Base):
    """Points a college earned on one item.

    Invariant: UNIQUE(college_id, item_id)
    Saving points for an existing pair updates the entry in place.
    """

    __tablename__ = "points_entries"

    seq: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    entry_id: Mapped[str] = mapped_column(String(64), unique=True, nullable=False)
    college_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("colleges.college_id"), nullable=False, index=True
    )
    item_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("competition_items.item_id"), nullable=False, index=True
    )
    points: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=lambda: datetime.now(timezone.utc)
    )

    __table_args__ = (UniqueConstraint("college_id", "item_id", name="uq_points_pair"),)
