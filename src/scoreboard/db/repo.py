"""Repository pattern for database operations.

Encapsulates all SQLAlchemy queries, keeping domain logic pure.
Returns domain models (not SQLAlchemy entities) to external callers.
Nothing here commits except commit(); callers own the transaction.
"""

from __future__ import annotations

import logging
import uuid
from typing import TYPE_CHECKING

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from scoreboard.core.errors import StoreError
from scoreboard.db.schema import College, CompetitionItem, PointsEntry
from scoreboard.models.domain import (
    CollegeEntity,
    ItemEntity,
    PointsEntryEntity,
    ResolvedPointsEntry,
)

if TYPE_CHECKING:
    from sqlalchemy.orm import Session as DbSession
else:
    DbSession = Session

# Re-export for external use
__all__ = ["DbSession"]

logger = logging.getLogger(__name__)


def new_id() -> str:
    """Generate a new entity identity."""
    return str(uuid.uuid4())


# ============================================================================
# Converters: SQLAlchemy -> Domain
# ============================================================================


def _item_to_entity(item: CompetitionItem) -> ItemEntity:
    """Convert SQLAlchemy CompetitionItem to domain entity."""
    return ItemEntity(
        item_id=item.item_id,
        name=item.name,
        stream=item.stream,
        category=item.category,
        created_at=item.created_at,
    )


def _college_to_entity(college: College) -> CollegeEntity:
    """Convert SQLAlchemy College to domain entity."""
    return CollegeEntity(
        college_id=college.college_id,
        name=college.name,
        stream=college.stream,
        created_at=college.created_at,
    )


def _entry_to_entity(entry: PointsEntry) -> PointsEntryEntity:
    """Convert SQLAlchemy PointsEntry to domain entity."""
    return PointsEntryEntity(
        entry_id=entry.entry_id,
        college_id=entry.college_id,
        item_id=entry.item_id,
        points=entry.points,
    )


# ============================================================================
# Item Repository
# ============================================================================


def list_items(
    session: DbSession, stream: str | None = None, category: str | None = None
) -> list[ItemEntity]:
    """List items in insertion order, optionally filtered by stream and category."""
    query = session.query(CompetitionItem)
    if stream is not None:
        query = query.filter(CompetitionItem.stream == stream)
    if category is not None:
        query = query.filter(CompetitionItem.category == category)
    items = query.order_by(CompetitionItem.seq).all()
    return [_item_to_entity(i) for i in items]


def get_item(session: DbSession, item_id: str) -> ItemEntity | None:
    """Get item by ID."""
    item = session.query(CompetitionItem).filter(CompetitionItem.item_id == item_id).first()
    return _item_to_entity(item) if item else None


def find_item_by_name(
    session: DbSession, name: str, stream: str, category: str | None
) -> ItemEntity | None:
    """Find an item by case-insensitive name within a stream and category."""
    query = session.query(CompetitionItem).filter(
        func.lower(CompetitionItem.name) == name.lower(),
        CompetitionItem.stream == stream,
    )
    if category is None:
        query = query.filter(CompetitionItem.category.is_(None))
    else:
        query = query.filter(CompetitionItem.category == category)
    item = query.first()
    return _item_to_entity(item) if item else None


def create_item(session: DbSession, entity: ItemEntity) -> ItemEntity:
    """Create a new item."""
    item = CompetitionItem(
        item_id=entity.item_id,
        name=entity.name,
        stream=entity.stream,
        category=entity.category,
    )
    session.add(item)
    session.flush()
    return _item_to_entity(item)


def delete_item(session: DbSession, item_id: str) -> int:
    """Delete an item and its points entries.

    Returns:
        Number of points entries removed along with the item.
    """
    removed = (
        session.query(PointsEntry)
        .filter(PointsEntry.item_id == item_id)
        .delete(synchronize_session=False)
    )
    session.query(CompetitionItem).filter(CompetitionItem.item_id == item_id).delete(
        synchronize_session=False
    )
    return removed


# ============================================================================
# College Repository
# ============================================================================


def list_colleges(session: DbSession, stream: str | None = None) -> list[CollegeEntity]:
    """List colleges in insertion order, optionally filtered by stream."""
    query = session.query(College)
    if stream is not None:
        query = query.filter(College.stream == stream)
    colleges = query.order_by(College.seq).all()
    return [_college_to_entity(c) for c in colleges]


def get_college(session: DbSession, college_id: str) -> CollegeEntity | None:
    """Get college by ID."""
    college = session.query(College).filter(College.college_id == college_id).first()
    return _college_to_entity(college) if college else None


def find_college_by_name(session: DbSession, name: str, stream: str) -> CollegeEntity | None:
    """Find a college by case-insensitive name within a stream."""
    college = (
        session.query(College)
        .filter(func.lower(College.name) == name.lower(), College.stream == stream)
        .first()
    )
    return _college_to_entity(college) if college else None


def create_college(session: DbSession, entity: CollegeEntity) -> CollegeEntity:
    """Create a new college."""
    college = College(
        college_id=entity.college_id,
        name=entity.name,
        stream=entity.stream,
    )
    session.add(college)
    session.flush()
    return _college_to_entity(college)


def delete_college(session: DbSession, college_id: str) -> int:
    """Delete a college and its points entries.

    Returns:
        Number of points entries removed along with the college.
    """
    removed = (
        session.query(PointsEntry)
        .filter(PointsEntry.college_id == college_id)
        .delete(synchronize_session=False)
    )
    session.query(College).filter(College.college_id == college_id).delete(
        synchronize_session=False
    )
    return removed


# ============================================================================
# Points Repository
# ============================================================================


def upsert_points(
    session: DbSession, college_id: str, item_id: str, points: int
) -> PointsEntryEntity:
    """Set the points for a (college, item) pair, updating any existing entry."""
    entry = (
        session.query(PointsEntry)
        .filter(PointsEntry.college_id == college_id, PointsEntry.item_id == item_id)
        .first()
    )
    if entry is None:
        entry = PointsEntry(
            entry_id=new_id(),
            college_id=college_id,
            item_id=item_id,
            points=points,
        )
        session.add(entry)
    else:
        entry.points = points
    session.flush()
    return _entry_to_entity(entry)


def get_points_for(
    session: DbSession, college_ids: list[str], item_ids: list[str]
) -> list[PointsEntryEntity]:
    """Get entries whose college and item are both in the given sets."""
    if not college_ids or not item_ids:
        return []
    entries = (
        session.query(PointsEntry)
        .filter(
            PointsEntry.college_id.in_(college_ids),
            PointsEntry.item_id.in_(item_ids),
        )
        .order_by(PointsEntry.seq)
        .all()
    )
    return [_entry_to_entity(e) for e in entries]


def list_points_resolved(session: DbSession) -> list[ResolvedPointsEntry]:
    """List every points entry with its college and item."""
    rows = (
        session.query(PointsEntry, College, CompetitionItem)
        .join(College, PointsEntry.college_id == College.college_id)
        .join(CompetitionItem, PointsEntry.item_id == CompetitionItem.item_id)
        .order_by(PointsEntry.seq)
        .all()
    )
    return [
        ResolvedPointsEntry(
            entry=_entry_to_entity(entry),
            college=_college_to_entity(college),
            item=_item_to_entity(item),
        )
        for entry, college, item in rows
    ]


# ============================================================================
# Batch Operations
# ============================================================================


def delete_all(session: DbSession) -> dict[str, int]:
    """Delete every points entry, college and item.

    Returns:
        Number of rows removed per kind.
    """
    points = session.query(PointsEntry).delete(synchronize_session=False)
    colleges = session.query(College).delete(synchronize_session=False)
    items = session.query(CompetitionItem).delete(synchronize_session=False)
    return {"items": items, "colleges": colleges, "points": points}


def commit(session: DbSession) -> None:
    """Commit current transaction.

    Raises:
        StoreError: If the database rejects the commit. The session is
            rolled back first.
    """
    try:
        session.commit()
    except SQLAlchemyError as e:
        session.rollback()
        logger.exception("Commit failed")
        raise StoreError(f"Failed to save changes: {e.__class__.__name__}") from e
