"""Points entry administration.

Saves a batch of (college, item, points) triples as one transaction.
Each pair keeps a single entry; saving it again replaces the points.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.exc import SQLAlchemyError

from scoreboard.core.errors import NotFoundError, StoreError, ValidationError
from scoreboard.db import repo
from scoreboard.db.repo import DbSession
from scoreboard.models.domain import (
    CollegeEntity,
    ItemEntity,
    PointsEntryEntity,
    ResolvedPointsEntry,
)

logger = logging.getLogger(__name__)


@dataclass
class PointsInput:
    """One submitted score."""

    college_id: str
    item_id: str
    points: int


def save_points(session: DbSession, batch: list[PointsInput]) -> list[PointsEntryEntity]:
    """Save a batch of points atomically.

    Every triple is validated before anything is written, so a rejected
    batch leaves stored points untouched. When the same pair appears more
    than once the last occurrence wins.

    Args:
        session: Database session.
        batch: Submitted scores.

    Returns:
        The saved entries, one per distinct pair, in first-seen order.

    Raises:
        ValidationError: On an empty batch, non-integer points, or a
            college and item from different streams.
        NotFoundError: If a referenced college or item does not exist.
        StoreError: If the database rejects the batch.
    """
    if not batch:
        raise ValidationError("No points to save")

    latest = _validate_batch(session, batch)

    try:
        saved = [
            repo.upsert_points(session, college_id, item_id, points)
            for (college_id, item_id), points in latest.items()
        ]
    except SQLAlchemyError as e:
        session.rollback()
        logger.exception("Saving points batch failed")
        raise StoreError(f"Failed to save points: {e.__class__.__name__}") from e
    repo.commit(session)

    logger.info("Saved %d points entries", len(saved))
    return saved


def _validate_batch(
    session: DbSession, batch: list[PointsInput]
) -> dict[tuple[str, str], int]:
    """Check every triple and collapse duplicate pairs.

    Returns:
        Mapping of (college_id, item_id) to the last submitted points.
    """
    colleges: dict[str, CollegeEntity] = {}
    items: dict[str, ItemEntity] = {}
    latest: dict[tuple[str, str], int] = {}

    for entry in batch:
        if isinstance(entry.points, bool) or not isinstance(entry.points, int):
            raise ValidationError(f"points must be an integer, got {entry.points!r}")

        college = colleges.get(entry.college_id)
        if college is None:
            college = repo.get_college(session, entry.college_id)
            if college is None:
                raise NotFoundError("College", entry.college_id)
            colleges[entry.college_id] = college

        item = items.get(entry.item_id)
        if item is None:
            item = repo.get_item(session, entry.item_id)
            if item is None:
                raise NotFoundError("Item", entry.item_id)
            items[entry.item_id] = item

        if college.stream != item.stream:
            raise ValidationError(
                f"College {college.name!r} ({college.stream}) cannot score on "
                f"item {item.name!r} ({item.stream})"
            )

        latest[(entry.college_id, entry.item_id)] = entry.points

    return latest


def list_points(session: DbSession) -> list[ResolvedPointsEntry]:
    """List all points entries with college and item resolved."""
    return repo.list_points_resolved(session)
