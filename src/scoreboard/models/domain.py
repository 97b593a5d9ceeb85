"""Domain models for the scoreboard.

Pure Python dataclasses representing domain entities.
These models are independent of SQLAlchemy and used throughout
the application for clean separation from the database layer.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


# ============================================================================
# Catalog Domain
# ============================================================================


@dataclass
class ItemEntity:
    """Domain model for a competition item."""

    item_id: str
    name: str
    stream: str
    category: str | None = None
    created_at: datetime | None = None


@dataclass
class CollegeEntity:
    """Domain model for a college."""

    college_id: str
    name: str
    stream: str
    created_at: datetime | None = None


# ============================================================================
# Points Domain
# ============================================================================


@dataclass
class PointsEntryEntity:
    """Domain model for one college's points on one item."""

    entry_id: str
    college_id: str
    item_id: str
    points: int


@dataclass
class ResolvedPointsEntry:
    """Points entry with its college and item loaded."""

    entry: PointsEntryEntity
    college: CollegeEntity
    item: ItemEntity
