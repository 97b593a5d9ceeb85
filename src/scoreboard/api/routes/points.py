"""Points API endpoint.

GET /api/points - List points entries with college and item resolved
POST /api/points - Save a batch of points
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from scoreboard.admin import points as points_admin
from scoreboard.admin.points import PointsInput
from scoreboard.api.app import get_db_session
from scoreboard.db.repo import DbSession
from scoreboard.models.types import (
    PointsEntryDetail,
    PointsSubmission,
    ResolvedPointsEntryDetail,
)

router = APIRouter()


@router.get("/points", response_model=list[ResolvedPointsEntryDetail])
def list_points(session: DbSession = Depends(get_db_session)) -> list[ResolvedPointsEntryDetail]:
    """List every points entry with its college and item."""
    return [
        ResolvedPointsEntryDetail.from_resolved(p) for p in points_admin.list_points(session)
    ]


@router.post("/points", response_model=list[PointsEntryDetail], status_code=201)
def save_points(
    batch: list[PointsSubmission],
    session: DbSession = Depends(get_db_session),
) -> list[PointsEntryDetail]:
    """Save a batch of points, replacing earlier points for the same pairs.

    The batch is applied atomically: either every entry is saved or none.

    Args:
        batch: Scores to save.
        session: Database session (injected).

    Returns:
        The saved entries.

    Raises:
        ValidationError: 400 on an empty batch, non-integer points or a
            cross-stream pair.
        NotFoundError: 404 if a college or item does not exist.
    """
    saved = points_admin.save_points(
        session,
        [PointsInput(college_id=p.college_id, item_id=p.item_id, points=p.points) for p in batch],
    )
    return [PointsEntryDetail.from_entity(e) for e in saved]
