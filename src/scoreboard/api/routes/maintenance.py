"""Maintenance API endpoint.

DELETE /api/clear - Delete all items, colleges and points
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from scoreboard.admin.reset import clear_all
from scoreboard.api.app import get_db_session
from scoreboard.db.repo import DbSession
from scoreboard.models.types import ClearResponse

router = APIRouter()


@router.delete("/clear", response_model=ClearResponse)
def clear_scoreboard(session: DbSession = Depends(get_db_session)) -> ClearResponse:
    """Delete every item, college and points entry."""
    deleted = clear_all(session)
    return ClearResponse(message="All data cleared", deleted=deleted)
