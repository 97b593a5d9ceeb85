"""Results API endpoint.

GET /api/results?stream=&category=&order= - Aggregated results table
GET /api/meta/streams - Stream and category enumerations
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from scoreboard.aggregation.results import build_results
from scoreboard.api.app import get_db_session
from scoreboard.core.streams import describe_streams
from scoreboard.db.repo import DbSession
from scoreboard.models.types import ResultsTable, StreamCatalog

router = APIRouter()


@router.get("/results", response_model=ResultsTable)
def get_results(
    stream: str | None = None,
    category: str | None = None,
    order: str = "name",
    session: DbSession = Depends(get_db_session),
) -> ResultsTable:
    """Get the results table for a stream and category.

    Args:
        stream: Stream to report on.
        category: Category, required for Shareea and SHE.
        order: "name" (default) or "insertion".
        session: Database session (injected).

    Returns:
        ResultsTable; "empty" is true when no items or no colleges match.

    Raises:
        ValidationError: 400 on a missing or invalid stream or category.
    """
    return build_results(session, stream, category, order)


@router.get("/meta/streams", response_model=StreamCatalog)
def get_streams() -> StreamCatalog:
    """List the valid streams and categories."""
    return StreamCatalog(**describe_streams())
