"""Clearing the whole scoreboard."""

from __future__ import annotations

import logging

from scoreboard.db import repo
from scoreboard.db.repo import DbSession

logger = logging.getLogger(__name__)


def clear_all(session: DbSession) -> dict[str, int]:
    """Delete every item, college and points entry in one transaction.

    Returns:
        Number of rows removed per kind.
    """
    deleted = repo.delete_all(session)
    repo.commit(session)

    logger.warning(
        "Cleared scoreboard: %d items, %d colleges, %d points entries",
        deleted["items"],
        deleted["colleges"],
        deleted["points"],
    )
    return deleted
