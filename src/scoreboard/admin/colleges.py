"""College administration.

Domain logic is pure - database operations go through repo.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from scoreboard.core.errors import NotFoundError, ValidationError
from scoreboard.core.streams import validate_name, validate_stream
from scoreboard.db import repo
from scoreboard.db.repo import DbSession
from scoreboard.models.domain import CollegeEntity

logger = logging.getLogger(__name__)


@dataclass
class CollegeInput:
    """Input for college creation."""

    name: str | None
    stream: str | None


def create_college(session: DbSession, college_input: CollegeInput) -> CollegeEntity:
    """Create a college.

    Raises:
        ValidationError: If a field is missing or invalid, or the stream
            already has a college with this name.
    """
    name = validate_name(college_input.name, "College")
    stream = validate_stream(college_input.stream)

    if repo.find_college_by_name(session, name, stream) is not None:
        raise ValidationError(f"College {name!r} already exists in {stream}")

    college = repo.create_college(
        session, CollegeEntity(college_id=repo.new_id(), name=name, stream=stream)
    )
    repo.commit(session)

    logger.info("Created college %s (%r, %s)", college.college_id, name, stream)
    return college


def get_college(session: DbSession, college_id: str) -> CollegeEntity:
    """Get a college, raising NotFoundError if absent."""
    college = repo.get_college(session, college_id)
    if college is None:
        raise NotFoundError("College", college_id)
    return college


def list_colleges(session: DbSession, stream: str | None = None) -> list[CollegeEntity]:
    """List colleges, optionally restricted to a validated stream."""
    if stream is not None:
        stream = validate_stream(stream)
    return repo.list_colleges(session, stream=stream)


def delete_college(session: DbSession, college_id: str) -> int:
    """Delete a college together with its points entries.

    Returns:
        Number of points entries removed.

    Raises:
        NotFoundError: If the college does not exist.
    """
    get_college(session, college_id)
    removed = repo.delete_college(session, college_id)
    repo.commit(session)

    logger.info("Deleted college %s and %d points entries", college_id, removed)
    return removed
