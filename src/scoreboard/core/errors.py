"""Error taxonomy shared by the store, admin operations and the API.

Each error carries the HTTP status the API layer maps it to.
"""

from __future__ import annotations


class ScoreboardError(Exception):
    """Base class for all scoreboard errors."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ScoreboardError):
    """Missing or invalid fields, enum values or duplicates."""

    status_code = 400


class NotFoundError(ScoreboardError):
    """A referenced item, college or entry does not exist."""

    status_code = 404

    def __init__(self, kind: str, entity_id: str) -> None:
        super().__init__(f"{kind} not found: {entity_id}")
        self.kind = kind
        self.entity_id = entity_id


class StoreError(ScoreboardError):
    """The persistence layer failed to complete an operation."""

    status_code = 500
