"""Competition item administration.

Domain logic is pure - database operations go through repo.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from scoreboard.core.errors import NotFoundError, ValidationError
from scoreboard.core.streams import resolve_category, validate_name, validate_stream
from scoreboard.db import repo
from scoreboard.db.repo import DbSession
from scoreboard.models.domain import ItemEntity

logger = logging.getLogger(__name__)


@dataclass
class ItemInput:
    """Input for item creation."""

    name: str | None
    stream: str | None
    category: str | None = None


def create_item(session: DbSession, item_input: ItemInput) -> ItemEntity:
    """Create a competition item.

    Args:
        session: Database session.
        item_input: Item fields as submitted.

    Returns:
        The stored item with its assigned ID.

    Raises:
        ValidationError: If a field is missing or invalid, or an item with
            the same name exists in the stream and category.
    """
    name = validate_name(item_input.name, "Item")
    stream = validate_stream(item_input.stream)
    category = resolve_category(stream, item_input.category, required=True)

    if repo.find_item_by_name(session, name, stream, category) is not None:
        where = f"{stream} / {category}" if category else stream
        raise ValidationError(f"Item {name!r} already exists in {where}")

    item = repo.create_item(
        session,
        ItemEntity(item_id=repo.new_id(), name=name, stream=stream, category=category),
    )
    repo.commit(session)

    logger.info("Created item %s (%r, %s, %s)", item.item_id, name, stream, category)
    return item


def get_item(session: DbSession, item_id: str) -> ItemEntity:
    """Get an item, raising NotFoundError if absent."""
    item = repo.get_item(session, item_id)
    if item is None:
        raise NotFoundError("Item", item_id)
    return item


def list_items(
    session: DbSession, stream: str | None = None, category: str | None = None
) -> list[ItemEntity]:
    """List items, optionally restricted to a stream and category.

    Raises:
        ValidationError: If the stream or category filter is invalid.
    """
    if stream is not None:
        stream = validate_stream(stream)
        if category is not None:
            category = resolve_category(stream, category, required=False)
    elif category is not None:
        raise ValidationError("category filter requires a stream")
    return repo.list_items(session, stream=stream, category=category)


def delete_item(session: DbSession, item_id: str) -> int:
    """Delete an item together with its points entries.

    Returns:
        Number of points entries removed.

    Raises:
        NotFoundError: If the item does not exist.
    """
    get_item(session, item_id)
    removed = repo.delete_item(session, item_id)
    repo.commit(session)

    logger.info("Deleted item %s and %d points entries", item_id, removed)
    return removed
