"""Competition items API endpoint.

GET /api/items - List items (optional stream/category filter)
GET /api/items/{item_id} - Get one item
POST /api/items - Create item
DELETE /api/items/{item_id} - Delete item and its points
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from scoreboard.admin import items as item_admin
from scoreboard.admin.items import ItemInput
from scoreboard.api.app import get_db_session
from scoreboard.db.repo import DbSession
from scoreboard.models.types import ItemCreate, ItemDetail, MessageResponse

router = APIRouter()


@router.get("/items", response_model=list[ItemDetail])
def list_items(
    stream: str | None = None,
    category: str | None = None,
    session: DbSession = Depends(get_db_session),
) -> list[ItemDetail]:
    """List competition items in creation order.

    Raises:
        ValidationError: 400 if a filter is invalid.
    """
    items = item_admin.list_items(session, stream=stream, category=category)
    return [ItemDetail.from_entity(i) for i in items]


@router.get("/items/{item_id}", response_model=ItemDetail)
def get_item(
    item_id: str,
    session: DbSession = Depends(get_db_session),
) -> ItemDetail:
    """Get a single competition item.

    Raises:
        NotFoundError: 404 if item not found.
    """
    return ItemDetail.from_entity(item_admin.get_item(session, item_id))


@router.post("/items", response_model=ItemDetail, status_code=201)
def create_item(
    item: ItemCreate,
    session: DbSession = Depends(get_db_session),
) -> ItemDetail:
    """Create a competition item.

    Args:
        item: Item submission.
        session: Database session (injected).

    Returns:
        The created item with its ID.

    Raises:
        ValidationError: 400 on missing or invalid stream/category.
    """
    created = item_admin.create_item(
        session, ItemInput(name=item.name, stream=item.stream, category=item.category)
    )
    return ItemDetail.from_entity(created)


@router.delete("/items/{item_id}", response_model=MessageResponse)
def delete_item(
    item_id: str,
    session: DbSession = Depends(get_db_session),
) -> MessageResponse:
    """Delete a competition item along with its points entries.

    Raises:
        NotFoundError: 404 if item not found.
    """
    item_admin.delete_item(session, item_id)
    return MessageResponse(message="Item deleted")
