"""Results table aggregation.

Joins the items and colleges of a stream (and category) against their
points entries and totals each college.
Domain logic is pure - database operations go through repo.
"""

from __future__ import annotations

from dataclasses import dataclass

from scoreboard.core.errors import ValidationError
from scoreboard.core.streams import resolve_category, validate_stream
from scoreboard.db import repo
from scoreboard.db.repo import DbSession
from scoreboard.models.domain import CollegeEntity, ItemEntity, PointsEntryEntity
from scoreboard.models.types import CollegeResult, ResultsTable

RESULTS_ORDERS: tuple[str, ...] = ("name", "insertion")


@dataclass
class Selection:
    """Items, colleges and entries selected for one results table."""

    items: list[ItemEntity]
    colleges: list[CollegeEntity]
    entries: list[PointsEntryEntity]


def build_results(
    session: DbSession,
    stream: str | None,
    category: str | None = None,
    order: str = "name",
) -> ResultsTable:
    """Build the results table for a stream and optional category.

    Args:
        session: Database session.
        stream: Stream to report on.
        category: Category, required for categorized streams and ignored
            for the others.
        order: "name" sorts items and colleges by name, "insertion" keeps
            the order they were created in.

    Returns:
        ResultsTable with per-college points and totals.

    Raises:
        ValidationError: If the stream, category or order is invalid.
    """
    stream = validate_stream(stream)
    category = resolve_category(stream, category, required=False)
    if order not in RESULTS_ORDERS:
        raise ValidationError(
            f"Invalid order: {order!r} (expected one of {', '.join(RESULTS_ORDERS)})"
        )

    items = repo.list_items(session, stream=stream, category=category)
    colleges = repo.list_colleges(session, stream=stream)
    entries = repo.get_points_for(
        session,
        [c.college_id for c in colleges],
        [i.item_id for i in items],
    )

    selection = Selection(items=items, colleges=colleges, entries=entries)
    if order == "name":
        selection = _sort_by_name(selection)

    return tabulate(stream, category, selection)


def tabulate(stream: str, category: str | None, selection: Selection) -> ResultsTable:
    """Compute the results table from a selection.

    Pure function - no database access. Items and colleges keep the
    selection's order; entries outside the selection are ignored.

    Args:
        stream: Stream being reported.
        category: Category being reported, or None.
        selection: Selected items, colleges and their entries.

    Returns:
        ResultsTable with totals and competition ranks.
    """
    item_names = {item.item_id: item.name for item in selection.items}

    # Group entries by college for efficient lookup
    entries_by_college: dict[str, list[PointsEntryEntity]] = {}
    for entry in selection.entries:
        if entry.item_id not in item_names:
            continue
        entries_by_college.setdefault(entry.college_id, []).append(entry)

    totals: dict[str, int] = {}
    points_maps: dict[str, dict[str, int]] = {}
    for college in selection.colleges:
        college_entries = entries_by_college.get(college.college_id, [])
        points_maps[college.college_id] = {
            item_names[e.item_id]: e.points for e in college_entries
        }
        totals[college.college_id] = sum(e.points for e in college_entries)

    ranks = rank_totals(totals)

    rows = [
        CollegeResult(
            college_id=college.college_id,
            name=college.name,
            points=points_maps[college.college_id],
            total=totals[college.college_id],
            rank=ranks[college.college_id],
        )
        for college in selection.colleges
    ]

    return ResultsTable(
        stream=stream,
        category=category,
        items=[item.name for item in selection.items],
        colleges=rows,
        empty=not selection.items or not selection.colleges,
    )


def rank_totals(totals: dict[str, int]) -> dict[str, int]:
    """Assign standard competition ranks (1, 2, 2, 4) by descending total."""
    ranks: dict[str, int] = {}
    ordered = sorted(totals.values(), reverse=True)
    for key, total in totals.items():
        ranks[key] = ordered.index(total) + 1
    return ranks


def _sort_by_name(selection: Selection) -> Selection:
    """Sort items and colleges by case-folded name.

    sorted() is stable, so equal names keep insertion order.
    """
    return Selection(
        items=sorted(selection.items, key=lambda i: i.name.casefold()),
        colleges=sorted(selection.colleges, key=lambda c: c.name.casefold()),
        entries=selection.entries,
    )
