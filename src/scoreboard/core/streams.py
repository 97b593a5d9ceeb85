"""Stream and category rules.

Streams group colleges and items. Only the categorized streams
split their items further into categories:
- Shareea, SHE: category required (Sanaviyya, Bakalooriyya, PG)
- Shareea Plus, Life, SHE Plus: no category
"""

from __future__ import annotations

from scoreboard.core.errors import ValidationError

STREAMS: tuple[str, ...] = ("Shareea", "Shareea Plus", "Life", "SHE", "SHE Plus")

CATEGORIZED_STREAMS: tuple[str, ...] = ("Shareea", "SHE")

CATEGORIES: tuple[str, ...] = ("Sanaviyya", "Bakalooriyya", "PG")


def _clean(value: str | None) -> str | None:
    """Strip whitespace, mapping blank values to None."""
    if value is None:
        return None
    value = value.strip()
    return value or None


def is_categorized(stream: str) -> bool:
    """Return True when items of this stream carry a category."""
    return stream in CATEGORIZED_STREAMS


def validate_stream(stream: str | None) -> str:
    """Validate a stream name.

    Args:
        stream: Stream name as received from the caller.

    Returns:
        The stream name, stripped.

    Raises:
        ValidationError: If the stream is missing or unknown.
    """
    cleaned = _clean(stream)
    if cleaned is None:
        raise ValidationError("stream is required")
    if cleaned not in STREAMS:
        raise ValidationError(f"Invalid stream: {cleaned!r} (expected one of {', '.join(STREAMS)})")
    return cleaned


def resolve_category(stream: str, category: str | None, *, required: bool) -> str | None:
    """Resolve the category that applies to a stream.

    With required=True (item creation) a categorized stream must name a
    category and an uncategorized stream must not. With required=False
    (results queries) a category is still needed for categorized streams
    but is ignored for the others.

    Args:
        stream: A validated stream name.
        category: Category as received, possibly blank.
        required: Whether a stray category is an error.

    Returns:
        The category, or None when the stream has none.

    Raises:
        ValidationError: On a missing, unknown or misplaced category.
    """
    cleaned = _clean(category)

    if not is_categorized(stream):
        if cleaned is not None and required:
            raise ValidationError(f"Stream {stream!r} does not take a category")
        return None

    if cleaned is None:
        raise ValidationError(f"category is required for stream {stream!r}")
    if cleaned not in CATEGORIES:
        raise ValidationError(
            f"Invalid category: {cleaned!r} (expected one of {', '.join(CATEGORIES)})"
        )
    return cleaned


def validate_name(name: str | None, kind: str) -> str:
    """Validate a display name, returning it stripped."""
    cleaned = _clean(name)
    if cleaned is None:
        raise ValidationError(f"{kind} name is required")
    return cleaned


def describe_streams() -> dict[str, object]:
    """Describe the stream and category enumerations for clients."""
    return {
        "streams": list(STREAMS),
        "categorized_streams": list(CATEGORIZED_STREAMS),
        "categories": list(CATEGORIES),
    }
