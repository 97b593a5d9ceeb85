"""Tests for stream and category rules."""

import pytest

from scoreboard.core.errors import ValidationError
from scoreboard.core.streams import (
    CATEGORIES,
    CATEGORIZED_STREAMS,
    STREAMS,
    describe_streams,
    is_categorized,
    resolve_category,
    validate_name,
    validate_stream,
)


class TestValidateStream:
    """Test validate_stream."""

    @pytest.mark.parametrize("stream", STREAMS)
    def test_accepts_every_stream(self, stream):
        """Every enumerated stream is valid."""
        assert validate_stream(stream) == stream

    def test_strips_whitespace(self):
        """Surrounding whitespace is ignored."""
        assert validate_stream("  Life ") == "Life"

    @pytest.mark.parametrize("stream", [None, "", "   "])
    def test_rejects_missing(self, stream):
        """Missing stream is a validation error."""
        with pytest.raises(ValidationError, match="stream is required"):
            validate_stream(stream)

    def test_rejects_unknown(self):
        """Unknown stream is a validation error."""
        with pytest.raises(ValidationError, match="Invalid stream"):
            validate_stream("Science")

    def test_is_case_sensitive(self):
        """Stream names must match exactly."""
        with pytest.raises(ValidationError):
            validate_stream("life")


class TestResolveCategory:
    """Test resolve_category."""

    @pytest.mark.parametrize("stream", CATEGORIZED_STREAMS)
    @pytest.mark.parametrize("category", CATEGORIES)
    def test_accepts_category_on_categorized_stream(self, stream, category):
        """Categorized streams accept every category."""
        assert resolve_category(stream, category, required=True) == category
        assert resolve_category(stream, category, required=False) == category

    @pytest.mark.parametrize("required", [True, False])
    def test_categorized_stream_needs_category(self, required):
        """A categorized stream without a category is rejected."""
        with pytest.raises(ValidationError, match="category is required"):
            resolve_category("Shareea", None, required=required)

    def test_blank_category_counts_as_missing(self):
        """Blank category is treated as absent."""
        with pytest.raises(ValidationError, match="category is required"):
            resolve_category("SHE", "  ", required=True)

    def test_rejects_unknown_category(self):
        """Unknown category is rejected."""
        with pytest.raises(ValidationError, match="Invalid category"):
            resolve_category("SHE", "Diploma", required=False)

    def test_uncategorized_stream_without_category(self):
        """Uncategorized streams resolve to no category."""
        assert resolve_category("Life", None, required=True) is None
        assert resolve_category("Life", "", required=True) is None

    def test_uncategorized_stream_rejects_category_when_required(self):
        """Creating an item with a stray category is rejected."""
        with pytest.raises(ValidationError, match="does not take a category"):
            resolve_category("Shareea Plus", "PG", required=True)

    def test_uncategorized_stream_ignores_category_otherwise(self):
        """Queries ignore a stray category."""
        assert resolve_category("SHE Plus", "PG", required=False) is None


class TestHelpers:
    """Test name validation and stream description."""

    def test_validate_name_strips(self):
        assert validate_name("  Quiz  ", "Item") == "Quiz"

    def test_validate_name_rejects_blank(self):
        with pytest.raises(ValidationError, match="Item name is required"):
            validate_name("   ", "Item")

    def test_is_categorized(self):
        assert is_categorized("Shareea")
        assert is_categorized("SHE")
        assert not is_categorized("Shareea Plus")

    def test_describe_streams(self):
        data = describe_streams()
        assert data["streams"] == list(STREAMS)
        assert data["categorized_streams"] == ["Shareea", "SHE"]
        assert data["categories"] == ["Sanaviyya", "Bakalooriyya", "PG"]
