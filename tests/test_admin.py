"""Tests for admin operations."""

import pytest

from scoreboard.admin.colleges import (
    CollegeInput,
    create_college,
    delete_college,
    get_college,
    list_colleges,
)
from scoreboard.admin.items import ItemInput, create_item, delete_item, get_item, list_items
from scoreboard.admin.points import PointsInput, list_points, save_points
from scoreboard.admin.reset import clear_all
from scoreboard.core.errors import NotFoundError, ValidationError


def setup_stream(session, stream="Shareea", category="PG"):
    """Create one college and two items in a stream. Returns (college, item_a, item_b)."""
    college = create_college(session, CollegeInput(name="Darul Huda", stream=stream))
    item_a = create_item(session, ItemInput(name="Qiraath", stream=stream, category=category))
    item_b = create_item(session, ItemInput(name="Essay", stream=stream, category=category))
    return college, item_a, item_b


def points_by_pair(session):
    return {(p.college.name, p.item.name): p.entry.points for p in list_points(session)}


class TestItemAdmin:
    """Item creation, lookup and deletion."""

    def test_create_assigns_id(self, session):
        item = create_item(session, ItemInput(name=" Qiraath ", stream="SHE", category="PG"))

        assert item.item_id
        assert item.name == "Qiraath"
        assert get_item(session, item.item_id).name == "Qiraath"

    def test_create_without_category_on_plain_stream(self, session):
        item = create_item(session, ItemInput(name="Quiz", stream="Life"))
        assert item.category is None

    @pytest.mark.parametrize(
        "item_input",
        [
            ItemInput(name="", stream="Life"),
            ItemInput(name="Quiz", stream=None),
            ItemInput(name="Quiz", stream="Arts"),
            ItemInput(name="Quiz", stream="Shareea"),
            ItemInput(name="Quiz", stream="Shareea", category="Diploma"),
            ItemInput(name="Quiz", stream="Life", category="PG"),
        ],
    )
    def test_create_rejects_invalid(self, session, item_input):
        with pytest.raises(ValidationError):
            create_item(session, item_input)
        assert list_items(session) == []

    def test_create_rejects_duplicate_name_in_same_category(self, session):
        create_item(session, ItemInput(name="Quiz", stream="SHE", category="PG"))
        with pytest.raises(ValidationError, match="already exists"):
            create_item(session, ItemInput(name="quiz", stream="SHE", category="PG"))

    def test_same_name_allowed_in_other_category(self, session):
        create_item(session, ItemInput(name="Quiz", stream="SHE", category="PG"))
        create_item(session, ItemInput(name="Quiz", stream="SHE", category="Sanaviyya"))
        assert len(list_items(session, stream="SHE")) == 2

    def test_list_category_filter_needs_stream(self, session):
        with pytest.raises(ValidationError):
            list_items(session, category="PG")

    def test_get_missing_raises(self, session):
        with pytest.raises(NotFoundError):
            get_item(session, "missing")

    def test_delete_missing_raises(self, session):
        with pytest.raises(NotFoundError):
            delete_item(session, "missing")

    def test_delete_cascades_points(self, session):
        college, item_a, item_b = setup_stream(session)
        save_points(
            session,
            [
                PointsInput(college.college_id, item_a.item_id, 5),
                PointsInput(college.college_id, item_b.item_id, 3),
            ],
        )

        removed = delete_item(session, item_a.item_id)

        assert removed == 1
        assert points_by_pair(session) == {("Darul Huda", "Essay"): 3}


class TestCollegeAdmin:
    """College creation, lookup and deletion."""

    def test_create_and_list_by_stream(self, session):
        create_college(session, CollegeInput(name="Darul Huda", stream="Life"))
        create_college(session, CollegeInput(name="Markaz", stream="SHE"))

        assert [c.name for c in list_colleges(session, stream="Life")] == ["Darul Huda"]
        assert len(list_colleges(session)) == 2

    def test_list_rejects_unknown_stream(self, session):
        with pytest.raises(ValidationError):
            list_colleges(session, stream="Arts")

    def test_create_rejects_duplicate_in_stream(self, session):
        create_college(session, CollegeInput(name="Darul Huda", stream="Life"))
        with pytest.raises(ValidationError, match="already exists"):
            create_college(session, CollegeInput(name="Darul Huda", stream="Life"))

    def test_same_name_allowed_in_other_stream(self, session):
        create_college(session, CollegeInput(name="Darul Huda", stream="Life"))
        create_college(session, CollegeInput(name="Darul Huda", stream="SHE"))
        assert len(list_colleges(session)) == 2

    def test_create_rejects_missing_name(self, session):
        with pytest.raises(ValidationError):
            create_college(session, CollegeInput(name=None, stream="Life"))

    def test_delete_cascades_points(self, session):
        college, item_a, _ = setup_stream(session)
        save_points(session, [PointsInput(college.college_id, item_a.item_id, 5)])

        delete_college(session, college.college_id)

        assert list_points(session) == []
        with pytest.raises(NotFoundError):
            get_college(session, college.college_id)

    def test_delete_missing_raises(self, session):
        with pytest.raises(NotFoundError):
            delete_college(session, "missing")


class TestSavePoints:
    """Batch points save."""

    def test_saves_new_entries(self, session):
        college, item_a, item_b = setup_stream(session)

        saved = save_points(
            session,
            [
                PointsInput(college.college_id, item_a.item_id, 5),
                PointsInput(college.college_id, item_b.item_id, 0),
            ],
        )

        assert [e.points for e in saved] == [5, 0]
        assert points_by_pair(session) == {
            ("Darul Huda", "Qiraath"): 5,
            ("Darul Huda", "Essay"): 0,
        }

    def test_saving_twice_keeps_one_entry(self, session):
        college, item_a, _ = setup_stream(session)

        first = save_points(session, [PointsInput(college.college_id, item_a.item_id, 5)])
        second = save_points(session, [PointsInput(college.college_id, item_a.item_id, 8)])

        assert first[0].entry_id == second[0].entry_id
        assert len(list_points(session)) == 1
        assert points_by_pair(session) == {("Darul Huda", "Qiraath"): 8}

    def test_last_duplicate_in_batch_wins(self, session):
        college, item_a, _ = setup_stream(session)

        saved = save_points(
            session,
            [
                PointsInput(college.college_id, item_a.item_id, 1),
                PointsInput(college.college_id, item_a.item_id, 9),
            ],
        )

        assert len(saved) == 1
        assert points_by_pair(session) == {("Darul Huda", "Qiraath"): 9}

    def test_empty_batch_rejected(self, session):
        with pytest.raises(ValidationError):
            save_points(session, [])

    def test_negative_points_saved(self, session):
        """A penalty is stored as negative points."""
        college, item_a, _ = setup_stream(session)

        saved = save_points(session, [PointsInput(college.college_id, item_a.item_id, -1)])

        assert saved[0].points == -1
        assert points_by_pair(session) == {("Darul Huda", "Qiraath"): -1}

    def test_non_integer_points_rejected(self, session):
        college, item_a, _ = setup_stream(session)
        with pytest.raises(ValidationError, match="integer"):
            save_points(session, [PointsInput(college.college_id, item_a.item_id, 2.5)])

    def test_unknown_college_rejected(self, session):
        _, item_a, _ = setup_stream(session)
        with pytest.raises(NotFoundError, match="College"):
            save_points(session, [PointsInput("missing", item_a.item_id, 1)])

    def test_unknown_item_rejected(self, session):
        college, _, _ = setup_stream(session)
        with pytest.raises(NotFoundError, match="Item"):
            save_points(session, [PointsInput(college.college_id, "missing", 1)])

    def test_cross_stream_pair_rejected(self, session):
        college, _, _ = setup_stream(session, stream="Shareea")
        other = create_item(session, ItemInput(name="Quiz", stream="Life"))

        with pytest.raises(ValidationError, match="cannot score"):
            save_points(session, [PointsInput(college.college_id, other.item_id, 1)])

    def test_rejected_batch_leaves_points_unchanged(self, session):
        college, item_a, item_b = setup_stream(session)
        save_points(session, [PointsInput(college.college_id, item_a.item_id, 5)])

        with pytest.raises(NotFoundError):
            save_points(
                session,
                [
                    PointsInput(college.college_id, item_a.item_id, 9),
                    PointsInput(college.college_id, item_b.item_id, 2),
                    PointsInput(college.college_id, "missing", 1),
                ],
            )

        assert points_by_pair(session) == {("Darul Huda", "Qiraath"): 5}


class TestClearAll:
    """clear_all removes everything."""

    def test_clears_every_kind(self, session):
        college, item_a, _ = setup_stream(session)
        save_points(session, [PointsInput(college.college_id, item_a.item_id, 5)])

        deleted = clear_all(session)

        assert deleted == {"items": 2, "colleges": 1, "points": 1}
        assert list_items(session) == []
        assert list_colleges(session) == []
        assert list_points(session) == []

    def test_clearing_empty_store(self, session):
        assert clear_all(session) == {"items": 0, "colleges": 0, "points": 0}
