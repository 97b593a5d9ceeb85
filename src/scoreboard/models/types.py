"""Pydantic models for the scoreboard API.

Field names follow the wire format of the existing client:
point entries use collegeId/itemId, everything else is a single word.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from scoreboard.models.domain import (
    CollegeEntity,
    ItemEntity,
    PointsEntryEntity,
    ResolvedPointsEntry,
)


class ItemCreate(BaseModel):
    """Competition item submission."""

    name: str
    stream: str
    category: str | None = None


class ItemDetail(BaseModel):
    """Competition item for API response."""

    id: str
    name: str
    stream: str
    category: str | None

    @classmethod
    def from_entity(cls, item: ItemEntity) -> ItemDetail:
        return cls(id=item.item_id, name=item.name, stream=item.stream, category=item.category)


class CollegeCreate(BaseModel):
    """College submission."""

    name: str
    stream: str


class CollegeDetail(BaseModel):
    """College for API response."""

    id: str
    name: str
    stream: str

    @classmethod
    def from_entity(cls, college: CollegeEntity) -> CollegeDetail:
        return cls(id=college.college_id, name=college.name, stream=college.stream)


class PointsSubmission(BaseModel):
    """One score in a points batch."""

    model_config = ConfigDict(populate_by_name=True)

    college_id: str = Field(alias="collegeId")
    item_id: str = Field(alias="itemId")
    points: int


class PointsEntryDetail(BaseModel):
    """Saved points entry for API response."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    college_id: str = Field(alias="collegeId")
    item_id: str = Field(alias="itemId")
    points: int

    @classmethod
    def from_entity(cls, entry: PointsEntryEntity) -> PointsEntryDetail:
        return cls(
            id=entry.entry_id,
            college_id=entry.college_id,
            item_id=entry.item_id,
            points=entry.points,
        )


class ResolvedPointsEntryDetail(PointsEntryDetail):
    """Points entry with college and item expanded."""

    college: CollegeDetail
    item: ItemDetail

    @classmethod
    def from_resolved(cls, resolved: ResolvedPointsEntry) -> ResolvedPointsEntryDetail:
        return cls(
            id=resolved.entry.entry_id,
            college_id=resolved.entry.college_id,
            item_id=resolved.entry.item_id,
            points=resolved.entry.points,
            college=CollegeDetail.from_entity(resolved.college),
            item=ItemDetail.from_entity(resolved.item),
        )


class CollegeResult(BaseModel):
    """One row of the results table."""

    model_config = ConfigDict(populate_by_name=True)

    college_id: str = Field(alias="collegeId")
    name: str
    points: dict[str, int]  # item name -> points
    total: int
    rank: int


class ResultsTable(BaseModel):
    """Aggregated results for a stream (and category)."""

    stream: str
    category: str | None
    items: list[str]
    colleges: list[CollegeResult]
    empty: bool  # no items or no colleges selected


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    message: str


class ClearResponse(BaseModel):
    """Acknowledgement of a clear-all with per-kind counts."""

    message: str
    deleted: dict[str, int]


class StreamCatalog(BaseModel):
    """Stream and category enumerations."""

    streams: list[str]
    categorized_streams: list[str]
    categories: list[str]
