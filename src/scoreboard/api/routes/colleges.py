"""Colleges API endpoint.

GET /api/colleges - List colleges
GET /api/colleges/stream/{stream} - List colleges of a stream
GET /api/colleges/{college_id} - Get one college
POST /api/colleges - Create college
DELETE /api/colleges/{college_id} - Delete college and its points
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from scoreboard.admin import colleges as college_admin
from scoreboard.admin.colleges import CollegeInput
from scoreboard.api.app import get_db_session
from scoreboard.db.repo import DbSession
from scoreboard.models.types import CollegeCreate, CollegeDetail, MessageResponse

router = APIRouter()


@router.get("/colleges", response_model=list[CollegeDetail])
def list_colleges(session: DbSession = Depends(get_db_session)) -> list[CollegeDetail]:
    """List all colleges in creation order."""
    return [CollegeDetail.from_entity(c) for c in college_admin.list_colleges(session)]


@router.get("/colleges/stream/{stream}", response_model=list[CollegeDetail])
def list_colleges_for_stream(
    stream: str,
    session: DbSession = Depends(get_db_session),
) -> list[CollegeDetail]:
    """List colleges competing in one stream.

    Raises:
        ValidationError: 400 if the stream is unknown.
    """
    colleges = college_admin.list_colleges(session, stream=stream)
    return [CollegeDetail.from_entity(c) for c in colleges]


@router.get("/colleges/{college_id}", response_model=CollegeDetail)
def get_college(
    college_id: str,
    session: DbSession = Depends(get_db_session),
) -> CollegeDetail:
    """Get a single college."""
    return CollegeDetail.from_entity(college_admin.get_college(session, college_id))


@router.post("/colleges", response_model=CollegeDetail, status_code=201)
def create_college(
    college: CollegeCreate,
    session: DbSession = Depends(get_db_session),
) -> CollegeDetail:
    """Create a college.

    Raises:
        ValidationError: 400 on missing name or invalid stream.
    """
    created = college_admin.create_college(
        session, CollegeInput(name=college.name, stream=college.stream)
    )
    return CollegeDetail.from_entity(created)


@router.delete("/colleges/{college_id}", response_model=MessageResponse)
def delete_college(
    college_id: str,
    session: DbSession = Depends(get_db_session),
) -> MessageResponse:
    """Delete a college along with its points entries.

    Raises:
        NotFoundError: 404 if college not found.
    """
    college_admin.delete_college(session, college_id)
    return MessageResponse(message="College deleted")
