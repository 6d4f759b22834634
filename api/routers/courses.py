"""Course API endpoints."""

from fastapi import APIRouter, Depends, HTTPException
from pydantic import ValidationError
from typing import List

from database.db_manager import GolfDataManager
from database.exceptions import DuplicateError, NotFoundError
from api.dependencies import get_db
from api.schemas import CourseSummaryResponse, CreateCourseRequest, NoteRequest
from models import Course, Hole

router = APIRouter()


def _summarize_course(c: Course) -> CourseSummaryResponse:
    return CourseSummaryResponse(
        id=c.id,
        name=c.name,
        par=c.get_par(),
        total_holes=len(c.holes),
        rounds_played=len(c.round_history),
    )


@router.get("", response_model=List[CourseSummaryResponse])
async def list_courses(db: GolfDataManager = Depends(get_db)):
    return [_summarize_course(c) for c in db.list_courses()]


@router.get("/{course_id}", response_model=Course)
async def get_course(course_id: str, db: GolfDataManager = Depends(get_db)):
    course = db.get_course(course_id)
    if not course:
        raise HTTPException(404, "Course not found")
    return course


@router.post("", status_code=201, response_model=Course)
async def create_course(req: CreateCourseRequest, db: GolfDataManager = Depends(get_db)):
    try:
        holes = [
            Hole(hole_number=h.hole_number, par=h.par, yardage=h.yardage, notes=h.notes)
            for h in req.holes
        ]
        fields = {"name": req.name, "holes": holes}
        if req.id:
            fields["id"] = req.id
        course = Course(**fields)
    except ValidationError as e:
        raise HTTPException(422, e.errors()[0]['msg'])

    try:
        return db.add_course(course)
    except DuplicateError as e:
        raise HTTPException(409, str(e))


@router.post("/{course_id}/holes/{hole_number}/notes", response_model=Hole)
async def add_course_note(
    course_id: str,
    hole_number: int,
    req: NoteRequest,
    db: GolfDataManager = Depends(get_db),
):
    try:
        return db.add_course_note(course_id, hole_number, req.note)
    except NotFoundError as e:
        raise HTTPException(404, str(e))
