"""Round API endpoints."""

from fastapi import APIRouter, Depends, HTTPException
from typing import List

from analytics.stats import round_summary
from database.db_manager import GolfDataManager
from database.exceptions import IntegrityError, NotFoundError
from api.dependencies import get_db
from api.schemas import RoundSummaryResponse
from models import Course, Round

router = APIRouter()


def summarize_round(r: Round, course: Course) -> RoundSummaryResponse:
    summary = round_summary(r, course)
    total = summary["total_score"]
    to_par = summary["to_par"]
    return RoundSummaryResponse(
        course_id=r.course_id,
        date=r.date.isoformat(),
        conditions=r.conditions,
        holes_played=r.holes_played(),
        total_score=int(total) if total is not None else None,
        to_par=int(to_par) if to_par is not None else None,
        messages=len(r.conversation),
    )


@router.get("/{course_id}/rounds", response_model=List[RoundSummaryResponse])
async def list_rounds(course_id: str, db: GolfDataManager = Depends(get_db)):
    course = db.get_course(course_id)
    if not course:
        raise HTTPException(404, "Course not found")
    return [summarize_round(r, course) for r in course.round_history]


@router.put("/{course_id}/rounds", response_model=RoundSummaryResponse)
async def save_round(course_id: str, round_obj: Round, db: GolfDataManager = Depends(get_db)):
    """Save a round. A round with the same date replaces the stored one."""
    try:
        course = db.save_round(course_id, round_obj)
    except NotFoundError as e:
        raise HTTPException(404, str(e))
    except IntegrityError as e:
        raise HTTPException(400, str(e))
    return summarize_round(round_obj, course)
