"""Stats API endpoints."""

from fastapi import APIRouter, Depends, HTTPException

from analytics.stats import hole_history, hole_scoring_summary, scoring_by_par
from database.db_manager import GolfDataManager
from api.dependencies import get_db

router = APIRouter()


@router.get("/courses/{course_id}")
async def get_course_stats(course_id: str, db: GolfDataManager = Depends(get_db)):
    course = db.get_course(course_id)
    if not course:
        raise HTTPException(404, "Course not found")
    return {
        "holes": hole_scoring_summary(course),
        "byPar": scoring_by_par(course),
    }


@router.get("/courses/{course_id}/holes/{hole_number}")
async def get_hole_history(course_id: str, hole_number: int, db: GolfDataManager = Depends(get_db)):
    course = db.get_course(course_id)
    if not course or course.get_hole(hole_number) is None:
        raise HTTPException(404, "Hole not found")
    history = hole_history(course, hole_number)
    return {
        "roundsPlayed": history.rounds_played,
        "averageScore": history.average_score,
        "summary": history.describe(),
    }
