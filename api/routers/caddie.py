"""Caddie conversation endpoint."""

import asyncio

from fastapi import APIRouter, Depends, HTTPException

from database.db_manager import GolfDataManager
from api.dependencies import get_caddie, get_db
from api.schemas import CaddieRequest
from llm.caddie import CaddieClient
from llm.schema import CaddieReply

router = APIRouter()


@router.post("/respond", response_model=CaddieReply)
async def respond(
    req: CaddieRequest,
    db: GolfDataManager = Depends(get_db),
    caddie: CaddieClient = Depends(get_caddie),
):
    """Get the caddie's reply to the latest message in the round.

    Always answers with a reply; backend failures come back as the fallback reply.
    """
    course = db.get_course(req.course_id)
    if not course:
        raise HTTPException(404, "Course not found")
    hole = course.get_hole(req.hole_number)
    if not hole:
        raise HTTPException(404, "Hole not found")
    if req.round.course_id != course.id:
        raise HTTPException(400, "Round belongs to a different course")

    # Run the blocking Gemini call in the thread pool
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(
        None,
        lambda: caddie.respond(course, hole, req.round, db.player_profile),
    )
