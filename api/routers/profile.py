"""Player profile API endpoints."""

from fastapi import APIRouter, Depends

from database.db_manager import GolfDataManager
from api.dependencies import get_db
from api.schemas import TendencyRequest, TendencyResponse
from models import PlayerProfile

router = APIRouter()


@router.get("", response_model=PlayerProfile)
async def get_profile(db: GolfDataManager = Depends(get_db)):
    return db.player_profile


@router.post("/tendencies", response_model=TendencyResponse)
async def add_tendency(req: TendencyRequest, db: GolfDataManager = Depends(get_db)):
    added = db.add_player_tendency(req.tendency)
    return TendencyResponse(added=added, tendencies=list(db.player_profile.tendencies))
