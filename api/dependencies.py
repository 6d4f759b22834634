from fastapi import Request

from database.db_manager import GolfDataManager
from llm.caddie import CaddieClient


def get_db(request: Request) -> GolfDataManager:
    """FastAPI dependency that provides the GolfDataManager."""
    return request.app.state.db_manager


def get_caddie(request: Request) -> CaddieClient:
    """FastAPI dependency that provides the CaddieClient."""
    return request.app.state.caddie
