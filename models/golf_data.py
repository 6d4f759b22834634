from pydantic import Field
from typing import List

from .base import BaseGolfModel
from .course import Course
from .player_profile import PlayerProfile


class GolfData(BaseGolfModel):
    """Everything the app persists: all courses plus the player profile."""
    courses: List[Course] = Field(default_factory=list)
    player_profile: PlayerProfile = Field(default_factory=PlayerProfile)
