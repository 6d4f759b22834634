from .base import BaseGolfModel
from .course import Course
from .golf_data import GolfData
from .hole import Hole
from .hole_performance import HolePerformance
from .message import ChatMessage, MessageSender
from .player_profile import PlayerProfile
from .round import Round
from .shot import Shot

__all__ = [
    "BaseGolfModel",
    "ChatMessage",
    "Course",
    "GolfData",
    "Hole",
    "HolePerformance",
    "MessageSender",
    "PlayerProfile",
    "Round",
    "Shot",
]
