"""API-specific request and response models."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import List, Optional

from models import Round


class ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CourseSummaryResponse(ApiModel):
    """Course for card/list views."""
    id: str
    name: str
    par: Optional[int] = None
    total_holes: int = 0
    rounds_played: int = 0


class HoleInput(ApiModel):
    hole_number: int
    par: int
    yardage: int
    notes: List[str] = Field(default_factory=list)


class CreateCourseRequest(ApiModel):
    id: Optional[str] = None
    name: str
    holes: List[HoleInput] = Field(default_factory=list)


class NoteRequest(ApiModel):
    note: str = Field(..., min_length=1)


class TendencyRequest(ApiModel):
    tendency: str = Field(..., min_length=1)


class TendencyResponse(ApiModel):
    added: bool
    tendencies: List[str]


class RoundSummaryResponse(ApiModel):
    """Lightweight round for list views."""
    course_id: str
    date: str
    conditions: str = ""
    holes_played: int = 0
    total_score: Optional[int] = None
    to_par: Optional[int] = None
    messages: int = 0


class CaddieRequest(ApiModel):
    """One caddie turn: the round so far, ending with the player's message."""
    course_id: str
    hole_number: int
    round: Round
