from datetime import datetime
from pydantic import Field, field_validator
from typing import List, Optional
from uuid import uuid4

from .base import BaseGolfModel
from .hole import Hole
from .round import Round


def _new_course_id() -> str:
    return uuid4().hex


class Course(BaseGolfModel):
    """Golf course with its holes and the rounds played on it."""
    id: str = Field(default_factory=_new_course_id)
    name: str
    holes: List[Hole] = Field(default_factory=list)
    round_history: List[Round] = Field(default_factory=list)

    @field_validator('holes')
    @classmethod
    def validate_unique_hole_numbers(cls, v):
        seen = set()
        for hole in v:
            if hole.hole_number in seen:
                raise ValueError(f"Hole number {hole.hole_number} appears more than once")
            seen.add(hole.hole_number)
        return v

    def get_hole(self, hole_number: int) -> Optional[Hole]:
        """Get a hole by its number."""
        for hole in self.holes:
            if hole.hole_number == hole_number:
                return hole
        return None

    def get_round(self, date: datetime) -> Optional[Round]:
        """Get the round saved under the given date."""
        for round_obj in self.round_history:
            if round_obj.date == date:
                return round_obj
        return None

    def upsert_round(self, round_obj: Round) -> bool:
        """Replace the round with the same date, or append it.

        Returns True if an existing round was replaced.
        """
        for i, existing in enumerate(self.round_history):
            if existing.date == round_obj.date:
                self.round_history[i] = round_obj
                return True
        self.round_history.append(round_obj)
        return False

    def get_par(self) -> Optional[int]:
        """Total par of the holes on record."""
        if not self.holes:
            return None
        return sum(h.par for h in self.holes)
