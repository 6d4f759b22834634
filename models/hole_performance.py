from pydantic import Field
from typing import List

from .base import BaseGolfModel
from .shot import Shot


class HolePerformance(BaseGolfModel):
    """A player's result on one hole of a round.

    Linked to its Hole by number only; resolve with Course.get_hole().
    """
    hole_number: int = Field(..., ge=1, le=18)
    score: int = Field(..., ge=1, le=15)
    shots: List[Shot] = Field(default_factory=list)
