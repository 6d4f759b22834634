from pydantic import Field
from typing import Optional

from .base import BaseGolfModel


class Shot(BaseGolfModel):
    """A single logged shot, e.g. '7-Iron' into the 'Bunker'."""
    hole_number: int = Field(..., ge=1, le=18)
    shot_number: Optional[int] = Field(None, ge=1, le=15)
    club: Optional[str] = None
    outcome: Optional[str] = None
