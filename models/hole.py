from pydantic import Field
from typing import List

from .base import BaseGolfModel


class Hole(BaseGolfModel):
    """Represents a single hole on a golf course."""
    hole_number: int = Field(..., ge=1, le=18)
    par: int = Field(..., ge=3, le=6)
    yardage: int = Field(..., ge=0, le=700)
    notes: List[str] = Field(default_factory=list)  # append-only caddie notes

    def add_note(self, note: str) -> None:
        """Append a note. Notes are never deduplicated or edited."""
        self.notes.append(note)
