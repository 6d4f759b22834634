from pydantic import Field
from typing import List

from .base import BaseGolfModel


class PlayerProfile(BaseGolfModel):
    """Player-level tendencies learned across all courses."""
    tendencies: List[str] = Field(default_factory=list)

    def add_tendency(self, tendency: str) -> bool:
        """Append a tendency unless the exact text is already known.

        Returns True if the tendency was added.
        """
        if tendency in self.tendencies:
            return False
        self.tendencies.append(tendency)
        return True
