from datetime import datetime
from pydantic import Field
from typing import List, Optional

from .base import BaseGolfModel
from .hole_performance import HolePerformance
from .message import ChatMessage, MessageSender
from .shot import Shot


class Round(BaseGolfModel):
    """A round of golf played on one course.

    The date is the round's key inside its course's history: saving a round
    whose date matches an existing entry replaces that entry.
    """
    course_id: str
    date: datetime
    conditions: str = ""
    conversation: List[ChatMessage] = Field(default_factory=list)
    hole_by_hole: List[HolePerformance] = Field(default_factory=list)
    shots: List[Shot] = Field(default_factory=list)

    def add_message(self, sender: MessageSender, text: str) -> ChatMessage:
        """Append a line to the transcript."""
        message = ChatMessage(sender=sender, text=text)
        self.conversation.append(message)
        return message

    def get_hole_performance(self, hole_number: int) -> Optional[HolePerformance]:
        """Get the recorded result for a hole, if any."""
        for performance in self.hole_by_hole:
            if performance.hole_number == hole_number:
                return performance
        return None

    def get_shots(self, hole_number: int) -> List[Shot]:
        """Get the shots logged on a hole, in the order they were logged."""
        return [s for s in self.shots if s.hole_number == hole_number]

    def record_shot(self, shot: Shot) -> Shot:
        """Log a shot. Fills in the shot number from the hole's shot count if missing."""
        if shot.shot_number is None:
            shot.shot_number = min(len(self.get_shots(shot.hole_number)) + 1, 15)
        self.shots.append(shot)
        performance = self.get_hole_performance(shot.hole_number)
        if performance is not None:
            performance.shots.append(shot.model_copy())
        return shot

    def record_score(self, hole_number: int, score: int) -> HolePerformance:
        """Record the final score on a hole, replacing any earlier score for it."""
        performance = HolePerformance(
            hole_number=hole_number,
            score=score,
            shots=[s.model_copy() for s in self.get_shots(hole_number)],
        )
        for i, existing in enumerate(self.hole_by_hole):
            if existing.hole_number == hole_number:
                self.hole_by_hole[i] = performance
                return performance
        self.hole_by_hole.append(performance)
        return performance

    def calculate_total_score(self) -> Optional[int]:
        """Calculate total strokes for the holes recorded so far."""
        scores = [p.score for p in self.hole_by_hole]
        return sum(scores) if scores else None

    def holes_played(self) -> int:
        return len(self.hole_by_hole)
