"""A round in progress: the player talks, the caddie answers and learns.

Each player message is one turn: the caddie is asked once, then whatever the
reply extracted is written into the course, the round and the player profile
before the turn ends. Callers send one message at a time per round.
"""

import logging
from typing import List, Optional

from pydantic import ValidationError

from database.db_manager import GolfDataManager
from database.exceptions import NotFoundError
from llm.caddie import CaddieClient
from llm.schema import CaddieReply, ExtractedData
from models import Course, Hole, MessageSender, Round, Shot
from services.audio import AudioService

logger = logging.getLogger(__name__)


class RoundSession:
    """Drives the caddie conversation for one round."""

    def __init__(
        self,
        manager: GolfDataManager,
        caddie: CaddieClient,
        course_id: str,
        round_obj: Round,
        *,
        audio: Optional[AudioService] = None,
        current_hole: int = 1,
    ):
        self.manager = manager
        self.caddie = caddie
        self.course: Course = manager.require_course(course_id)
        self.round = round_obj
        self.audio = audio or AudioService()
        self.go_to_hole(current_hole)

    @property
    def hole(self) -> Hole:
        hole = self.course.get_hole(self.current_hole)
        if hole is None:
            raise NotFoundError(
                f"Hole {self.current_hole} not found on course {self.course.id}"
            )
        return hole

    def go_to_hole(self, hole_number: int) -> Hole:
        if self.course.get_hole(hole_number) is None:
            raise NotFoundError(f"Hole {hole_number} not found on course {self.course.id}")
        self.current_hole = hole_number
        return self.hole

    def start(self) -> None:
        """Announce the round and store it in the course history."""
        self.audio.start_round()
        self.manager.save_round(self.course.id, self.round)

    def send_message(self, text: str) -> CaddieReply:
        """Send a player message and return the caddie's reply.

        The reply is already applied to the stored data when this returns.
        """
        self.round.add_message(MessageSender.PLAYER, text)
        reply = self.caddie.respond(
            self.course, self.hole, self.round, self.manager.player_profile,
        )
        self.round.add_message(MessageSender.CADDIE, reply.conversational_response)

        if reply.extracted_data is not None:
            applied = self.apply_extracted_data(reply.extracted_data)
            if applied:
                logger.info("Learned from player message: %s", ", ".join(applied))

        self.manager.save_round(self.course.id, self.round)
        self.audio.play(reply.cue)
        return reply

    def apply_extracted_data(self, data: ExtractedData) -> List[str]:
        """Write extracted facts into course, round and profile.

        Facts refer to data.hole_number, or the current hole when unset.
        Returns the names of the facts that were stored.
        """
        applied: List[str] = []

        # Tendencies belong to the player, not to a hole.
        if data.player_tendency is not None:
            if self.manager.add_player_tendency(data.player_tendency):
                applied.append("playerTendency")

        hole_number = data.hole_number or self.current_hole
        if self.course.get_hole(hole_number) is None:
            logger.warning(
                "Ignoring hole facts for hole %s; not on course %s",
                hole_number, self.course.id,
            )
            return applied

        if data.course_note is not None:
            self.manager.add_course_note(self.course.id, hole_number, data.course_note)
            applied.append("courseNote")

        if data.has_shot:
            try:
                self.round.record_shot(Shot(
                    hole_number=hole_number,
                    shot_number=data.shot_number,
                    club=data.club,
                    outcome=data.outcome,
                ))
                applied.append("shot")
            except ValidationError as e:
                logger.warning("Ignoring extracted shot: %s", e.errors()[0]['msg'])

        if data.score_on_hole is not None:
            try:
                self.round.record_score(hole_number, data.score_on_hole)
                applied.append("scoreOnHole")
            except ValidationError as e:
                logger.warning("Ignoring extracted score: %s", e.errors()[0]['msg'])

        return applied
