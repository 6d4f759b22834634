"""Structured reply contract for the caddie model.

Every reply must validate as a CaddieReply. The same model generates the JSON
schema handed to Gemini, so the contract sent and the contract checked cannot
drift apart.
"""

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class AudioCue(str, Enum):
    """Which notification sound a reply should trigger."""
    DISCOVERY = "discovery"      # new course note learned
    UPDATE = "update"            # new player tendency learned
    MEMORY = "memory"            # drawing on remembered history
    ACHIEVEMENT = "achievement"  # a good result worth celebrating
    LOG = "log"                  # shot or score recorded
    NONE = "none"


# Fields are strict: "7", 2.0 or true never stand in for an integer.
class _ReplyModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )


class ExtractedData(_ReplyModel):
    """Facts the player explicitly stated in their latest message.

    Every field is independently optional. A populated field means the
    player said it; nothing here is inferred.
    """
    hole_number: Optional[int] = Field(
        None, strict=True, description="The hole number the user is talking about.",
    )
    shot_number: Optional[int] = Field(
        None, strict=True, description="The shot number on the current hole.",
    )
    club: Optional[str] = Field(
        None, strict=True, description="The club used for a shot.",
    )
    outcome: Optional[str] = Field(
        None,
        strict=True,
        description="The outcome of a shot (e.g., 'Fairway', 'Green', 'Bunker').",
    )
    score_on_hole: Optional[int] = Field(
        None, strict=True, description="The final score for a specific hole.",
    )
    course_note: Optional[str] = Field(
        None,
        strict=True,
        description=(
            "A new insight or feature about the current hole learned from the "
            "user's conversation (e.g., 'The green is very fast today', "
            "'The right bunker is a magnet')."
        ),
    )
    player_tendency: Optional[str] = Field(
        None,
        strict=True,
        description=(
            "A new insight about the player's general game, habits, or mental "
            "state (e.g., 'Tends to pull 7-iron left when nervous', "
            "'Confidence is high with the driver today')."
        ),
    )

    @field_validator('club', 'outcome', 'course_note', 'player_tendency')
    @classmethod
    def blank_text_is_not_a_fact(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            return None
        return v

    def is_empty(self) -> bool:
        """True when the reply extracted nothing."""
        return all(value is None for value in self.model_dump().values())

    @property
    def has_shot(self) -> bool:
        return self.club is not None or self.outcome is not None


class CaddieReply(_ReplyModel):
    """A complete caddie reply: what to say, what was learned, what to play."""
    conversational_response: str = Field(
        ...,
        min_length=1,
        strict=True,
        description=(
            "JP's natural, conversational response to the user. It should be "
            "supportive, strategic, and observant, like a real caddie."
        ),
    )
    extracted_data: Optional[ExtractedData] = Field(
        None,
        description=(
            "Structured data extracted from the user's latest message. Only "
            "populate fields if the user explicitly mentions them. Be conservative."
        ),
    )
    audio_cue: Optional[AudioCue] = Field(
        None,
        description=(
            "Suggest an audio cue to play based on the context. Options: "
            "'discovery', 'update', 'memory', 'achievement', 'log', 'none'. "
            "Use 'discovery' for new course notes, 'update' for new player "
            "tendencies, and 'log' for shots/scores."
        ),
    )

    @field_validator('conversational_response')
    @classmethod
    def response_has_text(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("conversationalResponse must not be blank")
        return v

    @property
    def cue(self) -> AudioCue:
        """The audio cue to play, treating a missing cue as none."""
        return self.audio_cue or AudioCue.NONE

    def to_payload(self) -> Dict[str, Any]:
        """Serialize with the camelCase keys used on the wire."""
        return self.model_dump(mode="json", by_alias=True)


RESPONSE_SCHEMA: Dict[str, Any] = CaddieReply.model_json_schema(by_alias=True)


def parse_caddie_reply(text: str) -> CaddieReply:
    """Parse raw model output into a CaddieReply.

    Raises:
        pydantic.ValidationError: If the text is not JSON or does not match
            the reply contract.
    """
    return CaddieReply.model_validate_json(text)
