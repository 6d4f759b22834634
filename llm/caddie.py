import logging
import os
from typing import List, Optional

from dotenv import load_dotenv
load_dotenv()

from google import genai
from google.genai import types

from models import Course, Hole, MessageSender, PlayerProfile, Round
from llm.prompts import build_caddie_system_prompt
from llm.schema import RESPONSE_SCHEMA, AudioCue, CaddieReply, parse_caddie_reply

logger = logging.getLogger(__name__)


# --- Configuration ---

GEMINI_MODEL = os.environ.get("CADDIE_MODEL", "gemini-2.5-flash")
CADDIE_TEMPERATURE = 0.8  # favours conversational variety over determinism
API_KEY_ENV_VARS = ("GOOGLE_API_KEY", "API_KEY")

OFFLINE_MESSAGE = (
    "JP is currently offline. The AI Caddie is not configured correctly. "
    "Please ensure the API key is set in the environment variables."
)
ERROR_MESSAGE = (
    "There was an issue contacting JP. I'm having trouble thinking right now."
)

_ROLE_BY_SENDER = {
    MessageSender.CADDIE: "model",
    MessageSender.PLAYER: "user",
}


def resolve_api_key() -> Optional[str]:
    """Read the Gemini API key from the environment, if one is set."""
    for name in API_KEY_ENV_VARS:
        value = os.environ.get(name)
        if value:
            return value
    return None


def offline_reply() -> CaddieReply:
    return CaddieReply(
        conversational_response=OFFLINE_MESSAGE,
        extracted_data=None,
        audio_cue=AudioCue.NONE,
    )


def error_reply() -> CaddieReply:
    return CaddieReply(
        conversational_response=ERROR_MESSAGE,
        extracted_data=None,
        audio_cue=AudioCue.NONE,
    )


def build_contents(round_obj: Round) -> List[types.Content]:
    """Map the round transcript to Gemini turns, oldest first.

    The whole transcript is sent on every call.
    """
    return [
        types.Content(
            role=_ROLE_BY_SENDER[message.sender],
            parts=[types.Part(text=message.text)],
        )
        for message in round_obj.conversation
    ]


class CaddieClient:
    """Talks to Gemini on behalf of the caddie.

    Never raises from respond(): a missing key, a failed request or a reply
    that breaks the contract all come back as a fallback CaddieReply.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        model: str = GEMINI_MODEL,
        temperature: float = CADDIE_TEMPERATURE,
        client: Optional[genai.Client] = None,
    ):
        self.model = model
        self.temperature = temperature
        self._client = client

        if self._client is None:
            api_key = api_key or resolve_api_key()
            if api_key:
                self._client = genai.Client(api_key=api_key)
            else:
                logger.warning(
                    "GOOGLE_API_KEY environment variable is not set. "
                    "The caddie will answer with an offline message."
                )

    @property
    def is_configured(self) -> bool:
        return self._client is not None

    def _build_config(self, system_instruction: str) -> types.GenerateContentConfig:
        return types.GenerateContentConfig(
            system_instruction=system_instruction,
            response_mime_type="application/json",
            response_json_schema=RESPONSE_SCHEMA,
            temperature=self.temperature,
        )

    def respond(
        self,
        course: Course,
        hole: Hole,
        round_obj: Round,
        profile: PlayerProfile,
    ) -> CaddieReply:
        """Get the caddie's reply to the latest player message in the round."""
        if not self.is_configured:
            return offline_reply()

        system_instruction = build_caddie_system_prompt(course, hole, round_obj, profile)
        contents = build_contents(round_obj)

        try:
            response = self._client.models.generate_content(
                model=self.model,
                contents=contents,
                config=self._build_config(system_instruction),
            )
            text = (response.text or "").strip()
            if not text:
                raise ValueError("Gemini returned an empty response")
            return parse_caddie_reply(text)
        except Exception:
            logger.exception(
                "Error fetching caddie response for course %s hole %s",
                course.id, hole.hole_number,
            )
            return error_reply()
