from .caddie import CaddieClient, build_contents, error_reply, offline_reply
from .context import build_hole_context
from .prompts import build_caddie_system_prompt
from .schema import (
    RESPONSE_SCHEMA,
    AudioCue,
    CaddieReply,
    ExtractedData,
    parse_caddie_reply,
)

__all__ = [
    "CaddieClient",
    "build_contents",
    "error_reply",
    "offline_reply",
    "build_hole_context",
    "build_caddie_system_prompt",
    "RESPONSE_SCHEMA",
    "AudioCue",
    "CaddieReply",
    "ExtractedData",
    "parse_caddie_reply",
]
