from enum import Enum

from .base import BaseGolfModel


class MessageSender(str, Enum):
    """Who said a line of the round transcript."""
    PLAYER = "player"
    CADDIE = "caddie"


class ChatMessage(BaseGolfModel):
    """One line of the round's conversation."""
    sender: MessageSender
    text: str
