from .audio import AudioService
from .round_session import RoundSession

__all__ = ["AudioService", "RoundSession"]
