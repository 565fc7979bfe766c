"""Natural-language front end: intent parsing and the assistant loop."""

from .assistant import NOT_UNDERSTOOD_MESSAGE, Assistant
from .parser import IntentParser

__all__ = ["Assistant", "IntentParser", "NOT_UNDERSTOOD_MESSAGE"]
