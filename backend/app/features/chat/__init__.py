"""
Race coach chat module.

Usage:
    from app.features.chat import ChatSessionStore, GeminiRelay

Components:
- GeminiRelay: forwards messages to Gemini with the coach instruction
- ChatSession: conversation state and three-strike off-topic lockout
- ChatSessionStore: in-memory sessions by id
"""

from .errors import ChatError, ChatRelayError, ChatBlockedError, ChatBusyError
from .models import ChatMessage, ChatRole, MessageKind
from .prompts import OFF_TOPIC, SYSTEM_INSTRUCTION
from .relay import ChatRelay, GeminiRelay
from .session import ChatSession, ChatSessionStore, DEFAULT_MAX_STRIKES

__all__ = [
    # Errors
    "ChatError",
    "ChatRelayError",
    "ChatBlockedError",
    "ChatBusyError",
    # Models
    "ChatMessage",
    "ChatRole",
    "MessageKind",
    # Prompts
    "OFF_TOPIC",
    "SYSTEM_INSTRUCTION",
    # Relay / session
    "ChatRelay",
    "GeminiRelay",
    "ChatSession",
    "ChatSessionStore",
    "DEFAULT_MAX_STRIKES",
]
