"""Chat data models (dataclasses, in-memory only)."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class ChatRole(str, Enum):
    USER = "user"
    MODEL = "model"


class MessageKind(str, Enum):
    """Where a message came from."""
    REPLY = "reply"        # User question or genuine model answer
    WARNING = "warning"    # Off-topic strike notice
    LOCKOUT = "lockout"    # Session blocked
    ERROR = "error"        # Connection fallback
    GREETING = "greeting"


@dataclass(frozen=True)
class ChatMessage:
    role: ChatRole
    content: str
    kind: MessageKind = MessageKind.REPLY
    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
