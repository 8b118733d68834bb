"""
Chat session and off-topic lockout.

State machine per session:
    strikes = 0 → each OFF_TOPIC reply adds a strike and a warning
    strikes == max_strikes → BLOCKED (terminal, no reset)

A blocked session never reaches the relay again. A connection failure
shows a fallback message and does not count as a strike. At most one
message per session is in flight at a time.
"""

from __future__ import annotations

import logging
import uuid
from collections import OrderedDict

from .errors import ChatBlockedError, ChatBusyError, ChatRelayError
from .models import ChatMessage, ChatRole, MessageKind
from .prompts import CONNECTION_ERROR, GREETING, LOCKOUT, OFF_TOPIC, off_topic_warning
from .relay import ChatRelay

logger = logging.getLogger(__name__)

DEFAULT_MAX_STRIKES = 3


class ChatSession:
    """One runner's conversation with the race coach."""

    def __init__(
        self,
        relay: ChatRelay,
        max_strikes: int = DEFAULT_MAX_STRIKES,
        session_id: str | None = None,
    ):
        self.id = session_id or uuid.uuid4().hex
        self.relay = relay
        self.max_strikes = max_strikes
        self.strikes = 0
        self.blocked = False
        self.busy = False
        self.messages: list[ChatMessage] = [
            ChatMessage(role=ChatRole.MODEL, content=GREETING, kind=MessageKind.GREETING)
        ]
        # On-topic exchanges only; this is what the model sees as history
        self._history: list[ChatMessage] = []

    @property
    def accepts_input(self) -> bool:
        return not self.blocked and not self.busy

    async def send(self, text: str) -> ChatMessage:
        """
        Send a user message and return the message shown in reply.

        Raises:
            ValueError: Empty message
            ChatBlockedError: Session is locked
            ChatBusyError: Previous message still waiting for a reply
        """
        if self.blocked:
            raise ChatBlockedError(f"Chat session {self.id} is blocked")
        if self.busy:
            raise ChatBusyError(f"Chat session {self.id} is waiting for a reply")
        if not text or not text.strip():
            raise ValueError("Message is empty")

        user_msg = ChatMessage(role=ChatRole.USER, content=text)
        self.messages.append(user_msg)

        self.busy = True
        try:
            reply_text = await self.relay.send(list(self._history), text)
        except ChatRelayError as e:
            logger.warning(f"Chat relay failed for session {self.id}: {e}")
            reply = ChatMessage(role=ChatRole.MODEL, content=CONNECTION_ERROR, kind=MessageKind.ERROR)
        else:
            if reply_text == OFF_TOPIC:
                reply = self._register_strike()
            else:
                reply = ChatMessage(role=ChatRole.MODEL, content=reply_text)
                self._history.extend([user_msg, reply])
        finally:
            self.busy = False

        self.messages.append(reply)
        return reply

    def _register_strike(self) -> ChatMessage:
        self.strikes += 1
        logger.info(f"Off-topic strike {self.strikes}/{self.max_strikes} in session {self.id}")

        if self.strikes >= self.max_strikes:
            self.blocked = True
            logger.warning(f"Chat session {self.id} blocked")
            return ChatMessage(role=ChatRole.MODEL, content=LOCKOUT, kind=MessageKind.LOCKOUT)

        return ChatMessage(
            role=ChatRole.MODEL,
            content=off_topic_warning(self.strikes, self.max_strikes),
            kind=MessageKind.WARNING,
        )


class ChatSessionStore:
    """
    Process-local session registry.

    Sessions are not persisted; the oldest are dropped past `max_sessions`.
    """

    def __init__(self, relay: ChatRelay, max_strikes: int = DEFAULT_MAX_STRIKES, max_sessions: int = 1000):
        self.relay = relay
        self.max_strikes = max_strikes
        self.max_sessions = max_sessions
        self._sessions: OrderedDict[str, ChatSession] = OrderedDict()

    def create(self) -> ChatSession:
        session = ChatSession(self.relay, max_strikes=self.max_strikes)
        self._sessions[session.id] = session
        while len(self._sessions) > self.max_sessions:
            evicted_id, _ = self._sessions.popitem(last=False)
            logger.debug(f"Evicted chat session {evicted_id}")
        return session

    def get(self, session_id: str) -> ChatSession | None:
        return self._sessions.get(session_id)

    def __len__(self) -> int:
        return len(self._sessions)
