"""
Tests for ChatSession and ChatSessionStore.

The relay is replaced by a fake that returns scripted replies and records
what it was sent.
"""

import asyncio

import pytest

from app.features.chat import (
    OFF_TOPIC,
    ChatBlockedError,
    ChatBusyError,
    ChatRelayError,
    ChatRole,
    ChatSession,
    ChatSessionStore,
    MessageKind,
)
from app.features.chat.prompts import CONNECTION_ERROR, GREETING, LOCKOUT


class FakeRelay:
    """Returns scripted replies; an Exception instance in the script is raised."""

    def __init__(self, *replies):
        self.replies = list(replies)
        self.calls = []

    async def send(self, history, message):
        self.calls.append((list(history), message))
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


class SlowRelay:
    """Holds the reply until released."""

    def __init__(self):
        self.release = asyncio.Event()
        self.calls = 0

    async def send(self, history, message):
        self.calls += 1
        await self.release.wait()
        return "📍 Km 18 Pantano."


def send(session, text):
    return asyncio.run(session.send(text))


# =============================================================================
# Test normal conversation
# =============================================================================

class TestConversation:
    """On-topic conversation."""

    def test_starts_with_greeting(self):
        session = ChatSession(FakeRelay())

        assert len(session.messages) == 1
        assert session.messages[0].content == GREETING
        assert session.messages[0].role == ChatRole.MODEL
        assert session.strikes == 0
        assert session.accepts_input

    def test_reply(self):
        session = ChatSession(FakeRelay("💧 Bebe 500ml."))

        reply = send(session, "¿Cuánto bebo antes del Pantano?")

        assert reply.content == "💧 Bebe 500ml."
        assert reply.kind == MessageKind.REPLY
        assert [m.role for m in session.messages] == [ChatRole.MODEL, ChatRole.USER, ChatRole.MODEL]

    def test_history_grows_with_on_topic_exchanges(self):
        relay = FakeRelay("Respuesta 1", "Respuesta 2")
        session = ChatSession(relay)

        send(session, "Pregunta 1")
        send(session, "Pregunta 2")

        history, message = relay.calls[1]
        assert message == "Pregunta 2"
        assert [m.content for m in history] == ["Pregunta 1", "Respuesta 1"]

    def test_greeting_not_sent_as_history(self):
        relay = FakeRelay("ok")
        send(ChatSession(relay), "Material obligatorio")

        history, _ = relay.calls[0]
        assert history == []

    def test_blank_message_rejected(self):
        relay = FakeRelay()
        session = ChatSession(relay)

        with pytest.raises(ValueError):
            send(session, "   ")
        assert relay.calls == []


# =============================================================================
# Test off-topic lockout
# =============================================================================

class TestOffTopicLockout:
    """Three strikes and the session is blocked."""

    def test_first_strike_warns(self):
        session = ChatSession(FakeRelay(OFF_TOPIC))

        reply = send(session, "¿Una receta de paella?")

        assert session.strikes == 1
        assert not session.blocked
        assert reply.kind == MessageKind.WARNING
        assert "AVISO 1/3" in reply.content

    def test_three_strikes_block(self):
        session = ChatSession(FakeRelay(OFF_TOPIC, OFF_TOPIC, OFF_TOPIC))

        replies = [send(session, f"chiste {i}") for i in range(3)]

        assert "AVISO 2/3" in replies[1].content
        assert replies[2].kind == MessageKind.LOCKOUT
        assert replies[2].content == LOCKOUT
        assert session.strikes == 3
        assert session.blocked
        assert not session.accepts_input

    def test_blocked_session_never_reaches_relay(self):
        relay = FakeRelay(OFF_TOPIC, OFF_TOPIC, OFF_TOPIC, "never sent")
        session = ChatSession(relay)
        for i in range(3):
            send(session, f"fuera de tema {i}")
        messages_before = len(session.messages)

        with pytest.raises(ChatBlockedError):
            send(session, "¿Dónde está el Pantano?")

        assert len(relay.calls) == 3
        assert len(session.messages) == messages_before

    def test_strikes_never_reset(self):
        session = ChatSession(FakeRelay(OFF_TOPIC, "📍 Km 45.", OFF_TOPIC))

        send(session, "política")
        send(session, "¿Dónde está la base de vida?")
        reply = send(session, "fútbol")

        assert session.strikes == 2
        assert "AVISO 2/3" in reply.content

    def test_off_topic_exchange_not_in_history(self):
        relay = FakeRelay(OFF_TOPIC, "ok")
        session = ChatSession(relay)

        send(session, "cocina")
        send(session, "ritmo en arena")

        history, _ = relay.calls[1]
        assert history == []

    def test_custom_max_strikes(self):
        session = ChatSession(FakeRelay(OFF_TOPIC), max_strikes=1)
        reply = send(session, "chiste")
        assert session.blocked
        assert reply.kind == MessageKind.LOCKOUT


# =============================================================================
# Test relay failures and concurrency
# =============================================================================

class TestRelayFailure:
    """Connection errors show a fallback and are not strikes."""

    def test_fallback_message(self):
        session = ChatSession(FakeRelay(ChatRelayError("timeout")))

        reply = send(session, "¿Cortes horarios?")

        assert reply.content == CONNECTION_ERROR
        assert reply.kind == MessageKind.ERROR
        assert session.strikes == 0
        assert not session.busy
        assert session.accepts_input

    def test_failed_exchange_not_in_history(self):
        relay = FakeRelay(ChatRelayError("down"), "ok")
        session = ChatSession(relay)

        send(session, "material")
        send(session, "material")

        history, _ = relay.calls[1]
        assert history == []

    def test_second_message_while_busy(self):
        relay = SlowRelay()
        session = ChatSession(relay)

        async def scenario():
            first = asyncio.create_task(session.send("primera"))
            await asyncio.sleep(0)
            assert session.busy
            with pytest.raises(ChatBusyError):
                await session.send("segunda")
            relay.release.set()
            return await first

        reply = asyncio.run(scenario())

        assert reply.content == "📍 Km 18 Pantano."
        assert relay.calls == 1
        assert not session.busy


# =============================================================================
# Test store
# =============================================================================

class TestChatSessionStore:
    """Tests for ChatSessionStore."""

    def test_create_and_get(self):
        store = ChatSessionStore(FakeRelay(), max_strikes=3)
        session = store.create()

        assert store.get(session.id) is session
        assert store.get("missing") is None
        assert session.max_strikes == 3

    def test_sessions_are_independent(self):
        store = ChatSessionStore(FakeRelay(OFF_TOPIC))
        a = store.create()
        b = store.create()

        send(a, "chiste")

        assert a.strikes == 1
        assert b.strikes == 0

    def test_oldest_evicted(self):
        store = ChatSessionStore(FakeRelay(), max_sessions=2)
        first = store.create()
        store.create()
        store.create()

        assert len(store) == 2
        assert store.get(first.id) is None
