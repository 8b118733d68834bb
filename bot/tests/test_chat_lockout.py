"""
Tests for the chat lockout in the bot.

Handlers are called directly with a real in-memory FSM and a fake backend
client.
"""

import asyncio
from types import SimpleNamespace

import pytest
from aiogram.fsm.context import FSMContext
from aiogram.fsm.storage.base import StorageKey
from aiogram.fsm.storage.memory import MemoryStorage

from handlers import chat as chat_handlers
from handlers.common import cmd_start
from services.clients import APIError
from states.chat import ChatStates


class FakeMessage:
    def __init__(self, text=""):
        self.text = text
        self.from_user = SimpleNamespace(id=42)
        self.chat = SimpleNamespace(id=42)
        self.bot = SimpleNamespace(send_chat_action=self._noop)
        self.answers = []

    async def _noop(self, *args, **kwargs):
        return None

    async def answer(self, text, **kwargs):
        self.answers.append(text)


class FakeChatClient:
    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.created = 0

    async def create_session(self):
        self.created += 1
        return {"id": f"s{self.created}", "messages": [{"content": "📍 Centro de Mando Online."}]}

    async def send(self, session_id, text):
        if self.error:
            raise self.error
        return self.result


LOCKOUT_RESULT = {
    "reply": {"content": "⛔ BLOQUEO DE SEGURIDAD."},
    "strikes": 3,
    "blocked": True,
}


@pytest.fixture
def state():
    return FSMContext(storage=MemoryStorage(), key=StorageKey(bot_id=1, chat_id=42, user_id=42))


def use_client(monkeypatch, client):
    monkeypatch.setattr(chat_handlers, "api_client", SimpleNamespace(chat=client))


async def open_and_get_blocked(state):
    await chat_handlers.cmd_chat(FakeMessage("/chat"), state)
    await chat_handlers.handle_chat_text(FakeMessage("¿un chiste?"), state)


# =============================================================================
# Test lockout
# =============================================================================

class TestChatLockout:
    """Blocked users stay blocked."""

    def test_blocked_reply_moves_to_blocked_state(self, monkeypatch, state):
        use_client(monkeypatch, FakeChatClient(result=LOCKOUT_RESULT))

        asyncio.run(open_and_get_blocked(state))

        assert asyncio.run(state.get_state()) == ChatStates.blocked.state
        assert asyncio.run(state.get_data())[chat_handlers.BLOCKED_FLAG] is True

    def test_forbidden_response_blocks(self, monkeypatch, state):
        use_client(monkeypatch, FakeChatClient(error=APIError(403, "Chat session is blocked")))

        asyncio.run(open_and_get_blocked(state))

        assert asyncio.run(state.get_state()) == ChatStates.blocked.state

    def test_start_does_not_lift_lockout(self, monkeypatch, state):
        client = FakeChatClient(result=LOCKOUT_RESULT)
        use_client(monkeypatch, client)

        async def scenario():
            await open_and_get_blocked(state)
            await cmd_start(FakeMessage("/start"), state)
            message = FakeMessage("/chat")
            await chat_handlers.cmd_chat(message, state)
            return message

        message = asyncio.run(scenario())

        assert client.created == 1
        assert message.answers == [chat_handlers.BLOCKED_TEXT]
        assert asyncio.run(state.get_state()) == ChatStates.blocked.state

    def test_start_clears_other_state(self, monkeypatch, state):
        use_client(monkeypatch, FakeChatClient())

        async def scenario():
            await chat_handlers.cmd_chat(FakeMessage("/chat"), state)
            await cmd_start(FakeMessage("/start"), state)

        asyncio.run(scenario())

        assert asyncio.run(state.get_state()) is None
        assert asyncio.run(state.get_data()) == {}
