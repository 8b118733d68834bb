"""
Gemini chat relay.

Forwards a question plus the conversation so far to Gemini with the race
coach system instruction. The model is asked to answer "OFF_TOPIC" for
anything outside the race; that classification is only a signal, the
strike policy is enforced by ChatSession.
"""

from __future__ import annotations

import logging
from typing import Protocol, Sequence

from google import genai
from google.genai import types

from .errors import ChatRelayError
from .models import ChatMessage
from .prompts import OFF_TOPIC, SYSTEM_INSTRUCTION

logger = logging.getLogger(__name__)


class ChatRelay(Protocol):
    """Anything that can answer a chat message given prior history."""

    async def send(self, history: Sequence[ChatMessage], message: str) -> str:
        """Return the reply text, or OFF_TOPIC."""
        ...


class GeminiRelay:
    """ChatRelay backed by google-genai's async chat API."""

    def __init__(
        self,
        api_key: str | None,
        model: str,
        system_instruction: str = SYSTEM_INSTRUCTION,
    ):
        self.model = model
        self.system_instruction = system_instruction
        self._client = genai.Client(api_key=api_key) if api_key else None

    async def send(self, history: Sequence[ChatMessage], message: str) -> str:
        """
        Send one message.

        Args:
            history: Earlier on-topic exchanges, oldest first
            message: New user message

        Returns:
            Trimmed reply text, or OFF_TOPIC if the model flagged the message

        Raises:
            ChatRelayError: Missing API key, SDK or network failure, empty reply
        """
        if self._client is None:
            raise ChatRelayError("Gemini API key is not configured")

        try:
            chat = self._client.aio.chats.create(
                model=self.model,
                config=types.GenerateContentConfig(
                    system_instruction=self.system_instruction,
                ),
                history=[
                    types.Content(role=msg.role.value, parts=[types.Part(text=msg.content)])
                    for msg in history
                ],
            )
            response = await chat.send_message(message)
        except Exception as e:
            logger.error(f"Error communicating with Gemini: {e}")
            raise ChatRelayError(str(e)) from e

        text = (response.text or "").strip()
        if not text:
            raise ChatRelayError("Empty reply from Gemini")

        if OFF_TOPIC in text:
            return OFF_TOPIC
        return text
