"""
Chat Handlers

/chat opens a session with the race coach; free text is forwarded while the
user is in ChatStates.chatting. After three off-topic messages the backend
blocks the session and the user is moved to ChatStates.blocked; the lockout
is also kept in FSM data so /start does not lift it.
"""

import logging
from html import escape

from aiogram import F, Router
from aiogram.enums import ChatAction
from aiogram.filters import Command, StateFilter
from aiogram.fsm.context import FSMContext
from aiogram.types import Message

from services.api_client import api_client, APIError
from states.chat import ChatStates

logger = logging.getLogger(__name__)
router = Router()

BLOCKED_TEXT = "⛔ Chat bloqueado por seguridad. Puedes seguir usando /plan, /paces y /export."
BUSY_TEXT = "⏳ Control Central está respondiendo, espera un momento."
CONNECTION_TEXT = "⚠️ Error de conexión con Control Central. Mantén rumbo."

TEXT_MESSAGE = F.text & ~F.text.startswith("/")

# FSM data key; survives /start so a lockout cannot be reset by the user
BLOCKED_FLAG = "chat_blocked"


async def block_chat(state: FSMContext) -> None:
    await state.set_state(ChatStates.blocked)
    await state.update_data({BLOCKED_FLAG: True})


@router.message(Command("chat"))
async def cmd_chat(message: Message, state: FSMContext):
    """Open a new chat session and show the greeting."""
    data = await state.get_data()
    if data.get(BLOCKED_FLAG):
        await state.set_state(ChatStates.blocked)
        await message.answer(BLOCKED_TEXT)
        return

    try:
        session = await api_client.chat.create_session()
    except Exception as e:
        logger.error(f"Chat session creation failed: {e}")
        await message.answer(CONNECTION_TEXT)
        return

    await state.set_state(ChatStates.chatting)
    await state.update_data(chat_session_id=session["id"])
    logger.info(f"Chat session {session['id']} opened for {message.from_user.id}")

    greeting = session["messages"][0]["content"] if session["messages"] else ""
    await message.answer(escape(greeting))


@router.message(StateFilter(ChatStates.blocked), TEXT_MESSAGE)
async def handle_blocked_text(message: Message):
    """Nothing is forwarded once blocked."""
    await message.answer(BLOCKED_TEXT)


@router.message(StateFilter(ChatStates.chatting), TEXT_MESSAGE)
async def handle_chat_text(message: Message, state: FSMContext):
    """Forward one message and relay the reply."""
    data = await state.get_data()
    session_id = data.get("chat_session_id")
    if not session_id:
        await state.clear()
        await message.answer("La sesión de chat ha caducado. Usa /chat para abrir otra.")
        return

    await message.bot.send_chat_action(message.chat.id, ChatAction.TYPING)

    try:
        result = await api_client.chat.send(session_id, message.text)
    except APIError as e:
        if e.status == 403:
            await block_chat(state)
            await message.answer(BLOCKED_TEXT)
        elif e.status == 409:
            await message.answer(BUSY_TEXT)
        elif e.status == 404:
            await state.clear()
            await message.answer("La sesión de chat ha caducado. Usa /chat para abrir otra.")
        else:
            logger.error(f"Chat send failed: {e}")
            await message.answer(CONNECTION_TEXT)
        return
    except Exception as e:
        logger.error(f"Chat send failed: {e}")
        await message.answer(CONNECTION_TEXT)
        return

    await message.answer(escape(result["reply"]["content"]))

    if result["blocked"]:
        logger.info(f"Chat session {session_id} blocked after {result['strikes']} strikes")
        await block_chat(state)


@router.message(StateFilter(None), TEXT_MESSAGE)
async def handle_idle_text(message: Message):
    await message.answer("Usa /plan 14:00 para tu plan de carrera o /chat para hablar con Control Central.")
