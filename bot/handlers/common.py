"""
Common Handlers

Basic commands: /start, /help
"""

import logging
from aiogram import Router
from aiogram.types import Message
from aiogram.filters import Command, CommandStart
from aiogram.fsm.context import FSMContext

from handlers.chat import BLOCKED_FLAG
from states.chat import ChatStates

logger = logging.getLogger(__name__)

router = Router()


WELCOME_TEXT = """
🏃 <b>Ultra Helike 100 km · Plan de carrera</b>

Dime tu tiempo objetivo y te calculo el ritmo de cada tramo y la hora de paso por cada control.

<b>Comandos:</b>
/plan 14:00 NOMBRE — tabla táctica y controles
/paces 14:00 — ritmos medio, llano, subida, bajada
/export 14:00 NOMBRE — itinerario en PDF
/chat — habla con Control Central
/help — ayuda
"""


@router.message(CommandStart())
async def cmd_start(message: Message, state: FSMContext):
    """Handle /start command. A chat lockout is kept."""
    blocked = (await state.get_data()).get(BLOCKED_FLAG, False)
    await state.clear()
    if blocked:
        await state.set_state(ChatStates.blocked)
        await state.update_data({BLOCKED_FLAG: True})
    logger.info(f"/start from {message.from_user.id}")
    await message.answer(WELCOME_TEXT)


@router.message(Command("help"))
async def cmd_help(message: Message):
    """Handle /help command."""
    await message.answer(
        "<b>Cómo usar el bot:</b>\n\n"
        "1. Elige un tiempo objetivo: <code>14:00</code>, <code>14h30</code> o <code>15</code>\n"
        "2. /plan 14:00 — ritmo y hora de llegada por tramo\n"
        "3. /export 14:00 ANA — descarga el plan en PDF\n\n"
        "<b>Cómo se calcula:</b>\n"
        "• Ritmo medio = tiempo objetivo / 100 km\n"
        "• Cada tramo lo ajusta con su factor de terreno\n"
        "  (pista 0.95, montaña 1.35, arena 1.10, asfalto 1.05, urbano 1.0)\n"
        "• Salida a las 06:00\n\n"
        "<b>Chat:</b> /chat abre una conversación sobre la carrera. "
        "Tres preguntas fuera de tema bloquean el chat de forma permanente."
    )
