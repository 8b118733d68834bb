"""
Race Plan Handlers

/plan, /paces and /export: all take a target time, optionally followed by
the runner's name.
"""

import logging

from aiogram import Router
from aiogram.enums import ChatAction
from aiogram.filters import Command, CommandObject
from aiogram.types import BufferedInputFile, Message

from services.api_client import api_client, APIError
from utils.formatters import format_paces, format_plan, parse_target_args

logger = logging.getLogger(__name__)
router = Router()


USAGE = {
    "plan": "Uso: /plan 14:00 [NOMBRE]",
    "paces": "Uso: /paces 14:00",
    "export": "Uso: /export 14:00 [NOMBRE]",
}


async def _parse(message: Message, command: CommandObject):
    """(target, name) or None after replying with usage."""
    try:
        return parse_target_args(command.args)
    except ValueError:
        await message.answer(USAGE[command.command])
        return None


@router.message(Command("plan"))
async def cmd_plan(message: Message, command: CommandObject):
    """Segment table, checkpoints and summary paces."""
    parsed = await _parse(message, command)
    if not parsed:
        return
    target, name = parsed

    try:
        plan = await api_client.plan.get_plan(target.hours, target.minutes, runner_name=name)
    except APIError as e:
        logger.error(f"Plan request failed: {e}")
        await message.answer(f"No se pudo calcular el plan: {e.detail}")
        return
    except Exception as e:
        logger.error(f"Plan request failed: {e}")
        await message.answer("El servidor no responde. Inténtalo más tarde.")
        return

    if not plan["target_set"]:
        await message.answer("El tiempo objetivo tiene que ser mayor que 0:00.")
        return

    await message.answer(format_plan(plan))


@router.message(Command("paces"))
async def cmd_paces(message: Message, command: CommandObject):
    """Summary pace widget."""
    parsed = await _parse(message, command)
    if not parsed:
        return
    target, _ = parsed

    try:
        paces = await api_client.plan.get_paces(target.hours, target.minutes)
    except Exception as e:
        logger.error(f"Paces request failed: {e}")
        await message.answer("El servidor no responde. Inténtalo más tarde.")
        return

    await message.answer(f"<b>Ritmos para {target}</b>\n{format_paces(paces)}")


@router.message(Command("export"))
async def cmd_export(message: Message, command: CommandObject):
    """Send the PDF itinerary as a document."""
    parsed = await _parse(message, command)
    if not parsed:
        return
    target, name = parsed

    status = await message.answer("⏳ Generando PDF...")
    await message.bot.send_chat_action(message.chat.id, ChatAction.UPLOAD_DOCUMENT)

    try:
        content, filename = await api_client.plan.export_pdf(
            target.hours, target.minutes, runner_name=name
        )
    except APIError as e:
        logger.error(f"Export failed: {e}")
        await status.edit_text(f"❌ Error al exportar el PDF: {e.detail}")
        return
    except Exception as e:
        logger.error(f"Export failed: {e}")
        await status.edit_text("❌ Error al exportar el PDF. Inténtalo más tarde.")
        return

    await status.delete()
    await message.answer_document(
        BufferedInputFile(content, filename=filename or "RacePlan.pdf"),
        caption=f"Plan de carrera · objetivo {target}",
    )
