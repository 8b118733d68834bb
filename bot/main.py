"""
Helike Planner Telegram Bot

Entry point for the bot.
"""

import asyncio
import logging
import sys

from aiogram import Bot, Dispatcher
from aiogram.client.default import DefaultBotProperties
from aiogram.enums import ParseMode
from aiogram.fsm.storage.memory import MemoryStorage
from aiogram.types import BotCommand

from config import settings
from handlers import common, plan, chat
from services.api_client import api_client


# === Logging Setup ===
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[
        logging.StreamHandler(sys.stdout),
    ]
)
logger = logging.getLogger(__name__)


BOT_COMMANDS = [
    BotCommand(command="start", description="Empezar / reiniciar"),
    BotCommand(command="help", description="Ayuda"),
    BotCommand(command="plan", description="Plan por tramos: /plan 14:00 NOMBRE"),
    BotCommand(command="paces", description="Ritmos: /paces 14:00"),
    BotCommand(command="export", description="PDF: /export 14:00 NOMBRE"),
    BotCommand(command="chat", description="Hablar con Control Central"),
]


async def on_startup(bot: Bot):
    """Startup hook."""
    logger.info("Starting Helike Planner Bot...")

    await bot.set_my_commands(BOT_COMMANDS)
    logger.info("Bot commands menu set")

    healthy = await api_client.health_check()
    if healthy:
        logger.info("Backend is healthy")
    else:
        logger.warning("Backend health check failed - bot will start anyway")

    me = await bot.get_me()
    logger.info(f"Bot started: @{me.username}")


async def on_shutdown(bot: Bot):
    """Shutdown hook."""
    logger.info("Shutting down...")
    await api_client.close()


async def main():
    """Main entry point."""
    bot = Bot(
        token=settings.token,
        default=DefaultBotProperties(parse_mode=ParseMode.HTML)
    )

    dp = Dispatcher(storage=MemoryStorage())

    # Commands before the chat router's free-text handlers
    dp.include_router(common.router)
    dp.include_router(plan.router)
    dp.include_router(chat.router)

    dp.startup.register(on_startup)
    dp.shutdown.register(on_shutdown)

    logger.info("Starting polling...")
    await dp.start_polling(bot)


if __name__ == "__main__":
    asyncio.run(main())
