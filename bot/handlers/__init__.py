"""Bot handlers."""

from handlers import common, plan, chat

__all__ = ["common", "plan", "chat"]
