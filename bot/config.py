"""
Bot Configuration

Settings loaded from environment variables.
"""

from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Bot settings."""

    bot_token: Optional[str] = None
    telegram_bot_token: Optional[str] = None
    backend_url: str = "http://localhost:8000"

    debug: bool = False
    log_level: str = "INFO"

    # Course used by /plan, /paces, /export (None = backend default)
    course_id: Optional[str] = None

    # PDF export can take a while on the backend
    export_timeout_s: float = 120.0

    @property
    def token(self) -> str:
        """Get bot token from BOT_TOKEN or TELEGRAM_BOT_TOKEN."""
        t = self.bot_token or self.telegram_bot_token
        if not t:
            raise ValueError("BOT_TOKEN or TELEGRAM_BOT_TOKEN must be set")
        return t

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


settings = Settings()
