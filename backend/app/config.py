"""
Application Configuration

Uses Pydantic Settings for type-safe configuration.
"""

from pathlib import Path
from typing import List, Optional
from pydantic_settings import BaseSettings
from pydantic import AliasChoices, Field, field_validator, ConfigDict

# Project root: helike-planner/
PROJECT_ROOT = Path(__file__).parent.parent.parent
# Content directory: helike-planner/content/
CONTENT_DIR = PROJECT_ROOT / "content"


class Settings(BaseSettings):
    """Application settings with validation."""

    # === Core ===
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Logging level")

    # === CORS ===
    cors_origins: List[str] = Field(
        default_factory=lambda: ["http://localhost:5173", "http://localhost:3000"],
        description="Allowed CORS origins"
    )

    # === Course catalog ===
    content_dir: Path = Field(
        default=CONTENT_DIR,
        description="Directory holding courses/*.yaml"
    )
    default_course_id: str = Field(
        default="ultra_helike",
        description="Course used when a request does not name one"
    )

    # === Export ===
    export_dpi: int = Field(
        default=100, ge=50, le=300,
        description="Base DPI of the itinerary render (rasterized at 2x)"
    )

    # === Chat (Gemini) ===
    gemini_api_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("gemini_api_key", "api_key")
    )
    gemini_model: str = Field(default="gemini-2.5-flash")
    chat_max_strikes: int = Field(default=3, ge=1)

    @field_validator('cors_origins', mode='before')
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS origins from comma-separated string."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(',')]
        return v

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Global settings instance
settings = Settings()
