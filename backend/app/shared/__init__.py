"""
Shared utilities (NOT business logic).

Usage:
    from app.shared.formatters import format_pace, format_clock
"""
from .formatters import (
    format_pace,
    format_clock,
    format_duration_minutes,
    format_distance_km,
)

__all__ = [
    "format_pace",
    "format_clock",
    "format_duration_minutes",
    "format_distance_km",
]
