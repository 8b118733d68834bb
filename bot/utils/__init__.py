"""Bot utilities."""
from .formatters import (
    format_pace,
    format_distance,
    format_duration,
    format_plan,
    format_paces,
    parse_target_args,
)

__all__ = [
    "format_pace",
    "format_distance",
    "format_duration",
    "format_plan",
    "format_paces",
    "parse_target_args",
]
