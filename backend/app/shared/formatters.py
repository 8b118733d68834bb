"""
Formatting utilities for display.

Used by the API, the itinerary export and the bot.
"""

import math
from datetime import time

MINUTES_PER_DAY = 24 * 60


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def format_pace(pace_min_km: float | None) -> str:
    """
    Format pace as 'M:SS'.

    Minutes are floored and seconds rounded half-up; a rounded 60 carries
    into the minute (7.995 → '8:00', never '7:60').

    Args:
        pace_min_km: Pace in decimal minutes per km (e.g., 7.98)

    Returns:
        Formatted string (e.g., '7:59')
    """
    if pace_min_km is None:
        return "—"

    total_seconds = _round_half_up(pace_min_km * 60)
    minutes, seconds = divmod(total_seconds, 60)

    return f"{minutes}:{seconds:02d}"


def format_clock(start: time, elapsed_minutes: float) -> str:
    """
    Wall-clock time reached `elapsed_minutes` after `start`, as 'HH:MM'.

    Rounded to the nearest minute and wrapped at midnight: only the time of
    day is meaningful.

    Args:
        start: Race start time of day (e.g., 06:00)
        elapsed_minutes: Minutes since the start (e.g., 143.64)

    Returns:
        Formatted string (e.g., '08:24')
    """
    total = start.hour * 60 + start.minute + _round_half_up(elapsed_minutes)
    hours, minutes = divmod(total % MINUTES_PER_DAY, 60)
    return f"{hours:02d}:{minutes:02d}"


def format_duration_minutes(minutes: float | None) -> str:
    """
    Format a duration as 'Xh YYmin'.

    Args:
        minutes: Duration in minutes (e.g., 870)

    Returns:
        Formatted string (e.g., '14h 30min')
    """
    if minutes is None or minutes < 0:
        return "—"

    total = _round_half_up(minutes)
    h, m = divmod(total, 60)

    if h == 0:
        return f"{m}min"
    return f"{h}h {m:02d}min"


def format_distance_km(km: float) -> str:
    """
    Format distance.

    Args:
        km: Distance in kilometers

    Returns:
        Formatted string (e.g., 'km 45' or 'km 12.5')
    """
    if float(km).is_integer():
        return f"km {int(km)}"
    return f"km {km:.1f}"
