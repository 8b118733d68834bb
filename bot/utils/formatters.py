"""
Bot formatters - re-export from shared.

Single source of truth is backend/app/shared/formatters.py. Also exposes
the backend's target-time parser so /plan 14:00 and the CLI agree.
"""

import sys
from html import escape
from pathlib import Path

# Add backend to path for imports
backend_path = Path(__file__).parent.parent.parent / "backend"
if str(backend_path) not in sys.path:
    sys.path.insert(0, str(backend_path))

from app.features.pacing.engine import TargetDuration
from app.shared.formatters import (
    format_pace,
    format_distance_km,
    format_duration_minutes,
)

format_distance = format_distance_km
format_duration = format_duration_minutes

__all__ = [
    "format_pace",
    "format_distance",
    "format_duration",
    "format_plan",
    "format_paces",
    "parse_target_args",
    "TargetDuration",
]


def parse_target_args(args: str | None) -> tuple[TargetDuration, str]:
    """
    Split command arguments into (target, runner name).

    '/plan 14:00 ana lopez' -> (14:00, 'ana lopez')

    Raises:
        ValueError: Missing or invalid target time
    """
    if not args or not args.strip():
        raise ValueError("Missing target time")
    target_text, _, name = args.strip().partition(" ")
    return TargetDuration.parse(target_text), name.strip()


def format_paces(paces: dict) -> str:
    """Summary pace block (values are already 'M:SS')."""
    return (
        f"Media <b>{paces['avg']}</b>/km\n"
        f"Llano {paces['flat']} · Subida {paces['uphill']} · Bajada {paces['downhill']}"
    )


def format_plan(plan: dict) -> str:
    """Compact HTML rendering of a /plan response."""
    target = plan["target"]
    lines = [
        f"<b>{escape(plan['course_name'])} {plan['distance_km']:g} km</b> · {escape(plan['runner_name'])}",
        f"Objetivo {target['hours']}:{target['minutes']:02d} · "
        f"Salida {plan['start_time']} · Meta {plan['finish_clock']}",
        "",
        "<b>Tramos</b>",
    ]
    for seg in plan["segments"]:
        lines.append(
            f"{seg['id']}. {seg['name']} ({seg['start_km']:g}-{seg['end_km']:g}) "
            f"<code>{seg['pace'] or '—'}</code> → {seg['arrival'] or '—'}"
        )

    lines += ["", "<b>Controles</b>"]
    for cp in plan["checkpoints"]:
        line = f"{cp['name']} {format_distance(cp['km'])}: {cp['arrival']}"
        margin = cp.get("cutoff_margin_minutes")
        if cp.get("cutoff_clock"):
            line += f" (corte {cp['cutoff_clock']}"
            if margin is not None:
                line += f", {'+' if margin >= 0 else '-'}{format_duration(abs(margin))}"
                if margin < 0:
                    line += " ⚠️"
            line += ")"
        lines.append(line)

    lines += ["", format_paces(plan["paces"])]
    return "\n".join(lines)
