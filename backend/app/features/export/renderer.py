"""
Itinerary renderer.

Draws the printable race plan (header, summary paces, segment table,
checkpoint table, elevation profile with projected arrivals) as a
matplotlib figure, one A4 page wide.
"""

from __future__ import annotations

import numpy as np
from matplotlib.figure import Figure

from app.features.course.models import CheckpointType
from app.features.pacing.service import RacePlan
from app.shared.formatters import (
    format_clock,
    format_distance_km,
    format_duration_minutes,
)

A4_INCHES = (8.27, 11.69)

ACCENT = "#059669"
INK = "#1c1917"
MUTED = "#78716c"
DANGER = "#dc2626"

SEGMENT_COLORS = {
    "amber": "#fbbf24",
    "red": "#ef4444",
    "blue": "#3b82f6",
    "slate": "#94a3b8",
    "emerald": "#10b981",
}

# Heights in inches
HEADER_HEIGHT = 1.6
ROW_HEIGHT = 0.32
TABLE_PADDING = 0.7
PROFILE_HEIGHT = 3.2


def _margin_text(minutes: float | None) -> str:
    if minutes is None:
        return "—"
    sign = "+" if minutes >= 0 else "-"
    return f"{sign}{format_duration_minutes(abs(minutes))}"


class ItineraryRenderer:
    """Builds the itinerary figure for a RacePlan."""

    def render(self, plan: RacePlan) -> Figure:
        seg_rows = len(plan.segments) + 1
        cp_rows = len(plan.checkpoints) + 1
        heights = [
            HEADER_HEIGHT,
            seg_rows * ROW_HEIGHT + TABLE_PADDING,
            cp_rows * ROW_HEIGHT + TABLE_PADDING,
            PROFILE_HEIGHT,
        ]
        fig_height = max(A4_INCHES[1], sum(heights) + 0.8)

        fig = Figure(figsize=(A4_INCHES[0], fig_height), facecolor="white")
        grid = fig.add_gridspec(
            len(heights), 1, height_ratios=heights,
            left=0.06, right=0.94, top=0.97, bottom=0.04, hspace=0.35,
        )

        self._draw_header(fig.add_subplot(grid[0]), plan)
        self._draw_segments(fig.add_subplot(grid[1]), plan)
        self._draw_checkpoints(fig.add_subplot(grid[2]), plan)
        self._draw_profile(fig.add_subplot(grid[3]), plan)
        return fig

    def _draw_header(self, ax, plan: RacePlan) -> None:
        ax.axis("off")
        course = plan.course
        ax.text(0, 0.95, f"{course.name.upper()} {course.total_distance_km:g} KM",
                fontsize=22, fontweight="bold", color=INK, va="top")
        ax.text(0, 0.62, "Plan de carrera", fontsize=11, color=ACCENT, fontweight="bold", va="top")

        start = format_clock(course.start_time, 0)
        target = str(plan.target) if plan.target.is_set else "—"
        lines = [
            f"Corredor: {plan.display_name}",
            f"Objetivo: {target}   Salida: {start}   Llegada estimada: {plan.finish_clock}",
            f"Ritmos  media {plan.paces.avg}  llano {plan.paces.flat}  "
            f"subida {plan.paces.uphill}  bajada {plan.paces.downhill}  /km",
        ]
        for i, line in enumerate(lines):
            ax.text(0, 0.38 - i * 0.2, line, fontsize=9.5, color=INK, va="top")

    def _draw_segments(self, ax, plan: RacePlan) -> None:
        ax.axis("off")
        ax.set_title("Tabla táctica", loc="left", fontsize=11, fontweight="bold", color=INK)

        rows = []
        colors = []
        for cs in plan.segments:
            seg = cs.segment
            rows.append([
                seg.name,
                f"{seg.start_km:g}-{seg.end_km:g}",
                seg.terrain,
                cs.pace or "—",
                cs.arrival or "—",
                seg.strategy,
            ])
            colors.append(SEGMENT_COLORS.get(seg.color, "white"))

        table = ax.table(
            cellText=rows,
            colLabels=["Tramo", "Km", "Terreno", "Ritmo", "Llegada", "Estrategia"],
            colWidths=[0.2, 0.08, 0.13, 0.08, 0.09, 0.42],
            cellLoc="left",
            loc="upper center",
        )
        table.auto_set_font_size(False)
        table.set_fontsize(7.5)
        for (row, col), cell in table.get_celld().items():
            cell.set_edgecolor("#e7e5e4")
            if row == 0:
                cell.set_facecolor(INK)
                cell.get_text().set_color("white")
                cell.get_text().set_fontweight("bold")
            elif col == 0:
                cell.set_facecolor(colors[row - 1])

    def _draw_checkpoints(self, ax, plan: RacePlan) -> None:
        ax.axis("off")
        ax.set_title("Puntos de control", loc="left", fontsize=11, fontweight="bold", color=INK)

        rows = []
        for cp in plan.checkpoints:
            rows.append([
                cp.name,
                format_distance_km(cp.km),
                cp.arrival,
                cp.cutoff_clock or "—",
                _margin_text(cp.cutoff_margin_minutes),
            ])

        table = ax.table(
            cellText=rows,
            colLabels=["Punto", "Km", "Llegada", "Corte", "Margen"],
            cellLoc="left",
            loc="upper center",
        )
        table.auto_set_font_size(False)
        table.set_fontsize(8)
        for (row, col), cell in table.get_celld().items():
            cell.set_edgecolor("#e7e5e4")
            if row == 0:
                cell.set_facecolor(INK)
                cell.get_text().set_color("white")
                cell.get_text().set_fontweight("bold")
            elif col == 4 and plan.checkpoints[row - 1].within_cutoff is False:
                cell.get_text().set_color(DANGER)
                cell.get_text().set_fontweight("bold")

    def _draw_profile(self, ax, plan: RacePlan) -> None:
        profile = plan.course.elevation_profile
        ax.set_title("Perfil de elevación", loc="left", fontsize=11, fontweight="bold", color=INK)
        ax.set_xlabel("km", fontsize=8, color=MUTED)
        ax.set_ylabel("m", fontsize=8, color=MUTED)
        ax.tick_params(labelsize=7, colors=MUTED)
        for side in ("top", "right"):
            ax.spines[side].set_visible(False)

        if not profile:
            ax.text(0.5, 0.5, "Sin datos de elevación", ha="center", va="center",
                    transform=ax.transAxes, color=MUTED)
            return

        kms = np.array([p.km for p in profile])
        alts = np.array([p.altitude for p in profile])
        ax.fill_between(kms, alts, alts.min() - 20, color=ACCENT, alpha=0.15)
        ax.plot(kms, alts, color=ACCENT, linewidth=2)
        ax.set_xlim(0, plan.course.total_distance_km)

        top = alts.max()
        for cp in plan.checkpoints:
            altitude = float(np.interp(cp.km, kms, alts))
            marker_color = INK if cp.spec.type == CheckpointType.FINISH else ACCENT
            ax.scatter([cp.km], [altitude], s=30, color=marker_color, zorder=3)
            ax.annotate(
                f"{cp.name}\n{cp.arrival}",
                xy=(cp.km, altitude),
                xytext=(cp.km, top + (top - alts.min()) * 0.25),
                ha="center", fontsize=7, color=INK,
                arrowprops={"arrowstyle": "-", "color": MUTED, "lw": 0.6},
            )
        ax.set_ylim(alts.min() - 20, top + (top - alts.min()) * 0.55)
