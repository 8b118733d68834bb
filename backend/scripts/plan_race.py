#!/usr/bin/env python3
"""CLI script for printing a race plan for a target finishing time.

Usage:
    # Segment table, checkpoints and summary paces for 14h00
    python backend/scripts/plan_race.py --target 14:00

    # Another course from content/courses/, with a runner name
    python backend/scripts/plan_race.py --course ultra_helike --target 15h30 --name "Ana"

    # Single point query
    python backend/scripts/plan_race.py --target 14:00 --km 50

    # Also write the PDF itinerary
    python backend/scripts/plan_race.py --target 14:00 --name "Ana" --pdf out/
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")

sys.path.insert(0, str(Path(__file__).parent.parent))

from app.config import settings
from app.features.course import CourseCatalog
from app.features.pacing import RacePlan, RacePlanService, TargetDuration
from app.shared.formatters import format_distance_km, format_duration_minutes


def print_plan(plan: RacePlan) -> None:
    """Print segment table, checkpoints and summary paces."""
    course = plan.course
    print(f"\n=== {course.name} {course.total_distance_km:g} km | {plan.display_name} ===")
    print(f"Target: {plan.target}   Finish: {plan.finish_clock}")

    print("\n--- Segments ---")
    print(f"{'#':>2}  {'Name':<24} {'Km':>9}  {'Factor':>6}  {'Pace':>6}  {'Arrival':>7}")
    for cs in plan.segments:
        seg = cs.segment
        km = f"{seg.start_km:g}-{seg.end_km:g}"
        print(
            f"{seg.id:>2}  {seg.name:<24} {km:>9}  {seg.terrain_factor:>6.2f}  "
            f"{cs.pace or '—':>6}  {cs.arrival or '—':>7}"
        )

    print("\n--- Checkpoints ---")
    for cp in plan.checkpoints:
        line = f"{cp.name:<12} {format_distance_km(cp.km):>7}  {cp.arrival}"
        if cp.cutoff_clock:
            margin = cp.cutoff_margin_minutes
            status = "—" if margin is None else (
                f"+{format_duration_minutes(margin)}" if margin >= 0
                else f"MISSED by {format_duration_minutes(-margin)}"
            )
            line += f"   cut-off {cp.cutoff_clock} ({status})"
        print(line)

    p = plan.paces
    print(f"\n--- Paces (/km) ---")
    print(f"avg {p.avg}  flat {p.flat}  uphill {p.uphill}  downhill {p.downhill}")


def main():
    parser = argparse.ArgumentParser(description="Race plan for a target finishing time")
    parser.add_argument("--target", required=True, help="Target time: 14:00, 14h30, 14")
    parser.add_argument("--course", default=settings.default_course_id, help="Course id")
    parser.add_argument("--name", default="", help="Runner name")
    parser.add_argument("--km", type=float, help="Only print the arrival at this distance")
    parser.add_argument("--pdf", type=Path, help="Directory to write the PDF itinerary to")
    args = parser.parse_args()

    try:
        target = TargetDuration.parse(args.target)
    except ValueError as e:
        parser.error(str(e))

    catalog = CourseCatalog(settings.content_dir)
    course = catalog.get_course(args.course)
    if not course:
        available = ", ".join(c.id for c in catalog.courses) or "none"
        print(f"Course not found: {args.course} (available: {available})")
        sys.exit(1)

    service = RacePlanService(course)

    if args.km is not None:
        arrival, elapsed = service.arrival_at(target, args.km)
        print(f"{format_distance_km(args.km)}: {arrival} ({format_duration_minutes(elapsed)})")
        return

    plan = service.build_plan(target, runner_name=args.name)
    print_plan(plan)

    if args.pdf:
        from app.features.export import ExportError, ItineraryExporter

        try:
            artifact = ItineraryExporter(dpi=settings.export_dpi).export(plan)
        except ExportError as e:
            print(f"\nExport failed: {e}")
            sys.exit(1)
        args.pdf.mkdir(parents=True, exist_ok=True)
        out = args.pdf / artifact.filename
        out.write_bytes(artifact.content)
        print(f"\nPDF written: {out} ({artifact.pages} page(s))")


if __name__ == "__main__":
    main()
