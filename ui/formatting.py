"""Text for the list rows shown by the screens.

Kept free of Kivy imports so the wording can be checked without a display.
"""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, List, Sequence

from backend.aggregation import EntryGroup
from backend.models import PastWorkout, WorkoutEntry
from backend.sessions import format_elapsed_time


def variant_text(entry: WorkoutEntry) -> str:
    return f"{entry.weight} × {entry.reps} reps × {entry.sets} sets"


def sets_badge(total_sets: int) -> str:
    return f"{total_sets} set" if total_sets == 1 else f"{total_sets} sets"


def log_rows(groups: Sequence[EntryGroup]) -> List[dict]:
    """Rows for the live workout log, one per group."""

    rows = []
    for index, group in enumerate(groups):
        if len(group.variants) == 1:
            secondary = variant_text(group.variants[0])
        else:
            secondary = f"+{len(group.variants)} sets"
        rows.append(
            {
                "index": index,
                "text": f"{index + 1}. {group.name}",
                "secondary_text": secondary,
                "tertiary_text": sets_badge(group.total_sets),
                "variants": [variant_text(v) for v in group.variants],
            }
        )
    return rows


def format_time_range(started_at: float, ended_at: float) -> str:
    start = datetime.fromtimestamp(started_at)
    end = datetime.fromtimestamp(ended_at)
    return f"{start:%H:%M} - {end:%H:%M}"


def history_rows(history: Iterable[dict]) -> List[dict]:
    """Rows for the workout history list."""

    rows = []
    for item in history:
        value, unit = format_elapsed_time(item["elapsed_minutes"])
        started = datetime.fromtimestamp(item["started_at"])
        rows.append(
            {
                "id": item["id"],
                "text": started.strftime("%a %d/%m/%Y"),
                "secondary_text": format_time_range(
                    item["started_at"], item["ended_at"]
                ),
                "tertiary_text": (
                    f"{item['exercise_count']} EXERCISES · {value} {unit}"
                ),
            }
        )
    return rows


def detail_lines(details: dict) -> List[tuple[str, bool]]:
    """Lines for the workout detail view as ``(text, is_heading)`` pairs."""

    if not details:
        return [("No details found", True)]
    value, unit = format_elapsed_time(details["elapsed_minutes"])
    lines = [
        (format_time_range(details["started_at"], details["ended_at"]), True),
        (f"Duration: {value} {unit}", False),
        ("Exercises:", True),
    ]
    for group in details["groups"]:
        lines.append((f"• {group.name} ({sets_badge(group.total_sets)})", True))
        for variant in group.variants:
            lines.append((f"  {variant_text(variant)}", False))
    return lines


def finished_stats(workout: PastWorkout) -> dict:
    """Figures shown on the workout complete screen."""
    return {
        "exercises": len(workout.entries),
        "minutes": workout.elapsed_minutes,
    }
