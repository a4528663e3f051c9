"""Past workout history.

Finished workouts are kept newest first under the ``pastWorkouts`` key as a
JSON blob. A workout is never edited once stored; it can only be deleted.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from backend import PAST_WORKOUTS_KEY
from backend.aggregation import REFINED_POLICY, aggregate
from backend.confirmations import PendingConfirmation
from backend.models import PastWorkout
from backend.serialization import decode_past_workouts, encode_past_workouts
from backend.storage import KeyValueStore


def format_elapsed_time(minutes: int) -> tuple[str, str]:
    """Return a ``(value, unit)`` pair for showing a workout duration."""

    if minutes >= 60:
        hours, remaining = divmod(minutes, 60)
        if remaining == 0:
            return str(hours), "HOUR" if hours == 1 else "HOURS"
        return f"{hours}h {remaining}m", "TOTAL"
    return str(minutes), "MINUTES"


class PastWorkoutStore:
    """Persisted list of finished workouts."""

    def __init__(self, store: KeyValueStore) -> None:
        self.store = store
        self._workouts: List[PastWorkout] = []
        self.load()

    @property
    def workouts(self) -> List[PastWorkout]:
        """Return a copy of the stored workouts, newest first."""
        return list(self._workouts)

    def __len__(self) -> int:
        return len(self._workouts)

    def load(self) -> None:
        raw = self.store.get(PAST_WORKOUTS_KEY)
        decoded = decode_past_workouts(raw)
        if decoded is None and raw is not None:
            logging.warning("Discarding unreadable workout history")
        self._workouts = decoded or []

    def save(self) -> None:
        self._write(self._workouts)

    def _write(self, workouts: List[PastWorkout]) -> None:
        self.store.set(PAST_WORKOUTS_KEY, encode_past_workouts(workouts))

    def add(self, workout: PastWorkout) -> None:
        """Insert ``workout`` at the front of the history and persist."""
        workouts = [workout] + self._workouts
        self._write(workouts)
        self._workouts = workouts
        logging.info("Saved workout %s (%d entries)", workout.id, len(workout.entries))

    def get(self, workout_id: str) -> Optional[PastWorkout]:
        for workout in self._workouts:
            if workout.id == workout_id:
                return workout
        return None

    def delete(self, workout_id: str) -> bool:
        """Remove the workout with ``workout_id``. Return ``True`` if found."""
        remaining = [w for w in self._workouts if w.id != workout_id]
        if len(remaining) == len(self._workouts):
            return False
        self._write(remaining)
        self._workouts = remaining
        logging.info("Deleted workout %s", workout_id)
        return True

    def request_delete(self, workout_id: str) -> Optional[PendingConfirmation]:
        """Return the confirmation that deletes ``workout_id``."""
        if self.get(workout_id) is None:
            return None
        return PendingConfirmation(
            title="Delete Workout",
            message="Are you sure you want to delete this workout? This cannot be undone.",
            confirm_label="Delete",
            action=lambda: self.delete(workout_id),
        )

    # ------------------------------------------------------------------
    # Views used by the history screens
    # ------------------------------------------------------------------

    def get_session_history(self, limit: int | None = None) -> list[dict]:
        """Return summary rows for past workouts, newest first."""

        workouts = self._workouts if limit is None else self._workouts[:limit]
        return [
            {
                "id": w.id,
                "started_at": w.start_time,
                "ended_at": w.end_time,
                "elapsed_minutes": w.elapsed_minutes,
                "exercise_count": len(w.entries),
            }
            for w in workouts
        ]

    def get_session_details(self, workout_id: str) -> dict:
        """Return the grouped entries of ``workout_id`` or ``{}`` if unknown."""

        workout = self.get(workout_id)
        if workout is None:
            return {}
        return {
            "id": workout.id,
            "started_at": workout.start_time,
            "ended_at": workout.end_time,
            "elapsed_minutes": workout.elapsed_minutes,
            "groups": aggregate(workout.entries, REFINED_POLICY),
        }
