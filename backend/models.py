"""Value records shared by the workout log, history and catalog."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Tuple

from backend.utils import parse_set_count


@dataclass(frozen=True)
class WorkoutEntry:
    """One logged exercise line.

    ``weight`` carries its unit (``"135 lbs"``); ``reps`` and ``sets`` are the
    text the user typed.
    """

    name: str
    weight: str
    reps: str
    sets: str = "1"

    @property
    def set_count(self) -> int:
        return parse_set_count(self.sets)

    @property
    def parameters(self) -> Tuple[str, str]:
        """Return the ``(reps, weight)`` pair used to compare entries."""
        return self.reps, self.weight

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "weight": self.weight,
            "reps": self.reps,
            "sets": self.sets,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "WorkoutEntry":
        # early data was written without a sets field
        return cls(
            name=str(data["name"]),
            weight=str(data["weight"]),
            reps=str(data["reps"]),
            sets=str(data.get("sets", "1")),
        )


@dataclass(frozen=True)
class PastWorkout:
    """A finished workout. Never modified after creation."""

    id: str
    start_time: float
    entries: Tuple[WorkoutEntry, ...]
    elapsed_minutes: int

    @property
    def end_time(self) -> float:
        return self.start_time + self.elapsed_minutes * 60

    @classmethod
    def create(
        cls, start_time: float, entries, elapsed_minutes: int
    ) -> "PastWorkout":
        """Return a new workout with a freshly generated ``id``."""
        return cls(
            id=str(uuid.uuid4()),
            start_time=float(start_time),
            entries=tuple(entries),
            elapsed_minutes=int(elapsed_minutes),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "startTime": self.start_time,
            "entries": [e.to_dict() for e in self.entries],
            "elapsedMinutes": self.elapsed_minutes,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "PastWorkout":
        return cls(
            id=str(data["id"]),
            start_time=float(data["startTime"]),
            entries=tuple(WorkoutEntry.from_dict(e) for e in data["entries"]),
            elapsed_minutes=int(data["elapsedMinutes"]),
        )


@dataclass(frozen=True)
class ExerciseCatalogEntry:
    """Read-only exercise loaded from the bundled catalog."""

    name: str
    category: str = "unknown"
    primary_muscle: str = "unknown"
    equipment: Tuple[str, ...] = ()
    difficulty: str = "unknown"
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
