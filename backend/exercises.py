"""Exercise catalog helpers.

The catalog is a static JSON document bundled with the app::

    {"exercises": [{"name": "...", "category": "...",
                    "primary_muscles": ["..."], "equipment": ["..."],
                    "difficulty": "..."}]}

It is read once, on first use, and never modified. A missing or malformed
file leaves the catalog empty.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable, List, Optional

from backend import DEFAULT_CATALOG_PATH, MAX_CATALOG_NAME_LENGTH
from backend.models import ExerciseCatalogEntry

# Common lifts listed ahead of everything else in search results
POPULAR_EXERCISES = (
    "Barbell Bench Press",
    "Barbell Squat",
    "Deadlift",
    "Pull-Up",
    "Push-Up",
    "Dumbbell Bicep Curl",
    "Barbell Deadlift",
    "Barbell Curl",
    "Overhead Press",
    "Dumbbell Shoulder Press",
    "Dumbbell Bench Press",
    "Dumbbell Fly",
    "Lat Pulldown",
    "Cable Triceps Pushdown",
    "Barbell Row",
    "Dumbbell Row",
    "Seated Cable Row",
    "Leg Press",
    "Tricep Dips",
    "Plank",
    "Barbell Incline Bench Press",
    "Cable Crossover",
    "Dumbbell Lateral Raise",
    "Incline Dumbbell Press",
    "Leg Curl",
    "Leg Extension",
    "Hammer Curl",
    "Concentration Curl",
    "Cable Lat Pulldown",
    "Barbell Shrug",
    "Dumbbell Shrug",
    "Bulgarian Split Squat",
    "Dumbbell Incline Fly",
    "Calf Raise",
    "Cable Rope Face Pull",
    "Bent-Over Row",
    "Dumbbell Triceps Kickback",
    "Reverse Fly",
    "Lying Leg Curl",
    "Dumbbell Chest Press",
    "Arnold Press",
    "Chest Dip",
    "Front Squat",
    "Machine Chest Press",
    "Incline Barbell Bench Press",
    "Machine Shoulder Press",
    "Dumbbell Front Raise",
    "Close-Grip Bench Press",
    "Lateral Raise Machine",
    "Smith Machine Squat",
)


def _text(value, default: str = "unknown") -> str:
    if value is None or value == "":
        return default
    return str(value)


def _parse_exercise(raw: dict) -> ExerciseCatalogEntry:
    # ``type`` and ``muscle`` are the field names of older catalog files
    muscles = raw.get("primary_muscles")
    if muscles is None and raw.get("muscle"):
        muscles = [raw["muscle"]]
    if isinstance(muscles, str):
        muscles = [muscles]
    equipment = raw.get("equipment") or []
    if isinstance(equipment, str):
        equipment = [equipment]
    return ExerciseCatalogEntry(
        name=str(raw["name"]),
        category=_text(raw.get("category", raw.get("type"))),
        primary_muscle=_text(muscles[0] if muscles else None),
        equipment=tuple(str(item) for item in equipment),
        difficulty=_text(raw.get("difficulty")),
    )


def load_catalog(path: Path = DEFAULT_CATALOG_PATH) -> List[ExerciseCatalogEntry]:
    """Return the exercises in ``path``; an empty list if it cannot be read."""

    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as fh:
            data = json.load(fh)
    except FileNotFoundError:
        logging.exception("Exercise catalog not found: %s", path)
        return []
    except (OSError, ValueError):
        logging.exception("Failed to decode exercise catalog %s", path)
        return []

    if not isinstance(data, dict) or not isinstance(data.get("exercises"), list):
        logging.warning("Exercise catalog %s has no exercise list", path)
        return []

    exercises: List[ExerciseCatalogEntry] = []
    for raw in data["exercises"]:
        if not isinstance(raw, dict) or not raw.get("name"):
            logging.warning("Skipping catalog record without a name: %r", raw)
            continue
        exercises.append(_parse_exercise(raw))
    logging.info("Loaded %d exercises from %s", len(exercises), path)
    return exercises


class ExerciseCatalog:
    """Lazily loaded, read-only view of the bundled exercise catalog."""

    def __init__(
        self,
        path: Path = DEFAULT_CATALOG_PATH,
        popular: Iterable[str] = POPULAR_EXERCISES,
    ) -> None:
        self.path = Path(path)
        self.popular = frozenset(popular)
        self._exercises: Optional[List[ExerciseCatalogEntry]] = None

    def load(self) -> List[ExerciseCatalogEntry]:
        """Read the catalog file on first call and return the exercises."""
        if self._exercises is None:
            self._exercises = load_catalog(self.path)
        return self._exercises

    @property
    def exercises(self) -> List[ExerciseCatalogEntry]:
        return list(self.load())

    def _sort_key(self, exercise: ExerciseCatalogEntry):
        return exercise.name not in self.popular, exercise.name

    def search(self, term: str = "") -> List[ExerciseCatalogEntry]:
        """Return exercises whose name contains ``term``, ignoring case.

        Names longer than :data:`MAX_CATALOG_NAME_LENGTH` are left out.
        Popular exercises come first, then the rest alphabetically.
        """

        term = (term or "").strip().lower()
        matches = [
            ex
            for ex in self.load()
            if len(ex.name) <= MAX_CATALOG_NAME_LENGTH
            and (not term or term in ex.name.lower())
        ]
        return sorted(matches, key=self._sort_key)

    def favorites(self, names: Iterable[str]) -> List[ExerciseCatalogEntry]:
        """Return the catalog exercises named in ``names`` in catalog order."""
        wanted = set(names)
        return [ex for ex in self.load() if ex.name in wanted]

    def find(self, name: str) -> Optional[ExerciseCatalogEntry]:
        for ex in self.load():
            if ex.name == name:
                return ex
        return None
