"""Input buffer behind the "add exercise" form.

Text assigned to the reps, weight and sets fields is sanitized on the way
in, so the buffers only ever hold numeric strings. Submitting with reps or
weight missing does not raise; it flips the form into a warning state that
the UI shows inline until the user fills the fields.
"""

from __future__ import annotations

from typing import List, Optional

from backend import DEFAULT_WEIGHT_UNIT, MAX_NUMERIC_INPUT_LENGTH, WEIGHT_UNITS
from backend.models import WorkoutEntry
from backend.utils import sanitize_numeric_input

_PLACEHOLDERS = {
    "reps": ("Enter Reps", "Please Enter Reps"),
    "weight": ("Enter Weight", "Please Enter Weight"),
    "sets": ("Enter Sets", "Enter Sets"),
}


class EntryForm:
    """Raw text state for logging one exercise."""

    def __init__(self, exercise_name: str, unit: str = DEFAULT_WEIGHT_UNIT) -> None:
        self.exercise_name = exercise_name
        self._reps = ""
        self._weight = ""
        self._sets = ""
        self._unit = DEFAULT_WEIGHT_UNIT
        self.unit = unit
        self.was_pressed = False

    @property
    def reps(self) -> str:
        return self._reps

    @reps.setter
    def reps(self, text: str) -> None:
        self._reps = sanitize_numeric_input(text, MAX_NUMERIC_INPUT_LENGTH)

    @property
    def weight(self) -> str:
        return self._weight

    @weight.setter
    def weight(self, text: str) -> None:
        self._weight = sanitize_numeric_input(text, MAX_NUMERIC_INPUT_LENGTH)

    @property
    def sets(self) -> str:
        return self._sets

    @sets.setter
    def sets(self, text: str) -> None:
        self._sets = sanitize_numeric_input(
            text, MAX_NUMERIC_INPUT_LENGTH, allow_decimal=False
        )

    @property
    def unit(self) -> str:
        return self._unit

    @unit.setter
    def unit(self, value: str) -> None:
        if value not in WEIGHT_UNITS:
            raise ValueError(f"Unknown weight unit '{value}'")
        self._unit = value

    @property
    def missing_fields(self) -> List[str]:
        missing = []
        if not self._reps:
            missing.append("reps")
        if not self._weight:
            missing.append("weight")
        return missing

    @property
    def warning(self) -> Optional[str]:
        """Inline message shown after a submit with missing fields."""
        if self.was_pressed and self.missing_fields:
            return "Please Fill Reps and Weight"
        return None

    def placeholder(self, field: str) -> str:
        normal, warned = _PLACEHOLDERS[field]
        return warned if self.was_pressed and field in self.missing_fields else normal

    def reset(self) -> None:
        self._reps = self._weight = self._sets = ""
        self.was_pressed = False

    def submit(self) -> Optional[WorkoutEntry]:
        """Return the entry for the current input, or ``None`` if incomplete.

        A blank sets field logs a single set. On success the buffers are
        cleared for the next entry.
        """

        self.was_pressed = True
        if self.missing_fields:
            return None
        entry = WorkoutEntry(
            name=self.exercise_name,
            weight=f"{self._weight} {self._unit}",
            reps=self._reps,
            sets=self._sets or "1",
        )
        self.reset()
        return entry
