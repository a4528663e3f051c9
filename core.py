"""Application-level wiring of backend services.

Screens receive an :class:`AppServices` instance instead of reaching for
module globals. The common backend names are re-exported so callers can
import them from one place.
"""

from __future__ import annotations

import time
from pathlib import Path
from typing import Callable

from backend import DEFAULT_CATALOG_PATH, DEFAULT_STORE_PATH
from backend.aggregation import (
    REFINED_POLICY,
    SIMPLE_POLICY,
    EntryGroup,
    aggregate,
    remove_group,
)
from backend.confirmations import PendingConfirmation
from backend.entry_form import EntryForm
from backend.exercises import ExerciseCatalog, load_catalog
from backend.models import ExerciseCatalogEntry, PastWorkout, WorkoutEntry
from backend.sessions import PastWorkoutStore, format_elapsed_time
from backend.settings import AppTheme, FavoriteSet, ThemeSettings
from backend.storage import KeyValueStore
from backend.utils import parse_set_count, sanitize_numeric_input
from backend.workout_session import SessionState, SessionStateError, WorkoutSession


class AppServices:
    """All persisted state the screens work with."""

    def __init__(
        self,
        store_path: Path = DEFAULT_STORE_PATH,
        catalog_path: Path = DEFAULT_CATALOG_PATH,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.store = KeyValueStore(store_path)
        self.theme = ThemeSettings(self.store)
        self.favorites = FavoriteSet(self.store)
        self.catalog = ExerciseCatalog(catalog_path)
        self.past_workouts = PastWorkoutStore(self.store)
        self.session = WorkoutSession(self.store, self.past_workouts, clock=clock)


__all__ = [
    "AppServices",
    "AppTheme",
    "EntryForm",
    "EntryGroup",
    "ExerciseCatalog",
    "ExerciseCatalogEntry",
    "FavoriteSet",
    "KeyValueStore",
    "PastWorkout",
    "PastWorkoutStore",
    "PendingConfirmation",
    "REFINED_POLICY",
    "SIMPLE_POLICY",
    "SessionState",
    "SessionStateError",
    "ThemeSettings",
    "WorkoutEntry",
    "WorkoutSession",
    "aggregate",
    "format_elapsed_time",
    "load_catalog",
    "parse_set_count",
    "remove_group",
    "sanitize_numeric_input",
]
