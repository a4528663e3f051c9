"""Shared constants and globals for backend modules."""

from __future__ import annotations

from pathlib import Path

# Directory holding the bundled catalog and the persisted app state
DEFAULT_DATA_DIR = Path(__file__).resolve().parent.parent / "data"

# Key-value document standing in for device storage
DEFAULT_STORE_PATH = DEFAULT_DATA_DIR / "app_state.json"

# Static exercise catalog shipped with the application
DEFAULT_CATALOG_PATH = DEFAULT_DATA_DIR / "exercises.json"

DEFAULT_THEME = "Dark"
DEFAULT_WEIGHT_UNIT = "lbs"
WEIGHT_UNITS = ("lbs", "kgs")

# Text inputs for reps, weight and sets are capped at this many characters
MAX_NUMERIC_INPUT_LENGTH = 6

# Catalog entries with longer names are hidden from search results
MAX_CATALOG_NAME_LENGTH = 35

# Persisted key names
SELECTED_THEME_KEY = "selectedTheme"
FAVORITE_EXERCISES_KEY = "favoriteExercises"
PAST_WORKOUTS_KEY = "pastWorkouts"
WORKOUT_START_TIME_KEY = "workoutStartTime"
IS_WORKOUT_ACTIVE_KEY = "isWorkoutActive"
CURRENT_WORKOUT_ENTRIES_KEY = "currentWorkoutEntries"

__all__ = [
    "DEFAULT_DATA_DIR",
    "DEFAULT_STORE_PATH",
    "DEFAULT_CATALOG_PATH",
    "DEFAULT_THEME",
    "DEFAULT_WEIGHT_UNIT",
    "WEIGHT_UNITS",
    "MAX_NUMERIC_INPUT_LENGTH",
    "MAX_CATALOG_NAME_LENGTH",
    "SELECTED_THEME_KEY",
    "FAVORITE_EXERCISES_KEY",
    "PAST_WORKOUTS_KEY",
    "WORKOUT_START_TIME_KEY",
    "IS_WORKOUT_ACTIVE_KEY",
    "CURRENT_WORKOUT_ENTRIES_KEY",
]
