"""Screens used while logging a workout."""

from .exercise_search_screen import ExerciseSearchScreen
from .finished_workout_screen import FinishedWorkoutScreen
from .log_workout_screen import LogWorkoutScreen

__all__ = [
    "ExerciseSearchScreen",
    "FinishedWorkoutScreen",
    "LogWorkoutScreen",
]
