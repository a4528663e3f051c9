"""Screens not directly part of the workout session loop."""

from .home_screen import HomeScreen
from .workout_history_screen import WorkoutHistoryScreen
from .view_previous_workout_screen import ViewPreviousWorkoutScreen

__all__ = [
    "HomeScreen",
    "WorkoutHistoryScreen",
    "ViewPreviousWorkoutScreen",
]
