"""UI screen modules for the fitness log."""

from .session import (
    ExerciseSearchScreen,
    FinishedWorkoutScreen,
    LogWorkoutScreen,
)
from .general import (
    HomeScreen,
    ViewPreviousWorkoutScreen,
    WorkoutHistoryScreen,
)

__all__ = [
    "ExerciseSearchScreen",
    "FinishedWorkoutScreen",
    "HomeScreen",
    "LogWorkoutScreen",
    "ViewPreviousWorkoutScreen",
    "WorkoutHistoryScreen",
]
