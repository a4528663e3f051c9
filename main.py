import os
import sys

from kivy.core.window import Window
from kivymd.app import MDApp
from kivymd.uix.screenmanager import MDScreenManager
from kivy.uix.screenmanager import NoTransition

from core import AppServices
from ui.screens import (
    ExerciseSearchScreen,
    FinishedWorkoutScreen,
    HomeScreen,
    LogWorkoutScreen,
    ViewPreviousWorkoutScreen,
    WorkoutHistoryScreen,
)


if os.name == "nt" or sys.platform.startswith("win"):
    Window.size = (280, 280 * (20 / 9))


class FitnessApp(MDApp):
    """Workout log application.

    All persisted state lives in :attr:`services`; screens receive it at
    construction instead of looking it up globally.
    """

    services: AppServices | None = None

    def build(self):
        self.services = AppServices()
        self.theme_cls.primary_palette = "Red"
        self.theme_cls.theme_style = self.services.theme.theme.theme_style

        manager = MDScreenManager(transition=NoTransition())
        manager.add_widget(HomeScreen(self.services, name="home"))
        manager.add_widget(LogWorkoutScreen(self.services, name="log_workout"))
        manager.add_widget(ExerciseSearchScreen(self.services, name="exercise_search"))
        manager.add_widget(FinishedWorkoutScreen(self.services, name="finished_workout"))
        manager.add_widget(WorkoutHistoryScreen(self.services, name="workout_history"))
        manager.add_widget(
            ViewPreviousWorkoutScreen(self.services, name="view_previous_workout")
        )
        return manager


if __name__ == "__main__":
    FitnessApp().run()
