from __future__ import annotations

from kivy.app import App
from kivy.metrics import dp
from kivymd.uix.boxlayout import MDBoxLayout
from kivymd.uix.button import MDFlatButton, MDRaisedButton
from kivymd.uix.label import MDLabel
from kivymd.uix.screen import MDScreen

from backend.workout_session import WorkoutSession


class HomeScreen(MDScreen):
    """Entry screen with navigation to the log and the history."""

    def __init__(self, services, **kwargs):
        super().__init__(**kwargs)
        self.services = services

        layout = MDBoxLayout(orientation="vertical", padding=dp(32), spacing=dp(24))
        layout.add_widget(MDLabel(text="FITNESS LOG", halign="center", font_style="H4"))
        self.log_button = MDRaisedButton(
            text="LOG WORKOUT",
            pos_hint={"center_x": 0.5},
            on_release=lambda *_: self.open("log_workout"),
        )
        layout.add_widget(self.log_button)
        layout.add_widget(
            MDRaisedButton(
                text="PAST WORKOUTS",
                pos_hint={"center_x": 0.5},
                on_release=lambda *_: self.open("workout_history"),
            )
        )
        self.theme_button = MDFlatButton(
            text="", pos_hint={"center_x": 0.5}, on_release=lambda *_: self.toggle_theme()
        )
        layout.add_widget(self.theme_button)
        self.add_widget(layout)

    def on_pre_enter(self, *args):
        active = WorkoutSession.has_recoverable_session(self.services.store)
        self.log_button.text = "RESUME WORKOUT" if active else "LOG WORKOUT"
        self.theme_button.text = f"THEME: {self.services.theme.theme.value.upper()}"
        return super().on_pre_enter(*args)

    def toggle_theme(self) -> None:
        theme = self.services.theme.toggle()
        App.get_running_app().theme_cls.theme_style = theme.theme_style
        self.theme_button.text = f"THEME: {theme.value.upper()}"

    def open(self, name: str) -> None:
        self.manager.current = name
