from __future__ import annotations

from kivy.metrics import dp
from kivymd.uix.boxlayout import MDBoxLayout
from kivymd.uix.button import MDRaisedButton
from kivymd.uix.label import MDLabel
from kivymd.uix.screen import MDScreen

from ui.formatting import finished_stats


class FinishedWorkoutScreen(MDScreen):
    """Shown once after a workout has been finished and saved."""

    def __init__(self, services, **kwargs):
        super().__init__(**kwargs)
        self.services = services

        layout = MDBoxLayout(orientation="vertical", padding=dp(24), spacing=dp(16))
        layout.add_widget(MDLabel(text="Great Job!", halign="center", font_style="H3"))
        layout.add_widget(
            MDLabel(text="Workout Complete!", halign="center", font_style="H5")
        )
        self.exercises_label = MDLabel(halign="center")
        self.minutes_label = MDLabel(halign="center")
        layout.add_widget(self.exercises_label)
        layout.add_widget(self.minutes_label)
        layout.add_widget(
            MDRaisedButton(
                text="CONTINUE",
                pos_hint={"center_x": 0.5},
                on_release=lambda *_: self.go_home(),
            )
        )
        self.add_widget(layout)

    def on_pre_enter(self, *args):
        workout = self.services.session.last_finished
        if workout is not None:
            stats = finished_stats(workout)
            self.exercises_label.text = f"{stats['exercises']} Exercises"
            self.minutes_label.text = f"{stats['minutes']} Minutes"
        return super().on_pre_enter(*args)

    def go_home(self) -> None:
        self.manager.current = "home"
