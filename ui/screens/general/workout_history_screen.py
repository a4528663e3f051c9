from __future__ import annotations

from kivy.uix.scrollview import ScrollView
from kivymd.uix.boxlayout import MDBoxLayout
from kivymd.uix.list import (
    IconRightWidget,
    MDList,
    OneLineListItem,
    ThreeLineRightIconListItem,
)
from kivymd.uix.screen import MDScreen
from kivymd.uix.toolbar import MDTopAppBar

from ui.dialogs import open_confirmation
from ui.formatting import history_rows


class WorkoutHistoryScreen(MDScreen):
    """Display a list of past workouts and open their details."""

    def __init__(self, services, **kwargs):
        super().__init__(**kwargs)
        self.services = services

        layout = MDBoxLayout(orientation="vertical")
        layout.add_widget(
            MDTopAppBar(
                title="WORKOUT HISTORY",
                left_action_items=[["arrow-left", lambda *_: self.go_home()]],
            )
        )
        scroll = ScrollView()
        self.history_list = MDList()
        scroll.add_widget(self.history_list)
        layout.add_widget(scroll)
        self.add_widget(layout)

    def on_pre_enter(self, *args):
        """Populate the history list before the screen becomes visible."""
        self.populate()
        return super().on_pre_enter(*args)

    def populate(self) -> None:
        """Fill the history list with finished workouts, newest first."""
        rows = history_rows(self.services.past_workouts.get_session_history())
        self.history_list.clear_widgets()
        if not rows:
            self.history_list.add_widget(
                OneLineListItem(text="No workouts yet. Complete one to see it here.")
            )
            return
        for row in rows:
            item = ThreeLineRightIconListItem(
                text=row["text"],
                secondary_text=row["secondary_text"],
                tertiary_text=row["tertiary_text"],
                on_release=lambda _, wid=row["id"]: self.open_workout(wid),
            )
            item.add_widget(
                IconRightWidget(
                    icon="delete",
                    on_release=lambda _, wid=row["id"]: self.confirm_delete(wid),
                )
            )
            self.history_list.add_widget(item)

    def open_workout(self, workout_id: str) -> None:
        """Open the details screen for ``workout_id``."""
        screen = self.manager.get_screen("view_previous_workout")
        screen.show_workout(workout_id)

    def confirm_delete(self, workout_id: str) -> None:
        pending = self.services.past_workouts.request_delete(workout_id)
        open_confirmation(pending, on_confirmed=lambda _: self.populate())

    def go_home(self) -> None:
        self.manager.current = "home"
