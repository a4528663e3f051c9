from __future__ import annotations

from kivy.metrics import dp
from kivy.uix.scrollview import ScrollView
from kivymd.uix.boxlayout import MDBoxLayout
from kivymd.uix.button import MDRaisedButton
from kivymd.uix.list import MDList, OneLineListItem
from kivymd.uix.screen import MDScreen
from kivymd.uix.toolbar import MDTopAppBar

from ui.dialogs import open_confirmation
from ui.formatting import detail_lines


class ViewPreviousWorkoutScreen(MDScreen):
    """Display the grouped exercises of one past workout."""

    workout_id: str | None = None

    def __init__(self, services, **kwargs):
        super().__init__(**kwargs)
        self.services = services

        layout = MDBoxLayout(orientation="vertical")
        layout.add_widget(
            MDTopAppBar(
                title="WORKOUT",
                left_action_items=[["arrow-left", lambda *_: self.go_back()]],
            )
        )
        scroll = ScrollView()
        self.details_list = MDList()
        scroll.add_widget(self.details_list)
        layout.add_widget(scroll)
        footer = MDBoxLayout(size_hint_y=None, height=dp(64), padding=dp(8))
        footer.add_widget(
            MDRaisedButton(
                text="Delete Workout", on_release=lambda *_: self.confirm_delete()
            )
        )
        layout.add_widget(footer)
        self.add_widget(layout)

    def on_pre_enter(self, *args):
        if self.workout_id is not None:
            self.populate()
        return super().on_pre_enter(*args)

    def show_workout(self, workout_id: str) -> None:
        """Load ``workout_id`` and switch to this screen."""
        self.workout_id = workout_id
        self.manager.current = self.name

    def populate(self) -> None:
        details = self.services.past_workouts.get_session_details(self.workout_id)
        self.details_list.clear_widgets()
        for text, _heading in detail_lines(details):
            self.details_list.add_widget(OneLineListItem(text=text))

    def confirm_delete(self) -> None:
        pending = self.services.past_workouts.request_delete(self.workout_id)
        open_confirmation(pending, on_confirmed=lambda _: self.go_back())

    def go_back(self) -> None:
        self.manager.current = "workout_history"
