from __future__ import annotations

from kivy.clock import Clock
from kivy.metrics import dp
from kivy.uix.scrollview import ScrollView
from kivymd.uix.boxlayout import MDBoxLayout
from kivymd.uix.button import MDRaisedButton
from kivymd.uix.label import MDLabel
from kivymd.uix.list import MDList, OneLineListItem, ThreeLineListItem
from kivymd.uix.screen import MDScreen
from kivymd.uix.toolbar import MDTopAppBar

from ui.dialogs import open_confirmation
from ui.formatting import log_rows


class LogWorkoutScreen(MDScreen):
    """Live workout log.

    Entering the screen starts a session or resumes the persisted one. Each
    row is a group of consecutive entries for one exercise; tapping a row
    asks before removing the whole group.
    """

    def __init__(self, services, **kwargs):
        super().__init__(**kwargs)
        self.services = services
        self._timer_event = None

        layout = MDBoxLayout(orientation="vertical")
        self.toolbar = MDTopAppBar(
            title="WORKOUT LOG",
            left_action_items=[["arrow-left", lambda *_: self.go_home()]],
        )
        layout.add_widget(self.toolbar)

        self.timer_label = MDLabel(
            text="0 min", halign="center", size_hint_y=None, height=dp(32)
        )
        layout.add_widget(self.timer_label)

        scroll = ScrollView()
        self.log_list = MDList()
        scroll.add_widget(self.log_list)
        layout.add_widget(scroll)

        buttons = MDBoxLayout(
            size_hint_y=None, height=dp(64), spacing=dp(24), padding=dp(8)
        )
        self.finish_button = MDRaisedButton(
            text="FINISH", on_release=lambda *_: self.confirm_finish()
        )
        self.add_button = MDRaisedButton(
            text="ADD", on_release=lambda *_: self.open_search()
        )
        buttons.add_widget(self.finish_button)
        buttons.add_widget(self.add_button)
        layout.add_widget(buttons)
        self.add_widget(layout)

    def on_pre_enter(self, *args):
        self.services.session.begin()
        self.populate()
        self._timer_event = Clock.schedule_interval(self.update_timer, 1)
        return super().on_pre_enter(*args)

    def on_leave(self, *args):
        if self._timer_event:
            self._timer_event.cancel()
            self._timer_event = None
        return super().on_leave(*args)

    def update_timer(self, *_):
        self.timer_label.text = f"{self.services.session.elapsed_minutes()} min"

    def populate(self) -> None:
        session = self.services.session
        self.log_list.clear_widgets()
        rows = log_rows(session.groups())
        self.toolbar.title = f"WORKOUT LOG ({len(session.entries)})"
        self.finish_button.disabled = not rows
        self.update_timer()
        if not rows:
            self.log_list.add_widget(
                OneLineListItem(text="No exercises yet. Tap ADD to log one.")
            )
            return
        for row in rows:
            self.log_list.add_widget(
                ThreeLineListItem(
                    text=row["text"],
                    secondary_text=row["secondary_text"],
                    tertiary_text=row["tertiary_text"],
                    on_release=lambda _, idx=row["index"]: self.confirm_remove(idx),
                )
            )

    def confirm_remove(self, index: int) -> None:
        pending = self.services.session.request_remove_group(index)
        open_confirmation(pending, on_confirmed=lambda _: self.populate())

    def confirm_finish(self) -> None:
        pending = self.services.session.request_finish()
        open_confirmation(pending, on_confirmed=lambda _: self.show_finished())

    def show_finished(self) -> None:
        self.manager.current = "finished_workout"

    def open_search(self) -> None:
        self.manager.current = "exercise_search"

    def go_home(self) -> None:
        self.manager.current = "home"
