from __future__ import annotations

from kivy.metrics import dp
from kivy.properties import StringProperty
from kivy.uix.scrollview import ScrollView
from kivymd.uix.boxlayout import MDBoxLayout
from kivymd.uix.button import MDFlatButton, MDRaisedButton
from kivymd.uix.dialog import MDDialog
from kivymd.uix.label import MDLabel
from kivymd.uix.list import (
    IconRightWidget,
    MDList,
    OneLineListItem,
    TwoLineAvatarIconListItem,
)
from kivymd.uix.screen import MDScreen
from kivymd.uix.textfield import MDTextField
from kivymd.uix.toolbar import MDTopAppBar

from backend import WEIGHT_UNITS
from backend.entry_form import EntryForm


class AddEntryContent(MDBoxLayout):
    """Reps, weight and sets inputs bound to an :class:`EntryForm`."""

    def __init__(self, form: EntryForm, **kwargs):
        super().__init__(
            orientation="vertical",
            spacing=dp(8),
            size_hint_y=None,
            height=dp(260),
            **kwargs,
        )
        self.form = form
        self.fields = {}
        for name in ("reps", "sets", "weight"):
            field = MDTextField(hint_text=form.placeholder(name), input_type="number")
            field.bind(text=lambda inst, val, n=name: self._on_text(n, inst, val))
            self.fields[name] = field
            self.add_widget(field)
        self.unit_button = MDFlatButton(
            text=form.unit, on_release=lambda *_: self.cycle_unit()
        )
        self.add_widget(self.unit_button)
        self.warning_label = MDLabel(text="", theme_text_color="Error")
        self.add_widget(self.warning_label)

    def _on_text(self, name: str, inst: MDTextField, value: str) -> None:
        setattr(self.form, name, value)
        clean = getattr(self.form, name)
        if clean != value:
            inst.text = clean

    def cycle_unit(self) -> None:
        idx = WEIGHT_UNITS.index(self.form.unit)
        self.form.unit = WEIGHT_UNITS[(idx + 1) % len(WEIGHT_UNITS)]
        self.unit_button.text = self.form.unit

    def refresh(self) -> None:
        for name, field in self.fields.items():
            field.hint_text = self.form.placeholder(name)
            field.error = self.form.was_pressed and name in self.form.missing_fields
            if field.text != getattr(self.form, name):
                field.text = getattr(self.form, name)
        self.warning_label.text = self.form.warning or ""


class ExerciseSearchScreen(MDScreen):
    """Browse the catalog, star favourites and log sets."""

    search_text = StringProperty("")
    filter_mode = StringProperty("all")

    def __init__(self, services, **kwargs):
        super().__init__(**kwargs)
        self.services = services
        self.dialog = None

        layout = MDBoxLayout(orientation="vertical")
        layout.add_widget(
            MDTopAppBar(
                title="ADD EXERCISE",
                left_action_items=[["arrow-left", lambda *_: self.go_back()]],
            )
        )
        self.search_field = MDTextField(hint_text="Search exercises")
        self.search_field.bind(text=lambda _, val: setattr(self, "search_text", val))
        layout.add_widget(self.search_field)

        tabs = MDBoxLayout(size_hint_y=None, height=dp(48), spacing=dp(8))
        tabs.add_widget(
            MDFlatButton(text="ALL", on_release=lambda *_: self.set_filter("all"))
        )
        tabs.add_widget(
            MDFlatButton(
                text="FAVORITES", on_release=lambda *_: self.set_filter("favorites")
            )
        )
        layout.add_widget(tabs)

        scroll = ScrollView()
        self.exercise_list = MDList()
        scroll.add_widget(self.exercise_list)
        layout.add_widget(scroll)
        self.add_widget(layout)

    def on_pre_enter(self, *args):
        self.populate()
        return super().on_pre_enter(*args)

    def on_search_text(self, *_):
        self.populate()

    def set_filter(self, mode: str) -> None:
        self.filter_mode = mode
        self.populate()

    def populate(self) -> None:
        catalog = self.services.catalog
        favorites = self.services.favorites
        if self.filter_mode == "favorites":
            exercises = catalog.favorites(favorites)
        else:
            exercises = catalog.search(self.search_text)
        self.exercise_list.clear_widgets()
        if not exercises:
            self.exercise_list.add_widget(OneLineListItem(text="No exercises found"))
            return
        for ex in exercises:
            item = TwoLineAvatarIconListItem(
                text=ex.name,
                secondary_text=f"{ex.primary_muscle} · {ex.category}",
                on_release=lambda _, name=ex.name: self.open_add_dialog(name),
            )
            item.add_widget(
                IconRightWidget(
                    icon="star" if ex.name in favorites else "star-outline",
                    on_release=lambda _, name=ex.name: self.toggle_favorite(name),
                )
            )
            self.exercise_list.add_widget(item)

    def toggle_favorite(self, name: str) -> None:
        self.services.favorites.toggle(name)
        self.populate()

    def open_add_dialog(self, exercise_name: str) -> None:
        form = EntryForm(exercise_name)
        content = AddEntryContent(form)

        def do_add(*_):
            entry = form.submit()
            if entry is None:
                content.refresh()
                return
            self.services.session.add_entry(entry)
            self.dialog.dismiss()

        self.dialog = MDDialog(
            title=exercise_name,
            type="custom",
            content_cls=content,
            buttons=[
                MDFlatButton(text="Cancel", on_release=lambda *_: self.dialog.dismiss()),
                MDRaisedButton(text="Add Workout", on_release=do_add),
            ],
        )
        self.dialog.open()

    def go_back(self) -> None:
        self.manager.current = "log_workout"
