import importlib.util
import os

import pytest

import core
from backend.entry_form import EntryForm
from backend.models import PastWorkout, WorkoutEntry
from tests.utils import FakeClock, entry

os.environ["KIVY_WINDOW"] = "mock"
# Skip tests entirely if Kivy (and KivyMD) are not installed
kivy_available = (
    importlib.util.find_spec("kivy") is not None
    and importlib.util.find_spec("kivymd") is not None
)

if kivy_available:
    # Prevent opening real windows during tests
    os.environ.setdefault("KIVY_UNITTEST", "1")
    os.environ.setdefault("KIVY_NO_ARGS", "1")

    from kivy.app import App
    from kivy.properties import BooleanProperty, ObjectProperty, StringProperty
    from kivy.uix.widget import Widget

    import ui.dialogs
    from ui.screens.general import (
        home_screen,
        view_previous_workout_screen,
        workout_history_screen,
    )
    from ui.screens.session import (
        exercise_search_screen,
        finished_workout_screen,
        log_workout_screen,
    )

    _WIDGET_NAMES = (
        "IconRightWidget",
        "MDBoxLayout",
        "MDDialog",
        "MDFlatButton",
        "MDLabel",
        "MDList",
        "MDRaisedButton",
        "MDTextField",
        "MDTopAppBar",
        "OneLineListItem",
        "ScrollView",
        "ThreeLineListItem",
        "ThreeLineRightIconListItem",
        "TwoLineAvatarIconListItem",
    )
    _MODULES = (
        ui.dialogs,
        home_screen,
        view_previous_workout_screen,
        workout_history_screen,
        exercise_search_screen,
        finished_workout_screen,
        log_workout_screen,
    )

    class DummyWidget(Widget):
        """Stand-in for the KivyMD widgets a screen builds."""

        text = StringProperty("")
        hint_text = StringProperty("")
        secondary_text = StringProperty("")
        tertiary_text = StringProperty("")
        title = StringProperty("")
        icon = StringProperty("")
        error = BooleanProperty(False)

        opened = []

        def __init__(self, *args, **kwargs):
            super().__init__()
            self.is_open = False
            for key, value in kwargs.items():
                setattr(self, key, value)

        def open(self, *args):
            self.is_open = True
            DummyWidget.opened.append(self)

        def dismiss(self, *args):
            self.is_open = False

        def press(self):
            self.on_release(self)

    class _Theme:
        theme_style = "Dark"

    class _DummyApp:
        """Minimal stand-in for :class:`~kivymd.app.MDApp` used in tests."""

        theme_cls = _Theme()

        def property(self, name, default=None):  # pragma: no cover - simple shim
            return ObjectProperty(None)

    class _Manager:
        """Records screen switches."""

        def __init__(self, **screens):
            self.current = ""
            self.screens = screens

        def get_screen(self, name):
            return self.screens[name]

    _app = _DummyApp()

    @pytest.fixture(autouse=True)
    def _provide_app(monkeypatch):
        """Ensure widgets see a running App and build without a window."""

        monkeypatch.setattr(App, "get_running_app", lambda: _app)
        for module in _MODULES:
            for name in _WIDGET_NAMES:
                if hasattr(module, name):
                    monkeypatch.setattr(module, name, DummyWidget)
        DummyWidget.opened = []
        yield

    def _rows(list_widget):
        return list(reversed(list_widget.children))

    def _last_dialog():
        return DummyWidget.opened[-1]

    def _confirm(dialog):
        dialog.buttons[1].press()

    def _cancel(dialog):
        dialog.buttons[0].press()


pytestmark = pytest.mark.skipif(
    not kivy_available, reason="Kivy and KivyMD are required"
)


@pytest.fixture
def services(tmp_path, catalog_path):
    return core.AppServices(
        store_path=tmp_path / "app_state.json",
        catalog_path=catalog_path,
        clock=FakeClock(),
    )


def test_log_screen_starts_empty_session(services):
    screen = log_workout_screen.LogWorkoutScreen(services, name="log_workout")
    screen.on_pre_enter()

    assert services.session.state is core.SessionState.ACTIVE
    assert screen.finish_button.disabled is True
    (row,) = _rows(screen.log_list)
    assert row.text.startswith("No exercises yet")
    screen.on_leave()
    assert screen._timer_event is None


def test_log_screen_resumes_persisted_session(tmp_path, catalog_path, services):
    services.session.begin()
    services.session.add_entry(entry("Barbell Squat", sets="3"))
    services.session.add_entry(entry("Barbell Squat", weight="120 lbs"))

    relaunched = core.AppServices(
        store_path=tmp_path / "app_state.json",
        catalog_path=catalog_path,
        clock=FakeClock(),
    )
    screen = log_workout_screen.LogWorkoutScreen(relaunched, name="log_workout")
    screen.on_pre_enter()

    assert screen.finish_button.disabled is False
    (row,) = _rows(screen.log_list)
    assert row.text == "1. Barbell Squat"
    assert row.tertiary_text == "4 sets"
    assert screen.toolbar.title == "WORKOUT LOG (2)"
    screen.on_leave()


def test_confirm_remove_opens_dialog(services):
    screen = log_workout_screen.LogWorkoutScreen(services, name="log_workout")
    screen.on_pre_enter()
    services.session.add_entry(entry("Barbell Squat"))
    services.session.add_entry(entry("Deadlift"))
    screen.populate()

    screen.confirm_remove(0)
    dialog = _last_dialog()
    assert dialog.is_open
    assert dialog.title == "Remove Exercise"

    _cancel(dialog)
    assert len(services.session.entries) == 2

    screen.confirm_remove(0)
    _confirm(_last_dialog())
    assert services.session.entries == (entry("Deadlift"),)
    assert [r.text for r in _rows(screen.log_list)] == ["1. Deadlift"]
    screen.on_leave()


def test_confirm_finish_opens_dialog(services):
    screen = log_workout_screen.LogWorkoutScreen(services, name="log_workout")
    screen.manager = _Manager()
    screen.on_pre_enter()

    # nothing to finish yet, so no dialog
    screen.confirm_finish()
    assert DummyWidget.opened == []

    services.session.add_entry(entry("Barbell Squat"))
    screen.confirm_finish()
    dialog = _last_dialog()
    assert dialog.title == "Finish your workout?"
    _confirm(dialog)

    assert screen.manager.current == "finished_workout"
    assert len(services.past_workouts) == 1
    assert not dialog.is_open
    screen.on_leave()


def test_finished_screen_shows_stats(services):
    services.session.begin()
    services.session.add_entry(entry("Barbell Squat"))
    services.session.add_entry(entry("Deadlift"))
    services.session.finish()

    screen = finished_workout_screen.FinishedWorkoutScreen(services)
    screen.on_pre_enter()
    assert screen.exercises_label.text == "2 Exercises"
    assert screen.minutes_label.text == "0 Minutes"


def test_entry_fields_write_back_sanitized_text():
    form = EntryForm("Barbell Squat")
    content = exercise_search_screen.AddEntryContent(form)

    content.fields["reps"].text = "1a2"
    content.fields["sets"].text = "3.5"
    assert form.reps == "12"
    assert content.fields["reps"].text == "12"
    assert content.fields["sets"].text == "35"

    content.cycle_unit()
    assert form.unit == "kgs"
    assert content.unit_button.text == "kgs"


def test_add_dialog_warns_then_adds_entry(services):
    services.session.begin()
    screen = exercise_search_screen.ExerciseSearchScreen(services)
    screen.open_add_dialog("Barbell Squat")
    dialog = screen.dialog
    content = dialog.content_cls
    add_button = dialog.buttons[1]

    add_button.press()
    assert services.session.entries == ()
    assert content.warning_label.text == "Please Fill Reps and Weight"
    assert content.fields["weight"].hint_text == "Please Enter Weight"
    assert dialog.is_open

    content.fields["reps"].text = "5"
    content.fields["weight"].text = "100"
    add_button.press()
    assert services.session.entries == (
        WorkoutEntry("Barbell Squat", "100 lbs", "5", "1"),
    )
    assert not dialog.is_open


def test_search_screen_favorites_tab(services):
    screen = exercise_search_screen.ExerciseSearchScreen(services)
    screen.set_filter("favorites")
    (row,) = _rows(screen.exercise_list)
    assert row.text == "No exercises found"

    screen.toggle_favorite("Barbell Squat")
    (row,) = _rows(screen.exercise_list)
    assert row.text == "Barbell Squat"
    (star,) = row.children
    assert star.icon == "star"

    screen.set_filter("all")
    screen.search_text = "cable"
    assert [r.text for r in _rows(screen.exercise_list)] == ["Cable Crossover"]


def test_history_screen_opens_details(services):
    workout = PastWorkout.create(1_700_000_000.0, [entry("Barbell Squat")], 30)
    services.past_workouts.add(workout)

    details = view_previous_workout_screen.ViewPreviousWorkoutScreen(
        services, name="view_previous_workout"
    )
    history = workout_history_screen.WorkoutHistoryScreen(services)
    manager = _Manager(view_previous_workout=details)
    history.manager = details.manager = manager

    history.on_pre_enter()
    (row,) = _rows(history.history_list)
    assert row.tertiary_text.startswith("1 EXERCISES")

    row.press()
    assert manager.current == "view_previous_workout"
    assert details.workout_id == workout.id


def test_history_screen_deletes_with_confirmation(services):
    workout = PastWorkout.create(1_700_000_000.0, [entry("Barbell Squat")], 30)
    services.past_workouts.add(workout)
    screen = workout_history_screen.WorkoutHistoryScreen(services)
    screen.populate()

    (row,) = _rows(screen.history_list)
    (delete_icon,) = row.children
    delete_icon.press()
    assert _last_dialog().title == "Delete Workout"
    assert len(services.past_workouts) == 1

    _confirm(_last_dialog())
    assert len(services.past_workouts) == 0
    (row,) = _rows(screen.history_list)
    assert row.text.startswith("No workouts yet")


def test_detail_screen_deletes_workout(services):
    workout = PastWorkout.create(1_700_000_000.0, [entry("Barbell Squat")], 30)
    services.past_workouts.add(workout)
    screen = view_previous_workout_screen.ViewPreviousWorkoutScreen(
        services, name="view_previous_workout"
    )
    screen.manager = _Manager()
    screen.workout_id = workout.id
    screen.on_pre_enter()
    texts = [r.text for r in _rows(screen.details_list)]
    assert "• Barbell Squat (1 set)" in texts

    screen.confirm_delete()
    _confirm(_last_dialog())
    assert services.past_workouts.get(workout.id) is None
    assert screen.manager.current == "workout_history"


def test_home_screen_toggles_theme(services):
    screen = home_screen.HomeScreen(services)
    screen.on_pre_enter()
    assert screen.log_button.text == "LOG WORKOUT"
    assert screen.theme_button.text == "THEME: DARK"

    screen.toggle_theme()
    assert _app.theme_cls.theme_style == "Light"
    assert services.theme.theme is core.AppTheme.LIGHT
    _app.theme_cls.theme_style = "Dark"

    services.session.begin()
    screen.on_pre_enter()
    assert screen.log_button.text == "RESUME WORKOUT"
