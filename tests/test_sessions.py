import pytest

from backend import PAST_WORKOUTS_KEY
from backend.models import PastWorkout
from backend.sessions import PastWorkoutStore, format_elapsed_time
from backend.storage import KeyValueStore
from tests.utils import entry
from ui.formatting import finished_stats


@pytest.mark.parametrize(
    "minutes, expected",
    [
        (0, ("0", "MINUTES")),
        (45, ("45", "MINUTES")),
        (60, ("1", "HOUR")),
        (120, ("2", "HOURS")),
        (75, ("1h 15m", "TOTAL")),
    ],
)
def test_format_elapsed_time(minutes, expected):
    assert format_elapsed_time(minutes) == expected


def _workout(start, *entries, minutes=30):
    return PastWorkout.create(start, entries, minutes)


def test_add_inserts_at_front_and_persists(store_path):
    store = KeyValueStore(store_path)
    history = PastWorkoutStore(store)
    older = _workout(1000.0, entry("Squat"))
    newer = _workout(5000.0, entry("Bench"))
    history.add(older)
    history.add(newer)

    reloaded = PastWorkoutStore(KeyValueStore(store_path))
    assert [w.id for w in reloaded.workouts] == [newer.id, older.id]
    assert reloaded.get(older.id) == older


def test_delete_by_id(past_workouts):
    keep = _workout(1.0, entry("Squat"))
    drop = _workout(2.0, entry("Bench"))
    past_workouts.add(keep)
    past_workouts.add(drop)

    assert past_workouts.delete(drop.id) is True
    assert past_workouts.workouts == [keep]
    assert past_workouts.delete("missing") is False


def test_delete_requires_confirmation(past_workouts):
    workout = _workout(1.0, entry("Squat"))
    past_workouts.add(workout)

    pending = past_workouts.request_delete(workout.id)
    assert pending.title == "Delete Workout"
    assert len(past_workouts) == 1
    assert pending.confirm() is True
    assert len(past_workouts) == 0
    assert past_workouts.request_delete(workout.id) is None


def test_corrupt_history_loads_empty(store):
    store.set(PAST_WORKOUTS_KEY, "[{broken")
    assert PastWorkoutStore(store).workouts == []


def test_workouts_property_is_a_copy(past_workouts):
    past_workouts.add(_workout(1.0, entry("Squat")))
    past_workouts.workouts.clear()
    assert len(past_workouts) == 1


def test_history_rows(past_workouts):
    workout = _workout(
        1000.0,
        entry("Squat"),
        entry("Squat"),
        entry("Bench"),
        entry("Squat"),
        minutes=50,
    )
    past_workouts.add(workout)
    (row,) = past_workouts.get_session_history()
    assert row == {
        "id": workout.id,
        "started_at": 1000.0,
        "ended_at": 1000.0 + 50 * 60,
        "elapsed_minutes": 50,
        "exercise_count": 4,
    }


def test_history_limit(past_workouts):
    for start in (1.0, 2.0, 3.0):
        past_workouts.add(_workout(start, entry("Squat")))
    rows = past_workouts.get_session_history(limit=2)
    assert [r["started_at"] for r in rows] == [3.0, 2.0]


def test_details_use_refined_grouping(past_workouts):
    bench = entry("Bench", weight="185 lbs", reps="10")
    lighter = entry("Bench", weight="135 lbs", reps="10", sets="2")
    workout = _workout(1.0, bench, bench, lighter)
    past_workouts.add(workout)

    details = past_workouts.get_session_details(workout.id)
    (group,) = details["groups"]
    assert group.variants == (bench, lighter)
    assert group.total_sets == 2
    assert past_workouts.get_session_details("missing") == {}


def test_failed_add_leaves_history_unchanged(past_workouts, store, monkeypatch):
    def failing_save():
        raise OSError("disk full")

    monkeypatch.setattr(store, "save", failing_save)
    with pytest.raises(OSError):
        past_workouts.add(_workout(1.0, entry("Squat")))
    assert len(past_workouts) == 0


def test_history_count_matches_finished_screen(past_workouts):
    workout = _workout(1.0, entry("Squat"), entry("Squat"), entry("Bench"))
    past_workouts.add(workout)
    (row,) = past_workouts.get_session_history()
    assert row["exercise_count"] == finished_stats(workout)["exercises"] == 3
