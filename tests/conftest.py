import json
from pathlib import Path
import sys

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from backend.sessions import PastWorkoutStore
from backend.storage import KeyValueStore
from backend.workout_session import WorkoutSession
from tests.utils import FakeClock


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store_path(tmp_path: Path) -> Path:
    return tmp_path / "app_state.json"


@pytest.fixture
def store(store_path: Path) -> KeyValueStore:
    return KeyValueStore(store_path)


@pytest.fixture
def past_workouts(store: KeyValueStore) -> PastWorkoutStore:
    return PastWorkoutStore(store)


@pytest.fixture
def session(store, past_workouts, clock) -> WorkoutSession:
    return WorkoutSession(store, past_workouts, clock=clock)


@pytest.fixture
def catalog_path(tmp_path: Path) -> Path:
    """Write a small catalog with a mix of complete and partial records."""
    path = tmp_path / "exercises.json"
    data = {
        "exercises": [
            {
                "name": "Cable Crossover",
                "category": "strength",
                "primary_muscles": ["chest"],
                "equipment": ["cable"],
                "difficulty": "beginner",
            },
            {"name": "Barbell Squat", "category": "strength",
             "primary_muscles": ["quadriceps", "glutes"], "equipment": ["barbell"]},
            {"name": "Ab Wheel Rollout"},
            {"name": "Barbell Bench Press", "type": "strength", "muscle": "chest"},
            {"name": "Single-Arm Dumbbell Overhead Triceps Extension"},
            {"category": "strength"},
        ]
    }
    path.write_text(json.dumps(data), encoding="utf-8")
    return path
