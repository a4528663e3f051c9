"""Helpers shared by the test modules."""

from backend.models import WorkoutEntry


class FakeClock:
    """Manually advanced replacement for ``time.time``."""

    def __init__(self, now: float = 1_700_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def entry(name, weight="100 lbs", reps="5", sets="1"):
    return WorkoutEntry(name=name, weight=weight, reps=reps, sets=sets)
