"""In-progress workout session and its recovery state.

The session moves through ``NOT_STARTED -> ACTIVE -> FINISHED``. While it is
active, its start time, an "active" flag and the logged entries are kept in
the key-value store and rewritten after every change. Opening the log again
after the app was killed resumes from those values, so no logged sets are
lost and the timer keeps its original start.
"""

from __future__ import annotations

import logging
import time
from enum import Enum
from typing import Callable, List, Optional, Tuple

from backend import (
    CURRENT_WORKOUT_ENTRIES_KEY,
    IS_WORKOUT_ACTIVE_KEY,
    WORKOUT_START_TIME_KEY,
)
from backend.aggregation import SIMPLE_POLICY, EntryGroup, aggregate, remove_group
from backend.confirmations import PendingConfirmation
from backend.models import PastWorkout, WorkoutEntry
from backend.serialization import decode_entries, encode_entries
from backend.sessions import PastWorkoutStore
from backend.storage import KeyValueStore


class SessionState(Enum):
    NOT_STARTED = "not_started"
    ACTIVE = "active"
    FINISHED = "finished"


class SessionStateError(RuntimeError):
    """Raised when an operation does not fit the current session state."""


class WorkoutSession:
    """The workout currently being logged."""

    def __init__(
        self,
        store: KeyValueStore,
        past_workouts: PastWorkoutStore,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.store = store
        self.past_workouts = past_workouts
        self.clock = clock
        self.state = SessionState.NOT_STARTED
        self.start_time: Optional[float] = None
        self._entries: List[WorkoutEntry] = []
        # most recently finished workout, shown on the summary screen
        self.last_finished: Optional[PastWorkout] = None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @staticmethod
    def has_recoverable_session(store: KeyValueStore) -> bool:
        """Return ``True`` if ``store`` holds an unfinished session."""
        return bool(store.get(IS_WORKOUT_ACTIVE_KEY, False))

    def begin(self) -> bool:
        """Enter the logging screen.

        Resumes the persisted session when one is active and starts a new
        one otherwise. Returns ``True`` when an existing session was resumed.
        """

        if self.has_recoverable_session(self.store):
            self._restore()
            return True

        start_time = self.clock()
        self.store.set(WORKOUT_START_TIME_KEY, start_time)
        self.store.set(IS_WORKOUT_ACTIVE_KEY, True)
        self._save_entries([])
        self.start_time = start_time
        self.last_finished = None
        self.state = SessionState.ACTIVE
        logging.info("Started workout session at %s", self.start_time)
        return False

    def _restore(self) -> None:
        start = self.store.get(WORKOUT_START_TIME_KEY)
        try:
            self.start_time = float(start)
        except (TypeError, ValueError):
            logging.warning("Missing workout start time, restarting the timer")
            self.start_time = self.clock()
            self.store.set(WORKOUT_START_TIME_KEY, self.start_time)

        raw = self.store.get(CURRENT_WORKOUT_ENTRIES_KEY)
        entries = decode_entries(raw)
        if entries is None and raw is not None:
            logging.warning("Discarding unreadable in-progress entries")
        self._entries = entries or []
        self.state = SessionState.ACTIVE
        logging.info(
            "Resumed workout session from %s with %d entries",
            self.start_time,
            len(self._entries),
        )

    def _require_active(self) -> None:
        if self.state is not SessionState.ACTIVE:
            raise SessionStateError(f"Workout session is {self.state.value}")

    def _save_entries(self, entries: List[WorkoutEntry]) -> None:
        self.store.set(CURRENT_WORKOUT_ENTRIES_KEY, encode_entries(entries))
        self._entries = entries

    # ------------------------------------------------------------------
    # Entries
    # ------------------------------------------------------------------

    @property
    def entries(self) -> Tuple[WorkoutEntry, ...]:
        return tuple(self._entries)

    def add_entry(self, entry: WorkoutEntry) -> None:
        """Append ``entry`` to the log and persist it."""
        self._require_active()
        self._save_entries(self._entries + [entry])

    def groups(self) -> List[EntryGroup]:
        """Return the log grouped for display."""
        return aggregate(self._entries, SIMPLE_POLICY)

    def remove_group(self, index: int) -> EntryGroup:
        """Remove every entry of the displayed group at ``index``."""

        self._require_active()
        groups = self.groups()
        if index < 0 or index >= len(groups):
            raise IndexError("Invalid group index")
        group = groups[index]
        self._save_entries(remove_group(self._entries, group))
        return group

    def request_remove_group(self, index: int) -> PendingConfirmation:
        """Return the confirmation that removes the group at ``index``.

        The group is located again by its first entry's position when
        confirmed, matching what the user tapped even if the list changed.
        """

        self._require_active()
        groups = self.groups()
        if index < 0 or index >= len(groups):
            raise IndexError("Invalid group index")
        anchor = groups[index].source_range.start

        def do_remove() -> Optional[EntryGroup]:
            for pos, group in enumerate(self.groups()):
                if anchor in group.source_range:
                    return self.remove_group(pos)
            return None

        return PendingConfirmation(
            title="Remove Exercise",
            message="Are you sure you want to remove this exercise from your workout?",
            confirm_label="Remove",
            action=do_remove,
        )

    # ------------------------------------------------------------------
    # Timing
    # ------------------------------------------------------------------

    def elapsed_seconds(self) -> float:
        if self.start_time is None:
            return 0.0
        return max(0.0, self.clock() - self.start_time)

    def elapsed_minutes(self) -> int:
        return int(self.elapsed_seconds() // 60)

    # ------------------------------------------------------------------
    # Finishing
    # ------------------------------------------------------------------

    def finish(self) -> PastWorkout:
        """Store the session as a past workout and clear the recovery state."""

        self._require_active()
        if not self._entries:
            raise SessionStateError("Cannot finish a workout with no entries")
        workout = PastWorkout.create(
            start_time=self.start_time,
            entries=self._entries,
            elapsed_minutes=self.elapsed_minutes(),
        )
        self.past_workouts.add(workout)

        self.store.delete(WORKOUT_START_TIME_KEY)
        self.store.set(IS_WORKOUT_ACTIVE_KEY, False)
        self.store.delete(CURRENT_WORKOUT_ENTRIES_KEY)

        self._entries = []
        self.start_time = None
        self.last_finished = workout
        self.state = SessionState.FINISHED
        return workout

    def request_finish(self) -> Optional[PendingConfirmation]:
        """Return the finish confirmation, or ``None`` while the log is empty."""

        if self.state is not SessionState.ACTIVE or not self._entries:
            return None
        return PendingConfirmation(
            title="Finish your workout?",
            message="Are you sure you want to finish this workout?",
            confirm_label="Finish",
            action=self.finish,
        )

    def summary(self) -> str:
        """Return a formatted text summary of the session."""

        lines = ["Workout log"]
        if self.start_time is not None:
            start = time.strftime(
                "%Y-%m-%d %H:%M:%S", time.localtime(self.start_time)
            )
            lines.append(f"Start: {start}")
            lines.append(f"Duration: {self.elapsed_minutes()}m")
        for group in self.groups():
            lines.append(f"\n{group.name} ({group.total_sets} sets)")
            for entry in group.variants:
                lines.append(f"  {entry.reps} reps @ {entry.weight} x{entry.set_count}")
        return "\n".join(lines)
