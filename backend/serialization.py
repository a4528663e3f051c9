"""Encoding of workout records into the JSON blobs kept in the store.

Decoders return ``None`` for anything they cannot read instead of raising.
Call sites decide what absence means, usually an empty list.
"""

from __future__ import annotations

import json
import logging
from typing import Iterable, List, Optional

from backend.models import PastWorkout, WorkoutEntry


def encode_entries(entries: Iterable[WorkoutEntry]) -> str:
    return json.dumps([e.to_dict() for e in entries])


def decode_entries(raw: object) -> Optional[List[WorkoutEntry]]:
    """Return the entries encoded in ``raw`` or ``None`` if it is malformed."""

    if raw is None:
        return None
    try:
        data = json.loads(raw) if isinstance(raw, (str, bytes)) else raw
        if not isinstance(data, list):
            raise ValueError("expected a list of entries")
        return [WorkoutEntry.from_dict(item) for item in data]
    except (TypeError, ValueError, KeyError, AttributeError) as exc:
        logging.warning("Could not decode workout entries: %s", exc)
        return None


def encode_past_workouts(workouts: Iterable[PastWorkout]) -> str:
    return json.dumps([w.to_dict() for w in workouts])


def decode_past_workouts(raw: object) -> Optional[List[PastWorkout]]:
    """Return the workouts encoded in ``raw`` or ``None`` if it is malformed."""

    if raw is None:
        return None
    try:
        data = json.loads(raw) if isinstance(raw, (str, bytes)) else raw
        if not isinstance(data, list):
            raise ValueError("expected a list of workouts")
        return [PastWorkout.from_dict(item) for item in data]
    except (TypeError, ValueError, KeyError, AttributeError) as exc:
        logging.warning("Could not decode past workouts: %s", exc)
        return None
