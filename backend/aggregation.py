"""Grouping of consecutive workout entries for display.

Entries carry no group identifier. Groups are rebuilt from order alone: a
group is a maximal run of adjacent entries sharing an exercise name, so the
same exercise logged again after a different one starts a new group.

Two policies exist:

``SIMPLE_POLICY``
    Used for the live workout log. Every entry in a run becomes a variant
    row and adds its set count to ``total_sets``, even when its reps or
    weight differ from the first entry. Each group records the slice of the
    input it came from so it can be removed from the log exactly.

``REFINED_POLICY``
    Used for past workout details. Entries repeating the first entry's reps
    and weight are folded into ``total_sets``; entries with other parameters
    are kept as extra variant rows and do not add to ``total_sets``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

from backend.models import WorkoutEntry


@dataclass(frozen=True)
class AggregationPolicy:
    """How entries inside a run are combined.

    ``collapse`` decides whether a later entry is folded into the first one
    instead of getting its own variant row. When it is ``None`` nothing is
    folded. ``count_variants`` controls whether variant rows after the first
    add to ``total_sets``.
    """

    name: str
    collapse: Optional[Callable[[WorkoutEntry, WorkoutEntry], bool]]
    count_variants: bool
    track_range: bool


def same_parameters(first: WorkoutEntry, other: WorkoutEntry) -> bool:
    return first.parameters == other.parameters


SIMPLE_POLICY = AggregationPolicy(
    name="simple", collapse=None, count_variants=True, track_range=True
)
REFINED_POLICY = AggregationPolicy(
    name="refined",
    collapse=same_parameters,
    count_variants=False,
    track_range=False,
)


@dataclass(frozen=True)
class EntryGroup:
    """A run of same-named entries ready for display."""

    name: str
    variants: Tuple[WorkoutEntry, ...]
    total_sets: int
    source_range: Optional[range] = None


def aggregate(
    entries: Sequence[WorkoutEntry],
    policy: AggregationPolicy = SIMPLE_POLICY,
) -> List[EntryGroup]:
    """Return ``entries`` grouped into consecutive runs according to ``policy``."""

    groups: List[EntryGroup] = []
    i = 0
    count = len(entries)
    while i < count:
        first = entries[i]
        variants = [first]
        total_sets = first.set_count
        j = i + 1
        while j < count and entries[j].name == first.name:
            entry = entries[j]
            if policy.collapse is not None and policy.collapse(first, entry):
                total_sets += entry.set_count
            else:
                variants.append(entry)
                if policy.count_variants:
                    total_sets += entry.set_count
            j += 1
        groups.append(
            EntryGroup(
                name=first.name,
                variants=tuple(variants),
                total_sets=total_sets,
                source_range=range(i, j) if policy.track_range else None,
            )
        )
        i = j
    return groups


def remove_group(
    entries: Sequence[WorkoutEntry], group: EntryGroup
) -> List[WorkoutEntry]:
    """Return ``entries`` without the contiguous slice ``group`` came from."""

    if group.source_range is None:
        raise ValueError(f"Group '{group.name}' has no source range")
    start, stop = group.source_range.start, group.source_range.stop
    if start < 0 or stop > len(entries) or start >= stop:
        raise IndexError("Group range outside of entry list")
    return list(entries[:start]) + list(entries[stop:])
