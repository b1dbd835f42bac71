"""Greedy algorithms: fractional knapsack and meeting selection."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Item:
    """An item with a value and a weight that may be taken in part."""

    value: int
    weight: int

    @property
    def ratio(self) -> float:
        return self.value / self.weight


@dataclass(frozen=True)
class Meeting:
    """A meeting in a room, with its 1-based position in the input."""

    start: int
    end: int
    position: int


def fractional_knapsack(capacity: int, items: Iterable[Item]) -> float:
    """Return the best value that fits in capacity when items may be split."""
    total_weight = 0
    total_value = 0.0
    for item in sorted(items, key=lambda it: it.ratio, reverse=True):
        if total_weight + item.weight <= capacity:
            total_weight += item.weight
            total_value += item.value
        else:
            remaining = capacity - total_weight
            total_value += item.ratio * remaining
            break
    return total_value


def max_meetings(starts: Sequence[int], ends: Sequence[int]) -> list[int]:
    """Return the 1-based positions of a largest set of disjoint meetings.

    A meeting may only start strictly after the previous one ends; ties on the
    end time are broken by input position.
    """
    if len(starts) != len(ends):
        raise ValueError("starts and ends must have the same length")
    meetings = sorted(
        (Meeting(s, e, pos) for pos, (s, e) in enumerate(zip(starts, ends), start=1)),
        key=lambda m: (m.end, m.position),
    )
    chosen: list[int] = []
    limit: int | None = None
    for meeting in meetings:
        if limit is None or meeting.start > limit:
            limit = meeting.end
            chosen.append(meeting.position)
    return chosen