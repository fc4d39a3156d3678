"""
Per-condition block duration estimated from the spacing between block onsets.
"""

from __future__ import annotations
from typing import Dict, Sequence
import numpy as np

from langloc_para.para.onsets import BlockOnset
from langloc_para.static.para.config import COND_NAMES, DEFAULT_DURATION


def round_half_away(x: float) -> int:
    """Round to the nearest integer, ties away from zero (2.5 -> 3, -2.5 -> -3)."""
    return int(np.sign(x) * np.floor(np.abs(x) + 0.5))


class DurationAccumulator:
    """Running sum of inter-block intervals and transition count per condition id."""

    def __init__(self, n_conditions: int = len(COND_NAMES)):
        self.sums = np.zeros(n_conditions, dtype=float)
        self.counts = np.zeros(n_conditions, dtype=int)

    def add(self, condition_id: int, interval: float) -> None:
        self.sums[condition_id - 1] += interval
        self.counts[condition_id - 1] += 1

    def averages(self, default: int = DEFAULT_DURATION) -> list[int]:
        return [
            round_half_away(total / n) if n > 0 else int(default)
            for total, n in zip(self.sums, self.counts)
        ]


def estimate_durations(
    onsets: Sequence[BlockOnset],
    default: int = DEFAULT_DURATION,
) -> Dict[str, int]:
    """
    Estimate one block duration (whole seconds) per condition.

    Only transitions count: for consecutive onsets with different condition
    ids, the gap to the next onset is an interval of the earlier condition.
    Conditions with no interval (or fewer than two onsets overall) get
    `default`.

    Returns
    -------
    dict
        {name: duration} in COND_NAMES order.
    """
    acc = DurationAccumulator()

    for cur, nxt in zip(onsets[:-1], onsets[1:]):
        if cur.condition_id != nxt.condition_id:
            acc.add(cur.condition_id, nxt.onset_time - cur.onset_time)

    return dict(zip(COND_NAMES, acc.averages(default)))


def count_onsets(onsets: Sequence[BlockOnset]) -> Dict[str, int]:
    """Number of extracted onsets per condition, in COND_NAMES order."""
    ids = np.array([o.condition_id for o in onsets], dtype=int)
    return {name: int(np.sum(ids == i)) for i, name in enumerate(COND_NAMES, start=1)}
