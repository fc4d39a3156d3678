from __future__ import annotations
from pathlib import Path
from typing import Mapping, Sequence
import pandas as pd

from langloc_para.para.durations import count_onsets
from langloc_para.para.onsets import BlockOnset
from langloc_para.static.para.config import COND_IDS, COND_NAMES


def summarize_para(
    onsets: Sequence[BlockOnset],
    durations: Mapping[str, int],
) -> pd.DataFrame:
    """
    One row per condition: name, condition_id, n_onsets, duration.
    """
    counts = count_onsets(onsets)
    rows = [
        {
            "name": name,
            "condition_id": COND_IDS[name],
            "n_onsets": counts[name],
            "duration": int(durations[name]),
        }
        for name in COND_NAMES
    ]
    return pd.DataFrame(rows, columns=["name", "condition_id", "n_onsets", "duration"])


def print_para_summary(
    output_path: Path | str,
    onsets: Sequence[BlockOnset],
    durations: Mapping[str, int],
) -> None:
    summary = summarize_para(onsets, durations)

    print(f"\nPARA file written: {output_path}")
    print(f"Number of onsets: {len(onsets)}")
    print(f"Condition order: {', '.join(COND_NAMES)}")

    print("\nOnsets by condition:")
    for row in summary.itertuples(index=False):
        print(f"  {row.name} ({row.condition_id}): {row.n_onsets} instances")

    print("\nEstimated block durations (seconds):")
    for row in summary.itertuples(index=False):
        print(f"  {row.name}: {row.duration}")
