"""Pytest fixtures for langloc_para tests."""

from pathlib import Path

import pandas as pd
import pytest


# One localizer run: cue screens, repeated HNW / ENW stimuli, single-event NSOM / HF / EF trials
LOCALIZER_LOG = [
    ("FIX", 0.0),
    ("HNW_instr", 2.0),
    ("HNW", 4.0),
    ("HNW", 6.0),
    ("HNW", 8.0),
    ("HNW", 10.0),
    ("FIX", 20.0),
    ("NSOM", 22.0),
    ("NSOM", 26.0),
    ("HF", 38.0),
    ("EF", 52.0),
    ("ENW_instr", 64.0),
    ("ENW", 66.0),
    ("ENW", 68.0),
    ("ENW", 70.0),
    ("FIX", 80.0),
    ("HNW_instr", 82.0),
    ("HNW", 84.0),
    ("HNW", 86.0),
    ("ENW_instr", 98.0),
    ("ENW", 100.0),
    ("ENW", 102.0),
    ("FIX", 114.0),
]

LOCALIZER_ONSETS = [
    (4.0, 1),
    (22.0, 3),
    (26.0, 3),
    (38.0, 4),
    (52.0, 5),
    (66.0, 2),
    (84.0, 1),
    (100.0, 2),
]

LOCALIZER_DURATIONS = {"HNW": 17, "ENW": 18, "NSOM": 12, "HF": 14, "EF": 14}

LOCALIZER_PARA = (
    "#onsets\n"
    "4 1\n"
    "22 3\n"
    "26 3\n"
    "38 4\n"
    "52 5\n"
    "66 2\n"
    "84 1\n"
    "100 2\n"
    "#names\n"
    "HNW ENW NSOM HF EF\n"
    "#durations\n"
    "17 18 12 14 14\n"
)

SCENARIO_A = [
    ("FIX", 0),
    ("HNW", 1),
    ("HNW", 2),
    ("HNW", 3),
    ("FIX", 10),
    ("NSOM", 12),
    ("NSOM", 20),
]


@pytest.fixture
def localizer_log():
    return list(LOCALIZER_LOG)


@pytest.fixture
def scenario_a():
    return list(SCENARIO_A)


def write_events_tsv(path: Path, events, extra_cols: bool = True) -> Path:
    """Write (label, onset) pairs as a BIDS-like events.tsv."""
    df = pd.DataFrame(events, columns=["trial_type", "onset"])
    if extra_cols:
        df["duration"] = 1.0
        df = df[["onset", "duration", "trial_type"]]
    path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(path, sep="\t", index=False)
    return path


@pytest.fixture
def events_tsv(tmp_path, localizer_log) -> Path:
    return write_events_tsv(tmp_path / "sub-01_task-langloc_run-1_events.tsv", localizer_log)


@pytest.fixture
def events_root(tmp_path, localizer_log, scenario_a) -> Path:
    """
    events/
      sub-01/ses-01/func/sub-01_ses-01_task-langloc_run-1_events.tsv
      sub-01/ses-01/func/sub-01_ses-01_task-langloc_run-2_events.tsv
      sub-01/ses-02/func/sub-01_ses-02_task-langloc_run-1_events.tsv
      sub-02/func/sub-02_task-langloc_events.tsv
      sub-03/            (no events)
    """
    root = tmp_path / "events"
    func1 = root / "sub-01" / "ses-01" / "func"
    write_events_tsv(func1 / "sub-01_ses-01_task-langloc_run-1_events.tsv", localizer_log)
    write_events_tsv(func1 / "sub-01_ses-01_task-langloc_run-2_events.tsv", scenario_a)
    write_events_tsv(
        root / "sub-01" / "ses-02" / "func" / "sub-01_ses-02_task-langloc_run-1_events.tsv", scenario_a
    )
    write_events_tsv(root / "sub-02" / "func" / "sub-02_task-langloc_events.tsv", scenario_a)
    (root / "sub-03").mkdir(parents=True)
    return root
