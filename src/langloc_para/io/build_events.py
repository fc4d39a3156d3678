"""
Build the ordered event list (condition label + onset) that the PARA pipeline consumes.
Events can come from an in-memory table, a pandas DataFrame, or a BIDS-like events.tsv
(e.g. the *_events.tsv files written after converting the stimulus logs).
"""

from __future__ import annotations
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Sequence, Union
import pandas as pd

from langloc_para.static.para.config import LABEL_COL, ONSET_COL

PathLike = Union[str, Path]


@dataclass(frozen=True)
class Event:
    """One row of the trial log."""
    condition_label: str
    onset_time: float


def _to_event(record) -> Event:
    if isinstance(record, Event):
        return record

    if isinstance(record, Mapping):
        if "condition_label" in record and "onset_time" in record:
            return Event(record["condition_label"], float(record["onset_time"]))
        if LABEL_COL in record and ONSET_COL in record:
            return Event(record[LABEL_COL], float(record[ONSET_COL]))
        raise TypeError(f"Event mapping needs condition_label/onset_time keys, got {list(record)}")

    if hasattr(record, "condition_label") and hasattr(record, "onset_time"):
        return Event(record.condition_label, float(record.onset_time))

    if isinstance(record, tuple) and len(record) == 2:
        label, onset = record
        return Event(label, float(onset))

    raise TypeError(f"Cannot interpret {record!r} as an event record")


def as_events(records: Iterable) -> List[Event]:
    """
    Coerce an ordered iterable of event records into a list of Event.

    Accepted records: Event, objects with `condition_label` / `onset_time`
    attributes, mappings with those keys (or `trial_type` / `onset`), and
    `(label, onset)` tuples. Order is preserved.
    """
    return [_to_event(r) for r in records]


# -------------------------------------- 1 --------------------------------------
def events_from_rows(
    rows: Iterable[Sequence],
    label_index: int = 1,
    onset_index: int = 3,
) -> List[Event]:
    """
    Build events from a row table such as the localizer `results` array
    (one row per trial, label in the 2nd column and onset in the 4th).

    Parameters
    ----------
    rows : iterable of sequences
        One row per logged event, in chronological order.
    label_index, onset_index : int
        0-based column positions of the condition label and onset (sec).
    """
    return [Event(row[label_index], float(row[onset_index])) for row in rows]


# -------------------------------------- 2 --------------------------------------
def events_from_dataframe(
    df: pd.DataFrame,
    label_col: str = LABEL_COL,
    onset_col: str = ONSET_COL,
) -> List[Event]:
    """
    Build events from a DataFrame, keeping row order.

    Parameters
    ----------
    df : pd.DataFrame
        Events table with at least a label column and an onset column.
    label_col : str
        Column holding the condition label, by default 'trial_type'.
    onset_col : str
        Column holding the onset in seconds, by default 'onset'.
    """
    for col in (label_col, onset_col):
        if col not in df.columns:
            raise KeyError(f"Column '{col}' not found in events table (columns: {list(df.columns)})")

    labels = df[label_col].tolist()
    onsets = df[onset_col].astype(float).tolist()
    return [Event(label, onset) for label, onset in zip(labels, onsets)]


# -------------------------------------- 3 --------------------------------------
def read_events_tsv(
    tsv_path: PathLike,
    label_col: str = LABEL_COL,
    onset_col: str = ONSET_COL,
) -> List[Event]:
    """
    Read a BIDS-like events.tsv into the ordered event list.
    """
    tsv_path = Path(tsv_path)
    if not tsv_path.exists():
        raise FileNotFoundError(f"Events file not found: {tsv_path}")

    # keep labels as text ('NA'-like labels must not turn into NaN)
    df = pd.read_csv(tsv_path, sep="\t", dtype={label_col: str}, keep_default_na=False)
    return events_from_dataframe(df, label_col=label_col, onset_col=onset_col)
