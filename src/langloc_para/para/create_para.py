"""
Extract onsets and create the PARA file for the language localizer.

Intended usage:
---------------
from langloc_para.para.create_para import create_para_file

result = create_para_file(events, "sub-01_para.txt")
result.durations   # {'HNW': 16, 'ENW': 16, 'NSOM': 15, 'HF': 14, 'EF': 15}

or for a whole events folder:

results = create_para_for_all("derivatives/events", "derivatives/para")
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Union

from langloc_para.io.build_events import read_events_tsv
from langloc_para.io.find_files import (
    build_subject_events_dict,
    get_sub_ses_from_path,
    para_name_for,
)
from langloc_para.io.write_para import write_para_file
from langloc_para.para.durations import estimate_durations
from langloc_para.para.onsets import BlockOnset, extract_block_onsets
from langloc_para.para.summary import print_para_summary
from langloc_para.static.para.config import (
    DEFAULT_DURATION,
    DEFAULT_PARA_FILENAME,
    EVENTS_GLOB,
    ParaConfig,
)

PathLike = Union[str, Path]


@dataclass
class ParaResult:
    output_path: Path
    onsets: List[BlockOnset]
    durations: Dict[str, int]


# -------------------------------------- 1 --------------------------------------
def create_para_file(
    events: Iterable,
    output_filename: PathLike = DEFAULT_PARA_FILENAME,
    *,
    default_duration: int = DEFAULT_DURATION,
    verbose: bool = True,
) -> ParaResult:
    """
    Extract block onsets from one subject's events and write the PARA file.

    Parameters
    ----------
    events : iterable
        Ordered event records (Event, (label, onset) tuples, mappings...).
    output_filename : path-like
        PARA file to write, by default 'para.txt'.
    default_duration : int
        Duration (sec) for conditions without an observed block transition.
    verbose : bool
        If True, print the onset / duration summary after writing.

    Returns
    -------
    ParaResult
        Written path, extracted onsets and per-condition durations.

    Raises
    ------
    UnknownConditionError
        Malformed label in `events`; nothing is written.
    FileWriteError
        `output_filename` cannot be written.
    """
    onsets = extract_block_onsets(events)
    durations = estimate_durations(onsets, default=default_duration)

    output_path = write_para_file(onsets, durations, output_filename)

    if verbose:
        print_para_summary(output_path, onsets, durations)

    return ParaResult(output_path=output_path, onsets=onsets, durations=durations)


# -------------------------------------- 2 --------------------------------------
def create_para_from_tsv(
    events_tsv: PathLike,
    output_filename: Optional[PathLike] = None,
    config: Optional[ParaConfig] = None,
) -> ParaResult:
    """
    Read a BIDS-like events.tsv and write its PARA file.

    If `output_filename` is None, the PARA file is written next to the
    events file ('..._events.tsv' -> '..._para.txt').
    """
    events_tsv = Path(events_tsv)
    if output_filename is None:
        output_filename = events_tsv.parent / para_name_for(events_tsv)
    if config is None:
        config = ParaConfig(output_path=output_filename)
    else:
        config = replace(config, output_path=output_filename)

    events = read_events_tsv(events_tsv, label_col=config.label_col, onset_col=config.onset_col)
    return create_para_file(
        events,
        config.output_path,
        default_duration=config.default_duration,
        verbose=config.verbose,
    )


# -------------------------------------- 3 --------------------------------------
def create_para_for_all(
    events_root: PathLike,
    out_dir: PathLike,
    *,
    subjects: Optional[Sequence[str]] = None,
    pattern: str = EVENTS_GLOB,
    config: Optional[ParaConfig] = None,
) -> Dict[str, List[ParaResult]]:
    """
    Write one PARA file per events TSV for every subject under `events_root`.

    Outputs mirror the input layout: out_dir/sub-XX[/ses-YY]/<name>_para.txt.
    Subjects are processed one after another; a malformed log stops the batch.

    Returns
    -------
    dict
        {sub: [ParaResult, ...]}
    """
    events_root = Path(events_root).resolve()
    out_dir = Path(out_dir).resolve()
    if config is None:
        config = ParaConfig()

    subject_events = build_subject_events_dict(events_root, subjects=subjects, pattern=pattern)
    print(f"Creating PARA files for {len(subject_events)} subjects...")

    results: Dict[str, List[ParaResult]] = {}
    for sub, files in subject_events.items():
        results[sub] = []
        for events_tsv in files:
            # only folders below events_root name the session
            _, ses = get_sub_ses_from_path(events_tsv.relative_to(events_root))
            target_dir = out_dir / sub / ses if ses else out_dir / sub
            target_dir.mkdir(parents=True, exist_ok=True)

            print(f"[create_para_for_all] {sub}: {events_tsv.name}")
            results[sub].append(
                create_para_from_tsv(
                    events_tsv,
                    target_dir / para_name_for(events_tsv),
                    config=config,
                )
            )

    print(f"✅ Wrote {sum(len(r) for r in results.values())} PARA files to {out_dir}")
    return results
