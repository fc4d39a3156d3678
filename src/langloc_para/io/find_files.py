from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union
import re

from langloc_para.static.para.config import EVENTS_GLOB

PathLike = Union[str, Path]


# ==================================================================
# Find subjects and their events.tsv files
# ==================================================================

def iter_subjects(events_root: Path | str) -> list[str]:
    """
    Return a sorted list of all subject IDs in the events folder.
    Example output: ["sub-01", "sub-02", "sub-03"]
    """
    events_root = Path(events_root)

    subjects = [
        d.name
        for d in events_root.glob("sub-*")
        if d.is_dir()
    ]

    return sorted(subjects)


def find_subject_events(
    events_root: Path | str,
    sub: str,
    pattern: str = EVENTS_GLOB,
) -> List[Path]:
    """
    Find all events TSVs for one subject, across every 'ses-*' directory.
        In each session (or the subject folder when there are no sessions)
        'func/' is searched first, then the folder itself.
        Example structure:
        ----------
        events/
          sub-01/
            ses-01/
              func/
                sub-01_ses-01_task-langloc_run-1_events.tsv
    """
    events_root = Path(events_root).resolve()
    if not str(sub).startswith("sub-"):
        sub = f"sub-{sub}"

    sub_dir = events_root / sub
    if not sub_dir.exists():
        raise FileNotFoundError(f"Subject directory not found: {sub_dir}")

    ses_dirs = sorted(d for d in sub_dir.glob("ses-*") if d.is_dir())

    found: List[Path] = []
    for base_dir in ses_dirs or [sub_dir]:
        found += _find_in_folder(base_dir, pattern)
    return found


def _find_in_folder(base_dir: Path, pattern: str) -> List[Path]:
    for search_dir in (base_dir / "func", base_dir):
        found = sorted(p for p in search_dir.glob(pattern) if p.is_file())
        if found:
            return found
    return []


def build_subject_events_dict(
    events_root: PathLike,
    *,
    subjects: Optional[Sequence[str]] = None,
    pattern: str = EVENTS_GLOB,
) -> Dict[str, List[Path]]:
    """
    Build a dict {sub: [events1.tsv, events2.tsv, ...]} for each subject.

    Parameters
    ----------
    events_root : path-like
        Root folder holding the sub-* directories.
    subjects : optional sequence of subject IDs (e.g. ["sub-01", "sub-02"]).
        If None, subjects are inferred via iter_subjects().
    pattern : str
        Glob for events files, by default '*_events.tsv'.
    """
    events_root = Path(events_root).resolve()

    if subjects is None:
        subjects = iter_subjects(events_root)

    subject_events: Dict[str, List[Path]] = {}
    for sub in subjects:
        try:
            files = find_subject_events(events_root, sub, pattern=pattern)
        except FileNotFoundError:
            print(f"⚠️ No folder found for {sub} in {events_root}")
            continue

        if len(files) == 0:
            print(f"⚠️ Warning: No events files found for {sub}")
            continue
        subject_events[sub] = files

    return subject_events


# ==================================================================
# Helpers to extract 'sub-*' and 'ses-*' from paths
# ==================================================================

_SES_RE = re.compile(r"^ses-[^/]+$")
_SUB_RE = re.compile(r"^sub-[^/]+$")


def get_sub_ses_from_path(p: Path) -> tuple[Optional[str], Optional[str]]:
    """
    Infer 'sub-*' and 'ses-*' (if any) from the directory components of a path.

    Returns
    -------
    (sub, ses)
        sub: e.g. 'sub-01' or None
        ses: e.g. 'ses-01' or None
    """
    sub = None
    ses = None
    for parent in Path(p).parents:
        name = parent.name
        if _SUB_RE.match(name) and sub is None:
            sub = name
        elif _SES_RE.match(name) and ses is None:
            ses = name
    return sub, ses


def para_name_for(events_path: Path) -> str:
    """'sub-01_task-langloc_run-1_events.tsv' -> 'sub-01_task-langloc_run-1_para.txt'"""
    stem = Path(events_path).name
    for suffix in (".tsv", ".txt", ".csv"):
        if stem.endswith(suffix):
            stem = stem[: -len(suffix)]
            break
    if stem.endswith("_events"):
        stem = stem[: -len("_events")]
    return f"{stem}_para.txt"
