"""
Write the PARA timing file:

    #onsets
    <onset> <condition_id>
    ...
    #names
    HNW ENW NSOM HF EF
    #durations
    <d1> <d2> <d3> <d4> <d5>
"""

from __future__ import annotations
import os
import stat
import tempfile
from pathlib import Path
from typing import Mapping, Sequence

from langloc_para.para.durations import round_half_away
from langloc_para.para.errors import FileWriteError
from langloc_para.para.onsets import BlockOnset
from langloc_para.static.para.config import (
    COND_NAMES,
    DURATIONS_HEADER,
    NAMES_HEADER,
    ONSETS_HEADER,
)


def format_para(
    onsets: Sequence[BlockOnset],
    durations: Mapping[str, int],
) -> str:
    """
    Render onsets and per-condition durations as PARA text.
    Onsets are rounded to whole seconds with the same rule as the
    durations (half away from zero); names and durations always follow
    COND_NAMES order.
    """
    lines = [ONSETS_HEADER]
    lines += [f"{round_half_away(o.onset_time):d} {o.condition_id:d}" for o in onsets]
    lines.append(NAMES_HEADER)
    lines.append(" ".join(COND_NAMES))
    lines.append(DURATIONS_HEADER)
    lines.append(" ".join(f"{durations[name]:.0f}" for name in COND_NAMES))
    return "\n".join(lines) + "\n"


def write_para_file(
    onsets: Sequence[BlockOnset],
    durations: Mapping[str, int],
    output_path: Path | str,
) -> Path:
    """
    Write the PARA file atomically.

    The text goes to a temporary file next to `output_path`, which is then
    moved over the target. On any failure the target is left as it was and
    the temporary file is removed.

    Raises
    ------
    FileWriteError
        If the output location cannot be written.
    """
    output_path = Path(output_path)
    text = format_para(onsets, durations)

    try:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{output_path.name}.", suffix=".tmp", dir=output_path.parent
        )
    except OSError as exc:
        raise FileWriteError(output_path) from exc

    replaced = False
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            f.write(text)
        os.chmod(tmp_name, _target_mode(output_path))  # mkstemp creates 0600
        os.replace(tmp_name, output_path)
        replaced = True
    except OSError as exc:
        raise FileWriteError(output_path) from exc
    finally:
        if not replaced:
            Path(tmp_name).unlink(missing_ok=True)

    return output_path


# ========= Private helpers =========
def _target_mode(output_path: Path) -> int:
    """Mode of the file being replaced, else the default for a new file under the umask."""
    if output_path.is_file():
        return stat.S_IMODE(output_path.stat().st_mode)
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask
