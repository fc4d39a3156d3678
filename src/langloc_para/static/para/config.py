"""
Global configuration parameters used throughout the langloc_para package.
"""

from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType

# Condition order used for ids, the #names line and the #durations line
COND_NAMES = ("HNW", "ENW", "NSOM", "HF", "EF")
COND_IDS = MappingProxyType({name: i for i, name in enumerate(COND_NAMES, start=1)})

# Event labels that never become onsets
FIX_LABEL = "FIX"
INSTR_SUFFIX = "_instr"      # e.g. 'HNW_instr' -> resets the HNW block
BARE_INSTR_SUFFIX = "instr"  # older marker format, dropped without reset

# Block duration (sec) for a condition with no observed transition
DEFAULT_DURATION = 15

# PARA output
DEFAULT_PARA_FILENAME = "para.txt"
ONSETS_HEADER = "#onsets"
NAMES_HEADER = "#names"
DURATIONS_HEADER = "#durations"

# BIDS-like events.tsv columns (same layout io.build_events reads)
LABEL_COL = "trial_type"
ONSET_COL = "onset"
EVENTS_GLOB = "*_events.tsv"


@dataclass
class ParaConfig:
    """
    Options for one PARA conversion.
    """
    output_path: Path = Path(DEFAULT_PARA_FILENAME)

    default_duration: int = DEFAULT_DURATION
    verbose: bool = True                 # print the summary after writing
    label_col: str = LABEL_COL
    onset_col: str = ONSET_COL

    def __post_init__(self):
        self.output_path = Path(self.output_path).resolve()
        self.default_duration = int(self.default_duration)
