"""
Block onset extraction for the language localizer.

HNW / ENW blocks log the same stimulus many times per block, so only the first
event of each block is a true onset. NSOM / HF / EF log one event per trial and
every event is kept. FIX and instruction-marker events are never onsets; they
end the current HNW / ENW block so the next event starts a new one.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List

from langloc_para.io.build_events import Event, as_events
from langloc_para.para.errors import UnknownConditionError
from langloc_para.static.para.config import (
    BARE_INSTR_SUFFIX,
    COND_IDS,
    FIX_LABEL,
    INSTR_SUFFIX,
)


@dataclass(frozen=True)
class BlockOnset:
    onset_time: float
    condition_id: int


@dataclass
class CollapseState:
    """Whether an HNW / ENW block has already emitted its first onset."""
    hnw_block_active: bool = False
    enw_block_active: bool = False

    def reset(self) -> None:
        self.hnw_block_active = False
        self.enw_block_active = False

    def reset_for(self, name: str) -> None:
        if name == "HNW":
            self.hnw_block_active = False
        elif name == "ENW":
            self.enw_block_active = False


class OnsetExtractor:
    """
    Single pass over the event list -> chronological list of BlockOnset.

    The collapse state lives on the extractor and is rebuilt for every
    `extract` call, so one instance can be reused across subjects.
    """

    def __init__(self):
        self.state = CollapseState()

    def extract(self, events: Iterable) -> List[BlockOnset]:
        self.state = CollapseState()
        onsets: List[BlockOnset] = []

        for position, event in enumerate(as_events(events)):
            onset = self._step(event, position)
            if onset is not None:
                onsets.append(onset)

        return onsets

    # ========= Private helpers =========
    def _step(self, event: Event, position: int) -> BlockOnset | None:
        label = event.condition_label
        if not isinstance(label, str):
            raise UnknownConditionError(label, position)

        if label == FIX_LABEL:
            self.state.reset()
            return None

        # 'HNW_instr' / 'ENW_instr': cue screen, re-arm that block type
        if label.endswith(INSTR_SUFFIX):
            self.state.reset_for(label[: -len(INSTR_SUFFIX)])
            return None

        # older marker format: dropped, state untouched
        if label.endswith(BARE_INSTR_SUFFIX):
            return None

        if label not in COND_IDS:
            raise UnknownConditionError(label, position)

        if label == "HNW":
            if self.state.hnw_block_active:
                return None
            self.state.hnw_block_active = True
        elif label == "ENW":
            if self.state.enw_block_active:
                return None
            self.state.enw_block_active = True

        return BlockOnset(event.onset_time, COND_IDS[label])


def extract_block_onsets(events: Iterable) -> List[BlockOnset]:
    """
    Extract true block onsets from an ordered event list.

    Parameters
    ----------
    events : iterable
        Event records in log order (see `io.build_events.as_events`).

    Returns
    -------
    list of BlockOnset
        Onsets in source order; condition ids are always 1..5.

    Raises
    ------
    UnknownConditionError
        On the first label that is neither a condition, FIX nor an instruction marker.
    """
    return OnsetExtractor().extract(events)
