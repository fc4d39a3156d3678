from __future__ import annotations
from pathlib import Path


class UnknownConditionError(ValueError):
    """Event label outside the condition vocabulary and the FIX / instruction markers."""

    def __init__(self, label: object, position: int):
        self.label = label
        self.position = position
        super().__init__(f"Unknown condition label {label!r} at event index {position}")


class FileWriteError(OSError):
    """PARA output path could not be written."""

    def __init__(self, path: Path | str):
        self.path = Path(path)
        super().__init__(f"Cannot open file {self.path} for writing")
