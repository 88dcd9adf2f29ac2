# converters/contracts.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence, Tuple


@dataclass(frozen=True)
class LineRecord:
    """A single line of the grid text file, 1-based line_no and raw text (no terminator)."""
    line_no: int
    text: str


@dataclass(frozen=True)
class DigitSubstitution:
    """Replace the first occurrence of `old` in the whole document with `new`."""
    old: str
    new: str


@dataclass(frozen=True)
class PatchConfig:
    """
    Digit patching applied to the assembled grid document.

    Substitutions run in order, each on the string produced by the previous one,
    and each touches only the first match in the entire document.
    """
    substitutions: Tuple[DigitSubstitution, ...] = (
        DigitSubstitution(old="3", new="2"),
        DigitSubstitution(old="4", new="3"),
    )


@dataclass(frozen=True)
class MoveSequence:
    """Assembled move string for a solution path."""
    moves: Sequence[str] = field(default_factory=tuple)
    text: str = ""  # space-separated, no trailing separator

    @property
    def count(self) -> int:
        return len(self.moves)
