from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

# -----------------------
# Simple string enums
# -----------------------
Casing = Literal["DIGITS", "LOWERCASE", "CAPITALIZED", "ALLCAPS", "MIXED"]
OffsetReferential = Literal["original", "normalized"]
OffsetType = Literal["char", "byte"]

Offsets = tuple[int, int]  # [start, end)

# -----------------------
# Core data types
# -----------------------

@dataclass(frozen=True)
class WordMatch:
    """Maximal run of word characters; start/end are relative to the scanned text."""
    text: str
    start: int  # inclusive
    end: int    # exclusive


@dataclass(frozen=True)
class ProcessedWord:
    """
    Classifier output.
    Fields:
      casing: which casing predicate matched first
      text: the word unchanged (DIGITS / LOWERCASE) or marker + lowercased word
    """
    casing: Casing
    text: str

    @property
    def has_marker(self) -> bool:
        return self.casing not in ("DIGITS", "LOWERCASE")


@dataclass(frozen=True)
class Split:
    """One pre-tokenized piece: its current text and where it came from."""
    text: str
    offsets: Offsets

    def as_tuple(self) -> tuple[str, Offsets]:
        return (self.text, self.offsets)
