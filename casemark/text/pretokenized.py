from __future__ import annotations

import logging
from typing import Callable, List, Union

from casemark.text.normalized import NormalizedText
from casemark.types import OffsetReferential, OffsetType, Split

_LOG = logging.getLogger(__name__)

SplitFn = Callable[[int, NormalizedText], List[NormalizedText]]


def _byte_positions(text: str) -> List[int]:
    """pos[i] = UTF-8 byte offset of char i; pos[len(text)] = total byte length."""
    pos = [0]
    for ch in text:
        pos.append(pos[-1] + len(ch.encode("utf-8")))
    return pos


class PreTokenizedText:
    """
    Ordered, offset-tracked segments of one original input.

    Every segment is a NormalizedText whose offsets point into `original`,
    whatever normalizer or pre-tokenizer produced it.
    """

    def __init__(self, text: Union[str, NormalizedText]) -> None:
        if isinstance(text, NormalizedText):
            if text.shift != 0:
                raise ValueError("PreTokenizedText needs a root NormalizedText, not a slice")
            self.original = text.original
            self.segments: List[NormalizedText] = [text]
        else:
            self.original = text
            self.segments = [NormalizedText(text)]

    def __len__(self) -> int:
        return len(self.segments)

    def split(self, fn: SplitFn) -> None:
        """
        Replace each segment by fn(index, segment), in order. Empty results are dropped.
        Nothing is committed unless fn succeeds for every segment.
        """
        new_segments: List[NormalizedText] = []
        for i, segment in enumerate(self.segments):
            for piece in fn(i, segment):
                if not piece.is_empty():
                    new_segments.append(piece)
        _LOG.debug("split: %d segment(s) -> %d", len(self.segments), len(new_segments))
        self.segments = new_segments

    def get_splits(
        self,
        offset_referential: OffsetReferential = "original",
        offset_type: OffsetType = "char",
    ) -> List[Split]:
        if offset_referential not in ("original", "normalized"):
            raise ValueError(f"unknown offset referential: {offset_referential!r}")
        if offset_type not in ("char", "byte"):
            raise ValueError(f"unknown offset type: {offset_type!r}")

        out: List[Split] = []
        if offset_referential == "original":
            pos = _byte_positions(self.original) if offset_type == "byte" else None
            for seg in self.segments:
                start, end = seg.offsets("original")
                if pos is not None:
                    start, end = pos[start], pos[end]
                out.append(Split(text=seg.get(), offsets=(start, end)))
            return out

        # normalized: offsets inside the concatenation of the segments' current texts
        cursor = 0
        for seg in self.segments:
            text = seg.get()
            width = len(text.encode("utf-8")) if offset_type == "byte" else len(text)
            out.append(Split(text=text, offsets=(cursor, cursor + width)))
            cursor += width
        return out
