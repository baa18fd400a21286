"""
Does:
    Offset-preserving casing prefixer. Each segment is cut into one sub-segment per word,
    and each sub-segment's text becomes the classified form ("[CAP] hello").
Inputs:
    PreTokenizedText (its segments are replaced in place).
Notes:
    - Offsets of an emitted sub-segment are the word's span in the ORIGINAL input; the
      text is longer than that span whenever a marker is added.
    - Gaps between words (spaces, punctuation) are dropped. A segment without any
      word character is kept as is.
    - Marker is followed by one space here ("[CAP] hello"); the normalizer glues it.
    - A slice that can't be mapped back raises RuntimeError; the segment list is left
      untouched (PreTokenizedText.split commits only on success).
"""

from __future__ import annotations

import logging
from typing import Any, List, Literal

import regex
from pydantic import BaseModel, ConfigDict, PrivateAttr

from casemark.casing.classifier import WORD_PATTERN, classify, find_words
from casemark.text.normalized import NormalizedText
from casemark.text.pretokenized import PreTokenizedText
from casemark.types import OffsetType, Split

_LOG = logging.getLogger(__name__)

MARKER_SEPARATOR = " "


class CasingPrefixPreTokenizer(BaseModel):
    type: Literal["CasingPrefix"] = "CasingPrefix"

    model_config = ConfigDict(extra="ignore")

    _pattern: Any = PrivateAttr(default_factory=lambda: regex.compile(WORD_PATTERN.pattern))

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self)

    def __hash__(self) -> int:
        return hash(type(self).__name__)

    def _split_segment(self, index: int, segment: NormalizedText) -> List[NormalizedText]:
        pieces: List[NormalizedText] = []
        for word in find_words(segment.get(), self._pattern):
            processed = classify(word.text, separator=MARKER_SEPARATOR)
            piece = segment.slice((word.start, word.end), "normalized")
            if piece is None:
                raise RuntimeError("Failed to slice normalized string")
            if processed.has_marker:
                piece.replace(word.text, processed.text)
            pieces.append(piece)

        if not pieces:
            _LOG.debug("segment %d: no word characters, kept as is", index)
            return [segment]
        return pieces

    def pre_tokenize(self, pretok: PreTokenizedText) -> None:
        pretok.split(self._split_segment)

    def pre_tokenize_str(self, text: str, offset_type: OffsetType = "char") -> List[Split]:
        pretok = PreTokenizedText(text)
        self.pre_tokenize(pretok)
        return pretok.get_splits("original", offset_type)

    def to_json(self) -> str:
        return self.model_dump_json()

    @classmethod
    def from_json(cls, data: str) -> "CasingPrefixPreTokenizer":
        return cls.model_validate_json(data)
