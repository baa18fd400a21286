"""
Does:
    Whole-text casing prefixer. Rebuilds the text from its words only:
    "Hello, WORLD!" -> "[CAP]hello [ALLCAPS]world".
Inputs:
    NormalizedText (mutated in place through a single full-text replace).
Notes:
    - Everything that is not a word match (spaces, punctuation, symbols) is dropped;
      words are joined with exactly one ASCII space. No matches -> "".
    - Markers are glued to the word ("[CAP]hello"), unlike the pre-tokenizer form.
    - Not idempotent: "[CAP]hello" re-normalizes to "[ALLCAPS]cap hello".
    - No configurable fields. Serializes as {"type": "CasingPrefix"}; loading always
      builds a fresh instance with a freshly compiled pattern.
"""

from __future__ import annotations

import logging
from typing import Any, Literal

import regex
from pydantic import BaseModel, ConfigDict, PrivateAttr

from casemark.casing.classifier import WORD_PATTERN, classify, find_words
from casemark.text.normalized import NormalizedText

_LOG = logging.getLogger(__name__)


class CasingPrefixNormalizer(BaseModel):
    type: Literal["CasingPrefix"] = "CasingPrefix"

    model_config = ConfigDict(extra="ignore")

    _pattern: Any = PrivateAttr(default_factory=lambda: regex.compile(WORD_PATTERN.pattern))

    def __eq__(self, other: object) -> bool:
        # compiled pattern is an implementation detail; same type means same behavior
        return type(other) is type(self)

    def __hash__(self) -> int:
        return hash(type(self).__name__)

    def normalize(self, normalized: NormalizedText) -> None:
        text = normalized.get()
        words = find_words(text, self._pattern)
        processed = " ".join(classify(w.text).text for w in words)
        normalized.replace(text, processed)
        if normalized.get() != processed:
            raise RuntimeError("Failed to replace the full text of the normalized string")
        _LOG.debug("normalize: %d word(s), %d -> %d chars", len(words), len(text), len(processed))

    def normalize_str(self, text: str) -> str:
        normalized = NormalizedText(text)
        self.normalize(normalized)
        return normalized.get()

    def to_json(self) -> str:
        return self.model_dump_json()

    @classmethod
    def from_json(cls, data: str) -> "CasingPrefixNormalizer":
        return cls.model_validate_json(data)
