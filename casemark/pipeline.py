"""
Does:
    Runs the casing components the way a tokenization pipeline does: normalizer over the
    whole input first, then the pre-tokenizer over the normalized text.
Outputs:
    list[Split] whose offsets always reference the raw input.
Notes:
    - The normalizer rewrites the whole text in one replace, so after it every character
      maps back to the full input span. Word-level offsets need the pre-tokenizer alone.
    - The normalizer is not idempotent; a pipeline must not run it twice on the same text.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from casemark.config import Config
from casemark.normalizers.casing_prefix import CasingPrefixNormalizer
from casemark.pre_tokenizers.casing_prefix import CasingPrefixPreTokenizer
from casemark.text.normalized import NormalizedText
from casemark.text.pretokenized import PreTokenizedText
from casemark.trace.recorder import TraceRecorder
from casemark.types import OffsetType, Split

_LOG = logging.getLogger(__name__)


class Pipeline:
    def __init__(
        self,
        normalizer: Optional[CasingPrefixNormalizer] = None,
        pre_tokenizer: Optional[CasingPrefixPreTokenizer] = None,
        *,
        recorder: Optional[TraceRecorder] = None,
    ) -> None:
        self.normalizer = normalizer
        self.pre_tokenizer = pre_tokenizer
        self.recorder = recorder

    @classmethod
    def from_config(cls, cfg: Config, *, recorder: Optional[TraceRecorder] = None) -> "Pipeline":
        if recorder is None and cfg.logging.trace_path is not None:
            recorder = TraceRecorder(
                str(cfg.logging.trace_path),
                components=cfg.pipeline.model_dump(),
            )
        return cls(cfg.pipeline.normalizer, cfg.pipeline.pre_tokenizer, recorder=recorder)

    def normalize_str(self, text: str) -> str:
        normalized = NormalizedText(text)
        if self.normalizer is not None:
            self.normalizer.normalize(normalized)
        return normalized.get()

    def run(self, text: str, offset_type: OffsetType = "char") -> List[Split]:
        normalized = NormalizedText(text)
        if self.normalizer is not None:
            self.normalizer.normalize(normalized)
        pretok = PreTokenizedText(normalized)
        if self.pre_tokenizer is not None:
            self.pre_tokenizer.pre_tokenize(pretok)
        splits = pretok.get_splits("original", offset_type)

        if self.recorder is not None:
            self.recorder.record_run(text, splits, offset_type)
        _LOG.debug("run: %d chars -> %d split(s)", len(text), len(splits))
        return splits
