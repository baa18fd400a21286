# casemark/__init__.py
"""
Does: Casing-aware prefix encoding. Words are case-folded and their casing is kept as
      marker tokens ([CAP], [ALLCAPS], [MIXED]) a subword vocabulary can learn.
Entry points:
  - CasingPrefixNormalizer: whole-text rewrite ("Hello WORLD" -> "[CAP]hello [ALLCAPS]world")
  - CasingPrefixPreTokenizer: per-word splits with offsets into the original input
  - Pipeline: both, driven by configs/*.yaml
"""

from __future__ import annotations

from casemark.casing.classifier import classify, classify_casing, find_words
from casemark.normalizers.casing_prefix import CasingPrefixNormalizer
from casemark.pipeline import Pipeline
from casemark.pre_tokenizers.casing_prefix import CasingPrefixPreTokenizer
from casemark.text.normalized import NormalizedText
from casemark.text.pretokenized import PreTokenizedText

__all__ = [
    "CasingPrefixNormalizer",
    "CasingPrefixPreTokenizer",
    "NormalizedText",
    "Pipeline",
    "PreTokenizedText",
    "classify",
    "classify_casing",
    "find_words",
]
