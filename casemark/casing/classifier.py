from __future__ import annotations

from typing import Any, Dict, List, Optional

import regex

from casemark.types import Casing, ProcessedWord, WordMatch

# Casing classifier shared by the normalizer and the pre-tokenizer.
# Rules (order matters, first match wins):
# 1) every char is an ASCII digit                      -> DIGITS      (unchanged)
# 2) every char is lowercase                           -> LOWERCASE   (unchanged)
# 3) first char uppercase, every remaining char lower  -> CAPITALIZED ([CAP])
# 4) every char uppercase                              -> ALLCAPS     ([ALLCAPS])
# 5) anything else                                     -> MIXED       ([MIXED])
# - Digit test is ASCII only; case tests are per-char Unicode (str.islower / str.isupper).
#   Digits and '_' are neither lower nor upper, so "ALL123CAPS" is MIXED.
# - A lone uppercase letter is CAPITALIZED: rule 3 holds vacuously for the empty remainder.
# - Words are `regex` \w runs (Unicode letters, marks, decimal digits, connector punctuation):
#   combining accents stay inside the word, superscripts like "²" do not.
# - Marker literals are part of the vocabulary contract; do not change them.

WORD_PATTERN = regex.compile(r"\w+")

TOKEN_CAPITALIZED = "[CAP]"
TOKEN_ALL_CAPS = "[ALLCAPS]"
TOKEN_MIXED_CASE = "[MIXED]"

MARKERS: Dict[Casing, str] = {
    "CAPITALIZED": TOKEN_CAPITALIZED,
    "ALLCAPS": TOKEN_ALL_CAPS,
    "MIXED": TOKEN_MIXED_CASE,
}


def _is_ascii_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def find_words(text: str, pattern: Any = WORD_PATTERN) -> List[WordMatch]:
    return [WordMatch(text=m.group(0), start=m.start(), end=m.end()) for m in pattern.finditer(text)]


def classify_casing(word: str) -> Casing:
    if all(_is_ascii_digit(c) for c in word):
        return "DIGITS"
    if all(c.islower() for c in word):
        return "LOWERCASE"
    if word[0].isupper() and all(c.islower() for c in word[1:]):
        return "CAPITALIZED"
    if all(c.isupper() for c in word):
        return "ALLCAPS"
    return "MIXED"


def marker_for(casing: Casing, separator: str = "") -> Optional[str]:
    """Marker literal for `casing` followed by `separator`, or None for unmarked casings."""
    marker = MARKERS.get(casing)
    if marker is None:
        return None
    return marker + separator


def classify(word: str, separator: str = "") -> ProcessedWord:
    """
    Classify one word and build its replacement text.

    `separator` goes between the marker and the lowercased word: "" for the
    whole-text normalizer, " " for the pre-tokenizer. Never raises.
    """
    casing = classify_casing(word)
    marker = marker_for(casing, separator)
    if marker is None:
        return ProcessedWord(casing=casing, text=word)
    return ProcessedWord(casing=casing, text=marker + word.lower())
