from __future__ import annotations
import pytest

from casemark.pre_tokenizers.casing_prefix import CasingPrefixPreTokenizer
from casemark.text.normalized import NormalizedText
from casemark.text.pretokenized import PreTokenizedText


def _tuples(splits):
    return [s.as_tuple() for s in splits]


def test_single_initial_segment():
    p = PreTokenizedText("Hello world")
    assert len(p) == 1
    assert _tuples(p.get_splits()) == [("Hello world", (0, 11))]


def test_normalized_referential_offsets():
    p = PreTokenizedText("Hello world")
    CasingPrefixPreTokenizer().pre_tokenize(p)
    assert _tuples(p.get_splits("normalized")) == [("[CAP] hello", (0, 11)), ("world", (11, 16))]
    assert _tuples(p.get_splits("normalized", "byte")) == [("[CAP] hello", (0, 11)), ("world", (11, 16))]
    # byte widths follow the current text, not the original
    q = PreTokenizedText("É b")
    CasingPrefixPreTokenizer().pre_tokenize(q)
    assert _tuples(q.get_splits("normalized", "byte")) == [("[CAP] é", (0, 8)), ("b", (8, 9))]


def test_split_drops_empty_pieces():
    p = PreTokenizedText("ab")
    p.split(lambda i, seg: [seg.slice((0, 1)), NormalizedText(""), seg.slice((1, 2))])
    assert _tuples(p.get_splits()) == [("a", (0, 1)), ("b", (1, 2))]


def test_split_error_leaves_segments_untouched():
    p = PreTokenizedText("ab")
    before = list(p.segments)

    def boom(i, seg):
        raise RuntimeError("nope")

    with pytest.raises(RuntimeError):
        p.split(boom)
    assert p.segments == before


def test_unknown_offset_kinds_are_rejected():
    p = PreTokenizedText("x")
    with pytest.raises(ValueError):
        p.get_splits("source")
    with pytest.raises(ValueError):
        p.get_splits("original", "word")


def test_needs_root_text():
    sliced = NormalizedText("a b").slice((2, 3))
    with pytest.raises(ValueError):
        PreTokenizedText(sliced)
