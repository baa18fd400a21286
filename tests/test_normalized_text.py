from __future__ import annotations
import re

import pytest

from casemark.text.normalized import NormalizedText


def test_replace_every_occurrence_and_align_to_replaced_range():
    n = NormalizedText("a-b-c")
    n.replace("-", "--")
    assert n.get() == "a--b--c"
    assert n.original == "a-b-c"
    dash = n.slice((1, 3))
    assert dash.get() == "--"
    assert dash.offsets() == (1, 2)
    assert n.slice((3, 4)).offsets() == (2, 3)


def test_replace_with_regex():
    n = NormalizedText("x1 y22 z")
    n.replace(re.compile(r"\d+"), "#")
    assert n.get() == "x# y# z"
    assert n.slice((4, 5)).offsets() == (4, 6)


def test_empty_pattern_is_noop():
    n = NormalizedText("abc")
    n.replace("", "zzz")
    n.replace(re.compile(r"q*"), "zzz")
    assert n.get() == "abc"


def test_replace_to_empty_drops_text_but_keeps_span():
    n = NormalizedText("!!!")
    n.replace("!!!", "")
    assert n.get() == ""
    assert n.is_empty()
    assert n.offsets() == (0, 3)


def test_slice_rejects_untranslatable_ranges():
    n = NormalizedText("hello")
    assert n.slice((0, 6)) is None
    assert n.slice((3, 1)) is None
    assert n.slice((2, 2)) is None
    assert n.slice((-1, 2)) is None


def test_slice_by_original_range_after_replace():
    n = NormalizedText("Hello world")
    n.replace("Hello", "[CAP]hello")
    assert n.get() == "[CAP]hello world"

    head = n.slice((0, 5), "original")
    assert head.get() == "[CAP]hello"
    assert head.offsets() == (0, 5)

    tail = n.slice((6, 11), "original")
    assert tail.get() == "world"
    assert tail.offsets() == (6, 11)

    # half of a replaced range maps to no current character
    assert n.slice((0, 2), "original") is None


def test_nested_slices_keep_root_offsets():
    n = NormalizedText("xx Hello")
    s = n.slice((3, 8))
    assert s.get() == "Hello"
    assert s.offsets() == (3, 8)
    assert s.offsets("normalized") == (0, 5)

    s2 = s.slice((1, 3))
    assert s2.get() == "el"
    assert s2.original == "el"
    assert s2.offsets() == (4, 6)


def test_alignments_must_cover_text():
    with pytest.raises(ValueError):
        NormalizedText("abc", normalized="ab", alignments=[(0, 1)])
