from __future__ import annotations

import json
import os
from datetime import datetime

from casemark.trace.recorder import RunTrace, TraceRecorder
from casemark.types import Split

BASE = {"ts", "event", "session"}


def _rows(path):
    with open(path, "r", encoding="utf-8") as f:
        return [json.loads(ln) for ln in f if ln.strip()]


def test_trace_row_schema(tmp_path):
    log_path = tmp_path / "artifacts" / "logs" / "casemark_traces.jsonl"

    rec = TraceRecorder(str(log_path), components={"pre_tokenizer": {"type": "CasingPrefix"}})
    got = rec.record_run("Hi THERE", [Split("[CAP] hi", (0, 2)), Split("[ALLCAPS] there", (3, 8))], "char")
    rec.close()

    assert os.path.exists(log_path)
    rows = _rows(log_path)
    assert len(rows) == 3

    for row in rows:
        assert BASE <= set(row.keys())
        assert datetime.fromisoformat(row["ts"]).utcoffset().total_seconds() == 0
        assert row["session"] == rec.session

    assert set(rows[0]) == BASE | {"components"}
    assert rows[0]["components"]["pre_tokenizer"] == {"type": "CasingPrefix"}
    assert set(rows[1]) == BASE | {"chars_in", "words", "marked", "casings", "splits", "offset_type"}
    assert rows[1]["casings"] == {"ALLCAPS": 1, "CAPITALIZED": 1}
    assert rows[1]["marked"] == got.marked == 2
    assert rows[2] == {"ts": rows[2]["ts"], "event": "session_end", "session": rec.session, "runs": 1}


def test_run_trace_counts_input_words():
    t = RunTrace.from_run("ALL123CAPS, 7 ok Ok", [], "byte")
    assert t.chars_in == 19
    assert t.words == 4
    assert t.marked == 2
    assert t.casings == {"CAPITALIZED": 1, "DIGITS": 1, "LOWERCASE": 1, "MIXED": 1}
    assert t.splits == 0
    assert t.offset_type == "byte"

    empty = RunTrace.from_run("", [], "char")
    assert (empty.words, empty.marked, empty.casings) == (0, 0, {})


def test_recorders_append_to_same_file(tmp_path):
    p = tmp_path / "t.jsonl"
    a = TraceRecorder(str(p))
    b = TraceRecorder(str(p))
    assert a.session != b.session
    a.close()
    rows = _rows(p)
    assert [r["event"] for r in rows] == ["session_start", "session_start", "session_end"]
    assert rows[2] == {"ts": rows[2]["ts"], "event": "session_end", "session": a.session, "runs": 0}
