# casemark/trace/recorder.py
"""
Does:
    JSONL trace of a pipeline session: one "session_start" row naming the components,
    one "run" row per Pipeline.run, one "session_end" row with the run count.
Rows:
    session_start  {"ts", "event", "session", "components": {...}}
    run            {"ts", "event", "session", "chars_in", "words", "marked",
                    "casings": {casing: count}, "splits", "offset_type"}
    session_end    {"ts", "event", "session", "runs"}
Notes:
    - The run row is computed here from the raw input, so it counts the casing classes
      of the input words even when only the normalizer is configured.
    - The file is opened per row; several sessions can append to the same file.
"""

from __future__ import annotations

import json
import os
import uuid
from collections import Counter
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from casemark.casing.classifier import classify, find_words
from casemark.types import Casing, OffsetType, Split


@dataclass(frozen=True)
class RunTrace:
    chars_in: int
    words: int
    marked: int  # words that got a [CAP] / [ALLCAPS] / [MIXED] marker
    casings: Dict[Casing, int] = field(default_factory=dict)
    splits: int = 0
    offset_type: OffsetType = "char"

    @classmethod
    def from_run(cls, text: str, splits: List[Split], offset_type: OffsetType) -> "RunTrace":
        processed = [classify(w.text) for w in find_words(text)]
        casings = Counter(p.casing for p in processed)
        return cls(
            chars_in=len(text),
            words=len(processed),
            marked=sum(1 for p in processed if p.has_marker),
            casings=dict(sorted(casings.items())),
            splits=len(splits),
            offset_type=offset_type,
        )


class TraceRecorder:
    def __init__(
        self,
        out_path: str,
        *,
        session: Optional[str] = None,
        components: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.out_path = out_path
        self.session = session or uuid.uuid4().hex
        self.runs = 0
        os.makedirs(os.path.dirname(os.path.abspath(out_path)), exist_ok=True)
        self._write("session_start", components=components or {})

    def _write(self, event: str, **payload: Any) -> None:
        row = {
            "ts": datetime.now(timezone.utc).isoformat(timespec="milliseconds"),
            "event": event,
            "session": self.session,
            **payload,
        }
        with open(self.out_path, "a", encoding="utf-8") as f:
            f.write(json.dumps(row, ensure_ascii=False) + "\n")

    def record_run(self, text: str, splits: List[Split], offset_type: OffsetType) -> RunTrace:
        trace = RunTrace.from_run(text, splits, offset_type)
        self.runs += 1
        self._write("run", **asdict(trace))
        return trace

    def close(self) -> None:
        self._write("session_end", runs=self.runs)
