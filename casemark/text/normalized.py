from __future__ import annotations

from typing import List, Optional, Pattern, Tuple, Union

from casemark.types import OffsetReferential, Offsets

# Text with an edit history.
# Rules:
# - Offsets are character indices, end exclusive. Byte offsets are derived on demand
#   (see casemark.text.pretokenized).
# - Every character of the current text carries the [start, end) range of the
#   original characters it came from ("alignment"). Alignments are relative to
#   `original`; `shift` places `original` inside the root input, so slices keep
#   pointing at the root text and not at their own local frame.
# - replace() maps every inserted character onto the union of the original ranges
#   the removed characters covered.

Alignment = Tuple[int, int]


class NormalizedText:
    def __init__(
        self,
        original: str,
        *,
        normalized: Optional[str] = None,
        alignments: Optional[List[Alignment]] = None,
        shift: int = 0,
    ) -> None:
        self.original = original
        self.normalized = original if normalized is None else normalized
        if alignments is None:
            alignments = [(i, i + 1) for i in range(len(self.normalized))]
        if len(alignments) != len(self.normalized):
            raise ValueError(
                f"alignments ({len(alignments)}) must cover every normalized char ({len(self.normalized)})"
            )
        self.alignments = alignments
        self.shift = shift

    def __repr__(self) -> str:
        return f"NormalizedText(original={self.original!r}, normalized={self.normalized!r}, shift={self.shift})"

    def __len__(self) -> int:
        return len(self.normalized)

    def get(self) -> str:
        return self.normalized

    def is_empty(self) -> bool:
        return not self.normalized

    def offsets(self, referential: OffsetReferential = "original") -> Offsets:
        """Char span of this text: in the root original input, or in its own current text."""
        if referential == "normalized":
            return (0, len(self.normalized))
        if not self.alignments:
            return (self.shift, self.shift + len(self.original))
        return (self.shift + self.alignments[0][0], self.shift + self.alignments[-1][1])

    def _find_spans(self, pattern: Union[str, Pattern[str]]) -> List[Tuple[int, int]]:
        text = self.normalized
        if isinstance(pattern, str):
            if not pattern:
                return []
            spans: List[Tuple[int, int]] = []
            i = text.find(pattern)
            while i != -1:
                spans.append((i, i + len(pattern)))
                i = text.find(pattern, i + len(pattern))
            return spans
        return [(m.start(), m.end()) for m in pattern.finditer(text) if m.end() > m.start()]

    def replace(self, pattern: Union[str, Pattern[str]], content: str) -> None:
        """
        Replace every non-overlapping occurrence of `pattern` in the current text.
        An empty pattern (or a regex that only matches empty strings) is a no-op.
        """
        spans = self._find_spans(pattern)
        if not spans:
            return

        text = self.normalized
        pieces: List[str] = []
        aligns: List[Alignment] = []
        last = 0
        for a, b in spans:
            pieces.append(text[last:a])
            aligns.extend(self.alignments[last:a])
            covered = (self.alignments[a][0], self.alignments[b - 1][1])
            pieces.append(content)
            aligns.extend([covered] * len(content))
            last = b
        pieces.append(text[last:])
        aligns.extend(self.alignments[last:])

        self.normalized = "".join(pieces)
        self.alignments = aligns

    def _normalized_range(self, start: int, end: int, referential: OffsetReferential) -> Optional[Tuple[int, int]]:
        if referential == "normalized":
            if not (0 <= start < end <= len(self.normalized)):
                return None
            return (start, end)
        if not (0 <= start < end <= len(self.original)):
            return None
        inside = [i for i, (s, e) in enumerate(self.alignments) if s >= start and e <= end]
        if not inside:
            return None
        return (inside[0], inside[-1] + 1)

    def slice(self, rng: Tuple[int, int], referential: OffsetReferential = "normalized") -> Optional["NormalizedText"]:
        """
        Sub-view over a local range, in this text's current or original frame.
        Returns None when the range can't be translated (empty, reversed, out of bounds,
        or an original range that no current character falls into).
        """
        found = self._normalized_range(rng[0], rng[1], referential)
        if found is None:
            return None
        n_start, n_end = found
        aligns = self.alignments[n_start:n_end]
        o_start = min(s for s, _ in aligns)
        o_end = max(e for _, e in aligns)
        return NormalizedText(
            self.original[o_start:o_end],
            normalized=self.normalized[n_start:n_end],
            alignments=[(s - o_start, e - o_start) for s, e in aligns],
            shift=self.shift + o_start,
        )
