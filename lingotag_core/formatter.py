"""Delimited text records for classification outcomes.

Every method returns a list of records, each terminated by a single newline.
The formatter holds no state beyond its settings, so the same input always
produces the same output.
"""

from typing import List, Optional, Sequence

from .interfaces import ConfidenceEntry, Segment

UNKNOWN = "unknown"


def format_score(score: float) -> str:
    text = repr(float(score))
    if text.endswith(".0"):
        return text[:-2]
    return text


class ResultFormatter:
    def __init__(self, delimiter: str = "\t", confidence: Optional[float] = None, emit_all: bool = False):
        self.delimiter = delimiter
        self.confidence = confidence
        self.emit_all = emit_all

    def _record(self, *fields: str) -> str:
        return self.delimiter.join(fields) + "\n"

    def _qualifies(self, entry: ConfidenceEntry) -> bool:
        return self.confidence is None or entry.score >= self.confidence

    def rejected(self, line: Optional[str] = None) -> List[str]:
        if line is None:
            return [self._record(UNKNOWN, "")]
        return [self._record(UNKNOWN, "", line)]

    def distribution(self, entries: Sequence[ConfidenceEntry], line: Optional[str] = None) -> List[str]:
        candidates = entries if self.emit_all else entries[:1]
        records = []
        for entry in candidates:
            if not self._qualifies(entry):
                continue
            fields = [entry.language, format_score(entry.score)]
            if line is not None:
                fields.append(line)
            records.append(self._record(*fields))
        if not records:
            return self.rejected(line)
        return records

    def segments(self, segments: Sequence[Segment], text: str) -> List[str]:
        return [
            self._record(str(segment.start), str(segment.end), segment.language, segment.slice(text))
            for segment in segments
        ]
