from dataclasses import dataclass
from typing import List, Protocol, Sequence

# Minimal contract for detection backends; the driver never sees engine types.


@dataclass(frozen=True)
class ConfidenceEntry:
    language: str
    score: float


@dataclass(frozen=True)
class Segment:
    """A span of UTF-8 bytes ``[start, end)`` attributed to one language."""

    start: int
    end: int
    language: str

    def slice(self, text: str) -> str:
        return text.encode("utf-8")[self.start : self.end].decode("utf-8")


Distribution = List[ConfidenceEntry]


class DetectorProtocol(Protocol):
    def confidence_distribution(self, text: str) -> Distribution: ...

    def confidence_distribution_batch(self, texts: Sequence[str]) -> List[Distribution]: ...

    def multi_segment_detect(self, text: str) -> List[Segment]: ...
