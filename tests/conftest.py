import logging
from concurrent.futures import ThreadPoolExecutor

import pytest

from lingotag_core.interfaces import ConfidenceEntry, Segment


class FakeDetector:
    """Scripted detector: returns canned distributions/segments and records every call."""

    def __init__(self, distributions=None, segments=None, default=(("en", 0.5),)):
        self.distributions = distributions or {}
        self.segments = segments or {}
        self.default = default
        self.calls = []
        self.batches = []

    def _lookup(self, text):
        return [ConfidenceEntry(code, score) for code, score in self.distributions.get(text, self.default)]

    def confidence_distribution(self, text):
        self.calls.append(text)
        return self._lookup(text)

    def confidence_distribution_batch(self, texts):
        self.batches.append(list(texts))
        with ThreadPoolExecutor(max_workers=4) as pool:
            return list(pool.map(self._lookup, texts))

    def multi_segment_detect(self, text):
        self.calls.append(text)
        return [Segment(start, end, code) for start, end, code in self.segments.get(text, [])]


@pytest.fixture
def make_detector():
    return FakeDetector


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)
