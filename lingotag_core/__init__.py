"""
Lightweight core for the classification driver: data model, detector contract,
length gate, input sources and result formatting. No third-party dependencies.
"""

from .errors import (
    IncompatibleModes,
    InvalidDetectorConfig,
    InvalidEncoding,
    LingotagError,
    UnsupportedLanguageCode,
)
from .formatter import UNKNOWN, ResultFormatter, format_score
from .gate import count_alphabetic, passes
from .interfaces import ConfidenceEntry, DetectorProtocol, Distribution, Segment
from .sources import DecodedLine, join_arguments, read_document, read_lines, valid_lines

__all__ = [
    "ConfidenceEntry",
    "count_alphabetic",
    "DecodedLine",
    "DetectorProtocol",
    "Distribution",
    "format_score",
    "IncompatibleModes",
    "InvalidDetectorConfig",
    "InvalidEncoding",
    "join_arguments",
    "LingotagError",
    "passes",
    "read_document",
    "read_lines",
    "ResultFormatter",
    "Segment",
    "UNKNOWN",
    "UnsupportedLanguageCode",
    "valid_lines",
]
