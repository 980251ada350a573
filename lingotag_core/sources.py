"""Text units gathered from argv or a binary stdin stream."""

import logging
from dataclasses import dataclass
from typing import BinaryIO, Iterable, Iterator, Optional, Sequence

from .errors import InvalidEncoding

LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class DecodedLine:
    """Outcome of decoding one raw stdin line: either ``text`` or ``error`` is set."""

    number: int
    text: Optional[str] = None
    error: Optional[UnicodeDecodeError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def join_arguments(words: Sequence[str]) -> str:
    return " ".join(words)


def read_document(stream: BinaryIO) -> str:
    data = stream.read()
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidEncoding(exc) from exc


def _strip_terminator(raw: bytes) -> bytes:
    if raw.endswith(b"\n"):
        raw = raw[:-1]
        if raw.endswith(b"\r"):
            raw = raw[:-1]
    return raw


def read_lines(stream: BinaryIO) -> Iterator[DecodedLine]:
    for number, raw in enumerate(stream, start=1):
        try:
            yield DecodedLine(number=number, text=_strip_terminator(raw).decode("utf-8"))
        except UnicodeDecodeError as exc:
            yield DecodedLine(number=number, error=exc)


def valid_lines(decoded: Iterable[DecodedLine]) -> Iterator[str]:
    for line in decoded:
        if not line.ok:
            LOG.debug("Dropping line %d: %s", line.number, line.error)
            continue
        yield line.text
