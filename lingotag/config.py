from dataclasses import dataclass, field
import logging
from typing import Optional, Sequence, Tuple, Union

from lingotag_core.errors import IncompatibleModes
from lingotag_core.sources import join_arguments

LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class DirectText:
    text: str


@dataclass(frozen=True)
class WholeDocument:
    pass


@dataclass(frozen=True)
class PerLine:
    parallel: bool = False


InputMode = Union[DirectText, WholeDocument, PerLine]


def resolve_input_mode(words: Sequence[str], per_line: bool = False, parallel: bool = False) -> InputMode:
    if words:
        if per_line or parallel:
            LOG.debug("Text supplied as arguments, ignoring per-line/parallel flags")
        return DirectText(join_arguments(words))
    if per_line:
        return PerLine(parallel=parallel)
    if parallel:
        LOG.debug("Parallel mode requires per-line mode, ignoring")
    return WholeDocument()


@dataclass(frozen=True)
class DetectorConfig:
    languages: Tuple[str, ...] = ()
    quick: bool = False
    preload: bool = False
    minimum_relative_distance: Optional[float] = None


@dataclass(frozen=True)
class RunConfig:
    mode: InputMode = field(default_factory=WholeDocument)
    multi: bool = False
    emit_all: bool = False
    confidence: Optional[float] = None
    min_length: Optional[int] = None
    delimiter: str = "\t"
    detector: DetectorConfig = field(default_factory=DetectorConfig)

    def __post_init__(self):
        if self.multi and isinstance(self.mode, PerLine):
            raise IncompatibleModes("Multi-language detection (--multi) can not be combined with per-line mode")
        if self.multi and (self.emit_all or self.confidence is not None):
            LOG.warning("--all and --confidence have no effect in multi-language mode")
