import logging
from typing import BinaryIO, Iterable, List, TextIO

from lingotag_core.formatter import ResultFormatter
from lingotag_core.gate import passes
from lingotag_core.interfaces import DetectorProtocol
from lingotag_core.sources import read_document, read_lines, valid_lines

from .config import DirectText, PerLine, RunConfig

LOG = logging.getLogger(__name__)


class Driver:
    """Runs one classification pass for the input mode selected in ``config``."""

    def __init__(self, config: RunConfig, detector: DetectorProtocol, out: TextIO):
        self.config = config
        self.detector = detector
        self.out = out
        self.formatter = ResultFormatter(
            delimiter=config.delimiter,
            confidence=config.confidence,
            emit_all=config.emit_all,
        )

    def run(self, stdin: BinaryIO) -> None:
        mode = self.config.mode
        if isinstance(mode, DirectText):
            self.classify_document(mode.text)
        elif isinstance(mode, PerLine):
            lines = valid_lines(read_lines(stdin))
            if mode.parallel:
                self.classify_lines_parallel(lines)
            else:
                self.classify_lines(lines)
        else:
            self.classify_document(read_document(stdin))

    def _emit(self, records: List[str]):
        self.out.write("".join(records))

    def classify_document(self, text: str):
        if not passes(text, self.config.min_length):
            self._emit(self.formatter.rejected())
        elif self.config.multi:
            self._emit(self.formatter.segments(self.detector.multi_segment_detect(text), text))
        else:
            self._emit(self.formatter.distribution(self.detector.confidence_distribution(text)))

    def classify_lines(self, lines: Iterable[str]):
        for line in lines:
            if passes(line, self.config.min_length):
                self._emit(self.formatter.distribution(self.detector.confidence_distribution(line), line=line))
            else:
                self._emit(self.formatter.rejected(line=line))

    def classify_lines_parallel(self, lines: Iterable[str]):
        batch = [line for line in lines if passes(line, self.config.min_length)]
        if self.config.min_length is not None:
            LOG.warning(
                "Lines that do not match the minimum length will not be returned "
                "(disable parallel mode if you want to return them as 'unknown')"
            )
        LOG.info("Classifying %d lines in parallel", len(batch))
        results = self.detector.confidence_distribution_batch(batch)
        if len(results) != len(batch):
            raise RuntimeError(f"Detector returned {len(results)} results for {len(batch)} lines")
        for line, distribution in zip(batch, results):
            self._emit(self.formatter.distribution(distribution, line=line))
