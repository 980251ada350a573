"""Detector backed by the lingua language detection engine."""

import logging
from typing import Iterable, List, Sequence, Tuple

from lingua import IsoCode639_1, Language, LanguageDetector, LanguageDetectorBuilder

from lingotag_core.errors import InvalidDetectorConfig, UnsupportedLanguageCode
from lingotag_core.interfaces import ConfidenceEntry, Distribution, Segment

from .config import DetectorConfig

LOG = logging.getLogger(__name__)


def parse_language_codes(codes: Iterable[str]) -> List[IsoCode639_1]:
    """Map ISO 639-1 strings to engine codes, dropping duplicates while keeping order."""
    parsed: List[IsoCode639_1] = []
    for code in codes:
        normalized = code.strip().upper()
        if len(normalized) != 2 or not (normalized.isascii() and normalized.isalpha()):
            raise UnsupportedLanguageCode(code)
        iso_code = getattr(IsoCode639_1, normalized, None)
        if iso_code is None:
            raise UnsupportedLanguageCode(code)
        if iso_code not in parsed:
            parsed.append(iso_code)
    return parsed


def language_code(language: Language) -> str:
    return language.iso_code_639_1.name.lower()


def supported_languages() -> List[Tuple[str, str]]:
    languages = sorted(Language.all(), key=lambda language: language.name)
    return [(language_code(language), language.name.title()) for language in languages]


def _byte_offset(text: str, index: int) -> int:
    return len(text[:index].encode("utf-8"))


class LinguaDetector:
    def __init__(self, detector: LanguageDetector):
        self.detector = detector

    @staticmethod
    def _distribution(values) -> Distribution:
        entries = [ConfidenceEntry(language=language_code(value.language), score=value.value) for value in values]
        # all-zero scores mean the engine found nothing to go on, e.g. empty or digit-only text
        if all(entry.score == 0.0 for entry in entries):
            return []
        return entries

    def confidence_distribution(self, text: str) -> Distribution:
        return self._distribution(self.detector.compute_language_confidence_values(text))

    def confidence_distribution_batch(self, texts: Sequence[str]) -> List[Distribution]:
        results = self.detector.compute_language_confidence_values_in_parallel(list(texts))
        return [self._distribution(values) for values in results]

    def multi_segment_detect(self, text: str) -> List[Segment]:
        # the engine reports character indices; segments carry UTF-8 byte offsets
        return [
            Segment(
                start=_byte_offset(text, result.start_index),
                end=_byte_offset(text, result.end_index),
                language=language_code(result.language),
            )
            for result in self.detector.detect_multiple_languages_of(text)
        ]


def build_detector(config: DetectorConfig) -> LinguaDetector:
    iso_codes = parse_language_codes(config.languages)
    if len(iso_codes) == 1:
        raise InvalidDetectorConfig(
            f"At least two distinct languages are required to choose from, got only {iso_codes[0].name.lower()!r}"
        )
    try:
        if iso_codes:
            builder = LanguageDetectorBuilder.from_iso_codes_639_1(*iso_codes)
        else:
            builder = LanguageDetectorBuilder.from_all_languages()
        if config.quick:
            builder = builder.with_low_accuracy_mode()
        if config.preload:
            builder = builder.with_preloaded_language_models()
        if config.minimum_relative_distance is not None:
            builder = builder.with_minimum_relative_distance(config.minimum_relative_distance)
        detector = builder.build()
    except ValueError as exc:
        raise InvalidDetectorConfig(str(exc)) from exc

    LOG.info(
        "Detector ready: languages=%s quick=%s preload=%s minimum_relative_distance=%s",
        ",".join(iso_code.name.lower() for iso_code in iso_codes) or "all",
        config.quick,
        config.preload,
        config.minimum_relative_distance,
    )
    return LinguaDetector(detector)
