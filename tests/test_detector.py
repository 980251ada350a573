"""Tests against the real lingua engine."""

import pytest

from lingotag.config import DetectorConfig
from lingotag.detector import _byte_offset, build_detector, parse_language_codes, supported_languages
from lingotag_core.errors import InvalidDetectorConfig, UnsupportedLanguageCode


@pytest.fixture(scope="module")
def detector():
    return build_detector(DetectorConfig(languages=("de", "en", "fr")))


def test_parse_language_codes_normalizes_and_deduplicates():
    codes = parse_language_codes(["de", " EN ", "de"])
    assert [code.name.lower() for code in codes] == ["de", "en"]


@pytest.mark.parametrize("code", ["xx", "english", "", "d3", "é"])
def test_parse_language_codes_rejects_unknown(code):
    with pytest.raises(UnsupportedLanguageCode) as excinfo:
        parse_language_codes([code])
    assert excinfo.value.code == code


def test_unknown_code_fails_at_construction():
    with pytest.raises(UnsupportedLanguageCode):
        build_detector(DetectorConfig(languages=("de", "zz")))


def test_minimum_relative_distance_out_of_range():
    with pytest.raises(InvalidDetectorConfig):
        build_detector(DetectorConfig(languages=("de", "en"), minimum_relative_distance=1.5))


def test_supported_languages_sorted_by_name():
    languages = supported_languages()
    names = [name for _, name in languages]
    assert names == sorted(names)
    assert ("en", "English") in languages
    assert all(len(code) == 2 for code, _ in languages)


def test_scenario_german_sentence(detector):
    distribution = detector.confidence_distribution("Der Hund läuft")
    assert distribution[0].language == "de"
    assert 0.0 <= distribution[0].score <= 1.0
    scores = [entry.score for entry in distribution]
    assert scores == sorted(scores, reverse=True)


def test_batch_preserves_input_order(detector):
    texts = [
        "Le chien court très vite dans le jardin de mes parents",
        "Der Hund läuft sehr schnell durch den Garten meiner Eltern",
        "The dog runs very quickly through the garden of my parents",
        "Der Hund läuft sehr schnell durch den Garten meiner Eltern",
        "Le chien court très vite dans le jardin de mes parents",
    ]
    results = detector.confidence_distribution_batch(texts)
    assert [result[0].language for result in results] == ["fr", "de", "en", "de", "fr"]


def test_multi_segments_are_byte_ranges(detector):
    text = "Parlez-vous français? Ich spreche Französisch nur ein bisschen. A little bit is better than nothing."
    segments = detector.multi_segment_detect(text)
    assert segments
    encoded_length = len(text.encode("utf-8"))
    previous_end = 0
    for segment in segments:
        assert 0 <= segment.start < segment.end <= encoded_length
        assert segment.start >= previous_end
        assert segment.language in ("de", "en", "fr")
        assert segment.slice(text)
        previous_end = segment.end


def test_byte_offset_counts_utf8_bytes():
    assert _byte_offset("läuft", 0) == 0
    assert _byte_offset("läuft", 2) == 3
    assert _byte_offset("läuft", 5) == 6


@pytest.mark.parametrize("languages", [("de",), ("de", "de"), ("de", "DE ")])
def test_single_language_fails_at_construction(languages):
    with pytest.raises(InvalidDetectorConfig) as excinfo:
        build_detector(DetectorConfig(languages=languages))
    assert "two" in str(excinfo.value)


@pytest.mark.parametrize("text", ["", "12345", "  ...  "])
def test_text_without_letters_has_empty_distribution(detector, text):
    assert detector.confidence_distribution(text) == []
    assert detector.confidence_distribution_batch([text, "Der Hund läuft sehr schnell durch den Garten"])[0] == []
