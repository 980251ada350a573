import logging

import pytest

from lingotag.config import DetectorConfig, DirectText, PerLine, RunConfig, WholeDocument, resolve_input_mode
from lingotag_core.errors import IncompatibleModes


def test_direct_text_joins_words():
    assert resolve_input_mode(["Der", "Hund"]) == DirectText("Der Hund")


def test_direct_text_overrides_line_flags():
    assert resolve_input_mode(["Bonjour"], per_line=True, parallel=True) == DirectText("Bonjour")


def test_per_line_modes():
    assert resolve_input_mode([], per_line=True) == PerLine(parallel=False)
    assert resolve_input_mode([], per_line=True, parallel=True) == PerLine(parallel=True)


def test_parallel_without_per_line_is_ignored():
    assert resolve_input_mode([], parallel=True) == WholeDocument()


def test_whole_document_by_default():
    assert resolve_input_mode([]) == WholeDocument()


def test_multi_with_per_line_is_rejected():
    with pytest.raises(IncompatibleModes):
        RunConfig(mode=PerLine(), multi=True)
    with pytest.raises(IncompatibleModes):
        RunConfig(mode=PerLine(parallel=True), multi=True)


def test_multi_with_document_modes_is_accepted():
    assert RunConfig(mode=WholeDocument(), multi=True).multi
    assert RunConfig(mode=DirectText("Hello Bonjour"), multi=True).multi


def test_multi_warns_about_ignored_options(caplog):
    with caplog.at_level(logging.WARNING):
        RunConfig(mode=WholeDocument(), multi=True, emit_all=True)
    assert "no effect in multi-language mode" in caplog.text


def test_run_config_is_immutable():
    config = RunConfig()
    with pytest.raises(AttributeError):
        config.delimiter = ","
    with pytest.raises(AttributeError):
        config.detector.quick = True


def test_defaults():
    config = RunConfig()
    assert config.mode == WholeDocument()
    assert config.delimiter == "\t"
    assert config.confidence is None
    assert config.min_length is None
    assert config.detector == DetectorConfig()
