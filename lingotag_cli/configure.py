"""Helpers to build the run configuration from CLI args."""

import logging
from typing import Iterable, List, Optional, Union

from lingotag.config import DetectorConfig, RunConfig, resolve_input_mode

from .args import split_codes


def compute_log_level(verbose: int) -> int:
    log_levels = [logging.WARNING, logging.INFO, logging.DEBUG]
    return log_levels[min(verbose, len(log_levels) - 1)]


def flatten_languages(values: Optional[Iterable[Union[str, List[str]]]]) -> List[str]:
    """Accept ``-l de,en -l fr`` style lists as well as plain lists or CSV strings from config files."""
    languages: List[str] = []
    for value in values or []:
        if isinstance(value, str):
            languages.extend(split_codes(value))
        else:
            languages.extend(flatten_languages(value))
    return languages


def make_detector_config(args) -> DetectorConfig:
    return DetectorConfig(
        languages=tuple(flatten_languages(args.languages)),
        quick=bool(args.quick),
        preload=bool(args.preload),
        minimum_relative_distance=args.minimum_relative_distance,
    )


def make_run_config(args) -> RunConfig:
    return RunConfig(
        mode=resolve_input_mode(args.text, per_line=bool(args.per_line), parallel=bool(args.parallel)),
        multi=bool(args.multi),
        emit_all=bool(args.all),
        confidence=args.confidence,
        min_length=args.minlength,
        delimiter=args.delimiter,
        detector=make_detector_config(args),
    )
