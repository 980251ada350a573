"""CLI argument builder for lingotag."""

import argparse
from typing import List


def split_codes(value: str) -> List[str]:
    return [code.strip() for code in value.split(",") if code.strip()]


def confidence_value(value: str) -> float:
    try:
        confidence = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid confidence value: {value!r}") from exc
    if not 0.0 <= confidence <= 1.0:
        raise argparse.ArgumentTypeError(f"confidence must be between 0.0 and 1.0, got {value}")
    return confidence


def non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid length: {value!r}") from exc
    if number < 0:
        raise argparse.ArgumentTypeError(f"length must not be negative, got {value}")
    return number


def add_shared_arguments(parser: argparse.ArgumentParser) -> argparse.ArgumentParser:
    parser.add_argument(
        "-l",
        "--languages",
        action="append",
        type=split_codes,
        default=None,
        help="Comma separated list of ISO 639-1 codes of languages to detect. If not specified, all supported "
        "languages are used. Setting this improves accuracy and resource usage. May be repeated.",
    )
    parser.add_argument(
        "-n",
        "--per-line",
        action="store_true",
        help="Classify language per line, this only works if text is not supplied directly as an argument",
    )
    parser.add_argument("-p", "--parallel", action="store_true", help="Use parallel computation, can only be used with --per-line")
    parser.add_argument("-L", "--list", action="store_true", help="List supported languages and exit")
    parser.add_argument(
        "-a",
        "--all",
        action="store_true",
        help="Show all confidence values (entire probability distribution), rather than just the winning score. "
        "Does not work with --multi",
    )
    parser.add_argument("-q", "--quick", action="store_true", help="Quick/low accuracy mode")
    parser.add_argument(
        "-m",
        "--multi",
        action="store_true",
        help="Classify multiple languages in mixed texts, will return matches along with UTF-8 byte offsets. "
        "Can not be combined with line mode.",
    )
    parser.add_argument(
        "-c",
        "--confidence",
        type=confidence_value,
        default=None,
        help="Confidence threshold, only output results with at least this confidence value (0.0-1.0)",
    )
    parser.add_argument(
        "-M",
        "--minlength",
        type=non_negative_int,
        default=None,
        help="Minimum text length (without regard for whitespace, punctuation or numerals!). "
        "Shorter fragments will not be classified",
    )
    parser.add_argument(
        "-d",
        "--minimum-relative-distance",
        type=float,
        default=None,
        help="How much more likely the winning language must be than the runner-up (0.0-0.99)",
    )
    parser.add_argument("--preload", action="store_true", help="Preload all language models on startup")
    parser.add_argument("--delimiter", default="\t", help="Field delimiter for output records (default: tab)")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase verbosity (specify multiple times for more verbosity)")
    parser.add_argument("--config", help="Path to YAML or JSON config file for defaults")
    parser.add_argument("--profile", help="Name of a profile from the config file to apply")
    parser.add_argument("text", nargs="*", default=[], help="Text to classify; if omitted, text is read from stdin")
    return parser


def build_parser(prog: str = "lingotag") -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=prog, description="Identify the language of text from arguments or stdin")
    return add_shared_arguments(parser)
