"""Config file loading and parser defaults application for the CLI."""

import argparse
import json
from argparse import Namespace
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, Optional

import yaml

from .args import confidence_value, non_negative_int

SECTIONS = ("detector", "output", "input")
NOT_CONFIGURABLE = ("config", "profile", "list", "text")
BOOLEAN_OPTIONS = ("quick", "preload", "per_line", "parallel", "multi", "all")

_CONVERTERS: Dict[str, Callable[[str], Any]] = {
    "confidence": confidence_value,
    "minlength": non_negative_int,
    "minimum_relative_distance": float,
}


def load_config_file(path: str) -> Dict[str, Any]:
    config_path = Path(path).expanduser()
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    suffix = config_path.suffix.lower()
    if suffix in (".yml", ".yaml"):
        with config_path.open("r", encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as exc:
                raise ValueError(f"Malformed YAML in {config_path}: {exc}") from exc
    elif suffix == ".json":
        with config_path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    else:
        raise ValueError(f"Unsupported config file format: {suffix}")
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping at the top level: {config_path}")
    return data


def _normalize_key(key: str) -> str:
    return key.replace("-", "_")


def _normalize_values(cfg: Dict[str, Any]) -> Dict[str, Any]:
    normalized = dict(cfg)
    for key, convert in _CONVERTERS.items():
        if normalized.get(key) is None:
            continue
        try:
            normalized[key] = convert(str(normalized[key]))
        except (argparse.ArgumentTypeError, ValueError) as exc:
            raise ValueError(f"Invalid value for '{key}' in config file: {exc}") from exc
    for key in BOOLEAN_OPTIONS:
        if key in normalized and not isinstance(normalized[key], bool):
            raise ValueError(f"Invalid value for '{key}' in config file: expected true or false, got {normalized[key]!r}")
    languages = normalized.get("languages")
    if isinstance(languages, str):
        normalized["languages"] = [languages]
    elif languages is not None and not (
        isinstance(languages, list) and all(isinstance(code, str) for code in languages)
    ):
        raise ValueError(f"Invalid value for 'languages' in config file: expected a list of codes, got {languages!r}")
    return normalized


def flatten_profile(profile: Dict[str, Any]) -> Dict[str, Any]:
    flat: Dict[str, Any] = {}
    for key, val in profile.items():
        if key == "profiles":
            continue
        if key in SECTIONS and isinstance(val, dict):
            flat.update({_normalize_key(k): v for k, v in val.items()})
            continue
        flat[_normalize_key(key)] = val
    return _normalize_values(flat)


def _check_keys(flat: Dict[str, Any], known: Iterable[str]):
    allowed = set(known) - set(NOT_CONFIGURABLE)
    unknown = sorted(set(flat) - allowed)
    if unknown:
        raise ValueError(f"Unknown config option(s): {', '.join(unknown)}")


def select_profile(config_data: Dict[str, Any], profile_name: Optional[str], known: Iterable[str]) -> Dict[str, Any]:
    known = list(known)
    if not config_data:
        if profile_name:
            raise ValueError(f"Profile '{profile_name}' requested but no config file was loaded")
        return {}

    merged = flatten_profile(config_data)
    if profile_name:
        profiles = config_data.get("profiles") or {}
        if not isinstance(profiles, dict) or profile_name not in profiles:
            raise ValueError(f"Unknown profile: {profile_name}")
        profile = profiles[profile_name] or {}
        if not isinstance(profile, dict):
            raise ValueError(f"Profile '{profile_name}' must be a mapping")
        merged.update(flatten_profile(profile))
    _check_keys(merged, known)
    return merged


def merge_args(base_defaults: Namespace, profile_overrides: Dict[str, Any], user_args: Namespace) -> Namespace:
    merged = vars(base_defaults).copy()
    merged.update(profile_overrides)
    for key, val in vars(user_args).items():
        # Only override when the user provided a value different from the parser default
        if key in merged and val == getattr(base_defaults, key, None):
            continue
        merged[key] = val
    return argparse.Namespace(**merged)
