"""Settings file loader and settings resolution service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any, TypeVar

import yaml

from gql_smoke_tester.introspection_request import DEFAULT_ENDPOINT_URL

from .runtime_settings import GenerationSettings, SettingsFile

T = TypeVar("T")

_SUPPORTED_KEYS = ("input", "include_mutations", "endpoint_url", "output")


class ConfigurationError(Exception):
    """Raised when the settings file is invalid."""


def load_settings_file(config_path: Path | str) -> SettingsFile:
    """Load and validate a YAML/JSON settings file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Settings file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Failed to read settings file {path}: {exc}") from exc
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse settings file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Settings root must be a mapping.")

    unknown = sorted(str(key) for key in parsed if key not in _SUPPORTED_KEYS)
    if unknown:
        raise ConfigurationError(f"Unsupported settings keys: {', '.join(unknown)}")

    return SettingsFile(
        path=path,
        input_path=_optional_path(parsed.get("input"), "input", path.parent),
        include_mutations=_optional_bool(parsed.get("include_mutations"), "include_mutations"),
        endpoint_url=_optional_string(parsed.get("endpoint_url"), "endpoint_url"),
        output_path=_optional_path(parsed.get("output"), "output", path.parent),
    )


def build_generation_settings(
    *,
    input_path: str | None = None,
    include_mutations: bool | None = None,
    print_introspection_request: bool = False,
    endpoint_url: str | None = None,
    output_path: str | None = None,
    settings_file: SettingsFile | None = None,
) -> GenerationSettings:
    """Resolve explicit values over settings file values over defaults."""
    defaults = settings_file or SettingsFile(path=Path())
    return GenerationSettings(
        input_path=Path(input_path) if input_path else defaults.input_path,
        include_mutations=_first_set(include_mutations, defaults.include_mutations, default=False),
        print_introspection_request=print_introspection_request,
        endpoint_url=_first_set(
            endpoint_url, defaults.endpoint_url, default=DEFAULT_ENDPOINT_URL
        ),
        output_path=Path(output_path) if output_path else defaults.output_path,
    )


def _first_set(*candidates: T | None, default: T) -> T:
    for candidate in candidates:
        if candidate is not None:
            return candidate
    return default


def _optional_path(value: Any, field_name: str, base_path: Path) -> Path | None:
    raw = _optional_string(value, field_name)
    if raw is None:
        return None
    candidate = Path(raw)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None


def _optional_bool(value: Any, field_name: str) -> bool | None:
    if value is None:
        return None
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be a boolean.")
    return value
