"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class SettingsFile:
    """Values read from an optional settings file; `None` means not set."""

    path: Path
    input_path: Path | None = None
    include_mutations: bool | None = None
    endpoint_url: str | None = None
    output_path: Path | None = None


@dataclass(frozen=True)
class GenerationSettings:
    """Resolved settings for one invocation, built once at startup."""

    input_path: Path | None
    include_mutations: bool
    print_introspection_request: bool
    endpoint_url: str
    output_path: Path | None
