"""Settings loader tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from gql_smoke_tester.configuration.loader import (
    ConfigurationError,
    build_generation_settings,
    load_settings_file,
)
from gql_smoke_tester.configuration.runtime_settings import SettingsFile
from gql_smoke_tester.introspection_request import DEFAULT_ENDPOINT_URL


def _write_file(path: Path, contents: str) -> Path:
    path.write_text(contents, encoding="utf-8")
    return path


def test_loads_yaml_settings_and_resolves_relative_paths(tmp_path: Path) -> None:
    settings_path = _write_file(
        tmp_path / "settings.yaml",
        """
input: schema/introspection.json
include_mutations: true
endpoint_url: " https://api.example.com/graphql "
output: operations.graphql
""",
    )

    settings_file = load_settings_file(settings_path)

    assert settings_file.path == settings_path
    assert settings_file.input_path == (tmp_path / "schema" / "introspection.json").resolve()
    assert settings_file.include_mutations is True
    assert settings_file.endpoint_url == "https://api.example.com/graphql"
    assert settings_file.output_path == (tmp_path / "operations.graphql").resolve()


def test_loads_json_settings(tmp_path: Path) -> None:
    absolute_input = tmp_path / "introspection.json"
    settings_path = _write_file(
        tmp_path / "settings.json", f'{{"input": "{absolute_input.as_posix()}"}}'
    )

    settings_file = load_settings_file(settings_path)

    assert settings_file.input_path == absolute_input
    assert settings_file.include_mutations is None


def test_empty_settings_file_sets_nothing(tmp_path: Path) -> None:
    settings_file = load_settings_file(_write_file(tmp_path / "settings.yaml", ""))

    assert settings_file.input_path is None
    assert settings_file.include_mutations is None
    assert settings_file.endpoint_url is None
    assert settings_file.output_path is None


def test_missing_settings_file_is_reported(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="Settings file not found"):
        load_settings_file(tmp_path / "missing.yaml")


@pytest.mark.parametrize(
    ("contents", "message"),
    [
        ("- input\n", "Settings root must be a mapping"),
        ("input: a.json\nverbose: true\n", "Unsupported settings keys: verbose"),
        ("include_mutations: 'yes'\n", "include_mutations must be a boolean"),
        ("endpoint_url: 8080\n", "endpoint_url must be a string"),
        ("input: [unclosed\n", "Failed to parse settings file"),
    ],
)
def test_invalid_settings_are_rejected(tmp_path: Path, contents: str, message: str) -> None:
    settings_path = _write_file(tmp_path / "settings.yaml", contents)

    with pytest.raises(ConfigurationError, match=message):
        load_settings_file(settings_path)


def test_build_generation_settings_defaults() -> None:
    settings = build_generation_settings()

    assert settings.input_path is None
    assert settings.include_mutations is False
    assert settings.print_introspection_request is False
    assert settings.endpoint_url == DEFAULT_ENDPOINT_URL
    assert settings.output_path is None


def test_explicit_values_override_settings_file(tmp_path: Path) -> None:
    settings_file = SettingsFile(
        path=tmp_path / "settings.yaml",
        input_path=tmp_path / "from-file.json",
        include_mutations=False,
        endpoint_url="https://file.example.com/graphql",
        output_path=tmp_path / "from-file.graphql",
    )

    settings = build_generation_settings(
        input_path="cli.json",
        include_mutations=True,
        endpoint_url="https://cli.example.com/graphql",
        output_path="cli.graphql",
        settings_file=settings_file,
    )

    assert settings.input_path == Path("cli.json")
    assert settings.include_mutations is True
    assert settings.endpoint_url == "https://cli.example.com/graphql"
    assert settings.output_path == Path("cli.graphql")


def test_settings_file_values_fill_unset_options(tmp_path: Path) -> None:
    settings_file = SettingsFile(
        path=tmp_path / "settings.yaml",
        input_path=tmp_path / "from-file.json",
        include_mutations=True,
        endpoint_url="https://file.example.com/graphql",
    )

    settings = build_generation_settings(settings_file=settings_file)

    assert settings.input_path == tmp_path / "from-file.json"
    assert settings.include_mutations is True
    assert settings.endpoint_url == "https://file.example.com/graphql"
    assert settings.output_path is None


def test_settings_path_that_is_a_directory_is_reported(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="Failed to read settings file"):
        load_settings_file(tmp_path)


def test_settings_file_that_is_not_utf8_is_reported(tmp_path: Path) -> None:
    settings_path = tmp_path / "settings.yaml"
    settings_path.write_bytes(b"\xff\xfeinput: a.json\n")

    with pytest.raises(ConfigurationError, match="Failed to read settings file"):
        load_settings_file(settings_path)
