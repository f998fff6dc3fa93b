"""Settings scaffold builder tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from gql_smoke_tester.configuration.config_scaffold_builder import (
    build_placeholder_settings,
    write_placeholder_settings,
)
from gql_smoke_tester.configuration.loader import load_settings_file


def test_build_placeholder_settings_mentions_every_supported_key() -> None:
    scaffold = build_placeholder_settings()

    assert "Settings file for gql-smoke-tester" in scaffold
    assert "input:" in scaffold
    assert "include_mutations:" in scaffold
    assert "endpoint_url:" in scaffold
    assert "output:" in scaffold


def test_written_placeholder_settings_load_cleanly(tmp_path: Path) -> None:
    output_path = tmp_path / "gql-smoke-tester.yaml"

    written_path = write_placeholder_settings(output_path)
    settings_file = load_settings_file(written_path)

    assert written_path == output_path.resolve()
    assert settings_file.include_mutations is False
    assert settings_file.endpoint_url == "https://example.com/graphql"
    assert settings_file.input_path is None


def test_write_placeholder_settings_fails_when_file_exists(tmp_path: Path) -> None:
    output_path = tmp_path / "gql-smoke-tester.yaml"
    output_path.write_text("existing", encoding="utf-8")

    with pytest.raises(FileExistsError):
        write_placeholder_settings(output_path)
