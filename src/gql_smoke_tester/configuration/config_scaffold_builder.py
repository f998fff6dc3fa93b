"""Settings file scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_SETTINGS_FILENAME = "gql-smoke-tester.yaml"

_SETTINGS_SCAFFOLD_TEMPLATE = """# Settings file for gql-smoke-tester.
# Every key is optional; command line options override the values set here.
# Relative paths are resolved against the directory of this file.

# Introspection response JSON to generate operations from.
# input: "introspection.json"

# Also generate one mutation per mutation root field.
include_mutations: false

# Endpoint shown in the curl example printed by --intro.
endpoint_url: "https://example.com/graphql"

# Write the operation listing to this file instead of standard output.
# output: "operations.graphql"
"""


def build_placeholder_settings() -> str:
    """Build a commented YAML settings file template."""
    return _SETTINGS_SCAFFOLD_TEMPLATE


def write_placeholder_settings(output_path: Path | str) -> Path:
    """Write the placeholder settings file to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Settings file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_settings(), encoding="utf-8")
    return destination.resolve()
