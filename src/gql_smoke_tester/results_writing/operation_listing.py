"""Operation listing writer."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from pathlib import Path
from typing import TextIO


def format_operation_listing(operations: Iterable[str]) -> str:
    """Join operations so each one is followed by a blank line."""
    return "".join(f"{operation}\n\n" for operation in operations)


def write_operation_listing(
    operations: Iterable[str],
    output_path: Path | str | None = None,
    stream: TextIO | None = None,
) -> Path | None:
    """Write the listing to `output_path`, or to `stream` (stdout) when no path is given.

    Returns:
      The resolved output path, or `None` when the listing went to a stream.
    """
    listing = format_operation_listing(operations)
    if output_path is None:
        target = stream if stream is not None else sys.stdout
        target.write(listing)
        return None
    destination = Path(output_path)
    destination.write_text(listing, encoding="utf-8")
    return destination.resolve()
