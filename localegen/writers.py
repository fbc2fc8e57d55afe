"""Output writers for generated files."""

from __future__ import annotations

from pathlib import Path


def write_generated(output_path: Path, content: str) -> None:
    """Create or truncate ``output_path`` and write ``content`` as UTF-8.

    Raises:
        OSError: If the destination cannot be opened for writing.
        UnicodeEncodeError: If ``content`` cannot be encoded.
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    _ = output_path.write_text(content, encoding="utf-8")
