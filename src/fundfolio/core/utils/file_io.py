"""Atomic file writes for the local storage backend."""

from __future__ import annotations

import os


def safe_write(filepath: str, content: str, mode: str = "w", encoding: str = "utf-8") -> None:
    """Write content via a sibling temp file, creating parent directories as needed."""
    os.makedirs(os.path.dirname(filepath) or ".", exist_ok=True)
    tmp_path = f"{filepath}.tmp"
    with open(tmp_path, mode, encoding=encoding) as f:
        f.write(content)
    os.replace(tmp_path, filepath)
