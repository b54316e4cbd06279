"""Helpers for reading and writing the local JSON documents."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Union

logger = logging.getLogger(__name__)


def atomic_write(file_path: Union[str, Path], content: str) -> None:
    """Write ``content`` to ``file_path`` via a temp file and ``os.replace``.

    Readers see either the previous snapshot or the new one, never a partial
    file. The temp file is created beside the target so the rename stays on
    one filesystem.
    """
    file_path = Path(file_path)
    file_path.parent.mkdir(parents=True, exist_ok=True)

    fd, temp_path = tempfile.mkstemp(
        dir=file_path.parent, prefix=f".{file_path.name}.", suffix=".tmp"
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
        os.replace(temp_path, file_path)
    except Exception:
        try:
            os.unlink(temp_path)
        except OSError:
            pass
        raise


def write_json(file_path: Union[str, Path], data: Any) -> None:
    """Serialize ``data`` with two-space indentation and write it atomically."""
    atomic_write(file_path, json.dumps(data, indent=2, ensure_ascii=False))


def read_json(file_path: Union[str, Path]) -> Any:
    """Load a JSON document, returning None when it is missing or unreadable."""
    file_path = Path(file_path)
    if not file_path.exists():
        return None

    try:
        with open(file_path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (json.JSONDecodeError, IOError) as err:
        logger.warning("Could not read %s: %s", file_path, err)
        return None
