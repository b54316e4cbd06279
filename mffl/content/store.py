"""Whole-file JSON snapshots under the data directory."""

from __future__ import annotations

import logging
import os
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable, Union

from mffl.utils.file_utils import read_json, write_json

logger = logging.getLogger(__name__)

DATA_DIR = Path(os.environ.get("MFFL_DATA_DIR", "data"))
OLDEST = datetime.min.replace(tzinfo=timezone.utc)


def new_id() -> str:
    return uuid.uuid4().hex


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace(
        "+00:00", "Z"
    )


def parse_timestamp(value: Any) -> datetime:
    """ISO timestamp as an aware datetime; naive values are UTC, junk sorts oldest."""
    text = str(value or "").strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return OLDEST
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


class JsonDocument:
    """One JSON file read and written as a complete snapshot.

    ``load`` never fails: a missing or corrupt file yields ``default_factory()``.
    There is no locking between writers; the last ``save`` wins.
    """

    def __init__(self, path: Union[str, Path], default_factory: Callable[[], Any]) -> None:
        self.path = Path(path)
        self._default_factory = default_factory

    def load(self) -> Any:
        data = read_json(self.path)
        if data is None:
            return self._default_factory()
        return data

    def save(self, data: Any) -> None:
        write_json(self.path, data)
        logger.debug("Saved %s", self.path)
