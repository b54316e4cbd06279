"""League suggestion box."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from mffl.content.store import (
    DATA_DIR,
    JsonDocument,
    new_id,
    parse_timestamp,
    utc_now_iso,
)
from mffl.errors import ContentValidationError

MAX_NAME = 80


class SuggestionStore:
    def __init__(self, path: Optional[Union[str, Path]] = None) -> None:
        self._doc = JsonDocument(path or DATA_DIR / "suggestions.json", list)

    def list(self) -> List[Dict[str, Any]]:
        data = self._doc.load()
        return data if isinstance(data, list) else []

    def submit(self, text: str, name: str = "") -> Dict[str, Any]:
        text = (text or "").strip()
        if not text:
            raise ContentValidationError("Suggestion text required")

        item = {
            "id": new_id(),
            "when": utc_now_iso(),
            "name": (name or "")[:MAX_NAME],
            "text": text,
        }
        items = self.list()
        items.insert(0, item)
        items.sort(key=lambda s: parse_timestamp(s.get("when")), reverse=True)
        self._doc.save(items)
        return item
