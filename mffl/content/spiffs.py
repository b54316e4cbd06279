"""Spiff Bank: per-manager point balances kept by the commissioner."""

from __future__ import annotations

import math
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from mffl.content.store import DATA_DIR, JsonDocument


def normalize_balance(value: Any) -> float:
    """Finite, non-negative, rounded to cents; anything else becomes 0."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(number):
        return 0.0
    return max(0.0, round(number, 2))


class SpiffLedger:
    def __init__(self, path: Optional[Union[str, Path]] = None) -> None:
        self._doc = JsonDocument(path or DATA_DIR / "spiffs.json", lambda: {"banks": {}})

    def banks(self) -> Dict[str, float]:
        data = self._doc.load()
        banks = data.get("banks") if isinstance(data, dict) else None
        return banks if isinstance(banks, dict) else {}

    def replace(self, banks: Mapping[str, Any]) -> Dict[str, float]:
        """Overwrite every balance with the sanitized ``banks`` mapping."""
        cleaned = {str(key): normalize_balance(value) for key, value in banks.items()}
        self._doc.save({"banks": cleaned})
        return cleaned
