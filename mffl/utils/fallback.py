"""Priority-ordered fallback helpers for names and labels."""

from __future__ import annotations

from typing import Any, Optional


def clean(value: Any) -> str:
    """Return ``value`` as a stripped string, or "" for None."""
    if value is None:
        return ""
    return str(value).strip()


def first_non_empty(*candidates: Any, default: Optional[str] = None) -> Optional[str]:
    """Return the first candidate that is non-empty after stripping.

    Example:
        first_non_empty(None, "  ", "Mahomes", default="Unknown") -> "Mahomes"
    """
    for candidate in candidates:
        text = clean(candidate)
        if text:
            return text
    return default
