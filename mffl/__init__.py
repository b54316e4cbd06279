"""MFFL league companion: upstream aggregation, caching and league content."""

__all__ = [
    "content",
    "errors",
    "league",
    "player",
    "schedule",
    "service",
    "utils",
    "views",
]
