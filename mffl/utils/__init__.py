"""Shared utilities module."""

__all__ = [
    "cli_common",
    "concurrency",
    "fallback",
    "file_utils",
    "render",
    "ttl_cache",
    "upstream",
]
