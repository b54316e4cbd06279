"""Exceptions raised by the league data layer."""

from __future__ import annotations

from typing import Optional


class MfflError(Exception):
    """Base class for league companion errors."""


class UpstreamError(MfflError):
    """An upstream provider returned a non-2xx or undecodable response."""

    def __init__(
        self,
        url: str,
        status: Optional[int] = None,
        decode_failure: bool = False,
        reason: Optional[str] = None,
    ) -> None:
        self.url = url
        self.status = status
        self.decode_failure = decode_failure
        self.reason = reason
        super().__init__(self._format())

    def _format(self) -> str:
        if self.status is not None:
            return f"Upstream HTTP {self.status} for {self.url}"
        if self.decode_failure:
            return f"Upstream returned invalid JSON for {self.url}"
        return f"Upstream request failed for {self.url}: {self.reason or 'unknown error'}"


class WeekResolutionError(MfflError):
    """No positive week (or round) could be resolved for a request."""


class NotFoundError(MfflError):
    """A requested record does not exist."""


class ContentValidationError(MfflError):
    """Submitted league content is missing required fields or malformed."""
