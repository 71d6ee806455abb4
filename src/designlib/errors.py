"""Error types raised inside the resolver.

``DesignLibError`` never crosses the public ``resolve_library`` boundary:
the fetcher raises it, the scanners catch it and turn it into a ``None``
result, and the orchestrator reports failure through status messages.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorCode(StrEnum):
    INVALID_INPUT = "INVALID_INPUT"
    URL_NOT_ALLOWED = "URL_NOT_ALLOWED"
    TOO_MANY_REDIRECTS = "TOO_MANY_REDIRECTS"
    PAGE_NOT_FOUND = "PAGE_NOT_FOUND"
    AUTH_FAILED = "AUTH_FAILED"
    RATE_LIMITED = "RATE_LIMITED"
    UPSTREAM_ERROR = "UPSTREAM_ERROR"
    FETCH_FAILED = "FETCH_FAILED"
    INVALID_PAYLOAD = "INVALID_PAYLOAD"


class DesignLibError(Exception):
    """Structured error carrying a machine-readable code.

    ``recoverable`` tells the caller whether trying again later could
    succeed (network hiccups, rate limits) or not (bad URL, missing page).
    """

    def __init__(self, code: ErrorCode, message: str, *, recoverable: bool = False) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.recoverable = recoverable

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"
