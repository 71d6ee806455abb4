"""Integration test fixtures.

Resolution runs end to end through ``resolve_library`` with a real
``httpx.AsyncClient``; every outbound request is intercepted by respx.
"""

from __future__ import annotations

import pytest

from designlib.models.library import ResolveStatus


class StatusRecorder:
    """Collects ``(status, message)`` events from a resolution."""

    def __init__(self) -> None:
        self.events: list[tuple[ResolveStatus, str]] = []

    def __call__(self, status: ResolveStatus, message: str) -> None:
        self.events.append((status, message))

    @property
    def statuses(self) -> list[ResolveStatus]:
        return [status for status, _ in self.events]

    @property
    def final(self) -> tuple[ResolveStatus, str]:
        return self.events[-1]


@pytest.fixture()
def recorder() -> StatusRecorder:
    return StatusRecorder()
