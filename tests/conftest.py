"""Shared fixtures: settings and a fetcher backed by a real httpx client.

HTTP is mocked per test with ``respx.mock``.
"""

from __future__ import annotations

import httpx
import pytest

from designlib.config import Settings
from designlib.fetcher import Fetcher


@pytest.fixture()
def settings() -> Settings:
    """Settings with no Figma token and no GitHub token."""
    return Settings(figma={"token": None}, github={"token": None})


@pytest.fixture()
def figma_settings() -> Settings:
    return Settings(figma={"token": "figd_test"}, github={"token": None})


@pytest.fixture()
async def fetcher(settings: Settings):
    async with httpx.AsyncClient() as client:
        yield Fetcher(client, settings.fetcher)


def _tree_payload(*paths: str, truncated: bool = False) -> dict:
    return {
        "sha": "abc123",
        "tree": [{"path": p, "type": "blob", "mode": "100644"} for p in paths],
        "truncated": truncated,
    }


@pytest.fixture()
def tree_payload():
    """Builder for GitHub trees API bodies with one blob per path."""
    return _tree_payload
