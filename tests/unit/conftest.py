"""Unit-specific fixtures (no network; HTTP is mocked with respx)."""

from __future__ import annotations

import pytest

from designlib.models.library import LibraryComponent
from designlib.models.registry import RegistryEntry
from designlib.registry import PatternRegistry


@pytest.fixture()
def small_registry() -> PatternRegistry:
    """Two-entry registry where both entries could plausibly match 'alpha'."""
    return PatternRegistry.from_entries(
        [
            RegistryEntry(
                patterns=[r"alpha\.dev", r"alpha"],
                name="Alpha",
                description="First entry",
                source_url="https://alpha.dev",
                components=[
                    LibraryComponent(
                        id="alpha-button", name="Button", category="Actions", description="b"
                    ),
                ],
            ),
            RegistryEntry(
                patterns=[r"alpha-beta", r"beta"],
                name="Beta",
                description="Second entry",
                source_url="https://beta.dev",
                components=[
                    LibraryComponent(
                        id="beta-card", name="Card", category="Layout", description="c"
                    ),
                    LibraryComponent(
                        id="beta-tabs", name="Tabs", category="Navigation", description="t"
                    ),
                ],
            ),
        ]
    )
