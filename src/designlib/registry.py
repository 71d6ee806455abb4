"""Curated pattern registry: instant, network-free library lookup.

The registry is built once from ``designlib.catalog`` and only read after
that, so concurrent resolutions can share it without locking.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import structlog

from designlib.catalog import CURATED_ENTRIES
from designlib.models.library import DesignLibrary, new_library_id
from designlib.models.registry import BuiltInEntry
from designlib.naming import normalize_name

if TYPE_CHECKING:
    from collections.abc import Iterable

    from designlib.models.registry import RegistryEntry

log = structlog.get_logger()


def _materialize(entry: RegistryEntry) -> DesignLibrary:
    """Build a fresh library from an entry; the component list is copied."""
    return DesignLibrary(
        id=new_library_id(),
        name=entry.name,
        description=entry.description,
        source=entry.source,
        source_url=entry.source_url,
        components=[c.model_copy() for c in entry.components],
    )


@dataclass(frozen=True)
class PatternRegistry:
    """Ordered table of curated entries plus a name index."""

    entries: tuple[RegistryEntry, ...]

    # normalized name -> entry, e.g. "materialui3" -> Material UI 3
    by_name: dict[str, RegistryEntry] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        index: dict[str, RegistryEntry] = {}
        for entry in self.entries:
            index.setdefault(normalize_name(entry.name), entry)
        object.__setattr__(self, "by_name", index)

    @classmethod
    def from_entries(cls, entries: Iterable[RegistryEntry]) -> PatternRegistry:
        return cls(entries=tuple(entries))

    def lookup(self, url: str) -> DesignLibrary | None:
        """Match ``url`` against every entry's patterns, in table order.

        The first matching entry wins, and within it the first matching
        pattern. Never performs I/O and never raises.
        """
        normalized = url.strip().casefold()
        if not normalized:
            return None
        for entry in self.entries:
            for pattern in entry.patterns:
                if pattern.search(normalized):
                    log.debug("registry_match", library=entry.name, pattern=pattern.pattern)
                    return _materialize(entry)
        return None

    def supported_libraries(self) -> list[str]:
        return sorted(entry.name for entry in self.entries)

    def built_in_entries(self) -> list[BuiltInEntry]:
        summaries = [
            BuiltInEntry(
                name=entry.name,
                description=entry.description,
                source=entry.source,
                source_url=entry.source_url,
                component_count=len(entry.components),
            )
            for entry in self.entries
        ]
        return sorted(summaries, key=lambda s: s.name.casefold())

    def instantiate(self, name: str) -> DesignLibrary | None:
        """Fresh library for a curated entry picked by name.

        Exact names match first; otherwise case and separators are ignored,
        so ``"material ui 3"`` finds ``"Material UI 3"``.
        """
        for entry in self.entries:
            if entry.name == name:
                return _materialize(entry)
        entry = self.by_name.get(normalize_name(name))
        return _materialize(entry) if entry is not None else None


DEFAULT_REGISTRY = PatternRegistry.from_entries(CURATED_ENTRIES)


def lookup(url: str) -> DesignLibrary | None:
    return DEFAULT_REGISTRY.lookup(url)


def supported_libraries() -> list[str]:
    """All curated library names, sorted, for autocomplete."""
    return DEFAULT_REGISTRY.supported_libraries()


def built_in_entries() -> list[BuiltInEntry]:
    return DEFAULT_REGISTRY.built_in_entries()


def instantiate(name: str) -> DesignLibrary | None:
    return DEFAULT_REGISTRY.instantiate(name)
