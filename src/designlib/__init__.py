"""Resolve a URL or library name into a catalog of UI design-system components."""

from __future__ import annotations

from designlib.canonical import CanonicalNames
from designlib.config import Settings
from designlib.models import DesignLibrary, LibraryComponent, LibrarySource, ResolveStatus
from designlib.registry import built_in_entries, instantiate, lookup, supported_libraries
from designlib.resolver import resolve_library

__all__ = [
    "CanonicalNames",
    "DesignLibrary",
    "LibraryComponent",
    "LibrarySource",
    "ResolveStatus",
    "Settings",
    "built_in_entries",
    "instantiate",
    "lookup",
    "resolve_library",
    "supported_libraries",
]
