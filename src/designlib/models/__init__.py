from __future__ import annotations

from designlib.models.library import (
    DesignLibrary,
    LibraryComponent,
    LibrarySource,
    ResolveStatus,
    new_library_id,
)
from designlib.models.registry import BuiltInEntry, RegistryEntry
from designlib.models.remote import (
    FigmaComponentMeta,
    FigmaFile,
    FigmaNode,
    GitHubRepo,
    GitHubTree,
    GitHubTreeItem,
)
from designlib.models.tools import ResolveLibraryInput

__all__ = [
    # library
    "DesignLibrary",
    "LibraryComponent",
    "LibrarySource",
    "ResolveStatus",
    "new_library_id",
    # registry
    "RegistryEntry",
    "BuiltInEntry",
    # remote payloads
    "GitHubRepo",
    "GitHubTree",
    "GitHubTreeItem",
    "FigmaFile",
    "FigmaComponentMeta",
    "FigmaNode",
    # tools
    "ResolveLibraryInput",
]
