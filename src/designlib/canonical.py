"""Name -> curated library name mapping, owned by the caller.

The resolver itself is stateless. Callers that see the same free-text
library names over and over (a chat prompt, a settings panel) keep one
``CanonicalNames`` around and pass its answer to ``resolve_library`` as
``canonical_name``.
"""

from __future__ import annotations

from designlib.naming import normalize_name
from designlib.registry import DEFAULT_REGISTRY, PatternRegistry

# alias -> curated library name
DEFAULT_ALIASES: dict[str, str] = {
    "shadcn": "shadcn/ui",
    "shadcn-ui": "shadcn/ui",
    "material": "Material UI 3",
    "material ui": "Material UI 3",
    "material design": "Material UI 3",
    "material design 3": "Material UI 3",
    "md3": "Material UI 3",
    "mui": "Material UI 3",
    "@mui": "Material UI 3",
    "@mui/material": "Material UI 3",
    "radix": "Radix UI",
    "radix primitives": "Radix UI",
    "radix themes": "Radix UI",
    "fluent": "Fluent UI",
    "fluent 2": "Fluent UI",
    "@fluentui": "Fluent UI",
    "liquid glass": "Apple Liquid Glass",
    "apple glass": "Apple Liquid Glass",
    "apple": "Apple Liquid Glass",
}


class CanonicalNames:
    """Lazily built lookup table of normalized names and aliases."""

    def __init__(
        self,
        registry: PatternRegistry = DEFAULT_REGISTRY,
        aliases: dict[str, str] | None = None,
    ) -> None:
        self._registry = registry
        self._aliases = DEFAULT_ALIASES if aliases is None else aliases
        self._table: dict[str, str] | None = None

    def _build(self) -> dict[str, str]:
        known = set(self._registry.supported_libraries())
        table = {normalize_name(name): name for name in known}
        for alias, target in self._aliases.items():
            if target in known:
                table.setdefault(normalize_name(alias), target)
        return table

    def resolve(self, name: str) -> str | None:
        """Curated name for ``name``, or None if it is not a known library."""
        if self._table is None:
            self._table = self._build()
        return self._table.get(normalize_name(name))

    def __len__(self) -> int:
        if self._table is None:
            self._table = self._build()
        return len(self._table)
