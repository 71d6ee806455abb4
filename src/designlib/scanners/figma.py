"""Figma file scanner.

Reads components from the file's published ``components`` and
``componentSets`` maps and, for files that publish nothing, from a walk of
the document tree. Requires ``settings.figma.token``.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

import structlog
from pydantic import ValidationError

from designlib.errors import DesignLibError
from designlib.models.library import DesignLibrary, LibraryComponent, LibrarySource
from designlib.models.remote import FigmaFile, FigmaNode
from designlib.naming import normalize_name

if TYPE_CHECKING:
    from collections.abc import Iterator

    from designlib.config import Settings
    from designlib.fetcher import Fetcher

log = structlog.get_logger()

_FILE_KEY = re.compile(r"figma\.com/(?:file|design)/([a-zA-Z0-9]+)", re.IGNORECASE)
_COMPONENT_NODE_TYPES = frozenset({"COMPONENT", "COMPONENT_SET"})


def extract_file_key(url: str) -> str | None:
    """File key from ``/file/<key>/...`` or ``/design/<key>/...`` URLs."""
    match = _FILE_KEY.search(url)
    return match.group(1) if match else None


def _walk(node: FigmaNode) -> Iterator[FigmaNode]:
    """Depth-first, pre-order."""
    yield node
    for child in node.children:
        yield from _walk(child)


class _Collector:
    """Accumulates components, dropping names already seen."""

    def __init__(self) -> None:
        self.components: list[LibraryComponent] = []
        self._seen: set[str] = set()

    def add(self, component_id: str, name: str, category: str, description: str) -> None:
        key = normalize_name(name)
        if not key or key in self._seen:
            return
        self._seen.add(key)
        self.components.append(
            LibraryComponent(id=component_id, name=name, category=category, description=description)
        )


def components_from_file(data: FigmaFile) -> list[LibraryComponent]:
    """All three extraction passes, deduplicated and sorted by name."""
    collector = _Collector()

    for node_id, meta in data.components.items():
        collector.add(
            f"figma-{node_id}",
            meta.name,
            "Variants" if meta.component_set_id else "Components",
            meta.description or "Figma component",
        )

    for node_id, meta in data.component_sets.items():
        collector.add(
            f"figma-set-{node_id}",
            meta.name,
            "Component Sets",
            meta.description or "Figma component set",
        )

    # Files that don't publish components still contain component nodes.
    if not collector.components and data.document is not None:
        for top in data.document.children:
            for node in _walk(top):
                if node.type not in _COMPONENT_NODE_TYPES:
                    continue
                collector.add(
                    f"figma-node-{node.id}",
                    node.name,
                    "Component Sets" if node.type == "COMPONENT_SET" else "Components",
                    f"Figma {node.type.lower().replace('_', ' ')}",
                )

    return sorted(collector.components, key=lambda c: c.name.casefold())


async def scan_figma(url: str, fetcher: Fetcher, settings: Settings) -> DesignLibrary | None:
    """Resolve a Figma file URL into a library, or None."""
    file_key = extract_file_key(url)
    if file_key is None:
        log.info("figma_url_unrecognized", url=url)
        return None

    token = settings.figma.token
    if not token:
        log.warning("figma_token_missing", file_key=file_key)
        return None

    api = settings.figma.api_url.rstrip("/")
    try:
        payload = await fetcher.fetch_json(
            f"{api}/files/{file_key}?depth=1", headers={"X-Figma-Token": token}
        )
        data = FigmaFile.model_validate(payload)
    except DesignLibError as exc:
        log.warning("figma_fetch_failed", file_key=file_key, code=exc.code, error=exc.message)
        return None
    except ValidationError:
        log.warning("figma_payload_invalid", file_key=file_key, exc_info=True)
        return None

    components = components_from_file(data)
    if not components:
        log.info("figma_no_components", file_key=file_key)
        return None

    return DesignLibrary(
        name=data.name or f"Figma File ({file_key})",
        description=f"Figma file with {len(components)} components",
        source=LibrarySource.FIGMA,
        source_url=url,
        components=components,
    )
