"""HTML heuristic scanner: the lowest-confidence strategy.

Three independent heuristics run over one fetched page:

1. Navigation links ending in ``/components/<slug>`` or ``/docs/<slug>``.
2. ``h2``–``h4`` headings whose text is a known UI-component noun.
3. ``application/ld+json`` blocks carrying an ``itemListElement`` list.

Results are merged in that order, deduplicated by normalized name.
"""

from __future__ import annotations

import json
import re
from typing import TYPE_CHECKING, Any
from urllib.parse import urlparse

import structlog
from bs4 import BeautifulSoup

from designlib.errors import DesignLibError
from designlib.models.library import DesignLibrary, LibraryComponent, LibrarySource
from designlib.naming import normalize_name, slugify, title_case, unique_id

if TYPE_CHECKING:
    from collections.abc import Iterator

    from designlib.config import Settings
    from designlib.fetcher import Fetcher

log = structlog.get_logger()

_NAV_SLUG = re.compile(r"/(?:components?|docs)/([\w-]+)/?$", re.IGNORECASE)
_TITLE_SEPARATOR = re.compile(r"[|\-–—]")
_BARE_HOST = re.compile(r"^[a-z0-9][a-z0-9-]*(\.[a-z0-9-]+)+(:\d+)?(/\S*)?$", re.IGNORECASE)
_HEADING_TAGS = ["h2", "h3", "h4"]
_MIN_NAME, _MAX_NAME = 2, 40

KNOWN_COMPONENT_WORDS = frozenset(
    {
        "button", "input", "select", "checkbox", "radio", "switch", "toggle",
        "slider", "dialog", "modal", "alert", "toast", "tooltip", "popover",
        "menu", "dropdown", "tabs", "tab", "accordion", "card", "avatar",
        "badge", "breadcrumb", "calendar", "carousel", "chip", "divider",
        "drawer", "form", "grid", "icon", "label", "link", "list", "nav",
        "pagination", "progress", "skeleton", "spinner", "stepper", "table",
        "tag", "textarea", "toolbar", "tree", "typography", "separator",
        "scroll", "sheet", "sidebar", "combobox", "picker", "rating",
        "fab", "snackbar", "banner",
    }
)  # fmt: skip


def as_http_url(identifier: str) -> str | None:
    """The identifier as an http(s) URL, or None if it cannot be one.

    Bare hosts like ``ui.example.com/docs`` are completed with ``https://``;
    plain library names are not URLs.
    """
    candidate = identifier.strip()
    parsed = urlparse(candidate)
    if parsed.scheme in ("http", "https") and parsed.netloc:
        return candidate
    if not parsed.scheme and _BARE_HOST.match(candidate):
        return f"https://{candidate}"
    return None


def _nav_link_names(soup: BeautifulSoup) -> Iterator[str]:
    for anchor in soup.find_all("a", href=True):
        try:
            path = urlparse(anchor["href"]).path
        except ValueError:
            log.debug("html_invalid_href", href=anchor["href"])
            continue
        match = _NAV_SLUG.search(path)
        if match is None:
            continue
        slug = match.group(1)
        if _MIN_NAME <= len(slug) <= _MAX_NAME:
            yield title_case(slug)


def _heading_names(soup: BeautifulSoup) -> Iterator[str]:
    for heading in soup.find_all(_HEADING_TAGS):
        text = heading.get_text(" ", strip=True)
        if not _MIN_NAME <= len(text) <= _MAX_NAME:
            continue
        if normalize_name(text) in KNOWN_COMPONENT_WORDS:
            yield text


def _item_list_containers(data: Any) -> Iterator[dict[str, Any]]:
    if isinstance(data, list):
        for item in data:
            yield from _item_list_containers(item)
    elif isinstance(data, dict):
        if "itemListElement" in data:
            yield data
        graph = data.get("@graph")
        if isinstance(graph, list):
            yield from _item_list_containers(graph)


def _structured_data_names(soup: BeautifulSoup) -> Iterator[str]:
    for script in soup.find_all("script", type="application/ld+json"):
        raw = script.string or script.get_text()
        try:
            data = json.loads(raw)
        except (json.JSONDecodeError, TypeError):
            log.debug("html_invalid_json_ld")
            continue
        for container in _item_list_containers(data):
            elements = container["itemListElement"]
            if not isinstance(elements, list):
                continue
            for element in elements:
                if not isinstance(element, dict):
                    continue
                name = element.get("name")
                if not name and isinstance(element.get("item"), dict):
                    name = element["item"].get("name")
                if isinstance(name, str) and name.strip():
                    yield name.strip()


def page_title(soup: BeautifulSoup, fallback: str) -> str:
    """Title text before the first separator, e.g. ``"Chakra UI | Docs"`` -> ``"Chakra UI"``."""
    if soup.title is None:
        return fallback
    title = soup.title.get_text(strip=True)
    name = _TITLE_SEPARATOR.split(title, maxsplit=1)[0].strip()
    return name or fallback


def components_from_html(html: str, host: str) -> tuple[str, list[LibraryComponent]]:
    """Run all three heuristics; returns ``(library name, components)``."""
    soup = BeautifulSoup(html, "html.parser")
    components: list[LibraryComponent] = []
    seen: set[str] = set()
    ids: set[str] = set()

    heuristics = (
        (_nav_link_names(soup), f"Discovered from {host}"),
        (_heading_names(soup), f"Discovered from {host}"),
        (_structured_data_names(soup), "Discovered from structured data"),
    )
    for names, description in heuristics:
        for name in names:
            key = normalize_name(name)
            if not key or key in seen:
                continue
            seen.add(key)
            components.append(
                LibraryComponent(
                    id=unique_id(f"html-{slugify(name) or key}", ids),
                    name=name,
                    category="Components",
                    description=description,
                )
            )

    return page_title(soup, host), components


async def scan_html(url: str, fetcher: Fetcher, settings: Settings) -> DesignLibrary | None:
    """Scrape an arbitrary page for component names, or None."""
    page_url = as_http_url(url)
    if page_url is None:
        return None
    host = urlparse(page_url).hostname or page_url

    try:
        html = await fetcher.fetch_text(page_url, headers={"Accept": "text/html"})
    except DesignLibError as exc:
        log.warning("html_fetch_failed", url=page_url, code=exc.code, error=exc.message)
        return None

    name, components = components_from_html(html, host)
    if not components:
        log.info("html_no_components", url=page_url)
        return None

    return DesignLibrary(
        name=name,
        description=f"Discovered from {host}",
        source=LibrarySource.HTML,
        source_url=page_url,
        components=components,
    )
