"""Library resolution waterfall.

Strategies run strictly in order and the first one that yields a library
with components wins:

  1. Curated registry   : always, no network
  2. Figma REST API     : figma.com URLs only; failure ends the resolution
  3. GitHub trees API   : github.com URLs
  4. HTML heuristics    : everything still unresolved

There are no retries and nothing is cached between calls. No exception
escapes ``resolve_library``; callers see a library or ``None`` plus the
status messages.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from urllib.parse import urlparse

import structlog
from pydantic import ValidationError

from designlib.config import Settings
from designlib.fetcher import Fetcher, build_http_client
from designlib.models.library import DesignLibrary, ResolveStatus
from designlib.models.tools import ResolveLibraryInput
from designlib.registry import DEFAULT_REGISTRY, PatternRegistry
from designlib.scanners import scan_figma, scan_github, scan_html

log = structlog.get_logger()

StatusCallback = Callable[[ResolveStatus, str], None]
ScanFn = Callable[[str], Awaitable[DesignLibrary | None]]

FIGMA_TOKEN_MESSAGE = (
    "Could not read Figma file. Set DESIGNLIB__FIGMA__TOKEN (or figma.token in "
    "designlib.yaml) to enable Figma access."
)
NOT_FOUND_MESSAGE = "No components found at this URL"
CONFIG_ERROR_MESSAGE = "Invalid designlib configuration"


@dataclass(frozen=True)
class Strategy:
    """One step of the waterfall.

    ``exclusive`` strategies end the resolution whenever they apply: if they
    fail, ``failure_message`` is reported and later strategies are skipped.
    """

    name: str
    applies: Callable[[str], bool]
    scan: ScanFn
    progress_message: str
    success_message: Callable[[DesignLibrary], str]
    exclusive: bool = False
    failure_message: str = NOT_FOUND_MESSAGE


def _host(identifier: str) -> str:
    parsed = urlparse(identifier if "://" in identifier else f"//{identifier}")
    return (parsed.hostname or "").lower()


def is_figma_url(identifier: str) -> bool:
    host = _host(identifier)
    return host == "figma.com" or host.endswith(".figma.com")


def is_github_url(identifier: str) -> bool:
    host = _host(identifier)
    return host == "github.com" or host.endswith(".github.com")


def _always(_: str) -> bool:
    return True


def _first_error(exc: ValidationError) -> str:
    """``"fetcher.timeout_seconds: Input should be a valid number"``."""
    errors = exc.errors()
    if not errors:
        return "invalid value"
    loc = ".".join(str(part) for part in errors[0]["loc"])
    return f"{loc}: {errors[0]['msg']}" if loc else errors[0]["msg"]


def build_strategies(
    fetcher: Fetcher,
    settings: Settings,
    registry: PatternRegistry = DEFAULT_REGISTRY,
    canonical_name: str | None = None,
) -> list[Strategy]:
    """The waterfall, in priority order. Append here to add a strategy."""

    async def curated(url: str) -> DesignLibrary | None:
        if canonical_name:
            library = registry.instantiate(canonical_name)
            if library is not None:
                return library
        return registry.lookup(url)

    async def figma(url: str) -> DesignLibrary | None:
        return await scan_figma(url, fetcher, settings)

    async def github(url: str) -> DesignLibrary | None:
        return await scan_github(url, fetcher, settings)

    async def html(url: str) -> DesignLibrary | None:
        return await scan_html(url, fetcher, settings)

    return [
        Strategy(
            name="curated",
            applies=_always,
            scan=curated,
            progress_message="Checking known libraries…",
            success_message=lambda lib: f"Matched {lib.name} ({len(lib.components)} components)",
        ),
        Strategy(
            name="figma",
            applies=is_figma_url,
            scan=figma,
            progress_message="Reading Figma file…",
            success_message=lambda lib: f"Found {len(lib.components)} components from Figma",
            exclusive=True,
            failure_message=FIGMA_TOKEN_MESSAGE,
        ),
        Strategy(
            name="github",
            applies=is_github_url,
            scan=github,
            progress_message="Scanning GitHub repository…",
            success_message=lambda lib: f"Found {len(lib.components)} components from GitHub",
        ),
        Strategy(
            name="html",
            applies=_always,
            scan=html,
            progress_message="Scanning page for components…",
            success_message=lambda lib: f"Discovered {len(lib.components)} components",
        ),
    ]


def _emitter(on_status: StatusCallback | None) -> StatusCallback:
    def emit(status: ResolveStatus, message: str) -> None:
        log.debug("resolve_status", status=status.value, message=message)
        if on_status is None:
            return
        try:
            on_status(status, message)
        except Exception:
            log.warning("status_callback_failed", status=status.value, exc_info=True)

    return emit


async def run_strategies(
    url: str, strategies: list[Strategy], on_status: StatusCallback | None = None
) -> DesignLibrary | None:
    """Try each applicable strategy in order; first non-empty library wins."""
    emit = _emitter(on_status)
    failure_message = NOT_FOUND_MESSAGE

    for strategy in strategies:
        if not strategy.applies(url):
            continue
        emit(ResolveStatus.RESOLVING, strategy.progress_message)
        try:
            library = await strategy.scan(url)
        except Exception:
            # Scanners handle their expected failures; this is the last barrier.
            log.error("strategy_crashed", strategy=strategy.name, url=url, exc_info=True)
            library = None

        if library is not None and library.components:
            log.info(
                "library_resolved",
                strategy=strategy.name,
                library=library.name,
                components=len(library.components),
            )
            emit(ResolveStatus.RESOLVED, strategy.success_message(library))
            return library

        log.debug("strategy_no_result", strategy=strategy.name, url=url)
        if strategy.exclusive:
            failure_message = strategy.failure_message
            break

    log.info("library_not_resolved", url=url)
    emit(ResolveStatus.ERROR, failure_message)
    return None


async def resolve_library(
    identifier: str,
    on_status: StatusCallback | None = None,
    *,
    fetcher: Fetcher | None = None,
    settings: Settings | None = None,
    registry: PatternRegistry = DEFAULT_REGISTRY,
    canonical_name: str | None = None,
) -> DesignLibrary | None:
    """Resolve a URL or library name into a ``DesignLibrary``.

    Args:
        identifier: Library name, docs page URL, GitHub repository URL or
            Figma file URL.
        on_status: Optional ``(status, message)`` progress callback, called
            before each strategy attempt and once at the end.
        fetcher: HTTP fetcher to use. When omitted, a client is built from
            ``settings`` for this call and closed afterwards.
        settings: Defaults to ``Settings()`` (env + designlib.yaml). If that
            configuration is invalid, an ``error`` status is reported.
        registry: Curated table; the built-in one unless testing.
        canonical_name: A curated library name the caller already resolved
            (for example from its own alias cache). Tried before pattern
            matching.

    Returns:
        The library, or ``None`` when every applicable strategy failed.
    """
    try:
        params = ResolveLibraryInput(identifier=identifier, canonical_name=canonical_name)
    except ValidationError as exc:
        message = exc.errors()[0]["msg"] if exc.errors() else "invalid identifier"
        log.info("resolve_invalid_input", error=message)
        _emitter(on_status)(ResolveStatus.ERROR, message)
        return None

    if settings is None:
        try:
            settings = Settings()
        except ValidationError as exc:
            log.error("settings_invalid", error=str(exc))
            message = f"{CONFIG_ERROR_MESSAGE}: {_first_error(exc)}"
            _emitter(on_status)(ResolveStatus.ERROR, message)
            return None

    if fetcher is not None:
        strategies = build_strategies(fetcher, settings, registry, params.canonical_name)
        return await run_strategies(params.identifier, strategies, on_status)

    async with build_http_client(settings) as client:
        owned = Fetcher(client, settings.fetcher)
        strategies = build_strategies(owned, settings, registry, params.canonical_name)
        return await run_strategies(params.identifier, strategies, on_status)
