"""HTTP fetching for the remote discovery strategies.

Redirects are followed manually so that every hop is re-checked against
``is_url_allowed``. Failures are raised as ``DesignLibError``; the scanners
decide what a failure means for the resolution.
"""

from __future__ import annotations

import ipaddress
import json
from typing import Any
from urllib.parse import urljoin, urlparse

import httpx
import structlog

from designlib.config import FetcherSettings, Settings
from designlib.errors import DesignLibError, ErrorCode

log = structlog.get_logger()

_REDIRECT_CODES = frozenset({301, 302, 303, 307, 308})


def build_http_client(settings: Settings | None = None) -> httpx.AsyncClient:
    """Shared async client. Redirects are handled by ``Fetcher``."""
    fetcher_settings = settings.fetcher if settings is not None else FetcherSettings()
    return httpx.AsyncClient(
        follow_redirects=False,
        timeout=httpx.Timeout(
            fetcher_settings.timeout_seconds,
            connect=fetcher_settings.connect_timeout_seconds,
        ),
        headers={"User-Agent": fetcher_settings.user_agent},
    )


def _is_private_host(host: str) -> bool:
    try:
        ip = ipaddress.ip_address(host.strip("[]"))
    except ValueError:
        return False  # A hostname, not a literal IP
    return ip.is_private or ip.is_loopback or ip.is_link_local or ip.is_reserved


def is_url_allowed(url: str, check_private_ips: bool = True) -> bool:
    """Only http(s) URLs with a host; literal private IPs optionally refused."""
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.hostname:
        return False
    if check_private_ips and _is_private_host(parsed.hostname):
        return False
    return True


def _raise_for_status(response: httpx.Response, url: str) -> None:
    status = response.status_code
    if 200 <= status < 300:
        return
    if status == 404:
        raise DesignLibError(ErrorCode.PAGE_NOT_FOUND, f"Not found: {url}")
    if status in (401, 403):
        raise DesignLibError(ErrorCode.AUTH_FAILED, f"HTTP {status} (unauthorized) for {url}")
    if status == 429:
        raise DesignLibError(
            ErrorCode.RATE_LIMITED, f"HTTP 429 (rate limited) for {url}", recoverable=True
        )
    raise DesignLibError(
        ErrorCode.UPSTREAM_ERROR, f"HTTP {status} for {url}", recoverable=status >= 500
    )


class Fetcher:
    """Thin wrapper over ``httpx.AsyncClient`` with redirect and status policy."""

    def __init__(self, client: httpx.AsyncClient, settings: FetcherSettings | None = None) -> None:
        self._client = client
        self._settings = settings or FetcherSettings()

    async def _get(self, url: str, headers: dict[str, str] | None) -> httpx.Response:
        current = url
        for _ in range(self._settings.max_redirects + 1):
            if not is_url_allowed(current, self._settings.check_private_ips):
                raise DesignLibError(ErrorCode.URL_NOT_ALLOWED, f"URL not allowed: {current}")
            try:
                response = await self._client.get(current, headers=headers)
            except httpx.HTTPError as exc:
                raise DesignLibError(
                    ErrorCode.FETCH_FAILED,
                    f"Request to {current} failed: {exc}",
                    recoverable=True,
                ) from exc

            if response.status_code not in _REDIRECT_CODES:
                _raise_for_status(response, current)
                return response

            location = response.headers.get("location")
            if not location:
                raise DesignLibError(
                    ErrorCode.UPSTREAM_ERROR, f"Redirect without location from {current}"
                )
            current = urljoin(current, location)
            log.debug("fetch_redirect", url=url, location=current)

        raise DesignLibError(
            ErrorCode.TOO_MANY_REDIRECTS,
            f"More than {self._settings.max_redirects} redirects for {url}",
        )

    async def fetch_text(self, url: str, headers: dict[str, str] | None = None) -> str:
        response = await self._get(url, headers)
        return response.text

    async def fetch_json(self, url: str, headers: dict[str, str] | None = None) -> Any:
        response = await self._get(url, headers)
        try:
            return response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise DesignLibError(
                ErrorCode.INVALID_PAYLOAD, f"Response from {url} is not valid JSON"
            ) from exc
