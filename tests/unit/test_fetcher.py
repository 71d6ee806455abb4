"""Unit tests for designlib.fetcher."""

from __future__ import annotations

import httpx
import pytest
import respx

from designlib.config import FetcherSettings, Settings
from designlib.errors import DesignLibError, ErrorCode
from designlib.fetcher import Fetcher, build_http_client, is_url_allowed

# ---------------------------------------------------------------------------
# is_url_allowed
# ---------------------------------------------------------------------------


class TestIsUrlAllowed:
    @pytest.mark.parametrize(
        "url",
        [
            "https://example.com/page",
            "http://docs.example.com",
            "https://93.184.216.34/page",
        ],
    )
    def test_public_urls_allowed(self, url: str) -> None:
        assert is_url_allowed(url)

    @pytest.mark.parametrize(
        "url",
        [
            "ftp://example.com/file",
            "file:///etc/passwd",
            "https://",
            "example.com/page",
        ],
    )
    def test_non_http_urls_refused(self, url: str) -> None:
        assert not is_url_allowed(url)

    @pytest.mark.parametrize(
        "url",
        [
            "http://127.0.0.1/internal",
            "http://10.0.0.5/",
            "http://192.168.1.1/secret",
            "http://169.254.169.254/latest/meta-data",
            "http://[::1]:8080/",
        ],
    )
    def test_private_ips_refused(self, url: str) -> None:
        assert not is_url_allowed(url)

    def test_private_ip_check_can_be_disabled(self) -> None:
        assert is_url_allowed("http://127.0.0.1:8000/components", check_private_ips=False)


# ---------------------------------------------------------------------------
# build_http_client
# ---------------------------------------------------------------------------


class TestBuildHttpClient:
    def test_client_configuration(self) -> None:
        client = build_http_client()
        assert isinstance(client, httpx.AsyncClient)
        # follow_redirects is False (we handle redirects manually)
        assert client.follow_redirects is False
        assert client.headers["user-agent"].startswith("designlib/")

    def test_timeouts_from_settings(self) -> None:
        settings = Settings(fetcher={"timeout_seconds": 30, "connect_timeout_seconds": 2})
        client = build_http_client(settings)
        assert client.timeout.read == 30
        assert client.timeout.connect == 2


# ---------------------------------------------------------------------------
# Fetcher
# ---------------------------------------------------------------------------


class TestFetcher:
    async def test_successful_fetch(self) -> None:
        with respx.mock:
            respx.get("https://example.com/page").mock(
                return_value=httpx.Response(200, text="<h2>Button</h2>")
            )
            async with httpx.AsyncClient() as client:
                fetcher = Fetcher(client)
                result = await fetcher.fetch_text("https://example.com/page")
                assert result == "<h2>Button</h2>"

    async def test_headers_forwarded(self) -> None:
        with respx.mock:
            route = respx.get("https://example.com/api").mock(
                return_value=httpx.Response(200, json={"ok": True})
            )
            async with httpx.AsyncClient() as client:
                fetcher = Fetcher(client)
                result = await fetcher.fetch_json(
                    "https://example.com/api", headers={"X-Figma-Token": "t"}
                )
        assert result == {"ok": True}
        assert route.calls.last.request.headers["x-figma-token"] == "t"

    @pytest.mark.parametrize(
        ("status", "code", "recoverable"),
        [
            (404, ErrorCode.PAGE_NOT_FOUND, False),
            (401, ErrorCode.AUTH_FAILED, False),
            (403, ErrorCode.AUTH_FAILED, False),
            (429, ErrorCode.RATE_LIMITED, True),
            (409, ErrorCode.UPSTREAM_ERROR, False),
            (500, ErrorCode.UPSTREAM_ERROR, True),
            (503, ErrorCode.UPSTREAM_ERROR, True),
        ],
    )
    async def test_status_mapping(
        self, status: int, code: ErrorCode, recoverable: bool
    ) -> None:
        with respx.mock:
            respx.get("https://example.com/x").mock(return_value=httpx.Response(status))
            async with httpx.AsyncClient() as client:
                fetcher = Fetcher(client)
                with pytest.raises(DesignLibError) as exc_info:
                    await fetcher.fetch_text("https://example.com/x")
                assert exc_info.value.code == code
                assert exc_info.value.recoverable is recoverable

    async def test_network_error_raises_error(self) -> None:
        with respx.mock:
            respx.get("https://example.com/timeout").mock(
                side_effect=httpx.ConnectError("Connection refused")
            )
            async with httpx.AsyncClient() as client:
                fetcher = Fetcher(client)
                with pytest.raises(DesignLibError) as exc_info:
                    await fetcher.fetch_text("https://example.com/timeout")
                assert exc_info.value.code == ErrorCode.FETCH_FAILED
                assert exc_info.value.recoverable is True

    async def test_invalid_json_raises_error(self) -> None:
        with respx.mock:
            respx.get("https://example.com/api").mock(
                return_value=httpx.Response(200, text="<html>not json</html>")
            )
            async with httpx.AsyncClient() as client:
                fetcher = Fetcher(client)
                with pytest.raises(DesignLibError) as exc_info:
                    await fetcher.fetch_json("https://example.com/api")
                assert exc_info.value.code == ErrorCode.INVALID_PAYLOAD

    async def test_redirect_followed(self) -> None:
        with respx.mock:
            respx.get("https://example.com/old").mock(
                return_value=httpx.Response(301, headers={"location": "https://example.com/new"})
            )
            respx.get("https://example.com/new").mock(
                return_value=httpx.Response(200, text="Redirected content")
            )
            async with httpx.AsyncClient() as client:
                fetcher = Fetcher(client)
                result = await fetcher.fetch_text("https://example.com/old")
                assert result == "Redirected content"

    async def test_relative_redirect_resolved(self) -> None:
        with respx.mock:
            respx.get("https://example.com/old").mock(
                return_value=httpx.Response(302, headers={"location": "/new-path"})
            )
            respx.get("https://example.com/new-path").mock(
                return_value=httpx.Response(200, text="Relative redirect content")
            )
            async with httpx.AsyncClient() as client:
                fetcher = Fetcher(client)
                result = await fetcher.fetch_text("https://example.com/old")
                assert result == "Relative redirect content"

    async def test_redirect_to_private_ip(self) -> None:
        with respx.mock:
            respx.get("https://example.com/redirect").mock(
                return_value=httpx.Response(301, headers={"location": "http://127.0.0.1/internal"})
            )
            async with httpx.AsyncClient() as client:
                fetcher = Fetcher(client)
                with pytest.raises(DesignLibError) as exc_info:
                    await fetcher.fetch_text("https://example.com/redirect")
                assert exc_info.value.code == ErrorCode.URL_NOT_ALLOWED

    async def test_redirect_without_location(self) -> None:
        with respx.mock:
            respx.get("https://example.com/redirect").mock(return_value=httpx.Response(302))
            async with httpx.AsyncClient() as client:
                fetcher = Fetcher(client)
                with pytest.raises(DesignLibError) as exc_info:
                    await fetcher.fetch_text("https://example.com/redirect")
                assert exc_info.value.code == ErrorCode.UPSTREAM_ERROR

    async def test_too_many_redirects(self) -> None:
        with respx.mock:
            # 4 redirects (max is 3)
            for i in range(4):
                respx.get(f"https://example.com/r{i}").mock(
                    return_value=httpx.Response(
                        301, headers={"location": f"https://example.com/r{i + 1}"}
                    )
                )
            respx.get("https://example.com/r4").mock(return_value=httpx.Response(200, text="Final"))
            async with httpx.AsyncClient() as client:
                fetcher = Fetcher(client)
                with pytest.raises(DesignLibError) as exc_info:
                    await fetcher.fetch_text("https://example.com/r0")
                assert exc_info.value.code == ErrorCode.TOO_MANY_REDIRECTS
                assert exc_info.value.recoverable is False

    async def test_max_redirects_configurable(self) -> None:
        with respx.mock:
            respx.get("https://example.com/r0").mock(
                return_value=httpx.Response(301, headers={"location": "https://example.com/r1"})
            )
            respx.get("https://example.com/r1").mock(return_value=httpx.Response(200, text="ok"))
            async with httpx.AsyncClient() as client:
                fetcher = Fetcher(client, FetcherSettings(max_redirects=0))
                with pytest.raises(DesignLibError) as exc_info:
                    await fetcher.fetch_text("https://example.com/r0")
                assert exc_info.value.code == ErrorCode.TOO_MANY_REDIRECTS

    async def test_private_ip_refused_before_request(self) -> None:
        with respx.mock(assert_all_called=False) as router:
            async with httpx.AsyncClient() as client:
                fetcher = Fetcher(client)
                with pytest.raises(DesignLibError) as exc_info:
                    await fetcher.fetch_text("http://192.168.1.1/secret")
            assert router.calls.call_count == 0
        assert exc_info.value.code == ErrorCode.URL_NOT_ALLOWED

    async def test_private_ip_allowed_when_check_disabled(self) -> None:
        settings = FetcherSettings(check_private_ips=False)
        with respx.mock:
            respx.get("http://127.0.0.1:8000/components").mock(
                return_value=httpx.Response(200, text="local")
            )
            async with httpx.AsyncClient() as client:
                fetcher = Fetcher(client, settings)
                result = await fetcher.fetch_text("http://127.0.0.1:8000/components")
                assert result == "local"


# ---------------------------------------------------------------------------
# DesignLibError
# ---------------------------------------------------------------------------


class TestDesignLibError:
    def test_str_includes_code(self) -> None:
        error = DesignLibError(ErrorCode.PAGE_NOT_FOUND, "Not found: https://example.com")
        assert str(error) == "[PAGE_NOT_FOUND] Not found: https://example.com"
        assert error.recoverable is False
