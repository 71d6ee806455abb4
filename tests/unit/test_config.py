"""Unit tests for configuration loading and defaults."""

from __future__ import annotations

import platformdirs
import pytest
from pydantic import ValidationError

from designlib.config import _DEFAULT_CONFIG_DIR, FetcherSettings, FigmaSettings, Settings


class TestPlatformDefaults:
    def test_default_config_dir_matches_platformdirs(self) -> None:
        assert platformdirs.user_config_dir("designlib") == _DEFAULT_CONFIG_DIR

    def test_defaults(self) -> None:
        settings = Settings(figma={"token": None})
        assert settings.figma.token is None
        assert settings.figma.api_url == "https://api.figma.com/v1"
        assert settings.github.api_url == "https://api.github.com"
        assert settings.fetcher.max_redirects == 3
        assert settings.fetcher.check_private_ips is True
        assert settings.logging.level == "WARNING"


class TestEnvironment:
    def test_figma_token_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DESIGNLIB__FIGMA__TOKEN", "figd_from_env")
        assert Settings().figma.token == "figd_from_env"

    def test_nested_numeric_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DESIGNLIB__FETCHER__TIMEOUT_SECONDS", "42")
        assert Settings().fetcher.timeout_seconds == 42.0

    def test_constructor_beats_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DESIGNLIB__FIGMA__TOKEN", "figd_from_env")
        assert Settings(figma={"token": "figd_explicit"}).figma.token == "figd_explicit"


class TestConfigValidation:
    def test_wrong_type_raises_validation_error(self) -> None:
        with pytest.raises(ValidationError):
            Settings(fetcher={"max_redirects": "many"})  # type: ignore[arg-type]

    def test_unknown_log_level_raises_validation_error(self) -> None:
        with pytest.raises(ValidationError):
            Settings(logging={"level": "LOUD"})  # type: ignore[arg-type]

    def test_unknown_top_level_field_raises_validation_error(self) -> None:
        with pytest.raises(ValidationError):
            Settings(completely_unknown_field="oops")  # type: ignore[call-arg]

    def test_unknown_nested_field_raises_validation_error(self) -> None:
        """A typo like 'tokn' is caught rather than silently ignored."""
        with pytest.raises(ValidationError):
            FigmaSettings(tokn="figd_typo")  # type: ignore[call-arg]
        with pytest.raises(ValidationError):
            FetcherSettings(timeout=5)  # type: ignore[call-arg]
