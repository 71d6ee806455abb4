"""Configuration loading.

Settings are loaded in priority order (highest first):
  1. Constructor arguments
  2. Environment variables  (DESIGNLIB__FIGMA__TOKEN=figd_...)
  3. designlib.yaml         (searched in cwd, then the platform config dir)
  4. Hardcoded defaults

The config file is optional; all fields have sensible defaults. The only
setting most users touch is the Figma token; without it Figma URLs cannot be
resolved.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import platformdirs
from pydantic import BaseModel, ConfigDict
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

_DEFAULT_CONFIG_DIR = platformdirs.user_config_dir("designlib")


def _find_config_file() -> str | None:
    """Return the path of the first designlib.yaml found, or None."""
    candidates = [
        Path("designlib.yaml"),
        Path(_DEFAULT_CONFIG_DIR) / "designlib.yaml",
    ]
    for path in candidates:
        if path.exists():
            return str(path)
    return None


class FigmaSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    token: str | None = None
    api_url: str = "https://api.figma.com/v1"


class GitHubSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    # Optional; raises the anonymous rate limit when set.
    token: str | None = None
    api_url: str = "https://api.github.com"


class FetcherSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    timeout_seconds: float = 15.0
    connect_timeout_seconds: float = 5.0
    max_redirects: int = 3
    user_agent: str = "designlib/0.1 (+https://github.com/designlib/designlib)"
    # Refuse literal private/loopback IPs in user-supplied page URLs.
    check_private_ips: bool = True


class LoggingSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    format: Literal["json", "text"] = "text"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        # Double-underscore separates nesting: DESIGNLIB__FETCHER__TIMEOUT_SECONDS=30
        env_prefix="DESIGNLIB__",
        env_nested_delimiter="__",
        yaml_file=_find_config_file(),
        yaml_file_encoding="utf-8",
    )

    figma: FigmaSettings = FigmaSettings()
    github: GitHubSettings = GitHubSettings()
    fetcher: FetcherSettings = FetcherSettings()
    logging: LoggingSettings = LoggingSettings()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
        **kwargs: Any,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,  # Constructor args (highest priority)
            env_settings,  # Environment variables
            YamlConfigSettingsSource(settings_cls),  # YAML file
            # dotenv and file secrets intentionally excluded
        )
