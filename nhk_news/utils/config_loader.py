from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from urllib.parse import urljoin, urlparse

import yaml


class ConfigError(Exception):
    """Raised when the configuration file is invalid or missing required fields."""


DEFAULT_BASE_URL = "https://www3.nhk.or.jp/news/easy/"
DEFAULT_EASY_PATH = "news-list.json"
DEFAULT_TOP_PATH = "top-list.json"
DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = "nhk-news/0.1 (+https://www3.nhk.or.jp/news/easy/)"

_STRING_KEYS = ("base_url", "easy_path", "top_path", "user_agent")


@dataclass(frozen=True, slots=True)
class ClientConfig:
    """Endpoints and transport settings for :class:`~nhk_news.client.NhkNewsClient`."""

    base_url: str = DEFAULT_BASE_URL
    easy_path: str = DEFAULT_EASY_PATH
    top_path: str = DEFAULT_TOP_PATH
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT

    @property
    def easy_url(self) -> str:
        return urljoin(_with_trailing_slash(self.base_url), self.easy_path)

    @property
    def top_url(self) -> str:
        return urljoin(_with_trailing_slash(self.base_url), self.top_path)

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """Build a config from ``NHK_NEWS_*`` environment variables.

        Unset variables keep the defaults; invalid values raise ``ConfigError``.
        """
        entry: dict = {}
        if os.getenv("NHK_NEWS_BASE_URL"):
            entry["base_url"] = os.environ["NHK_NEWS_BASE_URL"]
        if os.getenv("NHK_NEWS_TIMEOUT"):
            entry["timeout"] = os.environ["NHK_NEWS_TIMEOUT"]
        if os.getenv("NHK_NEWS_USER_AGENT"):
            entry["user_agent"] = os.environ["NHK_NEWS_USER_AGENT"]
        return _coerce_config(entry, cls())


def _with_trailing_slash(url: str) -> str:
    return url if url.endswith("/") else url + "/"


def _validate_config_dict(entry: dict) -> None:
    """Validate a ``client`` mapping from YAML.

    Optional fields:
      - base_url: absolute http/https URL
      - easy_path / top_path: non-empty strings, relative to base_url
      - timeout: positive number of seconds
      - user_agent: string
    """
    for key in _STRING_KEYS:
        if key in entry and entry[key] is not None:
            if not isinstance(entry[key], str) or not entry[key].strip():
                raise ConfigError(f"'{key}' must be a non-empty string if provided")

    if entry.get("base_url") is not None:
        url_str = entry["base_url"].strip()
        parsed = urlparse(url_str)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ConfigError(f"Invalid base_url '{url_str}'. Must be absolute http(s) URL.")

    if entry.get("timeout") is not None:
        raw = entry["timeout"]
        if isinstance(raw, bool):
            raise ConfigError("'timeout' must be a number of seconds")
        try:
            timeout = float(raw)
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"'timeout' must be a number of seconds, got {raw!r}") from exc
        if timeout <= 0:
            raise ConfigError(f"'timeout' must be positive, got {timeout}")


def _coerce_config(entry: dict, base: ClientConfig) -> ClientConfig:
    _validate_config_dict(entry)
    changes: dict = {}
    for key in _STRING_KEYS:
        if entry.get(key) is not None:
            changes[key] = entry[key].strip()
    if entry.get("timeout") is not None:
        changes["timeout"] = float(entry["timeout"])
    return replace(base, **changes)


def load_client_config(path: Path | str | None = None) -> ClientConfig:
    """Load client settings, layering a YAML file over the environment.

    YAML structure:
      - Top-level mapping
      - Key ``client``: mapping with any of base_url, easy_path, top_path,
        timeout, user_agent

    Unknown keys are ignored for forward compatibility. Without ``path`` the
    environment-derived config is returned as is.
    """
    config = ClientConfig.from_env()
    if path is None:
        return config

    config_path = Path(path)
    if not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    with config_path.open("r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {config_path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError("Top level of the configuration must be a mapping")

    client_raw = data.get("client") or {}
    if not isinstance(client_raw, dict):
        raise ConfigError("'client' must be a mapping in the YAML configuration")
    return _coerce_config(client_raw, config)
