from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Protocol

import requests

from ..utils.config_loader import ClientConfig
from ..utils.logging import get_logger

logger = get_logger("nhk.fetchers.http")

_BODY_EXCERPT = 200


class FetchError(Exception):
    """Raised when a feed could not be retrieved.

    ``status`` and ``body`` are set when the server answered; a transport
    failure (DNS, connection, timeout) leaves them ``None`` and chains the
    underlying exception.
    """

    def __init__(
        self,
        url: str,
        *,
        status: Optional[int] = None,
        body: Optional[str] = None,
        reason: Optional[str] = None,
    ) -> None:
        self.url = url
        self.status = status
        self.body = body
        parts = [f"HTTP {status}"] if status is not None else []
        parts.append(reason or _excerpt(body))
        super().__init__(f"Could not fetch news from {url}: " + ": ".join(parts))


def _excerpt(body: Optional[str]) -> str:
    if not body:
        return "<empty body>"
    body = body.strip()
    return body if len(body) <= _BODY_EXCERPT else body[:_BODY_EXCERPT] + "..."


@dataclass(slots=True)
class HttpResponse:
    url: str
    status_code: int
    text: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class Transport(Protocol):
    """Anything that can perform a GET and hand back status and body text."""

    def get(self, url: str) -> HttpResponse:
        ...


class RequestsTransport:
    """``requests``-backed transport with default headers and a timeout."""

    def __init__(
        self,
        session: requests.Session | None = None,
        *,
        timeout: float = 30.0,
        headers: Dict[str, str] | None = None,
    ) -> None:
        self._session = session or requests.Session()
        self._timeout = timeout
        self._headers = {"Accept": "application/json", **(headers or {})}

    @classmethod
    def from_config(cls, config: ClientConfig, session: requests.Session | None = None) -> "RequestsTransport":
        return cls(session, timeout=config.timeout, headers={"User-Agent": config.user_agent})

    def get(self, url: str) -> HttpResponse:
        logger.debug("GET %s", url)
        try:
            resp = self._session.get(url, headers=self._headers, timeout=self._timeout)
        except requests.RequestException as exc:
            logger.warning("Request error for %s: %s", url, exc)
            raise FetchError(url, reason=str(exc)) from exc

        # the feeds are UTF-8 but not always labelled as such
        resp.encoding = "utf-8"
        return HttpResponse(url=url, status_code=resp.status_code, text=resp.text)

    def close(self) -> None:
        self._session.close()
