"""Shared fixtures: an in-memory transport and clients wired to it."""

import json
from typing import Dict, List

import pytest

from nhk_news import ClientConfig, HttpResponse, NhkNewsClient


class FakeTransport:
    """Serves canned responses keyed by URL and records every request."""

    def __init__(self) -> None:
        self.responses: Dict[str, HttpResponse] = {}
        self.requests: List[str] = []

    def serve(self, url: str, body, status: int = 200) -> None:
        text = body if isinstance(body, str) else json.dumps(body, ensure_ascii=False)
        self.responses[url] = HttpResponse(url=url, status_code=status, text=text)

    def get(self, url: str) -> HttpResponse:
        self.requests.append(url)
        return self.responses[url]


@pytest.fixture
def config():
    return ClientConfig()


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def client(transport, config):
    return NhkNewsClient(transport, config=config)


@pytest.fixture
def easy_url(config):
    return config.easy_url


@pytest.fixture
def top_url(config):
    return config.top_url
