"""Client for the NHK News Web Easy JSON feeds.

Fetches the day-grouped "easy" feed and the flat "top" feed and normalizes
both into :class:`~nhk_news.models.Article` records.
"""

from .client import NhkNewsClient
from .fetchers import FetchError, HttpResponse, RequestsTransport, Transport
from .models import Article
from .utils.config_loader import ClientConfig, ConfigError, load_client_config

__all__ = [
    "Article",
    "ClientConfig",
    "ConfigError",
    "FetchError",
    "HttpResponse",
    "NhkNewsClient",
    "RequestsTransport",
    "Transport",
    "load_client_config",
]
