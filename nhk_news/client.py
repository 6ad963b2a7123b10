from __future__ import annotations

import json
from typing import Any, List, Optional

from .fetchers import FetchError, RequestsTransport, Transport
from .models import Article
from .processors import decode_articles, strip_feed_text, validate_articles
from .utils.config_loader import ClientConfig
from .utils.logging import get_logger

logger = get_logger("nhk.client")


class NhkNewsClient:
    """Fetches the NHK News Web Easy feeds and decodes them into Articles.

    Each call performs exactly one GET through the injected transport. The
    client keeps no state between calls, so the two fetch methods may be used
    from different threads as long as the transport allows it.
    """

    def __init__(
        self,
        transport: Optional[Transport] = None,
        *,
        config: Optional[ClientConfig] = None,
    ) -> None:
        self.config = config or ClientConfig()
        self.transport = transport or RequestsTransport.from_config(self.config)

    def _get_json(self, url: str) -> Any:
        resp = self.transport.get(url)
        if not resp.ok:
            logger.warning("News fetch failed (%s): %s", resp.status_code, url)
            raise FetchError(url, status=resp.status_code, body=resp.text)

        text = strip_feed_text(resp.text)
        if not text:
            logger.info("Empty body from %s", url)
            return None
        try:
            return json.loads(text)
        except (ValueError, RecursionError) as exc:
            # JSONDecodeError, oversized integer literals, runaway nesting
            raise FetchError(url, status=resp.status_code, body=resp.text, reason=f"invalid JSON ({exc})") from exc

    def fetch_easy_news(self) -> List[Article]:
        """Return all articles of the easy feed, flattened across days.

        Days are visited in the order the feed lists them. Records that cannot
        be decoded are dropped one by one.

        Raises ``FetchError`` on a non-2xx status, a transport failure, or a
        body that is not valid JSON. A valid document of the wrong shape
        yields an empty list.
        """
        url = self.config.easy_url
        payload = self._get_json(url)

        news: List[Article] = []
        if not isinstance(payload, list) or not payload:
            return news

        days = payload[0]
        if not isinstance(days, dict):
            logger.warning("Unexpected easy feed shape from %s: %s", url, type(days).__name__)
            return news

        for day, items in days.items():
            if not isinstance(items, list):
                continue
            decoded = decode_articles(items)
            kept = [a for a in decoded if isinstance(a, Article)]
            if len(kept) != len(decoded):
                logger.warning("Dropped %d malformed record(s) for %s", len(decoded) - len(kept), day)
            news.extend(kept)

        logger.info("Fetched %d easy article(s)", len(news))
        return news

    def fetch_top_news(self) -> List[Article]:
        """Return the articles of the top feed in feed order.

        Unlike :meth:`fetch_easy_news`, a single undecodable record discards
        the whole batch. Raises ``FetchError`` under the same conditions as
        :meth:`fetch_easy_news`.
        """
        url = self.config.top_url
        payload = self._get_json(url)

        if not isinstance(payload, list):
            return []

        decoded = decode_articles(payload)
        if not validate_articles(decoded):
            logger.warning("Discarding top feed batch of %d record(s): malformed member", len(decoded))
            return []

        logger.info("Fetched %d top article(s)", len(decoded))
        return list(decoded)
