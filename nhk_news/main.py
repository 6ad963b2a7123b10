"""Command line entry point: print the current NHK News Web Easy articles."""

from __future__ import annotations

import argparse
import json
import sys
from typing import List, Optional, Sequence, TextIO

from dotenv import load_dotenv

from .client import NhkNewsClient
from .fetchers import FetchError
from .models import Article
from .processors import ruby_to_reading, ruby_to_text
from .utils.config_loader import ConfigError, load_client_config
from .utils.logging import configure_logging, get_logger


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from exc
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be zero or greater, got {number}")
    return number


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Fetch NHK News Web Easy articles")
    parser.add_argument(
        "--feed",
        choices=["easy", "top"],
        default="easy",
        help="Which feed to fetch",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Optional client configuration file (YAML)",
    )
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format",
    )
    title_mode = parser.add_mutually_exclusive_group()
    title_mode.add_argument(
        "--plain",
        action="store_true",
        help="Print titles from the ruby markup with readings removed",
    )
    title_mode.add_argument(
        "--reading",
        action="store_true",
        help="Print titles with kanji replaced by their kana readings",
    )
    parser.add_argument(
        "--limit",
        type=_non_negative_int,
        default=None,
        help="Print at most this many articles",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging verbosity (defaults to NHK_NEWS_LOG_LEVEL or WARNING)",
    )
    return parser.parse_args(argv)


def _display_title(article: Article, *, plain: bool, reading: bool) -> str:
    if plain and article.title_with_ruby:
        return ruby_to_text(article.title_with_ruby)
    if reading and article.title_with_ruby:
        return ruby_to_reading(article.title_with_ruby)
    return article.title


def write_articles(
    articles: List[Article],
    out: TextIO,
    *,
    fmt: str = "text",
    plain: bool = False,
    reading: bool = False,
) -> None:
    if fmt == "json":
        json.dump([a.to_dict() for a in articles], out, ensure_ascii=False, indent=2)
        out.write("\n")
        return
    for article in articles:
        title = _display_title(article, plain=plain, reading=reading)
        out.write(f"{article.publication_time}\t{article.id}\t{title}\t{article.web_url}\n")


def main(argv: Optional[Sequence[str]] = None, *, client: Optional[NhkNewsClient] = None) -> int:
    load_dotenv(override=False)
    args = parse_args(argv)
    configure_logging(level=args.log_level)
    logger = get_logger("nhk.cli")

    try:
        if client is None:
            client = NhkNewsClient(config=load_client_config(args.config))
        articles = client.fetch_top_news() if args.feed == "top" else client.fetch_easy_news()
    except ConfigError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 1
    except FetchError as exc:
        logger.error("%s", exc)
        return 1

    if args.limit is not None:
        articles = articles[: args.limit]
    write_articles(articles, sys.stdout, fmt=args.format, plain=args.plain, reading=args.reading)
    return 0


if __name__ == "__main__":  # pragma: no cover - script entrypoint
    raise SystemExit(main())
