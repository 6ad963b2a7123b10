"""Decoding and text normalization for feed payloads."""

from .decode import decode_article, decode_articles, validate_articles
from .normalize import ruby_to_reading, ruby_to_text, strip_feed_text

__all__ = [
    "decode_article",
    "decode_articles",
    "validate_articles",
    "strip_feed_text",
    "ruby_to_text",
    "ruby_to_reading",
]
