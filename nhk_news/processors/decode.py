"""Mapping of raw feed records onto :class:`~nhk_news.models.Article`.

The easy and top feeds share most keys but rename a couple of them
(``news_*`` vs ``top_*``). Each Article field is described by a row of
``FIELD_MAP``: the source keys to try in order, and a coercion function that
turns the raw JSON value into the field's type or reports it unusable.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from ..models import Article
from ..utils.logging import get_logger

_logger = get_logger("nhk.processors.decode")

_MISSING = object()

_TRUE_STRINGS = {"true", "1"}
_FALSE_STRINGS = {"false", "0", ""}


def _coerce_str(value: Any) -> Any:
    if isinstance(value, str):
        return value
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return _MISSING


def _coerce_bool(value: Any) -> Any:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    return _MISSING


@dataclass(frozen=True, slots=True)
class FieldSpec:
    keys: Tuple[str, ...]
    coerce: Callable[[Any], Any]


def _s(*keys: str) -> FieldSpec:
    return FieldSpec(keys=keys, coerce=_coerce_str)


def _b(*keys: str) -> FieldSpec:
    return FieldSpec(keys=keys, coerce=_coerce_bool)


FIELD_MAP: Dict[str, FieldSpec] = {
    "priority_number": _s("news_priority_number", "top_priority_number"),
    "prearranged_time": _s("news_prearranged_time"),
    "id": _s("news_id"),
    "title": _s("title"),
    "title_with_ruby": _s("title_with_ruby"),
    "outline_with_ruby": _s("outline_with_ruby"),
    "file_version": _b("news_file_ver"),
    "creation_time": _s("news_creation_time"),
    "preview_time": _s("news_preview_time"),
    "publication_time": _s("news_publication_time"),
    "publication_status": _b("news_publication_status"),
    "has_web_image": _b("has_news_web_image"),
    "has_web_movie": _b("has_news_web_movie"),
    "has_easy_image": _b("has_news_easy_image"),
    "has_easy_movie": _b("has_news_easy_movie"),
    "has_easy_voice": _b("has_news_easy_voice"),
    "web_image_uri": _s("news_web_image_uri"),
    "web_movie_uri": _s("news_web_movie_uri"),
    "easy_image_uri": _s("news_easy_image_uri"),
    "easy_movie_uri": _s("news_easy_movie_uri"),
    "easy_voice_uri": _s("news_easy_voice_uri"),
    "display_flag": _b("news_display_flag", "top_display_flag"),
    "web_url": _s("news_web_url"),
}


def _first_present(record: Mapping[str, Any], keys: Sequence[str]) -> Any:
    for key in keys:
        value = record.get(key)
        if value is not None:
            return value
    return _MISSING


def decode_article(record: Any) -> Optional[Article]:
    """Decode one raw feed record.

    Any mapping decodes, unknown keys are ignored and missing or unusable
    values keep the field default, so ``decode_article({})`` is ``Article()``.
    Anything that is not a mapping (``None``, numbers, lists) returns ``None``.
    """
    if not isinstance(record, Mapping):
        return None

    values: Dict[str, Any] = {}
    for name, spec in FIELD_MAP.items():
        raw = _first_present(record, spec.keys)
        if raw is _MISSING:
            continue
        coerced = spec.coerce(raw)
        if coerced is _MISSING:
            _logger.debug("Ignoring unusable value for %s: %r", name, raw)
            continue
        values[name] = coerced
    return Article(**values)


def decode_articles(records: Iterable[Any]) -> List[Optional[Article]]:
    """Decode every record in order; undecodable members come back as ``None``."""
    return [decode_article(r) for r in records]


def validate_articles(decoded: Sequence[Optional[Article]]) -> bool:
    """Return True if every member of ``decoded`` is an Article."""
    return all(isinstance(item, Article) for item in decoded)
