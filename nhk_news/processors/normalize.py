from __future__ import annotations

import re

from bs4 import BeautifulSoup

# BOM, zero-width space/non-joiner/joiner, word joiner
_INVISIBLE = "\ufeff\u200b\u200c\u200d\u2060"
_whitespace_re = re.compile(r"\s+")


def _is_edge_char(ch: str) -> bool:
    return ch.isspace() or ch in _INVISIBLE


def strip_feed_text(text: str | None) -> str:
    """Trim whitespace and invisible marker characters from both ends.

    The easy feed is served with stray zero-width characters around the JSON
    document, which ``json.loads`` rejects.
    """
    if not text:
        return ""
    start, end = 0, len(text)
    while start < end and _is_edge_char(text[start]):
        start += 1
    while end > start and _is_edge_char(text[end - 1]):
        end -= 1
    return text[start:end]


def ruby_to_text(markup: str | None) -> str:
    """Render ruby-annotated HTML as its base text.

    ``<rt>`` readings and ``<rp>`` fallback parentheses are dropped, so
    ``<ruby>漢字<rt>かんじ</rt></ruby>`` becomes ``漢字``.
    """
    if not markup:
        return ""

    soup = BeautifulSoup(markup, "html.parser")
    for tag in soup.find_all(["rt", "rp"]):
        tag.decompose()
    return _whitespace_re.sub(" ", soup.get_text()).strip()


def ruby_to_reading(markup: str | None) -> str:
    """Render ruby-annotated HTML with each base replaced by its reading.

    ``<ruby>漢字<rt>かんじ</rt></ruby>を読む`` becomes ``かんじを読む``. A ruby
    element without an ``<rt>`` keeps its base text.
    """
    if not markup:
        return ""

    soup = BeautifulSoup(markup, "html.parser")
    for ruby in soup.find_all("ruby"):
        for rp in ruby.find_all("rp"):
            rp.decompose()
        readings = [rt.get_text() for rt in ruby.find_all("rt")]
        if readings:
            ruby.replace_with("".join(readings))
        else:
            ruby.unwrap()
    return _whitespace_re.sub(" ", soup.get_text()).strip()
