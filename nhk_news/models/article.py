from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict

# media kind -> (presence flag attribute, uri attribute)
MEDIA_FIELDS: Dict[str, tuple[str, str]] = {
    "web_image": ("has_web_image", "web_image_uri"),
    "web_movie": ("has_web_movie", "web_movie_uri"),
    "easy_image": ("has_easy_image", "easy_image_uri"),
    "easy_movie": ("has_easy_movie", "easy_movie_uri"),
    "easy_voice": ("has_easy_voice", "easy_voice_uri"),
}


@dataclass(frozen=True, slots=True)
class Article:
    """A single NHK News Web Easy article, normalized across both feeds.

    URI fields may be ``""`` and are only meaningful when the paired
    ``has_*`` flag is true. The feed does not keep the two consistent, so
    neither is derived from the other.
    """

    priority_number: str = "0"
    prearranged_time: str = ""
    id: str = ""
    title: str = ""
    title_with_ruby: str = ""
    # only populated by the top feed
    outline_with_ruby: str = ""
    file_version: bool = False
    creation_time: str = ""
    preview_time: str = ""
    publication_time: str = ""
    publication_status: bool = True

    has_web_image: bool = False
    has_web_movie: bool = False
    has_easy_image: bool = False
    has_easy_movie: bool = False
    has_easy_voice: bool = False

    web_image_uri: str = ""
    web_movie_uri: str = ""
    easy_image_uri: str = ""
    easy_movie_uri: str = ""
    easy_voice_uri: str = ""

    display_flag: bool = False
    web_url: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def media(self) -> Dict[str, str]:
        """Return the usable media URIs keyed by kind.

        A kind is included only when its presence flag is set and its URI is
        non-empty.
        """
        found: Dict[str, str] = {}
        for kind, (flag_attr, uri_attr) in MEDIA_FIELDS.items():
            uri = getattr(self, uri_attr)
            if getattr(self, flag_attr) and uri:
                found[kind] = uri
        return found
