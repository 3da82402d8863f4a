import re
from typing import Any, Optional

from devcard.core.errors import UpstreamError
from devcard.domain.models import Article, Author

_WS_RE = re.compile(r"\s+")


def clean_text(value: Any) -> str:
    if value is None:
        return ""
    return _WS_RE.sub(" ", str(value)).strip()


def _optional_url(value: Any) -> Optional[str]:
    text = clean_text(value)
    return text or None


def _to_int(value: Any) -> int:
    try:
        return max(0, int(value))
    except (TypeError, ValueError):
        return 0


def normalize_tags(raw: Any) -> tuple[str, ...]:
    # The single-article endpoint sends `tags` as a list; listings send a comma string.
    if isinstance(raw, str):
        items = raw.split(",")
    elif isinstance(raw, (list, tuple)):
        items = raw
    else:
        return ()
    return tuple(t for t in (clean_text(x) for x in items) if t)


def article_from_payload(payload: Any) -> Article:
    if not isinstance(payload, dict):
        raise UpstreamError("article payload is not an object")
    title = clean_text(payload.get("title"))
    if not title:
        raise UpstreamError("article payload has no title")

    user = payload.get("user") if isinstance(payload.get("user"), dict) else {}
    author = Author(
        name=clean_text(user.get("name")) or clean_text(user.get("username")),
        avatar_url=_optional_url(user.get("profile_image_90")) or _optional_url(user.get("profile_image")),
    )

    tags = payload.get("tags")
    if not isinstance(tags, (list, tuple)):
        tags = payload.get("tag_list")

    return Article(
        title=title,
        description=clean_text(payload.get("description")),
        author=author,
        cover_image_url=_optional_url(payload.get("cover_image")),
        tags=normalize_tags(tags),
        reading_time_minutes=_to_int(payload.get("reading_time_minutes")),
        reactions_count=_to_int(payload.get("public_reactions_count")),
    )
