from __future__ import annotations

from typing import Iterable, Mapping
from urllib.parse import unquote, urlsplit

from devcard.core.config import settings
from devcard.core.errors import InvalidInput
from devcard.domain.models import BadgeRequest, Theme


def normalize_theme(value: str | None) -> Theme:
    if value == Theme.DARK.value:
        return Theme.DARK
    return Theme.LIGHT


def parse_hidden(value: str | None) -> frozenset[str]:
    if not value:
        return frozenset()
    return frozenset(token.strip().lower() for token in value.split(",") if token.strip())


def _identifiers_from_url(raw_url: str, allowed_hosts: Iterable[str]) -> tuple[str, str]:
    try:
        parts = urlsplit(raw_url.strip())
        host = (parts.hostname or "").lower()
    except ValueError as exc:
        raise InvalidInput("bad-url") from exc
    if not host or host not in set(allowed_hosts):
        raise InvalidInput("bad-host")
    segments = [unquote(seg) for seg in parts.path.split("/") if seg]
    username = segments[0] if len(segments) > 0 else ""
    slug = segments[1] if len(segments) > 1 else ""
    return username, slug


def resolve_request(
    params: Mapping[str, str | None],
    *,
    allowed_hosts: Iterable[str] | None = None,
) -> BadgeRequest:
    """Turn raw query parameters into a validated BadgeRequest.

    A ``url`` parameter takes precedence over ``username``/``slug``. Theme and
    ``hide`` never fail: unknown values fall back to defaults or are ignored.
    """
    hosts = settings.content_site_hosts if allowed_hosts is None else [h.lower() for h in allowed_hosts]
    raw_url = (params.get("url") or "").strip()
    if raw_url:
        username, slug = _identifiers_from_url(raw_url, hosts)
    else:
        username = (params.get("username") or "").strip()
        slug = (params.get("slug") or "").strip()

    if not username or not slug:
        raise InvalidInput("missing-identifiers")

    return BadgeRequest(
        username=username,
        slug=slug,
        theme=normalize_theme(params.get("theme")),
        hidden=parse_hidden(params.get("hide")),
    )
