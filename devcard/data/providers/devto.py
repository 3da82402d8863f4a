from __future__ import annotations

from urllib.parse import quote

import httpx

from devcard.core.errors import ArticleNotFound, UpstreamError
from devcard.core.http import content_api_client
from devcard.core.logger import get_logger
from devcard.data.mappers import article_from_payload
from devcard.domain.models import Article

log = get_logger("devto")


def article_path(username: str, slug: str) -> str:
    return f"/articles/{quote(username, safe='')}/{quote(slug, safe='')}"


async def get_article(username: str, slug: str) -> Article:
    client = content_api_client()
    path = article_path(username, slug)
    try:
        resp = await client.get(path)
    except httpx.HTTPError as exc:
        log.warning("article_fetch_transport_error path=%s err=%s", path, exc)
        raise UpstreamError(f"article lookup failed: {exc}") from exc

    if resp.status_code == 404:
        raise ArticleNotFound(username, slug)
    if resp.status_code < 200 or resp.status_code >= 300:
        log.warning("article_fetch_bad_status path=%s status=%s", path, resp.status_code)
        raise UpstreamError(
            f"article lookup returned HTTP {resp.status_code}",
            upstream_status=resp.status_code,
        )

    try:
        payload = resp.json()
    except ValueError as exc:
        raise UpstreamError("article lookup returned invalid JSON") from exc
    return article_from_payload(payload)
