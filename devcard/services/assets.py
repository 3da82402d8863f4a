from __future__ import annotations

import asyncio
import base64
import re

from devcard.core.config import settings
from devcard.core.http import assets_client
from devcard.core.logger import get_logger
from devcard.domain.models import Article, BadgeImages, BadgeRequest, Component, EmbeddedImage

log = get_logger("assets")

_DEFAULT_MIME = "image/png"
_MIME_RE = re.compile(r"^image/[a-z0-9.+-]+$")


def sniff_mime(data: bytes) -> str:
    if data[:3] == b"\xff\xd8\xff":
        return "image/jpeg"
    if data[:4] == b"RIFF" and data[8:12] == b"WEBP":
        return "image/webp"
    if data[:4] == b"\x89PNG":
        return "image/png"
    if data[:6] in (b"GIF87a", b"GIF89a"):
        return "image/gif"
    head = data[:256].lstrip().lower()
    if head.startswith(b"<svg") or (head.startswith(b"<?xml") and b"<svg" in head):
        return "image/svg+xml"
    return _DEFAULT_MIME


def resolve_mime(content_type: str | None, data: bytes) -> str:
    mime = (content_type or "").split(";", 1)[0].strip().lower()
    if _MIME_RE.match(mime):
        return mime
    return sniff_mime(data)


def embed_bytes(data: bytes, content_type: str | None = None) -> EmbeddedImage:
    encoded = base64.b64encode(data).decode("ascii")
    return EmbeddedImage(mime_type=resolve_mime(content_type, data), base64_payload=encoded)


async def fetch_embedded_image(url: str | None) -> EmbeddedImage | None:
    """Download one image and inline it; any failure yields None."""
    if not url:
        return None
    key = url.strip()
    if not key:
        return None
    client = assets_client()
    try:
        resp = await client.get(key)
        if resp.status_code < 200 or resp.status_code >= 300:
            log.warning("asset_fetch_bad_status url=%s status=%s", key, resp.status_code)
            return None
        data = resp.content
        if not data or len(data) > settings.asset_max_bytes:
            log.warning("asset_fetch_rejected url=%s bytes=%s", key, len(data or b""))
            return None
        return embed_bytes(data, resp.headers.get("content-type"))
    except Exception:
        log.warning("asset_fetch_failed url=%s", key, exc_info=True)
        return None


async def _absent() -> None:
    return None


async def fetch_badge_images(article: Article, request: BadgeRequest) -> BadgeImages:
    """Fetch the cover and avatar concurrently and wait for both to settle."""
    cover_url = None if request.is_hidden(Component.IMAGE) else article.cover_image_url
    cover, avatar = await asyncio.gather(
        fetch_embedded_image(cover_url) if cover_url else _absent(),
        fetch_embedded_image(article.author.avatar_url) if article.author.avatar_url else _absent(),
    )
    return BadgeImages(cover=cover, avatar=avatar)
