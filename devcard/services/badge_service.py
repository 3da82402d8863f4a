from __future__ import annotations

from typing import Mapping

from devcard.core.config import settings
from devcard.core.logger import get_logger
from devcard.data.providers import devto
from devcard.domain.models import BadgeRequest, RenderedBadge
from devcard.services.assets import fetch_badge_images
from devcard.services.badge_svg import compose_badge_svg
from devcard.services.resolver import resolve_request
from devcard.services.text_layout import layout_text

log = get_logger("badge")


async def render_for_request(request: BadgeRequest) -> RenderedBadge:
    article = await devto.get_article(request.username, request.slug)
    images = await fetch_badge_images(article, request)
    text = layout_text(article)
    svg = compose_badge_svg(request, article, text, images)
    log.info(
        "badge_rendered username=%s slug=%s theme=%s cover=%s avatar=%s",
        request.username,
        request.slug,
        request.theme.value,
        images.cover is not None,
        images.avatar is not None,
    )
    return RenderedBadge(svg_markup=svg, cache_control=settings.cache_control)


async def render_badge(params: Mapping[str, str | None]) -> RenderedBadge:
    """Resolve query parameters, fetch the article and compose its badge.

    Raises InvalidInput, ArticleNotFound or UpstreamError; image failures
    never surface here.
    """
    request = resolve_request(params)
    return await render_for_request(request)
