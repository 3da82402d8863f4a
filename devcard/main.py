from contextlib import asynccontextmanager
from typing import Optional
import logging

from fastapi import FastAPI, Query, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from starlette.middleware.base import BaseHTTPMiddleware

from devcard.core.config import APP_VERSION, settings
from devcard.core.errors import ArticleNotFound, InvalidInput
from devcard.core.http import close_http_clients, init_http_clients
from devcard.services.badge_service import render_badge
from devcard.services.error_card import render_error_svg
from devcard.services.resolver import normalize_theme

logger = logging.getLogger(__name__)

SVG_MEDIA_TYPE = "image/svg+xml"


@asynccontextmanager
async def lifespan(_: FastAPI):
    await init_http_clients()
    logger.info("devcard_started env=%s content_api=%s", settings.app_env, settings.content_api_base)
    try:
        yield
    finally:
        try:
            await close_http_clients()
        except Exception:
            logger.exception("http_client_close_failed")


app = FastAPI(title="Dev.to badge renderer", version=APP_VERSION, lifespan=lifespan)

# Badges are hot-linked from arbitrary Markdown renderers.
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET"],
    allow_headers=["*"],
)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        if response.headers.get("content-type", "").startswith(SVG_MEDIA_TYPE):
            response.headers["Content-Security-Policy"] = "default-src 'none'; style-src 'unsafe-inline'; img-src data:"
        return response


app.add_middleware(SecurityHeadersMiddleware)


@app.get("/health")
async def health():
    return {"ok": True}


@app.get("/api")
async def api_badge(
    username: Optional[str] = Query(default=None),
    slug: Optional[str] = Query(default=None),
    url: Optional[str] = Query(default=None),
    theme: Optional[str] = Query(default=None),
    hide: Optional[str] = Query(default=None),
):
    params = {"username": username, "slug": slug, "url": url, "theme": theme, "hide": hide}
    try:
        badge = await render_badge(params)
    except InvalidInput as e:
        logger.info("badge_invalid_input reason=%s", e.reason)
        return PlainTextResponse(e.message, status_code=e.status_code)
    except ArticleNotFound as e:
        logger.info("badge_article_not_found username=%s slug=%s", e.username, e.slug)
        return PlainTextResponse(e.message, status_code=e.status_code)
    except Exception:
        logger.exception("badge_render_failed username=%s slug=%s url=%s", username, slug, url)
        return Response(
            content=render_error_svg(normalize_theme(theme)),
            status_code=500,
            media_type=SVG_MEDIA_TYPE,
            headers={"Cache-Control": "no-store"},
        )

    return Response(
        content=badge.svg_markup,
        status_code=badge.status_code,
        media_type=badge.content_type,
        headers={"Cache-Control": badge.cache_control},
    )
