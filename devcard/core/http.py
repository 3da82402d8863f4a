import httpx

from .config import settings

_content_api_client: httpx.AsyncClient | None = None
_assets_client: httpx.AsyncClient | None = None
_content_api_base: str | None = None


def _http_limits() -> httpx.Limits:
    return httpx.Limits(max_connections=20, max_keepalive_connections=10)


def content_api_client() -> httpx.AsyncClient:
    global _content_api_client, _content_api_base
    base = (settings.content_api_base or "").strip().rstrip("/") or "https://dev.to/api"
    if _content_api_client is None or _content_api_client.is_closed or _content_api_base != base:
        _content_api_base = base
        _content_api_client = httpx.AsyncClient(
            base_url=base,
            headers={
                "Accept": "application/json",
                "User-Agent": settings.user_agent,
            },
            timeout=httpx.Timeout(settings.content_api_timeout_seconds),
            limits=_http_limits(),
        )
    return _content_api_client


def assets_client() -> httpx.AsyncClient:
    global _assets_client
    if _assets_client is None or _assets_client.is_closed:
        _assets_client = httpx.AsyncClient(
            headers={"User-Agent": settings.user_agent},
            timeout=httpx.Timeout(settings.asset_timeout_seconds),
            limits=_http_limits(),
            follow_redirects=True,
        )
    return _assets_client


async def init_http_clients() -> None:
    content_api_client()
    assets_client()


async def close_http_clients() -> None:
    global _content_api_client, _assets_client, _content_api_base
    if _content_api_client is not None and not _content_api_client.is_closed:
        await _content_api_client.aclose()
    if _assets_client is not None and not _assets_client.is_closed:
        await _assets_client.aclose()
    _content_api_client = None
    _assets_client = None
    _content_api_base = None
