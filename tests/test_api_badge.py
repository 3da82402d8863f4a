import httpx

from devcard.core.errors import ArticleNotFound, UpstreamError
from devcard.data import mappers
from devcard.data.providers import devto
from devcard.services import assets

PNG = b"\x89PNG\r\n\x1a\n" + b"\x00" * 16


def _patch_article(monkeypatch, payload=None, exc=None):
    calls = []

    async def fake_get_article(username, slug):
        calls.append((username, slug))
        if exc is not None:
            raise exc
        return mappers.article_from_payload(payload)

    monkeypatch.setattr(devto, "get_article", fake_get_article)
    return calls


def _patch_assets(monkeypatch, handler):
    def _client():
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    monkeypatch.setattr(assets, "assets_client", _client)


def _png_handler(request):
    return httpx.Response(200, content=PNG, headers={"content-type": "image/png"}, request=request)


def test_health(api_client):
    resp = api_client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"ok": True}


def test_badge_success(monkeypatch, api_client, article_payload):
    calls = _patch_article(monkeypatch, article_payload)
    _patch_assets(monkeypatch, _png_handler)

    resp = api_client.get("/api", params={"username": "foo", "slug": "bar", "theme": "dark"})

    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("image/svg+xml")
    assert resp.headers["cache-control"] == "public, s-maxage=3600, stale-while-revalidate"
    assert calls == [("foo", "bar")]
    body = resp.text
    assert '<g class="theme-dark">' in body
    assert 'class="cover"' in body
    assert 'class="avatar"' in body
    assert "#python  #fastapi  #svg" in body
    assert "#markdown" not in body


def test_badge_from_url(monkeypatch, api_client, article_payload):
    calls = _patch_article(monkeypatch, article_payload)
    _patch_assets(monkeypatch, _png_handler)

    resp = api_client.get("/api", params={"url": "https://dev.to/foo/bar"})
    assert resp.status_code == 200
    assert calls == [("foo", "bar")]


def test_badge_bad_host_is_400_plain_text(monkeypatch, api_client):
    calls = _patch_article(monkeypatch, {})

    resp = api_client.get("/api", params={"url": "https://medium.com/foo/bar"})

    assert resp.status_code == 400
    assert resp.headers["content-type"].startswith("text/plain")
    assert "<svg" not in resp.text
    assert calls == []


def test_badge_missing_identifiers_is_400(api_client):
    resp = api_client.get("/api", params={"username": "foo"})
    assert resp.status_code == 400
    assert "username and slug" in resp.text


def test_badge_not_found_is_404(monkeypatch, api_client):
    _patch_article(monkeypatch, exc=ArticleNotFound("foo", "nope"))

    resp = api_client.get("/api", params={"username": "foo", "slug": "nope"})

    assert resp.status_code == 404
    assert resp.text == "Article not found."


def test_badge_upstream_error_renders_error_card(monkeypatch, api_client):
    _patch_article(monkeypatch, exc=UpstreamError("boom", upstream_status=502))

    resp = api_client.get("/api", params={"username": "foo", "slug": "bar", "theme": "dark"})

    assert resp.status_code == 500
    assert resp.headers["content-type"].startswith("image/svg+xml")
    assert resp.headers["cache-control"] == "no-store"
    assert 'class="theme-dark"' in resp.text
    assert "Could not generate Dev.to card." in resp.text


def test_badge_unexpected_error_renders_light_error_card(monkeypatch, api_client):
    _patch_article(monkeypatch, exc=RuntimeError("kaboom"))

    resp = api_client.get("/api", params={"username": "foo", "slug": "bar", "theme": "neon"})

    assert resp.status_code == 500
    assert 'class="theme-light"' in resp.text


def test_avatar_network_error_still_renders(monkeypatch, api_client, article_payload):
    _patch_article(monkeypatch, article_payload)

    def handler(request):
        if request.url.path.endswith("avatar.png"):
            raise httpx.ConnectError("offline", request=request)
        return _png_handler(request)

    _patch_assets(monkeypatch, handler)

    resp = api_client.get("/api", params={"username": "foo", "slug": "bar"})

    assert resp.status_code == 200
    assert 'class="avatar"' not in resp.text
    assert "clipAvatar" not in resp.text
    assert ">Foo Bar</text>" in resp.text
    assert 'class="cover"' in resp.text


def test_hide_image_and_tags(monkeypatch, api_client, article_payload):
    _patch_article(monkeypatch, article_payload)
    requested = []

    def handler(request):
        requested.append(str(request.url))
        return _png_handler(request)

    _patch_assets(monkeypatch, handler)

    resp = api_client.get("/api", params={"username": "foo", "slug": "bar", "hide": "image,tags"})

    assert resp.status_code == 200
    assert 'class="cover"' not in resp.text
    assert 'class="tags"' not in resp.text
    assert "Reactions" in resp.text
    assert requested == ["https://media.dev.to/avatar.png"]
