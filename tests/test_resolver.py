import pytest

from devcard.core.errors import InvalidInput
from devcard.domain.models import Component, Theme
from devcard.services.resolver import normalize_theme, parse_hidden, resolve_request


def test_resolve_username_and_slug():
    req = resolve_request({"username": "foo", "slug": "bar"})
    assert req.username == "foo"
    assert req.slug == "bar"
    assert req.theme is Theme.LIGHT
    assert req.hidden == frozenset()


def test_resolve_from_article_url():
    req = resolve_request({"url": "https://dev.to/foo/bar-12ab/?utm=x#top"}, allowed_hosts=["dev.to"])
    assert (req.username, req.slug) == ("foo", "bar-12ab")


def test_url_takes_precedence_over_explicit_identifiers():
    req = resolve_request(
        {"url": "https://dev.to/alice/post", "username": "bob", "slug": "other"},
        allowed_hosts=["dev.to"],
    )
    assert (req.username, req.slug) == ("alice", "post")


@pytest.mark.parametrize(
    "url",
    [
        "https://example.com/foo/bar",
        "https://www.dev.to/foo/bar",
        "https://dev.to.evil.com/foo/bar",
        "not a url",
    ],
)
def test_url_with_wrong_host_is_rejected(url):
    with pytest.raises(InvalidInput) as exc:
        resolve_request({"url": url}, allowed_hosts=["dev.to"])
    assert exc.value.reason == "bad-host"
    assert exc.value.status_code == 400


def test_unparseable_url_is_rejected():
    with pytest.raises(InvalidInput) as exc:
        resolve_request({"url": "https://[dev.to/foo/bar"}, allowed_hosts=["dev.to"])
    assert exc.value.reason == "bad-url"


@pytest.mark.parametrize(
    "params",
    [
        {},
        {"username": "foo"},
        {"slug": "bar"},
        {"username": "  ", "slug": "bar"},
        {"url": "https://dev.to/foo"},
        {"url": "https://dev.to/"},
    ],
)
def test_missing_identifiers(params):
    with pytest.raises(InvalidInput) as exc:
        resolve_request(params, allowed_hosts=["dev.to"])
    assert exc.value.reason == "missing-identifiers"


@pytest.mark.parametrize(
    "value,expected",
    [
        ("light", Theme.LIGHT),
        ("dark", Theme.DARK),
        (None, Theme.LIGHT),
        ("", Theme.LIGHT),
        ("solarized", Theme.LIGHT),
        ("DARK", Theme.LIGHT),
    ],
)
def test_theme_falls_back_to_light(value, expected):
    assert normalize_theme(value) is expected


def test_hide_is_trimmed_lowercased_and_keeps_unknown_tokens():
    hidden = parse_hidden(" Image , TAGS ,, sparkles")
    assert hidden == frozenset({"image", "tags", "sparkles"})

    req = resolve_request({"username": "foo", "slug": "bar", "hide": " Image , TAGS ,, sparkles"})
    assert req.is_hidden(Component.IMAGE)
    assert req.is_hidden(Component.TAGS)
    assert not req.is_hidden(Component.REACTIONS)
    assert not req.is_hidden(Component.MINREADS)


def test_hide_absent_is_empty():
    assert parse_hidden(None) == frozenset()
    assert parse_hidden("") == frozenset()
