from __future__ import annotations

import html
from dataclasses import dataclass
from typing import Sequence

from devcard.domain.models import Article

TITLE_BUDGET = 45
DESCRIPTION_BUDGET = 60
MAX_TAGS = 3
TAG_SEPARATOR = "  "
ELLIPSIS = "..."

# Longest entity produced by escape_text ("&quot;" / "&#x27;").
_MAX_ENTITY_LEN = 6


@dataclass(frozen=True)
class BadgeText:
    title_lines: tuple[str, ...]
    description_lines: tuple[str, ...]
    author_name: str
    tags_line: str


def escape_text(text: str | None) -> str:
    if not text:
        return ""
    return html.escape(text, quote=True)


def _safe_cut(text: str, index: int) -> int:
    """Move a cut index back so it never lands inside an XML entity."""
    amp = text.rfind("&", max(0, index - _MAX_ENTITY_LEN + 1), index)
    if amp > 0 and text.find(";", amp, index) == -1:
        return amp
    return index


def wrap_escaped(text: str, budget: int) -> list[str]:
    """Split already-escaped text into at most two lines of ``budget`` chars.

    The break goes at the last space at or before ``budget`` (the space is
    dropped); without one the text is cut hard at ``budget``. A second line
    that is still too long is truncated and suffixed with an ellipsis.
    Trailing whitespace is dropped before measuring.
    """
    text = (text or "").rstrip()
    if not text:
        return []
    if len(text) <= budget:
        return [text]

    brk = text.rfind(" ", 0, budget + 1)
    if brk > 0:
        first, rest = text[:brk], text[brk + 1:]
    else:
        cut = _safe_cut(text, budget)
        first, rest = text[:cut], text[cut:]

    if len(rest) > budget:
        rest = rest[:_safe_cut(rest, budget)] + ELLIPSIS
    return [first, rest]


def wrap_text(text: str | None, budget: int) -> list[str]:
    return wrap_escaped(escape_text(text), budget)


def format_tags(tags: Sequence[str], limit: int = MAX_TAGS) -> str:
    picked = [f"#{t}" for t in list(tags)[:limit] if t]
    return escape_text(TAG_SEPARATOR.join(picked))


def layout_text(article: Article) -> BadgeText:
    return BadgeText(
        title_lines=tuple(wrap_text(article.title, TITLE_BUDGET)),
        description_lines=tuple(wrap_text(article.description, DESCRIPTION_BUDGET)),
        author_name=escape_text(article.author.name),
        tags_line=format_tags(article.tags),
    )
