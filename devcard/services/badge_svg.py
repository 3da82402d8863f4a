from __future__ import annotations

from dataclasses import dataclass, field

from devcard.domain.models import Article, BadgeImages, BadgeRequest, Component, Theme
from devcard.services.text_layout import BadgeText
from devcard.services.themes import PALETTES, Palette

WIDTH = 450
HEIGHT = 290
PADDING = 15
FONT_FAMILY = "'Segoe UI', 'Inter', 'Helvetica Neue', 'Arial', sans-serif"

COVER_HEIGHT = 100
COVER_RADIUS = 6
AVATAR_SIZE = 28

CONTENT_TOP_WITH_IMAGE = PADDING + COVER_HEIGHT + PADDING
CONTENT_TOP_NO_IMAGE = 20

TITLE_LINE_HEIGHT = 24
TITLE_BASELINE = 18
DESCRIPTION_LINE_HEIGHT = 18
DESCRIPTION_BASELINE = 13
AUTHOR_ROW_HEIGHT = AVATAR_SIZE
AUTHOR_TEXT_BASELINE = 19
STATS_ROW_HEIGHT = 16
STATS_BASELINE = 12
BLOCK_GAP = 8

STATS_SEPARATOR = "  •  "


@dataclass(frozen=True)
class LayoutPlan:
    """Top offset of every visible block, in render order."""

    content_top: int
    offsets: dict[str, int] = field(default_factory=dict)
    bottom: int = 0

    def has(self, block: str) -> bool:
        return block in self.offsets

    def y(self, block: str) -> int:
        return self.offsets[block]


@dataclass(frozen=True)
class _Stats:
    text: str
    tags: str

    @property
    def visible(self) -> bool:
        return bool(self.text or self.tags)


def _stats_for(article: Article, text: BadgeText, request: BadgeRequest) -> _Stats:
    parts: list[str] = []
    if not request.is_hidden(Component.REACTIONS):
        parts.append(f"❤️ {article.reactions_count} Reactions")
    if not request.is_hidden(Component.MINREADS):
        parts.append(f"{article.reading_time_minutes} min read")
    tags = "" if request.is_hidden(Component.TAGS) else text.tags_line
    return _Stats(text=STATS_SEPARATOR.join(parts), tags=tags)


def plan_layout(
    text: BadgeText,
    *,
    show_cover: bool,
    show_author: bool = True,
    show_stats: bool = True,
) -> LayoutPlan:
    """Stack the optional blocks top to bottom, skipping absent ones."""
    content_top = CONTENT_TOP_WITH_IMAGE if show_cover else CONTENT_TOP_NO_IMAGE
    candidates = (
        ("title", len(text.title_lines) * TITLE_LINE_HEIGHT),
        ("description", len(text.description_lines) * DESCRIPTION_LINE_HEIGHT),
        ("author", AUTHOR_ROW_HEIGHT if show_author else 0),
        ("stats", STATS_ROW_HEIGHT if show_stats else 0),
    )
    offsets: dict[str, int] = {}
    cursor = content_top
    for name, height in candidates:
        if height <= 0:
            continue
        offsets[name] = cursor
        cursor += height + BLOCK_GAP
    return LayoutPlan(content_top=content_top, offsets=offsets, bottom=cursor - BLOCK_GAP)


def _style(theme: Theme, palette: Palette) -> str:
    scope = f".theme-{theme.value}"
    return (
        "<style>"
        f"{scope} {{ font-family: {FONT_FAMILY}; }}"
        f"{scope} .title {{ font-size: 18px; font-weight: 700; fill: {palette.title}; }}"
        f"{scope} .description {{ font-size: 13px; font-weight: 400; fill: {palette.description}; }}"
        f"{scope} .author {{ font-size: 14px; font-weight: 500; fill: {palette.author}; }}"
        f"{scope} .stats {{ font-size: 12px; font-weight: 500; fill: {palette.stats}; }}"
        f"{scope} .tags {{ font-size: 12px; font-weight: 600; fill: {palette.tags}; }}"
        "</style>"
    )


def _cover_markup(data_uri: str) -> list[str]:
    inner = WIDTH - 2 * PADDING
    return [
        "<defs>"
        f'<clipPath id="clipCover"><rect x="{PADDING}" y="{PADDING}" width="{inner}" '
        f'height="{COVER_HEIGHT}" rx="{COVER_RADIUS}"/></clipPath>'
        "</defs>",
        f'<image class="cover" href="{data_uri}" x="{PADDING}" y="{PADDING}" width="{inner}" '
        f'height="{COVER_HEIGHT}" clip-path="url(#clipCover)" preserveAspectRatio="xMidYMid slice"/>',
    ]


def _author_markup(y: int, name: str, avatar_uri: str | None) -> list[str]:
    out: list[str] = []
    text_x = PADDING
    if avatar_uri:
        r = AVATAR_SIZE // 2
        out.append(
            "<defs>"
            f'<clipPath id="clipAvatar"><circle cx="{PADDING + r}" cy="{y + r}" r="{r}"/></clipPath>'
            "</defs>"
        )
        out.append(
            f'<image class="avatar" href="{avatar_uri}" x="{PADDING}" y="{y}" width="{AVATAR_SIZE}" '
            f'height="{AVATAR_SIZE}" clip-path="url(#clipAvatar)"/>'
        )
        text_x = PADDING + AVATAR_SIZE + 8
    if name:
        out.append(f'<text class="author" x="{text_x}" y="{y + AUTHOR_TEXT_BASELINE}">{name}</text>')
    return out


def compose_badge_svg(
    request: BadgeRequest,
    article: Article,
    text: BadgeText,
    images: BadgeImages,
) -> str:
    palette = PALETTES[request.theme]
    cover = None if request.is_hidden(Component.IMAGE) else images.cover
    avatar = images.avatar
    stats = _stats_for(article, text, request)
    plan = plan_layout(
        text,
        show_cover=cover is not None,
        show_author=bool(text.author_name or avatar),
        show_stats=stats.visible,
    )

    body: list[str] = [
        f'<rect class="card" x="0.5" y="0.5" width="{WIDTH - 1}" height="{HEIGHT - 1}" rx="8" '
        f'fill="{palette.background}" stroke="{palette.border}"/>'
    ]
    if cover is not None:
        body.extend(_cover_markup(cover.data_uri))

    title_y = plan.y("title")
    for i, line in enumerate(text.title_lines):
        body.append(f'<text class="title" x="{PADDING}" y="{title_y + TITLE_BASELINE + i * TITLE_LINE_HEIGHT}">{line}</text>')

    if plan.has("description"):
        desc_y = plan.y("description")
        for i, line in enumerate(text.description_lines):
            y = desc_y + DESCRIPTION_BASELINE + i * DESCRIPTION_LINE_HEIGHT
            body.append(f'<text class="description" x="{PADDING}" y="{y}">{line}</text>')

    if plan.has("author"):
        body.extend(_author_markup(plan.y("author"), text.author_name, avatar.data_uri if avatar else None))

    if plan.has("stats"):
        y = plan.y("stats") + STATS_BASELINE
        if stats.text:
            body.append(f'<text class="stats" x="{PADDING}" y="{y}" xml:space="preserve">{stats.text}</text>')
        if stats.tags:
            body.append(
                f'<text class="tags" x="{WIDTH - PADDING}" y="{y}" text-anchor="end" '
                f'xml:space="preserve">{stats.tags}</text>'
            )

    return (
        f'<svg width="{WIDTH}" height="{HEIGHT}" viewBox="0 0 {WIDTH} {HEIGHT}" fill="none" '
        'xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink">'
        f'<g class="theme-{request.theme.value}">'
        + _style(request.theme, palette)
        + "".join(body)
        + "</g></svg>"
    )
