from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"


class Component(str, Enum):
    """Badge blocks that can be switched off with ``hide=``."""

    REACTIONS = "reactions"
    TAGS = "tags"
    MINREADS = "minreads"
    IMAGE = "image"


HIDEABLE_COMPONENTS = frozenset(c.value for c in Component)


@dataclass(frozen=True)
class BadgeRequest:
    username: str
    slug: str
    theme: Theme = Theme.LIGHT
    # Raw tokens; unknown ones are kept and simply never match a component.
    hidden: frozenset[str] = field(default_factory=frozenset)

    def is_hidden(self, component: Component) -> bool:
        return component.value in self.hidden


@dataclass(frozen=True)
class Author:
    name: str
    avatar_url: str | None = None


@dataclass(frozen=True)
class Article:
    title: str
    description: str
    author: Author
    cover_image_url: str | None = None
    tags: tuple[str, ...] = ()
    reading_time_minutes: int = 0
    reactions_count: int = 0


@dataclass(frozen=True)
class EmbeddedImage:
    mime_type: str
    base64_payload: str

    @property
    def data_uri(self) -> str:
        return f"data:{self.mime_type};base64,{self.base64_payload}"


@dataclass(frozen=True)
class BadgeImages:
    cover: EmbeddedImage | None = None
    avatar: EmbeddedImage | None = None


@dataclass(frozen=True)
class RenderedBadge:
    svg_markup: str
    cache_control: str
    status_code: int = 200
    content_type: str = "image/svg+xml"
