"""Colour palettes for the two badge themes."""

from __future__ import annotations

from dataclasses import dataclass

from devcard.domain.models import Theme


@dataclass(frozen=True)
class Palette:
    background: str
    border: str
    title: str
    description: str
    author: str
    stats: str
    tags: str
    error: str


PALETTES: dict[Theme, Palette] = {
    Theme.LIGHT: Palette(
        background="#ffffff",
        border="#e5e7eb",
        title="#111827",
        description="#4b5563",
        author="#374151",
        stats="#6b7280",
        tags="#4f46e5",
        error="#ef4444",
    ),
    Theme.DARK: Palette(
        background="#1f2937",
        border="#374151",
        title="#ffffff",
        description="#d1d5db",
        author="#d1d5db",
        stats="#9ca3af",
        tags="#818cf8",
        error="#f87171",
    ),
}


def coerce_theme(theme: Theme | str | None) -> Theme:
    try:
        return Theme(theme)
    except ValueError:
        return Theme.LIGHT


def get_palette(theme: Theme | str | None) -> Palette:
    return PALETTES[coerce_theme(theme)]
