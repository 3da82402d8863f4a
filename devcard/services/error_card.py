from __future__ import annotations

from devcard.domain.models import Theme
from devcard.services.themes import PALETTES, coerce_theme

ERROR_WIDTH = 450
ERROR_HEIGHT = 120
ERROR_MESSAGE = "Could not generate Dev.to card."


def render_error_svg(theme: Theme | str | None = None) -> str:
    resolved = coerce_theme(theme)
    palette = PALETTES[resolved]
    theme_name = resolved.value
    return (
        f'<svg width="{ERROR_WIDTH}" height="{ERROR_HEIGHT}" viewBox="0 0 {ERROR_WIDTH} {ERROR_HEIGHT}" '
        f'fill="none" xmlns="http://www.w3.org/2000/svg">'
        f'<g class="theme-{theme_name}">'
        f'<rect x="0.5" y="0.5" width="{ERROR_WIDTH - 1}" height="{ERROR_HEIGHT - 1}" rx="8" '
        f'fill="{palette.background}" stroke="{palette.border}"/>'
        f'<text x="50%" y="50%" dominant-baseline="middle" text-anchor="middle" '
        f'font-family="sans-serif" font-size="16px" fill="{palette.error}">{ERROR_MESSAGE}</text>'
        f"</g></svg>"
    )
