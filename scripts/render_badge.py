"""
Render one Dev.to badge locally, using the same pipeline as the /api route.

Usage:
    python scripts/render_badge.py --username ben --slug my-post -o card.svg
    python scripts/render_badge.py --url https://dev.to/ben/my-post --theme dark --hide tags,image
"""

import argparse
import asyncio
import os
import sys

from dotenv import load_dotenv

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

load_dotenv()


async def render(params: dict) -> tuple[int, str]:
    from devcard.core.errors import BadgeError
    from devcard.core.http import close_http_clients, init_http_clients
    from devcard.services.badge_service import render_badge

    await init_http_clients()
    try:
        badge = await render_badge(params)
        return badge.status_code, badge.svg_markup
    except BadgeError as e:
        return e.status_code, e.message
    finally:
        await close_http_clients()


def main():
    parser = argparse.ArgumentParser(description="Render a Dev.to article badge to SVG")
    parser.add_argument("--username", default=None)
    parser.add_argument("--slug", default=None)
    parser.add_argument("--url", default=None, help="full article URL (overrides --username/--slug)")
    parser.add_argument("--theme", default=None, choices=["light", "dark"])
    parser.add_argument("--hide", default=None, help="comma list of reactions,tags,minreads,image")
    parser.add_argument("-o", "--output", default=None, help="write SVG here instead of stdout")
    args = parser.parse_args()

    params = {
        "username": args.username,
        "slug": args.slug,
        "url": args.url,
        "theme": args.theme,
        "hide": args.hide,
    }
    status, body = asyncio.run(render(params))
    if status != 200:
        print(f"HTTP {status}: {body}", file=sys.stderr)
        sys.exit(1)
    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(body)
    else:
        sys.stdout.write(body)


if __name__ == "__main__":
    main()
