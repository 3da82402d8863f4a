import os
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ.setdefault("CONTENT_SITE_HOSTS", "dev.to")
os.environ.setdefault("CONTENT_API_BASE", "https://dev.to/api")


@pytest.fixture()
def article_payload():
    return {
        "title": "Building badges with FastAPI",
        "description": "A short tour of rendering SVG cards for Markdown.",
        "cover_image": "https://media.dev.to/cover.png",
        "tags": ["python", "fastapi", "svg", "markdown", "webdev"],
        "reading_time_minutes": 4,
        "public_reactions_count": 42,
        "user": {
            "name": "Foo Bar",
            "username": "foo",
            "profile_image_90": "https://media.dev.to/avatar.png",
        },
    }


@pytest.fixture()
def api_client():
    from devcard.main import app

    client = TestClient(app)
    try:
        yield client
    finally:
        client.close()
