from __future__ import annotations


class BadgeError(Exception):
    """Base class for failures that end a badge render."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInput(BadgeError):
    status_code = 400

    _MESSAGES = {
        "bad-url": "Invalid Dev.to URL provided.",
        "bad-host": "Invalid Dev.to URL provided.",
        "missing-identifiers": "Please provide a username and slug, or a full Dev.to URL.",
    }

    def __init__(self, reason: str):
        super().__init__(self._MESSAGES.get(reason, "Invalid request."))
        self.reason = reason


class ArticleNotFound(BadgeError):
    status_code = 404

    def __init__(self, username: str, slug: str):
        super().__init__("Article not found.")
        self.username = username
        self.slug = slug


class UpstreamError(BadgeError):
    status_code = 500

    def __init__(self, message: str, *, upstream_status: int | None = None):
        super().__init__(message)
        self.upstream_status = upstream_status
