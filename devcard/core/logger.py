import logging
import os
from typing import Optional

ROOT_NAME = "devcard"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Library loggers and the env var that sets each one's level.
_QUIET_LOGGERS = {
    "httpx": "HTTP_LOG_LEVEL",
    "httpcore": "HTTP_LOG_LEVEL",
}
_SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def _level(value: Optional[str], default: int) -> int:
    name = (value or "").strip().upper()
    level = logging.getLevelName(name) if name else default
    return level if isinstance(level, int) else default


def _adopt(name: str, level: int) -> None:
    lg = logging.getLogger(name)
    lg.handlers.clear()
    lg.propagate = True
    lg.setLevel(level)


def configure_logging(level_name: Optional[str] = None) -> int:
    """Install one stream handler on the root logger and return the level.

    Safe to call again: the handler installed by a previous call is replaced
    rather than duplicated. httpx logs every request at INFO, so it stays at
    WARNING unless HTTP_LOG_LEVEL says otherwise.
    """
    level = _level(level_name or os.getenv("LOG_LEVEL"), logging.INFO)

    root = logging.getLogger()
    for h in list(root.handlers):
        if getattr(h, "_devcard", False):
            root.removeHandler(h)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._devcard = True
    root.addHandler(handler)
    root.setLevel(level)

    for name in _SERVER_LOGGERS:
        _adopt(name, level)
    for name, env in _QUIET_LOGGERS.items():
        _adopt(name, _level(os.getenv(env), logging.WARNING))
    return level


configure_logging()


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return ``devcard`` or a child of it; ``"assets"`` becomes ``devcard.assets``."""
    if not name or name == ROOT_NAME:
        return logging.getLogger(ROOT_NAME)
    if name.startswith(ROOT_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_NAME}.{name}")
