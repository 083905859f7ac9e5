import logging
import os


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev")

    # CORS
    CORS_ORIGINS = os.environ.get("CORS_ORIGINS", "*")

    # Reverse proxy / IP headers
    TRUST_PROXY_HEADERS = os.environ.get("TRUST_PROXY_HEADERS", "1") == "1"

    # Socket.IO ("" picks a default per platform)
    SOCKETIO_ASYNC_MODE = os.environ.get("SOCKETIO_ASYNC_MODE", "").strip()

    # Built SPA; served only if the directory exists
    FRONTEND_DIST = os.environ.get("FRONTEND_DIST", "")

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    # Game
    DEFAULT_GRID_SIZE = int(os.environ.get("DEFAULT_GRID_SIZE", "5"))


def log_level(name) -> int:
    """Numeric level for a name like "debug"; unknown names fall back to INFO."""
    level = logging.getLevelName(str(name or "").strip().upper())
    return level if isinstance(level, int) else logging.INFO
