import logging
import os

try:
    from backend.crossclues.config import log_level
    from backend.crossclues.server import create_app
except ImportError:  # pragma: no cover
    from crossclues.config import log_level
    from crossclues.server import create_app

logging.basicConfig(level=log_level(os.environ.get("LOG_LEVEL")))

app, socketio = create_app()
