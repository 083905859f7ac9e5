from __future__ import annotations

import logging
import sys
from pathlib import Path

from flask import Flask, send_from_directory
from flask_cors import CORS
from flask_socketio import SocketIO
from werkzeug.middleware.proxy_fix import ProxyFix

from .config import Config, log_level
from .game.service import GameService
from .routes.health import bp as health_bp
from .routes.rooms import bp as rooms_bp
from .realtime.handlers import register_socketio_handlers


def _default_dist_dir() -> Path:
    return Path(__file__).resolve().parents[2] / "frontend" / "dist"


def create_app(config_class=Config, service: GameService | None = None) -> tuple[Flask, SocketIO]:
    app = Flask(__name__, static_folder=None)
    app.config.from_object(config_class)
    logging.getLogger("crossclues").setLevel(log_level(app.config.get("LOG_LEVEL")))

    if app.config.get("TRUST_PROXY_HEADERS", False):
        app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1, x_port=1)

    cors_origins = app.config.get("CORS_ORIGINS", "*")
    CORS(app, resources={r"/api/*": {"origins": cors_origins}})

    if service is None:
        service = GameService(default_grid_size=app.config.get("DEFAULT_GRID_SIZE", 5))
    app.extensions["crossclues"] = service

    async_mode = app.config.get("SOCKETIO_ASYNC_MODE") or None
    if async_mode is None:
        # Windows and Python >= 3.13: threading (eventlet has known issues there)
        if sys.platform.startswith("win") or sys.version_info >= (3, 13):
            async_mode = "threading"
        else:
            async_mode = "eventlet"

    socketio = SocketIO(
        app,
        cors_allowed_origins=cors_origins,
        async_mode=async_mode,
    )

    app.register_blueprint(health_bp, url_prefix="/api")
    app.register_blueprint(rooms_bp, url_prefix="/api")

    app.extensions["crossclues_subscriptions"] = register_socketio_handlers(socketio, service)

    dist_dir = Path(app.config["FRONTEND_DIST"]) if app.config.get("FRONTEND_DIST") else _default_dist_dir()
    if dist_dir.exists():
        @app.get("/")
        def index():
            return send_from_directory(dist_dir, "index.html")

        @app.get("/<path:path>")
        def static_proxy(path: str):
            if path.startswith("api/"):
                return {"error": "Endpoint not found", "code": "not_found"}, 404
            file_path = dist_dir / path
            if file_path.exists() and file_path.is_file():
                return send_from_directory(dist_dir, path)
            return send_from_directory(dist_dir, "index.html")

    return app, socketio
