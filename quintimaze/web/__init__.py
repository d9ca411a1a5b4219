"""
project: Quinti-Maze
module: web/__init__.py
License: MIT

Flask application and Socket.IO setup for the browser host.

Configuration comes from environment variables (optionally via a ``.env``
file). Game state lives only in memory: ``registry`` maps session ids to
running games, and nothing is persisted between restarts. A local
``instance/`` directory holds the rotating log file.
"""

import logging
import os
import uuid

from dotenv import load_dotenv
from flask import Flask, jsonify
from flask_socketio import SocketIO

from .sessions import DEFAULT_MAX_SESSIONS, SessionRegistry

# Load .env if present so SECRET_KEY, QUINTI_* etc. can be supplied without
# exporting shell variables during development.
load_dotenv()

app = Flask(__name__, instance_relative_config=True)

try:
    os.makedirs(app.instance_path, exist_ok=True)
except OSError:
    # Read-only installs still serve games; only file logging is lost.
    pass

app.config.update(
    SECRET_KEY=os.getenv("SECRET_KEY", "dev-secret-change-me"),
    QUINTI_MAX_SESSIONS=int(os.getenv("QUINTI_MAX_SESSIONS", str(DEFAULT_MAX_SESSIONS))),
)

# Let Flask-SocketIO select the best async_mode from installed deps (eventlet/gevent/threading)
socketio = SocketIO(
    app,
    async_mode=os.getenv("SOCKETIO_ASYNC_MODE") or None,
    cors_allowed_origins=os.getenv("CORS_ALLOWED_ORIGINS", "*"),
    ping_interval=20,
    ping_timeout=10,
)

registry = SessionRegistry(max_sessions=app.config["QUINTI_MAX_SESSIONS"])

# Blueprints and socket handlers import `registry` / `socketio` from here.
from quintimaze.web.routes import bp_api  # noqa: E402

app.register_blueprint(bp_api)

from quintimaze.web import game as _ws_game  # noqa: F401,E402


def create_app():
    """Return the configured Flask app (module-level singleton)."""
    return app


@app.errorhandler(500)
def internal_error(e):
    error_id = uuid.uuid4().hex[:8]
    logging.exception("Unhandled exception (id=%s)", error_id)
    return jsonify(error="internal error", error_id=error_id), 500
