"""
project: Quinti-Maze
module: server.py
License: MIT

Server bootstrap.

Starts the Socket.IO web host and configures stdlib logging (console plus a
rotating file under the Flask instance directory). Imports Flask lazily so
``play`` and ``solve`` never pay for the web stack.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler

from quintimaze.logging_utils import log

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def start_server(host="0.0.0.0", port=5000, debug: bool = False):  # pragma: no cover (integration / runtime only)
    """Start the Socket.IO server.

    When debug=True, Flask's debugger and reloader provide verbose tracebacks.
    """
    from quintimaze.web import app, socketio

    _configure_logging(app.instance_path)
    log.info(event="listen", host=host, port=port, async_mode=socketio.async_mode)
    # The threading fallback serves through Werkzeug, which refuses to start outside debug without this.
    extra = {"allow_unsafe_werkzeug": True} if socketio.async_mode == "threading" else {}
    try:
        # Let Flask-SocketIO choose the server (eventlet/gevent/werkzeug)
        socketio.run(app, host=host, port=port, debug=debug, **extra)
    except KeyboardInterrupt:
        print("\n[INFO] Server stopped by user (Ctrl+C)")
        sys.exit(0)


def _configure_logging(log_dir: str, level: int = logging.INFO) -> str:
    """Configure logging to both console and a rotating file in ``log_dir``.

    The file is ``<log_dir>/quintimaze.log`` with a few backups to cap growth.
    Returns the log file path.
    """
    try:
        os.makedirs(log_dir, exist_ok=True)
    except OSError:
        pass
    log_path = os.path.join(log_dir, "quintimaze.log")

    root = logging.getLogger()
    root.setLevel(level)

    file_handler = RotatingFileHandler(log_path, maxBytes=1_000_000, backupCount=3)
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(logging.Formatter(LOG_FORMAT))

    # Avoid duplicate handlers if reconfigured
    for h in list(root.handlers):
        root.removeHandler(h)

    root.addHandler(file_handler)
    root.addHandler(console)
    return log_path
