"""Process entry helpers: port resolution, listener bind and uvicorn startup."""

import logging
import os
import socket

import uvicorn

logger = logging.getLogger(__name__)

# Listen on every interface; only the port is configurable
HOST = "0.0.0.0"
DEFAULT_PORT = 3333
BACKLOG = 2048


class StartupError(Exception):
    """The server could not start listening."""


def get_port() -> int:
    """Resolve the listen port from the PORT env var.

    Returns:
        Port number, DEFAULT_PORT when PORT is unset or empty

    Raises:
        StartupError: PORT is set but is not an integer
    """
    raw = os.getenv("PORT")
    if not raw:
        return DEFAULT_PORT
    try:
        return int(raw)
    except ValueError as e:
        raise StartupError(f"Invalid PORT value: {raw!r}") from e


def bind_listener(host: str, port: int) -> socket.socket:
    """Bind and listen on a TCP socket.

    Raises:
        StartupError: the address could not be bound (in use, no permission, ...)
    """
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((host, port))
        sock.listen(BACKLOG)
    except OSError as e:
        sock.close()
        raise StartupError(f"Failed to bind {host}:{port}: {e}") from e
    sock.set_inheritable(True)
    return sock


def serve(app, port: int | None = None) -> None:
    """Bind the listener and run the app until the process is stopped."""
    if port is None:
        port = get_port()

    sock = bind_listener(HOST, port)
    bound_port = sock.getsockname()[1]
    logger.debug("Listener bound", extra={"host": HOST, "port": bound_port})
    # Read by the app lifespan, which logs the port once startup completes
    app.state.listen_port = bound_port

    config = uvicorn.Config(
        app,
        host=HOST,
        port=bound_port,
        access_log=False,  # Structured app logs already cover requests of interest
        log_config=None,   # Keep the JSON handlers installed by setup_structured_logging
    )
    uvicorn.Server(config).run(sockets=[sock])
