"""
QuickNotes — Server Entrypoint
===============================

What:  `quicknotes` console script / `python -m quicknotes`.
How:   Prints the startup banner, binds the listening socket itself, then
       hands the bound socket to uvicorn. A socket that cannot bind is fatal:
       BindError is logged at CRITICAL and the process exits with status 1.
"""

import logging
import socket
import sys
from typing import Optional

import uvicorn

from quicknotes import __version__
from quicknotes.config import Settings, settings
from quicknotes.exceptions import BindError
from quicknotes.main import create_app, setup_logging

logger = logging.getLogger(__name__)

BANNER = f"QuickNotes {__version__} (in-memory notes, nothing survives a restart)"


def bind_listener(host: str, port: int) -> socket.socket:
    """
    Create a TCP socket bound to host:port.

    Raises:
        BindError: Address unresolvable, in use, or not permitted
    """
    try:
        family, kind, proto, _, address = socket.getaddrinfo(
            host or None, port, type=socket.SOCK_STREAM, flags=socket.AI_PASSIVE
        )[0]
    except OSError as exc:
        raise BindError(host, port, str(exc)) from exc

    sock = socket.socket(family, kind, proto)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind(address)
    except OSError as exc:
        sock.close()
        raise BindError(host, port, exc.strerror or str(exc)) from exc

    sock.set_inheritable(True)
    return sock


def run(app_settings: Optional[Settings] = None) -> None:
    cfg = app_settings or settings
    setup_logging(cfg.log_level)

    try:
        sock = bind_listener(cfg.host, cfg.port)
    except BindError as exc:
        logger.critical("%s", exc.message)
        sys.exit(1)

    config = uvicorn.Config(
        create_app(cfg),
        log_level=cfg.log_level.lower(),
        # Keep the logging set up by setup_logging()
        log_config=None,
    )
    uvicorn.Server(config).run(sockets=[sock])


def main() -> None:
    print(BANNER)
    run()


if __name__ == "__main__":
    main()
