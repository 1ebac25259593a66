"""
Server bootstrap: bind a socket, announce the URL, serve the ASGI app
"""

import ipaddress
import socket
from collections.abc import Callable

import click
import uvicorn
from fastapi import FastAPI

from .config import Settings, settings
from .logging import get_logger

logger = get_logger(__name__)

# Hosts that listen on every interface; clients reach them through localhost
WILDCARD_HOSTS = {"", "0.0.0.0", "::"}


def build_server_url(host: str, port: int, path: str = "/graphql") -> str:
    """Build the URL clients use to reach a server bound to host and port."""
    display_host = "localhost" if host in WILDCARD_HOSTS else host
    try:
        if ipaddress.ip_address(display_host).version == 6:
            display_host = f"[{display_host}]"
    except ValueError:
        pass  # hostname, not an IP literal

    if not path.startswith("/"):
        path = f"/{path}"
    return f"http://{display_host}:{port}{path}"


def bind_socket(host: str, port: int) -> socket.socket:
    """Bind a TCP socket for uvicorn to listen on.

    uvicorn announces its own address only for sockets it binds itself, so
    binding here leaves "Server ready at" as the sole URL line.

    Raises:
        OSError: If the address cannot be bound
    """
    family = socket.AF_INET
    try:
        if ipaddress.ip_address(host).version == 6:
            family = socket.AF_INET6
    except ValueError:
        pass  # hostname, resolved by bind

    sock = socket.socket(family, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((host, port))
    except OSError:
        sock.close()
        raise
    sock.set_inheritable(True)
    return sock


def bound_port(sock: socket.socket) -> int:
    """Port the socket is actually bound to (resolves port 0)."""
    return sock.getsockname()[1]


def serve(
    app: FastAPI | None = None,
    host: str | None = None,
    port: int | None = None,
    log_level: str | None = None,
    config: Settings | None = None,
    echo: Callable[[str], None] = click.echo,
) -> None:
    """Bind the listening socket, print the server URL and serve until stopped.

    Bind failures are not caught; the OSError ends the process.
    """
    config = config or settings
    host = host if host is not None else config.api_host
    port = port if port is not None else config.api_port
    log_level = (log_level or config.log_level).lower()

    if app is None:
        from .api.app import create_app

        app = create_app(config=config)

    uvicorn_config = uvicorn.Config(
        app,
        host=host,
        port=port,
        log_level=log_level,
        access_log=True,
    )
    server = uvicorn.Server(uvicorn_config)

    sock = bind_socket(host, port)
    resolved_port = bound_port(sock)
    logger.info("Socket bound", host=host, port=resolved_port)

    echo(f"Server ready at {build_server_url(host, resolved_port, config.graphql_path)}")

    try:
        server.run(sockets=[sock])
    finally:
        sock.close()
