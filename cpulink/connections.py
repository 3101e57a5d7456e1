"""TCP client and server connection helpers."""

from __future__ import annotations

import logging
import socket

_LOG = logging.getLogger(__name__)


class ConnectionSetupError(ConnectionError):
    """Raised when a connection or a listening socket cannot be set up."""


def _text(value: str | int | None) -> str:
    return "" if value is None else str(value)


def create_connection(
    host: str | None, port: str | int | None, logger: logging.Logger | None = None
) -> socket.socket:
    """Connect to ``host``:``port`` over TCP and return the connected socket."""
    log = logger or _LOG
    host_text = _text(host)
    port_text = _text(port)
    if not host_text:
        log.error("La IP es inválida o vacía.")
        raise ConnectionSetupError("invalid or empty host")
    if not port_text:
        log.error("El puerto es inválido o vacío.")
        raise ConnectionSetupError("invalid or empty port")

    try:
        infos = socket.getaddrinfo(
            host_text, port_text, socket.AF_UNSPEC, socket.SOCK_STREAM, 0, socket.AI_PASSIVE
        )
    except socket.gaierror as exc:
        log.error("getaddrinfo falló: %s", exc)
        raise ConnectionSetupError(f"cannot resolve {host_text}:{port_text}") from exc

    family, socktype, proto, _, address = infos[0]
    try:
        sock = socket.socket(family, socktype, proto)
    except OSError as exc:
        log.error("No se pudo crear el socket")
        raise ConnectionSetupError("cannot create socket") from exc

    try:
        sock.connect(address)
    except OSError as exc:
        log.error("✖️ [UTILS ERROR]: No se pudo conectar al servidor.")
        sock.close()
        raise ConnectionSetupError(f"cannot connect to {host_text}:{port_text}") from exc

    log.info("🔗 Conectado exitosamente a la IP: %s. [%s]", host_text, port_text)
    return sock


def destroy_connection(sock: socket.socket | None) -> None:
    """Close ``sock`` if it is open; closed sockets and ``None`` are ignored."""
    if sock is None or sock.fileno() < 0:
        return
    sock.close()


def wait_client(server: socket.socket) -> socket.socket:
    """Block until a client connects to ``server`` and return its socket."""
    client, _ = server.accept()
    return client


def listen_server(
    server: socket.socket, module: str, logger: logging.Logger | None = None
) -> socket.socket:
    """Accept one client on ``server`` and log which module connected."""
    log = logger or _LOG
    client = wait_client(server)
    log.debug(" ✔️ [UTILS]: El modulo %s se conectó exitosamente.", module)
    return client


def start_server(
    host: str | None, port: str | int, logger: logging.Logger | None = None
) -> socket.socket:
    """Bind a listening TCP socket on ``host``:``port`` and return it."""
    log = logger or _LOG
    host_text = _text(host) or None
    port_text = _text(port)
    try:
        infos = socket.getaddrinfo(
            host_text, port_text, socket.AF_UNSPEC, socket.SOCK_STREAM, 0, socket.AI_PASSIVE
        )
    except socket.gaierror as exc:
        log.error("getaddrinfo falló: %s", exc)
        raise ConnectionSetupError(f"cannot resolve {host_text}:{port_text}") from exc

    server: socket.socket | None = None
    for family, socktype, proto, _, address in infos:
        try:
            candidate = socket.socket(family, socktype, proto)
        except OSError:
            log.error("Error al crear el socket")
            continue
        candidate.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        try:
            candidate.bind(address)
        except OSError:
            log.error("Error al hacer bind")
            candidate.close()
            continue
        server = candidate
        break

    if server is None:
        log.error("No se pudo enlazar el socket a ninguna dirección.")
        raise ConnectionSetupError(f"cannot bind {host_text}:{port_text}")

    try:
        server.listen(socket.SOMAXCONN)
    except OSError as exc:
        log.error("Error al escuchar en el socket")
        server.close()
        raise ConnectionSetupError("cannot listen on socket") from exc

    log.info(" ✔️ Escuchando la IP %s (%s)...", host_text, port_text)
    return server