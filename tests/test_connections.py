import logging
import socket

import pytest

from cpulink.connections import (
    ConnectionSetupError,
    create_connection,
    destroy_connection,
    listen_server,
    start_server,
    wait_client,
)


@pytest.fixture
def server():
    srv = start_server("127.0.0.1", 0)
    yield srv
    srv.close()


def _port(sock):
    return sock.getsockname()[1]


def test_start_server_binds_an_ephemeral_port(server):
    assert _port(server) > 0
    assert server.type == socket.SOCK_STREAM


def test_client_and_server_exchange_bytes(server):
    client = create_connection("127.0.0.1", str(_port(server)))
    peer = wait_client(server)
    try:
        client.sendall(b"ping")
        assert peer.recv(4) == b"ping"
        peer.sendall(b"pong")
        assert client.recv(4) == b"pong"
    finally:
        client.close()
        peer.close()


def test_create_connection_accepts_integer_port_and_logs(server, caplog):
    caplog.set_level(logging.INFO)
    client = create_connection("127.0.0.1", _port(server))
    try:
        assert client.getpeername()[1] == _port(server)
        assert any("Conectado exitosamente" in r.getMessage() for r in caplog.records)
    finally:
        client.close()


def test_listen_server_returns_connected_client(server, caplog):
    caplog.set_level(logging.DEBUG)
    client = create_connection("127.0.0.1", _port(server))
    peer = listen_server(server, "KERNEL")
    try:
        assert peer.getpeername() == client.getsockname()
        assert any("KERNEL" in r.getMessage() for r in caplog.records)
    finally:
        client.close()
        peer.close()


@pytest.mark.parametrize("host", ["", None])
def test_create_connection_rejects_empty_host(host):
    with pytest.raises(ConnectionSetupError):
        create_connection(host, "8000")


@pytest.mark.parametrize("port", ["", None])
def test_create_connection_rejects_empty_port(port):
    with pytest.raises(ConnectionSetupError):
        create_connection("127.0.0.1", port)


def test_create_connection_refused_raises():
    probe = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    probe.bind(("127.0.0.1", 0))
    port = probe.getsockname()[1]
    probe.close()
    with pytest.raises(ConnectionSetupError):
        create_connection("127.0.0.1", port)


def test_destroy_connection_closes_and_is_idempotent():
    left, right = socket.socketpair()
    right.close()
    destroy_connection(left)
    assert left.fileno() == -1
    destroy_connection(left)
    assert left.fileno() == -1
    assert destroy_connection(None) is None