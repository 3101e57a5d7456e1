"""Wire format for messages and packets exchanged over stream sockets.

A frame is a native ``int`` operation code, a native ``int`` payload size
and the payload. A message payload is a NUL-terminated string; a packet
payload is a run of ``(size, bytes)`` values.
"""

from __future__ import annotations

import logging
import socket
import struct
from dataclasses import dataclass, field
from enum import IntEnum

from cpulink.logger import log_custom_error

_INT = struct.Struct("=i")


class OpCode(IntEnum):
    MESSAGE = 0
    PACKAGE = 1


class ConnectionClosed(ConnectionError):
    """Raised when the peer closes the connection or a read fails."""


@dataclass
class Packet:
    """A packet under construction: an op code and an accumulating payload."""

    op_code: OpCode = OpCode.PACKAGE
    payload: bytearray = field(default_factory=bytearray)

    def add(self, value: bytes) -> None:
        """Append ``value`` prefixed by its length."""
        data = bytes(value)
        self.payload += _INT.pack(len(data))
        self.payload += data

    def serialize(self) -> bytes:
        return _INT.pack(int(self.op_code)) + _INT.pack(len(self.payload)) + bytes(self.payload)


def encode_message(message: str) -> bytes:
    """Frame ``message`` as a NUL-terminated string message."""
    packet = Packet(OpCode.MESSAGE, bytearray(message.encode("utf-8") + b"\0"))
    return packet.serialize()


def send_message(sock: socket.socket, message: str) -> None:
    sock.sendall(encode_message(message))


def send_packet(sock: socket.socket, packet: Packet) -> None:
    sock.sendall(packet.serialize())


def _recv_exact(sock: socket.socket, size: int) -> bytes:
    chunks = bytearray()
    while len(chunks) < size:
        chunk = sock.recv(size - len(chunks))
        if not chunk:
            raise ConnectionClosed("connection closed before the frame was complete")
        chunks += chunk
    return bytes(chunks)


def receive_operation(sock: socket.socket, logger: logging.Logger | None = None) -> int:
    """Read an operation code; close the socket and raise if the peer is gone."""
    log = logger or logging.getLogger(__name__)
    try:
        first = sock.recv(_INT.size)
        if not first:
            log.info("Cliente cerró la conexión.")
            sock.close()
            raise ConnectionClosed("client closed the connection")
        data = first + _recv_exact(sock, _INT.size - len(first))
    except ConnectionClosed:
        sock.close()
        raise
    except OSError as exc:
        log_custom_error("Error al recibir operación")
        sock.close()
        raise ConnectionClosed("error receiving operation") from exc
    return _INT.unpack(data)[0]


def receive_buffer(sock: socket.socket) -> bytes:
    """Read a size-prefixed payload."""
    (size,) = _INT.unpack(_recv_exact(sock, _INT.size))
    if size < 0:
        raise ValueError(f"negative payload size: {size}")
    return _recv_exact(sock, size)


def receive_message(sock: socket.socket) -> str:
    """Read a message payload and return the string before its terminator."""
    payload = receive_buffer(sock)
    return payload.split(b"\0", 1)[0].decode("utf-8")


def decode_values(payload: bytes) -> list[bytes]:
    """Split a packet payload into its length-prefixed values."""
    values: list[bytes] = []
    view = memoryview(payload)
    offset = 0
    while offset < len(view):
        if offset + _INT.size > len(view):
            raise ValueError("truncated value length")
        (size,) = _INT.unpack_from(view, offset)
        offset += _INT.size
        if size < 0 or offset + size > len(view):
            raise ValueError("truncated value")
        values.append(bytes(view[offset:offset + size]))
        offset += size
    return values


def receive_packet(sock: socket.socket) -> list[bytes]:
    return decode_values(receive_buffer(sock))