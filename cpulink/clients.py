"""Outgoing connections from the CPU to the kernel and memory."""

from __future__ import annotations

import logging
import socket
from enum import Enum
from pathlib import Path

from cpulink.config import load_config
from cpulink.connections import create_connection

DEFAULT_CONFIG = "cpu.config"

_LOG = logging.getLogger(__name__)


class Endpoint(Enum):
    """A remote module, named by the configuration keys of its host and port."""

    KERNEL = ("IP_KERNEL", "PUERTO_KERNEL")
    MEMORY = ("IP_MEMORIA", "PUERTO_MEMORIA")
    DISPATCH = ("IP_KERNEL", "PUERTO_KERNEL_DISPATCH")
    INTERRUPT = ("IP_KERNEL", "PUERTO_KERNEL_INTERRUPT")

    def __init__(self, host_key: str, port_key: str) -> None:
        self.host_key = host_key
        self.port_key = port_key


def connect_endpoint(
    endpoint: Endpoint,
    config_path: str | Path = DEFAULT_CONFIG,
    logger: logging.Logger | None = None,
) -> socket.socket:
    """Read ``config_path`` and connect to the address it gives for ``endpoint``."""
    log = logger or _LOG
    config = load_config(config_path, log)
    log.info("🛠️ Configuración del cliente instanciada exitosamente.")
    host = config.get_string(endpoint.host_key)
    port = config.get_string(endpoint.port_key)
    return create_connection(host, port, log)


def connect_dispatch(
    logger: logging.Logger | None = None, config_path: str | Path = DEFAULT_CONFIG
) -> socket.socket:
    return connect_endpoint(Endpoint.DISPATCH, config_path, logger)


def connect_memory(
    logger: logging.Logger | None = None, config_path: str | Path = DEFAULT_CONFIG
) -> socket.socket:
    return connect_endpoint(Endpoint.MEMORY, config_path, logger)


def connect_interrupt(
    logger: logging.Logger | None = None, config_path: str | Path = DEFAULT_CONFIG
) -> socket.socket:
    return connect_endpoint(Endpoint.INTERRUPT, config_path, logger)


def connect_kernel(
    logger: logging.Logger | None = None, config_path: str | Path = DEFAULT_CONFIG
) -> socket.socket:
    return connect_endpoint(Endpoint.KERNEL, config_path, logger)