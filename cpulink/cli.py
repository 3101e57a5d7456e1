"""CPU console: connects to memory and kernel and forwards typed lines."""

from __future__ import annotations

import argparse
import logging
import socket
import sys
from collections.abc import Callable, Sequence

from cpulink.clients import DEFAULT_CONFIG, connect_dispatch, connect_interrupt, connect_memory
from cpulink.config import ConfigError
from cpulink.connections import destroy_connection
from cpulink.logger import close_logger, start_logger
from cpulink.packets import send_message

_LOG = logging.getLogger(__name__)

ReadLine = Callable[[str], "str | None"]


def _read_line(prompt: str) -> str | None:
    try:
        return input(prompt)
    except EOFError:
        return None


def run_console(
    memory: socket.socket,
    dispatch: socket.socket,
    interrupt: socket.socket,
    read_line: ReadLine,
    logger: logging.Logger | None = None,
) -> int:
    """Forward lines to memory and the kernel until input ends or two blanks.

    Each round reads a dispatch line and an interrupt line; a non-empty line
    goes to memory and to its kernel channel. Returns the number of lines sent.
    """
    log = logger or _LOG
    channels = (("[CPU DISPATCH] -> ", dispatch), ("[CPU INTERRUPT] -> ", interrupt))
    sent = 0
    while True:
        blanks = 0
        for prompt, channel in channels:
            line = read_line(prompt)
            if line is None:
                log.error("Error al leer input del usuario.")
                return sent
            if line == "":
                blanks += 1
                continue
            send_message(memory, line)
            send_message(channel, line)
            sent += 1
        if blanks == len(channels):
            log.info("Ambos inputs vacíos recibidos. Finalizando...")
            return sent


def _cleanup(
    connections: Sequence[tuple[str, socket.socket | None]], logger: logging.Logger
) -> None:
    for label, sock in connections:
        if sock is not None:
            destroy_connection(sock)
            logger.warning("🗑️ Liberando conexion con %s.", label)
    logger.warning("🗑️ Liberando el logger y terminando programa.")
    close_logger(logger)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="cpulink", description="CPU module console.")
    parser.add_argument("--config", default=DEFAULT_CONFIG, help="configuration file")
    parser.add_argument("--log", default="cpu.log", help="log file")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    try:
        logger = start_logger(args.log, "CPU")
    except OSError:
        print("No se pudo iniciar el logger.", file=sys.stderr)
        return 1
    logger.info("✅ Módulo CPU instanciado exitosamente.")

    memory: socket.socket | None = None
    dispatch: socket.socket | None = None
    interrupt: socket.socket | None = None

    def cleanup() -> None:
        _cleanup(
            [
                ("la memoria", memory),
                ("el kernel", dispatch),
                ("el kernel - interrupt", interrupt),
            ],
            logger,
        )

    try:
        memory = connect_memory(logger, args.config)
    except (ConfigError, ConnectionError, OSError):
        logger.error("No se pudo conectar con la memoria.")
        cleanup()
        return 1
    logger.info("✅ Conectado a la memoria. [Puerto 8002]")
    _read_line("~~> ⌛️ Esperando al Kernel... [Enter to continue] <~~")

    try:
        dispatch = connect_dispatch(logger, args.config)
    except (ConfigError, ConnectionError, OSError):
        logger.error("No se pudo conectar con el kernel [DISPATCH].")
        cleanup()
        return 1
    logger.info("✅ Conectado al kernel - modo dispatch. [Puerto 8001]")

    try:
        interrupt = connect_interrupt(logger, args.config)
    except (ConfigError, ConnectionError, OSError):
        logger.error("No se pudo conectar con el kernel [INTERRUPT].")
        cleanup()
        return 1
    logger.info("✅ Conectado al kernel - modo interrupt. [Puerto 8004]")

    try:
        run_console(memory, dispatch, interrupt, _read_line, logger)
    finally:
        cleanup()
    return 0