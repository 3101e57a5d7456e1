"""Key/value configuration files (``KEY=VALUE`` lines, ``#`` comments)."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path


class ConfigError(Exception):
    """Raised when a configuration cannot be loaded or a value is unusable."""


@dataclass(frozen=True)
class Config:
    """A parsed configuration."""

    properties: dict[str, str] = field(default_factory=dict)
    path: Path | None = None

    def has_property(self, key: str) -> bool:
        return key in self.properties

    def get_string(self, key: str) -> str:
        try:
            return self.properties[key]
        except KeyError:
            raise ConfigError(f"missing configuration key: {key}") from None

    def get_int(self, key: str) -> int:
        value = self.get_string(key)
        try:
            return int(value)
        except ValueError:
            raise ConfigError(f"configuration key {key} is not an integer: {value!r}") from None


def parse_config(text: str) -> Config:
    """Parse configuration text into a :class:`Config`."""
    properties: dict[str, str] = {}
    for number, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        key, sep, value = line.partition("=")
        if not sep or not key.strip():
            raise ConfigError(f"malformed configuration line {number}: {raw!r}")
        properties[key.strip()] = value.strip()
    return Config(properties)


def load_config(path: str | Path, logger: logging.Logger | None = None) -> Config:
    """Load the configuration file at ``path``; raise :class:`ConfigError` on failure."""
    log = logger or logging.getLogger(__name__)
    file_path = Path(path)
    try:
        text = file_path.read_text(encoding="utf-8")
    except OSError as exc:
        log.error("Hubo un error al crear el archivo de configuración.")
        raise ConfigError(f"cannot read configuration file {file_path}") from exc
    config = parse_config(text)
    return Config(config.properties, file_path)