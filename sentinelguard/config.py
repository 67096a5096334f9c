"""Application configuration read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

DATABASE_URI_VAR = "SENTINEL_GUARD_DATABASE_URI"
HOST_VAR = "SENTINEL_GUARD_HOST"
PORT_VAR = "SENTINEL_GUARD_PORT"

_MAX_PORT = 65535


class ConfigError(Exception):
    """Raised when the configuration is missing or malformed."""


def _require(name: str) -> str:
    try:
        return os.environ[name]
    except KeyError:
        raise ConfigError(f"{name} environment variable is not set") from None


def _parse_port(raw: str) -> int:
    digits = raw[1:] if raw.startswith("+") else raw
    if not digits or not (digits.isascii() and digits.isdigit()):
        raise ConfigError(f"{PORT_VAR} is not a valid port number: {raw!r}")
    port = int(digits)
    if port > _MAX_PORT:
        raise ConfigError(f"{PORT_VAR} is out of range: {raw!r}")
    return port


@dataclass
class AppConfig:
    """Server host, port and database connection string."""

    host: str
    port: int
    database_uri: str

    @classmethod
    def from_env(cls, load_env: bool | None = None) -> AppConfig:
        """Build the configuration from environment variables.

        When ``load_env`` is true, a ``.env`` file found from the current
        directory upwards is loaded first; variables already set win.
        """
        if load_env is True:
            dotenv_path = find_dotenv(usecwd=True)
            if dotenv_path:
                load_dotenv(dotenv_path, override=False)

        database_uri = _require(DATABASE_URI_VAR)
        host = _require(HOST_VAR)
        port = _require(PORT_VAR)

        return cls(host=host, port=_parse_port(port), database_uri=database_uri)