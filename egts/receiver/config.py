"""Receiver settings loaded from a YAML file."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Union

import yaml

__all__ = ["Settings", "load_settings"]

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
}


@dataclass
class Settings:
    """Listening address, connection timeout, log level and storages."""

    host: str = ""
    port: str = ""
    conn_ttl: int = 0
    log_level: str = ""
    store: dict[str, dict[str, str]] = field(default_factory=dict)

    def empty_conn_ttl(self) -> timedelta:
        """Return how long an idle connection is kept open."""
        return timedelta(seconds=self.conn_ttl)

    def listen_address(self) -> str:
        """Return the address to listen on as ``host:port``."""
        return f"{self.host}:{self.port}"

    def logging_level(self) -> int:
        """Return the :mod:`logging` level named by ``log_level``; INFO by default."""
        return _LEVELS.get(self.log_level, logging.INFO)


def _text(value: Any, name: str) -> str:
    """Return the text of a YAML scalar read into a string field."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        raise ValueError(f"{name} must be a scalar")
    return str(value)


def _ttl(value: Any) -> int:
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError("conn_ttl must be an integer")
    return value


def _storages(value: Any) -> dict[str, dict[str, str]]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError("storage must be a mapping")
    result: dict[str, dict[str, str]] = {}
    for name, params in value.items():
        if params is None:
            params = {}
        if not isinstance(params, dict):
            raise ValueError(f"storage {name} must be a mapping")
        result[_text(name, "storage name")] = {
            _text(key, "storage key"): _text(item, f"storage {name}.{key}")
            for key, item in params.items()
        }
    return result


def load_settings(path: Union[str, "os.PathLike[str]"]) -> Settings:
    """Read settings from the YAML file at *path*."""
    with open(path, encoding="utf-8") as handle:
        document = yaml.safe_load(handle)
    if document is None:
        return Settings()
    if not isinstance(document, dict):
        raise ValueError("configuration must be a mapping")
    return Settings(
        host=_text(document.get("host"), "host"),
        port=_text(document.get("port"), "port"),
        conn_ttl=_ttl(document.get("conn_ttl")),
        log_level=_text(document.get("log_level"), "log_level"),
        store=_storages(document.get("storage")),
    )