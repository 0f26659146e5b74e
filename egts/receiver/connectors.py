"""Storages that export records to MySQL, RabbitMQ and Redis."""

from __future__ import annotations

import re
from typing import Any, Mapping, Optional, Protocol

import pika
import pymysql
import redis

__all__ = ["StorageError", "MysqlConnector", "RabbitmqConnector", "RedisConnector"]

_DEFAULT_REDIS_PORT = 6379


class StorageError(Exception):
    """Raised when a storage cannot be set up or cannot store a record."""


class _Exportable(Protocol):
    def to_bytes(self) -> bytes: ...


def _require_config(config: Optional[Mapping[str, str]]) -> dict[str, str]:
    if config is None:
        raise StorageError("invalid configuration reference")
    return dict(config)


def _payload(msg: Optional[_Exportable]) -> bytes:
    if msg is None:
        raise StorageError("invalid packet reference")
    try:
        return msg.to_bytes()
    except (TypeError, ValueError) as exc:
        raise StorageError(f"packet serialization failed: {exc}") from exc


def _parse_mysql_dsn(dsn: str) -> dict[str, Any]:
    """Turn ``[user[:password]@][tcp(host:port)]/dbname[?params]`` into connect arguments."""
    params: dict[str, Any] = {}
    if not dsn:
        return params
    slash = dsn.rfind("/")
    if slash < 0:
        raise ValueError("missing the slash separating the database name")
    prefix, tail = dsn[:slash], dsn[slash + 1 :]
    database = tail.split("?", 1)[0]
    if database:
        params["database"] = database

    at = prefix.rfind("@")
    if at >= 0:
        user, sep, password = prefix[:at].partition(":")
        if user:
            params["user"] = user
        if sep:
            params["password"] = password
        address = prefix[at + 1 :]
    else:
        address = prefix

    match = re.fullmatch(r"(\w+)\((.*)\)", address)
    if match:
        network, address = match.groups()
        if network == "unix":
            params["unix_socket"] = address
            return params
        if network != "tcp":
            raise ValueError(f"unknown network {network}")
    elif address == "tcp":
        address = ""

    if address:
        if ":" in address:
            host, port = address.rsplit(":", 1)
            params["port"] = int(port)
        else:
            host = address
        if host:
            params["host"] = host
    return params


class MysqlConnector:
    """Inserts each record as JSON into the ``point`` column of a table.

    Settings: ``uri`` (``user:password@tcp(host:port)/dbname``) and ``table``.
    """

    def __init__(self) -> None:
        self._connection: Any = None
        self._config: dict[str, str] = {}

    def init(self, config: Optional[Mapping[str, str]]) -> None:
        """Connect to the database and check that it answers."""
        self._config = _require_config(config)
        try:
            params = _parse_mysql_dsn(self._config.get("uri", ""))
        except ValueError as exc:
            raise StorageError(f"error connecting to mysql: {exc}") from exc
        try:
            self._connection = pymysql.connect(autocommit=True, **params)
            self._connection.ping()
        except (pymysql.MySQLError, OSError) as exc:
            raise StorageError(f"mysql is unavailable: {exc}") from exc

    def save(self, msg: Optional[_Exportable]) -> None:
        """Insert *msg* into the configured table."""
        payload = _payload(msg)
        if self._connection is None:
            raise StorageError("mysql connector is not initialised")
        query = f"INSERT INTO {self._config.get('table', '')} (point) VALUES (%s)"
        try:
            with self._connection.cursor() as cursor:
                cursor.execute(query, (payload,))
        except (pymysql.MySQLError, OSError) as exc:
            raise StorageError(f"cannot insert record into mysql: {exc}") from exc

    def close(self) -> None:
        """Close the database connection."""
        if self._connection is not None:
            self._connection.close()
            self._connection = None


class RabbitmqConnector:
    """Publishes each record to a RabbitMQ exchange.

    Settings: ``host``, ``port``, ``user``, ``password``, ``exchange`` and ``key``.
    """

    def __init__(self) -> None:
        self._connection: Any = None
        self._channel: Any = None
        self._config: dict[str, str] = {}

    def init(self, config: Optional[Mapping[str, str]]) -> None:
        """Open a connection and a channel."""
        self._config = _require_config(config)
        url = "amqp://{}:{}@{}:{}/".format(
            self._config.get("user", ""),
            self._config.get("password", ""),
            self._config.get("host", ""),
            self._config.get("port", ""),
        )
        try:
            self._connection = pika.BlockingConnection(pika.URLParameters(url))
        except (pika.exceptions.AMQPError, ValueError, OSError) as exc:
            raise StorageError(f"cannot connect to RabbitMQ: {exc}") from exc
        try:
            self._channel = self._connection.channel()
        except (pika.exceptions.AMQPError, OSError) as exc:
            raise StorageError(f"cannot open RabbitMQ channel: {exc}") from exc

    def save(self, msg: Optional[_Exportable]) -> None:
        """Publish *msg* to the configured exchange."""
        payload = _payload(msg)
        if self._channel is None:
            raise StorageError("rabbitmq connector is not initialised")
        try:
            self._channel.basic_publish(
                exchange=self._config.get("exchange", ""),
                routing_key=self._config.get("key", ""),
                body=payload,
                properties=pika.BasicProperties(content_type="text/plain"),
            )
        except (pika.exceptions.AMQPError, OSError) as exc:
            raise StorageError(f"cannot publish packet to RabbitMQ: {exc}") from exc

    def close(self) -> None:
        """Close the channel, then the connection."""
        if self._channel is not None:
            self._channel.close()
            self._channel = None
        if self._connection is not None:
            self._connection.close()
            self._connection = None


def _split_address(address: str) -> tuple[str, int]:
    host, sep, port = address.rpartition(":")
    if not sep:
        return address or "localhost", _DEFAULT_REDIS_PORT
    try:
        return host or "localhost", int(port)
    except ValueError as exc:
        raise StorageError(f"invalid redis server address: {address}") from exc


class RedisConnector:
    """Publishes each record to a Redis channel.

    Settings: ``server`` (``host:port``), ``queue``, ``password`` and ``db``.
    """

    def __init__(self) -> None:
        self._client: Any = None
        self._queue = ""

    def init(self, config: Optional[Mapping[str, str]]) -> None:
        """Create the client; ``server``, ``db`` and ``queue`` are required."""
        settings = _require_config(config)
        address = settings.get("server")
        if address is None:
            raise StorageError("redis server address is not set")
        try:
            db = int(settings.get("db", ""))
        except ValueError as exc:
            raise StorageError(f"invalid redis database: {exc}") from exc
        host, port = _split_address(address)
        self._client = redis.Redis(
            host=host,
            port=port,
            password=settings.get("password") or None,
            db=db,
        )
        queue = settings.get("queue")
        if queue is None:
            raise StorageError("invalid redis queue name")
        self._queue = queue

    def save(self, msg: Optional[_Exportable]) -> None:
        """Publish *msg* to the configured channel."""
        payload = _payload(msg)
        if self._client is None:
            raise StorageError("redis connector is not initialised")
        try:
            self._client.publish(self._queue, payload)
        except redis.RedisError as exc:
            raise StorageError(f"cannot send packet to redis: {exc}") from exc

    def close(self) -> None:
        """Close the client."""
        if self._client is not None:
            self._client.close()
            self._client = None