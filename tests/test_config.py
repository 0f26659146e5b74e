import logging
from datetime import timedelta

import pytest

from egts.receiver.config import Settings, load_settings

CONFIG = """host: "127.0.0.1"
port: "5020"
conn_ttl: 10
log_level: "DEBUG"

storage:
  rabbitmq:
    host: "localhost"
    port: "5672"
    user: "guest"
    password: "password"
    exchange: "receiver"
  postgresql:
    host: "localhost"
    port: "5432"
    user: "postgres"
    password: "password"
    database: "receiver"
    table: "points"
    sslmode: "disable"
"""


@pytest.fixture
def config_path(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(CONFIG, encoding="utf-8")
    return path


def test_config_load(config_path):
    assert load_settings(config_path) == Settings(
        host="127.0.0.1",
        port="5020",
        conn_ttl=10,
        log_level="DEBUG",
        store={
            "postgresql": {
                "host": "localhost",
                "port": "5432",
                "user": "postgres",
                "password": "password",
                "database": "receiver",
                "table": "points",
                "sslmode": "disable",
            },
            "rabbitmq": {
                "exchange": "receiver",
                "host": "localhost",
                "password": "password",
                "port": "5672",
                "user": "guest",
            },
        },
    )


def test_derived_values(config_path):
    settings = load_settings(config_path)
    assert settings.listen_address() == "127.0.0.1:5020"
    assert settings.empty_conn_ttl() == timedelta(seconds=10)
    assert settings.logging_level() == logging.DEBUG


@pytest.mark.parametrize(
    "name, level",
    [
        ("DEBUG", logging.DEBUG),
        ("INFO", logging.INFO),
        ("WARN", logging.WARNING),
        ("ERROR", logging.ERROR),
        ("", logging.INFO),
        ("TRACE", logging.INFO),
    ],
)
def test_logging_level(name, level):
    assert Settings(log_level=name).logging_level() == level


def test_numeric_scalars_become_text(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("port: 5020\nstorage:\n  redis:\n    db: 0\n", encoding="utf-8")
    settings = load_settings(path)
    assert settings.port == "5020"
    assert settings.store == {"redis": {"db": "0"}}


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("", encoding="utf-8")
    assert load_settings(path) == Settings()


def test_invalid_ttl_is_rejected(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text('conn_ttl: "soon"\n', encoding="utf-8")
    with pytest.raises(ValueError):
        load_settings(path)


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_settings(tmp_path / "absent.yaml")