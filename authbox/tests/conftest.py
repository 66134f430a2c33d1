from __future__ import annotations

from collections.abc import Iterator
from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient

from authbox.app import create_app
from authbox.infrastructure.container import Container
from authbox.shared.config import AppConfig, DatabaseConfig, SecurityConfig


class MutableClock:
    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now = self.now + delta


@pytest.fixture(autouse=True)
def log_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    path = tmp_path / "app.log"
    monkeypatch.setenv("LOG_FILE", str(path))
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    return path


@pytest.fixture()
def clock() -> MutableClock:
    return MutableClock(datetime(2030, 1, 1, 12, 0, tzinfo=UTC))


@pytest.fixture()
def app_config() -> AppConfig:
    return AppConfig(
        APP_ENV="test",
        JWT_SECRET="test-secret-key",
        LOGIN_REDIRECT_URL=None,
        EXPOSE_USER_LIST=True,
        database=DatabaseConfig(DATABASE_URL="sqlite://"),
        security=SecurityConfig(BCRYPT_ROUNDS=4, COOKIE_SECURE=False),
    )


@pytest.fixture()
def container(app_config: AppConfig) -> Iterator[Container]:
    container = Container(app_config)
    yield container
    container.engine.dispose()


@pytest.fixture()
def app(app_config: AppConfig, container: Container) -> Flask:
    return create_app(app_config, container=container)


@pytest.fixture()
def client(app: Flask) -> Iterator[FlaskClient]:
    with app.test_client() as client:
        yield client
