from __future__ import annotations

from pathlib import Path

from flask import Flask
from flask.testing import FlaskClient
from sqlalchemy import func, select

from authbox.app import create_app
from authbox.infrastructure.container import Container
from authbox.infrastructure.db import Base
from authbox.infrastructure.db.models import User
from authbox.shared.config import AppConfig
from authbox.shared.logging import logger


def _user_rows(container: Container, identifier: str) -> int:
    with container.session_factory() as session:
        return session.scalar(
            select(func.count()).select_from(User).where(User.identifier == identifier)
        )


def test_register_login_me_logout_flow(client: FlaskClient, container: Container) -> None:
    register = client.post("/register", json={"identifier": "a@b.com", "password": "secret1"})
    assert register.status_code == 201
    assert register.get_json() == {"message": "User created", "id": 1}

    again = client.post("/register", json={"identifier": "a@b.com", "password": "secret1"})
    assert again.status_code == 409
    assert _user_rows(container, "a@b.com") == 1

    wrong = client.post("/login", json={"identifier": "a@b.com", "password": "wrong"})
    assert wrong.status_code == 401
    assert client.get_cookie("sid") is None

    login = client.post("/login", json={"identifier": "a@b.com", "password": "secret1"})
    assert login.status_code == 200
    assert login.get_json() == {"message": "Authenticated"}
    assert client.get_cookie("sid") is not None

    me = client.get("/me")
    assert me.status_code == 200
    assert me.get_json() == {"id": 1, "identifier": "a@b.com"}

    logout = client.post("/logout")
    assert logout.status_code == 200
    assert client.get_cookie("sid") is None

    after = client.get("/me")
    assert after.status_code == 401
    assert after.get_json()["error"] == "unauthenticated"


def test_login_is_case_insensitive_for_emails(client: FlaskClient) -> None:
    client.post("/register", json={"email": " Mixed@Case.io ", "password": "secret1"})

    login = client.post("/login", json={"email": "mixed@case.IO", "password": "secret1"})

    assert login.status_code == 200
    assert client.get("/me").get_json()["identifier"] == "mixed@case.io"


def test_unknown_user_and_wrong_password_look_identical(client: FlaskClient) -> None:
    client.post("/register", json={"email": "a@b.com", "password": "secret1"})

    wrong = client.post("/login", json={"email": "a@b.com", "password": "nope-nope"})
    unknown = client.post("/login", json={"email": "ghost@b.com", "password": "secret1"})

    assert wrong.status_code == unknown.status_code == 401
    assert wrong.get_json() == unknown.get_json()


def test_register_validation_errors(client: FlaskClient) -> None:
    missing = client.post("/register", json={"email": "a@b.com"})
    invalid = client.post("/register", json={"email": "nope", "password": "secret1"})
    weak = client.post("/register", json={"email": "a@b.com", "password": "123"})
    no_body = client.post("/register")

    assert (missing.status_code, missing.get_json()["error"]) == (400, "missing_fields")
    assert (invalid.status_code, invalid.get_json()["error"]) == (400, "invalid_identifier")
    assert (weak.status_code, weak.get_json()["error"]) == (400, "weak_password")
    assert (no_body.status_code, no_body.get_json()["error"]) == (400, "missing_fields")


def test_login_missing_fields(client: FlaskClient) -> None:
    response = client.post("/login", json={"email": "a@b.com"})

    assert response.status_code == 400
    assert response.get_json()["error"] == "missing_fields"


def test_tampered_cookie_is_rejected(client: FlaskClient) -> None:
    client.post("/register", json={"email": "a@b.com", "password": "secret1"})
    client.post("/login", json={"email": "a@b.com", "password": "secret1"})
    header, payload, signature = client.get_cookie("sid").value.split(".")
    forged = ("A" if signature[0] != "A" else "B") + signature[1:]

    client.set_cookie("sid", f"{header}.{payload}.{forged}")

    assert client.get("/me").status_code == 401


def test_users_listing_excludes_hashes(client: FlaskClient) -> None:
    client.post("/register", json={"email": "a@b.com", "password": "secret1"})
    client.post("/register", json={"email": "c@d.com", "password": "secret2"})

    users = client.get("/users").get_json()

    assert [u["identifier"] for u in users] == ["c@d.com", "a@b.com"]
    assert all(set(u) == {"id", "identifier", "createdAt"} for u in users)


def test_users_listing_can_be_disabled(app_config: AppConfig, container: Container) -> None:
    config = app_config.model_copy(update={"expose_user_list": False})
    app = create_app(config, container=container)

    with app.test_client() as client:
        assert client.get("/users").status_code == 404


def test_store_failure_is_generic_500(app: Flask, client: FlaskClient, container: Container) -> None:
    Base.metadata.drop_all(bind=container.engine)

    response = client.post("/register", json={"email": "a@b.com", "password": "secret1"})

    assert response.status_code == 500
    assert response.get_json() == {"error": "internal_error", "message": "Internal error"}


def _read_log(log_file: Path) -> str:
    logger.complete()
    return log_file.read_text(encoding="utf-8")


def test_factory_installs_redacting_sinks(app: Flask, log_file: Path) -> None:
    logger.info("password=hunter22 for bob@example.com")

    text = _read_log(log_file)

    assert "hunter22" not in text
    assert "bob@example.com" not in text
    assert "***@example.com" in text


def test_store_failure_trace_hides_bound_values(
    client: FlaskClient, container: Container, log_file: Path
) -> None:
    Base.metadata.drop_all(bind=container.engine)

    response = client.post("/register", json={"email": "victim@corp.com", "password": "secret1"})

    text = _read_log(log_file)
    assert response.status_code == 500
    assert "auth.register: credential store failure" in text
    assert "$2b$" not in text
    assert "victim@corp.com" not in text


def test_request_id_is_echoed(client: FlaskClient) -> None:
    given = client.get("/health", headers={"X-Request-ID": "req-42"})
    generated = client.get("/health")

    assert given.headers["X-Request-ID"] == "req-42"
    assert generated.headers["X-Request-ID"]


def test_health_reports_database(client: FlaskClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.get_json() == {"ok": True, "database": "ok"}


def test_index_page_is_served(client: FlaskClient) -> None:
    response = client.get("/")

    assert response.status_code == 200
    assert b"<title>authbox</title>" in response.data
