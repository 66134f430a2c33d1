# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask
from flask_cors import CORS

from authbox.infrastructure.container import Container
from authbox.infrastructure.db import init_db
from authbox.interfaces.http.routes import build_blueprints
from authbox.shared.config import AppConfig, load_config
from authbox.shared.logging import logger, setup_logging
from authbox.shared.middleware.error_handler import configure_error_handling
from authbox.shared.middleware.request_logger import configure_request_logging


def create_app(config: AppConfig | None = None, *, container: Container | None = None) -> Flask:
    config = config or load_config()
    setup_logging(debug_mode=config.debug_logging)
    container = container or Container(config)

    init_db(container.engine)

    app = Flask(__name__, static_folder=str(config.static_dir), static_url_path="")
    configure_error_handling(app, debug_mode=config.debug_logging)
    configure_request_logging(app, debug_mode=config.debug_logging)

    cors_kwargs: dict[str, object] = {"origins": config.security.allowed_origins}
    if any(o != "*" for o in config.security.allowed_origins):
        cors_kwargs["supports_credentials"] = True
    CORS(app, **cors_kwargs)

    for blueprint in build_blueprints(container):
        app.register_blueprint(blueprint)

    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        return resp

    logger.info(
        f"Flask app initialized (env={config.app_env}, identifier={config.identifier_kind}, "
        f"user_list={'on' if config.user_list_enabled() else 'off'})"
    )
    return app


def main() -> None:
    config = load_config()
    app = create_app(config)
    logger.info(f"Server listening on http://{config.host}:{config.port}")
    app.run(host=config.host, port=config.port, debug=False)


if __name__ == "__main__":
    main()
