# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from flask import Flask
from flask_cors import CORS

from conduit.infrastructure.container import Container
from conduit.shared.config import AppConfig, load_config
from conduit.shared.logging import logger, setup_logging
from conduit.shared.middleware.error_handler import configure_error_handling
from conduit.shared.middleware.request_logger import configure_request_logging
from conduit.shared.middleware.security_headers import configure_security_headers


def create_app(config: AppConfig | None = None, *, container: Container | None = None) -> Flask:
    config = config or load_config()
    container = container or Container(config)
    setup_logging(config.log_level_name, config.log_file)

    app = Flask(__name__)
    app.extensions["conduit.container"] = container
    configure_error_handling(app, debug_mode=config.debug_logging)
    configure_request_logging(app, debug_mode=config.debug_logging)
    configure_security_headers(app, enable_hsts=config.security.enable_hsts)

    CORS(app, resources={r"/api/*": {"origins": config.security.allowed_origins}})

    container.authenticator.init_app(app)
    app.register_blueprint(container.users_controller.as_blueprint())
    app.register_blueprint(container.profiles_controller.as_blueprint())
    app.register_blueprint(container.articles_controller.as_blueprint())
    app.register_blueprint(container.admin_controller.as_blueprint())

    logger.info(f"Flask app initialized env={config.app_env}")
    return app
