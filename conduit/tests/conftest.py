from __future__ import annotations

from collections.abc import Iterator

import pytest
from flask import Flask
from flask.testing import FlaskClient

from conduit.app import create_app
from conduit.infrastructure.auth.tokens import HmacSigner, TokenService
from conduit.infrastructure.container import Container
from conduit.shared.config import AppConfig, TokenConfig

TEST_SALT = "salt+"
TEST_KEY = "pepper"


@pytest.fixture()
def config() -> AppConfig:
    return AppConfig(tokens=TokenConfig(salt=TEST_SALT, key=TEST_KEY))


@pytest.fixture()
def container(config: AppConfig) -> Container:
    return Container(config)


@pytest.fixture()
def app(config: AppConfig, container: Container) -> Flask:
    flask_app = create_app(config, container=container)
    flask_app.config.update(TESTING=True)
    return flask_app


@pytest.fixture()
def client(app: Flask) -> Iterator[FlaskClient]:
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture()
def tokens() -> TokenService:
    return TokenService(signer=HmacSigner(TEST_SALT + TEST_KEY), issuer="conduit")
