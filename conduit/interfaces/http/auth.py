# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Per-request caller resolution from the ``Authorization`` header."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from functools import wraps
from http import HTTPStatus
from typing import Any

from flask import Flask, abort, current_app, g, request

from conduit.domain.users.entities import ADMIN_ROLE, AUTHENTICATED_ROLE
from conduit.infrastructure.auth.tokens import TokenError, TokenService
from conduit.shared.logging import logger

EXTENSION_KEY = "conduit.authenticator"


@dataclass(slots=True, frozen=True)
class Viewer:
    user_id: int = 0
    is_authenticated: bool = False
    is_admin: bool = False


ANONYMOUS = Viewer()


class Authenticator:
    def __init__(self, *, tokens: TokenService) -> None:
        self._tokens = tokens

    def init_app(self, app: Flask) -> None:
        app.extensions[EXTENSION_KEY] = self

    def resolve(self, authorization: str | None) -> Viewer:
        if not authorization:
            return ANONYMOUS
        try:
            identity = self._tokens.validate(authorization)
        except TokenError as exc:
            logger.debug(f"auth: anonymous request, token rejected ({exc.reason})")
            return ANONYMOUS
        return Viewer(
            user_id=identity.id,
            is_authenticated=identity.has_role(AUTHENTICATED_ROLE),
            is_admin=identity.has_role(ADMIN_ROLE),
        )


def current_viewer() -> Viewer:
    viewer = g.get("viewer")
    if viewer is None:
        authenticator: Authenticator = current_app.extensions[EXTENSION_KEY]
        viewer = authenticator.resolve(request.headers.get("Authorization"))
        g.viewer = viewer
        g.user_id = viewer.user_id or None
    return viewer


def authenticated_only(f: Callable[..., Any]) -> Callable[..., Any]:
    @wraps(f)
    def inner(*args, **kwargs):
        if not current_viewer().is_authenticated:
            logger.warning(f"auth: unauthenticated {request.method} {request.path}")
            abort(HTTPStatus.UNAUTHORIZED)
        return f(*args, **kwargs)

    return inner


def admin_only(f: Callable[..., Any]) -> Callable[..., Any]:
    @wraps(f)
    def inner(*args, **kwargs):
        # Non-admins see the route as missing.
        if not current_viewer().is_admin:
            abort(HTTPStatus.NOT_FOUND)
        return f(*args, **kwargs)

    return inner


__all__ = [
    "ANONYMOUS",
    "Authenticator",
    "Viewer",
    "admin_only",
    "authenticated_only",
    "current_viewer",
]
