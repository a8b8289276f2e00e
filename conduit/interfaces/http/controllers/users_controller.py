# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify

from conduit.application.use_cases.users.get_current_user import GetCurrentUserUseCase
from conduit.application.use_cases.users.login_user import LoginUserUseCase
from conduit.application.use_cases.users.register_user import RegisterUserUseCase
from conduit.application.use_cases.users.update_user import UpdateUserUseCase
from conduit.interfaces.http.auth import authenticated_only, current_viewer
from conduit.interfaces.http.dto.users import (
    LoginUserRequest,
    NewUserRequest,
    UpdateUserRequest,
    UserDTO,
)
from conduit.interfaces.http.jsonapi import MAX_BODY_BYTES, decode_json_body
from conduit.shared.logging import logger


class UsersController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        current_user_use_case: GetCurrentUserUseCase,
        update_use_case: UpdateUserUseCase,
        reject_unknown_fields: bool = False,
        max_body_bytes: int = MAX_BODY_BYTES,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._current_user_use_case = current_user_use_case
        self._update_use_case = update_use_case
        self._reject_unknown_fields = reject_unknown_fields
        self._max_body_bytes = max_body_bytes

    def register(self) -> tuple[Response, int]:
        dto = decode_json_body(
            NewUserRequest,
            reject_unknown_fields=self._reject_unknown_fields,
            max_bytes=self._max_body_bytes,
        )
        user, token = self._register_use_case.execute(
            dto.user.username, dto.user.email, dto.user.password
        )
        logger.info(f"users.register: ok user_id={user.id}")
        return jsonify(UserDTO.from_user(user, token).to_response()), 200

    def login(self) -> tuple[Response, int]:
        dto = decode_json_body(
            LoginUserRequest,
            reject_unknown_fields=self._reject_unknown_fields,
            max_bytes=self._max_body_bytes,
        )
        user, token = self._login_use_case.execute(dto.user.email, dto.user.password)
        logger.info(f"users.login: ok user_id={user.id}")
        return jsonify(UserDTO.from_user(user, token).to_response()), 200

    @authenticated_only
    def current_user(self) -> tuple[Response, int]:
        viewer = current_viewer()
        user, token = self._current_user_use_case.execute(viewer.user_id)
        if user is None:
            logger.warning(f"users.current: token names unknown user_id={viewer.user_id}")
            return jsonify(UserDTO().to_response()), 200
        return jsonify(UserDTO.from_user(user, token).to_response()), 200

    @authenticated_only
    def update_user(self) -> tuple[Response, int]:
        dto = decode_json_body(
            UpdateUserRequest,
            reject_unknown_fields=self._reject_unknown_fields,
            max_bytes=self._max_body_bytes,
        )
        viewer = current_viewer()
        user, token = self._update_use_case.execute(
            viewer.user_id, email=dto.user.email, bio=dto.user.bio, image=dto.user.image
        )
        logger.info(f"users.update: ok user_id={user.id}")
        return jsonify(UserDTO.from_user(user, token).to_response()), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("users", __name__, url_prefix="/api")
        bp.add_url_rule("/users", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/users/login", view_func=self.login, methods=["POST"])
        bp.add_url_rule("/user", view_func=self.current_user, methods=["GET"])
        bp.add_url_rule("/user", view_func=self.update_user, methods=["PUT"])
        return bp
