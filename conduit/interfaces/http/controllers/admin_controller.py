# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, abort

from conduit.interfaces.http.auth import admin_only, current_viewer
from conduit.shared.logging import logger


class AdminController:
    @admin_only
    def index(self):
        logger.info(f"admin: accessed by user_id={current_viewer().user_id}")
        abort(HTTPStatus.NOT_IMPLEMENTED)

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("admin", __name__, url_prefix="/api")
        bp.add_url_rule("/admin", view_func=self.index, methods=["GET"])
        return bp
