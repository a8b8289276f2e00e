# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify

from conduit.application.use_cases.profiles.follow_user import FollowUserUseCase
from conduit.application.use_cases.profiles.get_profile import GetProfileUseCase
from conduit.application.use_cases.profiles.unfollow_user import UnfollowUserUseCase
from conduit.interfaces.http.auth import authenticated_only, current_viewer
from conduit.interfaces.http.dto.users import ProfileDTO
from conduit.shared.logging import logger


class ProfilesController:
    def __init__(
        self,
        *,
        get_profile_use_case: GetProfileUseCase,
        follow_use_case: FollowUserUseCase,
        unfollow_use_case: UnfollowUserUseCase,
    ) -> None:
        self._get_profile_use_case = get_profile_use_case
        self._follow_use_case = follow_use_case
        self._unfollow_use_case = unfollow_use_case

    def get_profile(self, username: str) -> tuple[Response, int]:
        profile = self._get_profile_use_case.execute(current_viewer().user_id, username)
        return jsonify(ProfileDTO.from_profile(profile).to_response()), 200

    @authenticated_only
    def follow(self, username: str) -> tuple[Response, int]:
        viewer = current_viewer()
        profile = self._follow_use_case.execute(viewer.user_id, username)
        logger.info(f"profiles.follow: ok user_id={viewer.user_id} target={username}")
        return jsonify(ProfileDTO.from_profile(profile).to_response()), 200

    @authenticated_only
    def unfollow(self, username: str) -> tuple[Response, int]:
        viewer = current_viewer()
        profile = self._unfollow_use_case.execute(viewer.user_id, username)
        logger.info(f"profiles.unfollow: ok user_id={viewer.user_id} target={username}")
        return jsonify(ProfileDTO.from_profile(profile).to_response()), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("profiles", __name__, url_prefix="/api/profiles")
        bp.add_url_rule("/<username>", view_func=self.get_profile, methods=["GET"])
        bp.add_url_rule(
            "/<username>/follow", view_func=self.follow, methods=["POST"], endpoint="follow"
        )
        bp.add_url_rule(
            "/<username>/follow", view_func=self.unfollow, methods=["DELETE"], endpoint="unfollow"
        )
        return bp
