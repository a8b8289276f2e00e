# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from conduit.domain.users.entities import Profile
from conduit.domain.users.repositories import UserStore


class FollowUserUseCase:
    def __init__(self, *, users: UserStore) -> None:
        self._users = users

    def execute(self, viewer_id: int, username: str) -> Profile:
        return self._users.follow_user_by_username(viewer_id, username)
