# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from conduit.domain.users.entities import Profile
from conduit.domain.users.repositories import UserStore


class UnfollowUserUseCase:
    def __init__(self, *, users: UserStore) -> None:
        self._users = users

    def execute(self, viewer_id: int, username: str) -> Profile:
        return self._users.unfollow_user_by_username(viewer_id, username)
