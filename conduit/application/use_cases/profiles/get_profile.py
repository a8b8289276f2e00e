# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from conduit.domain.users.entities import Profile
from conduit.domain.users.exceptions import UserNotFoundError
from conduit.domain.users.repositories import UserStore


class GetProfileUseCase:
    def __init__(self, *, users: UserStore) -> None:
        self._users = users

    def execute(self, viewer_id: int, username: str) -> Profile:
        profile = self._users.get_profile_by_username(viewer_id, username)
        if profile is None:
            raise UserNotFoundError(context={"username": username})
        return profile
