# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import timedelta
from typing import Protocol

from .entities import Profile, User


class UserStore(Protocol):
    def create_user(self, username: str, email: str, password: str) -> User: ...
    def login(self, email: str, password: str) -> User | None: ...
    def get_user(self, user_id: int) -> User | None: ...
    def update_user(
        self,
        user_id: int,
        *,
        email: str | None = None,
        bio: str | None = None,
        image: str | None = None,
    ) -> User: ...
    def get_profile_by_username(self, viewer_id: int, username: str) -> Profile | None: ...
    def follow_user_by_username(self, viewer_id: int, username: str) -> Profile: ...
    def unfollow_user_by_username(self, viewer_id: int, username: str) -> Profile: ...


class TokenIssuer(Protocol):
    def issue(
        self, ttl: timedelta, user_id: int, username: str, email: str, *roles: str
    ) -> str: ...
