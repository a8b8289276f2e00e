# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import timedelta

from conduit.domain.users.entities import AUTHENTICATED_ROLE, User
from conduit.domain.users.repositories import TokenIssuer, UserStore

DEFAULT_TOKEN_TTL = timedelta(hours=24)


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserStore,
        tokens: TokenIssuer,
        token_ttl: timedelta = DEFAULT_TOKEN_TTL,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._token_ttl = token_ttl

    def execute(self, username: str, email: str, password: str) -> tuple[User, str]:
        user = self._users.create_user(username, email, password)
        token = self._tokens.issue(
            self._token_ttl, user.id, user.username, user.email, AUTHENTICATED_ROLE
        )
        return user, token
