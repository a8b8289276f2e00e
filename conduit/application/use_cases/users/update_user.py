# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import timedelta

from conduit.domain.users.entities import AUTHENTICATED_ROLE, User
from conduit.domain.users.repositories import TokenIssuer, UserStore

from .register_user import DEFAULT_TOKEN_TTL


class UpdateUserUseCase:
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

    def execute(
        self,
        user_id: int,
        *,
        email: str | None = None,
        bio: str | None = None,
        image: str | None = None,
    ) -> tuple[User, str]:
        user = self._users.update_user(user_id, email=email, bio=bio, image=image)
        # The email may have changed, so the old token's claims are stale.
        token = self._tokens.issue(
            self._token_ttl, user.id, user.username, user.email, AUTHENTICATED_ROLE
        )
        return user, token
