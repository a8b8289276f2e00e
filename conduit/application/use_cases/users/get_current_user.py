# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import timedelta

from conduit.domain.users.entities import AUTHENTICATED_ROLE, User
from conduit.domain.users.repositories import TokenIssuer, UserStore

from .register_user import DEFAULT_TOKEN_TTL


class GetCurrentUserUseCase:
    """Load the caller's record and mint a fresh token for it.

    A token may name an id the store does not know; the caller then gets
    ``(None, None)`` and decides how to render an empty user.
    """

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

    def execute(self, user_id: int) -> tuple[User | None, str | None]:
        user = self._users.get_user(user_id)
        if user is None:
            return None, None
        token = self._tokens.issue(
            self._token_ttl, user.id, user.username, user.email, AUTHENTICATED_ROLE
        )
        return user, token
