# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass, field

AUTHENTICATED_ROLE = "authenticated"
ADMIN_ROLE = "admin"


@dataclass(slots=True, frozen=True)
class User:
    """A registered account as held by the user store.

    Instances are immutable; the store replaces a record wholesale on every
    change, so a value handed to a caller never changes underneath it.
    """

    id: int
    username: str
    email: str
    password: str = field(repr=False)
    created_at: str
    updated_at: str
    bio: str | None = None
    image: str | None = None
    following: frozenset[int] = frozenset()

    def is_following(self, user_id: int) -> bool:
        return user_id in self.following


@dataclass(slots=True, frozen=True)
class Profile:
    username: str
    bio: str | None
    image: str | None
    following: bool

    @classmethod
    def of(cls, user: User, *, viewer: User | None) -> Profile:
        following = viewer is not None and viewer.is_following(user.id)
        return cls(username=user.username, bio=user.bio, image=user.image, following=following)
