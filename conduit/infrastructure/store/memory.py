# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Thread-safe in-memory user store.

All state lives behind one lock: three indices (by id, username and email)
over the same immutable :class:`User` records, plus the id sequence. Every
public method is a single critical section, and every mutation replaces a
record and its index entries together, so readers never see a half-applied
change.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable
from dataclasses import replace
from threading import Lock

from conduit.domain.exceptions import InvariantViolation
from conduit.domain.users.entities import Profile, User
from conduit.domain.users.exceptions import NotAuthorizedError, UserNotFoundError
from conduit.shared.errors.base import FieldValidationError
from conduit.shared.logging import logger
from conduit.shared.utils.timestamps import utc_now

BLANK = "can't be blank"
TAKEN = "has already been taken"
NO_SUCH_EMAIL = "no such email"
PADDED_EMAIL = "can't have leading or trailing spaces"
EMPTY_EMAIL = "must not be empty if provided"


class MemoryUserStore:
    def __init__(self, *, clock: Callable[[], str] = utc_now) -> None:
        self._lock = Lock()
        self._clock = clock
        self._seq = 0
        self._by_id: dict[int, User] = {}
        self._by_username: dict[str, User] = {}
        self._by_email: dict[str, User] = {}

    def create_user(self, username: str, email: str, password: str) -> User:
        username, email, password = username.strip(), email.strip(), password.strip()
        with self._lock:
            errors: defaultdict[str, list[str]] = defaultdict(list)
            for field, value in (("username", username), ("email", email), ("password", password)):
                if not value:
                    errors[field].append(BLANK)
            if username in self._by_username:
                errors["username"].append(TAKEN)
            if email in self._by_email:
                errors["email"].append(TAKEN)
            if errors:
                raise FieldValidationError(errors)

            self._seq += 1
            now = self._clock()
            user = User(
                id=self._seq,
                username=username,
                email=email,
                password=password,
                created_at=now,
                updated_at=now,
            )
            self._index(user)
        logger.info(f"store.create_user: ok user_id={user.id}")
        return user

    def login(self, email: str, password: str) -> User | None:
        with self._lock:
            user = self._by_email.get(email)
            # Plaintext comparison; passwords are not hashed in this store.
            if user is None or user.password != password:
                return None
            return user

    def get_user(self, user_id: int) -> User | None:
        if user_id == 0:
            return None
        with self._lock:
            return self._by_id.get(user_id)

    def update_user(
        self,
        user_id: int,
        *,
        email: str | None = None,
        bio: str | None = None,
        image: str | None = None,
    ) -> User:
        with self._lock:
            current = self._by_id.get(user_id) if user_id else None
            if current is None:
                raise FieldValidationError({"email": [NO_SUCH_EMAIL]})

            changes: dict[str, str | None] = {}
            if email is not None:
                trimmed = email.strip()
                errors: list[str] = []
                if trimmed != email:
                    errors.append(PADDED_EMAIL)
                if not trimmed:
                    errors.append(EMPTY_EMAIL)
                elif trimmed != current.email and trimmed in self._by_email:
                    errors.append(TAKEN)
                if errors:
                    raise FieldValidationError({"email": errors})
                if trimmed != current.email:
                    changes["email"] = trimmed
            for field, value in (("bio", bio), ("image", image)):
                if value is None:
                    continue
                cleared = value.strip() or None
                if cleared != getattr(current, field):
                    changes[field] = cleared

            if not changes:
                return current

            updated = replace(current, updated_at=self._clock(), **changes)
            self._swap(current, updated)
        logger.info(f"store.update_user: ok user_id={user_id} fields={sorted(changes)}")
        return updated

    def get_profile_by_username(self, viewer_id: int, username: str) -> Profile | None:
        with self._lock:
            target = self._by_username.get(username)
            if target is None:
                return None
            viewer = self._by_id.get(viewer_id) if viewer_id else None
            return Profile.of(target, viewer=viewer)

    def follow_user_by_username(self, viewer_id: int, username: str) -> Profile:
        with self._lock:
            viewer, target = self._follow_pair(viewer_id, username)
            if not viewer.is_following(target.id):
                self._swap(viewer, replace(viewer, following=viewer.following | {target.id}))
        logger.info(f"store.follow: ok viewer_id={viewer_id} target_id={target.id}")
        return Profile(username=target.username, bio=target.bio, image=target.image, following=True)

    def unfollow_user_by_username(self, viewer_id: int, username: str) -> Profile:
        with self._lock:
            viewer, target = self._follow_pair(viewer_id, username)
            if viewer.is_following(target.id):
                self._swap(viewer, replace(viewer, following=viewer.following - {target.id}))
        logger.info(f"store.unfollow: ok viewer_id={viewer_id} target_id={target.id}")
        return Profile(username=target.username, bio=target.bio, image=target.image, following=False)

    def _follow_pair(self, viewer_id: int, username: str) -> tuple[User, User]:
        viewer = self._by_id.get(viewer_id) if viewer_id else None
        if viewer is None or viewer.username == username:
            raise NotAuthorizedError()
        target = self._by_username.get(username)
        if target is None:
            raise UserNotFoundError()
        return viewer, target

    def _index(self, user: User) -> None:
        self._by_id[user.id] = user
        self._by_username[user.username] = user
        self._by_email[user.email] = user
        self._check(user)

    def _swap(self, old: User, new: User) -> None:
        if old.id != new.id or old.username != new.username:
            raise InvariantViolation("id and username are immutable", key=old.id)
        del self._by_id[old.id]
        del self._by_username[old.username]
        del self._by_email[old.email]
        self._index(new)

    def _check(self, user: User) -> None:
        if not (
            self._by_id.get(user.id) is user
            and self._by_username.get(user.username) is user
            and self._by_email.get(user.email) is user
        ):
            raise InvariantViolation("user indices disagree", key=user.id)
        if not len(self._by_id) == len(self._by_username) == len(self._by_email):
            raise InvariantViolation("user index sizes differ")


__all__ = ["MemoryUserStore"]
