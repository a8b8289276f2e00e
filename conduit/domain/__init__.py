# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .exceptions import InvariantViolation, InvariantViolationError
from .users.entities import Profile, User

__all__ = [
    "InvariantViolation",
    "InvariantViolationError",
    "Profile",
    "User",
]
