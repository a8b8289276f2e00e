# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .use_cases.profiles.follow_user import FollowUserUseCase
from .use_cases.profiles.get_profile import GetProfileUseCase
from .use_cases.profiles.unfollow_user import UnfollowUserUseCase
from .use_cases.users.get_current_user import GetCurrentUserUseCase
from .use_cases.users.login_user import LoginUserUseCase
from .use_cases.users.register_user import RegisterUserUseCase
from .use_cases.users.update_user import UpdateUserUseCase

__all__ = [
    "FollowUserUseCase",
    "GetCurrentUserUseCase",
    "GetProfileUseCase",
    "LoginUserUseCase",
    "RegisterUserUseCase",
    "UnfollowUserUseCase",
    "UpdateUserUseCase",
]
