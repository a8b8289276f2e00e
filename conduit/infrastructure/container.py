# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property

from conduit.application.use_cases.profiles.follow_user import FollowUserUseCase
from conduit.application.use_cases.profiles.get_profile import GetProfileUseCase
from conduit.application.use_cases.profiles.unfollow_user import UnfollowUserUseCase
from conduit.application.use_cases.users.get_current_user import GetCurrentUserUseCase
from conduit.application.use_cases.users.login_user import LoginUserUseCase
from conduit.application.use_cases.users.register_user import RegisterUserUseCase
from conduit.application.use_cases.users.update_user import UpdateUserUseCase
from conduit.infrastructure.auth.tokens import HmacSigner, TokenService
from conduit.infrastructure.store.memory import MemoryUserStore
from conduit.interfaces.http.auth import Authenticator
from conduit.interfaces.http.controllers.admin_controller import AdminController
from conduit.interfaces.http.controllers.articles_controller import ArticlesController
from conduit.interfaces.http.controllers.profiles_controller import ProfilesController
from conduit.interfaces.http.controllers.users_controller import UsersController
from conduit.shared.config import AppConfig


class Container:
    def __init__(self, config: AppConfig) -> None:
        self._config = config

    @property
    def config(self) -> AppConfig:
        return self._config

    @cached_property
    def token_service(self) -> TokenService:
        return TokenService(
            signer=HmacSigner(self._config.tokens.secret),
            issuer=self._config.tokens.issuer,
        )

    @cached_property
    def user_store(self) -> MemoryUserStore:
        return MemoryUserStore()

    @cached_property
    def authenticator(self) -> Authenticator:
        return Authenticator(tokens=self.token_service)

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_store,
            tokens=self.token_service,
            token_ttl=self._config.tokens.ttl,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_store,
            tokens=self.token_service,
            token_ttl=self._config.tokens.ttl,
        )

    @cached_property
    def get_current_user_use_case(self) -> GetCurrentUserUseCase:
        return GetCurrentUserUseCase(
            users=self.user_store,
            tokens=self.token_service,
            token_ttl=self._config.tokens.ttl,
        )

    @cached_property
    def update_user_use_case(self) -> UpdateUserUseCase:
        return UpdateUserUseCase(
            users=self.user_store,
            tokens=self.token_service,
            token_ttl=self._config.tokens.ttl,
        )

    @cached_property
    def users_controller(self) -> UsersController:
        return UsersController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            current_user_use_case=self.get_current_user_use_case,
            update_use_case=self.update_user_use_case,
            reject_unknown_fields=self._config.api.reject_unknown_fields,
            max_body_bytes=self._config.api.max_body_bytes,
        )

    @cached_property
    def profiles_controller(self) -> ProfilesController:
        return ProfilesController(
            get_profile_use_case=GetProfileUseCase(users=self.user_store),
            follow_use_case=FollowUserUseCase(users=self.user_store),
            unfollow_use_case=UnfollowUserUseCase(users=self.user_store),
        )

    @cached_property
    def articles_controller(self) -> ArticlesController:
        return ArticlesController()

    @cached_property
    def admin_controller(self) -> AdminController:
        return AdminController()
