# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import sys
from datetime import timedelta
from functools import lru_cache

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_DEFAULT_SALT = "pepper"
_DEFAULT_KEY = "curry"

_GROUP_CONFIG = SettingsConfigDict(
    env_file=".env",
    env_file_encoding="utf-8",
    extra="ignore",
    validate_by_name=True,
)


def _parse_bool(value: str | bool) -> bool:
    if isinstance(value, str):
        return value.lower() in ("1", "true", "yes")
    return bool(value)


class ServerConfig(BaseSettings):
    host: str = Field("localhost", alias="CONDUIT_HOST")
    port: int = Field(3000, ge=1, le=65535, alias="CONDUIT_PORT")

    model_config = _GROUP_CONFIG


class TokenConfig(BaseSettings):
    salt: str = Field(_DEFAULT_SALT, alias="CONDUIT_SALT")
    key: str = Field(_DEFAULT_KEY, alias="CONDUIT_KEY")
    ttl_hours: int = Field(24, ge=1, alias="CONDUIT_TOKEN_TTL_HOURS")
    issuer: str = Field("conduit", alias="CONDUIT_TOKEN_ISSUER")

    model_config = _GROUP_CONFIG

    @property
    def secret(self) -> str:
        return self.salt + self.key

    @property
    def ttl(self) -> timedelta:
        return timedelta(hours=self.ttl_hours)


class ApiConfig(BaseSettings):
    reject_unknown_fields: bool = Field(False, alias="CONDUIT_REJECT_UNKNOWN_FIELDS")
    max_body_bytes: int = Field(1_048_576, ge=1, alias="CONDUIT_MAX_BODY_BYTES")

    model_config = _GROUP_CONFIG

    @field_validator("reject_unknown_fields", mode="before")
    @classmethod
    def _parse_reject(cls, value: str | bool) -> bool:
        return _parse_bool(value)


class SecurityConfig(BaseSettings):
    allowed_origins: list[str] = Field(["*"], alias="CONDUIT_ALLOWED_ORIGINS")
    enable_hsts: bool = Field(False, alias="CONDUIT_ENABLE_HSTS")

    model_config = _GROUP_CONFIG

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def _parse_origins(cls, value: str | list[str]) -> list[str]:
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @field_validator("enable_hsts", mode="before")
    @classmethod
    def _parse_hsts(cls, value: str | bool) -> bool:
        return _parse_bool(value)


def _server_config_factory() -> ServerConfig:
    return ServerConfig()  # type: ignore[call-arg]


def _token_config_factory() -> TokenConfig:
    return TokenConfig()  # type: ignore[call-arg]


def _api_config_factory() -> ApiConfig:
    return ApiConfig()  # type: ignore[call-arg]


def _security_config_factory() -> SecurityConfig:
    return SecurityConfig()  # type: ignore[call-arg]


class AppConfig(BaseSettings):
    app_env: str = Field("development", alias="CONDUIT_ENV")
    debug_logging: bool = Field(False, alias="CONDUIT_DEBUG")
    log_level: str | None = Field(None, alias="CONDUIT_LOG_LEVEL")
    log_file: str | None = Field(None, alias="CONDUIT_LOG_FILE")

    server: ServerConfig = Field(default_factory=_server_config_factory)
    tokens: TokenConfig = Field(default_factory=_token_config_factory)
    api: ApiConfig = Field(default_factory=_api_config_factory)
    security: SecurityConfig = Field(default_factory=_security_config_factory)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_by_name=True,
        validate_assignment=True,
    )

    @field_validator("debug_logging", mode="before")
    @classmethod
    def _parse_debug_logging(cls, value: str | bool) -> bool:
        return _parse_bool(value)

    @model_validator(mode="after")
    def _validate_production_settings(self) -> "AppConfig":
        if not self.is_production():
            return self

        if self.tokens.salt == _DEFAULT_SALT or self.tokens.key == _DEFAULT_KEY:
            print(
                "\nCRITICAL SECURITY ERROR: default token salt/key in production!\n"
                "   Set CONDUIT_SALT and CONDUIT_KEY to private values.\n",
                file=sys.stderr,
            )
            sys.exit(1)

        if "*" in self.security.allowed_origins:
            print(
                "\nPRODUCTION SECURITY WARNING: CORS allows wildcard (*) origins\n",
                file=sys.stderr,
            )
        return self

    def is_production(self) -> bool:
        return self.app_env.lower() in ("production", "prod")

    @property
    def log_level_name(self) -> str:
        if self.log_level:
            return self.log_level.upper()
        return "DEBUG" if self.debug_logging else "INFO"


@lru_cache(maxsize=1)
def load_config() -> AppConfig:
    return AppConfig()


__all__ = ["ApiConfig", "AppConfig", "SecurityConfig", "ServerConfig", "TokenConfig", "load_config"]
