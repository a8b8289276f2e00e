# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Bearer tokens: minting, parsing and validation.

A token is three unpadded base64url sections joined by dots:
``header.payload.signature``. The header and payload are JSON objects, the
signature covers ``header.payload`` and is produced by a pluggable
:class:`Signer` (HMAC-SHA256 keyed by the configured secret by default).

This is a demonstration scheme, not a hardened JWT implementation.
"""

from __future__ import annotations

import base64
import binascii
import hashlib
import hmac
import time
from collections.abc import Callable
from dataclasses import dataclass
from datetime import timedelta
from http import HTTPStatus
from typing import Protocol

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from conduit.shared.errors.base import DomainError
from conduit.shared.logging import logger

TOKEN_TYPE = "JWT"
BEARER_SCHEME = "Bearer"


class TokenError(DomainError):
    code = "token_error"
    status = HTTPStatus.UNAUTHORIZED

    def __init__(self, reason: str) -> None:
        super().__init__(context={"reason": reason})
        self.reason = reason


class TokenUnauthorizedError(TokenError):
    code = "unauthorized"
    status = HTTPStatus.UNAUTHORIZED


class TokenBadRequestError(TokenError):
    code = "bad_request"
    status = HTTPStatus.BAD_REQUEST


class Signer(Protocol):
    @property
    def algorithm(self) -> str: ...
    def sign(self, data: bytes) -> bytes: ...
    def verify(self, data: bytes, signature: bytes) -> bool: ...


class HmacSigner:
    """Keyed-hash signer; HS256 unless another digest is supplied."""

    def __init__(
        self,
        secret: str | bytes,
        *,
        algorithm: str = "HS256",
        digest: Callable[..., object] = hashlib.sha256,
    ) -> None:
        self._secret = secret.encode() if isinstance(secret, str) else secret
        self._algorithm = algorithm
        self._digest = digest

    @property
    def algorithm(self) -> str:
        return self._algorithm

    def sign(self, data: bytes) -> bytes:
        return hmac.new(self._secret, data, self._digest).digest()

    def verify(self, data: bytes, signature: bytes) -> bool:
        return hmac.compare_digest(self.sign(data), signature)


class TokenHeader(BaseModel):
    model_config = ConfigDict(strict=True, frozen=True)

    alg: str = ""
    typ: str = ""
    cty: str | None = None
    kid: str | None = None


class PrivateClaims(BaseModel):
    model_config = ConfigDict(strict=True, frozen=True)

    alg: str = ""
    typ: str = ""
    id: int = 0
    username: str = ""
    email: str = ""
    roles: list[str] = Field(default_factory=list)


class TokenPayload(BaseModel):
    model_config = ConfigDict(strict=True, frozen=True)

    iss: str | None = None
    sub: str | None = None
    aud: list[str] | None = None
    exp: int = 0
    nbf: int | None = None
    iat: int = 0
    jti: str | None = None
    private: PrivateClaims = Field(default_factory=PrivateClaims)


@dataclass(slots=True, frozen=True)
class Identity:
    id: int
    username: str
    email: str
    roles: tuple[str, ...]

    def has_role(self, role: str) -> bool:
        return role in self.roles


def _b64encode(raw: bytes) -> str:
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii")


def _b64decode(section: str) -> bytes:
    padded = section + "=" * (-len(section) % 4)
    return base64.urlsafe_b64decode(padded.encode("ascii"))


@dataclass(slots=True, frozen=True)
class Token:
    header: TokenHeader
    payload: TokenPayload
    signature: bytes = b""

    @property
    def signing_input(self) -> str:
        header = _b64encode(self.header.model_dump_json(exclude_none=True).encode())
        payload = _b64encode(self.payload.model_dump_json(exclude_none=True).encode())
        return f"{header}.{payload}"

    def encode(self) -> str:
        return f"{self.signing_input}.{_b64encode(self.signature)}"

    @classmethod
    def decode(cls, raw: str) -> tuple[Token, bytes]:
        """Parse ``raw`` and return the token with the exact bytes it signed."""
        sections = raw.split(".")
        if len(sections) != 3 or not all(sections):
            raise TokenBadRequestError("token must have three non-empty sections")
        header_section, payload_section, signature_section = sections

        try:
            header = TokenHeader.model_validate_json(_b64decode(header_section))
        except (binascii.Error, UnicodeError, ValueError, PydanticValidationError) as exc:
            raise TokenUnauthorizedError("malformed header") from exc
        if not header.alg or header.alg.lower() == "none":
            raise TokenUnauthorizedError("missing signing algorithm")

        try:
            payload = TokenPayload.model_validate_json(_b64decode(payload_section))
        except (binascii.Error, UnicodeError, ValueError, PydanticValidationError) as exc:
            raise TokenUnauthorizedError("malformed payload") from exc
        if header.typ != payload.private.typ:
            raise TokenUnauthorizedError("token type mismatch")
        if header.alg != payload.private.alg:
            raise TokenUnauthorizedError("signing algorithm mismatch")

        try:
            signature = _b64decode(signature_section)
        except (binascii.Error, UnicodeError, ValueError) as exc:
            raise TokenUnauthorizedError("malformed signature") from exc

        token = cls(header=header, payload=payload, signature=signature)
        return token, f"{header_section}.{payload_section}".encode("ascii")


def bearer_token(authorization: str | None) -> str:
    """Extract the raw token from an ``Authorization`` header value."""
    if not authorization:
        raise TokenUnauthorizedError("missing authorization header")
    parts = authorization.split(" ", 1)
    if len(parts) != 2:
        raise TokenUnauthorizedError("malformed authorization header")
    scheme, token = parts
    if scheme != BEARER_SCHEME:
        raise TokenUnauthorizedError("authorization scheme is not Bearer")
    return token.strip()


class TokenService:
    """Mints and validates bearer tokens; holds no state beyond its signer."""

    def __init__(
        self,
        *,
        signer: Signer,
        issuer: str | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._signer = signer
        self._issuer = issuer
        self._clock = clock

    def issue(
        self,
        ttl: timedelta,
        user_id: int,
        username: str,
        email: str,
        *roles: str,
        not_before: int | None = None,
    ) -> str:
        issued_at = int(self._clock())
        algorithm = self._signer.algorithm
        payload = TokenPayload(
            iss=self._issuer,
            sub=str(user_id) if user_id else None,
            iat=issued_at,
            exp=issued_at + int(ttl.total_seconds()),
            nbf=not_before,
            private=PrivateClaims(
                alg=algorithm,
                typ=TOKEN_TYPE,
                id=user_id,
                username=username,
                email=email,
                roles=list(roles),
            ),
        )
        unsigned = Token(header=TokenHeader(alg=algorithm, typ=TOKEN_TYPE), payload=payload)
        signature = self._signer.sign(unsigned.signing_input.encode("ascii"))
        return Token(header=unsigned.header, payload=payload, signature=signature).encode()

    def parse(self, raw: str) -> Token:
        token, signed = Token.decode(raw)
        if token.header.alg != self._signer.algorithm:
            raise TokenUnauthorizedError(f"unexpected signing algorithm {token.header.alg!r}")
        if not self._signer.verify(signed, token.signature):
            raise TokenUnauthorizedError("signature mismatch")
        return token

    def validate_token(self, raw: str) -> Identity:
        token = self.parse(raw)
        self._check_validity_window(token.payload)
        private = token.payload.private
        return Identity(
            id=private.id,
            username=private.username,
            email=private.email,
            roles=tuple(private.roles),
        )

    def validate(self, authorization: str | None) -> Identity:
        try:
            return self.validate_token(bearer_token(authorization))
        except TokenError as exc:
            logger.debug(f"tokens.validate: rejected kind={exc.code} reason={exc.reason}")
            raise

    def _check_validity_window(self, payload: TokenPayload) -> None:
        if payload.iat == 0 or payload.exp == 0:
            raise TokenUnauthorizedError("missing issued-at or expiry")
        now = self._clock()
        if not now > payload.iat:
            raise TokenUnauthorizedError("issued in the future")
        if payload.nbf is not None and now < payload.nbf:
            raise TokenUnauthorizedError("not yet valid")
        if not payload.exp > now:
            raise TokenUnauthorizedError("expired")


__all__ = [
    "BEARER_SCHEME",
    "HmacSigner",
    "Identity",
    "PrivateClaims",
    "Signer",
    "Token",
    "TokenBadRequestError",
    "TokenError",
    "TokenHeader",
    "TokenPayload",
    "TokenService",
    "TokenUnauthorizedError",
    "bearer_token",
]
