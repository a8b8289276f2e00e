from __future__ import annotations

import base64
import json
from datetime import timedelta

import pytest

from conduit.infrastructure.auth.tokens import (
    HmacSigner,
    Token,
    TokenBadRequestError,
    TokenService,
    TokenUnauthorizedError,
    bearer_token,
)

SECRET = "salt+pepper"
DAY = timedelta(hours=24)


class FakeClock:
    def __init__(self, now: float = 1_700_000_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def _b64(data: dict[str, object] | bytes) -> str:
    raw = data if isinstance(data, bytes) else json.dumps(data).encode()
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode()


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def service(clock: FakeClock) -> TokenService:
    return TokenService(signer=HmacSigner(SECRET), issuer="conduit", clock=clock)


def test_issue_then_validate_round_trips_identity(service: TokenService, clock: FakeClock) -> None:
    token = service.issue(DAY, 7, "jake", "jake@jake.jake", "authenticated", "admin")
    clock.advance(1)

    identity = service.validate(f"Bearer {token}")

    assert identity.id == 7
    assert identity.username == "jake"
    assert identity.email == "jake@jake.jake"
    assert identity.roles == ("authenticated", "admin")
    assert identity.has_role("admin")


def test_issue_with_real_clock_validates_immediately() -> None:
    service = TokenService(signer=HmacSigner(SECRET))
    token = service.issue(DAY, 1, "jake", "jake@jake.jake", "authenticated")

    assert service.validate_token(token).id == 1


def test_token_has_three_sections_and_expected_claims(service: TokenService, clock: FakeClock) -> None:
    raw = service.issue(timedelta(minutes=5), 3, "anne", "anne@example.com", "authenticated")

    assert raw.count(".") == 2
    token, _ = Token.decode(raw)
    assert token.header.alg == "HS256"
    assert token.header.typ == "JWT"
    assert token.payload.iss == "conduit"
    assert token.payload.iat == int(clock.now)
    assert token.payload.exp == int(clock.now) + 300
    assert token.payload.nbf is None
    assert token.payload.private.alg == "HS256"
    assert token.payload.private.roles == ["authenticated"]


@pytest.mark.parametrize("ttl", [timedelta(0), timedelta(seconds=-30)])
def test_zero_or_negative_ttl_is_already_expired(
    service: TokenService, clock: FakeClock, ttl: timedelta
) -> None:
    token = service.issue(ttl, 1, "jake", "jake@jake.jake", "authenticated")
    clock.advance(0.5)

    with pytest.raises(TokenUnauthorizedError):
        service.validate_token(token)


def test_zero_ttl_with_real_clock_is_expired() -> None:
    service = TokenService(signer=HmacSigner(SECRET))
    token = service.issue(timedelta(0), 1, "jake", "jake@jake.jake", "authenticated")

    with pytest.raises(TokenUnauthorizedError):
        service.validate(f"Bearer {token}")


def test_expires_after_ttl(service: TokenService, clock: FakeClock) -> None:
    token = service.issue(timedelta(seconds=60), 1, "jake", "jake@jake.jake")
    clock.advance(30)
    assert service.validate_token(token).username == "jake"

    clock.advance(31)
    with pytest.raises(TokenUnauthorizedError):
        service.validate_token(token)


def test_token_used_before_issue_time_is_rejected(service: TokenService, clock: FakeClock) -> None:
    token = service.issue(DAY, 1, "jake", "jake@jake.jake")
    clock.advance(-10)

    with pytest.raises(TokenUnauthorizedError):
        service.validate_token(token)


def test_not_before_is_enforced(service: TokenService, clock: FakeClock) -> None:
    start = int(clock.now)
    token = service.issue(DAY, 1, "jake", "jake@jake.jake", not_before=start + 100)
    clock.advance(1)

    with pytest.raises(TokenUnauthorizedError):
        service.validate_token(token)

    clock.advance(100)
    assert service.validate_token(token).id == 1


def test_signature_from_other_secret_is_rejected(clock: FakeClock) -> None:
    minted = TokenService(signer=HmacSigner("other"), clock=clock).issue(
        DAY, 1, "jake", "jake@jake.jake"
    )
    clock.advance(1)
    service = TokenService(signer=HmacSigner(SECRET), clock=clock)

    with pytest.raises(TokenUnauthorizedError):
        service.validate_token(minted)


def test_tampered_payload_is_rejected(service: TokenService, clock: FakeClock) -> None:
    header, payload, signature = service.issue(DAY, 1, "jake", "jake@jake.jake").split(".")
    claims = json.loads(base64.urlsafe_b64decode(payload + "=" * (-len(payload) % 4)))
    claims["private"]["roles"] = ["admin"]
    forged = f"{header}.{_b64(claims)}.{signature}"
    clock.advance(1)

    with pytest.raises(TokenUnauthorizedError):
        service.validate_token(forged)


def test_none_algorithm_is_rejected(service: TokenService, clock: FakeClock) -> None:
    _, payload, _ = service.issue(DAY, 1, "jake", "jake@jake.jake").split(".")
    forged = f"{_b64({'alg': 'none', 'typ': 'JWT'})}.{payload}.{_b64(b'sig')}"

    with pytest.raises(TokenUnauthorizedError):
        service.validate_token(forged)


def test_header_and_payload_type_mismatch_is_rejected(service: TokenService) -> None:
    _, payload, signature = service.issue(DAY, 1, "jake", "jake@jake.jake").split(".")
    forged = f"{_b64({'alg': 'HS256', 'typ': 'JWS'})}.{payload}.{signature}"

    with pytest.raises(TokenUnauthorizedError):
        service.validate_token(forged)


def test_header_and_payload_algorithm_mismatch_is_rejected(service: TokenService) -> None:
    _, payload, signature = service.issue(DAY, 1, "jake", "jake@jake.jake").split(".")
    forged = f"{_b64({'alg': 'HS512', 'typ': 'JWT'})}.{payload}.{signature}"

    with pytest.raises(TokenUnauthorizedError):
        service.validate_token(forged)


def test_undecodable_sections_are_unauthorized(service: TokenService) -> None:
    with pytest.raises(TokenUnauthorizedError):
        service.validate_token("!!!.@@@.###")

    with pytest.raises(TokenUnauthorizedError):
        service.validate_token(f"{_b64(b'[1, 2]')}.{_b64(b'{}')}.{_b64(b'x')}")


def test_two_sections_is_bad_request(service: TokenService) -> None:
    with pytest.raises(TokenBadRequestError):
        service.validate("Bearer a.b")


@pytest.mark.parametrize("raw", ["a..c", ".b.c", "a.b.", "a.b.c.d"])
def test_empty_or_extra_sections_are_bad_request(service: TokenService, raw: str) -> None:
    with pytest.raises(TokenBadRequestError):
        service.validate_token(raw)


@pytest.mark.parametrize("header", [None, "", "Bearer", "Basic abc.def.ghi", "bearer abc.def.ghi"])
def test_malformed_authorization_header_is_unauthorized(header: str | None) -> None:
    with pytest.raises(TokenUnauthorizedError):
        bearer_token(header)


def test_bearer_token_strips_surrounding_whitespace() -> None:
    assert bearer_token("Bearer   abc.def.ghi  ") == "abc.def.ghi"


def test_custom_signer_drives_validation(clock: FakeClock) -> None:
    class ReversingSigner:
        algorithm = "REV"

        def sign(self, data: bytes) -> bytes:
            return data[::-1]

        def verify(self, data: bytes, signature: bytes) -> bool:
            return data[::-1] == signature

    service = TokenService(signer=ReversingSigner(), clock=clock)
    token = service.issue(DAY, 2, "anne", "anne@example.com", "authenticated")
    clock.advance(1)

    assert Token.decode(token)[0].header.alg == "REV"
    assert service.validate_token(token).username == "anne"

    with pytest.raises(TokenUnauthorizedError):
        TokenService(signer=HmacSigner(SECRET), clock=clock).validate_token(token)
