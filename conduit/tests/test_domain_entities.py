from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

from conduit.domain.users.entities import Profile, User
from conduit.shared.utils.timestamps import format_timestamp


def _user(user_id: int, username: str, following: frozenset[int] = frozenset()) -> User:
    return User(
        id=user_id,
        username=username,
        email=f"{username.lower()}@example.com",
        password="pw",
        created_at="2024-01-01T00:00:00Z",
        updated_at="2024-01-01T00:00:00Z",
        following=following,
    )


def test_profile_following_depends_on_viewer() -> None:
    anne = _user(2, "Anne")
    jacob = _user(1, "Jacob", frozenset({2}))

    assert Profile.of(anne, viewer=jacob).following is True
    assert Profile.of(anne, viewer=None).following is False
    assert Profile.of(jacob, viewer=anne).following is False


def test_user_repr_hides_password() -> None:
    assert "pw" not in repr(_user(1, "Jacob"))


def test_format_timestamp_trims_fraction() -> None:
    assert format_timestamp(datetime(2024, 5, 6, 7, 8, 9, tzinfo=UTC)) == "2024-05-06T07:08:09Z"
    assert (
        format_timestamp(datetime(2024, 5, 6, 7, 8, 9, 120000, tzinfo=UTC))
        == "2024-05-06T07:08:09.12Z"
    )


def test_format_timestamp_converts_to_utc() -> None:
    moment = datetime(2024, 5, 6, 9, 8, 9, 500, tzinfo=timezone(timedelta(hours=2)))

    assert format_timestamp(moment) == "2024-05-06T07:08:09.0005Z"
