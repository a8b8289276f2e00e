from __future__ import annotations

from datetime import timedelta

import pytest
from flask.testing import FlaskClient

from conduit.infrastructure.auth.tokens import TokenService


def _auth(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.mark.parametrize(
    ("method", "path"),
    [
        ("GET", "/api/articles"),
        ("POST", "/api/articles"),
        ("GET", "/api/articles/how-to-train-your-dragon"),
        ("PUT", "/api/articles/how-to-train-your-dragon"),
        ("DELETE", "/api/articles/how-to-train-your-dragon"),
        ("GET", "/api/articles/how-to-train-your-dragon/comments"),
        ("POST", "/api/articles/how-to-train-your-dragon/comments"),
        ("DELETE", "/api/articles/how-to-train-your-dragon/comments/1"),
        ("POST", "/api/articles/how-to-train-your-dragon/favorite"),
        ("DELETE", "/api/articles/how-to-train-your-dragon/favorite"),
        ("GET", "/api/tags"),
    ],
)
def test_article_routes_are_not_implemented(client: FlaskClient, method: str, path: str) -> None:
    response = client.open(path, method=method)

    assert response.status_code == 501
    assert response.get_data(as_text=True) == "Not Implemented\n"


def test_feed_requires_authentication(client: FlaskClient, tokens: TokenService) -> None:
    assert client.get("/api/articles/feed").status_code == 401

    token = tokens.issue(timedelta(hours=1), 1, "jake", "jake@jake.jake", "authenticated")
    assert client.get("/api/articles/feed", headers=_auth(token)).status_code == 501


def test_admin_is_hidden_from_non_admins(client: FlaskClient, tokens: TokenService) -> None:
    assert client.get("/api/admin").status_code == 404

    member = tokens.issue(timedelta(hours=1), 1, "jake", "jake@jake.jake", "authenticated")
    assert client.get("/api/admin", headers=_auth(member)).status_code == 404

    admin = tokens.issue(timedelta(hours=1), 1, "jake", "jake@jake.jake", "authenticated", "admin")
    assert client.get("/api/admin", headers=_auth(admin)).status_code == 501


def test_unknown_route_is_plain_not_found(client: FlaskClient) -> None:
    response = client.get("/api/nowhere")

    assert response.status_code == 404
    assert response.mimetype == "text/plain"


def test_responses_carry_security_headers(client: FlaskClient) -> None:
    response = client.get("/api/tags")

    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"
