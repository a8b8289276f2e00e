from __future__ import annotations

import pytest
from flask import Flask, jsonify

from conduit.interfaces.http.dto.users import NewUserRequest
from conduit.interfaces.http.jsonapi import decode_json_body
from conduit.shared.middleware.error_handler import configure_error_handling


@pytest.fixture()
def flask_app() -> Flask:
    app = Flask(__name__)
    configure_error_handling(app)

    @app.post("/lenient")
    def lenient():
        dto = decode_json_body(NewUserRequest)
        return jsonify({"username": dto.user.username})

    @app.post("/strict")
    def strict():
        dto = decode_json_body(NewUserRequest, reject_unknown_fields=True, max_bytes=64)
        return jsonify({"username": dto.user.username})

    return app


def _post(app: Flask, path: str, data: str | bytes, content_type: str | None = "application/json"):
    headers = {"Content-Type": content_type} if content_type else {}
    with app.test_client() as client:
        return client.post(path, data=data, headers=headers)


@pytest.mark.parametrize("content_type", ["application/json", "application/json; charset=utf-8"])
def test_accepts_json_content_types(flask_app: Flask, content_type: str) -> None:
    response = _post(flask_app, "/lenient", '{"user": {"username": "jake"}}', content_type)

    assert response.status_code == 200
    assert response.get_json() == {"username": "jake"}


@pytest.mark.parametrize("content_type", [None, "text/plain", "application/json;charset=UTF-8"])
def test_rejects_other_content_types(flask_app: Flask, content_type: str | None) -> None:
    response = _post(flask_app, "/lenient", '{"user": {}}', content_type)

    assert response.status_code == 415
    assert "body" in response.get_json()["errors"]


@pytest.mark.parametrize(
    "body",
    [
        "",
        "   ",
        '{"user": ',
        '{"user": {}} {"user": {}}',
        '{"user": {"username": 5}}',
        '{"user": null}',
        "[1, 2, 3]",
    ],
)
def test_malformed_bodies_are_bad_request(flask_app: Flask, body: str) -> None:
    response = _post(flask_app, "/lenient", body)

    assert response.status_code == 400
    assert len(response.get_json()["errors"]["body"]) == 1


def test_unknown_fields_are_ignored_unless_rejected(flask_app: Flask) -> None:
    body = '{"user": {"username": "jake", "nickname": "j"}}'

    assert _post(flask_app, "/lenient", body).status_code == 200

    response = _post(flask_app, "/strict", body)
    assert response.status_code == 400
    assert "user.nickname" in response.get_json()["errors"]["body"][0]


def test_oversized_body_is_rejected(flask_app: Flask) -> None:
    body = '{"user": {"username": "' + "x" * 100 + '"}}'

    response = _post(flask_app, "/strict", body)

    assert response.status_code == 413
