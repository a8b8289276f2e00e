# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Strict JSON request body decoding.

Failures map onto three HTTP outcomes: 415 for a wrong content type, 413
for a body over the size cap and 400 for everything else (empty, malformed,
several values, wrong field types, unknown fields when rejected).
"""

from __future__ import annotations

import json
from http import HTTPStatus
from typing import TypeVar

from flask import request
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from conduit.shared.errors.base import MalformedRequestError
from conduit.shared.errors.validation import raise_malformed_request

MAX_BODY_BYTES = 1_048_576
JSON_CONTENT_TYPES = frozenset({"application/json", "application/json; charset=utf-8"})

ModelT = TypeVar("ModelT", bound=BaseModel)

_decoder = json.JSONDecoder()


def _unknown_fields(model: BaseModel, prefix: str = "") -> list[str]:
    found = [f"{prefix}{name}" for name in (model.model_extra or {})]
    for name in type(model).model_fields:
        value = getattr(model, name)
        if isinstance(value, BaseModel):
            found.extend(_unknown_fields(value, f"{prefix}{name}."))
    return found


def _read_body(max_bytes: int) -> bytes:
    content_type = request.headers.get("Content-Type")
    if content_type not in JSON_CONTENT_TYPES:
        raise MalformedRequestError(
            "Content-Type header is not application/json",
            status=HTTPStatus.UNSUPPORTED_MEDIA_TYPE,
        )
    too_large = MalformedRequestError(
        f"Request body must not be larger than {max_bytes} bytes",
        status=HTTPStatus.REQUEST_ENTITY_TOO_LARGE,
    )
    if request.content_length is not None and request.content_length > max_bytes:
        raise too_large
    body = request.get_data(cache=True)
    if len(body) > max_bytes:
        raise too_large
    return body


def _parse(body: bytes) -> object:
    try:
        text = body.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise MalformedRequestError("Request body is not valid UTF-8") from exc
    if not text.strip():
        raise MalformedRequestError("Request body must not be empty")
    try:
        value, end = _decoder.raw_decode(text, len(text) - len(text.lstrip()))
    except json.JSONDecodeError as exc:
        raise MalformedRequestError(
            f"Request body contains badly-formed JSON (at position {exc.pos})"
        ) from exc
    if text[end:].strip():
        raise MalformedRequestError("Request body must only contain a single JSON object")
    return value


def decode_json_body(
    model: type[ModelT],
    *,
    reject_unknown_fields: bool = False,
    max_bytes: int = MAX_BODY_BYTES,
) -> ModelT:
    """Decode the current request's body into ``model``."""
    value = _parse(_read_body(max_bytes))
    try:
        decoded = model.model_validate(value)
    except PydanticValidationError as exc:
        raise_malformed_request(exc)
    if reject_unknown_fields:
        unknown = _unknown_fields(decoded)
        if unknown:
            raise MalformedRequestError(f"Request body contains unknown field {unknown[0]!r}")
    return decoded


__all__ = ["JSON_CONTENT_TYPES", "MAX_BODY_BYTES", "decode_json_body"]
