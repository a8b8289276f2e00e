# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from pydantic import ValidationError as PydanticValidationError

from .base import MalformedRequestError


def _field_path(loc: tuple[int | str, ...]) -> str:
    return ".".join(str(part) for part in loc if part is not None)


def describe_pydantic_error(exc: PydanticValidationError) -> str:
    """Collapse the first pydantic error into a single client-facing sentence."""
    errors = exc.errors()
    if not errors:
        return "Request body contains invalid data"
    first = errors[0]
    field_path = _field_path(tuple(first.get("loc", ())))
    error_type = first.get("type", "value_error")
    if error_type == "missing":
        return f"Request body is missing field {field_path!r}"
    if field_path:
        return f"Request body contains an invalid value for the {field_path!r} field"
    return "Request body must be a JSON object"


def raise_malformed_request(exc: PydanticValidationError) -> None:
    raise MalformedRequestError(describe_pydantic_error(exc)) from exc


__all__ = [
    "describe_pydantic_error",
    "raise_malformed_request",
]
