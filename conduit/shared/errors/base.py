# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, cast


@dataclass(slots=True)
class AppError(Exception):
    code: str
    status: HTTPStatus
    context: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.code)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.code}
        if self.context:
            payload["context"] = dict(self.context)
        return payload


class DomainError(AppError):
    def __init__(
        self,
        *,
        code: str | None = None,
        status: HTTPStatus | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        resolved_code = code or cast(str, getattr(self, "code", "domain_error"))
        resolved_status = status or cast(
            HTTPStatus, getattr(self, "status", HTTPStatus.BAD_REQUEST)
        )
        super().__init__(code=resolved_code, status=resolved_status, context=context)


class FieldValidationError(AppError):
    """Per-field validation failures rendered as the ``errors`` envelope."""

    def __init__(self, errors: Mapping[str, list[str]]) -> None:
        super().__init__(
            code="validation_error",
            status=HTTPStatus.UNPROCESSABLE_ENTITY,
            context={field: list(messages) for field, messages in errors.items()},
        )

    @property
    def errors(self) -> dict[str, list[str]]:
        return {field: list(messages) for field, messages in (self.context or {}).items()}

    def to_dict(self) -> dict[str, Any]:
        return {"errors": self.errors}


class MalformedRequestError(AppError):
    """A request body that could not be decoded into the expected shape."""

    def __init__(self, message: str, *, status: HTTPStatus = HTTPStatus.BAD_REQUEST) -> None:
        super().__init__(code="malformed_request", status=status, context={"body": [message]})

    @property
    def message(self) -> str:
        return (self.context or {}).get("body", [""])[0]

    def to_dict(self) -> dict[str, Any]:
        return {"errors": {"body": [self.message]}}
