# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations


class InvariantViolationError(Exception):
    """Internal state broke a rule that must always hold; treated as a bug."""

    def __init__(self, message: str, *, key: object | None = None):
        super().__init__(message)
        self.key = key

    def __str__(self) -> str:
        if self.key is not None:
            return f"{super().__str__()} (key={self.key!r})"
        return super().__str__()


InvariantViolation = InvariantViolationError
