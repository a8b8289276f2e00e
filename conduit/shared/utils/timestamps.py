# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime


def format_timestamp(moment: datetime) -> str:
    """Render ``moment`` in UTC as ``YYYY-MM-DDTHH:MM:SS[.fraction]Z``.

    The fractional part keeps only significant digits and is dropped
    entirely on a whole second.
    """
    moment = moment.astimezone(UTC)
    base = moment.strftime("%Y-%m-%dT%H:%M:%S")
    fraction = f"{moment.microsecond:06d}".rstrip("0")
    if fraction:
        return f"{base}.{fraction}Z"
    return f"{base}Z"


def utc_now() -> str:
    return format_timestamp(datetime.now(UTC))
