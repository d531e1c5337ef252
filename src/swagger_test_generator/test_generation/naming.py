"""Identifier case conversion helpers."""

from __future__ import annotations

import re

_UPPERCASE_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def dash_case(value: str, split_on: str | None = None) -> str:
    """Convert ``camelCase`` (or text split on ``split_on``) to ``dash-case``.

    >>> dash_case("requiredPropertiesOnly")
    'required-properties-only'
    >>> dash_case("/rest/v1", "/")
    '-rest-v1'
    """
    parts = value.split(split_on) if split_on is not None else _UPPERCASE_BOUNDARY.split(value)
    return "-".join(part.lower() for part in parts)
