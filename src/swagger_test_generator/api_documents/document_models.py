"""API document entities."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

HTTP_METHODS: tuple[str, ...] = ("get", "put", "post", "delete", "options", "head", "patch")


@dataclass(frozen=True)
class ApiTag:
    """Operation group declared by the API document."""

    name: str
    description: str | None = None


@dataclass(frozen=True)
class ApiOperation:  # pylint: disable=too-many-instance-attributes
    """One HTTP method on one path."""

    path: str
    method: str
    tags: tuple[str, ...]
    summary: str | None
    operation_id: str | None
    parameters: tuple[Mapping[str, Any], ...]
    responses: Mapping[str, Any]
    raw: Mapping[str, Any] = field(repr=False)

    @property
    def title(self) -> str:
        return self.summary or self.operation_id or f"{self.method} {self.path}"


@dataclass(frozen=True)
class SuccessResponse:
    """Successful response documented for an operation."""

    status_code: int
    schema: Mapping[str, Any] | None
    description: str | None


@dataclass(frozen=True)
class ApiDocument:
    """Parsed Swagger/OpenAPI document."""

    raw: Mapping[str, Any] = field(repr=False)
    source_path: Path | None
    base_path: str
    title: str | None
    tags: tuple[ApiTag, ...]
    operations: tuple[ApiOperation, ...]

    @property
    def definitions(self) -> Mapping[str, Any]:
        definitions = self.raw.get("definitions")
        if isinstance(definitions, Mapping):
            return definitions
        components = self.raw.get("components")
        if isinstance(components, Mapping) and isinstance(components.get("schemas"), Mapping):
            return components["schemas"]
        return {}

    def find_tag(self, name: str) -> ApiTag | None:
        for tag in self.tags:
            if tag.name == name:
                return tag
        return None

    def resolve_reference(self, pointer: str) -> Mapping[str, Any] | None:
        return resolve_pointer(self.raw, pointer)


def resolve_pointer(raw: Mapping[str, Any], pointer: str) -> Mapping[str, Any] | None:
    """Resolve a local ``#/...`` JSON pointer, returning ``None`` when it does not resolve."""
    if not pointer.startswith("#/"):
        return None
    current: Any = raw
    for token in _pointer_tokens(pointer):
        if isinstance(current, Mapping) and token in current:
            current = current[token]
        elif isinstance(current, Sequence) and not isinstance(current, str) and token.isdigit():
            index = int(token)
            if index >= len(current):
                return None
            current = current[index]
        else:
            return None
    return current if isinstance(current, Mapping) else None


def _pointer_tokens(pointer: str) -> list[str]:
    return [token.replace("~1", "/").replace("~0", "~") for token in pointer[2:].split("/")]
