"""Schema rendering entities."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

MAX_RENDER_DEPTH = 20

ReferenceResolver = Callable[[str], Mapping[str, Any] | None]


class SchemaKind(str, Enum):
    """Closed set of schema node kinds understood by the renderers."""

    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    INTEGER = "integer"
    NUMBER = "number"
    BOOLEAN = "boolean"
    REFERENCE = "reference"
    UNKNOWN = "unknown"


_TYPED_KINDS = {
    kind.value: kind
    for kind in SchemaKind
    if kind not in (SchemaKind.REFERENCE, SchemaKind.UNKNOWN)
}


@dataclass(frozen=True)
class SchemaNode:
    """Read-only view over one caller-owned schema mapping."""

    definition: Mapping[str, Any]

    @property
    def kind(self) -> SchemaKind:
        if isinstance(self.definition.get("$ref"), str):
            return SchemaKind.REFERENCE
        raw_type = self.raw_type
        if isinstance(raw_type, str) and raw_type in _TYPED_KINDS:
            return _TYPED_KINDS[raw_type]
        if raw_type is None and isinstance(self.definition.get("properties"), Mapping):
            return SchemaKind.OBJECT
        return SchemaKind.UNKNOWN

    @property
    def raw_type(self) -> Any:
        node_type = self.definition.get("type")
        if isinstance(node_type, list):
            filtered = [value for value in node_type if value != "null"]
            return filtered[0] if filtered else "null"
        return node_type

    @property
    def reference(self) -> str | None:
        value = self.definition.get("$ref")
        return value if isinstance(value, str) else None

    @property
    def title(self) -> str | None:
        return _optional_text(self.definition.get("title"))

    @property
    def description(self) -> str | None:
        return _optional_text(self.definition.get("description"))

    @property
    def properties(self) -> tuple[tuple[str, SchemaNode], ...]:
        properties = self.definition.get("properties")
        if not isinstance(properties, Mapping):
            return ()
        return tuple(
            (str(name), SchemaNode(child))
            for name, child in properties.items()
            if isinstance(child, Mapping)
        )

    @property
    def required(self) -> frozenset[str]:
        required = self.definition.get("required")
        if not isinstance(required, list):
            return frozenset()
        return frozenset(name for name in required if isinstance(name, str))

    @property
    def items(self) -> SchemaNode | None:
        items = self.definition.get("items")
        return SchemaNode(items) if isinstance(items, Mapping) else None

    @property
    def enum(self) -> tuple[Any, ...]:
        values = self.definition.get("enum")
        if not isinstance(values, list):
            return ()
        return tuple(values)


@dataclass(frozen=True)
class RenderOptions:
    """Immutable settings shared by example and assertion rendering.

    Example and assertion fragments for the same operation must be rendered
    with the same options, otherwise required-only filtering differs between
    the request example and the response checks.
    """

    resolve_reference: ReferenceResolver
    required_only: bool = False
    max_depth: int = MAX_RENDER_DEPTH


def _optional_text(value: Any) -> str | None:
    if not isinstance(value, str):
        return None
    collapsed = " ".join(value.split())
    return collapsed or None
