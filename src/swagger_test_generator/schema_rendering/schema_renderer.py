"""Example literal and chai assertion rendering for schema definitions."""

from __future__ import annotations

import json
import re
from collections.abc import Callable, Mapping
from typing import Any

from .schema_models import RenderOptions, SchemaKind, SchemaNode

DEPTH_EXCEEDED_MARKER = "// RECURSION DEPTH EXCEEDED"
UNRESOLVED_REFERENCE_MARKER = "// UNRESOLVED REFERENCE"
UNKNOWN_TYPE_MARKER = "// UNKNOWN SCHEMA TYPE"

STRING_PLACEHOLDER = "'string'"
BLOCK_INDENT = 4

_IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")
_PAD = " " * BLOCK_INDENT

SchemaInput = Mapping[str, Any] | SchemaNode
_ExampleRenderer = Callable[[SchemaNode, RenderOptions, int, int], str]
_AssertionRenderer = Callable[[SchemaNode, str, RenderOptions, int, int], str]


def render_example(
    schema: SchemaInput, options: RenderOptions, indent: int = 0, depth: int = 0
) -> str:
    """Render a JavaScript example literal for a schema.

    Args:
      schema: Schema mapping or node to render.
      options: Shared rendering options.
      indent: Column at which the first line of the literal is placed.
      depth: Current recursion depth.

    Returns:
      The literal text. Continuation lines are padded by ``indent`` columns so
      the block lines up when embedded at that column. Unresolvable input
      yields a sentinel comment instead of raising.
    """
    node = _as_node(schema)
    if depth >= options.max_depth:
        return DEPTH_EXCEEDED_MARKER
    if node.kind is SchemaKind.REFERENCE:
        resolved = _resolve(node, options)
        if resolved is None:
            return f"{UNRESOLVED_REFERENCE_MARKER} {node.reference}"
        return render_example(resolved, options, indent, depth + 1)
    renderer = _EXAMPLE_RENDERERS.get(node.kind, _example_unknown)
    return renderer(node, options, indent, depth)


def render_assertions(
    schema: SchemaInput,
    data_path: str,
    options: RenderOptions,
    indent: int = 0,
    depth: int = 0,
) -> str:
    """Render chai ``assert`` statements checking ``data_path`` against a schema.

    Every assertion carries ``data_path`` as its message so a failing check
    names the nested field it was made against.
    """
    node = _as_node(schema)
    if depth >= options.max_depth:
        return DEPTH_EXCEEDED_MARKER
    if node.kind is SchemaKind.REFERENCE:
        resolved = _resolve(node, options)
        if resolved is None:
            return f"{UNRESOLVED_REFERENCE_MARKER} {node.reference}"
        return render_assertions(resolved, data_path, options, indent, depth + 1)
    renderer = _ASSERTION_RENDERERS.get(node.kind, _assert_unknown)
    return renderer(node, data_path, options, indent, depth)


def is_sentinel(fragment: str) -> bool:
    """Return whether a rendered fragment is a sentinel comment rather than a value."""
    return fragment.startswith("//")


def value_slot(fragment: str, suffix: str = "") -> str:
    """Place a rendered example where a value is expected, followed by ``suffix``.

    Sentinel comments would swallow the suffix, so they are preceded by
    ``undefined`` and the suffix.
    """
    if is_sentinel(fragment):
        return f"undefined{suffix} {fragment}"
    return f"{fragment}{suffix}"


def js_string(value: str) -> str:
    """Quote text as a single-quoted JavaScript string literal."""
    escaped = (
        value.replace("\\", "\\\\")
        .replace("'", "\\'")
        .replace("\n", "\\n")
        .replace("\r", "\\r")
    )
    return f"'{escaped}'"


def member_path(data_path: str, name: str) -> str:
    """Extend a JavaScript access chain with a property accessor."""
    if _IDENTIFIER_PATTERN.match(name):
        return f"{data_path}.{name}"
    return f"{data_path}[{js_string(name)}]"


def _example_object(node: SchemaNode, options: RenderOptions, indent: int, depth: int) -> str:
    entries = _selected_properties(node, options)
    lines = [f"{{ // {node.title}" if node.title else "{"]
    for index, (name, child) in enumerate(entries):
        comma = "" if index == len(entries) - 1 else ","
        value = render_example(child, options, indent + BLOCK_INDENT, depth + 1)
        lines.append(f"{_PAD}{_object_key(name)}: {value_slot(value, comma)}")
    lines.append("}")
    return _join(lines, indent)


def _example_array(node: SchemaNode, options: RenderOptions, indent: int, depth: int) -> str:
    lines = ["["]
    if node.items is not None:
        value = render_example(node.items, options, indent + BLOCK_INDENT, depth + 1)
        lines.append(_PAD + value_slot(value))
    lines.append("]")
    return _join(lines, indent)


def _example_string(node: SchemaNode, options: RenderOptions, indent: int, depth: int) -> str:
    if node.enum:
        return _js_literal(node.enum[0])
    return STRING_PLACEHOLDER


def _example_integer(node: SchemaNode, options: RenderOptions, indent: int, depth: int) -> str:
    return "0"


def _example_number(node: SchemaNode, options: RenderOptions, indent: int, depth: int) -> str:
    return "0.0"


def _example_boolean(node: SchemaNode, options: RenderOptions, indent: int, depth: int) -> str:
    return "false"


def _example_unknown(node: SchemaNode, options: RenderOptions, indent: int, depth: int) -> str:
    return _unknown_marker(node)


def _assert_object(
    node: SchemaNode, data_path: str, options: RenderOptions, indent: int, depth: int
) -> str:
    lines: list[str] = []
    if node.title:
        lines.append(f"// {node.title}")
    if node.description:
        lines.append(f"// {node.description}")
    lines.append(f"assert.isObject({data_path}, {js_string(data_path)});")
    required = node.required
    for name, child in _selected_properties(node, options):
        child_path = member_path(data_path, name)
        if name in required:
            lines.append(render_assertions(child, child_path, options, indent, depth + 1))
            continue
        nested = render_assertions(child, child_path, options, indent + BLOCK_INDENT, depth + 1)
        lines.append(
            f"if (Object.prototype.hasOwnProperty.call({data_path}, {js_string(name)})) {{"
        )
        lines.append(_PAD + nested)
        lines.append("}")
    if node.title:
        lines.append(f"// END {node.title}")
    return _join(lines, indent)


def _assert_array(
    node: SchemaNode, data_path: str, options: RenderOptions, indent: int, depth: int
) -> str:
    lines = [
        f"assert.isArray({data_path}, {js_string(data_path)});",
        f"assert.isAbove({data_path}.length, 0, {js_string(data_path + '.length')});",
    ]
    if node.items is not None:
        lines.append(
            render_assertions(node.items, f"{data_path}[0]", options, indent, depth + 1)
        )
    return _join(lines, indent)


def _assert_string(
    node: SchemaNode, data_path: str, options: RenderOptions, indent: int, depth: int
) -> str:
    lines = [f"assert.isString({data_path}, {js_string(data_path)});"]
    if node.enum:
        values = ", ".join(_js_literal(value) for value in node.enum)
        lines.append(f"assert.include([{values}], {data_path}, {js_string(data_path)});")
    return _join(lines, indent)


def _assert_number(
    node: SchemaNode, data_path: str, options: RenderOptions, indent: int, depth: int
) -> str:
    return f"assert.isNumber({data_path}, {js_string(data_path)});"


def _assert_boolean(
    node: SchemaNode, data_path: str, options: RenderOptions, indent: int, depth: int
) -> str:
    return f"assert.isBoolean({data_path}, {js_string(data_path)});"


def _assert_unknown(
    node: SchemaNode, data_path: str, options: RenderOptions, indent: int, depth: int
) -> str:
    return _unknown_marker(node)


_EXAMPLE_RENDERERS: dict[SchemaKind, _ExampleRenderer] = {
    SchemaKind.OBJECT: _example_object,
    SchemaKind.ARRAY: _example_array,
    SchemaKind.STRING: _example_string,
    SchemaKind.INTEGER: _example_integer,
    SchemaKind.NUMBER: _example_number,
    SchemaKind.BOOLEAN: _example_boolean,
}

_ASSERTION_RENDERERS: dict[SchemaKind, _AssertionRenderer] = {
    SchemaKind.OBJECT: _assert_object,
    SchemaKind.ARRAY: _assert_array,
    SchemaKind.STRING: _assert_string,
    SchemaKind.INTEGER: _assert_number,
    SchemaKind.NUMBER: _assert_number,
    SchemaKind.BOOLEAN: _assert_boolean,
}


def _as_node(schema: SchemaInput) -> SchemaNode:
    if isinstance(schema, SchemaNode):
        return schema
    return SchemaNode(schema)


def _resolve(node: SchemaNode, options: RenderOptions) -> SchemaNode | None:
    pointer = node.reference
    if pointer is None:
        return None
    resolved = options.resolve_reference(pointer)
    if not isinstance(resolved, Mapping):
        return None
    return SchemaNode(resolved)


def _selected_properties(
    node: SchemaNode, options: RenderOptions
) -> tuple[tuple[str, SchemaNode], ...]:
    properties = node.properties
    if not options.required_only:
        return properties
    required = node.required
    return tuple((name, child) for name, child in properties if name in required)


def _object_key(name: str) -> str:
    return name if _IDENTIFIER_PATTERN.match(name) else js_string(name)


def _js_literal(value: Any) -> str:
    if isinstance(value, str):
        return js_string(value)
    return json.dumps(value)


def _unknown_marker(node: SchemaNode) -> str:
    raw_type = node.raw_type
    return f"{UNKNOWN_TYPE_MARKER} {raw_type if raw_type is not None else 'undefined'}"


def _join(lines: list[str], indent: int) -> str:
    return ("\n" + " " * indent).join(lines)
