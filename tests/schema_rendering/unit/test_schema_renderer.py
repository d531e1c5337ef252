"""Schema rendering service tests."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from swagger_test_generator.schema_rendering import (
    DEPTH_EXCEEDED_MARKER,
    RenderOptions,
    render_assertions,
    render_example,
)

WIDGET_SCHEMA: dict[str, Any] = {
    "type": "object",
    "title": "Widget",
    "properties": {"id": {"type": "integer"}, "name": {"type": "string"}},
    "required": ["id"],
}


def _options(
    definitions: Mapping[str, Any] | None = None, *, required_only: bool = False
) -> RenderOptions:
    definitions = definitions or {}

    def resolve(pointer: str) -> Mapping[str, Any] | None:
        prefix = "#/definitions/"
        if not pointer.startswith(prefix):
            return None
        return definitions.get(pointer[len(prefix) :])

    return RenderOptions(resolve_reference=resolve, required_only=required_only)


def test_widget_assertions_guard_optional_properties() -> None:
    rendered = render_assertions(WIDGET_SCHEMA, "body", _options())

    assert rendered.splitlines() == [
        "// Widget",
        "assert.isObject(body, 'body');",
        "assert.isNumber(body.id, 'body.id');",
        "if (Object.prototype.hasOwnProperty.call(body, 'name')) {",
        "    assert.isString(body.name, 'body.name');",
        "}",
        "// END Widget",
    ]


def test_widget_example_lists_every_property_with_title_comment() -> None:
    rendered = render_example(WIDGET_SCHEMA, _options())

    assert rendered == "{ // Widget\n    id: 0,\n    name: 'string'\n}"


def test_required_only_mode_filters_example_and_assertions() -> None:
    options = _options(required_only=True)

    example = render_example(WIDGET_SCHEMA, options)
    assertions = render_assertions(WIDGET_SCHEMA, "body", options)

    assert example == "{ // Widget\n    id: 0\n}"
    assert "body.name" not in assertions
    assert "assert.isNumber(body.id, 'body.id');" in assertions


def test_nested_example_lines_up_with_embedding_column() -> None:
    schema = {
        "type": "object",
        "properties": {
            "owner": {"type": "object", "properties": {"active": {"type": "boolean"}}},
            "score": {"type": "number"},
        },
    }

    rendered = render_example(schema, _options(), indent=8)

    assert rendered == (
        "{\n"
        "            owner: {\n"
        "                active: false\n"
        "            },\n"
        "            score: 0.0\n"
        "        }"
    )


def test_array_example_contains_exactly_one_item() -> None:
    schema = {"type": "array", "items": {"type": "string", "enum": ["BASIC", "ADVANCED"]}}

    rendered = render_example(schema, _options())

    assert rendered == "[\n    'BASIC'\n]"
    assert rendered.count("'BASIC'") == 1
    assert "'ADVANCED'" not in rendered


def test_string_enum_assertion_lists_all_values_in_order() -> None:
    schema = {"type": "string", "enum": ["C", "A", "B"]}

    rendered = render_assertions(schema, "body.kind", _options())

    assert rendered == (
        "assert.isString(body.kind, 'body.kind');\n"
        "assert.include(['C', 'A', 'B'], body.kind, 'body.kind');"
    )


def test_array_assertions_check_first_element() -> None:
    schema = {"type": "array", "items": {"type": "integer"}}

    rendered = render_assertions(schema, "response.data", _options(), indent=4)

    assert rendered == (
        "assert.isArray(response.data, 'response.data');\n"
        "    assert.isAbove(response.data.length, 0, 'response.data.length');\n"
        "    assert.isNumber(response.data[0], 'response.data[0]');"
    )


def test_optional_nested_object_assertions_are_indented_inside_guard() -> None:
    schema = {
        "type": "object",
        "properties": {
            "owner": {
                "type": "object",
                "properties": {"id": {"type": "integer"}},
                "required": ["id"],
            }
        },
    }

    rendered = render_assertions(schema, "body", _options())

    assert rendered == (
        "assert.isObject(body, 'body');\n"
        "if (Object.prototype.hasOwnProperty.call(body, 'owner')) {\n"
        "    assert.isObject(body.owner, 'body.owner');\n"
        "    assert.isNumber(body.owner.id, 'body.owner.id');\n"
        "}"
    )


def test_description_is_rendered_as_leading_comment() -> None:
    schema = {"type": "object", "title": "Point", "description": "A point\n  on a map"}

    rendered = render_assertions(schema, "body", _options())

    assert rendered.splitlines() == [
        "// Point",
        "// A point on a map",
        "assert.isObject(body, 'body');",
        "// END Point",
    ]


def test_references_resolve_through_definitions() -> None:
    options = _options({"Widget": WIDGET_SCHEMA})

    example = render_example({"$ref": "#/definitions/Widget"}, options)
    assertions = render_assertions({"$ref": "#/definitions/Widget"}, "body", options)

    assert example == render_example(WIDGET_SCHEMA, options)
    assert assertions == render_assertions(WIDGET_SCHEMA, "body", options)


def test_unresolved_reference_renders_sentinel_comment() -> None:
    schema = {"$ref": "#/definitions/Missing"}

    assert render_example(schema, _options()) == "// UNRESOLVED REFERENCE #/definitions/Missing"
    assert (
        render_assertions(schema, "body", _options())
        == "// UNRESOLVED REFERENCE #/definitions/Missing"
    )


def test_unknown_type_renders_sentinel_and_keeps_object_literal_valid() -> None:
    schema = {
        "type": "object",
        "properties": {"upload": {"type": "file"}, "size": {"type": "integer"}},
    }

    example = render_example(schema, _options())
    assertions = render_assertions({"type": "file"}, "body", _options())

    assert example == "{\n    upload: undefined, // UNKNOWN SCHEMA TYPE file\n    size: 0\n}"
    assert assertions == "// UNKNOWN SCHEMA TYPE file"
    assert render_example({}, _options()) == "// UNKNOWN SCHEMA TYPE undefined"


def test_self_referencing_definition_stops_at_depth_limit() -> None:
    options = _options({"Loop": {"$ref": "#/definitions/Loop"}})

    assert render_example({"$ref": "#/definitions/Loop"}, options) == DEPTH_EXCEEDED_MARKER
    assert render_assertions({"$ref": "#/definitions/Loop"}, "body", options) == (
        DEPTH_EXCEEDED_MARKER
    )


def test_recursive_object_terminates_with_depth_marker() -> None:
    node = {
        "type": "object",
        "properties": {"next": {"$ref": "#/definitions/Node"}},
        "required": ["next"],
    }
    options = _options({"Node": node})

    example = render_example({"$ref": "#/definitions/Node"}, options)
    assertions = render_assertions({"$ref": "#/definitions/Node"}, "body", options)

    assert DEPTH_EXCEEDED_MARKER in example
    assert DEPTH_EXCEEDED_MARKER in assertions
    assert example.count("next:") < 20


def test_non_identifier_property_names_are_quoted() -> None:
    schema = {
        "type": "object",
        "properties": {"x-id": {"type": "integer"}},
        "required": ["x-id"],
    }

    example = render_example(schema, _options())
    assertions = render_assertions(schema, "body", _options())

    assert example == "{\n    'x-id': 0\n}"
    assert "assert.isNumber(body['x-id'], 'body[\\'x-id\\']');" in assertions


def test_rendering_is_deterministic() -> None:
    options = _options({"Widget": WIDGET_SCHEMA})
    schema = {"type": "array", "items": {"$ref": "#/definitions/Widget"}}

    assert render_example(schema, options) == render_example(schema, options)
    assert render_assertions(schema, "body", options) == render_assertions(
        schema, "body", options
    )


def test_multi_line_title_stays_inside_comments() -> None:
    schema = {
        "type": "object",
        "title": "Multi\nLine",
        "properties": {"a": {"type": "integer"}},
        "required": ["a"],
    }

    example = render_example(schema, _options())
    assertions = render_assertions(schema, "body", _options())

    assert example == "{ // Multi Line\n    a: 0\n}"
    assert assertions.splitlines() == [
        "// Multi Line",
        "assert.isObject(body, 'body');",
        "assert.isNumber(body.a, 'body.a');",
        "// END Multi Line",
    ]
