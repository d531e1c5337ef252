"""Mocha spec source assembly for one tag."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from functools import partial
from typing import Any

from swagger_test_generator.api_documents import (
    ApiDocument,
    ApiOperation,
    ApiTag,
    find_body_schema,
    find_parameters,
    find_success_response,
)
from swagger_test_generator.schema_rendering import (
    DEPTH_EXCEEDED_MARKER,
    UNKNOWN_TYPE_MARKER,
    UNRESOLVED_REFERENCE_MARKER,
    RenderOptions,
    js_string,
    member_path,
    render_assertions,
    render_example,
    value_slot,
)

from .constants import (
    DEFAULT_FILE_NAME_TEMPLATE,
    DEFAULT_FILE_TEMPLATE,
    DEFAULT_TEST_TEMPLATE,
    RESPONSE_DATA_PATH,
)
from .naming import dash_case
from .template_rendering import Fragment, render_template

_LOGGER = logging.getLogger(__name__)

_PATH_PARAMETER = re.compile(r"\{([^}]+)\}")
_SENTINEL_MARKERS = (DEPTH_EXCEEDED_MARKER, UNRESOLVED_REFERENCE_MARKER, UNKNOWN_TYPE_MARKER)
_DEFAULT_STATUS_CODE = 200


@dataclass(frozen=True)
class TestTemplates:
    """Template texts used to produce one spec file per tag."""

    __test__ = False

    file_template: str = DEFAULT_FILE_TEMPLATE
    test_template: str = DEFAULT_TEST_TEMPLATE
    file_name_template: str = DEFAULT_FILE_NAME_TEMPLATE


def build_spec_file(
    document: ApiDocument,
    tag: ApiTag,
    operations: Sequence[ApiOperation],
    *,
    templates: TestTemplates,
    options: RenderOptions,
) -> str:
    """Render the spec source for ``operations`` belonging to ``tag``.

    Raises:
      MissingBodySchemaError: If an operation declares a body without a schema.
    """
    tests = "\n".join(
        render_template(
            templates.test_template, _test_variables(document, operation, options)
        )
        for operation in operations
    )
    content = render_template(
        templates.file_template,
        {
            "document": document,
            "apiDocs": document.raw,
            "basePath": document.base_path,
            "tag": tag,
            "suite_title": js_string(tag.description or tag.name),
            "tests": tests,
        },
    )
    _warn_on_sentinels(tag, content)
    return content


def build_file_name(document: ApiDocument, tag: ApiTag, file_name_template: str) -> str:
    """Render the spec file name; unknown template variables are an error."""
    return render_template(
        file_name_template,
        {
            "document": document,
            "apiDocs": document.raw,
            "tag": tag,
            "basePath": dash_case(document.base_path, "/")[1:],
        },
        strict=True,
    )


def _test_variables(
    document: ApiDocument, operation: ApiOperation, options: RenderOptions
) -> dict[str, Any]:
    body_schema = find_body_schema(operation)
    success = find_success_response(operation)
    return {
        "document": document,
        "operation": operation,
        "method": operation.method,
        "test_title": js_string(operation.title),
        "path_params": Fragment(
            partial(_parameters_literal, find_parameters(operation, "path"), options)
        ),
        "query_params": Fragment(
            partial(_parameters_literal, find_parameters(operation, "query"), options)
        ),
        "request_body": Fragment(partial(_request_body_literal, body_schema, options)),
        "request_path": _request_path_literal(document.base_path, operation.path),
        "status_code": success.status_code if success else _DEFAULT_STATUS_CODE,
        "response_assertions": Fragment(
            partial(_response_assertions, success.schema if success else None, options)
        ),
    }


def _parameters_literal(
    parameters: Sequence[Mapping[str, Any]], options: RenderOptions, column: int
) -> str:
    named = [parameter for parameter in parameters if isinstance(parameter.get("name"), str)]
    if not named:
        return "{};"
    schema = {
        "type": "object",
        "properties": {parameter["name"]: _parameter_schema(parameter) for parameter in named},
        "required": [parameter["name"] for parameter in named if parameter.get("required")],
    }
    return value_slot(render_example(schema, options, column), ";")


def _request_body_literal(
    schema: Mapping[str, Any] | None, options: RenderOptions, column: int
) -> str:
    if schema is None:
        return "undefined;"
    return value_slot(render_example(schema, options, column), ";")


def _response_assertions(
    schema: Mapping[str, Any] | None, options: RenderOptions, column: int
) -> str:
    if schema is None:
        return "// no response schema documented"
    return render_assertions(schema, RESPONSE_DATA_PATH, options, column)


def _request_path_literal(base_path: str, path: str) -> str:
    def replace_parameter(match: re.Match[str]) -> str:
        return "${encodeURIComponent(" + member_path("params", match.group(1)) + ")}"

    return "`" + base_path + _PATH_PARAMETER.sub(replace_parameter, path) + "`"


def _parameter_schema(parameter: Mapping[str, Any]) -> Mapping[str, Any]:
    schema = parameter.get("schema")
    return schema if isinstance(schema, Mapping) else parameter


def _warn_on_sentinels(tag: ApiTag, content: str) -> None:
    for marker in _SENTINEL_MARKERS:
        count = content.count(marker)
        if count:
            _LOGGER.warning(
                "tag '%s': %d occurrence(s) of '%s' in generated tests",
                tag.name,
                count,
                marker,
            )
