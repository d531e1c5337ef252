"""Operation lookup helpers used while generating test files."""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import Any

from .document_loader import ApiDocumentError
from .document_models import ApiDocument, ApiOperation, SuccessResponse

SUCCESS_STATUS_CODES: tuple[int, ...] = (200, 201)


class MissingBodySchemaError(ApiDocumentError):
    """Raised when an operation declares a body parameter without a schema."""


def select_operations(
    document: ApiDocument,
    tag_name: str,
    *,
    methods: Sequence[str] | None = None,
    path_pattern: re.Pattern[str] | None = None,
) -> tuple[ApiOperation, ...]:
    """Return operations of one tag, optionally filtered by method and full path.

    ``path_pattern`` is searched in ``basePath + path``.
    """
    if document.find_tag(tag_name) is None:
        raise ApiDocumentError(f"Tag name '{tag_name}' not found in Swagger API documentation")

    allowed_methods = {method.upper() for method in methods} if methods else None
    selected: list[ApiOperation] = []
    for operation in document.operations:
        if path_pattern is not None and not path_pattern.search(
            document.base_path + operation.path
        ):
            continue
        if allowed_methods is not None and operation.method not in allowed_methods:
            continue
        if tag_name in operation.tags:
            selected.append(operation)
    return tuple(selected)


def find_parameters(operation: ApiOperation, location: str) -> tuple[Mapping[str, Any], ...]:
    return tuple(
        parameter for parameter in operation.parameters if parameter.get("in") == location
    )


def find_body_schema(operation: ApiOperation) -> Mapping[str, Any] | None:
    """Return the request body schema, or ``None`` when the operation takes no body.

    Raises:
      MissingBodySchemaError: If a body parameter (or OpenAPI 3 request body)
        is declared without a schema.
    """
    for parameter in operation.parameters:
        if parameter.get("in") != "body":
            continue
        schema = parameter.get("schema")
        if not isinstance(schema, Mapping):
            raise MissingBodySchemaError(
                f"Body parameter '{parameter.get('name', 'body')}' of "
                f"{operation.method} {operation.path} has no schema."
            )
        return schema

    request_body = operation.raw.get("requestBody")
    if not isinstance(request_body, Mapping):
        return None
    schema = _json_content_schema(request_body)
    if schema is None:
        raise MissingBodySchemaError(
            f"Request body of {operation.method} {operation.path} has no JSON schema."
        )
    return schema


def find_success_response(operation: ApiOperation) -> SuccessResponse | None:
    """Return the first documented success response (200, then 201)."""
    for status_code in SUCCESS_STATUS_CODES:
        response = operation.responses.get(str(status_code), operation.responses.get(status_code))
        if not isinstance(response, Mapping):
            continue
        schema = response.get("schema")
        if not isinstance(schema, Mapping):
            schema = _json_content_schema(response)
        description = response.get("description")
        return SuccessResponse(
            status_code=status_code,
            schema=schema,
            description=description if isinstance(description, str) else None,
        )
    return None


def _json_content_schema(container: Mapping[str, Any]) -> Mapping[str, Any] | None:
    content = container.get("content")
    if not isinstance(content, Mapping):
        return None
    for media_type, media in content.items():
        if "json" in str(media_type) and isinstance(media, Mapping):
            schema = media.get("schema")
            if isinstance(schema, Mapping):
                return schema
    return None
