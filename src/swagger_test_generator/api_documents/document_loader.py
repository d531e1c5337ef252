"""API document loading service."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .document_models import HTTP_METHODS, ApiDocument, ApiOperation, ApiTag, resolve_pointer

_LOGGER = logging.getLogger(__name__)


class ApiDocumentError(Exception):
    """Raised when an API document cannot be read or queried."""


def load_api_document(document_path: Path | str) -> ApiDocument:
    """Read a Swagger/OpenAPI document from a YAML or JSON file."""
    path = Path(document_path)
    if not path.exists():
        raise ApiDocumentError(f"API document not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ApiDocumentError(f"Failed to parse API document {path}: {exc}") from exc

    document = parse_api_document(parsed, source_path=path.resolve())
    _LOGGER.debug(
        "loaded API document %s with %d operations and %d tags",
        path,
        len(document.operations),
        len(document.tags),
    )
    return document


def parse_api_document(parsed: Any, *, source_path: Path | None = None) -> ApiDocument:
    """Build an :class:`ApiDocument` from an already decoded document."""
    if not isinstance(parsed, Mapping):
        raise ApiDocumentError("API document root must be a mapping.")
    paths = parsed.get("paths")
    if not isinstance(paths, Mapping):
        raise ApiDocumentError("API document must define 'paths'.")

    operations = tuple(_parse_operations(paths, parsed))
    info = parsed.get("info")
    title = info.get("title") if isinstance(info, Mapping) else None
    return ApiDocument(
        raw=parsed,
        source_path=source_path,
        base_path=_base_path(parsed),
        title=title if isinstance(title, str) else None,
        tags=_parse_tags(parsed.get("tags"), operations),
        operations=operations,
    )


def _parse_operations(paths: Mapping[str, Any], parsed: Mapping[str, Any]) -> list[ApiOperation]:
    operations: list[ApiOperation] = []
    for path, methods in paths.items():
        if not isinstance(methods, Mapping):
            continue
        shared_parameters = _parameter_list(methods.get("parameters"), parsed)
        for method, details in methods.items():
            if method.lower() not in HTTP_METHODS or not isinstance(details, Mapping):
                continue
            parameters = _merge_parameters(
                shared_parameters, _parameter_list(details.get("parameters"), parsed)
            )
            responses = details.get("responses")
            tags = details.get("tags")
            summary = details.get("summary")
            operation_id = details.get("operationId")
            operations.append(
                ApiOperation(
                    path=str(path),
                    method=method.upper(),
                    tags=tuple(tag for tag in tags if isinstance(tag, str))
                    if isinstance(tags, list)
                    else (),
                    summary=summary if isinstance(summary, str) else None,
                    operation_id=operation_id if isinstance(operation_id, str) else None,
                    parameters=parameters,
                    responses=responses if isinstance(responses, Mapping) else {},
                    raw=details,
                )
            )
    return operations


def _parameter_list(value: Any, parsed: Mapping[str, Any]) -> tuple[Mapping[str, Any], ...]:
    if not isinstance(value, list):
        return ()
    parameters: list[Mapping[str, Any]] = []
    for item in value:
        if not isinstance(item, Mapping):
            continue
        pointer = item.get("$ref")
        if not isinstance(pointer, str):
            parameters.append(item)
            continue
        resolved = resolve_pointer(parsed, pointer)
        if resolved is None:
            _LOGGER.warning("skipping parameter with unresolved reference %s", pointer)
            continue
        parameters.append(resolved)
    return tuple(parameters)


def _merge_parameters(
    shared: tuple[Mapping[str, Any], ...], own: tuple[Mapping[str, Any], ...]
) -> tuple[Mapping[str, Any], ...]:
    overridden = {(item.get("name"), item.get("in")) for item in own}
    inherited = tuple(
        item for item in shared if (item.get("name"), item.get("in")) not in overridden
    )
    return inherited + own


def _parse_tags(value: Any, operations: tuple[ApiOperation, ...]) -> tuple[ApiTag, ...]:
    tags: list[ApiTag] = []
    seen: set[str] = set()
    if isinstance(value, list):
        for item in value:
            if not isinstance(item, Mapping) or not isinstance(item.get("name"), str):
                continue
            description = item.get("description")
            tags.append(
                ApiTag(
                    name=item["name"],
                    description=description if isinstance(description, str) else None,
                )
            )
            seen.add(item["name"])
    for operation in operations:
        for name in operation.tags:
            if name not in seen:
                tags.append(ApiTag(name=name))
                seen.add(name)
    return tuple(tags)


def _base_path(parsed: Mapping[str, Any]) -> str:
    base_path = parsed.get("basePath")
    if isinstance(base_path, str):
        return base_path.rstrip("/")
    servers = parsed.get("servers")
    if isinstance(servers, list) and servers and isinstance(servers[0], Mapping):
        url = servers[0].get("url")
        if isinstance(url, str) and url.startswith("/"):
            return url.rstrip("/")
    return ""
