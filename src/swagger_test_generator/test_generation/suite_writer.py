"""Test suite generation use case: one spec file per tag."""

from __future__ import annotations

import logging
import re
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path

from swagger_test_generator.api_documents import (
    ApiDocument,
    ApiDocumentError,
    select_operations,
)
from swagger_test_generator.schema_rendering import MAX_RENDER_DEPTH, RenderOptions

from .spec_file_builder import TestTemplates, build_file_name, build_spec_file
from .template_rendering import TemplateRenderError

_LOGGER = logging.getLogger(__name__)

_MAX_WORKERS = 4


class TestGenerationError(Exception):
    """Raised when a spec file cannot be generated or written."""

    __test__ = False


@dataclass(frozen=True)
class GenerationRequest:  # pylint: disable=too-many-instance-attributes
    """Input contract for one generation run."""

    directory: Path
    tag_names: tuple[str, ...] | None = None
    methods: tuple[str, ...] | None = None
    path_pattern: re.Pattern[str] | None = None
    required_only: bool = False
    overwrite: bool = False
    templates: TestTemplates = field(default_factory=TestTemplates)
    max_depth: int = MAX_RENDER_DEPTH


def generate_test_files(document: ApiDocument, request: GenerationRequest) -> tuple[Path, ...]:
    """Write one spec file per requested tag and return the written paths in tag order.

    All tags are generated when ``request.tag_names`` is not set. The first
    failing tag aborts the run with :class:`TestGenerationError`.
    """
    tag_names = request.tag_names or tuple(tag.name for tag in document.tags)
    options = RenderOptions(
        resolve_reference=document.resolve_reference,
        required_only=request.required_only,
        max_depth=request.max_depth,
    )
    request.directory.mkdir(parents=True, exist_ok=True)

    with ThreadPoolExecutor(max_workers=_MAX_WORKERS) as executor:
        futures = [
            executor.submit(_generate_tag_file, document, tag_name, request, options)
            for tag_name in tag_names
        ]
        return tuple(future.result() for future in futures)


def list_tags(document: ApiDocument) -> tuple[tuple[str, str], ...]:
    """Return ``(name, description)`` rows for every tag of the document."""
    return tuple((tag.name, tag.description or "") for tag in document.tags)


def _generate_tag_file(
    document: ApiDocument,
    tag_name: str,
    request: GenerationRequest,
    options: RenderOptions,
) -> Path:
    try:
        operations = select_operations(
            document,
            tag_name,
            methods=request.methods,
            path_pattern=request.path_pattern,
        )
        tag = document.find_tag(tag_name)
        assert tag is not None
        content = build_spec_file(
            document, tag, operations, templates=request.templates, options=options
        )
        file_name = build_file_name(document, tag, request.templates.file_name_template)
    except (ApiDocumentError, TemplateRenderError) as exc:
        raise TestGenerationError(str(exc)) from exc

    destination = (request.directory / file_name).resolve()
    try:
        with destination.open("w" if request.overwrite else "x", encoding="utf-8") as handle:
            handle.write(content)
    except FileExistsError as exc:
        raise TestGenerationError(f"Test file already exists: {destination}") from exc
    except OSError as exc:
        raise TestGenerationError(f"Failed to write test file {destination}: {exc}") from exc

    _LOGGER.info("wrote %d tests for tag '%s' to %s", len(operations), tag_name, destination)
    return destination


def resolve_templates(
    *,
    file_template: Path | None = None,
    test_template: Path | None = None,
    file_name_template: str | None = None,
) -> TestTemplates:
    """Build templates from optional custom template files."""
    defaults = TestTemplates()
    try:
        return TestTemplates(
            file_template=_read_template(file_template) or defaults.file_template,
            test_template=_read_template(test_template) or defaults.test_template,
            file_name_template=file_name_template or defaults.file_name_template,
        )
    except OSError as exc:
        raise TestGenerationError(f"Failed to read template: {exc}") from exc


def _read_template(path: Path | None) -> str | None:
    if path is None:
        return None
    return path.read_text(encoding="utf-8")
