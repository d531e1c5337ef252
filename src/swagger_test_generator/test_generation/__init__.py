"""Test generation exports."""

from .constants import DEFAULT_FILE_NAME_TEMPLATE, DEFAULT_FILE_TEMPLATE, DEFAULT_TEST_TEMPLATE
from .naming import dash_case
from .spec_file_builder import TestTemplates, build_file_name, build_spec_file
from .suite_writer import (
    GenerationRequest,
    TestGenerationError,
    generate_test_files,
    list_tags,
    resolve_templates,
)
from .template_rendering import Fragment, TemplateRenderError, render_template

__all__ = [
    "DEFAULT_FILE_NAME_TEMPLATE",
    "DEFAULT_FILE_TEMPLATE",
    "DEFAULT_TEST_TEMPLATE",
    "Fragment",
    "GenerationRequest",
    "TemplateRenderError",
    "TestGenerationError",
    "TestTemplates",
    "build_file_name",
    "build_spec_file",
    "dash_case",
    "generate_test_files",
    "list_tags",
    "render_template",
    "resolve_templates",
]
