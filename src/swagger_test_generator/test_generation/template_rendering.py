"""Placeholder substitution for test and file name templates."""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

_PLACEHOLDER = re.compile(r"\{\{([^}]+)\}\}")
_MISSING = object()


class TemplateRenderError(Exception):
    """Raised when a template references an unknown or unrenderable variable."""


@dataclass(frozen=True)
class Fragment:
    """Template value rendered from the column at which its placeholder starts."""

    render: Callable[[int], str]


def render_template(template: str, variables: Mapping[str, Any], *, strict: bool = False) -> str:
    """Render a ``{{variable}}`` template.

    Supports dotted access such as ``{{tag.name}}`` over mappings and object
    attributes. A :class:`Fragment` value is rendered with the column at which
    its placeholder starts, so multi-line fragments can indent their
    continuation lines to line up with the first one. Any other callable
    (a method reached through dotted access, say) is an error.

    Args:
      template: Template text.
      variables: Values available to placeholders.
      strict: Raise instead of substituting an empty string for unknown names.
    """

    def replace_match(match: re.Match[str]) -> str:
        name = match.group(1).strip()
        value = _lookup(variables, name)
        if value is _MISSING or value is None:
            if strict:
                raise TemplateRenderError(f"Template variable '{name}' is not defined.")
            return ""
        if isinstance(value, Fragment):
            return value.render(_column_of(template, match.start()))
        if callable(value):
            raise TemplateRenderError(f"Template variable '{name}' is not a value.")
        return str(value)

    return _PLACEHOLDER.sub(replace_match, template)


def _lookup(variables: Mapping[str, Any], dotted_name: str) -> Any:
    current: Any = variables
    for part in dotted_name.split("."):
        if isinstance(current, Mapping):
            current = current.get(part, _MISSING)
        elif current is not _MISSING and hasattr(current, part):
            current = getattr(current, part)
        else:
            return _MISSING
        if current is _MISSING:
            return _MISSING
    return current


def _column_of(template: str, offset: int) -> int:
    return offset - (template.rfind("\n", 0, offset) + 1)
