"""Schema rendering exports."""

from .schema_models import MAX_RENDER_DEPTH, RenderOptions, SchemaKind, SchemaNode
from .schema_renderer import (
    DEPTH_EXCEEDED_MARKER,
    UNKNOWN_TYPE_MARKER,
    UNRESOLVED_REFERENCE_MARKER,
    is_sentinel,
    js_string,
    member_path,
    render_assertions,
    render_example,
    value_slot,
)

__all__ = [
    "MAX_RENDER_DEPTH",
    "RenderOptions",
    "SchemaKind",
    "SchemaNode",
    "DEPTH_EXCEEDED_MARKER",
    "UNKNOWN_TYPE_MARKER",
    "UNRESOLVED_REFERENCE_MARKER",
    "is_sentinel",
    "js_string",
    "member_path",
    "render_assertions",
    "render_example",
    "value_slot",
]
