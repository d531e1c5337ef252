"""API document exports."""

from .document_loader import ApiDocumentError, load_api_document, parse_api_document
from .document_models import ApiDocument, ApiOperation, ApiTag, SuccessResponse
from .operation_selection import (
    MissingBodySchemaError,
    find_body_schema,
    find_parameters,
    find_success_response,
    select_operations,
)

__all__ = [
    "ApiDocument",
    "ApiDocumentError",
    "ApiOperation",
    "ApiTag",
    "MissingBodySchemaError",
    "SuccessResponse",
    "find_body_schema",
    "find_parameters",
    "find_success_response",
    "load_api_document",
    "parse_api_document",
    "select_operations",
]
