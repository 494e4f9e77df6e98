"""bindingx: data-conversion and geometry helpers for animation bindings.

Public API::

    from bindingx import (
        to_mapping, to_sequence, parse_document,
        get_string, get_runtime_props, get_expression_pair,
        normalize_rotation, parse_transform_origin, normalized_perspective_value,
        ExpressionPair, AnchorPoint,
    )
"""

from __future__ import annotations

from bindingx.converter import to_mapping, to_sequence
from bindingx.core.config import AppSettings, get_settings
from bindingx.core.logging_config import setup_logging
from bindingx.document import NULL, DocumentArray, DocumentObject, parse_document, wrap
from bindingx.exceptions import BindingXError, MalformedDocumentError
from bindingx.geometry import normalize_rotation, normalized_perspective_value, parse_transform_origin
from bindingx.models import AnchorPoint, ExpressionKind, ExpressionPair
from bindingx.params import classify_expression, get_expression_pair, get_runtime_props, get_string

__all__ = [
    # Documents
    "NULL",
    "DocumentObject",
    "DocumentArray",
    "wrap",
    "parse_document",
    "to_mapping",
    "to_sequence",
    # Parameters
    "get_string",
    "get_runtime_props",
    "get_expression_pair",
    "classify_expression",
    "ExpressionPair",
    "ExpressionKind",
    # Geometry
    "normalize_rotation",
    "parse_transform_origin",
    "normalized_perspective_value",
    "AnchorPoint",
    # Config / errors
    "AppSettings",
    "get_settings",
    "setup_logging",
    "BindingXError",
    "MalformedDocumentError",
]
