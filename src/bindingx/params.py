"""Typed reads from a loosely-typed request parameter mapping.

Every reader is permissive: an unexpected value shape degrades to ``None``
(or to an empty :class:`~bindingx.models.ExpressionPair`) instead of
raising, and the caller applies its own default.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Optional

from bindingx.converter import to_sequence
from bindingx.core.config import ParamKeysConfig, get_settings
from bindingx.core.types import NativeMapping, ParameterMap
from bindingx.document import DocumentArray, DocumentObject, is_null, to_text
from bindingx.exceptions import MalformedDocumentError
from bindingx.models import ExpressionKind, ExpressionPair

log = logging.getLogger(__name__)


def _keys(keys: Optional[ParamKeysConfig]) -> ParamKeysConfig:
    return keys if keys is not None else get_settings().keys


def get_string(params: ParameterMap, key: str) -> Optional[str]:
    """Return ``params[key]`` as text, or ``None`` if absent or null."""
    value = params.get(key)
    if is_null(value):
        return None
    return to_text(value)


def get_runtime_props(
    params: ParameterMap,
    keys: Optional[ParamKeysConfig] = None,
) -> Optional[list[NativeMapping]]:
    """Return the runtime property list, or ``None`` if absent or not a list of mappings."""
    value = params.get(_keys(keys).runtime_props)
    if is_null(value):
        return None

    if not isinstance(value, (DocumentArray, list, tuple)):
        return None
    try:
        props = to_sequence(value)
    except MalformedDocumentError:
        log.debug("Ignoring malformed runtime props document", exc_info=True)
        return None

    if not all(isinstance(item, Mapping) for item in props):
        return None
    return props


def classify_expression(value: Any) -> ExpressionKind:
    """Classify a raw expression parameter value."""
    if is_null(value):
        return ExpressionKind.ABSENT
    if isinstance(value, str):
        return ExpressionKind.PLAIN
    if isinstance(value, (DocumentObject, Mapping)):
        return ExpressionKind.STRUCTURED
    return ExpressionKind.UNSUPPORTED


def get_expression_pair(
    params: ParameterMap,
    key: str,
    keys: Optional[ParamKeysConfig] = None,
) -> Optional[ExpressionPair]:
    """Extract the expression stored under *key*.

    Accepts the legacy form (a bare string holding the transformed
    expression) and the current form (a mapping with ``origin`` and
    ``transformed`` entries).

    Returns:
        ``None`` when no usable value was supplied, an empty pair when a
        mapping was supplied without text, otherwise the pair as read.
    """
    value = params.get(key)
    kind = classify_expression(value)

    if kind is ExpressionKind.PLAIN:
        return ExpressionPair.create(None, value)
    if kind is ExpressionKind.STRUCTURED:
        return _read_structured(value, _keys(keys))
    return None


def _read_structured(value: Any, keys: ParamKeysConfig) -> ExpressionPair:
    try:
        doc = value if isinstance(value, DocumentObject) else DocumentObject.from_mapping(value)
    except Exception:
        log.warning("Unexpected error reading expression mapping", exc_info=True)
        return ExpressionPair()

    origin = doc.opt_string(keys.origin)
    transformed = doc.opt_string(keys.transformed)
    if not origin and not transformed:
        return ExpressionPair()
    return ExpressionPair.create(origin, transformed)
