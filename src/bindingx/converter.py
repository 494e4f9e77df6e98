"""Flatten generic documents into native ``dict``/``list`` structures."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Union

from bindingx.core.types import NativeList, NativeMapping, NativeValue
from bindingx.document import NULL, DocumentArray, DocumentObject
from bindingx.exceptions import MalformedDocumentError

ObjectNode = Union[DocumentObject, Mapping[str, Any]]
ArrayNode = Union[DocumentArray, list, tuple]


def to_mapping(doc: ObjectNode | None) -> NativeMapping:
    """Convert an object node (recursively) into a plain ``dict``.

    ``None`` yields an empty dict.

    Raises:
        MalformedDocumentError: the document failed while being enumerated.
    """
    if doc is None:
        return {}
    result: NativeMapping = {}
    try:
        if isinstance(doc, DocumentObject):
            for key in doc.keys():
                result[key] = _from_document(doc.get(key))
        else:
            for key, value in doc.items():
                result[key] = _from_document(value)
    except MalformedDocumentError:
        raise
    except Exception as exc:
        raise MalformedDocumentError(f"object enumeration failed: {exc}") from exc
    return result


def to_sequence(doc: ArrayNode | None) -> NativeList:
    """Convert an array node (recursively) into a plain ``list``.

    ``None`` yields an empty list.

    Raises:
        MalformedDocumentError: *doc* is a string rather than an array, or
            the document failed while being indexed.
    """
    if doc is None:
        return []
    if isinstance(doc, (str, bytes, bytearray)):
        raise MalformedDocumentError(f"expected an array node, got {type(doc).__name__}")
    result: NativeList = []
    try:
        if isinstance(doc, DocumentArray):
            for index in range(len(doc)):
                result.append(_from_document(doc.get(index)))
        else:
            for item in doc:
                result.append(_from_document(item))
    except MalformedDocumentError:
        raise
    except Exception as exc:
        raise MalformedDocumentError(f"array traversal failed: {exc}") from exc
    return result


def _from_document(value: Any) -> NativeValue:
    if value is NULL:
        return None
    if isinstance(value, (DocumentObject, Mapping)):
        return to_mapping(value)
    if isinstance(value, (DocumentArray, list, tuple)):
        return to_sequence(value)
    return value
