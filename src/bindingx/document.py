"""Generic hierarchical document nodes.

A document is a tree of :class:`DocumentObject` and :class:`DocumentArray`
nodes whose leaves are plain scalars (``bool``, ``int``, ``float``, ``str``)
or the :data:`NULL` sentinel. Documents come from :func:`parse_document` or
from :func:`wrap` applied to native Python values, and are flattened back to
plain ``dict``/``list`` structures by :mod:`bindingx.converter`.
"""

from __future__ import annotations

import json
import math
from collections.abc import Iterable, Iterator, Mapping
from typing import Any, Optional, Union

from bindingx.exceptions import MalformedDocumentError

# ── Null sentinel ────────────────────────────────────────────────────


class _Null:
    """The document null value. Distinct from a missing key."""

    _instance: Optional[_Null] = None

    def __new__(cls) -> _Null:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __eq__(self, other: object) -> bool:
        return other is None or other is self

    def __hash__(self) -> int:
        return hash(None)

    def __repr__(self) -> str:
        return "null"

    __str__ = __repr__

    def __reduce__(self) -> tuple:
        return (_Null, ())


NULL = _Null()


def is_null(value: Any) -> bool:
    return value is None or value is NULL


# ── Object / array nodes ─────────────────────────────────────────────


class DocumentObject:
    """String-keyed object node."""

    __slots__ = ("_pairs",)

    def __init__(self, pairs: Union[Mapping[str, Any], Iterable[tuple[str, Any]], None] = None) -> None:
        self._pairs: dict[str, Any] = {}
        if pairs is None:
            return
        items = pairs.items() if isinstance(pairs, Mapping) else pairs
        for key, value in items:
            self._put(key, value)

    @classmethod
    def from_mapping(cls, mapping: Mapping[Any, Any], path: str = "$") -> DocumentObject:
        """Build an object node from a native mapping, wrapping every value.

        Raises:
            MalformedDocumentError: a key is not a string or a value has no
                document representation.
        """
        obj = cls()
        for key, value in mapping.items():
            obj._put(key, wrap(value, f"{path}.{key}"), path)
        return obj

    def _put(self, key: Any, value: Any, path: str = "$") -> None:
        if not isinstance(key, str):
            raise MalformedDocumentError(
                f"object keys must be strings, got {type(key).__name__}", path=f"{path}[{key!r}]"
            )
        self._pairs[key] = value

    def keys(self) -> Iterator[str]:
        return iter(list(self._pairs))

    def get(self, key: str) -> Any:
        """Return the raw child stored under *key*; a missing key is an error."""
        try:
            return self._pairs[key]
        except KeyError:
            raise MalformedDocumentError(f"no value for {key!r}") from None

    def opt(self, key: str) -> Any:
        return self._pairs.get(key)

    def opt_string(self, key: str, fallback: Optional[str] = None) -> Optional[str]:
        """Return the child under *key* as text, or *fallback* if it is missing or null."""
        value = self._pairs.get(key)
        if is_null(value):
            return fallback
        return to_text(value)

    def __len__(self) -> int:
        return len(self._pairs)

    def __contains__(self, key: object) -> bool:
        return key in self._pairs

    def __iter__(self) -> Iterator[str]:
        return self.keys()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DocumentObject):
            return NotImplemented
        return self._pairs == other._pairs

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"DocumentObject({self._pairs!r})"


class DocumentArray:
    """Ordered array node."""

    __slots__ = ("_items",)

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self._items: list[Any] = list(items) if items is not None else []

    def get(self, index: int) -> Any:
        """Return the element at *index*; out-of-range indexes are an error."""
        if not 0 <= index < len(self._items):
            raise MalformedDocumentError(f"index {index} out of range [0..{len(self._items)})")
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DocumentArray):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"DocumentArray({self._items!r})"


# ── Native → document ────────────────────────────────────────────────


def wrap(value: Any, path: str = "$") -> Any:
    """Convert a native value into its document representation.

    Raises:
        MalformedDocumentError: *value* (or something nested in it) has no
            document representation.
    """
    if is_null(value):
        return NULL
    if isinstance(value, (DocumentObject, DocumentArray, bool, int, str)):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            raise MalformedDocumentError(f"non-finite number {value!r}", path=path)
        return value
    if isinstance(value, Mapping):
        return DocumentObject.from_mapping(value, path)
    if isinstance(value, (list, tuple)):
        return DocumentArray(wrap(item, f"{path}[{i}]") for i, item in enumerate(value))
    raise MalformedDocumentError(f"unsupported value type {type(value).__name__}", path=path)


# ── Text form ────────────────────────────────────────────────────────


def _json_default(value: Any) -> Any:
    if isinstance(value, DocumentObject):
        return {key: value.opt(key) for key in value.keys()}
    if isinstance(value, DocumentArray):
        return list(value)
    if value is NULL:
        return None
    raise TypeError(f"{type(value).__name__} is not JSON serializable")


def to_text(value: Any) -> str:
    """Canonical text form of a document or native value.

    Booleans render as ``true``/``false`` and containers as compact JSON;
    containers that cannot be encoded fall back to ``str()``.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is NULL:
        return "null"
    if isinstance(value, (DocumentObject, DocumentArray, Mapping, list, tuple)):
        try:
            return json.dumps(value, separators=(",", ":"), default=_json_default)
        except (TypeError, ValueError):
            return str(value)
    return str(value)


# ── Parsing ──────────────────────────────────────────────────────────


def _adopt(value: Any) -> Any:
    if value is None:
        return NULL
    if isinstance(value, list):
        return DocumentArray(_adopt(item) for item in value)
    return value


def _object_hook(pairs: list[tuple[str, Any]]) -> DocumentObject:
    return DocumentObject((key, _adopt(value)) for key, value in pairs)


def _reject_constant(name: str) -> Any:
    raise MalformedDocumentError(f"non-finite number {name}")


def _parse_float(literal: str) -> float:
    value = float(literal)
    if not math.isfinite(value):
        raise MalformedDocumentError(f"number {literal} overflows a float")
    return value


def parse_document(text: Union[str, bytes]) -> Any:
    """Parse JSON *text* into document nodes.

    Raises:
        MalformedDocumentError: *text* is not valid JSON, is not valid UTF-8,
            nests too deeply, or holds a non-finite number (NaN, Infinity or
            an overflowing literal such as ``1e400``).
    """
    try:
        raw = json.loads(
            text,
            object_pairs_hook=_object_hook,
            parse_constant=_reject_constant,
            parse_float=_parse_float,
        )
        return _adopt(raw)
    except json.JSONDecodeError as exc:
        raise MalformedDocumentError(
            f"invalid JSON document: {exc.msg}", path=f"line {exc.lineno} column {exc.colno}"
        ) from exc
    except UnicodeDecodeError as exc:
        raise MalformedDocumentError(f"document is not valid UTF-8: {exc.reason}") from exc
    except RecursionError as exc:
        raise MalformedDocumentError("document nests too deeply") from exc
