"""Shared type aliases for the binding helpers."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

# Converted document value: None, scalar, dict or list
NativeValue = Any
NativeMapping = dict[str, NativeValue]
NativeList = list[NativeValue]

# Request parameters handed in by the caller
ParameterMap = Mapping[str, Any]
