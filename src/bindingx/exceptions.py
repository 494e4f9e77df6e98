"""Exception hierarchy for bindingx."""

from __future__ import annotations

from typing import Optional


class BindingXError(Exception):
    """Base exception for all bindingx errors."""


class MalformedDocumentError(BindingXError):
    """Raised when a hierarchical document cannot be built or traversed."""

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        if path:
            message = f"{message} (at {path})"
        super().__init__(message)
        self.path = path
