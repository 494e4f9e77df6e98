"""Shared fixtures for bindingx tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from bindingx.core.config import ParamKeysConfig, get_settings
from bindingx.document import DocumentObject, parse_document


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    """Drop cached settings so env overrides made by a test take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def keys() -> ParamKeysConfig:
    """Default parameter key names."""
    return ParamKeysConfig()


@pytest.fixture
def binding_document() -> DocumentObject:
    """A parsed binding request with nested objects, arrays and nulls."""
    return parse_document(
        """
        {
          "eventType": "pan",
          "anchor": null,
          "options": {"touchAction": "auto", "pagingEnabled": false},
          "props": [
            {"element": "box", "property": "transform.rotateZ",
             "expression": {"origin": "x+1", "transformed": "{\\"type\\":\\"+\\"}"}},
            {"element": "box", "property": "opacity", "config": null}
          ],
          "exitExpression": "x>100",
          "ratio": 0.5
        }
        """
    )
