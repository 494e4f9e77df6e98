"""Value types returned by the binding helpers."""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple, Optional

from pydantic import BaseModel, ConfigDict

# ── Expression pair ──────────────────────────────────────────────────


class ExpressionKind(str, Enum):
    """Shape of a raw expression parameter value."""

    ABSENT = "absent"
    PLAIN = "plain"  # legacy single-expression string
    STRUCTURED = "structured"  # {"origin": ..., "transformed": ...}
    UNSUPPORTED = "unsupported"


class ExpressionPair(BaseModel):
    """An expression in authored (``origin``) and evaluator-ready (``transformed``) form.

    ``ExpressionPair()`` with both fields unset is a valid *empty* pair: a
    value was supplied but carried no usable text. Callers distinguish it
    from ``None``, which means no value was supplied at all.
    """

    model_config = ConfigDict(frozen=True)

    origin: Optional[str] = None
    transformed: Optional[str] = None

    @classmethod
    def create(cls, origin: Optional[str], transformed: Optional[str]) -> ExpressionPair:
        return cls(origin=origin, transformed=transformed)

    @property
    def is_empty(self) -> bool:
        return not self.origin and not self.transformed


# ── Geometry ─────────────────────────────────────────────────────────


class AnchorPoint(NamedTuple):
    """Pixel coordinates relative to an element's top-left corner."""

    x: float
    y: float
