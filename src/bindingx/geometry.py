"""Geometry normalization for element transforms."""

from __future__ import annotations

import math
from typing import Optional

from bindingx.core.config import get_settings
from bindingx.models import AnchorPoint

# ── Rotation ─────────────────────────────────────────────────────────


def normalize_rotation(rotation: float) -> float:
    """Map an angle in degrees onto (-180, 180].

    Non-finite input returns ``nan``.
    """
    if math.isinf(rotation):
        return math.nan
    # fmod keeps the sign of the dividend
    rotation = math.fmod(rotation, 360)
    if rotation >= 0:
        if rotation <= 180:
            return rotation
        return math.fmod(rotation, 180) - 180
    if rotation > -180:
        return rotation
    return 180 + math.fmod(rotation, 180)


# ── Perspective ──────────────────────────────────────────────────────


def normalized_perspective_value(density: float, raw: float, multiplier: Optional[float] = None) -> int:
    """Convert a perspective value to a camera distance in physical pixels.

    The result makes a perspective transform look the same across platforms
    with different display densities.
    """
    if density <= 0:
        raise ValueError(f"density must be positive, got {density}")
    if multiplier is None:
        multiplier = get_settings().transform.camera_distance_multiplier
    return int(density * raw * multiplier)


# ── Transform origin ─────────────────────────────────────────────────

_HORIZONTAL = {"left": 0.0, "right": 1.0, "center": 0.5}
_VERTICAL = {"top": 0.0, "bottom": 1.0, "center": 0.5}


def parse_transform_origin(value: Optional[str], width: float, height: float) -> Optional[AnchorPoint]:
    """Resolve a ``"<horizontal> <vertical>"`` anchor string against an element size.

    Unknown keywords fall back to the center of the axis. Returns ``None``
    for empty input or when no second token follows the first space.

    >>> parse_transform_origin("right top", 100, 50)
    AnchorPoint(x=100.0, y=0.0)
    """
    if not value:
        return None
    first_space = value.find(" ")
    if first_space == -1:
        return None

    rest = value[first_space:].lstrip(" ")
    if not rest:
        return None

    x = value[:first_space].strip()
    y = rest.strip()
    pivot_x = _HORIZONTAL.get(x, 0.5) * width
    pivot_y = _VERTICAL.get(y, 0.5) * height
    return AnchorPoint(float(pivot_x), float(pivot_y))
