"""Tests for rotation, transform-origin and perspective normalization."""

from __future__ import annotations

import math

import pytest

from bindingx.geometry import (
    normalize_rotation,
    normalized_perspective_value,
    parse_transform_origin,
)
from bindingx.models import AnchorPoint


class TestNormalizeRotation:
    @pytest.mark.parametrize(
        ("degrees", "expected"),
        [
            (0, 0),
            (45, 45),
            (180, 180),
            (-180, 180),
            (190, -170),
            (270, -90),
            (-90, -90),
            (-190, 170),
            (-270, 90),
            (360, 0),
            (540, 180),
            (-540, 180),
            (725.5, 5.5),
        ],
    )
    def test_known_values(self, degrees: float, expected: float) -> None:
        assert normalize_rotation(degrees) == expected

    @pytest.mark.parametrize("degrees", [-359.5, -180, -45, 0, 30.25, 179, 180, 181, 359])
    @pytest.mark.parametrize("turns", [-3, -1, 1, 2])
    def test_periodic(self, degrees: float, turns: int) -> None:
        assert normalize_rotation(degrees + 360 * turns) == normalize_rotation(degrees)

    @pytest.mark.parametrize("degrees", [-1000.5, -721, -180.5, -0.5, 0.5, 179.5, 180.5, 1000])
    def test_in_range(self, degrees: float) -> None:
        result = normalize_rotation(degrees)
        assert -180 < result <= 180

    def test_idempotent(self) -> None:
        for degrees in (-179.5, -90, 0, 90, 180):
            assert normalize_rotation(normalize_rotation(degrees)) == normalize_rotation(degrees)

    def test_non_finite(self) -> None:
        assert math.isnan(normalize_rotation(math.inf))
        assert math.isnan(normalize_rotation(-math.inf))
        assert math.isnan(normalize_rotation(math.nan))


class TestParseTransformOrigin:
    def test_left_top(self) -> None:
        assert parse_transform_origin("left top", 100, 50) == (0, 0)

    def test_center_center(self) -> None:
        assert parse_transform_origin("center center", 100, 50) == (50, 25)

    def test_right_bottom(self) -> None:
        assert parse_transform_origin("right bottom", 100, 50) == (100, 50)

    def test_returns_anchor_point(self) -> None:
        point = parse_transform_origin("right top", 100, 50)
        assert isinstance(point, AnchorPoint)
        assert point.x == 100.0
        assert point.y == 0.0

    def test_empty_or_none(self) -> None:
        assert parse_transform_origin("", 100, 50) is None
        assert parse_transform_origin(None, 100, 50) is None

    def test_single_token(self) -> None:
        assert parse_transform_origin("left", 100, 50) is None

    def test_trailing_spaces_only(self) -> None:
        assert parse_transform_origin("left   ", 100, 50) is None

    def test_run_of_spaces(self) -> None:
        assert parse_transform_origin("left    bottom", 100, 50) == (0, 50)

    def test_unknown_keywords_fall_back_to_center(self) -> None:
        assert parse_transform_origin("top left", 100, 50) == (50, 25)
        assert parse_transform_origin("10px 20px", 100, 50) == (50, 25)

    def test_tab_is_not_a_separator(self) -> None:
        assert parse_transform_origin("left\ttop", 100, 50) is None

    def test_odd_sizes_keep_fraction(self) -> None:
        assert parse_transform_origin("center bottom", 101, 51) == (50.5, 51)


class TestNormalizedPerspectiveValue:
    def test_default_multiplier(self) -> None:
        assert normalized_perspective_value(2.0, 100) == 1000

    def test_truncates_toward_zero(self) -> None:
        assert normalized_perspective_value(1.5, 3) == 22
        assert normalized_perspective_value(1.5, -3) == -22

    def test_explicit_multiplier(self) -> None:
        assert normalized_perspective_value(3.0, 10, multiplier=1.0) == 30

    def test_multiplier_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BINDINGX_TRANSFORM_CAMERA_DISTANCE_MULTIPLIER", "2")
        assert normalized_perspective_value(2.0, 100) == 400

    @pytest.mark.parametrize("density", [0, -1.0])
    def test_rejects_non_positive_density(self, density: float) -> None:
        with pytest.raises(ValueError, match="density"):
            normalized_perspective_value(density, 100)
