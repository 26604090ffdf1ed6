"""
Tests - scalar to RGB color mapping.
"""

from __future__ import annotations

import pytest

from geotagger.core.errors import DegenerateRangeError, InputValidationError
from geotagger.schemas.raster import ColorScheme
from geotagger.services.colormap import color_for, normalize, to_css

STEPS = [i / 200 for i in range(201)]


def _ramp(scheme: ColorScheme) -> list[tuple[int, int, int]]:
    return [color_for(t, 0.0, 1.0, scheme) for t in STEPS]


class TestEndpoints:
    @pytest.mark.parametrize(
        "scheme, low, high",
        [
            (ColorScheme.VEGETATION, (220, 50, 50), (50, 160, 110)),
            (ColorScheme.MOISTURE, (255, 255, 255), (55, 155, 255)),
            (ColorScheme.TEMPERATURE, (100, 100, 255), (255, 55, 0)),
        ],
    )
    def test_range_ends(self, scheme, low, high) -> None:
        assert color_for(0.0, 0.0, 1.0, scheme) == low
        assert color_for(1.0, 0.0, 1.0, scheme) == high

    def test_vegetation_breakpoints(self) -> None:
        assert color_for(0.3, 0.0, 1.0, ColorScheme.VEGETATION) == (160, 200, 50)
        assert color_for(0.6, 0.0, 1.0, ColorScheme.VEGETATION) == (50, 200, 50)

    def test_value_range_is_rescaled(self) -> None:
        assert color_for(35.0, 10.0, 60.0, "moisture") == color_for(0.5, 0.0, 1.0, "moisture")

    def test_out_of_range_values_are_clamped(self) -> None:
        assert color_for(-5.0, 0.0, 1.0, "temperature") == color_for(0.0, 0.0, 1.0, "temperature")
        assert color_for(7.0, 0.0, 1.0, "temperature") == color_for(1.0, 0.0, 1.0, "temperature")


class TestMonotonic:
    def test_vegetation_never_gets_redder(self) -> None:
        reds = [c[0] for c in _ramp(ColorScheme.VEGETATION)]
        assert all(b <= a for a, b in zip(reds, reds[1:]))

    def test_moisture_only_loses_red_and_green(self) -> None:
        ramp = _ramp(ColorScheme.MOISTURE)
        for a, b in zip(ramp, ramp[1:]):
            assert b[0] <= a[0] and b[1] <= a[1] and b[2] == 255

    def test_temperature_warms(self) -> None:
        ramp = _ramp(ColorScheme.TEMPERATURE)
        for a, b in zip(ramp, ramp[1:]):
            assert b[0] >= a[0]
            assert b[2] <= a[2]

    @pytest.mark.parametrize("scheme", list(ColorScheme))
    def test_channels_in_byte_range(self, scheme) -> None:
        for rgb in _ramp(scheme):
            assert all(0 <= ch <= 255 for ch in rgb)


class TestDeterminismAndErrors:
    @pytest.mark.parametrize("scheme", list(ColorScheme))
    def test_same_input_same_color(self, scheme) -> None:
        assert color_for(0.4242, 0.0, 1.0, scheme) == color_for(0.4242, 0.0, 1.0, scheme)

    @pytest.mark.parametrize("vmin, vmax", [(1.0, 1.0), (2.0, 1.0)])
    def test_degenerate_range_rejected(self, vmin, vmax) -> None:
        with pytest.raises(DegenerateRangeError) as info:
            color_for(1.0, vmin, vmax, "vegetation")
        assert isinstance(info.value, InputValidationError)

    def test_normalize_midpoint(self) -> None:
        assert normalize(5.0, 0.0, 10.0) == 0.5

    def test_unknown_scheme(self) -> None:
        with pytest.raises(ValueError):
            color_for(0.5, 0.0, 1.0, "infrared")

    def test_css_format(self) -> None:
        assert to_css((1, 2, 3)) == "rgb(1, 2, 3)"
