"""Tests for the angle conversion helpers."""

import math

import jax.numpy as jnp
import pytest

from orientjax.constants import DEG2RAD
from orientjax.utils import deg_to_rad_or_zero, from_radians, to_radians


class TestDegToRadOrZero:
    def test_none_is_zero(self):
        assert deg_to_rad_or_zero(None) == 0.0

    @pytest.mark.parametrize("angle", [0.0, 90.0, -48.0, 296.0, 359.999])
    def test_matches_math_radians(self, angle):
        assert deg_to_rad_or_zero(angle) == pytest.approx(math.radians(angle), abs=1e-15)

    def test_nan_passes_through(self):
        assert math.isnan(deg_to_rad_or_zero(float("nan")))

    def test_deg2rad_constant(self):
        assert DEG2RAD == pytest.approx(math.pi / 180.0, abs=1e-18)


class TestRadians:
    def test_to_radians(self):
        assert float(to_radians(180.0, True)) == pytest.approx(math.pi, abs=1e-12)
        assert float(to_radians(1.5, False)) == pytest.approx(1.5, abs=1e-12)

    def test_from_radians(self):
        assert float(from_radians(math.pi, True)) == pytest.approx(180.0, abs=1e-10)
        assert float(from_radians(1.5, False)) == pytest.approx(1.5, abs=1e-12)

    def test_from_radians_array(self):
        out = from_radians(jnp.array([0.0, math.pi / 2]), True)
        assert float(out[1]) == pytest.approx(90.0, abs=1e-10)
