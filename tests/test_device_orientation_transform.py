"""Tests for the device orientation to camera rotation transform."""

import math

import jax
import jax.numpy as jnp
import pytest

from orientjax import EulerAngle, EulerAngleOrder, Quaternion
from orientjax.device_orientation import (
    CAMERA_BACK,
    compute_rotation,
    compute_rotation_array,
)

PI = math.pi
ATOL = 1e-12

_Z = jnp.array([0.0, 0.0, 1.0])

_ORIENTATIONS = [
    (0.0, 0.0, 0.0, 0.0),
    (PI / 2, 0.0, 0.0, 0.0),
    (0.3, 1.2, -0.4, 0.0),
    (2.5, -0.9, 0.7, PI / 2),
    (5.9, 3.0, -1.5, -PI / 2),
    (1.0, 0.5, 0.25, PI),
]


def _assert_quat_close(q1, q2, atol=ATOL):
    v1 = q1.to_vector()
    v2 = q2.to_vector()
    for i in range(4):
        assert float(v1[i]) == pytest.approx(float(v2[i]), abs=atol)


class TestComputeRotation:
    def test_zero_is_camera_back(self):
        q = compute_rotation(0.0, 0.0, 0.0, 0.0)
        expected = jnp.array(CAMERA_BACK)
        assert jnp.array_equal(q.to_vector(), expected)

    def test_camera_back_is_minus_90_about_x(self):
        q = Quaternion.from_axis_angle(jnp.array([1.0, 0.0, 0.0]), -PI / 2)
        _assert_quat_close(q, Quaternion._from_internal(jnp.array(CAMERA_BACK)))

    def test_heading_90(self):
        q = compute_rotation(PI / 2, 0.0, 0.0, 0.0)
        _assert_quat_close(q, Quaternion._from_internal(jnp.array([0.5, -0.5, 0.5, 0.5])))

    @pytest.mark.parametrize("alpha,beta,gamma,screen", _ORIENTATIONS)
    def test_unit_norm(self, alpha, beta, gamma, screen):
        q = compute_rotation(alpha, beta, gamma, screen)
        assert float(q.norm()) == pytest.approx(1.0, abs=1e-12)

    @pytest.mark.parametrize("alpha,beta,gamma,screen", _ORIENTATIONS)
    def test_screen_compensation_is_right_multiplied(self, alpha, beta, gamma, screen):
        q = compute_rotation(alpha, beta, gamma, screen)
        q_natural = compute_rotation(alpha, beta, gamma, 0.0)
        expected = q_natural * Quaternion.from_axis_angle(_Z, -screen)
        _assert_quat_close(q, expected)

    @pytest.mark.parametrize("alpha,beta,gamma,screen", _ORIENTATIONS)
    def test_matches_staged_composition(self, alpha, beta, gamma, screen):
        q_device = EulerAngle(EulerAngleOrder.YXZ, beta, alpha, -gamma).to_quaternion()
        q_back = Quaternion.from_axis_angle(jnp.array([1.0, 0.0, 0.0]), -PI / 2)
        q_screen = Quaternion.from_axis_angle(_Z, -screen)
        _assert_quat_close(compute_rotation(alpha, beta, gamma, screen), q_device * q_back * q_screen)

    def test_flat_device_camera_looks_down(self):
        # Device lying flat, screen up: the back camera looks at the floor.
        q = compute_rotation(0.0, 0.0, 0.0, 0.0)
        # Camera forward is -Z in its own frame; take minus the third column of R(q).
        forward = -jnp.array([
            2.0 * (q.x * q.z + q.w * q.y),
            2.0 * (q.y * q.z - q.w * q.x),
            1.0 - 2.0 * (q.x**2 + q.y**2),
        ])
        assert float(forward[1]) == pytest.approx(-1.0, abs=ATOL)

    def test_nan_propagates(self):
        q = compute_rotation(float("nan"), 0.0, 0.0, 0.0)
        assert bool(jnp.all(jnp.isnan(q.to_vector())))

    def test_out_of_range_not_clamped(self):
        q1 = compute_rotation(0.4 + 2.0 * PI, 0.0, 0.0, 0.0)
        q2 = compute_rotation(0.4, 0.0, 0.0, 0.0)
        # A full turn flips the quaternion sign rather than being wrapped away
        _assert_quat_close(q1, -q2, atol=1e-9)


class TestComputeRotationArray:
    def test_returns_array(self):
        q = compute_rotation_array(0.1, 0.2, 0.3, 0.0)
        assert q.shape == (4,)

    def test_jit(self):
        q_jit = jax.jit(compute_rotation_array)(0.1, 0.2, 0.3, PI / 2)
        q = compute_rotation_array(0.1, 0.2, 0.3, PI / 2)
        assert jnp.allclose(q_jit, q, atol=ATOL)

    def test_vmap(self):
        alphas = jnp.linspace(0.0, PI, 5)
        zeros = jnp.zeros(5)
        qs = jax.vmap(compute_rotation_array)(alphas, zeros, zeros, zeros)
        assert qs.shape == (5, 4)
        for i in range(5):
            expected = compute_rotation_array(alphas[i], 0.0, 0.0, 0.0)
            assert jnp.allclose(qs[i], expected, atol=ATOL)
