"""Unit tests for attitude representation classes.

Uses float64 for precision.  Euler conversions are checked against
explicit products of single-axis quaternions, which is how an intrinsic
sequence is defined.
"""

import math

import jax
import jax.numpy as jnp
import pytest

from orientjax import EulerAngle, EulerAngleOrder, Quaternion, SceneObject

SQRT2_2 = math.sqrt(2.0) / 2.0
PI = math.pi
ATOL = 1e-12

_AXES = {
    "X": jnp.array([1.0, 0.0, 0.0]),
    "Y": jnp.array([0.0, 1.0, 0.0]),
    "Z": jnp.array([0.0, 0.0, 1.0]),
}


def _assert_quat_close(q1, q2, atol=ATOL):
    v1 = q1.to_vector()
    v2 = q2.to_vector()
    for i in range(4):
        assert float(v1[i]) == pytest.approx(float(v2[i]), abs=atol)


def _assert_same_rotation(q1, q2, atol=1e-9):
    # q and -q represent the same rotation
    assert abs(float(q1.dot(q2))) == pytest.approx(1.0, abs=atol)


# ===========================================================================
# EulerAngleOrder
# ===========================================================================


class TestEulerAngleOrder:
    def test_all_orders_exist(self):
        orders = list(EulerAngleOrder)
        assert len(orders) == 6

    def test_values_contiguous(self):
        for i, order in enumerate(EulerAngleOrder):
            assert order.value == i

    def test_names_are_tait_bryan(self):
        for order in EulerAngleOrder:
            assert sorted(order.name) == ["X", "Y", "Z"]


# ===========================================================================
# Quaternion
# ===========================================================================


class TestQuaternion:
    def test_new_identity(self):
        q = Quaternion(1.0, 0.0, 0.0, 0.0)
        assert float(q.w) == pytest.approx(1.0, abs=ATOL)
        assert float(q.x) == pytest.approx(0.0, abs=ATOL)
        assert float(q.y) == pytest.approx(0.0, abs=ATOL)
        assert float(q.z) == pytest.approx(0.0, abs=ATOL)

    def test_identity_factory(self):
        _assert_quat_close(Quaternion.identity(), Quaternion(1.0, 0.0, 0.0, 0.0))

    def test_new_normalizes(self):
        q = Quaternion(1.0, 1.0, 1.0, 1.0)
        assert float(q.w) == pytest.approx(0.5, abs=ATOL)
        assert float(q.x) == pytest.approx(0.5, abs=ATOL)
        assert float(q.y) == pytest.approx(0.5, abs=ATOL)
        assert float(q.z) == pytest.approx(0.5, abs=ATOL)

    def test_from_vector_scalar_last(self):
        v = jnp.array([0.0, 0.0, 0.0, 1.0])
        q = Quaternion.from_vector(v, scalar_first=False)
        assert float(q.w) == pytest.approx(1.0, abs=ATOL)

    def test_to_vector_scalar_last(self):
        q = Quaternion(0.5, 0.5, -0.5, 0.5)
        v = q.to_vector(scalar_first=False)
        assert float(v[2]) == pytest.approx(0.5, abs=ATOL)
        assert float(v[3]) == pytest.approx(0.5, abs=ATOL)

    def test_from_axis_angle_z_90(self):
        q = Quaternion.from_axis_angle(jnp.array([0.0, 0.0, 1.0]), 90.0, use_degrees=True)
        _assert_quat_close(q, Quaternion(SQRT2_2, 0.0, 0.0, SQRT2_2))

    def test_from_axis_angle_normalizes_axis(self):
        q1 = Quaternion.from_axis_angle(jnp.array([0.0, 3.0, 0.0]), 0.4)
        q2 = Quaternion.from_axis_angle(jnp.array([0.0, 1.0, 0.0]), 0.4)
        _assert_quat_close(q1, q2)

    def test_multiply_composes_rotations(self):
        z = jnp.array([0.0, 0.0, 1.0])
        q45 = Quaternion.from_axis_angle(z, PI / 4)
        q90 = Quaternion.from_axis_angle(z, PI / 2)
        _assert_quat_close(q45 * q45, q90)

    def test_multiply_by_conjugate_is_identity(self):
        q = Quaternion(0.3, -0.4, 0.5, 0.1)
        _assert_quat_close(q * q.conjugate(), Quaternion.identity())

    def test_multiply_not_commutative(self):
        qx = Quaternion.from_axis_angle(_AXES["X"], PI / 2)
        qy = Quaternion.from_axis_angle(_AXES["Y"], PI / 2)
        assert qx * qy != qy * qx

    def test_multiply_other_type(self):
        q = Quaternion.identity()
        with pytest.raises(TypeError):
            q * 2.0

    def test_norm(self):
        q = Quaternion(1.0, 2.0, 3.0, 4.0)
        assert float(q.norm()) == pytest.approx(1.0, abs=ATOL)

    def test_dot_self(self):
        q = Quaternion(0.3, -0.4, 0.5, 0.1)
        assert float(q.dot(q)) == pytest.approx(1.0, abs=ATOL)

    def test_angle_to(self):
        y = _AXES["Y"]
        q1 = Quaternion.from_axis_angle(y, 0.1)
        q2 = Quaternion.from_axis_angle(y, 0.4)
        assert float(q1.angle_to(q2)) == pytest.approx(0.3, abs=1e-9)

    def test_angle_to_negated_is_zero(self):
        q = Quaternion(0.3, -0.4, 0.5, 0.1)
        assert float(q.angle_to(-q)) == pytest.approx(0.0, abs=1e-6)

    def test_equality(self):
        assert Quaternion(1.0, 0.0, 0.0, 0.0) == Quaternion.identity()
        assert Quaternion(1.0, 0.0, 0.0, 0.0) != Quaternion(0.0, 1.0, 0.0, 0.0)

    def test_getitem(self):
        q = Quaternion(0.5, 0.5, -0.5, 0.5)
        assert float(q[2]) == pytest.approx(-0.5, abs=ATOL)

    def test_str_repr(self):
        q = Quaternion.identity()
        assert str(q).startswith("Quaternion(w=1.000000")
        assert repr(q).startswith("Quaternion(w=1.0")

    def test_pytree_roundtrip(self):
        q = Quaternion(0.3, -0.4, 0.5, 0.1)
        leaves, treedef = jax.tree_util.tree_flatten(q)
        assert len(leaves) == 1
        _assert_quat_close(jax.tree_util.tree_unflatten(treedef, leaves), q)


# ===========================================================================
# EulerAngle
# ===========================================================================


class TestEulerAngle:
    def test_stores_radians(self):
        e = EulerAngle(EulerAngleOrder.YXZ, 90.0, 45.0, 0.0, use_degrees=True)
        assert float(e.x) == pytest.approx(PI / 2, abs=ATOL)
        assert float(e.y) == pytest.approx(PI / 4, abs=ATOL)
        assert float(e.z) == pytest.approx(0.0, abs=ATOL)
        assert e.order == EulerAngleOrder.YXZ

    def test_zero_is_identity(self):
        for order in EulerAngleOrder:
            q = EulerAngle(order, 0.0, 0.0, 0.0).to_quaternion()
            _assert_quat_close(q, Quaternion.identity())

    @pytest.mark.parametrize("order", list(EulerAngleOrder))
    def test_to_quaternion_matches_axis_products(self, order):
        angles = {"X": 0.3, "Y": -0.7, "Z": 1.1}
        e = EulerAngle(order, angles["X"], angles["Y"], angles["Z"])

        expected = Quaternion.identity()
        for axis in order.name:
            expected = expected * Quaternion.from_axis_angle(_AXES[axis], angles[axis])

        _assert_quat_close(e.to_quaternion(), expected)

    @pytest.mark.parametrize("order", list(EulerAngleOrder))
    def test_quaternion_to_euler_recovers_angles(self, order):
        e = EulerAngle(order, 0.2, -0.4, 0.6)
        back = e.to_quaternion().to_euler_angle(order)
        assert back == e

    def test_yxz_gimbal_lock(self):
        e = EulerAngle(EulerAngleOrder.YXZ, PI / 2, 0.3, 0.2)
        back = e.reorder(EulerAngleOrder.YXZ)
        assert float(back.x) == pytest.approx(PI / 2, abs=1e-6)
        assert float(back.z) == pytest.approx(0.0, abs=ATOL)
        _assert_same_rotation(back.to_quaternion(), e.to_quaternion())

    def test_reorder_preserves_rotation(self):
        e = EulerAngle(EulerAngleOrder.XYZ, 0.5, 0.1, -0.3)
        r = e.reorder(EulerAngleOrder.ZXY)
        assert r.order == EulerAngleOrder.ZXY
        _assert_same_rotation(r.to_quaternion(), e.to_quaternion())

    def test_from_vector(self):
        e = EulerAngle.from_vector(jnp.array([0.1, 0.2, 0.3]), EulerAngleOrder.ZYX)
        assert float(e.to_vector()[2]) == pytest.approx(0.3, abs=ATOL)

    def test_to_vector_degrees(self):
        e = EulerAngle(EulerAngleOrder.YXZ, 90.0, -45.0, 10.0, use_degrees=True)
        v = e.to_vector(use_degrees=True)
        assert float(v[0]) == pytest.approx(90.0, abs=1e-9)
        assert float(v[1]) == pytest.approx(-45.0, abs=1e-9)
        assert float(v[2]) == pytest.approx(10.0, abs=1e-9)

    def test_pytree_keeps_order(self):
        e = EulerAngle(EulerAngleOrder.ZYX, 0.1, 0.2, 0.3)
        leaves, treedef = jax.tree_util.tree_flatten(e)
        assert len(leaves) == 3
        assert jax.tree_util.tree_unflatten(treedef, leaves).order == EulerAngleOrder.ZYX


# ===========================================================================
# SceneObject
# ===========================================================================


class TestSceneObject:
    def test_defaults(self):
        obj = SceneObject()
        assert obj.quaternion == Quaternion.identity()
        assert obj.rotation_order == EulerAngleOrder.XYZ

    def test_rotation_uses_rotation_order(self):
        obj = SceneObject(rotation_order=EulerAngleOrder.YXZ)
        obj.rotation = EulerAngle(EulerAngleOrder.YXZ, 0.1, 0.2, 0.3)
        rotation = obj.rotation
        assert rotation.order == EulerAngleOrder.YXZ
        assert float(rotation.x) == pytest.approx(0.1, abs=1e-9)
        assert float(rotation.y) == pytest.approx(0.2, abs=1e-9)
        assert float(rotation.z) == pytest.approx(0.3, abs=1e-9)

    def test_rotation_setter_updates_quaternion(self):
        obj = SceneObject()
        obj.rotation = EulerAngle(EulerAngleOrder.XYZ, 0.0, 0.0, PI / 2)
        _assert_quat_close(obj.quaternion, Quaternion(SQRT2_2, 0.0, 0.0, SQRT2_2))
