"""
The `constants` module defines the angle conversions and notification thresholds used by orientjax.
"""

from jax.numpy import pi as PI

# Angle Constants
"""
Constant to convert degrees to radians. Equal to 2pi/360. Units: *rad/deg*
"""
DEG2RAD = 2.0 * PI / 360.0

"""
Half of the square root of two, the non-zero components of a quarter-turn quaternion. Units: *dimensionless*
"""
SQRT_HALF = 0.7071067811865476

# Change Notification Constants
"""
Threshold on the scaled quaternion distance above which a rotation counts as changed. Units: *dimensionless*
"""
CHANGE_EPSILON = 1e-6

"""
Scale applied to ``1 - dot(q1, q2)`` before comparing against ``CHANGE_EPSILON``. Units: *dimensionless*
"""
CHANGE_SCALE = 8.0
