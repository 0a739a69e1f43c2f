"""Module-wide floating-point precision and tracker configuration.

Provides ``set_dtype`` and ``get_dtype`` to control the float dtype used
throughout orientjax.  The default is ``jnp.float32`` for GPU/TPU
compatibility.  Switching to ``jnp.float64`` automatically enables
JAX's 64-bit mode (``jax_enable_x64``).

Call ``set_dtype`` **before** any JIT compilation, just like JAX's own
``jax.config.update("jax_enable_x64", True)``.  Under JIT, ``get_dtype()``
runs during tracing and its result is baked into the compiled program.

Also provides :class:`TrackerConfig`, the static parameters of the
change-notification policy used by
:class:`~orientjax.device_orientation.DeviceOrientationTracker`.
"""

from __future__ import annotations

from dataclasses import dataclass

import jax
import jax.numpy as jnp

from orientjax.constants import CHANGE_EPSILON, CHANGE_SCALE

_VALID_DTYPES = (jnp.float16, jnp.bfloat16, jnp.float32, jnp.float64)

_dtype = jnp.float32


def set_dtype(dtype) -> None:
    """Set the module-wide float dtype for orientjax.

    Must be called **before** any ``jax.jit`` compilation.  In eager mode
    the change takes effect immediately.

    If *dtype* is ``jnp.float64``, JAX's 64-bit mode is automatically
    enabled via ``jax.config.update("jax_enable_x64", True)``.

    Args:
        dtype: One of ``jnp.float16``, ``jnp.bfloat16``, ``jnp.float32``,
            or ``jnp.float64``.

    Raises:
        ValueError: If *dtype* is not a supported float type.
    """
    global _dtype
    if dtype not in _VALID_DTYPES:
        raise ValueError(
            f"Unsupported dtype {dtype}. Must be one of: "
            f"jnp.float16, jnp.bfloat16, jnp.float32, jnp.float64"
        )
    if dtype == jnp.float64:
        jax.config.update("jax_enable_x64", True)
    _dtype = dtype


def get_dtype():
    """Return the current module-wide float dtype.

    Returns:
        The active float dtype (default ``jnp.float32``).
    """
    return _dtype


def get_rotation_epsilon() -> float:
    """Return the dtype-adaptive tolerance for rotation comparisons.

    The tolerance scales with the precision of the configured float dtype:

    - ``float64``:  1e-12
    - ``float32``:  1e-6
    - ``float16``:  1e-3
    - ``bfloat16``: 1e-3

    Returns:
        float: Absolute tolerance for element-wise comparisons.
    """
    if _dtype == jnp.float64:
        return 1e-12
    if _dtype == jnp.float32:
        return 1e-6
    # float16 and bfloat16
    return 1e-3


@dataclass(frozen=True)
class TrackerConfig:
    """Parameters of the change-notification (dirty check) policy.

    A ``change`` event fires when
    ``change_scale * (1 - dot(last, current)) > change_epsilon``.  For unit
    quaternions ``1 - dot`` grows like the squared rotation angle, so the
    defaults suppress sensor jitter well below one degree without an
    ``arccos``.

    Args:
        change_epsilon: Threshold the scaled distance must exceed.
            Default: ``1e-6``.
        change_scale: Multiplier applied to ``1 - dot``. Default: ``8.0``.

    Examples:
        ```python
        from orientjax.config import TrackerConfig
        config = TrackerConfig(change_epsilon=1e-4)
        config.change_scale
        ```
    """

    change_epsilon: float = CHANGE_EPSILON
    change_scale: float = CHANGE_SCALE

    def __post_init__(self) -> None:
        if not self.change_epsilon > 0.0:
            raise ValueError(
                f"change_epsilon must be positive, got {self.change_epsilon}"
            )
        if not self.change_scale > 0.0:
            raise ValueError(
                f"change_scale must be positive, got {self.change_scale}"
            )
