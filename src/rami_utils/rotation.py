"""Quaternion primitives used by the spatial helpers.

Quaternion Convention: (x, y, z, w) - scalar last, matching the host engine.
Rotations are assumed to be unit quaternions; nothing here renormalizes.
"""

import numpy as np
from numpy.typing import ArrayLike

IDENTITY_QUATERNION = (0.0, 0.0, 0.0, 1.0)


def _as_quaternion(q: ArrayLike) -> np.ndarray:
    """Coerce input to a float quaternion array of shape (4,)."""
    q = np.asarray(q, dtype=np.float64)
    if q.shape != (4,):
        raise ValueError(f"Expected quaternion with 4 components, got shape {q.shape}")
    return q


def _as_vector3(v: ArrayLike) -> np.ndarray:
    """Coerce input to a float vector array of shape (3,)."""
    v = np.asarray(v, dtype=np.float64)
    if v.shape != (3,):
        raise ValueError(f"Expected 3D vector, got shape {v.shape}")
    return v


def quaternion_multiply(q1: ArrayLike, q2: ArrayLike) -> np.ndarray:
    """Hamilton product of two quaternions.

    The product applies ``q2`` first, then ``q1``.

    Args:
        q1: First quaternion (x, y, z, w)
        q2: Second quaternion (x, y, z, w)

    Returns:
        Product quaternion (x, y, z, w)
    """
    x1, y1, z1, w1 = _as_quaternion(q1)
    x2, y2, z2, w2 = _as_quaternion(q2)

    x = w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2
    y = w1 * y2 - x1 * z2 + y1 * w2 + z1 * x2
    z = w1 * z2 + x1 * y2 - y1 * x2 + z1 * w2
    w = w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2

    return np.array([x, y, z, w])


def quaternion_inverse(q: ArrayLike) -> np.ndarray:
    """Inverse of a unit quaternion (its conjugate)."""
    x, y, z, w = _as_quaternion(q)
    return np.array([-x, -y, -z, w])


def rotate_vector(q: ArrayLike, v: ArrayLike) -> np.ndarray:
    """Rotate a 3D vector by a unit quaternion.

    Args:
        q: Rotation quaternion (x, y, z, w)
        v: Vector to rotate (x, y, z)

    Returns:
        Rotated vector
    """
    q = _as_quaternion(q)
    v = _as_vector3(v)
    u = q[:3]
    t = 2.0 * np.cross(u, v)
    return v + q[3] * t + np.cross(u, t)
