"""Spatial helpers for offsets, local frames and relative rotations.

All positions are 3D vectors and all rotations are unit quaternions in
(x, y, z, w) order. Scale is always assumed to be one.
"""

import numpy as np
from numpy.typing import ArrayLike

from rami_utils.handles import PoseTarget
from rami_utils.rotation import (
    quaternion_inverse,
    quaternion_multiply,
    rotate_vector,
)


def apply_rotated_offset(
    base_position: ArrayLike,
    offset: ArrayLike,
    rotation: ArrayLike,
) -> np.ndarray:
    """Offset a position in the rotation space of its parent.

    Args:
        base_position: World position of the parent (x, y, z)
        offset: Offset expressed in the parent's rotation space
        rotation: Parent rotation (x, y, z, w)

    Returns:
        World position of the offset point
    """
    return rotate_vector(rotation, offset) + np.asarray(base_position, dtype=np.float64)


def world_to_local(
    child_position: ArrayLike,
    parent_position: ArrayLike,
    parent_rotation: ArrayLike,
) -> np.ndarray:
    """Express a world position in a parent's local coordinate frame.

    Args:
        child_position: World position of the child
        parent_position: World position of the parent
        parent_rotation: Parent rotation (x, y, z, w)

    Returns:
        Child position relative to the parent's axes
    """
    delta = np.asarray(child_position, dtype=np.float64) - np.asarray(
        parent_position, dtype=np.float64
    )
    return rotate_vector(quaternion_inverse(parent_rotation), delta)


def normalized_relative_rotation(a: ArrayLike, b: ArrayLike) -> np.ndarray:
    """Rotation of ``a`` with respect to ``b`` with a canonical sign.

    q and -q describe the same rotation. The result is flipped so that its
    w component is never negative, giving learned models one representative
    per physical rotation. The magnitude is left untouched.

    Args:
        a: Rotation to express (x, y, z, w)
        b: Reference rotation (x, y, z, w)

    Returns:
        inverse(b) * a, with w >= 0
    """
    c = quaternion_multiply(quaternion_inverse(b), a)
    if c[3] < 0.0:
        c = -c
    return c


def apply_offset_pose(
    base_position: ArrayLike,
    new_rotation: ArrayLike,
    offset: ArrayLike,
    target: PoseTarget,
    rotational_offset: ArrayLike,
) -> None:
    """Place a handle at an offset position with an extra rotational offset.

    Both values are computed before the handle is touched and then written
    with a single setter call.

    Args:
        base_position: Position before the offset is applied
        new_rotation: Rotation defining the offset space (x, y, z, w)
        offset: Offset in the rotation space of ``new_rotation``
        target: Handle receiving the pose
        rotational_offset: Rotation applied after ``new_rotation``
    """
    position = apply_rotated_offset(base_position, offset, new_rotation)
    rotation = quaternion_multiply(new_rotation, rotational_offset)
    target.set_position_and_rotation(position, rotation)
