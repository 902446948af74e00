"""Pose math and array interop helpers for engine-style transforms.

This package provides:
- Rotated offsets and local-frame conversion
- Sign-normalized relative rotations
- Vector/flat-array conversion and centroids
- Bounds-checked sub-array and expansion helpers
- Floor modulus
"""

from rami_utils.arithmetic import floor_mod
from rami_utils.arrays import (
    expand_back,
    expand_front,
    join_to_string,
    slice_by_size,
    slice_range,
    write_subrange_into,
)
from rami_utils.config import configure, get_config
from rami_utils.handles import PoseSource, PoseTarget, Transform
from rami_utils.logging_config import setup_logging
from rami_utils.rotation import (
    IDENTITY_QUATERNION,
    quaternion_inverse,
    quaternion_multiply,
    rotate_vector,
)
from rami_utils.spatial import (
    apply_offset_pose,
    apply_rotated_offset,
    normalized_relative_rotation,
    world_to_local,
)
from rami_utils.vectors import (
    centroid,
    centroid_of_transforms,
    float_array_to_vectors,
    transforms_to_positions,
    transforms_to_rotations,
    vector_array_to_float_array,
    vector_to_float_array,
)

__all__ = [
    "IDENTITY_QUATERNION",
    "PoseSource",
    "PoseTarget",
    "Transform",
    "apply_offset_pose",
    "apply_rotated_offset",
    "centroid",
    "centroid_of_transforms",
    "configure",
    "expand_back",
    "expand_front",
    "float_array_to_vectors",
    "floor_mod",
    "get_config",
    "join_to_string",
    "normalized_relative_rotation",
    "quaternion_inverse",
    "quaternion_multiply",
    "rotate_vector",
    "setup_logging",
    "slice_by_size",
    "slice_range",
    "transforms_to_positions",
    "transforms_to_rotations",
    "vector_array_to_float_array",
    "vector_to_float_array",
    "world_to_local",
    "write_subrange_into",
]
