"""Conversions between fixed-size vectors and flat float arrays.

Vectors are 2D, 3D or 4D (quaternions count as 4D vectors). Flat arrays use
float32, the host engine's component type.
"""

import logging
from typing import Iterable, Sequence

import numpy as np
from numpy.typing import ArrayLike

from rami_utils.handles import PoseSource

logger = logging.getLogger(__name__)

MIN_COMPONENTS = 2
MAX_COMPONENTS = 4


def _check_components(components: int) -> None:
    """Reject component counts no vector type has."""
    if not MIN_COMPONENTS <= components <= MAX_COMPONENTS:
        raise ValueError(
            f"Vectors must have {MIN_COMPONENTS}-{MAX_COMPONENTS} components, "
            f"got {components}"
        )


def vector_to_float_array(vector: ArrayLike) -> np.ndarray:
    """Flatten a single vector into its components (x, y[, z][, w])."""
    array = np.asarray(vector, dtype=np.float32)
    if array.ndim != 1:
        raise ValueError(f"Expected a single vector, got shape {array.shape}")
    _check_components(array.shape[0])
    return array.copy()


def vector_array_to_float_array(
    vectors: Sequence,
    legacy_stride: bool = False,
) -> np.ndarray:
    """Concatenate the components of several vectors.

    Args:
        vectors: Sequence of vectors sharing one component count
        legacy_stride: Advance the write position by one slot per vector
            instead of by the component count. Later vectors then overwrite
            earlier ones and the tail stays zero. Only for consumers that
            depend on the old packing.

    Returns:
        Flat float32 array of length ``len(vectors) * components``
    """
    array = np.asarray(vectors, dtype=np.float32)
    if array.size == 0:
        return np.zeros(0, dtype=np.float32)
    if array.ndim != 2:
        raise ValueError(f"Expected an (N, components) array, got shape {array.shape}")

    count, components = array.shape
    _check_components(components)

    if not legacy_stride:
        return array.reshape(-1).copy()

    logger.debug("Packing %d vectors with legacy stride", count)
    flat = np.zeros(count * components, dtype=np.float32)
    for i, vector in enumerate(array):
        flat[i:i + components] = vector
    return flat


def float_array_to_vectors(flat: Sequence, components: int) -> np.ndarray:
    """Split a flat float array into vectors of ``components`` each.

    Raises:
        ValueError: If the length is not a multiple of ``components``
    """
    _check_components(components)
    array = np.asarray(flat, dtype=np.float32).reshape(-1)
    if array.shape[0] % components != 0:
        raise ValueError(
            f"Flat array of length {array.shape[0]} cannot be split into "
            f"{components}-component vectors"
        )
    return array.reshape(-1, components)


def centroid(vectors: Sequence) -> np.ndarray:
    """Component-wise mean of a set of vectors.

    Raises:
        ValueError: If ``vectors`` is empty
    """
    if len(vectors) == 0:
        raise ValueError("Cannot compute the centroid of an empty sequence")
    array = np.asarray(vectors, dtype=np.float64)
    return array.sum(axis=0) / array.shape[0]


def transforms_to_positions(handles: Iterable[PoseSource]) -> np.ndarray:
    """Stack handle positions into an (N, 3) array, in input order."""
    positions = [np.asarray(h.position, dtype=np.float64) for h in handles]
    if not positions:
        return np.zeros((0, 3))
    return np.stack(positions)


def transforms_to_rotations(handles: Iterable[PoseSource]) -> np.ndarray:
    """Stack handle rotations into an (N, 4) array, in input order."""
    rotations = [np.asarray(h.rotation, dtype=np.float64) for h in handles]
    if not rotations:
        return np.zeros((0, 4))
    return np.stack(rotations)


def centroid_of_transforms(handles: Iterable[PoseSource]) -> np.ndarray:
    """Mean position of a set of handles.

    Raises:
        ValueError: If ``handles`` is empty
    """
    return centroid(transforms_to_positions(handles))
