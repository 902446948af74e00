"""Pose handle abstractions.

Host environments own their transforms. The helpers here only need to read
a pose or to write one in a single call, so those two capabilities are
described as protocols. ``Transform`` is a plain in-memory handle that
satisfies both.
"""

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

import numpy as np
from numpy.typing import ArrayLike

from rami_utils.rotation import IDENTITY_QUATERNION


@runtime_checkable
class PoseTarget(Protocol):
    """Handle whose position and rotation can be set together."""

    def set_position_and_rotation(self, position: ArrayLike, rotation: ArrayLike) -> None:
        ...


@runtime_checkable
class PoseSource(Protocol):
    """Handle exposing a readable position and rotation."""

    position: np.ndarray
    rotation: np.ndarray


@dataclass
class Transform:
    """In-memory pose handle.

    Attributes:
        position: World position (x, y, z)
        rotation: World rotation (x, y, z, w)
    """

    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    rotation: np.ndarray = field(
        default_factory=lambda: np.array(IDENTITY_QUATERNION)
    )

    def __post_init__(self):
        self.position = np.asarray(self.position, dtype=np.float64)
        self.rotation = np.asarray(self.rotation, dtype=np.float64)

    def set_position_and_rotation(self, position: ArrayLike, rotation: ArrayLike) -> None:
        """Replace position and rotation in one assignment."""
        self.position, self.rotation = (
            np.asarray(position, dtype=np.float64),
            np.asarray(rotation, dtype=np.float64),
        )
