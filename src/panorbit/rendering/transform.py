"""
Camera transform synthesis.

The Transform record is owned by the surrounding scene; the controller only
writes into it. Conventions: Y-up, right-handed, camera looks down local -Z.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np
import viser.transforms as vt

from .camera_state import CameraState
from .quaternion_utils import X_AXIS, Y_AXIS, Z_AXIS, quat_from_euler_yxz


def _identity_wxyz() -> np.ndarray:
    return np.array([1.0, 0.0, 0.0, 0.0])


def _origin() -> np.ndarray:
    return np.zeros(3, dtype=np.float64)


@dataclass
class Transform:
    """
    Rotation + translation of the camera in world space.

    Attributes
    ----------
    rotation : np.ndarray
        (4,) unit quaternion (wxyz format)
    translation : np.ndarray
        (3,) camera position
    """

    rotation: np.ndarray = field(default_factory=_identity_wxyz)
    translation: np.ndarray = field(default_factory=_origin)

    def __post_init__(self):
        self.rotation = np.asarray(self.rotation, dtype=np.float64).copy()
        self.translation = np.asarray(self.translation, dtype=np.float64).copy()
        if self.rotation.shape != (4,):
            raise ValueError(f"rotation must be (4,) wxyz, got {self.rotation.shape}")
        if self.translation.shape != (3,):
            raise ValueError(f"translation must be (3,), got {self.translation.shape}")

    @property
    def so3(self) -> vt.SO3:
        return vt.SO3(self.rotation)

    def rotation_matrix(self) -> np.ndarray:
        """3x3 rotation matrix."""
        return self.so3.as_matrix()

    def as_matrix(self) -> np.ndarray:
        """4x4 camera-to-world matrix."""
        c2w = np.eye(4, dtype=np.float64)
        c2w[:3, :3] = self.rotation_matrix()
        c2w[:3, 3] = self.translation
        return c2w

    # Local axes expressed in world space
    def right(self) -> np.ndarray:
        return self.so3.apply(X_AXIS)

    def up(self) -> np.ndarray:
        return self.so3.apply(Y_AXIS)

    def forward(self) -> np.ndarray:
        return self.so3.apply(-Z_AXIS)

    def back(self) -> np.ndarray:
        return self.so3.apply(Z_AXIS)

    def copy(self) -> "Transform":
        return Transform(rotation=self.rotation.copy(), translation=self.translation.copy())


def synthesize_transform(state: CameraState) -> Transform:
    """
    Build the camera transform from spherical state.

    Rotation is yaw/pitch with zero roll; the eye sits `radius` behind the
    center along the camera's backward axis, looking at the center.
    """
    rotation = quat_from_euler_yxz(state.rotation, state.slope, 0.0)
    back = vt.SO3(rotation).apply(Z_AXIS)
    translation = state.center + back * state.radius
    return Transform(rotation=rotation, translation=translation)


def write_transform(state: CameraState, transform: Transform) -> Transform:
    """Synthesize from `state` and write the result into `transform` in place."""
    result = synthesize_transform(state)
    transform.rotation[:] = result.rotation
    transform.translation[:] = result.translation
    return transform
