"""
Quaternion utilities for camera orientation.

All quaternions use wxyz format (w, x, y, z) to match viser's convention.
w is the scalar component, (x, y, z) is the vector component.
"""

from __future__ import annotations

import numpy as np

X_AXIS = np.array([1.0, 0.0, 0.0])
Y_AXIS = np.array([0.0, 1.0, 0.0])
Z_AXIS = np.array([0.0, 0.0, 1.0])


def quat_multiply(q1: np.ndarray, q2: np.ndarray) -> np.ndarray:
    """
    Multiply two quaternions (Hamilton product).

    Parameters
    ----------
    q1 : np.ndarray
        First quaternion (wxyz format)
    q2 : np.ndarray
        Second quaternion (wxyz format)

    Returns
    -------
    np.ndarray
        Product quaternion q1 * q2 (wxyz format)
    """
    w1, x1, y1, z1 = q1
    w2, x2, y2, z2 = q2

    return np.array(
        [
            w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2,
            w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2,
            w1 * y2 - x1 * z2 + y1 * w2 + z1 * x2,
            w1 * z2 + x1 * y2 - y1 * x2 + z1 * w2,
        ]
    )


def quat_normalize(q: np.ndarray) -> np.ndarray:
    """Normalize quaternion to unit length (identity for a degenerate input)."""
    norm = np.linalg.norm(q)
    if norm < 1e-6:
        return np.array([1.0, 0.0, 0.0, 0.0])
    return q / norm


def quat_from_axis_angle(axis: np.ndarray, angle: float) -> np.ndarray:
    """
    Create quaternion from axis-angle representation.

    Parameters
    ----------
    axis : np.ndarray
        Rotation axis (3,) - will be normalized
    angle : float
        Rotation angle in radians

    Returns
    -------
    np.ndarray
        Rotation quaternion (wxyz format)
    """
    axis = np.asarray(axis, dtype=np.float64)
    axis_norm = np.linalg.norm(axis)
    if axis_norm < 1e-6:
        return np.array([1.0, 0.0, 0.0, 0.0])

    axis = axis / axis_norm
    half_angle = angle / 2.0
    s = np.sin(half_angle)
    c = np.cos(half_angle)

    return np.array([c, axis[0] * s, axis[1] * s, axis[2] * s])


def quat_from_euler_yxz(yaw: float, pitch: float, roll: float = 0.0) -> np.ndarray:
    """
    Create quaternion from intrinsic Y-X-Z Euler angles (radians).

    Convention: Y-up coordinate system, camera looks down local -Z.
    - Yaw: rotation around Y axis (positive = CCW from above)
    - Pitch: rotation around local X axis (positive tilts the view up)
    - Roll: rotation around local Z axis

    Rotation order: yaw (Y) -> pitch (X) -> roll (Z), i.e. q = q_y * q_x * q_z.

    Returns
    -------
    np.ndarray
        Quaternion (wxyz format)
    """
    q_yaw = quat_from_axis_angle(Y_AXIS, yaw)
    q_pitch = quat_from_axis_angle(X_AXIS, pitch)
    q_roll = quat_from_axis_angle(Z_AXIS, roll)

    q = quat_multiply(q_yaw, quat_multiply(q_pitch, q_roll))
    return quat_normalize(q)
