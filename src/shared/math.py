"""Mathematical utilities shared by the pan-orbit controller."""

import numpy as np

TAU = 2.0 * np.pi
HALF_PI = 0.5 * np.pi


def wrap_angle(angle: float) -> float:
    """
    Wrap an angle into [-pi, pi] by modular reduction.

    Angles wrap around rather than saturate, so a full turn past pi lands
    back near -pi.

    Args:
        angle: Angle in radians, any magnitude

    Returns:
        Equivalent angle in [-pi, pi]

    Example:
        >>> round(wrap_angle(3 * np.pi / 2), 6)
        -1.570796
    """
    return float((angle + np.pi) % TAU - np.pi)


def is_upside_down(slope: float) -> bool:
    """Return True when the pitch has rotated past either pole."""
    return slope < -HALF_PI or slope > HALF_PI
