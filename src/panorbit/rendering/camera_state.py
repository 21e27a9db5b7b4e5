"""
Camera state using spherical coordinates as primary representation.

Design principle: Store what's natural for an orbit camera.
- Look-at center, radius and two angles (rotation/yaw, slope/pitch) are primary
- The camera transform is derived from them every time the pose changes
- Angles wrap into [-pi, pi] instead of clamping, so the camera may pass over
  the poles; `upside_down` records when it has
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from src.panorbit.control.actions import CameraAction
from src.panorbit.interaction.events import ButtonState
from src.shared.math import is_upside_down


def _default_center() -> np.ndarray:
    """Default look-at point (width, height, depth)."""
    return np.array([0.0, 2.0, 15.0], dtype=np.float64)


@dataclass
class CameraState:
    """
    Pan-orbit state owned by one camera and mutated every tick.

    Attributes
    ----------
    center : np.ndarray
        (3,) world-space look-at point
    radius : float
        Distance from center to the eye, always > 0
    rotation : float
        Yaw in radians, within [-pi, pi]
    slope : float
        Pitch in radians, within [-pi, pi]
    upside_down : bool
        True when |slope| > pi/2, refreshed before each orbit
    current_action : CameraAction
        Action resolved on the most recent tick
    button_state : ButtonState
        Last observed primary-button state
    """

    center: np.ndarray = field(default_factory=_default_center)
    radius: float = 1.0
    rotation: float = 0.0
    slope: float = 0.0
    upside_down: bool = False
    current_action: CameraAction = CameraAction.NONE
    button_state: ButtonState = ButtonState.RELEASED

    def __post_init__(self):
        """Validate and normalize inputs."""
        self.center = np.asarray(self.center, dtype=np.float64).copy()
        if self.center.shape != (3,):
            raise ValueError(f"center must be (3,), got {self.center.shape}")
        if not self.radius > 0:
            raise ValueError(f"radius must be positive, got {self.radius}")
        self.radius = float(self.radius)
        self.rotation = float(self.rotation)
        self.slope = float(self.slope)
        self.refresh_upside_down()

    def refresh_upside_down(self) -> bool:
        """Recompute `upside_down` from the current slope and return it."""
        self.upside_down = is_upside_down(self.slope)
        return self.upside_down

    def copy(self) -> "CameraState":
        """Create a deep copy of this state."""
        return CameraState(
            center=self.center.copy(),
            radius=self.radius,
            rotation=self.rotation,
            slope=self.slope,
            current_action=self.current_action,
            button_state=self.button_state,
        )

    def to_dict(self) -> dict[str, object]:
        """Plain-value snapshot for logging and replay output."""
        return {
            "action": self.current_action.value,
            "center": [float(x) for x in self.center],
            "radius": self.radius,
            "rotation": self.rotation,
            "slope": self.slope,
            "upside_down": self.upside_down,
        }
