"""
Pose updater: applies the resolved action to the spherical camera state.

Zoom is exponential so that doubling the radius takes the same input at any
zoom level. Orbit angles wrap into [-pi, pi] in the same update that changes
them.
"""

from __future__ import annotations

import logging

import numpy as np

from src.panorbit.config.settings import CameraSettings
from src.panorbit.interaction.accumulator import InputDeltas
from src.panorbit.rendering.camera_state import CameraState
from src.panorbit.rendering.transform import Transform
from src.shared.math import wrap_angle

from .actions import CameraAction
from .schemes import InputScheme

logger = logging.getLogger(__name__)

DEFAULT_MIN_RADIUS = 1e-5


def apply_zoom(state: CameraState, effective_zoom: float, min_radius: float = DEFAULT_MIN_RADIUS) -> None:
    """Scale radius by exp(-effective_zoom), floored at `min_radius`."""
    state.radius = max(state.radius * float(np.exp(-effective_zoom)), min_radius)


def apply_move(state: CameraState, delta: np.ndarray, transform: Transform) -> None:
    """Drag-move the center along the camera's right/forward axes, not scaled by radius."""
    state.center -= transform.right() * delta[0]
    state.center -= transform.forward() * delta[1]


def apply_pan(state: CameraState, delta: np.ndarray, transform: Transform) -> None:
    """Pan the center in the camera's right/up plane, scaled by radius."""
    offset = transform.right() * delta[0] + transform.up() * delta[1]
    state.center += offset * state.radius


def apply_orbit(state: CameraState, delta: np.ndarray) -> None:
    """
    Orbit around the center.

    Horizontal input is mirrored while upside down so dragging keeps moving the
    view the same way on screen after the camera passes a pole. The mirror is
    decided from the slope before this update; the flag is refreshed after it.
    """
    dx, dy = float(delta[0]), float(delta[1])
    if state.refresh_upside_down():
        dx = -dx
    state.rotation = wrap_angle(state.rotation + dx)
    state.slope = wrap_angle(state.slope + dy)
    state.refresh_upside_down()


def update_pose(
    state: CameraState,
    action: CameraAction,
    deltas: InputDeltas,
    settings: CameraSettings,
    transform: Transform,
    scheme: InputScheme,
    min_radius: float = DEFAULT_MIN_RADIUS,
) -> None:
    """
    Apply `action` to `state` in place.

    `transform` must still hold the previous tick's pose; its axes project
    translation deltas into world space before it is rewritten.
    """
    if action is CameraAction.ZOOM:
        effective_zoom = scheme.zoom_delta(deltas, settings)
        apply_zoom(state, effective_zoom, min_radius)
        logger.debug(f"zoom: effective={effective_zoom:.4f} radius={state.radius:.6f}")
    elif action is CameraAction.MOVE:
        delta = scheme.translate_delta(deltas, settings)
        apply_move(state, delta, transform)
        logger.debug(f"move: delta=({delta[0]:.4f}, {delta[1]:.4f})")
    elif action is CameraAction.PAN:
        delta = scheme.translate_delta(deltas, settings)
        apply_pan(state, delta, transform)
        if np.any(delta != 0.0):
            logger.debug(f"pan: delta=({delta[0]:.4f}, {delta[1]:.4f}) radius={state.radius:.4f}")
    elif action is CameraAction.ORBIT:
        delta = scheme.orbit_delta(deltas, settings)
        apply_orbit(state, delta)
        logger.debug(
            f"orbit: rotation={state.rotation:.4f} slope={state.slope:.4f} "
            f"upside_down={state.upside_down}"
        )
