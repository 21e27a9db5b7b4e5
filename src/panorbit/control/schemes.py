"""
Input binding schemes for the pan-orbit controller.

A scheme resolves the single active CameraAction for a tick and supplies the
per-action deltas the pose updater applies. Both schemes share one rule: a
pinch gesture outranks every other simultaneous signal.
"""

from __future__ import annotations

import logging
from typing import Protocol

import numpy as np

from src.panorbit.config.settings import CameraSettings, ControllerConfig, InputSchemeKind
from src.panorbit.interaction.accumulator import InputDeltas
from src.panorbit.interaction.events import ButtonState

from .actions import CameraAction

logger = logging.getLogger(__name__)


class InputScheme(Protocol):
    """Contract implemented by each input binding scheme."""

    kind: InputSchemeKind

    def resolve(
        self,
        deltas: InputDeltas,
        previous: CameraAction,
        button_state: ButtonState,
    ) -> CameraAction: ...

    def zoom_delta(self, deltas: InputDeltas, settings: CameraSettings) -> float: ...

    def translate_delta(self, deltas: InputDeltas, settings: CameraSettings) -> np.ndarray: ...

    def orbit_delta(self, deltas: InputDeltas, settings: CameraSettings) -> np.ndarray: ...


class _BaseScheme:
    """Utility mixin shared by the concrete schemes."""

    def zoom_delta(self, deltas: InputDeltas, settings: CameraSettings) -> float:
        return deltas.pinch * settings.zoom_sensitivity

    @staticmethod
    def _scroll_total(deltas: InputDeltas, settings: CameraSettings) -> np.ndarray:
        return (
            deltas.scroll_lines * settings.scroll_line_sensitivity
            + deltas.scroll_pixels * settings.scroll_pixel_sensitivity
        )


class DragPanScheme(_BaseScheme, InputScheme):
    """
    Drag with the primary button held to move the center.

    Priority: pinch -> ZOOM, twist -> ORBIT (only with `twist_orbit`),
    motion -> MOVE, otherwise the previous action is kept. A MOVE with the
    button released becomes NONE, which is how release ends a drag.
    """

    kind = InputSchemeKind.DRAG_PAN

    def __init__(self, twist_orbit: bool = False):
        self.twist_orbit = twist_orbit

    def resolve(
        self,
        deltas: InputDeltas,
        previous: CameraAction,
        button_state: ButtonState,
    ) -> CameraAction:
        if deltas.pinch != 0.0:
            return CameraAction.ZOOM
        if self.twist_orbit and deltas.twist != 0.0:
            return CameraAction.ORBIT

        action = CameraAction.MOVE if deltas.has_motion else previous

        if action is CameraAction.MOVE and button_state is ButtonState.RELEASED:
            return CameraAction.NONE
        return action

    def translate_delta(self, deltas: InputDeltas, settings: CameraSettings) -> np.ndarray:
        return deltas.motion * settings.move_sensitivity

    def orbit_delta(self, deltas: InputDeltas, settings: CameraSettings) -> np.ndarray:
        # Extension point for twist-driven orbit; no mapping is defined yet.
        if deltas.twist != 0.0:
            logger.debug(f"twist orbit reserved, ignoring twist={deltas.twist:.4f}")
        return np.zeros(2, dtype=np.float64)


class ScrollPanScheme(_BaseScheme, InputScheme):
    """
    Scroll to pan; PAN is the default action on every tick.

    With `scroll_orbit` enabled, scroll input orbits instead. Pinch overrides
    both with ZOOM.
    """

    kind = InputSchemeKind.SCROLL_PAN

    def __init__(self, scroll_orbit: bool = False):
        self.scroll_orbit = scroll_orbit

    def resolve(
        self,
        deltas: InputDeltas,
        previous: CameraAction,
        button_state: ButtonState,
    ) -> CameraAction:
        if deltas.pinch != 0.0:
            return CameraAction.ZOOM
        if self.scroll_orbit and deltas.has_scroll:
            return CameraAction.ORBIT
        return CameraAction.PAN

    def translate_delta(self, deltas: InputDeltas, settings: CameraSettings) -> np.ndarray:
        return -self._scroll_total(deltas, settings) * settings.pan_sensitivity

    def orbit_delta(self, deltas: InputDeltas, settings: CameraSettings) -> np.ndarray:
        return -self._scroll_total(deltas, settings) * settings.orbit_sensitivity


def create_scheme(config: ControllerConfig) -> InputScheme:
    """Instantiate the input scheme selected by `config`."""
    if config.scheme is InputSchemeKind.SCROLL_PAN:
        return ScrollPanScheme(scroll_orbit=config.scroll_orbit)
    return DragPanScheme(twist_orbit=config.twist_orbit)
