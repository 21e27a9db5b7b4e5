"""
Per-tick input accumulation.

Reduces the batch of raw events delivered since the previous tick into the
scalar and vector deltas the action resolver and pose updater consume.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

import numpy as np

from .events import (
    ButtonInput,
    ButtonState,
    InputEvent,
    MouseButton,
    PinchGesture,
    PointerMotion,
    ScrollUnit,
    TwistGesture,
    WheelScroll,
)

# Screen space is y-down, world space is y-up
_FLIP_Y = np.array([1.0, -1.0])


def _zero2() -> np.ndarray:
    return np.zeros(2, dtype=np.float64)


@dataclass
class InputDeltas:
    """
    Accumulated input for one tick, in world (y-up) convention.

    Attributes
    ----------
    motion : np.ndarray
        (2,) summed pointer motion
    scroll_lines : np.ndarray
        (2,) summed scroll reported in notched "line" units
    scroll_pixels : np.ndarray
        (2,) summed scroll reported in smooth "pixel" units
    pinch : float
        Summed pinch magnitude
    twist : float
        Summed twist magnitude
    button_state : ButtonState | None
        Last primary-button state reported this tick, if any
    """

    motion: np.ndarray = field(default_factory=_zero2)
    scroll_lines: np.ndarray = field(default_factory=_zero2)
    scroll_pixels: np.ndarray = field(default_factory=_zero2)
    pinch: float = 0.0
    twist: float = 0.0
    button_state: ButtonState | None = None

    @property
    def has_motion(self) -> bool:
        return bool(np.any(self.motion != 0.0))

    @property
    def has_scroll(self) -> bool:
        return bool(np.any(self.scroll_lines != 0.0) or np.any(self.scroll_pixels != 0.0))

    @property
    def is_idle(self) -> bool:
        """True when the tick carried no input at all."""
        return (
            not self.has_motion
            and not self.has_scroll
            and self.pinch == 0.0
            and self.twist == 0.0
            and self.button_state is None
        )


def accumulate(events: Iterable[InputEvent]) -> InputDeltas:
    """
    Reduce one tick's events into InputDeltas.

    Never fails; an empty batch yields all-zero deltas and no button update.
    Events for non-primary buttons are ignored.
    """
    deltas = InputDeltas()

    for event in events:
        if isinstance(event, PointerMotion):
            deltas.motion += event.delta
        elif isinstance(event, WheelScroll):
            if event.unit is ScrollUnit.PIXEL:
                deltas.scroll_pixels += event.delta
            else:
                deltas.scroll_lines += event.delta
        elif isinstance(event, PinchGesture):
            deltas.pinch += float(event.magnitude)
        elif isinstance(event, TwistGesture):
            deltas.twist += float(event.magnitude)
        elif isinstance(event, ButtonInput):
            if event.button is MouseButton.LEFT:
                deltas.button_state = event.state

    deltas.motion *= _FLIP_Y
    deltas.scroll_lines *= _FLIP_Y
    deltas.scroll_pixels *= _FLIP_Y
    return deltas
