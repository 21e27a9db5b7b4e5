"""
Raw input events consumed by the pan-orbit controller.

The window layer delivers these once per tick as an ordered batch. Screen-space
deltas are y-down; conversion to the y-up world convention happens in the
accumulator, not here.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from src.shared.exceptions import EventParseError

logger = logging.getLogger(__name__)


class ButtonState(Enum):
    """Mouse button state reported by a button-change event."""

    PRESSED = "pressed"
    RELEASED = "released"


class MouseButton(Enum):
    """Mouse buttons. Only LEFT drives the controller."""

    LEFT = "left"
    RIGHT = "right"
    MIDDLE = "middle"


class ScrollUnit(Enum):
    """Granularity reported by the scrolling device."""

    LINE = "line"  # Notched wheels (desktop mice)
    PIXEL = "pixel"  # Smooth scrolling (touchpads)


def _as_vec2(value: Any) -> tuple[float, float]:
    x, y = value
    return (float(x), float(y))


@dataclass(frozen=True)
class PointerMotion:
    """Relative pointer motion in screen pixels (y-down)."""

    delta: tuple[float, float]

    def __post_init__(self):
        object.__setattr__(self, "delta", _as_vec2(self.delta))


@dataclass(frozen=True)
class WheelScroll:
    """Wheel or touchpad scroll delta (y-down) tagged with its unit."""

    delta: tuple[float, float]
    unit: ScrollUnit = ScrollUnit.LINE

    def __post_init__(self):
        object.__setattr__(self, "delta", _as_vec2(self.delta))


@dataclass(frozen=True)
class PinchGesture:
    """Trackpad pinch. Positive magnitude is pinch-out."""

    magnitude: float


@dataclass(frozen=True)
class TwistGesture:
    """Trackpad two-finger rotation."""

    magnitude: float


@dataclass(frozen=True)
class ButtonInput:
    """Mouse button state change."""

    state: ButtonState
    button: MouseButton = MouseButton.LEFT


InputEvent = Union[PointerMotion, WheelScroll, PinchGesture, TwistGesture, ButtonInput]


def event_from_dict(data: Mapping[str, Any], index: int | None = None) -> InputEvent:
    """
    Build an input event from its serialized mapping form.

    Recognized shapes::

        {"type": "motion", "delta": [dx, dy]}
        {"type": "wheel", "delta": [dx, dy], "unit": "line" | "pixel"}
        {"type": "pinch", "magnitude": m}
        {"type": "twist", "magnitude": m}
        {"type": "button", "state": "pressed" | "released", "button": "left"}

    Parameters
    ----------
    data : Mapping[str, Any]
        Serialized event
    index : int | None
        Position of the event, used in error messages

    Returns
    -------
    InputEvent
        Parsed event

    Raises
    ------
    EventParseError
        If the type is unknown or a field is missing or malformed
    """
    if not isinstance(data, Mapping):
        raise EventParseError(f"Event must be a mapping, got {type(data).__name__}", index)

    kind = data.get("type")
    try:
        if kind == "motion":
            return PointerMotion(delta=data["delta"])
        if kind == "wheel":
            return WheelScroll(delta=data["delta"], unit=ScrollUnit(data.get("unit", "line")))
        if kind == "pinch":
            return PinchGesture(magnitude=float(data["magnitude"]))
        if kind == "twist":
            return TwistGesture(magnitude=float(data["magnitude"]))
        if kind == "button":
            return ButtonInput(
                state=ButtonState(data["state"]),
                button=MouseButton(data.get("button", "left")),
            )
    except KeyError as e:
        raise EventParseError(f"Event '{kind}' is missing field {e}", index) from e
    except (TypeError, ValueError) as e:
        raise EventParseError(f"Malformed '{kind}' event: {e}", index) from e

    raise EventParseError(f"Unknown event type: {kind!r}", index)


def events_from_dicts(items: Sequence[Mapping[str, Any]]) -> list[InputEvent]:
    """Parse a serialized batch of events."""
    events = [event_from_dict(item, index=i) for i, item in enumerate(items)]
    logger.debug(f"Parsed {len(events)} event(s)")
    return events
