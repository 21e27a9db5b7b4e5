"""Input events and per-tick accumulation."""

from src.panorbit.interaction.accumulator import InputDeltas, accumulate
from src.panorbit.interaction.events import (
    ButtonInput,
    ButtonState,
    InputEvent,
    MouseButton,
    PinchGesture,
    PointerMotion,
    ScrollUnit,
    TwistGesture,
    WheelScroll,
    event_from_dict,
    events_from_dicts,
)


__all__ = [
    "ButtonInput",
    "ButtonState",
    "InputDeltas",
    "InputEvent",
    "MouseButton",
    "PinchGesture",
    "PointerMotion",
    "ScrollUnit",
    "TwistGesture",
    "WheelScroll",
    "accumulate",
    "event_from_dict",
    "events_from_dicts",
]
