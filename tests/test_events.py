"""Tests for input event parsing."""

import pytest

from src.panorbit.interaction.events import (
    ButtonInput,
    ButtonState,
    MouseButton,
    PinchGesture,
    PointerMotion,
    ScrollUnit,
    TwistGesture,
    WheelScroll,
    event_from_dict,
    events_from_dicts,
)
from src.shared.exceptions import EventParseError, PanOrbitError


class TestEventFromDict:
    """Test event_from_dict parsing."""

    def test_motion(self):
        event = event_from_dict({"type": "motion", "delta": [3, -1]})
        assert event == PointerMotion((3.0, -1.0))

    def test_wheel_defaults_to_line(self):
        event = event_from_dict({"type": "wheel", "delta": [0, 2]})
        assert event == WheelScroll((0.0, 2.0), ScrollUnit.LINE)

    def test_wheel_pixel(self):
        event = event_from_dict({"type": "wheel", "delta": [1.5, 0], "unit": "pixel"})
        assert event.unit is ScrollUnit.PIXEL

    def test_gestures(self):
        assert event_from_dict({"type": "pinch", "magnitude": 0.2}) == PinchGesture(0.2)
        assert event_from_dict({"type": "twist", "magnitude": -1}) == TwistGesture(-1.0)

    def test_button(self):
        event = event_from_dict({"type": "button", "state": "pressed"})
        assert event == ButtonInput(ButtonState.PRESSED, MouseButton.LEFT)

        event = event_from_dict({"type": "button", "state": "released", "button": "middle"})
        assert event.button is MouseButton.MIDDLE

    def test_unknown_type(self):
        with pytest.raises(EventParseError, match="Unknown event type"):
            event_from_dict({"type": "keyboard"}, index=4)

    def test_missing_field_reports_index(self):
        with pytest.raises(EventParseError) as exc_info:
            event_from_dict({"type": "pinch"}, index=2)
        assert exc_info.value.index == 2
        assert "(event: 2)" in str(exc_info.value)

    def test_malformed_values(self):
        with pytest.raises(EventParseError):
            event_from_dict({"type": "motion", "delta": [1]})
        with pytest.raises(EventParseError):
            event_from_dict({"type": "wheel", "delta": [0, 1], "unit": "page"})
        with pytest.raises(EventParseError):
            event_from_dict({"type": "button", "state": "held"})

    def test_not_a_mapping(self):
        with pytest.raises(PanOrbitError):
            event_from_dict(["motion", 1, 2])

    def test_batch_indexes_errors(self):
        with pytest.raises(EventParseError) as exc_info:
            events_from_dicts([{"type": "pinch", "magnitude": 1}, {"type": "nope"}])
        assert exc_info.value.index == 1
