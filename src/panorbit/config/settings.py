"""
Configuration dataclasses for the pan-orbit camera controller.

Settings are fixed when a camera is spawned and treated as read-only by the
tick pipeline afterwards.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import asdict, dataclass, field, fields
from enum import Enum
from typing import Any

from src.shared.exceptions import ConfigValidationError


logger = logging.getLogger(__name__)


__all__ = ["CameraSettings", "ControllerConfig", "InputSchemeKind"]


class InputSchemeKind(Enum):
    """Input binding scheme selected at configuration time."""

    DRAG_PAN = "drag_pan"  # Hold the primary button and drag to move
    SCROLL_PAN = "scroll_pan"  # Scroll to pan, pan is the idle action


def _require_positive(name: str, value: float) -> None:
    if not isinstance(value, (int, float)) or isinstance(value, bool) or not value > 0:
        raise ConfigValidationError("Value must be a positive number", field=name, value=value)


@dataclass
class CameraSettings:
    """Per-camera sensitivities."""

    zoom_sensitivity: float = 5.0  # Exponent per unit of pinch
    pan_sensitivity: float = 0.1
    orbit_sensitivity: float = 0.1
    scroll_line_sensitivity: float = 16.0  # 1 "line" == 16 "pixels of motion"
    scroll_pixel_sensitivity: float = 1.0

    def __post_init__(self):
        """Validate settings after initialization."""
        for f in fields(self):
            _require_positive(f.name, getattr(self, f.name))

    # Aliases used by the drag bindings
    @property
    def move_sensitivity(self) -> float:
        """Alias for pan_sensitivity."""
        return self.pan_sensitivity

    @property
    def rotate_sensitivity(self) -> float:
        """Alias for orbit_sensitivity."""
        return self.orbit_sensitivity

    def to_dict(self) -> dict[str, object]:
        """Convert to dictionary for easy serialization."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CameraSettings:
        """Create settings from a mapping, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            name = sorted(unknown)[0]
            raise ConfigValidationError("Unknown camera setting", field=name, value=data[name])
        return cls(**dict(data))


@dataclass
class ControllerConfig:
    """
    Controller configuration for one camera.

    Attributes
    ----------
    scheme : InputSchemeKind
        Which input binding scheme resolves actions
    twist_orbit : bool
        Enable the reserved twist-gesture orbit transition (drag-pan only)
    scroll_orbit : bool
        Resolve scroll to orbit instead of pan (scroll-pan only)
    min_radius : float
        Positive floor applied to the orbit radius after zooming
    settings : CameraSettings
        Sensitivities
    """

    scheme: InputSchemeKind = InputSchemeKind.DRAG_PAN
    twist_orbit: bool = False
    scroll_orbit: bool = False
    min_radius: float = 1e-5
    settings: CameraSettings = field(default_factory=CameraSettings)

    def __post_init__(self):
        """Normalize and validate after initialization."""
        if isinstance(self.scheme, str):
            try:
                self.scheme = InputSchemeKind(self.scheme)
            except ValueError as e:
                raise ConfigValidationError(
                    "Unknown input scheme", field="scheme", value=self.scheme
                ) from e
        if not isinstance(self.scheme, InputSchemeKind):
            raise ConfigValidationError("Unknown input scheme", field="scheme", value=self.scheme)
        for name in ("twist_orbit", "scroll_orbit"):
            if not isinstance(getattr(self, name), bool):
                raise ConfigValidationError("Value must be a boolean", field=name, value=getattr(self, name))
        _require_positive("min_radius", self.min_radius)
        if self.settings is None:
            self.settings = CameraSettings()
        elif isinstance(self.settings, Mapping):
            self.settings = CameraSettings.from_dict(self.settings)
        elif not isinstance(self.settings, CameraSettings):
            raise ConfigValidationError(
                "Settings must be a mapping of sensitivities", field="settings", value=self.settings
            )

    def to_dict(self) -> dict[str, object]:
        """Convert to dictionary (enum as its string value)."""
        data = asdict(self)
        data["scheme"] = self.scheme.value
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ControllerConfig:
        """Create a config from a mapping, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            name = sorted(unknown)[0]
            raise ConfigValidationError("Unknown controller option", field=name, value=data[name])
        config = cls(**dict(data))
        logger.debug(f"Loaded controller config: scheme={config.scheme.value}")
        return config
