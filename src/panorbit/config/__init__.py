"""Configuration module for the pan-orbit controller."""

from src.panorbit.config.io import load_controller_config, save_controller_config
from src.panorbit.config.settings import (
    CameraSettings,
    ControllerConfig,
    InputSchemeKind,
)


__all__ = [
    "CameraSettings",
    "ControllerConfig",
    "InputSchemeKind",
    "load_controller_config",
    "save_controller_config",
]
