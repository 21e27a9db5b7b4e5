"""Pytest configuration and shared fixtures."""

import shutil
import tempfile
from pathlib import Path

import numpy as np
import pytest

from src.panorbit.config.settings import CameraSettings, ControllerConfig, InputSchemeKind
from src.panorbit.core.controller import PanOrbitController
from src.panorbit.rendering.camera_state import CameraState
from src.panorbit.rendering.transform import synthesize_transform


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def settings():
    """Default sensitivities."""
    return CameraSettings()


@pytest.fixture
def default_state():
    """Spawn pose: center (0, 2, 15), radius 1, level and facing -Z."""
    return CameraState()


@pytest.fixture
def default_transform(default_state):
    """Transform synthesized from the spawn pose."""
    return synthesize_transform(default_state)


@pytest.fixture
def drag_pan_controller():
    """Controller using the drag-pan scheme with default settings."""
    return PanOrbitController(ControllerConfig(scheme=InputSchemeKind.DRAG_PAN))


@pytest.fixture
def scroll_pan_controller():
    """Controller using the scroll-pan scheme with default settings."""
    return PanOrbitController(ControllerConfig(scheme=InputSchemeKind.SCROLL_PAN))


@pytest.fixture
def rng():
    """Deterministic random generator."""
    return np.random.default_rng(1234)
