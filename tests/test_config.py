"""Tests for controller configuration and YAML io."""

import pytest
import yaml

from src.panorbit.config.io import load_controller_config, save_controller_config
from src.panorbit.config.settings import CameraSettings, ControllerConfig, InputSchemeKind
from src.shared.exceptions import ConfigValidationError, PanOrbitError


class TestCameraSettings:
    """Test CameraSettings defaults and validation."""

    def test_defaults(self):
        settings = CameraSettings()
        assert settings.zoom_sensitivity == 5.0
        assert settings.pan_sensitivity == 0.1
        assert settings.orbit_sensitivity == 0.1
        assert settings.scroll_line_sensitivity == 16.0
        assert settings.scroll_pixel_sensitivity == 1.0

    def test_aliases(self):
        settings = CameraSettings(pan_sensitivity=0.3, orbit_sensitivity=0.7)
        assert settings.move_sensitivity == 0.3
        assert settings.rotate_sensitivity == 0.7

    @pytest.mark.parametrize("name", ["zoom_sensitivity", "pan_sensitivity", "scroll_pixel_sensitivity"])
    @pytest.mark.parametrize("value", [0.0, -1.0, "fast", True])
    def test_rejects_non_positive(self, name, value):
        with pytest.raises(ConfigValidationError) as exc_info:
            CameraSettings(**{name: value})
        assert exc_info.value.field == name

    def test_from_dict_rejects_unknown(self):
        with pytest.raises(ConfigValidationError, match="Unknown camera setting"):
            CameraSettings.from_dict({"zoom_speed": 2.0})


class TestControllerConfig:
    """Test ControllerConfig normalization."""

    def test_defaults(self):
        config = ControllerConfig()
        assert config.scheme is InputSchemeKind.DRAG_PAN
        assert config.twist_orbit is False
        assert config.scroll_orbit is False
        assert config.min_radius > 0

    def test_scheme_from_string(self):
        assert ControllerConfig(scheme="scroll_pan").scheme is InputSchemeKind.SCROLL_PAN

    def test_unknown_scheme(self):
        with pytest.raises(ConfigValidationError):
            ControllerConfig(scheme="trackball")

    def test_rejects_non_positive_min_radius(self):
        with pytest.raises(PanOrbitError):
            ControllerConfig(min_radius=0.0)

    def test_rejects_non_bool_flags(self):
        with pytest.raises(ConfigValidationError):
            ControllerConfig(scroll_orbit="yes")

    def test_dict_round_trip(self):
        config = ControllerConfig(
            scheme=InputSchemeKind.SCROLL_PAN,
            scroll_orbit=True,
            settings=CameraSettings(pan_sensitivity=0.25),
        )
        data = config.to_dict()

        assert data["scheme"] == "scroll_pan"
        assert data["settings"]["pan_sensitivity"] == 0.25
        assert ControllerConfig.from_dict(data) == config

    def test_from_dict_rejects_unknown(self):
        with pytest.raises(ConfigValidationError, match="Unknown controller option"):
            ControllerConfig.from_dict({"invert_y": True})

    def test_none_settings_use_defaults(self):
        assert ControllerConfig(settings=None).settings == CameraSettings()

    def test_rejects_non_mapping_settings(self):
        with pytest.raises(ConfigValidationError) as exc_info:
            ControllerConfig(settings=42)
        assert exc_info.value.field == "settings"


class TestConfigIO:
    """Test YAML load/save."""

    def test_save_and_load(self, temp_dir):
        config = ControllerConfig(twist_orbit=True, settings=CameraSettings(zoom_sensitivity=2.0))
        path = save_controller_config(config, temp_dir / "nested" / "camera.yaml")

        assert path.exists()
        assert load_controller_config(path) == config

    def test_partial_file_uses_defaults(self, temp_dir):
        path = temp_dir / "camera.yaml"
        path.write_text("scheme: scroll_pan\nsettings:\n  scroll_line_sensitivity: 8\n")

        config = load_controller_config(path)

        assert config.scheme is InputSchemeKind.SCROLL_PAN
        assert config.settings.scroll_line_sensitivity == 8
        assert config.settings.zoom_sensitivity == 5.0

    def test_empty_file(self, temp_dir):
        path = temp_dir / "empty.yaml"
        path.write_text("")
        assert load_controller_config(path) == ControllerConfig()

    def test_empty_settings_key(self, temp_dir):
        path = temp_dir / "camera.yaml"
        path.write_text("scheme: drag_pan\nsettings:\n")

        config = load_controller_config(path)

        assert isinstance(config.settings, CameraSettings)
        assert config.settings == CameraSettings()

    def test_non_mapping(self, temp_dir):
        path = temp_dir / "list.yaml"
        path.write_text(yaml.safe_dump([1, 2, 3]))
        with pytest.raises(ConfigValidationError):
            load_controller_config(path)

    def test_invalid_yaml(self, temp_dir):
        path = temp_dir / "broken.yaml"
        path.write_text("scheme: [unclosed\n")
        with pytest.raises(ConfigValidationError):
            load_controller_config(path)
