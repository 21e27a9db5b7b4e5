"""
Configuration import/export for controller settings.

Reads and writes ControllerConfig to/from YAML files. Only configuration is
stored here; camera pose is never persisted.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from src.panorbit.config.settings import ControllerConfig
from src.shared.exceptions import ConfigValidationError

logger = logging.getLogger(__name__)


def save_controller_config(config: ControllerConfig, path: str | Path) -> Path:
    """
    Write a controller configuration to a YAML file.

    Parameters
    ----------
    config : ControllerConfig
        Configuration to save
    path : str | Path
        Destination file; parent directories are created

    Returns
    -------
    Path
        The written path
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(config.to_dict(), f, default_flow_style=False, sort_keys=False)
    logger.info(f"Saved controller config to {path}")
    return path


def load_controller_config(path: str | Path) -> ControllerConfig:
    """
    Read a controller configuration from a YAML file.

    Missing keys fall back to defaults; an empty file yields the default config.

    Raises
    ------
    ConfigValidationError
        If the file is not a mapping or contains invalid values
    """
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigValidationError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigValidationError(f"Config file {path} must contain a mapping")

    config = ControllerConfig.from_dict(data)
    logger.info(f"Loaded controller config from {path}")
    return config
