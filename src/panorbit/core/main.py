"""
Pan-orbit replay tool - Main Entry Point.

Feeds a scripted sequence of per-tick input batches through one controller
and prints the resulting pose after every tick as a JSON line. This is the
CLI entry point that uses tyro for argument parsing.

Script format (YAML)::

    ticks:
      - [{type: button, state: pressed}, {type: motion, delta: [4, -2]}]
      - []
      - [{type: pinch, magnitude: 0.1}]
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Annotated, Any

import tyro
import yaml

from src.panorbit.config.io import load_controller_config
from src.panorbit.config.settings import ControllerConfig, InputSchemeKind
from src.panorbit.core.controller import PanOrbitController, TickOutcome
from src.panorbit.interaction.events import InputEvent, events_from_dicts
from src.shared.exceptions import EventParseError, PanOrbitError

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO") -> None:
    """
    Setup logging configuration.

    Parameters
    ----------
    level : str
        Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def load_script(path: Path) -> list[list[InputEvent]]:
    """Read a replay script and parse every tick's event batch."""
    with open(path, encoding="utf-8") as f:
        data: Any = yaml.safe_load(f)

    if not isinstance(data, dict) or not isinstance(data.get("ticks"), list):
        raise EventParseError(f"Script {path} must contain a 'ticks' list")

    batches = []
    for tick_index, batch in enumerate(data["ticks"]):
        if batch is None:
            batch = []
        if not isinstance(batch, list):
            raise EventParseError(f"Tick {tick_index} must be a list of events", tick_index)
        batches.append(events_from_dicts(batch))
    return batches


def format_tick(index: int, controller: PanOrbitController, outcome: TickOutcome) -> str:
    """One JSON line describing the pose after a tick."""
    record = {"tick": index, **controller.state.to_dict()}
    record["action"] = outcome.action.value
    record["transform_written"] = outcome.transform_written
    record["transform"] = {
        "rotation_wxyz": [float(x) for x in controller.transform.rotation],
        "translation": [float(x) for x in controller.transform.translation],
    }
    return json.dumps(record)


def replay(
    batches: list[list[InputEvent]],
    config: ControllerConfig,
) -> list[str]:
    """Run every batch through a fresh controller and collect the output lines."""
    controller = PanOrbitController(config=config)
    lines = []
    for index, batch in enumerate(batches):
        outcome = controller.tick(batch)
        lines.append(format_tick(index, controller, outcome))
    logger.info(f"Replayed {len(batches)} tick(s)")
    return lines


def main(
    script: Annotated[Path, tyro.conf.Positional],
    config: Path | None = None,
    scheme: InputSchemeKind | None = None,
    log_level: str = "WARNING",
) -> None:
    """
    Replay scripted input through a pan-orbit camera controller.

    Parameters
    ----------
    script : Path
        YAML file with a `ticks` list of event batches
    config : Path | None
        Controller config YAML (defaults are used when omitted)
    scheme : InputSchemeKind | None
        Override the input scheme from the config
    log_level : str
        Logging level: DEBUG, INFO, WARNING, ERROR (default: WARNING)
    """
    setup_logging(log_level)

    try:
        controller_config = load_controller_config(config) if config else ControllerConfig()
        if scheme is not None:
            controller_config.scheme = scheme
        batches = load_script(script)
    except (OSError, PanOrbitError) as e:
        logger.error(f"Failed to start replay: {e}")
        raise SystemExit(1) from e

    for line in replay(batches, controller_config):
        print(line)


def cli() -> None:
    """Console script entry point."""
    tyro.cli(main)


if __name__ == "__main__":
    cli()
