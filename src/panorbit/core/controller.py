"""
Pan-orbit camera controller.

DESIGN: One controller per camera
=================================

Each controller exclusively owns its CameraState, its ControllerConfig and
the input scheme built from it. The Transform belongs to the surrounding
scene; the controller reads its axes for translation and writes the new pose
back into it.

Per tick, in order:

1. accumulate()        raw events -> InputDeltas
2. scheme.resolve()    InputDeltas + persisted state -> CameraAction
3. update_pose()       CameraAction -> mutated CameraState
4. write_transform()   CameraState -> Transform (when the action is not NONE,
                       or on the first tick so the transform starts from the
                       spawn pose)
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from src.panorbit.config.settings import CameraSettings, ControllerConfig
from src.panorbit.control.actions import CameraAction
from src.panorbit.control.pose import update_pose
from src.panorbit.control.schemes import InputScheme, create_scheme
from src.panorbit.interaction.accumulator import InputDeltas, accumulate
from src.panorbit.interaction.events import InputEvent
from src.panorbit.rendering.camera_state import CameraState
from src.panorbit.rendering.transform import Transform, write_transform

logger = logging.getLogger(__name__)


__all__ = ["PanOrbitController", "TickOutcome"]


@dataclass(frozen=True)
class TickOutcome:
    """What a tick resolved and whether the transform was rewritten."""

    action: CameraAction
    transform_written: bool
    deltas: InputDeltas


class PanOrbitController:
    """
    Drives one camera from per-tick input batches.

    The caller delivers exactly the events received since the previous tick,
    exactly once.
    """

    def __init__(
        self,
        config: ControllerConfig | None = None,
        state: CameraState | None = None,
        transform: Transform | None = None,
    ):
        """
        Initialize controller.

        Parameters
        ----------
        config : ControllerConfig | None
            Scheme, flags and sensitivities. Defaults to ControllerConfig().
        state : CameraState | None
            Spawn pose. Defaults to CameraState().
        transform : Transform | None
            Externally owned transform to write into. A fresh identity
            transform is created when omitted.
        """
        self.config = config if config is not None else ControllerConfig()
        self.scheme: InputScheme = create_scheme(self.config)

        self._spawn_state = state.copy() if state is not None else CameraState()
        self._state = self._spawn_state.copy()
        self.transform = transform if transform is not None else Transform()

        # First tick always writes the transform
        self._needs_initial_write = True

        logger.info(f"PanOrbitController initialized (scheme={self.scheme.kind.value})")

    @property
    def state(self) -> CameraState:
        """Live camera state."""
        return self._state

    @property
    def settings(self) -> CameraSettings:
        """Sensitivities from the controller config."""
        return self.config.settings

    def get_state(self) -> CameraState:
        """Copy of the current state."""
        return self._state.copy()

    def reset(self) -> None:
        """Restore the spawn pose; the next tick rewrites the transform."""
        self._state = self._spawn_state.copy()
        self._needs_initial_write = True
        logger.debug("Camera state reset to spawn pose")

    def tick(self, events: Iterable[InputEvent]) -> TickOutcome:
        """
        Run the full pipeline for one tick.

        Parameters
        ----------
        events : Iterable[InputEvent]
            Events received since the previous tick

        Returns
        -------
        TickOutcome
            Resolved action and whether the transform was written
        """
        state = self._state
        deltas = accumulate(events)
        state.refresh_upside_down()

        # Button changes may not arrive every tick, so the last one persists
        if deltas.button_state is not None and deltas.button_state is not state.button_state:
            logger.debug(f"button state: {deltas.button_state.value}")
            state.button_state = deltas.button_state

        action = self.scheme.resolve(deltas, state.current_action, state.button_state)
        state.current_action = action

        update_pose(
            state,
            action,
            deltas,
            self.config.settings,
            self.transform,
            self.scheme,
            self.config.min_radius,
        )

        written = False
        if action is not CameraAction.NONE or self._needs_initial_write:
            write_transform(state, self.transform)
            self._needs_initial_write = False
            written = True

        return TickOutcome(action=action, transform_written=written, deltas=deltas)
