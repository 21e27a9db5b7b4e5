"""Camera actions resolved once per tick."""

from enum import Enum


class CameraAction(Enum):
    """
    The single camera action active during a tick.

    PAN and MOVE both translate the look-at center. PAN is the scroll-driven
    variant scaled by radius; MOVE is the drag-driven variant held by the
    primary button.
    """

    PAN = "pan"
    ORBIT = "orbit"
    ZOOM = "zoom"
    MOVE = "move"
    NONE = "none"
