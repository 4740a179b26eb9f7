"""Entity-component host that drives precise movers on a bounded grid."""

from . import components, systems, world
from .components import Destination, Motion, Position
from .host import EntityHost
from .world import MotionEvent, World

__all__ = [
    "World",
    "components",
    "systems",
    "world",
    "Destination",
    "EntityHost",
    "Motion",
    "MotionEvent",
    "Position",
]
