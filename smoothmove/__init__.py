"""Sub-pixel precise motion for entities living on an integer grid."""

from .config import WorldConfig
from .models import Vector
from .mover import MoverHost, NoWorldError, PreciseMover, calc_distance, floor_toward_zero
from .policy import EdgePolicy

__all__ = [
    "EdgePolicy",
    "MoverHost",
    "NoWorldError",
    "PreciseMover",
    "Vector",
    "WorldConfig",
    "calc_distance",
    "floor_toward_zero",
]
