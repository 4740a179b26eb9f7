"""Configuration constants and world settings for precise movement."""

from __future__ import annotations

from dataclasses import dataclass

from .policy import EdgePolicy

# Decaying speeds below this are snapped to exactly zero by ``accelerate``.
DEAD_ZONE_SPEED = 0.15

# Heading (degrees) reported by a vector that never had a direction.
DEFAULT_DIRECTION = 0.0

# Distance kept from the border when a mover is stopped at the world edge.
EDGE_INSET = 1

DESTINATION_TOLERANCE = 0.5
EVENT_LOG_SIZE = 50

DEFAULT_WORLD_WIDTH = 96
DEFAULT_WORLD_HEIGHT = 64


@dataclass(frozen=True)
class WorldConfig:
    """Static description of a bounded simulation area.

    Attributes
    ----------
    width:
        Number of integer columns.  Valid x positions are ``0`` to
        ``width - 1``.
    height:
        Number of integer rows.  Valid y positions are ``0`` to
        ``height - 1``.
    edge_policy:
        Boundary reaction used for movers that do not pick their own.
    steps_per_tick:
        Unit advances each mover performs per simulation tick.
    """

    width: int = DEFAULT_WORLD_WIDTH
    height: int = DEFAULT_WORLD_HEIGHT
    edge_policy: EdgePolicy = EdgePolicy.CLAMP
    steps_per_tick: int = 1

    def validate(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("World dimensions must be positive")
        if self.steps_per_tick <= 0:
            raise ValueError("steps_per_tick must be positive")
