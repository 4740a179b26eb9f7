"""Component definitions used by the movement ECS."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from smoothmove import config
from smoothmove.mover import PreciseMover
from smoothmove.policy import EdgePolicy


@dataclass
class Position:
    """Integer grid cell the entity is rendered at."""

    x: int
    y: int


@dataclass
class Motion:
    """Owns the precise mover of an entity.

    ``edge_policy`` of ``None`` defers to the world's configured policy.
    """

    mover: PreciseMover
    edge_policy: Optional[EdgePolicy] = None


@dataclass
class Destination:
    """Target cell the entity steers towards until it is within ``tolerance``."""

    x: int
    y: int
    tolerance: float = config.DESTINATION_TOLERANCE
