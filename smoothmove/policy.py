"""Boundary policies applied to a mover once per simulation tick."""
from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:  # pragma: no cover - imported for type checkers only
    from smoothmove.mover import PreciseMover


class EdgePolicy(str, Enum):
    """How a mover reacts to the border of a bounded world.

    ``BOUNCE`` and ``STOP`` react only once the integer position touches the
    first or last cell.  A mover faster than one cell per tick can halt just
    short of that cell: the clamp rejects every further step, so it stays put
    with its speed unchanged and the edge reaction never fires.
    """

    CLAMP = "clamp"
    BOUNCE = "bounce"
    STOP = "stop"
    UNBOUNDED = "unbounded"


def advance(mover: "PreciseMover", policy: EdgePolicy, steps: int = 1) -> Optional[str]:
    """Move ``mover`` by ``steps`` and apply ``policy``.

    Returns a short description of the edge reaction, or ``None`` when the
    border played no part in this tick.
    """
    if policy is EdgePolicy.UNBOUNDED:
        mover.move_in_unbounded_world(steps)
        return None

    mover.move(steps)
    if policy is EdgePolicy.BOUNCE and mover.bounce_at_edge():
        return "bounced off the world edge"
    if policy is EdgePolicy.STOP and mover.stop_at_world_edge():
        return "stopped at the world edge"
    return None
