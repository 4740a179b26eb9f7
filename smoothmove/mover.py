"""Precise (sub-pixel) movement for entities placed on an integer grid."""
from __future__ import annotations

import logging
import math
from typing import Optional, Protocol, Tuple, TypeVar

from . import config
from .models import Vector, normalise_angle

logger = logging.getLogger(__name__)

Number = TypeVar("Number", int, float)


class NoWorldError(RuntimeError):
    """Raised when a world-relative operation runs on an entity outside any world."""


class MoverHost(Protocol):
    """Entity/world collaborator a :class:`PreciseMover` is attached to."""

    def world_width(self) -> int:
        ...

    def world_height(self) -> int:
        ...

    def integer_position(self) -> Tuple[int, int]:
        ...

    def set_integer_position(self, x: int, y: int) -> None:
        ...


def floor_toward_zero(value: float) -> int:
    """Project an exact coordinate onto the host's integer grid."""
    return math.trunc(value)


def calc_distance(a: Number, b: Number) -> Number:
    """Return the signed displacement ``b - a``."""
    return b - a


class PreciseMover:
    """Keeps an exact position and a velocity for a host entity.

    The host only knows integer coordinates.  The mover owns the
    authoritative floating point position and every placement goes through
    :meth:`set_location`, which writes the truncated projection back to the
    host.
    """

    def __init__(self, host: MoverHost, movement: Optional[Vector] = None) -> None:
        self._host = host
        self._movement = movement.copy() if movement is not None else Vector()
        self._exact_x = 0.0
        self._exact_y = 0.0

    def added_to_world(self) -> None:
        """Seed the exact position from the host once it enters a world."""
        x, y = self._host.integer_position()
        self._exact_x = float(x)
        self._exact_y = float(y)
        logger.debug("mover admitted at (%d, %d)", x, y)

    # ------------------------------------------------------------------
    # Position
    # ------------------------------------------------------------------
    @property
    def exact_x(self) -> float:
        return self._exact_x

    @property
    def exact_y(self) -> float:
        return self._exact_y

    def set_location(self, x: float, y: float) -> None:
        self._exact_x = float(x)
        self._exact_y = float(y)
        self._host.set_integer_position(floor_toward_zero(x), floor_toward_zero(y))

    def move(self, steps: int = 1) -> None:
        """Advance ``steps`` ticks, discarding any axis that would leave the world."""
        next_x, next_y = self._integrate(steps)
        if next_x < 0 or next_x >= self._host.world_width():
            next_x = self._exact_x
        if next_y < 0 or next_y >= self._host.world_height():
            next_y = self._exact_y
        self.set_location(next_x, next_y)

    def move_in_unbounded_world(self, steps: int = 1) -> None:
        self.set_location(*self._integrate(steps))

    def _integrate(self, steps: int) -> Tuple[float, float]:
        return (
            self._exact_x + self._movement.x * steps,
            self._exact_y + self._movement.y * steps,
        )

    def has_reached_destination(
        self, x: int, y: int, tolerance: float = config.DESTINATION_TOLERANCE
    ) -> bool:
        dx = calc_distance(self._exact_x, x)
        dy = calc_distance(self._exact_y, y)
        return math.hypot(dx, dy) <= tolerance

    # ------------------------------------------------------------------
    # Velocity
    # ------------------------------------------------------------------
    @property
    def movement(self) -> Vector:
        """A copy of the current movement; mutate through the mover instead."""
        return self._movement.copy()

    def set_movement(self, movement: Vector) -> None:
        self._movement = movement.copy()

    @property
    def speed(self) -> float:
        return self._movement.length

    @speed.setter
    def speed(self, value: float) -> None:
        self._movement.set_length(value)

    @property
    def direction(self) -> float:
        return self._movement.direction

    def set_direction(self, angle: float) -> None:
        self._movement.set_direction(normalise_angle(angle))

    def head_towards(self, x: float, y: float) -> None:
        """Point the movement at ``(x, y)`` keeping the current speed."""
        dx = calc_distance(self._exact_x, x)
        dy = calc_distance(self._exact_y, y)
        if dx == 0 and dy == 0:
            return
        self.set_direction(math.degrees(math.atan2(dy, dx)))

    def add_force(self, force: Vector) -> None:
        self._movement.add(force)

    def accelerate(self, factor: float) -> None:
        """Scale the speed by ``factor``; factors below 1 slow the mover down."""
        self._movement.scale(factor)
        if self._movement.length < config.DEAD_ZONE_SPEED:
            self._movement.set_neutral()

    def stop(self) -> None:
        self._movement.set_neutral()

    # ------------------------------------------------------------------
    # World edges
    # ------------------------------------------------------------------
    def _at_horizontal_edge(self) -> bool:
        x, _ = self._host.integer_position()
        return x <= 0 or x >= self._host.world_width() - 1

    def _at_vertical_edge(self) -> bool:
        _, y = self._host.integer_position()
        return y <= 0 or y >= self._host.world_height() - 1

    def at_world_edge(self) -> bool:
        return self._at_horizontal_edge() or self._at_vertical_edge()

    def bounce_at_edge(self) -> bool:
        """Reflect off the edge being touched; a corner reflects horizontally only.

        Returns ``True`` when a bounce happened.
        """
        if self._at_horizontal_edge():
            self.bounce_horizontal()
            return True
        if self._at_vertical_edge():
            self.bounce_vertical()
            return True
        return False

    def bounce_horizontal(self) -> None:
        self._recommit()
        self._movement.revert_horizontal()

    def bounce_vertical(self) -> None:
        self._recommit()
        self._movement.revert_vertical()

    def stop_at_world_edge(self) -> bool:
        """Halt and step one cell back inside the first edge breached.

        Returns ``True`` when the mover was at an edge.
        """
        if not self.at_world_edge():
            return False
        self.speed = 0.0
        x, y = self._host.integer_position()
        if x <= 0:
            self.set_location(config.EDGE_INSET, self._exact_y)
        elif x >= self._host.world_width() - 1:
            self.set_location(self._host.world_width() - 1 - config.EDGE_INSET, self._exact_y)
        elif y <= 0:
            self.set_location(self._exact_x, config.EDGE_INSET)
        elif y >= self._host.world_height() - 1:
            self.set_location(self._exact_x, self._host.world_height() - 1 - config.EDGE_INSET)
        return True

    def _recommit(self) -> None:
        x, y = self._host.integer_position()
        self.set_location(x, y)
