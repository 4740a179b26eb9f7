"""Core value types used by the movement simulation."""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Tuple

from . import config


def normalise_angle(angle: float) -> float:
    """Wrap ``angle`` (degrees) into ``[0, 360)``."""
    wrapped = float(angle) % 360.0
    # A tiny negative input wraps to exactly 360.0 in floating point.
    if wrapped >= 360.0:
        return 0.0
    return wrapped


@dataclass
class Vector:
    """Mutable 2D velocity/force with length and direction helpers.

    Directions are in degrees, measured from the positive x axis towards
    the positive y axis (clockwise on a screen whose y axis points down).
    A neutral vector keeps the last heading it had, or
    ``config.DEFAULT_DIRECTION`` if it never had one, so that
    ``set_length`` has a direction to grow along.
    """

    x: float = 0.0
    y: float = 0.0
    _heading: float = field(default=config.DEFAULT_DIRECTION, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.x = float(self.x)
        self.y = float(self.y)
        self._remember_heading()

    @classmethod
    def from_polar(cls, direction: float, length: float) -> "Vector":
        vector = cls()
        vector.set_direction(normalise_angle(direction))
        vector.set_length(length)
        return vector

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    @property
    def length(self) -> float:
        return math.hypot(self.x, self.y)

    @property
    def direction(self) -> float:
        if self.is_neutral():
            return self._heading
        return normalise_angle(math.degrees(math.atan2(self.y, self.x)))

    def is_neutral(self) -> bool:
        return self.x == 0 and self.y == 0

    def copy(self) -> "Vector":
        duplicate = Vector(self.x, self.y)
        duplicate._heading = self._heading
        return duplicate

    def to_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------
    def add(self, other: "Vector") -> None:
        """Add ``other`` component-wise in place."""
        self._remember_heading()
        self.x += other.x
        self.y += other.y

    def scale(self, factor: float) -> None:
        """Multiply both components by ``factor``."""
        self._remember_heading()
        self.x *= factor
        self.y *= factor

    def set_length(self, length: float) -> None:
        """Rescale to ``length`` while keeping the current direction."""
        self._heading = self.direction
        radians = math.radians(self._heading)
        self.x = length * math.cos(radians)
        self.y = length * math.sin(radians)

    def set_direction(self, degrees: float) -> None:
        """Rotate to ``degrees`` (already in ``[0, 360)``) keeping the length."""
        length = self.length
        self._heading = degrees
        radians = math.radians(degrees)
        self.x = length * math.cos(radians)
        self.y = length * math.sin(radians)

    def revert_horizontal(self) -> None:
        self.x = -self.x
        self._remember_heading()

    def revert_vertical(self) -> None:
        self.y = -self.y
        self._remember_heading()

    def set_neutral(self) -> None:
        self._remember_heading()
        self.x = 0.0
        self.y = 0.0

    def _remember_heading(self) -> None:
        if not self.is_neutral():
            self._heading = self.direction
