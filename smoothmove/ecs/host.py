"""Adapter exposing one ECS entity as a mover host."""
from __future__ import annotations

from typing import TYPE_CHECKING, Tuple

from smoothmove.ecs.components import Position
from smoothmove.mover import NoWorldError

if TYPE_CHECKING:  # pragma: no cover - imported for type checkers only
    from smoothmove.ecs.world import World


class EntityHost:
    """Reads and writes the ``Position`` component of a single entity."""

    def __init__(self, world: "World", entity_id: int) -> None:
        self._world = world
        self._entity_id = entity_id

    def _position(self) -> Position:
        position = self._world.get_component(self._entity_id, Position)
        if position is None:
            raise NoWorldError(f"entity {self._entity_id} is not placed in the world")
        return position

    def world_width(self) -> int:
        self._position()
        return self._world.width

    def world_height(self) -> int:
        self._position()
        return self._world.height

    def integer_position(self) -> Tuple[int, int]:
        position = self._position()
        return (position.x, position.y)

    def set_integer_position(self, x: int, y: int) -> None:
        position = self._position()
        position.x = x
        position.y = y
