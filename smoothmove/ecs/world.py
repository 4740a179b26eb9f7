"""Bounded grid world with minimal entity-component storage."""
from __future__ import annotations

import logging
from collections import defaultdict, deque
from dataclasses import dataclass
from typing import Deque, Dict, Generator, Iterable, Optional, Tuple, Type, TypeVar

from smoothmove import config
from smoothmove.config import WorldConfig
from smoothmove.ecs.components import Motion, Position
from smoothmove.ecs.host import EntityHost
from smoothmove.models import Vector
from smoothmove.mover import PreciseMover
from smoothmove.policy import EdgePolicy

logger = logging.getLogger(__name__)

ComponentType = TypeVar("ComponentType")


@dataclass
class MotionEvent:
    tick: int
    entity_id: int
    message: str


class World:
    """Stores entities and their components inside a ``width`` x ``height`` grid."""

    def __init__(self, world_config: Optional[WorldConfig] = None) -> None:
        self.config = world_config or WorldConfig()
        self.config.validate()
        self.tick: int = 0
        self.events: Deque[MotionEvent] = deque(maxlen=config.EVENT_LOG_SIZE)
        self._next_entity_id: int = 1
        self._components: Dict[Type[object], Dict[int, object]] = defaultdict(dict)

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    # ------------------------------------------------------------------
    # Entity management
    # ------------------------------------------------------------------
    def create_entity(self) -> int:
        entity_id = self._next_entity_id
        self._next_entity_id += 1
        return entity_id

    def remove_entity(self, entity_id: int) -> None:
        for component_map in self._components.values():
            component_map.pop(entity_id, None)

    def spawn_mover(
        self,
        x: int,
        y: int,
        movement: Optional[Vector] = None,
        edge_policy: Optional[EdgePolicy] = None,
    ) -> Tuple[int, PreciseMover]:
        """Create an entity at ``(x, y)`` with a precise mover attached."""
        entity_id = self.create_entity()
        self.add_component(entity_id, Position(x, y))
        return entity_id, self.attach_mover(entity_id, movement, edge_policy)

    def attach_mover(
        self,
        entity_id: int,
        movement: Optional[Vector] = None,
        edge_policy: Optional[EdgePolicy] = None,
    ) -> PreciseMover:
        """Give a placed entity a mover and admit it into the world."""
        if self.get_component(entity_id, Position) is None:
            raise ValueError(f"entity {entity_id} has no Position")
        if self.get_component(entity_id, Motion) is not None:
            raise ValueError(f"entity {entity_id} already has a mover")
        mover = PreciseMover(EntityHost(self, entity_id), movement)
        self.add_component(entity_id, Motion(mover, edge_policy))
        mover.added_to_world()
        logger.debug("entity %d admitted with %s", entity_id, edge_policy or self.config.edge_policy)
        return mover

    def policy_for(self, motion: Motion) -> EdgePolicy:
        return motion.edge_policy or self.config.edge_policy

    # ------------------------------------------------------------------
    # Component management
    # ------------------------------------------------------------------
    def add_component(self, entity_id: int, component: object) -> object:
        self._components[type(component)][entity_id] = component
        return component

    def get_component(self, entity_id: int, component_type: Type[ComponentType]) -> ComponentType | None:
        return self._components.get(component_type, {}).get(entity_id)  # type: ignore[return-value]

    def get_components(self, *component_types: Type[object]) -> Generator[Tuple[int, Tuple[object, ...]], None, None]:
        if not component_types:
            return
        smallest_type = min(component_types, key=lambda c: len(self._components.get(c, {})))
        for entity_id in list(self._components.get(smallest_type, {}).keys()):
            results = []
            for component_type in component_types:
                component = self._components.get(component_type, {}).get(entity_id)
                if component is None:
                    break
                results.append(component)
            else:
                yield entity_id, tuple(results)

    def remove_component(self, entity_id: int, component_type: Type[object]) -> None:
        self._components.get(component_type, {}).pop(entity_id, None)

    def entities_with(self, *component_types: Type[object]) -> Iterable[int]:
        for entity_id, _ in self.get_components(*component_types):
            yield entity_id

    # ------------------------------------------------------------------
    # Event log
    # ------------------------------------------------------------------
    def add_event(self, entity_id: int, message: str) -> None:
        self.events.append(MotionEvent(tick=self.tick, entity_id=entity_id, message=message))
        logger.debug("tick %d entity %d %s", self.tick, entity_id, message)
