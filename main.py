"""Text based driver showcasing precise movement on a small grid."""

from __future__ import annotations

import logging
import random
from typing import List, Tuple

from smoothmove import EdgePolicy, Vector, WorldConfig
from smoothmove.ecs import Destination, Position, World
from smoothmove.ecs.systems import MovementSystem


def _spawn_movers(world: World, count: int) -> List[int]:
    entity_ids = []
    for _ in range(count):
        velocity = Vector.from_polar(random.uniform(0, 360), random.uniform(0.2, 1.5))
        entity_id, _ = world.spawn_mover(
            random.randint(1, world.width - 2),
            random.randint(1, world.height - 2),
            velocity,
            edge_policy=random.choice(list(EdgePolicy)),
        )
        entity_ids.append(entity_id)
    return entity_ids


def _describe(world: World, entity_id: int) -> Tuple[int, int]:
    position = world.get_component(entity_id, Position)
    return (position.x, position.y)


def run_demo(mover_count: int = 6, ticks: int = 40) -> None:
    world = World(WorldConfig(width=32, height=24, edge_policy=EdgePolicy.BOUNCE))
    system = MovementSystem()
    entity_ids = _spawn_movers(world, mover_count)
    world.add_component(entity_ids[0], Destination(world.width // 2, world.height // 2))
    print(f"[World] {world.width}x{world.height} grid with {mover_count} movers.")
    for _ in range(ticks):
        system.update(world)
    for event in world.events:
        print(f"- tick {event.tick:>3}: entity {event.entity_id} {event.message}")
    print("[Final positions]")
    for entity_id in entity_ids:
        print(f"- entity {entity_id}: {_describe(world, entity_id)}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    run_demo()
