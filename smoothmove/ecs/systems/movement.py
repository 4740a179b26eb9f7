"""Movement related ECS system."""
from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from smoothmove.ecs.components import Destination, Motion
from smoothmove.mover import PreciseMover
from smoothmove.policy import EdgePolicy, advance

if TYPE_CHECKING:  # pragma: no cover - imported for type checkers only
    from smoothmove.ecs.world import World


class MovementSystem:
    """Advances every mover one simulation tick."""

    def update(self, world: "World", steps: Optional[int] = None) -> None:
        steps = steps if steps is not None else world.config.steps_per_tick
        for entity_id, (motion,) in world.get_components(Motion):
            mover = motion.mover
            policy = world.policy_for(motion)
            destination = world.get_component(entity_id, Destination)
            if destination is not None:
                # Within one step of the target: land on it instead of overshooting.
                if self._arrive(world, entity_id, mover, destination, policy, mover.speed * steps):
                    continue
                mover.head_towards(destination.x, destination.y)

            reaction = advance(mover, policy, steps)
            if reaction:
                world.add_event(entity_id, reaction)

            if destination is not None:
                self._arrive(world, entity_id, mover, destination, policy, 0.0)
        world.tick += 1

    @staticmethod
    def _arrive(
        world: "World",
        entity_id: int,
        mover: PreciseMover,
        destination: Destination,
        policy: EdgePolicy,
        reach: float,
    ) -> bool:
        if not mover.has_reached_destination(
            destination.x, destination.y, max(destination.tolerance, reach)
        ):
            return False
        if not mover.has_reached_destination(destination.x, destination.y, destination.tolerance):
            inside = 0 <= destination.x < world.width and 0 <= destination.y < world.height
            if not inside and policy is not EdgePolicy.UNBOUNDED:
                return False
            mover.set_location(destination.x, destination.y)
        mover.stop()
        world.remove_component(entity_id, Destination)
        world.add_event(entity_id, f"reached ({destination.x}, {destination.y})")
        return True
