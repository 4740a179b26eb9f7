"""pygame host: sprites whose rect follows a precise mover."""
from __future__ import annotations

import logging
from typing import Optional, Tuple

import pygame

from .config import WorldConfig
from .models import Vector
from .mover import NoWorldError, PreciseMover
from .policy import EdgePolicy, advance

logger = logging.getLogger(__name__)


class SpriteArena(pygame.sprite.Group):
    """A sprite group that doubles as the bounded world its movers live in."""

    def __init__(
        self,
        width: int,
        height: int,
        *sprites: pygame.sprite.Sprite,
        edge_policy: EdgePolicy = EdgePolicy.CLAMP,
    ) -> None:
        # Set before Group.__init__, which admits ``sprites`` straight away.
        self.config = WorldConfig(width=width, height=height, edge_policy=edge_policy)
        self.config.validate()
        super().__init__(*sprites)

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height


class MoverSprite(pygame.sprite.Sprite):
    """Sprite positioned by ``rect.topleft`` and moved by a :class:`PreciseMover`.

    The mover's exact position is seeded when the sprite joins a
    :class:`SpriteArena`.  A sprite lives in at most one arena at a time;
    leaving it, or being killed, drops the world context again.
    """

    def __init__(
        self,
        x: int,
        y: int,
        size: Tuple[int, int] = (1, 1),
        movement: Optional[Vector] = None,
        image: Optional[pygame.Surface] = None,
    ) -> None:
        super().__init__()
        self.rect = pygame.Rect(x, y, size[0], size[1])
        self.image = image if image is not None else pygame.Surface(size)
        self.arena: Optional[SpriteArena] = None
        self.mover = PreciseMover(self, movement)

    def add_internal(self, group) -> None:
        if isinstance(group, SpriteArena) and self.arena is not None and group is not self.arena:
            # The group registered the sprite before calling us; undo that.
            group.remove_internal(self)
            raise ValueError("sprite already belongs to another arena")
        super().add_internal(group)
        if isinstance(group, SpriteArena) and self.arena is None:
            self.arena = group
            self.mover.added_to_world()

    def remove_internal(self, group) -> None:
        super().remove_internal(group)
        if group is self.arena:
            self.arena = None
            logger.debug("sprite left its arena at %s", self.rect.topleft)

    def kill(self) -> None:
        super().kill()
        self.arena = None

    def update(self, steps: int = 1) -> None:
        advance(self.mover, self._require_arena().config.edge_policy, steps)

    # ------------------------------------------------------------------
    # MoverHost
    # ------------------------------------------------------------------
    def _require_arena(self) -> SpriteArena:
        if self.arena is None:
            raise NoWorldError("sprite has not been added to an arena")
        return self.arena

    def world_width(self) -> int:
        return self._require_arena().width

    def world_height(self) -> int:
        return self._require_arena().height

    def integer_position(self) -> Tuple[int, int]:
        return (self.rect.x, self.rect.y)

    def set_integer_position(self, x: int, y: int) -> None:
        self.rect.topleft = (x, y)
