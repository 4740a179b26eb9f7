"""Tests for the pygame sprite host."""
from __future__ import annotations

import pygame
import pytest

from smoothmove.models import Vector
from smoothmove.mover import NoWorldError
from smoothmove.policy import EdgePolicy
from smoothmove.sprite import MoverSprite, SpriteArena


def test_sprite_position_is_seeded_on_admission() -> None:
    sprite = MoverSprite(12, 8, movement=Vector(0.5, 0.5))
    assert sprite.arena is None
    sprite.rect.topleft = (20, 30)
    arena = SpriteArena(100, 100)
    arena.add(sprite)
    assert sprite.arena is arena
    assert (sprite.mover.exact_x, sprite.mover.exact_y) == (20.0, 30.0)


def test_sprites_passed_to_arena_are_admitted() -> None:
    sprite = MoverSprite(4, 6)
    arena = SpriteArena(10, 10, sprite)
    assert sprite in arena
    assert sprite.world_width() == 10
    assert (sprite.mover.exact_x, sprite.mover.exact_y) == (4.0, 6.0)


def test_sprite_outside_arena_has_no_world() -> None:
    sprite = MoverSprite(1, 1, movement=Vector(1.0, 0.0))
    with pytest.raises(NoWorldError):
        sprite.update()


def test_group_update_moves_rect_with_truncation() -> None:
    sprite = MoverSprite(10, 10, size=(4, 4), movement=Vector(0.75, -0.25))
    arena = SpriteArena(64, 64, sprite)
    arena.update()
    arena.update()
    assert (sprite.mover.exact_x, sprite.mover.exact_y) == (11.5, 9.5)
    assert sprite.rect.topleft == (11, 9)
    assert sprite.rect.size == (4, 4)


def test_arena_edge_policy_applies_to_sprites() -> None:
    sprite = MoverSprite(8, 3, movement=Vector(1.0, 0.0))
    arena = SpriteArena(10, 10, sprite, edge_policy=EdgePolicy.BOUNCE)
    arena.update()
    assert sprite.rect.x == 9
    assert sprite.mover.movement.x == pytest.approx(-1.0)


def test_leaving_the_arena_drops_world_context() -> None:
    sprite = MoverSprite(5, 5)
    arena = SpriteArena(10, 10, sprite)
    arena.remove(sprite)
    assert sprite.arena is None
    arena.add(sprite)
    sprite.kill()
    assert sprite.arena is None
    with pytest.raises(NoWorldError):
        sprite.world_height()


def test_sprite_keeps_supplied_image() -> None:
    image = pygame.Surface((2, 2))
    sprite = MoverSprite(0, 0, size=(2, 2), image=image)
    assert sprite.image is image


def test_sprite_cannot_join_a_second_arena() -> None:
    sprite = MoverSprite(5, 5, movement=Vector(1.0, 0.0))
    first = SpriteArena(10, 10, sprite)
    second = SpriteArena(20, 20)
    with pytest.raises(ValueError):
        second.add(sprite)
    assert sprite not in second
    assert sprite.arena is first
    first.remove(sprite)
    second.add(sprite)
    assert sprite.arena is second
    second.update()
    assert sprite.rect.x == 6


def test_sprite_without_image_can_be_drawn() -> None:
    sprite = MoverSprite(2, 3, size=(2, 2))
    arena = SpriteArena(10, 10, sprite)
    canvas = pygame.Surface((10, 10))
    arena.draw(canvas)
    assert sprite.image.get_size() == (2, 2)
