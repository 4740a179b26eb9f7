"""Pre-built systems that operate on ECS component data."""

from .movement import MovementSystem

__all__ = ["MovementSystem"]
