"""Unit tests for the Vector value type."""
from __future__ import annotations

import pytest

from smoothmove import config
from smoothmove.models import Vector, normalise_angle


def test_length_and_direction_follow_components() -> None:
    vector = Vector(3.0, 4.0)
    assert vector.length == pytest.approx(5.0)
    assert Vector(0.0, 2.0).direction == pytest.approx(90.0)
    assert Vector(0.0, -2.0).direction == pytest.approx(270.0)
    assert Vector(-1.0, 0.0).direction == pytest.approx(180.0)


def test_neutral_vector_reports_default_direction() -> None:
    vector = Vector()
    assert vector.is_neutral()
    assert vector.direction == config.DEFAULT_DIRECTION


def test_set_length_on_neutral_vector_grows_along_default_direction() -> None:
    vector = Vector()
    vector.set_length(2.0)
    assert vector.x == pytest.approx(2.0)
    assert vector.y == pytest.approx(0.0)


def test_set_length_is_idempotent_rescale() -> None:
    vector = Vector(1.0, -2.5)
    for first, second in [(0.0, 3.0), (7.5, 1.25), (2.0, 0.0)]:
        vector.set_length(first)
        vector.set_length(second)
        assert vector.length == pytest.approx(second)


def test_neutralised_vector_remembers_last_heading() -> None:
    vector = Vector.from_polar(90.0, 2.0)
    vector.set_neutral()
    assert vector.direction == pytest.approx(90.0)
    vector.set_length(1.0)
    assert vector.x == pytest.approx(0.0, abs=1e-9)
    assert vector.y == pytest.approx(1.0)


def test_set_direction_keeps_length() -> None:
    vector = Vector(3.0, 4.0)
    vector.set_direction(180.0)
    assert vector.length == pytest.approx(5.0)
    assert vector.x == pytest.approx(-5.0)
    assert vector.y == pytest.approx(0.0, abs=1e-9)


def test_set_direction_on_neutral_vector_applies_once_length_is_set() -> None:
    vector = Vector()
    vector.set_direction(270.0)
    assert vector.is_neutral()
    vector.set_length(3.0)
    assert vector.y == pytest.approx(-3.0)


def test_add_and_scale() -> None:
    vector = Vector(1.0, 1.0)
    vector.add(Vector(0.5, -2.0))
    assert vector.to_tuple() == (1.5, -1.0)
    vector.scale(-2.0)
    assert vector.to_tuple() == (-3.0, 2.0)
    vector.scale(0)
    assert vector.is_neutral()


def test_revert_is_an_involution() -> None:
    vector = Vector(2.0, -3.0)
    vector.revert_horizontal()
    assert vector.to_tuple() == (-2.0, -3.0)
    vector.revert_horizontal()
    assert vector == Vector(2.0, -3.0)
    vector.revert_vertical()
    vector.revert_vertical()
    assert vector == Vector(2.0, -3.0)


def test_copy_is_independent() -> None:
    original = Vector(1.0, 2.0)
    duplicate = original.copy()
    duplicate.add(Vector(1.0, 1.0))
    assert original.to_tuple() == (1.0, 2.0)


@pytest.mark.parametrize(
    "angle, expected",
    [(0, 0.0), (359, 359.0), (360, 0.0), (-90, 270.0), (720, 0.0), (-720, 0.0), (725.5, 5.5)],
)
def test_normalise_angle(angle: float, expected: float) -> None:
    assert normalise_angle(angle) == pytest.approx(expected)


def test_normalise_angle_never_returns_full_turn() -> None:
    assert normalise_angle(-1e-20) == 0.0
