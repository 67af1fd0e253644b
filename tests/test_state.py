import os, sys
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

import math

import pytest
from nestedradius import constants
from nestedradius.solver import solve
from nestedradius.state import NestedRectangle, clamp_values


def test_defaults():
    rect = NestedRectangle()
    assert rect.width == constants.DEFAULT_WIDTH
    assert rect.outer_radius == constants.DEFAULT_OUTER_RADIUS
    assert rect.distance == constants.DEFAULT_DISTANCE
    assert rect.inner_radius == pytest.approx(6.0)


def test_shrinking_clamps_radius_and_recomputes_inner():
    rect = NestedRectangle(512, 512, 200, 100, min_size=256, max_size=512)
    assert rect.inner_radius == pytest.approx(100.0)
    rect.resize(300, 256)
    assert rect.outer_radius == 128
    assert rect.distance == 100
    assert rect.inner_radius == pytest.approx(128 / math.pi)
    assert rect.inner_radius == solve(128, 100)


def test_size_range_applied_before_radius():
    rect = NestedRectangle(512, 512, 250, 4, min_size=256, max_size=512)
    rect.resize(100, 900)
    assert (rect.width, rect.height) == (256, 512)
    assert rect.outer_radius == 128


def test_distance_clamped_to_max_padding():
    rect = NestedRectangle(100, 60, 10, 50)
    assert rect.distance == 30
    assert rect.max_padding == 30
    assert (rect.inner_width, rect.inner_height) == (40, 0)


def test_setters_settle():
    rect = NestedRectangle(200, 200, 10, 4)
    rect.outer_radius = 500
    assert rect.outer_radius == 100
    rect.distance = -3
    assert rect.distance == 0
    rect.height = 50
    assert rect.outer_radius == 25
    assert rect.max_radius == 25


def test_reset_restores_defaults():
    rect = NestedRectangle(400, 300, 20, 8)
    rect.resize(30, 30)
    rect.distance = 2
    rect.reset()
    assert rect.snapshot()["width"] == 400
    assert rect.snapshot()["outer_radius"] == 20
    assert rect.snapshot()["distance"] == 8


def test_clamp_values_is_idempotent():
    once = clamp_values(120, 80, 70, 90, min_size=100, max_size=200)
    assert once == (120, 100, 50, 50)
    assert clamp_values(*once, min_size=100, max_size=200) == once


def test_clamp_values_rejects_bad_range():
    with pytest.raises(ValueError):
        clamp_values(100, 100, 10, 4, min_size=300, max_size=200)


def test_snapshot_contains_derived_values():
    snap = NestedRectangle(100, 80, 10, 4).snapshot()
    assert snap["inner_width"] == 92
    assert snap["inner_height"] == 72
    assert snap["inner_radius"] == pytest.approx(6.0)


def test_resizable_uses_default_range():
    rect = NestedRectangle.resizable()
    assert (rect.min_size, rect.max_size) == (constants.MIN_SIZE, constants.MAX_SIZE)
    assert (rect.width, rect.height) == (constants.DEFAULT_WIDTH, constants.DEFAULT_HEIGHT)
    rect.resize(10, 1000)
    assert (rect.width, rect.height) == (constants.MIN_SIZE, constants.MAX_SIZE)
    rect.outer_radius = 300
    assert rect.outer_radius == constants.MIN_SIZE / 2
