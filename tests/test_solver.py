import os, sys
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

import math

import pytest
from nestedradius.solver import format_radius, solve


def test_concrete_cases():
    assert solve(10, 4) == pytest.approx(6.0)
    assert solve(64, 32) == pytest.approx(32.0)
    assert solve(1024, 0) == 1024
    assert solve(1, 1) == pytest.approx(1 / math.pi)
    assert format_radius(solve(1, 1)) == "0.32"


def test_floor_is_radius_over_pi():
    for r in (0, 1, 7.5, 64, 1024):
        for d in (0, 1, 10, 500, 1024):
            assert solve(r, d) >= r / math.pi
            assert solve(r, d) == max(r / math.pi, r - d)


def test_no_inset_keeps_radius():
    for r in (0, 0.5, 3, 128, 1024):
        assert solve(r, 0) == r


def test_zero_radius_stays_zero():
    for d in (0, 4, 1024):
        assert solve(0, d) == 0


def test_monotonic_in_distance():
    results = [solve(100, d) for d in range(0, 200, 5)]
    assert all(a >= b for a, b in zip(results, results[1:]))
    assert results[-1] == pytest.approx(100 / math.pi)


def test_monotonic_in_radius():
    results = [solve(r, 16) for r in range(0, 200, 5)]
    assert all(a <= b for a, b in zip(results, results[1:]))


@pytest.mark.parametrize("radius,distance", [(-1, 0), (0, -1), (float("nan"), 1), (1, float("inf"))])
def test_rejects_out_of_domain(radius, distance):
    with pytest.raises(ValueError):
        solve(radius, distance)


def test_format_radius():
    assert format_radius(6.0) == "6"
    assert format_radius(1024) == "1024"
    assert format_radius(10 / math.pi) == "3.18"
    assert format_radius(2.5) == "2.50"
