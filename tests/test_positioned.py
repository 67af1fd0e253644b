import os, sys
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

import pytest
from nestedradius.positioned import edge_distances, positioned_inner_radius


def test_edge_distances():
    assert edge_distances(240, 180, 80, 60, 10, 20) == (10, 20, 150, 100)


def test_scaled_radius_wins():
    assert positioned_inner_radius(240, 180, 12, 80, 60, 10, 20) == pytest.approx(4.0)


def test_closest_edge_caps_radius():
    assert positioned_inner_radius(240, 180, 120, 200, 150, 2, 20) == pytest.approx(2.0)


def test_overflowing_inner_rect_gives_zero():
    assert positioned_inner_radius(100, 100, 20, 120, 50, 0, 0) == 0


def test_zero_outer_size_rejected():
    with pytest.raises(ValueError):
        positioned_inner_radius(0, 100, 10, 10, 10, 0, 0)
