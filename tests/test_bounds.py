"""
Test scene bounds: center, size and the empty-scene default.
"""

import math

import pytest

from frame_viewer.bounds import SceneBounds, compute_scene_bounds


def test_right_triangle():
    bounds = compute_scene_bounds([(0, 0, 0), (10, 0, 0), (0, 10, 0)])
    
    assert bounds.center == pytest.approx((5.0, 5.0, 0.0))
    assert bounds.size == pytest.approx(15.0)
    assert bounds.minima == (0.0, 0.0, 0.0)
    assert bounds.maxima == (10.0, 10.0, 0.0)


def test_empty_input_uses_default():
    """
    No nodes means no extent: the camera still gets finite numbers.
    """
    bounds = compute_scene_bounds([])
    
    assert bounds.center == (0.0, 0.0, 0.0)
    assert bounds.size == 10.0
    assert bounds.is_empty
    assert bounds == SceneBounds.default()
    assert bounds.minima is None and bounds.maxima is None


def test_size_uses_largest_axis():
    bounds = compute_scene_bounds([(-2, 1, 0), (2, 3, 20)])
    
    assert bounds.center == pytest.approx((0.0, 2.0, 10.0))
    assert bounds.size == pytest.approx(30.0)


def test_single_node_has_zero_size():
    bounds = compute_scene_bounds([(3, -4, 5)])
    
    assert bounds.center == pytest.approx((3.0, -4.0, 5.0))
    assert bounds.size == 0.0
    assert not bounds.is_empty


def test_custom_margin():
    bounds = compute_scene_bounds([(0, 0, 0), (4, 0, 0)], margin_factor=2.0)
    assert bounds.size == pytest.approx(8.0)


def test_values_are_finite():
    bounds = compute_scene_bounds(iter([(1, 1, 1), (2, 2, 2)]))
    assert all(math.isfinite(c) for c in bounds.center)
    assert math.isfinite(bounds.size)
