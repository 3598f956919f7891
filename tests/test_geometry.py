"""
MEMBER GEOMETRY TESTS
=====================

A cylinder built along UP (0, 1, 0) must end up exactly between the two
member ends:
- length  = distance between the ends
- center  = midpoint
- rotating UP by the orientation gives the member direction

Coincident ends have no direction, so they must be flagged (None),
never returned as a zero-length cylinder with a garbage rotation.
"""

import logging

import numpy as np
import pytest

from frame_viewer.geometry import UP, CylinderSpec, Quaternion, cylinder_between


def test_length_and_center():
    spec = cylinder_between((1.0, 2.0, 3.0), (4.0, 6.0, 3.0))
    
    assert spec is not None
    assert spec.length == pytest.approx(5.0)
    assert spec.center == pytest.approx((2.5, 4.0, 3.0))


def test_orientation_maps_up_onto_direction():
    spec = cylinder_between((1.0, 2.0, 3.0), (4.0, 6.0, 3.0))
    
    np.testing.assert_allclose(spec.orientation.rotate(UP), [0.6, 0.8, 0.0], atol=1e-12)
    np.testing.assert_allclose(spec.direction, [0.6, 0.8, 0.0], atol=1e-12)


def test_random_pairs():
    """
    For arbitrary non-coincident pairs: |b - a| is the length and the
    rotated UP vector is parallel (same sense) to b - a.
    """
    rng = np.random.default_rng(42)
    for _ in range(200):
        a = rng.uniform(-50, 50, size=3)
        b = rng.uniform(-50, 50, size=3)
        spec = cylinder_between(a, b)
        
        d = b - a
        assert spec.length == pytest.approx(np.linalg.norm(d))
        
        rotated = spec.orientation.rotate(UP)
        np.testing.assert_allclose(rotated, d / np.linalg.norm(d), atol=1e-9)
        np.testing.assert_allclose(spec.center, (a + b) / 2, atol=1e-12)


def test_direction_equal_to_up_is_identity():
    spec = cylinder_between((0, 0, 0), (0, 5, 0))
    
    assert spec.length == pytest.approx(5.0)
    assert spec.center == pytest.approx((0.0, 2.5, 0.0))
    assert spec.orientation.as_tuple() == pytest.approx(Quaternion.identity().as_tuple())


def test_direction_opposite_to_up():
    """Anti-parallel case: a half turn that maps UP to -UP."""
    spec = cylinder_between((0, 5, 0), (0, 0, 0))
    
    q = np.array(spec.orientation.as_tuple())
    assert np.linalg.norm(q) == pytest.approx(1.0)
    np.testing.assert_allclose(spec.orientation.rotate(UP), [0.0, -1.0, 0.0], atol=1e-12)
    # three.js picks the half turn about z
    assert spec.orientation.as_tuple() == pytest.approx((0.0, 0.0, 1.0, 0.0))


@pytest.mark.parametrize("end, expected", [
    ((3, 0, 0), (1, 0, 0)),
    ((0, 0, -2), (0, 0, -1)),
    ((-1, 0, 0), (-1, 0, 0)),
])
def test_axis_aligned_members(end, expected):
    spec = cylinder_between((0, 0, 0), end)
    np.testing.assert_allclose(spec.direction, expected, atol=1e-12)


def test_coincident_points_are_degenerate(caplog):
    with caplog.at_level(logging.WARNING, logger='frame_viewer.geometry'):
        spec = cylinder_between((2.0, 2.0, 2.0), (2.0, 2.0, 2.0))
    
    assert spec is None
    assert "Degenerate member" in caplog.text


def test_small_member_is_kept_with_warning(caplog):
    with caplog.at_level(logging.WARNING, logger='frame_viewer.geometry'):
        spec = cylinder_between((0, 0, 0), (0.05, 0, 0))
    
    assert spec is not None
    assert spec.length == pytest.approx(0.05)
    assert "Very small member" in caplog.text


def test_small_member_threshold_is_configurable(caplog):
    with caplog.at_level(logging.WARNING, logger='frame_viewer.geometry'):
        spec = cylinder_between((0, 0, 0), (0, 2, 0), small_length=5.0)
    
    assert spec.length == pytest.approx(2.0)
    assert "Very small member" in caplog.text


@pytest.mark.parametrize("end", [
    (float('inf'), 0, 0),
    (0, float('-inf'), 0),
    (0, 0, float('nan')),
])
def test_non_finite_points_are_degenerate(end, caplog):
    """An infinite or NaN coordinate has no usable length or orientation."""
    with caplog.at_level(logging.WARNING, logger='frame_viewer.geometry'):
        spec = cylinder_between((0, 0, 0), end)
    
    assert spec is None
    assert "non-finite" in caplog.text


def test_quaternion_matrix_is_rotation():
    spec = cylinder_between((0, 0, 0), (1, 2, 3))
    R = spec.orientation.as_matrix()
    
    np.testing.assert_allclose(R @ R.T, np.eye(3), atol=1e-12)
    assert np.linalg.det(R) == pytest.approx(1.0)


def test_cylinder_spec_is_frozen():
    spec = cylinder_between((0, 0, 0), (1, 0, 0))
    assert isinstance(spec, CylinderSpec)
    
    with pytest.raises(Exception):  # dataclass.FrozenInstanceError
        spec.length = 2.0
