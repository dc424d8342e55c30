"""Tests for the spring path generator and its helpers."""

import math

import numpy as np
import pytest

from springpath.errors import ConfigurationError
from springpath.utils.geometry import point_count, revolutions, segment_length, spring_path


def test_segment_length():
    assert segment_length(0, 0, 3, 4) == pytest.approx(5.0)
    assert segment_length(1, 1, 1, 1) == 0.0


def test_scenario_row():
    pts = spring_path(0, 0, 10, 0, diameter=2, tension=1, n=50)
    assert pts.shape == (250, 2)
    assert list(pts[0]) == pytest.approx([1.0, 0.0])
    # Last angle is 5 full turns, centred on the end point
    assert list(pts[-1]) == pytest.approx([11.0, 0.0])


def test_degenerate_segment_is_empty():
    for diameter, tension in [(1, 0.75), (3, 2), (0.1, 0.1)]:
        pts = spring_path(2, 2, 2, 2, diameter, tension, 50)
        assert pts.shape == (0, 2)


def test_non_positive_tension_rejected():
    with pytest.raises(ConfigurationError, match="tension must be larger than 0"):
        spring_path(0, 0, 1, 1, 1, 0, 50)
    with pytest.raises(ConfigurationError):
        spring_path(0, 0, 1, 1, 1, -0.5, 50)


def test_point_count_scales_with_length():
    short = spring_path(0, 0, 7, 0, 1, 0.75, 50)
    long = spring_path(0, 0, 14, 0, 1, 0.75, 50)
    assert abs(len(long) - 2 * len(short)) <= 1


def test_higher_tension_means_fewer_revolutions():
    # Deliberate: tension loosens the coil rather than tightening it
    assert revolutions(10, 1, 0.5) == pytest.approx(2 * revolutions(10, 1, 1.0))
    tight = spring_path(0, 0, 10, 0, 1, 0.5, 50)
    loose = spring_path(0, 0, 10, 0, 1, 1.0, 50)
    assert len(tight) > len(loose)


def test_diameter_scales_radius_and_inverts_revolutions():
    assert revolutions(10, 4, 1) == pytest.approx(revolutions(10, 2, 1) / 2)
    small = spring_path(0, 0, 10, 0, 2, 1, 50)
    big = spring_path(0, 0, 10, 0, 4, 1, 50)
    assert len(big) < len(small)
    assert np.abs(small[:, 1]).max() == pytest.approx(1.0, abs=0.01)
    assert np.abs(big[:, 1]).max() == pytest.approx(2.0, abs=0.01)


def test_points_stay_on_moving_circle():
    pts = spring_path(1, 2, 5, 8, diameter=1.5, tension=0.75, n=40)
    count = len(pts)
    cx = np.linspace(1, 5, count)
    cy = np.linspace(2, 8, count)
    radii = np.hypot(pts[:, 0] - cx, pts[:, 1] - cy)
    assert radii == pytest.approx(np.full(count, 0.75))


def test_partial_final_loop():
    # 2.5 revolutions: the path ends half a turn round, opposite the start
    pts = spring_path(0, 0, 5, 0, diameter=2, tension=1, n=10)
    assert len(pts) == 25
    assert list(pts[-1]) == pytest.approx([5 + math.cos(5 * math.pi), 0.0], abs=1e-9)


def test_point_count_rounding():
    assert point_count(50, 0.0) == 0
    assert point_count(10, 0.25) == 2  # 2.5 rounds half to even
    assert point_count(50, -1.0) == 0
