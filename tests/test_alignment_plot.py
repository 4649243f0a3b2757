"""
Tests for guide geometry and alignment plots
"""

import os
import sys

import pytest
from numpy.testing import assert_allclose

# Add project root to path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from contour_sketch.melody_matching.dtw_matcher import dtw
from contour_sketch.visualization.alignment_plot import (scale_contour_to_canvas, guide_points,
                                                         plot_alignment)


def test_scale_contour_to_canvas():
    assert_allclose(scale_contour_to_canvas([100, 350, 600], 400), [350, 200, 50])


def test_scale_flat_contour():
    assert_allclose(scale_contour_to_canvas([300, 300], 400, margin=20), [380, 380])


def test_guide_points_span_canvas():
    points = guide_points([600, 100, 600], width=500, height=400)
    assert points == [(50.0, 50.0), (250.0, 350.0), (450.0, 50.0)]


def test_guide_points_edge_cases():
    assert guide_points([], 400, 400) == []
    assert guide_points([200], 400, 400) == [(50.0, 350.0)]


def test_plot_alignment_writes_file(tmp_path):
    matplotlib = pytest.importorskip("matplotlib")
    matplotlib.use("Agg")
    pytest.importorskip("dtaidistance")
    reference = [0.0, 0.5, 1.0]
    candidate = [0.1, 0.4, 0.6, 0.9]
    filename = tmp_path / "alignment.png"
    plot_alignment(reference, candidate, dtw(reference, candidate), filename)
    assert filename.exists()
