"""
Composite Frame Tests

Tests for assembling the canopy system, its cached mass properties and
the per-step configuration derived from it.
"""

import pytest
import numpy as np
import os
import sys

# Add package to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from glidesim.core.composite_frame import (
    build_composite_frame, frame_needs_rebuild, frame_to_sim_config,
)
from glidesim.core.polar import SegmentControls, default_controls
from glidesim.polars.library import IBEXUL_POLAR
from glidesim.polars.registry import canopy_frame_config


@pytest.fixture(scope="module")
def frame_config():
    return canopy_frame_config('wingsuit')


@pytest.fixture(scope="module")
def full_frame(frame_config):
    return build_composite_frame(frame_config, deploy=1.0, pilot_pitch=0.0)


class TestBuild:
    """Test frame assembly."""

    def test_segments(self, full_frame):
        """7 cells, 6 flaps, lines, pilot chute and pilot."""
        assert len(full_frame.aero_segments) == 16
        assert full_frame.aero_segments[-1].name == 'pilot'

    def test_mass_properties(self, full_frame):
        assert full_frame.total_mass == IBEXUL_POLAR.m
        assert full_frame.inertia.Iyy > 0.0
        assert full_frame.cg[1] == pytest.approx(0.0, abs=1e-12)

    def test_effective_mass_exceeds_physical(self, full_frame):
        assert np.all(full_frame.effective_mass > full_frame.total_mass)
        assert full_frame.effective_inertia.Ixx > full_frame.inertia.Ixx

    def test_partial_deploy_less_apparent_mass(self, frame_config, full_frame):
        half = build_composite_frame(frame_config, deploy=0.5)
        assert half.apparent_mass.mass.z < full_frame.apparent_mass.mass.z
        assert half.deploy == 0.5

    def test_pilot_pitch_moves_cg(self, frame_config, full_frame):
        pitched = build_composite_frame(frame_config, pilot_pitch=20.0)
        assert pitched.cg[0] != pytest.approx(full_frame.cg[0])
        assert pitched.pilot_pitch == 20.0

    def test_slick_pilot(self):
        frame = build_composite_frame(canopy_frame_config('slick'))
        assert frame.aero_segments[-1].kind == 'lifting_body'

    def test_unknown_pilot_type(self):
        with pytest.raises(ValueError, match="Unknown pilot type"):
            canopy_frame_config('bogus')


class TestRebuild:
    """Test rebuild tolerances."""

    def test_within_tolerance(self, full_frame):
        assert not frame_needs_rebuild(full_frame, 1.0005, 0.005)

    def test_deploy_changed(self, full_frame):
        assert frame_needs_rebuild(full_frame, 0.99, 0.0)

    def test_pitch_changed(self, full_frame):
        assert frame_needs_rebuild(full_frame, 1.0, 0.02)


class TestSimConfig:
    """Test per-step configuration from a frame."""

    def test_with_apparent_mass(self, full_frame):
        config = frame_to_sim_config(full_frame, default_controls())
        assert config.mass_per_axis is not None
        assert config.mass_per_axis == pytest.approx(full_frame.effective_mass)
        assert config.inertia is full_frame.effective_inertia
        assert config.mass == IBEXUL_POLAR.m

    def test_without_apparent_mass(self, full_frame):
        config = frame_to_sim_config(full_frame, default_controls(), use_apparent_mass=False)
        assert config.mass_per_axis is None
        assert config.inertia is full_frame.inertia

    def test_segments_refreshed(self, full_frame):
        """Refreshed segments reflect the live brake input."""
        config = frame_to_sim_config(full_frame, SegmentControls(brake_left=1.0))
        by_name = {s.name: s for s in config.segments}
        assert by_name['flap_l3'].s > 0.0
        assert by_name['flap_r3'].s == 0.0
        # Cached frame keeps its neutral geometry
        cached = {s.name: s for s in full_frame.aero_segments}
        assert cached['flap_l3'].s == 0.0


if __name__ == "__main__":
    pytest.main([__file__, '-v'])
