"""
Segment Force Summation Tests

Tests for the wind frame, dimensional segment forces, summation about the
CG and the rotating-frame evaluation.
"""

import pytest
import numpy as np
import os
import sys

# Add package to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from glidesim.core.aero import (
    compute_wind_frame, compute_segment_force, sum_all_segments, cp_position_meters,
    evaluate_aero_forces, evaluate_aero_forces_detailed, refresh_segments,
)
from glidesim.core.inertia import compute_center_of_mass
from glidesim.core.polar import SegmentControls, default_controls
from glidesim.core.segments import make_parasitic_segment, make_lifting_body_segment
from glidesim.polars.assembly import make_ibex_aero_segments, make_a5_segments_aero_segments
from glidesim.polars.library import A5_SEGMENTS_POLAR, IBEXUL_POLAR, SLICKSIN_POLAR


class TestWindFrame:
    """Test wind-frame basis vectors."""

    def test_level(self):
        wind, lift, side = compute_wind_frame(0.0, 0.0)
        assert np.allclose(wind, [1, 0, 0])
        assert np.allclose(lift, [0, 0, -1])
        assert np.allclose(side, [0, 1, 0])

    def test_orthonormal(self):
        wind, lift, side = compute_wind_frame(10.0, 5.0)
        basis = np.array([wind, lift, side])
        assert np.allclose(basis @ basis.T, np.eye(3), atol=1e-12)

    def test_lift_perpendicular_to_wind(self):
        wind, lift, _ = compute_wind_frame(35.0, -12.0)
        assert np.dot(wind, lift) == pytest.approx(0.0, abs=1e-12)


class TestSegmentForces:
    """Test dimensional forces and summation."""

    def test_parasitic_drag(self):
        pc = make_parasitic_segment('pc', (0.0, 0.0, 0.0), 1.0, 0.01, 1.0)
        _, force = compute_segment_force(pc, 0.0, 0.0, default_controls(), 1.225, 10.0)
        assert force.drag == pytest.approx(0.5 * 1.225 * 100.0)
        assert force.lift == 0.0

    def test_drag_at_cg_gives_no_moment(self):
        pc = make_parasitic_segment('pc', (0.0, 0.0, 0.0), 1.0, 0.01, 1.0)
        updated, force = compute_segment_force(pc, 0.0, 0.0, default_controls(), 1.225, 10.0)
        wind, lift, side = compute_wind_frame(0.0, 0.0)
        system = sum_all_segments([updated], [force], np.zeros(3), 1.875, wind, lift, side)

        assert np.allclose(system.force, [-force.drag, 0.0, 0.0])
        assert np.allclose(system.moment, 0.0)

    def test_drag_above_cg_pitches_up(self):
        """Drag applied above the CG gives a nose-up moment."""
        pc = make_parasitic_segment('pc', (0.0, 0.0, -1.0), 1.0, 0.01, 1.0)
        updated, force = compute_segment_force(pc, 0.0, 0.0, default_controls(), 1.225, 10.0)
        wind, lift, side = compute_wind_frame(0.0, 0.0)
        system = sum_all_segments([updated], [force], np.zeros(3), 1.875, wind, lift, side)
        assert system.moment[1] > 0.0

    def test_cp_position(self):
        """CP aft of the quarter chord sits behind the AC at zero pitch."""
        body = make_lifting_body_segment('body', (0.0, 0.0, 0.0), SLICKSIN_POLAR)
        at_quarter = cp_position_meters(body, 0.25, 1.875)
        aft = cp_position_meters(body, 0.5, 1.875)
        assert np.allclose(at_quarter, 0.0)
        assert aft[0] == pytest.approx(-0.25 * SLICKSIN_POLAR.chord)

    def test_cp_position_hanging(self):
        """A 90 deg pitch offset moves the CP offset onto the z axis."""
        body = make_lifting_body_segment('body', (0.0, 0.0, 0.0), SLICKSIN_POLAR, 90.0)
        aft = cp_position_meters(body, 0.5, 1.875)
        assert aft[0] == pytest.approx(0.0, abs=1e-12)
        assert abs(aft[2]) == pytest.approx(0.25 * SLICKSIN_POLAR.chord)


class TestRotatingFrame:
    """Test evaluation with body rates."""

    def test_matches_static_sum_without_rates(self):
        """With zero rates the detailed path equals the single-condition sum."""
        segments = make_a5_segments_aero_segments()
        cg = compute_center_of_mass(A5_SEGMENTS_POLAR.mass_segments, 1.875, 77.5)
        V = 40.0
        alpha = 6.0
        velocity = V * np.array([np.cos(np.radians(alpha)), 0.0, np.sin(np.radians(alpha))])
        controls = default_controls()

        system = evaluate_aero_forces(segments, cg, 1.875, velocity, np.zeros(3), controls, 1.225)

        evaluated = [compute_segment_force(seg, alpha, 0.0, controls, 1.225, V) for seg in segments]
        wind, lift, side = compute_wind_frame(alpha, 0.0)
        expected = sum_all_segments([s for s, _ in evaluated], [f for _, f in evaluated],
                                    cg, 1.875, wind, lift, side)

        assert np.allclose(system.force, expected.force, rtol=1e-9, atol=1e-9)
        assert np.allclose(system.moment, expected.moment, rtol=1e-9, atol=1e-9)

    def test_roll_damping(self):
        """Positive roll rate produces an opposing roll moment."""
        segments = make_a5_segments_aero_segments()
        cg = compute_center_of_mass(A5_SEGMENTS_POLAR.mass_segments, 1.875, 77.5)
        velocity = np.array([40.0, 0.0, 4.0])
        controls = default_controls()

        still = evaluate_aero_forces(segments, cg, 1.875, velocity, np.zeros(3), controls, 1.225)
        rolling = evaluate_aero_forces(segments, cg, 1.875, velocity,
                                       np.array([1.0, 0.0, 0.0]), controls, 1.225)
        assert rolling.moment[0] < still.moment[0]

    def test_canopy_roll_damping(self):
        """Rolling the canopy system is resisted as well."""
        segments = make_ibex_aero_segments('wingsuit')
        cg = compute_center_of_mass(IBEXUL_POLAR.mass_segments, 1.875, IBEXUL_POLAR.m)
        velocity = np.array([12.0, 0.0, 1.7])
        controls = default_controls()

        still = evaluate_aero_forces(segments, cg, 1.875, velocity, np.zeros(3), controls, 1.225)
        rolling = evaluate_aero_forces(segments, cg, 1.875, velocity,
                                       np.array([1.0, 0.0, 0.0]), controls, 1.225)
        assert rolling.moment[0] < still.moment[0]

    def test_raw_and_refreshed_segments_agree(self):
        """Lever arms come from the geometry the controls produce."""
        raw = make_ibex_aero_segments('wingsuit')
        controls = SegmentControls(deploy=0.3, brake_right=1.0)
        refreshed = refresh_segments(raw, controls)
        cg = compute_center_of_mass(IBEXUL_POLAR.mass_segments, 1.875, IBEXUL_POLAR.m)
        velocity = np.array([12.0, 0.0, 2.0])
        omega = np.array([0.5, 0.3, 0.2])

        from_raw = evaluate_aero_forces(raw, cg, 1.875, velocity, omega, controls, 1.225)
        from_refreshed = evaluate_aero_forces(refreshed, cg, 1.875, velocity, omega,
                                              controls, 1.225)
        assert np.allclose(from_raw.force, from_refreshed.force, rtol=1e-12, atol=1e-9)
        assert np.allclose(from_raw.moment, from_refreshed.moment, rtol=1e-12, atol=1e-9)

    def test_symmetric_vehicle_no_lateral_force(self):
        segments = make_a5_segments_aero_segments()
        cg = compute_center_of_mass(A5_SEGMENTS_POLAR.mass_segments, 1.875, 77.5)
        system = evaluate_aero_forces(segments, cg, 1.875, np.array([40.0, 0.0, 4.0]),
                                      np.zeros(3), default_controls(), 1.225)
        assert system.force[1] == pytest.approx(0.0, abs=1e-9)
        assert system.moment[0] == pytest.approx(0.0, abs=1e-9)
        assert system.moment[2] == pytest.approx(0.0, abs=1e-9)

    def test_detailed_breakdown(self):
        segments = make_ibex_aero_segments('wingsuit')
        _, per_segment = evaluate_aero_forces_detailed(
            segments, np.zeros(3), 1.875, np.array([10.0, 0.0, 2.0]), np.zeros(3),
            default_controls(), 1.225)
        assert [r.name for r in per_segment] == [s.name for s in segments]
        assert all(r.local_airspeed == pytest.approx(np.hypot(10.0, 2.0)) for r in per_segment)


class TestRefresh:
    """Test geometry refresh against live controls."""

    def test_right_brake_opens_right_flaps(self):
        segments = refresh_segments(make_ibex_aero_segments('wingsuit'),
                                    SegmentControls(brake_right=1.0))
        by_name = {s.name: s for s in segments}
        assert by_name['flap_r3'].s > 0.0
        assert by_name['flap_l3'].s == 0.0


if __name__ == "__main__":
    pytest.main([__file__, '-v'])
