"""
Mass Properties Tests

Tests for point-mass inertia, center of mass, apparent mass and the
canopy pilot mass model.
"""

import pytest
import numpy as np
import os
import sys

# Add package to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from glidesim.core.inertia import (
    InertiaComponents, ZERO_INERTIA, calculate_inertia_components, compute_inertia,
    compute_center_of_mass, get_physical_mass_positions,
)
from glidesim.core.apparent_mass import (
    CanopyGeometry, canopy_geometry_from_polar, compute_apparent_mass,
    compute_apparent_inertia, apparent_mass_at_deploy, effective_mass, effective_inertia,
)
from glidesim.core.polar import MassSegment
from glidesim.polars.mass import (
    WINGSUIT_MASS_SEGMENTS, CANOPY_WEIGHT_SEGMENTS, CANOPY_INERTIA_SEGMENTS,
    CANOPY_PILOT_SEGMENTS, PILOT_PIVOT_X, PILOT_PIVOT_Z, rotate_pilot_mass,
)


class TestPointMassInertia:
    """Test inertia tensor of point masses."""

    def test_single_point(self):
        """Unit mass at (1, 2, 3)."""
        I = calculate_inertia_components([1.0], [[1.0, 2.0, 3.0]])
        assert I.Ixx == pytest.approx(13.0)
        assert I.Iyy == pytest.approx(10.0)
        assert I.Izz == pytest.approx(5.0)
        assert I.Ixy == pytest.approx(-2.0)
        assert I.Ixz == pytest.approx(-3.0)
        assert I.Iyz == pytest.approx(-6.0)

    def test_matrix_symmetric(self):
        I = calculate_inertia_components([1.0, 2.0], [[1.0, 2.0, 3.0], [-1.0, 0.5, 0.0]])
        M = I.to_matrix()
        assert M.shape == (3, 3)
        assert np.allclose(M, M.T)

    def test_empty(self):
        assert calculate_inertia_components([], []) is ZERO_INERTIA
        assert compute_inertia([]) is ZERO_INERTIA

    def test_segment_scaling(self):
        """Normalized positions scale by height, ratios by weight."""
        seg = MassSegment('probe', 0.5, (1.0, 0.0, 0.0))
        I = compute_inertia([seg], height=2.0, weight=80.0)
        assert I.Iyy == pytest.approx(40.0 * 4.0)
        assert I.Izz == pytest.approx(40.0 * 4.0)
        assert I.Ixx == pytest.approx(0.0)


class TestCenterOfMass:
    """Test mass-weighted CG."""

    def test_two_masses(self):
        segments = [MassSegment('a', 0.25, (1.0, 0.0, 0.0)),
                    MassSegment('b', 0.75, (-1.0, 0.0, 0.0))]
        cg = compute_center_of_mass(segments, height=1.0, weight=1.0)
        assert cg == pytest.approx([-0.5, 0.0, 0.0])

    def test_massless(self):
        cg = compute_center_of_mass([MassSegment('a', 0.0, (1.0, 1.0, 1.0))])
        assert np.allclose(cg, 0.0)

    def test_wingsuit_symmetric(self):
        cg = compute_center_of_mass(WINGSUIT_MASS_SEGMENTS)
        assert cg[1] == pytest.approx(0.0, abs=1e-12)

    def test_wingsuit_ratios_sum_to_one(self):
        assert sum(seg.mass_ratio for seg in WINGSUIT_MASS_SEGMENTS) == pytest.approx(1.0)

    def test_physical_positions(self):
        rows = get_physical_mass_positions(WINGSUIT_MASS_SEGMENTS, 1.875, 77.5)
        assert len(rows) == len(WINGSUIT_MASS_SEGMENTS)
        head = rows[0]
        assert head['name'] == 'head'
        assert head['mass'] == pytest.approx(0.14 * 77.5)
        assert head['x'] == pytest.approx(0.302049 * 1.875)


class TestApparentMass:
    """Test flat-planform added mass."""

    @pytest.fixture
    def canopy(self):
        return canopy_geometry_from_polar(20.439, 2.5)

    def test_geometry(self, canopy):
        assert canopy.span == pytest.approx(20.439 / 2.5)
        assert canopy.area == pytest.approx(20.439)

    def test_axis_ordering(self, canopy):
        """Normal and spanwise added mass dwarf the chordwise term."""
        am = compute_apparent_mass(canopy)
        assert am.x < am.z
        assert am.x < am.y
        assert am.z == pytest.approx(np.pi / 4 * 1.225 * 2.5 ** 2 * canopy.span)

    def test_scales_with_density(self, canopy):
        sea_level = compute_apparent_mass(canopy, 1.225)
        thin = compute_apparent_mass(canopy, 0.6125)
        assert thin.to_array() == pytest.approx(0.5 * sea_level.to_array())

        I_sea = compute_apparent_inertia(canopy, 1.225)
        I_thin = compute_apparent_inertia(canopy, 0.6125)
        assert I_thin.Ixx == pytest.approx(0.5 * I_sea.Ixx)

    def test_deploy(self, canopy):
        """Packed canopy keeps a small residual; full deploy equals the full planform."""
        full = apparent_mass_at_deploy(canopy, 1.0)
        packed = apparent_mass_at_deploy(canopy, 0.0)
        half = apparent_mass_at_deploy(canopy, 0.5)

        assert full.mass.z == pytest.approx(compute_apparent_mass(canopy).z)
        assert 0.0 < packed.mass.z < half.mass.z < full.mass.z
        assert packed.inertia.Ixx < full.inertia.Ixx

    def test_deploy_clamped(self, canopy):
        over = apparent_mass_at_deploy(canopy, 1.5)
        full = apparent_mass_at_deploy(canopy, 1.0)
        assert over.mass.y == pytest.approx(full.mass.y)

    def test_effective(self):
        am = compute_apparent_mass(CanopyGeometry(span=8.0, chord=2.5, area=20.0))
        m = effective_mass(77.5, am)
        assert m == pytest.approx([77.5 + am.x, 77.5 + am.y, 77.5 + am.z])

        physical = InertiaComponents(Ixx=10.0, Iyy=20.0, Izz=30.0, Ixz=-1.5)
        ai = compute_apparent_inertia(CanopyGeometry(span=8.0, chord=2.5, area=20.0))
        total = effective_inertia(physical, ai)
        assert total.Iyy == pytest.approx(20.0 + ai.Iyy)
        assert total.Ixz == -1.5


class TestCanopyPilotMass:
    """Test the hanging pilot and canopy mass sets."""

    def test_identity_at_trim(self):
        weight, inertia = rotate_pilot_mass(0.0)
        assert weight is CANOPY_WEIGHT_SEGMENTS
        assert inertia is CANOPY_INERTIA_SEGMENTS

    def test_pitch_preserves_pivot_distance(self):
        weight, _ = rotate_pilot_mass(15.0)
        for before, after in zip(CANOPY_PILOT_SEGMENTS, weight):
            r_before = np.hypot(before.x - PILOT_PIVOT_X, before.z - PILOT_PIVOT_Z)
            r_after = np.hypot(after.x - PILOT_PIVOT_X, after.z - PILOT_PIVOT_Z)
            assert r_after == pytest.approx(r_before)
            assert after.y == before.y

    def test_pitch_moves_pilot_only(self):
        weight, _ = rotate_pilot_mass(20.0)
        n_pilot = len(CANOPY_PILOT_SEGMENTS)
        feet = [s for s in weight if s.name.endswith('foot')]
        neutral = [s for s in CANOPY_PILOT_SEGMENTS if s.name.endswith('foot')]
        assert feet[0].x != pytest.approx(neutral[0].x)
        assert weight[n_pilot:] == CANOPY_WEIGHT_SEGMENTS[n_pilot:]

    def test_deploy_shrinks_span(self):
        weight, inertia = rotate_pilot_mass(0.0, deploy=0.5)
        n_pilot = len(CANOPY_PILOT_SEGMENTS)
        structure = weight[n_pilot:]
        full_structure = CANOPY_WEIGHT_SEGMENTS[n_pilot:]
        for packed, full in zip(structure, full_structure):
            assert packed.y == pytest.approx(full.y * 0.55)
        assert len(inertia) == len(CANOPY_INERTIA_SEGMENTS)

    def test_air_has_no_weight(self):
        """Trapped air contributes inertia only."""
        assert len(CANOPY_INERTIA_SEGMENTS) > len(CANOPY_WEIGHT_SEGMENTS)
        assert not any(s.name.startswith('canopy_air') for s in CANOPY_WEIGHT_SEGMENTS)


if __name__ == "__main__":
    pytest.main([__file__, '-v'])
