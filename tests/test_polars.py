"""
Polar Library Tests

Tests for the tabulated legacy polars, the continuous polar library and
the vehicle registries.
"""

import pytest
import numpy as np
import os
import sys

# Add package to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from glidesim.polars.legacy import (
    LegacyPolar, aoa_to_index, get_legacy_coefficients, legacy_table,
    IBEXUL_LEGACY, SLICKSIN_LEGACY, CARAVAN_LEGACY,
)
from glidesim.polars.library import IBEXUL_POLAR, SLICKSIN_POLAR, CARAVAN_POLAR
from glidesim.polars.mass import CANOPY_WEIGHT_SEGMENTS, CANOPY_INERTIA_SEGMENTS
from glidesim.polars.registry import (
    CONTINUOUS_POLARS, LEGACY_POLARS, get_polar, get_legacy_polar, has_aero_segments,
    make_aero_segments,
)
from glidesim.polars.assembly import PILOT_TYPES, make_ibex_aero_segments


class TestLegacyTables:
    """Test table lookup and interpolation."""

    def test_index_midpoint(self):
        assert aoa_to_index(87.5, IBEXUL_LEGACY.aoas) == (1, 0, pytest.approx(0.5))

    def test_index_clamped(self):
        last = len(IBEXUL_LEGACY.aoas) - 1
        assert aoa_to_index(120.0, IBEXUL_LEGACY.aoas) == (0, 0, 0.0)
        assert aoa_to_index(-5.0, IBEXUL_LEGACY.aoas) == (last, last, 1.0)

    def test_interpolated_coefficients(self):
        c = get_legacy_coefficients(87.5, IBEXUL_LEGACY)
        assert c['cl'] == pytest.approx(0.015)
        assert c['cd'] == pytest.approx(0.995)

    def test_grid_points_exact(self):
        c = get_legacy_coefficients(90.0, IBEXUL_LEGACY)
        assert c['cl'] == pytest.approx(0.0)
        assert c['cd'] == pytest.approx(1.0)
        assert c['cp'] == pytest.approx(0.05)

    def test_clamped_below_table(self):
        low = get_legacy_coefficients(-20.0, IBEXUL_LEGACY)
        edge = get_legacy_coefficients(0.0, IBEXUL_LEGACY)
        assert low == pytest.approx(edge)

    def test_no_tables(self):
        bare = LegacyPolar(name='bare', type='Wingsuit', polarslope=0.4, polarclo=0.08,
                           polarmindrag=0.1, rangemincl=0.0, rangemaxcl=1.0, s=2.0, m=77.5)
        assert not bare.has_tables
        assert get_legacy_coefficients(10.0, bare) == {'cl': 0.0, 'cd': 0.0, 'cp': 0.4}
        assert legacy_table(bare).shape == (0, 4)

    def test_table_array(self):
        table = legacy_table(IBEXUL_LEGACY)
        assert table.shape == (19, 4)
        assert table[0, 0] == 90
        assert table[-1, 0] == 0

    def test_tables_consistent(self):
        """Every table has matching grid, coefficient and CP lengths."""
        for polar in LEGACY_POLARS.values():
            n = len(polar.aoas)
            assert len(polar.stallpoint) == n
            assert len(polar.cp) == n
            assert list(polar.aoas) == sorted(polar.aoas, reverse=True)

    def test_slick_full_circle(self):
        assert SLICKSIN_LEGACY.aoas[0] == 180
        assert CARAVAN_LEGACY.has_tables


class TestRegistry:
    """Test polar and vehicle lookup."""

    def test_keys(self):
        assert set(CONTINUOUS_POLARS) == set(LEGACY_POLARS)
        assert get_polar('ibexul') is IBEXUL_POLAR
        assert get_legacy_polar('ibexul') is IBEXUL_LEGACY

    def test_unknown(self):
        with pytest.raises(ValueError, match="Unknown polar"):
            get_polar('glider')
        with pytest.raises(ValueError, match="Unknown legacy polar"):
            get_legacy_polar('glider')

    def test_segmented(self):
        assert has_aero_segments('ibexul')
        assert has_aero_segments('a5segments')
        assert not has_aero_segments('slicksin')
        assert len(make_aero_segments('a5segments')) == 6
        with pytest.raises(ValueError, match="has no aero segments"):
            make_aero_segments('caravan')

    def test_fresh_segment_lists(self):
        assert make_aero_segments('ibexul') is not make_aero_segments('ibexul')

    def test_pilot_types(self):
        for pilot_type in PILOT_TYPES:
            assert len(make_ibex_aero_segments(pilot_type)) == 16


class TestLibrary:
    """Test continuous polar parameters."""

    def test_canopy_mass_sets(self):
        assert IBEXUL_POLAR.mass_segments is CANOPY_WEIGHT_SEGMENTS
        assert IBEXUL_POLAR.inertia_segments is CANOPY_INERTIA_SEGMENTS

    def test_lumped_polars_have_no_mass_model(self):
        assert SLICKSIN_POLAR.mass_segments == ()
        assert CARAVAN_POLAR.inertia_segments == ()

    def test_stall_ordering(self):
        for polar in CONTINUOUS_POLARS.values():
            assert polar.alpha_stall_back < polar.alpha_0 < polar.alpha_stall_fwd
            assert polar.s > 0.0
            assert polar.chord > 0.0

    def test_weight_ratios(self):
        """Pilot plus canopy structure; trapped air adds inertia only."""
        weight = sum(s.mass_ratio for s in CANOPY_WEIGHT_SEGMENTS)
        assert weight == pytest.approx(1.0 + 7 * 0.00643)
        inertia = sum(s.mass_ratio for s in CANOPY_INERTIA_SEGMENTS)
        assert inertia == pytest.approx(weight + 7 * 0.011)


if __name__ == "__main__":
    pytest.main([__file__, '-v'])
