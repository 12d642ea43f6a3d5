"""
Polar and vehicle registries keyed by short name.
"""

from typing import Callable, Dict, List

# Handle imports
try:
    from ..core.composite_frame import CompositeFrameConfig
    from ..core.polar import Polar
    from ..core.segments import AeroSegment
    from .assembly import make_ibex_aero_segments, make_a5_segments_aero_segments
    from .legacy import LegacyPolar, AURAFIVE_LEGACY, IBEXUL_LEGACY, SLICKSIN_LEGACY, CARAVAN_LEGACY
    from .library import AURAFIVE_POLAR, A5_SEGMENTS_POLAR, IBEXUL_POLAR, SLICKSIN_POLAR, CARAVAN_POLAR
    from .mass import rotate_pilot_mass
except ImportError:
    from glidesim.core.composite_frame import CompositeFrameConfig
    from glidesim.core.polar import Polar
    from glidesim.core.segments import AeroSegment
    from glidesim.polars.assembly import make_ibex_aero_segments, make_a5_segments_aero_segments
    from glidesim.polars.legacy import (
        LegacyPolar, AURAFIVE_LEGACY, IBEXUL_LEGACY, SLICKSIN_LEGACY, CARAVAN_LEGACY,
    )
    from glidesim.polars.library import (
        AURAFIVE_POLAR, A5_SEGMENTS_POLAR, IBEXUL_POLAR, SLICKSIN_POLAR, CARAVAN_POLAR,
    )
    from glidesim.polars.mass import rotate_pilot_mass

CONTINUOUS_POLARS: Dict[str, Polar] = {
    'aurafive': AURAFIVE_POLAR,
    'a5segments': A5_SEGMENTS_POLAR,
    'ibexul': IBEXUL_POLAR,
    'slicksin': SLICKSIN_POLAR,
    'caravan': CARAVAN_POLAR,
}

# The segmented A5 shares the Aura 5 tables
LEGACY_POLARS: Dict[str, LegacyPolar] = {
    'aurafive': AURAFIVE_LEGACY,
    'a5segments': AURAFIVE_LEGACY,
    'ibexul': IBEXUL_LEGACY,
    'slicksin': SLICKSIN_LEGACY,
    'caravan': CARAVAN_LEGACY,
}

AERO_SEGMENT_BUILDERS: Dict[str, Callable[[], List[AeroSegment]]] = {
    'ibexul': lambda: make_ibex_aero_segments('wingsuit'),
    'a5segments': make_a5_segments_aero_segments,
}


def get_polar(key: str) -> Polar:
    """Continuous polar by registry key."""
    try:
        return CONTINUOUS_POLARS[key]
    except KeyError:
        raise ValueError(f"Unknown polar: {key}. Choose from {sorted(CONTINUOUS_POLARS)}")


def get_legacy_polar(key: str) -> LegacyPolar:
    """Tabulated polar by registry key."""
    try:
        return LEGACY_POLARS[key]
    except KeyError:
        raise ValueError(f"Unknown legacy polar: {key}. Choose from {sorted(LEGACY_POLARS)}")


def has_aero_segments(key: str) -> bool:
    return key in AERO_SEGMENT_BUILDERS


def make_aero_segments(key: str) -> List[AeroSegment]:
    """Fresh segment list for a segmented vehicle."""
    if key not in AERO_SEGMENT_BUILDERS:
        raise ValueError(f"Polar {key} has no aero segments. "
                         f"Segmented polars: {sorted(AERO_SEGMENT_BUILDERS)}")
    return AERO_SEGMENT_BUILDERS[key]()


def canopy_frame_config(pilot_type: str = 'wingsuit', height: float = 1.875,
                        rho: float = 1.225) -> CompositeFrameConfig:
    """Composite frame recipe for the Ibex UL with the given pilot."""
    # Raises on an unknown pilot type
    make_ibex_aero_segments(pilot_type)
    return CompositeFrameConfig(
        polar=IBEXUL_POLAR,
        make_aero_segments=lambda: make_ibex_aero_segments(pilot_type),
        rotate_pilot_mass=rotate_pilot_mass,
        height=height,
        rho=rho,
    )
