"""
Vehicle data: polars, mass tables, legacy lookup tables and segment
assemblies for the Aura 5, Ibex UL, Slick Sin and Caravan.
"""

from .legacy import LegacyPolar, get_legacy_coefficients
from .registry import (
    CONTINUOUS_POLARS,
    LEGACY_POLARS,
    get_polar,
    get_legacy_polar,
    make_aero_segments,
    canopy_frame_config
)

__all__ = [
    'LegacyPolar',
    'get_legacy_coefficients',
    'CONTINUOUS_POLARS',
    'LEGACY_POLARS',
    'get_polar',
    'get_legacy_polar',
    'make_aero_segments',
    'canopy_frame_config'
]
