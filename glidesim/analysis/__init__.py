"""
Analysis tools: angle-of-attack sweeps of polars and segmented vehicles.
"""

from .sweeps import SweepConfig, sweep_polar, sweep_segments, sweep_legacy_polar

__all__ = ['SweepConfig', 'sweep_polar', 'sweep_segments', 'sweep_legacy_polar']
