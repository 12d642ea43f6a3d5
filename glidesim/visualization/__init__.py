"""
Visualization Module

Provides plotting for polar sweeps, trajectories and trim envelopes.
"""

from .plotting import (
    plot_polar_sweep,
    plot_speed_polar,
    plot_trajectory_3d,
    plot_glide_profile,
    plot_states_vs_time,
    plot_trim_envelope
)

__all__ = [
    'plot_polar_sweep',
    'plot_speed_polar',
    'plot_trajectory_3d',
    'plot_glide_profile',
    'plot_states_vs_time',
    'plot_trim_envelope'
]
