"""
Core flight dynamics components.

This module provides the aerodynamic model (polars, Kirchhoff coefficients,
segments), mass properties, equations of motion and integrators.
"""

from .polar import Polar, MassSegment, SymmetricControl, SegmentControls, default_controls
from .coefficients import get_all_coefficients, coeff_to_forces, coeff_to_ss
from .segments import AeroSegment, evaluate_segment
from .aero import evaluate_aero_forces, sum_all_segments, refresh_segments
from .inertia import InertiaComponents, compute_inertia, compute_center_of_mass
from .apparent_mass import compute_apparent_mass_result, effective_mass, effective_inertia
from .state import SimState, SimConfig
from .integrator import EulerIntegrator, RK4Integrator, compute_derivatives, simulate_history
from .composite_frame import (
    CompositeFrameConfig,
    CompositeFrame,
    build_composite_frame,
    frame_to_sim_config
)

__all__ = [
    'Polar',
    'MassSegment',
    'SymmetricControl',
    'SegmentControls',
    'default_controls',
    'get_all_coefficients',
    'coeff_to_forces',
    'coeff_to_ss',
    'AeroSegment',
    'evaluate_segment',
    'evaluate_aero_forces',
    'sum_all_segments',
    'refresh_segments',
    'InertiaComponents',
    'compute_inertia',
    'compute_center_of_mass',
    'compute_apparent_mass_result',
    'effective_mass',
    'effective_inertia',
    'SimState',
    'SimConfig',
    'EulerIntegrator',
    'RK4Integrator',
    'compute_derivatives',
    'simulate_history',
    'CompositeFrameConfig',
    'CompositeFrame',
    'build_composite_frame',
    'frame_to_sim_config'
]
