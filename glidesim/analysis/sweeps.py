"""
Angle-of-attack sweeps of continuous, segmented and legacy polars.

Each sweep returns a pandas DataFrame with one row per alpha and columns
for the coefficients, glide ratio (ld) and sustained speeds (vxs, vys).
"""

from typing import Optional, Sequence

import numpy as np
import pandas as pd
from archimedes import struct

# Handle imports
try:
    from ..core.aero import compute_segment_force, compute_wind_frame, sum_all_segments
    from ..core.coefficients import get_all_coefficients, coeff_to_ss
    from ..core.inertia import compute_center_of_mass
    from ..core.polar import Polar, SegmentControls, default_controls
    from ..core.segments import AeroSegment
    from ..polars.legacy import LegacyPolar, get_legacy_coefficients
except ImportError:
    from glidesim.core.aero import compute_segment_force, compute_wind_frame, sum_all_segments
    from glidesim.core.coefficients import get_all_coefficients, coeff_to_ss
    from glidesim.core.inertia import compute_center_of_mass
    from glidesim.core.polar import Polar, SegmentControls, default_controls
    from glidesim.core.segments import AeroSegment
    from glidesim.polars.legacy import LegacyPolar, get_legacy_coefficients

POLAR_COLUMNS = ['alpha', 'cl', 'cd', 'cy', 'cm', 'cp', 'f', 'cn', 'cl_roll', 'ld', 'vxs', 'vys']
LEGACY_COLUMNS = ['alpha', 'cl', 'cd', 'cp', 'ld', 'vxs', 'vys']


@struct(frozen=True)
class SweepConfig:
    """Sweep range (deg) and flight condition."""

    min_alpha: float = -10.0
    max_alpha: float = 90.0
    step: float = 0.5
    beta_deg: float = 0.0
    delta: float = 0.0
    dirty: float = 0.0
    rho: float = 1.095
    airspeed: float = 45.0   # m/s, segmented sweeps only

    def alphas(self) -> np.ndarray:
        return np.arange(self.min_alpha, self.max_alpha + 1e-9, self.step)


DEFAULT_SWEEP = SweepConfig()


def glide_ratio(cl: float, cd: float) -> float:
    return cl / cd if cd > 0.001 else 0.0


def sweep_polar(polar: Polar, config: SweepConfig = DEFAULT_SWEEP) -> pd.DataFrame:
    """Lumped single-airfoil coefficients over the alpha range."""
    rows = []
    for alpha in config.alphas():
        c = get_all_coefficients(alpha, config.beta_deg, config.delta, polar, config.dirty)
        ss = coeff_to_ss(c['cl'], c['cd'], polar.s, polar.m, config.rho)
        rows.append({
            'alpha': alpha,
            'cl': c['cl'], 'cd': c['cd'], 'cy': c['cy'],
            'cm': c['cm'], 'cp': c['cp'], 'f': c['f'],
            'cn': c['cn'], 'cl_roll': c['cl_roll'],
            'ld': glide_ratio(c['cl'], c['cd']),
            'vxs': ss['vxs'], 'vys': ss['vys'],
        })
    return pd.DataFrame(rows, columns=POLAR_COLUMNS)


def sweep_segments(segments: Sequence[AeroSegment], polar: Polar, height: float,
                   controls: Optional[SegmentControls] = None,
                   config: SweepConfig = DEFAULT_SWEEP) -> pd.DataFrame:
    """
    Pseudo coefficients of a segmented vehicle over the alpha range.

    Segment forces are summed about the CG at the configured airspeed,
    projected onto the wind frame and normalized by q * S_ref (and chord
    for moments), so the table is comparable to sweep_polar. The system CP
    follows from the pitching moment and the normal-force coefficient
    CN = CL cos(alpha) + CD sin(alpha).

    Parameters:
    -----------
    segments : sequence of AeroSegment
        Segment descriptors
    polar : Polar
        Reference polar (s, m, chord, cg, mass segments)
    height : float
        Reference length for the mass model (m)
    controls : SegmentControls, optional
        Defaults to neutral controls
    config : SweepConfig
        Sweep range and flight condition
    """
    if controls is None:
        controls = default_controls()

    if len(polar.mass_segments) > 0:
        cg = compute_center_of_mass(polar.mass_segments, height, polar.m)
    else:
        cg = np.zeros(3)

    s_ref, m_ref, chord_ref = polar.s, polar.m, polar.chord
    q = 0.5 * config.rho * config.airspeed ** 2
    qs = q * s_ref
    qsc = qs * chord_ref

    rows = []
    for alpha in config.alphas():
        evaluated = [compute_segment_force(seg, alpha, config.beta_deg, controls,
                                           config.rho, config.airspeed)
                     for seg in segments]
        updated = [seg for seg, _ in evaluated]
        forces = [f for _, f in evaluated]

        wind, lift, side = compute_wind_frame(alpha, config.beta_deg)
        system = sum_all_segments(updated, forces, cg, polar.reference_length, wind, lift, side)

        total_lift = float(np.dot(lift, system.force))
        total_drag = -float(np.dot(wind, system.force))
        total_side = float(np.dot(side, system.force))

        cl = total_lift / qs if qs > 1e-10 else 0.0
        cd = total_drag / qs if qs > 1e-10 else 0.0
        cy = total_side / qs if qs > 1e-10 else 0.0
        cm = system.moment[1] / qsc if qsc > 1e-10 else 0.0
        cn = system.moment[2] / qsc if qsc > 1e-10 else 0.0
        cl_roll = system.moment[0] / qsc if qsc > 1e-10 else 0.0

        alpha_rad = np.radians(alpha)
        cn_force = cl * np.cos(alpha_rad) + cd * np.sin(alpha_rad)
        if abs(cn_force) > 0.02:
            cp = float(np.clip(polar.cg - cm / cn_force, 0.0, 1.0))
        else:
            cp = polar.cg

        ss = coeff_to_ss(cl, cd, s_ref, m_ref, config.rho)
        rows.append({
            'alpha': alpha, 'cl': cl, 'cd': cd, 'cy': cy, 'cm': cm, 'cp': cp,
            'f': 0.0, 'cn': cn, 'cl_roll': cl_roll,
            'ld': glide_ratio(cl, cd), 'vxs': ss['vxs'], 'vys': ss['vys'],
        })
    return pd.DataFrame(rows, columns=POLAR_COLUMNS)


def sweep_legacy_polar(polar: LegacyPolar, config: SweepConfig = DEFAULT_SWEEP) -> pd.DataFrame:
    """
    Tabulated polar over the alpha range.

    Angles outside the table are skipped; a polar without tables gives an
    empty frame.
    """
    if not polar.has_tables:
        return pd.DataFrame(columns=LEGACY_COLUMNS)

    legacy_min = polar.aoas[-1]
    legacy_max = polar.aoas[0]

    rows = []
    for alpha in config.alphas():
        if alpha < legacy_min or alpha > legacy_max:
            continue
        c = get_legacy_coefficients(alpha, polar)
        ss = coeff_to_ss(c['cl'], c['cd'], polar.s, polar.m, config.rho)
        rows.append({
            'alpha': alpha, 'cl': c['cl'], 'cd': c['cd'], 'cp': c['cp'],
            'ld': glide_ratio(c['cl'], c['cd']), 'vxs': ss['vxs'], 'vys': ss['vys'],
        })
    return pd.DataFrame(rows, columns=LEGACY_COLUMNS)


if __name__ == "__main__":
    from glidesim.polars.registry import get_polar, get_legacy_polar, make_aero_segments

    config = SweepConfig(min_alpha=0.0, max_alpha=20.0, step=2.0)

    print("=== Ibex UL lumped polar ===")
    print(sweep_polar(get_polar('ibexul'), config)[['alpha', 'cl', 'cd', 'ld', 'vxs', 'vys']]
          .round(3).to_string(index=False))

    print("\n=== Ibex UL segmented ===")
    table = sweep_segments(make_aero_segments('ibexul'), get_polar('ibexul'), 1.875, config=config)
    print(table[['alpha', 'cl', 'cd', 'ld', 'cm', 'cp']].round(3).to_string(index=False))

    print("\n=== Ibex UL legacy tables ===")
    print(sweep_legacy_polar(get_legacy_polar('ibexul'), config).round(3).to_string(index=False))
