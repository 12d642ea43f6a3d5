"""
Point-mass body models for wingsuit and canopy flight.

Positions are normalized by pilot height (1.875 m); mass ratios are
fractions of the reference mass. NED body frame: x forward, y right,
z down.

Canopy flight uses the same 14 body segments hung below the risers and
trimmed 6 deg forward, plus canopy structure (weight and inertia) and
trapped canopy air (inertia only, buoyant).
"""

from typing import List, Optional, Sequence, Tuple

import numpy as np

# Handle imports
try:
    from ..core.polar import MassSegment
    from ..core.segments import DEPLOY_CHORD_OFFSET
except ImportError:
    from glidesim.core.polar import MassSegment
    from glidesim.core.segments import DEPLOY_CHORD_OFFSET


def _mirror_limbs(limbs) -> List[MassSegment]:
    """Right-side limbs followed by their left-side mirrors."""
    right = [MassSegment(f'right_{name}', ratio, (x, y, z)) for name, ratio, x, y, z in limbs]
    left = [MassSegment(f'left_{name}', ratio, (x, -y, z)) for name, ratio, x, y, z in limbs]
    return right + left


# Wingsuit body in flying position, head forward. Feet at x = -0.530,
# head at +0.302.
_WINGSUIT_LIMBS = [
    # name, ratio, x, y, z
    ('upper_arm', 0.0275, 0.174411, 0.158291, 0.0),
    ('forearm', 0.016, 0.141245, 0.247236, 0.0),
    ('hand', 0.008, 0.090994, 0.351759, 0.0),
    ('thigh', 0.1, -0.197951, 0.080402, 0.0),
    ('shin', 0.0465, -0.397951, 0.145729, 0.0),
    ('foot', 0.0145, -0.530112, 0.201005, -0.00503),
]

WINGSUIT_MASS_SEGMENTS: Tuple[MassSegment, ...] = tuple(
    [MassSegment('head', 0.14, (0.302049, 0.0, -0.01759)),
     MassSegment('torso', 0.435, (0.078431, 0.0, 0.0))]
    + _mirror_limbs(_WINGSUIT_LIMBS)
)

# Pilot under canopy

TRIM_ANGLE_DEG = 6.0
_COS_TRIM = np.cos(np.radians(TRIM_ANGLE_DEG))
_SIN_TRIM = np.sin(np.radians(TRIM_ANGLE_DEG))

PILOT_FWD_SHIFT = 0.28
PILOT_DOWN_SHIFT = 0.163

# Hanging pilot before trim, relative to the riser attachment
_CANOPY_PILOT_RAW = [
    # name, ratio, x, y, z
    ('head', 0.14, 0.10, 0.0, 0.280),
    ('torso', 0.435, 0.10, 0.0, 0.480),
    ('upper_arm', 0.0275, 0.08, 0.090, 0.300),
    ('forearm', 0.016, 0.14, 0.080, 0.220),
    ('hand', 0.008, 0.18, 0.070, 0.160),
    ('thigh', 0.1, 0.10, 0.060, 0.720),
    ('shin', 0.0465, 0.08, 0.050, 0.900),
    ('foot', 0.0145, 0.06, 0.050, 1.010),
]


def _trim(x: float, z: float) -> Tuple[float, float]:
    """Rotate (x, z) forward by the trim angle, rounded to 4 places."""
    return (round(float(x * _COS_TRIM + z * _SIN_TRIM), 4),
            round(float(-x * _SIN_TRIM + z * _COS_TRIM), 4))


def _build_canopy_pilot() -> Tuple[MassSegment, ...]:
    trimmed = []
    for name, ratio, x, y, z in _CANOPY_PILOT_RAW:
        tx, tz = _trim(x + PILOT_FWD_SHIFT, z + PILOT_DOWN_SHIFT)
        trimmed.append((name, ratio, tx, y, tz))
    center = [MassSegment(name, ratio, (x, y, z)) for name, ratio, x, y, z in trimmed[:2]]
    return tuple(center + _mirror_limbs(trimmed[2:]))


CANOPY_PILOT_SEGMENTS = _build_canopy_pilot()

# Riser attachment after trim; the pilot swings about this point
PILOT_PIVOT_X, PILOT_PIVOT_Z = _trim(PILOT_FWD_SHIFT, PILOT_DOWN_SHIFT)

# Seven cells on a 12 deg arc above the pilot
_CANOPY_CELL_POSITIONS = [
    ('c', (0.165, 0.0, -1.196)),
    ('r1', (0.161, 0.322, -1.162)),
    ('l1', (0.161, -0.322, -1.162)),
    ('r2', (0.151, 0.630, -1.062)),
    ('l2', (0.151, -0.630, -1.062)),
    ('r3', (0.134, 0.911, -0.901)),
    ('l3', (0.134, -0.911, -0.901)),
]

CANOPY_STRUCTURE_RATIO = 0.00643   # ~3.5 kg over 7 cells
CANOPY_AIR_RATIO = 0.011           # ~6 kg trapped air over 7 cells

CANOPY_STRUCTURE_SEGMENTS = tuple(
    MassSegment(f'canopy_structure_{tag}', CANOPY_STRUCTURE_RATIO, pos)
    for tag, pos in _CANOPY_CELL_POSITIONS
)
CANOPY_AIR_SEGMENTS = tuple(
    MassSegment(f'canopy_air_{tag}', CANOPY_AIR_RATIO, pos)
    for tag, pos in _CANOPY_CELL_POSITIONS
)

CANOPY_WEIGHT_SEGMENTS = CANOPY_PILOT_SEGMENTS + CANOPY_STRUCTURE_SEGMENTS
CANOPY_INERTIA_SEGMENTS = CANOPY_PILOT_SEGMENTS + CANOPY_STRUCTURE_SEGMENTS + CANOPY_AIR_SEGMENTS


def _rotate_about(segments: Sequence[MassSegment], pitch_deg: float,
                  pivot_x: float, pivot_z: float) -> Tuple[MassSegment, ...]:
    delta = np.radians(pitch_deg)
    cos_d, sin_d = np.cos(delta), np.sin(delta)
    rotated = []
    for seg in segments:
        dx = seg.x - pivot_x
        dz = seg.z - pivot_z
        rotated.append(MassSegment(seg.name, seg.mass_ratio,
                                   (float(dx * cos_d - dz * sin_d + pivot_x), seg.y,
                                    float(dx * sin_d + dz * cos_d + pivot_z))))
    return tuple(rotated)


def _deploy_canopy(segments: Sequence[MassSegment], deploy: float) -> Tuple[MassSegment, ...]:
    span_scale = 0.1 + 0.9 * deploy
    chord_offset = DEPLOY_CHORD_OFFSET * (1 - deploy)
    return tuple(MassSegment(seg.name, seg.mass_ratio,
                             (seg.x + chord_offset, seg.y * span_scale, seg.z))
                 for seg in segments)


def rotate_pilot_mass(pilot_pitch_deg: float, pivot: Optional[Tuple[float, float]] = None,
                      deploy: float = 1.0) -> Tuple[Tuple[MassSegment, ...], Tuple[MassSegment, ...]]:
    """
    Weight and inertia mass sets for a pitched pilot and deploying canopy.

    Parameters:
    -----------
    pilot_pitch_deg : float
        Pilot pitch increment about the pivot (deg), x-z plane rotation
    pivot : tuple, optional
        (x, z) rotation pivot; defaults to the trimmed riser attachment
    deploy : float
        Deployment fraction. Canopy masses move forward by the deploy chord
        offset and their span positions shrink to 0.1 + 0.9 * deploy.

    Returns:
    --------
    weight, inertia : tuple of MassSegment
        The precomputed sets when pitch is ~0 and deploy ~1
    """
    no_pitch = abs(pilot_pitch_deg) < 0.01
    full_deploy = abs(deploy - 1) < 0.001

    if no_pitch and full_deploy:
        return CANOPY_WEIGHT_SEGMENTS, CANOPY_INERTIA_SEGMENTS

    if pivot is None:
        pivot = (PILOT_PIVOT_X, PILOT_PIVOT_Z)

    if no_pitch:
        pilot = CANOPY_PILOT_SEGMENTS
    else:
        pilot = _rotate_about(CANOPY_PILOT_SEGMENTS, pilot_pitch_deg, *pivot)

    if full_deploy:
        structure, air = CANOPY_STRUCTURE_SEGMENTS, CANOPY_AIR_SEGMENTS
    else:
        structure = _deploy_canopy(CANOPY_STRUCTURE_SEGMENTS, deploy)
        air = _deploy_canopy(CANOPY_AIR_SEGMENTS, deploy)

    return pilot + structure, pilot + structure + air
