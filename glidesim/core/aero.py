"""
Segment force evaluation and system summation.

Forces and moments are expressed in the NED body frame (x forward,
y right, z down) about the system center of gravity. Segment positions
are normalized by the reference length ``height``; CG and lever arms are
in meters.

The rotating-frame path evaluates each segment at its local velocity
V + omega x r. This is the only source of rate damping in the model.
"""

from typing import List, Sequence, Tuple

import numpy as np
from archimedes import struct, field

# Handle imports
try:
    from .kirchhoff import DEG2RAD
    from .polar import SegmentControls
    from .segments import AeroSegment, evaluate_segment
except ImportError:
    from kirchhoff import DEG2RAD
    from polar import SegmentControls
    from segments import AeroSegment, evaluate_segment

RAD2DEG = 180.0 / np.pi


@struct(frozen=True)
class SegmentForce:
    """Dimensional force magnitudes of one segment."""

    lift: float     # N, along lift direction
    drag: float     # N, opposing the wind
    side: float     # N, along side direction
    moment: float   # N*m, intrinsic pitching moment about the AC
    cp: float       # chord fraction from the leading edge


@struct(frozen=False)
class SystemForces:
    """Total aerodynamic force (N) and moment about CG (N*m), body NED."""

    force: np.ndarray = field(default_factory=lambda: np.zeros(3))
    moment: np.ndarray = field(default_factory=lambda: np.zeros(3))


@struct(frozen=True)
class SegmentAeroResult:
    """Per-segment breakdown from the rotating-frame evaluation."""

    name: str
    segment: AeroSegment
    forces: SegmentForce
    local_velocity: np.ndarray
    local_airspeed: float
    local_alpha: float
    local_beta: float
    position_meters: np.ndarray


def compute_wind_frame(alpha_deg: float, beta_deg: float) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Wind-frame unit vectors in body NED coordinates.

    Returns:
    --------
    wind_dir : np.ndarray
        Direction the air comes from (parallel to body velocity)
    lift_dir : np.ndarray
        Perpendicular to the wind, "up" in the vertical plane
    side_dir : np.ndarray
        wind_dir x lift_dir
    """
    a = alpha_deg * DEG2RAD
    b = beta_deg * DEG2RAD

    wind = np.array([np.cos(b) * np.cos(a), np.sin(b) * np.cos(a), np.sin(a)])

    # lift = (wind x up) x wind, with up = (0, 0, -1)
    temp = np.array([-np.sin(b) * np.cos(a), np.cos(b) * np.cos(a), 0.0])
    lift = np.cross(temp, wind)
    norm = np.linalg.norm(lift)
    if norm > 1e-10:
        lift = lift / norm
    else:
        lift = np.array([-1.0, 0.0, 0.0])

    side = np.cross(wind, lift)
    return wind, lift, side


def compute_segment_force(segment: AeroSegment, alpha_deg: float, beta_deg: float,
                          controls: SegmentControls, rho: float,
                          airspeed: float) -> Tuple[AeroSegment, SegmentForce]:
    """
    Evaluate one segment and scale its coefficients by q*S.

    Returns the updated segment descriptor with the forces; area and chord
    used for scaling are the updated ones.
    """
    updated, c = evaluate_segment(segment, alpha_deg, beta_deg, controls)
    q = 0.5 * rho * airspeed * airspeed
    qs = q * updated.s
    return updated, SegmentForce(
        lift=qs * c.cl,
        drag=qs * c.cd,
        side=qs * c.cy,
        moment=qs * updated.chord * c.cm,
        cp=c.cp,
    )


def segment_force_vector(force: SegmentForce, wind_dir: np.ndarray,
                         lift_dir: np.ndarray, side_dir: np.ndarray) -> np.ndarray:
    """Body-frame force vector (N) from lift/drag/side magnitudes."""
    return lift_dir * force.lift - wind_dir * force.drag + side_dir * force.side


def cp_position_meters(segment: AeroSegment, cp: float, height: float) -> np.ndarray:
    """
    Center of pressure of a segment in meters.

    The offset from the quarter chord runs along the chord line, which is
    pitched by -pitch_offset_deg in the x-z plane and then rotated rigidly
    by chord_rotation_rad. A CP aft of the quarter chord gives a negative
    x offset at zero pitch.
    """
    offset = -(cp - 0.25) * segment.chord / height
    base = -segment.pitch_offset_deg * DEG2RAD
    off_x = offset * np.cos(base)
    off_z = offset * np.sin(base)

    rot = segment.chord_rotation_rad
    if abs(rot) > 1e-6:
        cos_d = np.cos(rot)
        sin_d = np.sin(rot)
        off_x, off_z = off_x * cos_d - off_z * sin_d, off_x * sin_d + off_z * cos_d

    x, y, z = segment.position
    return np.array([(x + off_x) * height, y * height, (z + off_z) * height])


def sum_all_segments(segments: Sequence[AeroSegment], segment_forces: Sequence[SegmentForce],
                     cg: np.ndarray, height: float, wind_dir: np.ndarray,
                     lift_dir: np.ndarray, side_dir: np.ndarray) -> SystemForces:
    """
    Sum segment forces and moments about the CG at one shared wind frame.

    Parameters:
    -----------
    segments : sequence of AeroSegment
        Segments as returned by compute_segment_force (updated geometry)
    segment_forces : sequence of SegmentForce
        Forces matching ``segments``
    cg : np.ndarray
        System CG in meters, body NED
    height : float
        Reference length for normalized positions (m)
    wind_dir, lift_dir, side_dir : np.ndarray
        Wind-frame basis from compute_wind_frame

    Returns:
    --------
    system : SystemForces
        Total force and moment (r_cp x F plus intrinsic pitching moments)
    """
    cg = np.asarray(cg, dtype=float)
    total_force = np.zeros(3)
    total_moment = np.zeros(3)

    for seg, f in zip(segments, segment_forces):
        force = segment_force_vector(f, wind_dir, lift_dir, side_dir)
        total_force += force

        r = cp_position_meters(seg, f.cp, height) - cg
        total_moment += np.cross(r, force)
        total_moment[1] += f.moment

    return SystemForces(force=total_force, moment=total_moment)


def evaluate_aero_forces_detailed(segments: Sequence[AeroSegment], cg: np.ndarray,
                                  height: float, body_velocity: np.ndarray,
                                  omega: np.ndarray, controls: SegmentControls,
                                  rho: float) -> Tuple[SystemForces, List[SegmentAeroResult]]:
    """
    Evaluate every segment at its local velocity V + omega x r.

    Parameters:
    -----------
    segments : sequence of AeroSegment
        Segment descriptors
    cg : np.ndarray
        System CG (m)
    height : float
        Reference length (m)
    body_velocity : np.ndarray
        (u, v, w) body-frame velocity (m/s)
    omega : np.ndarray
        (p, q, r) body angular rates (rad/s)
    controls : SegmentControls
        Live controls
    rho : float
        Air density (kg/m^3)

    Returns:
    --------
    system : SystemForces
        Total force and moment about CG
    per_segment : list of SegmentAeroResult
        Local flow, forces and updated descriptor per segment
    """
    cg = np.asarray(cg, dtype=float)
    body_velocity = np.asarray(body_velocity, dtype=float)
    omega = np.asarray(omega, dtype=float)

    total_force = np.zeros(3)
    total_moment = np.zeros(3)
    per_segment = []

    for seg in segments:
        # Placement depends on the controls only
        placed, _ = evaluate_segment(seg, 0.0, 0.0, controls)
        position = np.asarray(placed.position, dtype=float) * height
        r = position - cg

        local_velocity = body_velocity + np.cross(omega, r)
        u, v, w = local_velocity
        V = float(np.linalg.norm(local_velocity))
        if V > 1e-6:
            alpha = float(np.arctan2(w, u) * RAD2DEG)
            beta = float(np.arcsin(np.clip(v / V, -1.0, 1.0)) * RAD2DEG)
        else:
            alpha = 0.0
            beta = 0.0

        updated, f = compute_segment_force(seg, alpha, beta, controls, rho, V)
        wind_dir, lift_dir, side_dir = compute_wind_frame(alpha, beta)
        force = segment_force_vector(f, wind_dir, lift_dir, side_dir)
        total_force += force

        r_cp = cp_position_meters(updated, f.cp, height) - cg
        total_moment += np.cross(r_cp, force)
        total_moment[1] += f.moment

        per_segment.append(SegmentAeroResult(
            name=seg.name,
            segment=updated,
            forces=f,
            local_velocity=local_velocity,
            local_airspeed=V,
            local_alpha=alpha,
            local_beta=beta,
            position_meters=position,
        ))

    return SystemForces(force=total_force, moment=total_moment), per_segment


def evaluate_aero_forces(segments: Sequence[AeroSegment], cg: np.ndarray, height: float,
                         body_velocity: np.ndarray, omega: np.ndarray,
                         controls: SegmentControls, rho: float) -> SystemForces:
    """Total force and moment from the rotating-frame evaluation."""
    system, _ = evaluate_aero_forces_detailed(segments, cg, height, body_velocity,
                                              omega, controls, rho)
    return system


def refresh_segments(segments: Sequence[AeroSegment], controls: SegmentControls,
                     alpha_deg: float = 0.0, beta_deg: float = 0.0) -> List[AeroSegment]:
    """Evaluate each segment once so its geometry matches the controls."""
    return [evaluate_segment(seg, alpha_deg, beta_deg, controls)[0] for seg in segments]


if __name__ == "__main__":
    from glidesim.core.inertia import compute_center_of_mass
    from glidesim.core.polar import default_controls
    from glidesim.polars.library import IBEXUL_POLAR
    from glidesim.polars.assembly import make_ibex_aero_segments

    segments = make_ibex_aero_segments('wingsuit')
    cg = compute_center_of_mass(IBEXUL_POLAR.mass_segments, 1.875, IBEXUL_POLAR.m)
    controls = default_controls()

    print("=== Ibex UL system forces at 12 m/s ===")
    for alpha in (0.0, 5.0, 10.0, 15.0):
        a = alpha * DEG2RAD
        vel = 12.0 * np.array([np.cos(a), 0.0, np.sin(a)])
        system = evaluate_aero_forces(segments, cg, 1.875, vel, np.zeros(3), controls, 1.225)
        print(f"  alpha={alpha:5.1f}  F={np.round(system.force, 1)}  M={np.round(system.moment, 1)}")
