"""
Rigid-body equations of motion, NED body frame, Euler attitude.

Implements:
- Gravity projected into the body frame
- Translational dynamics, isotropic and per-axis (apparent) mass
- Rotational dynamics with the Ixz product retained
- Euler kinematics (body rates <-> Euler rates, body -> inertial velocity)
- Pilot pendulum about the riser attachment

Attitude uses the yaw -> pitch -> roll (psi, theta, phi) sequence. The
Euler-rate kinematics are singular at theta = +-90 deg.
"""

from typing import Sequence

import numpy as np
from archimedes import struct

# Handle imports
try:
    from .inertia import InertiaComponents
    from .polar import MassSegment
except ImportError:
    from inertia import InertiaComponents
    from polar import MassSegment

G = 9.80665


def gravity_body(phi: float, theta: float, g: float = G) -> np.ndarray:
    """Gravitational acceleration in the body frame (m/s^2)."""
    return np.array([
        -g * np.sin(theta),
        g * np.sin(phi) * np.cos(theta),
        g * np.cos(phi) * np.cos(theta),
    ])


def translational_eom(force: np.ndarray, mass: float, velocity: np.ndarray,
                      omega: np.ndarray) -> np.ndarray:
    """
    Body-frame acceleration (u_dot, v_dot, w_dot) for scalar mass.

    u_dot = Fx/m + r v - q w, and cyclic. A non-positive mass gives zero
    acceleration.
    """
    if mass < 1e-10:
        return np.zeros(3)
    fx, fy, fz = force
    u, v, w = velocity
    p, q, r = omega
    return np.array([
        fx / mass + r * v - q * w,
        fy / mass + p * w - r * u,
        fz / mass + q * u - p * v,
    ])


def translational_eom_anisotropic(force: np.ndarray, mass_per_axis: np.ndarray,
                                  velocity: np.ndarray, omega: np.ndarray) -> np.ndarray:
    """
    Body-frame acceleration for per-axis effective mass.

    Kirchhoff/Lamb form: the momentum along each axis is m_i * v_i, so the
    rotating-frame terms carry the mass of the axis whose velocity they
    contain:

        m_x u_dot = Fx + m_y r v - m_z q w
        m_y v_dot = Fy + m_z p w - m_x r u
        m_z w_dot = Fz + m_x q u - m_y p v

    Reduces to translational_eom when the three masses are equal. An axis
    with non-positive mass gets zero acceleration.
    """
    fx, fy, fz = force
    mx, my, mz = mass_per_axis
    u, v, w = velocity
    p, q, r = omega
    numerators = (
        fx + my * r * v - mz * q * w,
        fy + mz * p * w - mx * r * u,
        fz + mx * q * u - my * p * v,
    )
    return np.array([n / m if m >= 1e-10 else 0.0
                     for n, m in zip(numerators, (mx, my, mz))])


def rotational_eom(moment: np.ndarray, inertia: InertiaComponents,
                   omega: np.ndarray) -> np.ndarray:
    """
    Angular acceleration (p_dot, q_dot, r_dot).

    Ixy = Iyz = 0 assumed. Roll and yaw are coupled through Ixz and
    normalized by Gamma = Ixx Izz - Ixz^2; pitch is decoupled. A vanishing
    Gamma or Iyy gives zero acceleration on the affected axes.
    """
    L, M, N = moment
    p, q, r = omega
    Ixx, Iyy, Izz, Ixz = inertia.Ixx, inertia.Iyy, inertia.Izz, inertia.Ixz

    gamma = Ixx * Izz - Ixz * Ixz
    if abs(gamma) < 1e-10:
        p_dot = 0.0
        r_dot = 0.0
    else:
        p_dot = (Izz * L + Ixz * N
                 - Ixz * (Ixx - Iyy + Izz) * p * q
                 + (Ixz * Ixz + Izz * (Izz - Iyy)) * q * r) / gamma
        r_dot = (Ixz * L + Ixx * N
                 + Ixz * (Izz - Iyy + Ixx) * q * r
                 - (Ixz * Ixz + Ixx * (Ixx - Iyy)) * p * q) / gamma

    if abs(Iyy) < 1e-10:
        q_dot = 0.0
    else:
        q_dot = (M - (Ixx - Izz) * p * r - Ixz * (p * p - r * r)) / Iyy

    return np.array([p_dot, q_dot, r_dot])


def euler_rates(p: float, q: float, r: float, phi: float, theta: float) -> np.ndarray:
    """Body rates to Euler rates (phi_dot, theta_dot, psi_dot)."""
    sin_phi = np.sin(phi)
    cos_phi = np.cos(phi)
    tan_theta = np.tan(theta)
    sec_theta = 1.0 / np.cos(theta)
    return np.array([
        p + sin_phi * tan_theta * q + cos_phi * tan_theta * r,
        cos_phi * q - sin_phi * r,
        sin_phi * sec_theta * q + cos_phi * sec_theta * r,
    ])


def euler_rates_to_body_rates(phi_dot: float, theta_dot: float, psi_dot: float,
                              phi: float, theta: float) -> np.ndarray:
    """Euler rates to body rates (p, q, r)."""
    sin_phi = np.sin(phi)
    cos_phi = np.cos(phi)
    sin_theta = np.sin(theta)
    cos_theta = np.cos(theta)
    return np.array([
        phi_dot - psi_dot * sin_theta,
        theta_dot * cos_phi + psi_dot * sin_phi * cos_theta,
        -theta_dot * sin_phi + psi_dot * cos_phi * cos_theta,
    ])


def body_to_inertial_matrix(phi: float, theta: float, psi: float) -> np.ndarray:
    """Direction cosine matrix, body to inertial NED."""
    cp, sp = np.cos(phi), np.sin(phi)
    ct, st = np.cos(theta), np.sin(theta)
    cy, sy = np.cos(psi), np.sin(psi)
    return np.array([
        [ct * cy, sp * st * cy - cp * sy, cp * st * cy + sp * sy],
        [ct * sy, sp * st * sy + cp * cy, cp * st * sy - sp * cy],
        [-st, sp * ct, cp * ct],
    ])


def body_to_inertial_velocity(u: float, v: float, w: float,
                              phi: float, theta: float, psi: float) -> np.ndarray:
    """Inertial NED velocity (x_dot, y_dot, z_dot) from body velocity."""
    return body_to_inertial_matrix(phi, theta, psi) @ np.array([u, v, w])


# Pilot pendulum

@struct(frozen=True)
class PilotPendulumParams:
    """Pilot swinging about the riser attachment."""

    pilot_mass: float      # kg
    Iy_riser: float        # kg*m^2 about the pivot
    riser_to_cg: float     # m
    cg_offset_x: float     # m, pilot CG relative to pivot
    cg_offset_z: float


def compute_pilot_pendulum_params(pilot_segments: Sequence[MassSegment], pivot_x: float,
                                  pivot_z: float, height: float = 1.875,
                                  total_weight: float = 77.5) -> PilotPendulumParams:
    """
    Pendulum mass, inertia about the pivot and pivot-to-CG distance.

    Parameters:
    -----------
    pilot_segments : sequence of MassSegment
        Pilot body segments only (no canopy masses)
    pivot_x, pivot_z : float
        Normalized riser attachment
    height : float
        Reference length (m)
    total_weight : float
        Reference mass for mass ratios (kg)
    """
    pilot_mass = 0.0
    Iy = 0.0
    cg_x = 0.0
    cg_z = 0.0
    for seg in pilot_segments:
        m = seg.mass_ratio * total_weight
        dx = (seg.x - pivot_x) * height
        dz = (seg.z - pivot_z) * height
        Iy += m * (dx * dx + dz * dz)
        pilot_mass += m
        cg_x += m * dx
        cg_z += m * dz

    if pilot_mass > 0:
        cg_x /= pilot_mass
        cg_z /= pilot_mass
    else:
        cg_x = cg_z = 0.0

    return PilotPendulumParams(pilot_mass=pilot_mass, Iy_riser=Iy,
                               riser_to_cg=float(np.hypot(cg_x, cg_z)),
                               cg_offset_x=cg_x, cg_offset_z=cg_z)


def pilot_pendulum_eom(params: PilotPendulumParams, theta_pilot: float, theta_canopy: float,
                       aero_torque: float, q_dot_canopy: float = 0.0, g: float = G) -> float:
    """
    Pilot pitch acceleration about the riser pivot (rad/s^2).

    Gravity restores toward the canopy attitude, the canopy's own pitch
    acceleration is transmitted through the risers, and aero_torque is
    supplied by the caller (e.g. pilot_swing_damping_torque).
    """
    if params.Iy_riser < 1e-10:
        return 0.0
    tau_gravity = -params.pilot_mass * g * params.riser_to_cg * np.sin(theta_pilot - theta_canopy)
    tau_canopy = -params.Iy_riser * q_dot_canopy
    return float((tau_gravity + aero_torque + tau_canopy) / params.Iy_riser)


def pilot_swing_damping_torque(pilot_segments: Sequence[MassSegment], pivot_x: float,
                               pivot_z: float, theta_dot_pilot: float, rho: float = 1.225,
                               height: float = 1.875, total_weight: float = 77.5,
                               pilot_area: float = 0.55, cd: float = 1.0) -> float:
    """
    Aerodynamic damping torque opposing the pilot swing (N*m).

    Frontal area is spread over segments by mass fraction; each segment
    sees drag from its tangential swing velocity.
    """
    if abs(theta_dot_pilot) < 1e-10:
        return 0.0

    total_ratio = sum(seg.mass_ratio for seg in pilot_segments)
    torque = 0.0
    for seg in pilot_segments:
        dx = (seg.x - pivot_x) * height
        dz = (seg.z - pivot_z) * height
        r = np.hypot(dx, dz)
        v_tan = theta_dot_pilot * r
        area = pilot_area * seg.mass_ratio / total_ratio
        torque += -0.5 * rho * cd * area * v_tan * abs(v_tan) * r
    return float(torque)
