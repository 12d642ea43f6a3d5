"""
Full aerodynamic coefficient model for a continuous polar.

Implements:
- Per-coefficient functions (CL, CD, CY, CM, CP) blending attached flow
  and flat plate through the Kirchhoff separation function
- Control morphing (brake / riser / dirty) as additive polar offsets
- Force, sustained-speed and pseudo-coefficient conversions
- Linear blending between two polars
"""

import dataclasses
from typing import Dict

import numpy as np

# Handle imports
try:
    from .kirchhoff import (
        DEG2RAD, separation, cl_attached, cd_attached,
        cl_plate, cd_plate, cm_plate, cp_plate,
    )
    from .polar import Polar, SymmetricControl, POLAR_SCALAR_FIELDS
except ImportError:
    from kirchhoff import (
        DEG2RAD, separation, cl_attached, cd_attached,
        cl_plate, cd_plate, cm_plate, cp_plate,
    )
    from polar import Polar, SymmetricControl, POLAR_SCALAR_FIELDS

G = 9.80665


def get_cl(alpha_deg: float, beta_deg: float, delta: float, polar: Polar) -> float:
    """Lift coefficient, scaled by cos^2(beta)."""
    f = separation(alpha_deg, polar)
    cl = f * cl_attached(alpha_deg, polar) + (1 - f) * cl_plate(alpha_deg, polar)
    cos_b = np.cos(beta_deg * DEG2RAD)
    return cl * cos_b * cos_b


def get_cd(alpha_deg: float, beta_deg: float, delta: float, polar: Polar) -> float:
    """Drag coefficient with lateral crossflow drag added in sideslip."""
    f = separation(alpha_deg, polar)
    cd = f * cd_attached(alpha_deg, polar) + (1 - f) * cd_plate(alpha_deg, polar)
    beta = beta_deg * DEG2RAD
    cos_b = np.cos(beta)
    sin_b = np.sin(beta)
    return cd * cos_b * cos_b + polar.cd_n_lateral * sin_b * sin_b


def get_cy(alpha_deg: float, beta_deg: float, delta: float, polar: Polar) -> float:
    beta = beta_deg * DEG2RAD
    return polar.cy_beta * np.sin(beta) * np.cos(beta)


def get_cm(alpha_deg: float, delta: float, polar: Polar) -> float:
    f = separation(alpha_deg, polar)
    alpha_rad = (alpha_deg - polar.alpha_0) * DEG2RAD
    cm_att = polar.cm_0 + polar.cm_alpha * alpha_rad
    return f * cm_att + (1 - f) * cm_plate(alpha_deg)


def get_cp(alpha_deg: float, delta: float, polar: Polar) -> float:
    """Center of pressure as a chord fraction; attached part clamped to [0, 1]."""
    f = separation(alpha_deg, polar)
    alpha_rad = (alpha_deg - polar.alpha_0) * DEG2RAD
    cp_att = float(np.clip(polar.cp_0 + polar.cp_alpha * alpha_rad, 0.0, 1.0))
    return f * cp_att + (1 - f) * cp_plate(alpha_deg)


# Control morphing

def apply_control(polar: Polar, control: SymmetricControl, amount: float) -> Polar:
    """
    Offset a polar by control * amount.

    Returns the input polar unchanged when amount is exactly zero.
    """
    if amount == 0:
        return polar
    return dataclasses.replace(
        polar,
        alpha_0=polar.alpha_0 + control.d_alpha_0 * amount,
        cd_0=polar.cd_0 + control.d_cd_0 * amount,
        cl_alpha=polar.cl_alpha + control.d_cl_alpha * amount,
        k=polar.k + control.d_k * amount,
        alpha_stall_fwd=polar.alpha_stall_fwd + control.d_alpha_stall_fwd * amount,
        alpha_stall_back=polar.alpha_stall_back + control.d_alpha_stall_back * amount,
        cd_n=polar.cd_n + control.d_cd_n * amount,
        cp_0=polar.cp_0 + control.d_cp_0 * amount,
        cp_alpha=polar.cp_alpha + control.d_cp_alpha * amount,
        cm_0=polar.cm_0 + control.cm_delta * amount,
    )


def apply_all_controls(polar: Polar, delta: float, dirty: float) -> Polar:
    """
    Apply the primary symmetric control and dirty flying.

    The primary control is the first of brake, rear_riser, front_riser
    present on the polar.
    """
    controls = polar.controls or {}
    p = polar

    primary = None
    for key in ('brake', 'rear_riser', 'front_riser'):
        if controls.get(key) is not None:
            primary = controls[key]
            break
    if primary is not None and delta != 0:
        p = apply_control(p, primary, delta)

    dirty_ctrl = controls.get('dirty')
    if dirty_ctrl is not None and dirty != 0:
        p = apply_control(p, dirty_ctrl, dirty)

    return p


def get_all_coefficients(alpha_deg: float, beta_deg: float, delta: float,
                         polar: Polar, dirty: float = 0.0) -> Dict[str, float]:
    """
    Evaluate every coefficient at one flight condition.

    Parameters:
    -----------
    alpha_deg, beta_deg : float
        Angle of attack and sideslip (deg)
    delta : float
        Primary symmetric control amount
    polar : Polar
        Base polar, morphed by delta and dirty before evaluation
    dirty : float
        Dirty-flying amount

    Returns:
    --------
    coeffs : dict
        Keys cl, cd, cy, cm, cn, cl_roll, cp, f
    """
    p = apply_all_controls(polar, delta, dirty)
    f = separation(alpha_deg, p)

    cl = f * cl_attached(alpha_deg, p) + (1 - f) * cl_plate(alpha_deg, p)
    cd = f * cd_attached(alpha_deg, p) + (1 - f) * cd_plate(alpha_deg, p)

    beta = beta_deg * DEG2RAD
    cos_b = np.cos(beta)
    sin_b = np.sin(beta)
    cl = cl * cos_b * cos_b
    cd = cd * cos_b * cos_b + p.cd_n_lateral * sin_b * sin_b

    cy = p.cy_beta * sin_b * cos_b

    alpha_rad = (alpha_deg - p.alpha_0) * DEG2RAD
    cm = f * (p.cm_0 + p.cm_alpha * alpha_rad) + (1 - f) * cm_plate(alpha_deg)

    cp_att = float(np.clip(p.cp_0 + p.cp_alpha * alpha_rad, 0.0, 1.0))
    cp = f * cp_att + (1 - f) * cp_plate(alpha_deg)

    # Crossflow-scaled yaw and roll derivatives
    cn = p.cn_beta * sin_b * cos_b
    cl_roll = p.cl_beta * sin_b * cos_b

    return {
        'cl': float(cl), 'cd': float(cd), 'cy': float(cy), 'cm': float(cm),
        'cn': float(cn), 'cl_roll': float(cl_roll), 'cp': float(cp), 'f': float(f),
    }


# Force conversions

def coeff_to_forces(cl: float, cd: float, cy: float, s: float, m: float,
                    rho: float, v: float) -> Dict[str, float]:
    """Dimensional lift, drag, side force and weight (N)."""
    q = 0.5 * rho * v * v
    return {
        'lift': q * s * cl,
        'drag': q * s * cd,
        'side': q * s * cy,
        'weight': m * G,
    }


def coeff_to_ss(cl: float, cd: float, s: float, m: float, rho: float) -> Dict[str, float]:
    """
    Sustained horizontal and vertical speeds for a steady glide.

    Total aerodynamic force balances weight; the speed vector splits in
    the ratio CL:CD.
    """
    ctot = np.sqrt(cl * cl + cd * cd)
    if ctot < 1e-10:
        return {'vxs': 0.0, 'vys': 0.0}
    v = np.sqrt((2 * m * G) / (rho * s * ctot))
    return {'vxs': float(v * cl / ctot), 'vys': float(v * cd / ctot)}


def net_force_to_pseudo(net_force, velocity, mass: float) -> Dict[str, float]:
    """
    Decompose a net inertial (NED) force into pseudo coefficients.

    The aerodynamic acceleration (gravity removed) is split into a drag
    part along the velocity and a lift part perpendicular to it, and both
    are normalized by g*V^2.

    Parameters:
    -----------
    net_force : array_like, shape (3,)
        Total force including gravity, NED (N)
    velocity : array_like, shape (3,)
        Inertial velocity, NED (m/s)
    mass : float
        System mass (kg)

    Returns:
    --------
    pseudo : dict
        Keys kl, kd, roll (rad), vxs, vys, glide_ratio
    """
    a_n, a_e, a_d = np.asarray(net_force, dtype=float) / mass
    a_d_aero = a_d - G

    v_n, v_e, v_d = np.asarray(velocity, dtype=float)
    v = np.sqrt(v_n * v_n + v_e * v_e + v_d * v_d)
    v_ground = np.sqrt(v_n * v_n + v_e * v_e)

    if v < 0.01:
        return {'kl': 0.0, 'kd': 0.0, 'roll': 0.0, 'vxs': 0.0, 'vys': 0.0,
                'glide_ratio': 0.0}

    # Projection onto velocity
    a_proj = (a_n * v_n + a_e * v_e + a_d_aero * v_d) / v
    drag_n = a_proj * v_n / v
    drag_e = a_proj * v_e / v
    drag_d = a_proj * v_d / v

    # Drag opposes velocity
    drag_dot_v = drag_n * v_n + drag_e * v_e + drag_d * v_d
    drag_mag = np.sqrt(drag_n ** 2 + drag_e ** 2 + drag_d ** 2)
    a_drag = -drag_mag if drag_dot_v > 0 else drag_mag

    # Rejection
    lift_n = a_n - drag_n
    lift_e = a_e - drag_e
    lift_d = a_d_aero - drag_d
    a_lift = np.sqrt(lift_n ** 2 + lift_e ** 2 + lift_d ** 2)

    kl = a_lift / (G * v * v)
    kd = a_drag / (G * v * v)

    # Roll uses the total down acceleration, gravity included
    roll = 0.0
    if kl * v_ground * v > 1e-10:
        cos_roll = (1 - a_d / G - kd * v * v_d) / (kl * v_ground * v)
        roll = float(np.arccos(np.clip(cos_roll, -1.0, 1.0)))
        if lift_n * (-v_e) + lift_e * v_n < 0:
            roll = -roll

    klkd = kl * kl + kd * kd
    denom = klkd ** 0.75 if klkd > 1e-20 else 1e-10
    glide_ratio = kl / kd if abs(kd) > 1e-10 else 0.0

    return {
        'kl': float(kl), 'kd': float(kd), 'roll': roll,
        'vxs': float(kl / denom), 'vys': float(kd / denom),
        'glide_ratio': float(glide_ratio),
    }


def lerp_polar(t: float, polar_a: Polar, polar_b: Polar) -> Polar:
    """
    Blend every scalar coefficient of two polars.

    Name, type, controls and mass segments come from polar_a.
    """
    blended = {
        name: getattr(polar_a, name) + t * (getattr(polar_b, name) - getattr(polar_a, name))
        for name in POLAR_SCALAR_FIELDS
    }
    return dataclasses.replace(polar_a, **blended)


if __name__ == "__main__":
    from glidesim.polars.library import IBEXUL_POLAR

    print("=== Ibex UL coefficients ===")
    for alpha in (0.0, 5.0, 10.0, 20.0, 45.0, 90.0):
        c = get_all_coefficients(alpha, 0.0, 0.0, IBEXUL_POLAR)
        print(f"  alpha={alpha:5.1f}  CL={c['cl']:6.3f}  CD={c['cd']:6.3f}  "
              f"CM={c['cm']:6.3f}  CP={c['cp']:5.3f}  f={c['f']:5.3f}")
