"""
Kirchhoff separation model.

Blends attached-flow and flat-plate aerodynamics with a separation
function f(alpha) in [0, 1]:

- f = 1: fully attached flow (thin-airfoil lift, parabolic drag)
- f = 0: fully separated flow (flat plate normal force)

f is the product of two logistic transitions, one around the forward
stall angle and one around the back stall angle. All angles in degrees
unless the name says otherwise.
"""

import numpy as np

DEG2RAD = np.pi / 180.0


def sigmoid(x: float) -> float:
    """Logistic 1/(1+e^x), clamped to avoid overflow."""
    if x > 500:
        return 0.0
    if x < -500:
        return 1.0
    return 1.0 / (1.0 + np.exp(x))


def f_fwd(alpha_deg: float, polar) -> float:
    """Forward-stall transition: 1 below alpha_stall_fwd, 0 above."""
    return sigmoid((alpha_deg - polar.alpha_stall_fwd) / polar.s1_fwd)


def f_back(alpha_deg: float, polar) -> float:
    """Back-stall transition: 1 above alpha_stall_back, 0 below."""
    return sigmoid((polar.alpha_stall_back - alpha_deg) / polar.s1_back)


def separation(alpha_deg: float, polar) -> float:
    """Combined separation function f(alpha) in [0, 1]."""
    return f_fwd(alpha_deg, polar) * f_back(alpha_deg, polar)


# Attached flow

def cl_attached(alpha_deg: float, polar) -> float:
    """CL = CL_alpha * sin(alpha - alpha_0)."""
    return polar.cl_alpha * np.sin((alpha_deg - polar.alpha_0) * DEG2RAD)


def cd_attached(alpha_deg: float, polar) -> float:
    """CD = CD_0 + K * CL^2."""
    cl = cl_attached(alpha_deg, polar)
    return polar.cd_0 + polar.k * cl * cl


# Flat plate

def cl_plate(alpha_deg: float, polar) -> float:
    """Flat-plate lift: CD_n * sin(a) * cos(a). Zero at 0 and 90 deg."""
    a = alpha_deg * DEG2RAD
    return polar.cd_n * np.sin(a) * np.cos(a)


def cd_plate(alpha_deg: float, polar) -> float:
    """Flat-plate drag: CD_n * sin^2(a) + CD_0 * cos^2(a)."""
    a = alpha_deg * DEG2RAD
    s = np.sin(a)
    c = np.cos(a)
    return polar.cd_n * s * s + polar.cd_0 * c * c


def cm_plate(alpha_deg: float) -> float:
    """Flat-plate pitching moment, nose-down restoring."""
    return -0.1 * np.sin(2.0 * alpha_deg * DEG2RAD)


def cp_plate(alpha_deg: float) -> float:
    """Flat-plate CP: quarter chord at 0 deg, mid chord at 90 deg."""
    return 0.25 + 0.25 * np.sin(abs(alpha_deg) * DEG2RAD)
