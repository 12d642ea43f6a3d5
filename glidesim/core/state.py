"""
12-state rigid-body vector and per-step simulation configuration.

State includes:
- Position (x, y, z) in the NED inertial frame (m)
- Velocity (u, v, w) in the body frame (m/s)
- Euler attitude (phi, theta, psi), yaw -> pitch -> roll sequence (rad)
- Angular rates (p, q, r) in the body frame (rad/s)
"""

from typing import List, Optional, Tuple

import numpy as np
from archimedes import struct, field

# Handle imports
try:
    from .eom import body_to_inertial_matrix
    from .inertia import InertiaComponents
    from .polar import SegmentControls
    from .segments import AeroSegment
except ImportError:
    from eom import body_to_inertial_matrix
    from inertia import InertiaComponents
    from polar import SegmentControls
    from segments import AeroSegment

STATE_NAMES = ('x', 'y', 'z', 'u', 'v', 'w', 'phi', 'theta', 'psi', 'p', 'q', 'r')


@struct(frozen=False)
class SimState:
    """
    Rigid-body state vector (12 scalars).

    Mutated only by the integrator; every step returns a new instance.
    """

    # Position in NED frame (m)
    x: float = 0.0  # North
    y: float = 0.0  # East
    z: float = 0.0  # Down (negative altitude)

    # Velocity in body frame (m/s)
    u: float = 0.0
    v: float = 0.0
    w: float = 0.0

    # Euler angles (rad)
    phi: float = 0.0
    theta: float = 0.0
    psi: float = 0.0

    # Angular rates in body frame (rad/s)
    p: float = 0.0
    q: float = 0.0
    r: float = 0.0

    @property
    def position(self) -> np.ndarray:
        return np.hstack([self.x, self.y, self.z])

    @property
    def velocity_body(self) -> np.ndarray:
        return np.hstack([self.u, self.v, self.w])

    @property
    def euler_angles(self) -> Tuple[float, float, float]:
        return self.phi, self.theta, self.psi

    @property
    def angular_rates(self) -> np.ndarray:
        return np.hstack([self.p, self.q, self.r])

    @property
    def velocity_inertial(self) -> np.ndarray:
        """Velocity in the NED inertial frame (m/s)."""
        return body_to_inertial_matrix(self.phi, self.theta, self.psi) @ self.velocity_body

    @property
    def airspeed(self) -> float:
        return float(np.linalg.norm(self.velocity_body))

    @property
    def altitude(self) -> float:
        """Altitude above the origin (m, positive up)."""
        return -self.z

    @property
    def alpha(self) -> float:
        """
        Angle of attack (rad).

        alpha = atan2(w, u)
        """
        if self.airspeed < 1e-6:
            return 0.0
        return float(np.arctan2(self.w, self.u))

    @property
    def beta(self) -> float:
        """
        Sideslip angle (rad).

        beta = asin(v / V)
        """
        V = self.airspeed
        if V < 1e-6:
            return 0.0
        return float(np.arcsin(np.clip(self.v / V, -1.0, 1.0)))

    def to_array(self) -> np.ndarray:
        """
        Convert state to numpy array.

        Returns:
        --------
        x : np.ndarray, shape (12,)
            [x, y, z, u, v, w, phi, theta, psi, p, q, r]
        """
        return np.hstack([
            self.x, self.y, self.z,
            self.u, self.v, self.w,
            self.phi, self.theta, self.psi,
            self.p, self.q, self.r,
        ]).astype(float)

    def from_array(self, x: np.ndarray):
        """Load state from a 12-element array (same order as to_array)."""
        (self.x, self.y, self.z,
         self.u, self.v, self.w,
         self.phi, self.theta, self.psi,
         self.p, self.q, self.r) = (float(val) for val in x[:12])

    def copy(self) -> 'SimState':
        new_state = SimState()
        new_state.from_array(self.to_array())
        return new_state

    def is_finite(self) -> bool:
        return bool(np.all(np.isfinite(self.to_array())))

    def __str__(self) -> str:
        return (
            f"Rigid-Body State:\n"
            f"  Position (NED):   [{self.x:8.1f}, {self.y:8.1f}, {self.z:8.1f}] m\n"
            f"  Velocity (body):  [{self.u:7.2f}, {self.v:7.2f}, {self.w:7.2f}] m/s\n"
            f"  Airspeed:         {self.airspeed:7.2f} m/s\n"
            f"  Euler angles:     [{np.degrees(self.phi):6.2f}, {np.degrees(self.theta):6.2f}, "
            f"{np.degrees(self.psi):6.2f}] deg\n"
            f"  Alpha, Beta:      [{np.degrees(self.alpha):6.2f}, {np.degrees(self.beta):6.2f}] deg\n"
            f"  Angular rates:    [{self.p:7.4f}, {self.q:7.4f}, {self.r:7.4f}] rad/s"
        )


@struct(frozen=False)
class SimConfig:
    """
    Everything one derivative evaluation needs.

    Attributes
    ----------
    segments : list of AeroSegment
        Aerodynamic segments
    controls : SegmentControls
        Live control inputs
    cg : np.ndarray
        System CG in meters, body NED
    inertia : InertiaComponents
        Inertia about the CG (kg*m^2)
    mass : float
        Physical mass for gravity (kg)
    height : float
        Reference length for normalized positions (m)
    rho : float
        Air density (kg/m^3)
    mass_per_axis : np.ndarray, optional
        Effective (physical + apparent) mass per body axis. Selects the
        anisotropic translational equations when present.
    """

    segments: List[AeroSegment]
    controls: SegmentControls
    cg: np.ndarray
    inertia: InertiaComponents
    mass: float
    height: float = 1.875
    rho: float = 1.225
    mass_per_axis: Optional[np.ndarray] = None
