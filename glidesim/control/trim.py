"""
Glide Trim Calculation

Finds the steady, wings-level glide of an unpowered vehicle: the airspeed,
angle of attack and pitch attitude for which the body accelerations
u_dot, w_dot and q_dot vanish.
"""

import logging
from typing import Dict, Optional, Tuple

import numpy as np
from scipy.optimize import least_squares

# Handle imports
try:
    from ..core.integrator import compute_derivatives
    from ..core.state import SimState, SimConfig
except ImportError:
    from glidesim.core.integrator import compute_derivatives
    from glidesim.core.state import SimState, SimConfig

logger = logging.getLogger(__name__)

RESIDUAL_TOLERANCE = 1e-3


def glide_state(airspeed: float, alpha: float, theta: float, altitude: float = 0.0) -> SimState:
    """Wings-level state with zero sideslip and zero rates."""
    return SimState(
        z=-altitude,
        u=float(airspeed * np.cos(alpha)),
        w=float(airspeed * np.sin(alpha)),
        theta=float(theta),
    )


class GlideTrimSolver:
    """
    Trim solver for steady gliding flight.

    Parameters
    ----------
    config : SimConfig
        Vehicle configuration (segments, controls, mass properties, rho)
    """

    def __init__(self, config: SimConfig):
        self.config = config

    def trim_glide(self,
                   altitude: float = 0.0,
                   initial_guess: Optional[Dict] = None,
                   balance_pitch: bool = True,
                   verbose: bool = False) -> Tuple[SimState, Dict]:
        """
        Find the steady glide.

        Parameters
        ----------
        altitude : float
            Altitude of the returned state (m); rho comes from the config
        initial_guess : dict, optional
            {'airspeed' (m/s), 'alpha' (rad), 'theta' (rad)}
        balance_pitch : bool
            Solve alpha from the pitch-moment balance. When False alpha is
            held at the guess and only airspeed and pitch are solved.
        verbose : bool
            Print optimizer progress

        Returns
        -------
        state_trim : SimState
            Trimmed state
        info : dict
            Optimizer info plus airspeed, alpha_deg, theta_deg, gamma_deg,
            glide_ratio and sink_rate
        """
        if initial_guess is None:
            initial_guess = {
                'airspeed': 12.0,
                'alpha': np.radians(8.0),
                'theta': np.radians(-10.0),
            }
        alpha_fixed = initial_guess['alpha']

        def unpack(x):
            if balance_pitch:
                return x[0], x[1], x[2]
            return x[0], alpha_fixed, x[1]

        def residuals(x):
            airspeed, alpha, theta = unpack(x)
            state_dot = compute_derivatives(glide_state(airspeed, alpha, theta, altitude),
                                            self.config)
            # [x, y, z, u, v, w, phi, theta, psi, p, q, r]
            if balance_pitch:
                return np.array([state_dot[3], state_dot[5], state_dot[10]])
            return np.array([state_dot[3], state_dot[5]])

        if balance_pitch:
            x0 = np.array([initial_guess['airspeed'], alpha_fixed, initial_guess['theta']])
            bounds = [
                (1.0, 100.0),                          # airspeed
                (-np.radians(20), np.radians(60)),    # alpha
                (-np.radians(85), np.radians(30)),    # theta
            ]
        else:
            x0 = np.array([initial_guess['airspeed'], initial_guess['theta']])
            bounds = [
                (1.0, 100.0),
                (-np.radians(85), np.radians(30)),
            ]

        result = least_squares(residuals, x0, bounds=np.array(bounds).T,
                               verbose=2 if verbose else 0)

        airspeed, alpha, theta = unpack(result.x)
        state_trim = glide_state(airspeed, alpha, theta, altitude)

        gamma = theta - alpha
        residual_norm = float(np.linalg.norm(result.fun))
        info = {
            'success': bool(result.success) and residual_norm < RESIDUAL_TOLERANCE,
            'residual_norm': residual_norm,
            'iterations': result.nfev,
            'message': result.message,
            'airspeed': float(airspeed),
            'alpha_deg': float(np.degrees(alpha)),
            'theta_deg': float(np.degrees(theta)),
            'gamma_deg': float(np.degrees(gamma)),
            'glide_ratio': float(1.0 / np.tan(-gamma)) if gamma < -1e-6 else np.inf,
            'sink_rate': float(-airspeed * np.sin(gamma)),
        }

        if info['success']:
            logger.info(f"Glide trim: V={info['airspeed']:.2f} m/s, alpha={info['alpha_deg']:.2f} deg, "
                        f"gamma={info['gamma_deg']:.2f} deg, L/D={info['glide_ratio']:.2f}")
        else:
            logger.warning(f"Glide trim not converged: residual {residual_norm:.2e} "
                           f"after {result.nfev} evaluations ({result.message})")

        return state_trim, info


if __name__ == "__main__":
    from glidesim.core.composite_frame import build_composite_frame, frame_to_sim_config
    from glidesim.core.polar import default_controls
    from glidesim.polars.registry import canopy_frame_config

    frame = build_composite_frame(canopy_frame_config('wingsuit'))
    solver = GlideTrimSolver(frame_to_sim_config(frame, default_controls()))
    _, info = solver.trim_glide(altitude=1000.0)

    print("=== Ibex UL glide trim ===")
    for key in ('success', 'airspeed', 'alpha_deg', 'theta_deg', 'gamma_deg', 'glide_ratio',
                'sink_rate', 'residual_norm'):
        print(f"  {key:14s} {info[key]}")
