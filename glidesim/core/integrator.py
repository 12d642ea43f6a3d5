"""
Numerical integration of the 12-state rigid-body model.

Implements:
- compute_derivatives: one evaluation of the full model
- Forward Euler and RK4 (fixed step) as functions and as integrator classes
- simulate / simulate_history multi-step runners

No adaptive step size; the caller chooses dt and the method.
"""

import numpy as np
import pandas as pd
from typing import Callable, Tuple

# Handle imports
try:
    from .aero import evaluate_aero_forces
    from .eom import (
        gravity_body, translational_eom, translational_eom_anisotropic,
        rotational_eom, euler_rates, body_to_inertial_velocity,
    )
    from .state import SimState, SimConfig, STATE_NAMES
except ImportError:
    from aero import evaluate_aero_forces
    from eom import (
        gravity_body, translational_eom, translational_eom_anisotropic,
        rotational_eom, euler_rates, body_to_inertial_velocity,
    )
    from state import SimState, SimConfig, STATE_NAMES


def compute_derivatives(state: SimState, config: SimConfig) -> np.ndarray:
    """
    State time derivative.

    Parameters:
    -----------
    state : SimState
        Current state
    config : SimConfig
        Segments, controls, mass properties and air density

    Returns:
    --------
    state_dot : np.ndarray, shape (12,)
        [x_dot, y_dot, z_dot, u_dot, v_dot, w_dot,
         phi_dot, theta_dot, psi_dot, p_dot, q_dot, r_dot]
    """
    velocity = state.velocity_body
    omega = state.angular_rates

    # Aerodynamics with per-segment omega x r
    aero = evaluate_aero_forces(config.segments, config.cg, config.height,
                                velocity, omega, config.controls, config.rho)

    # Gravity acts on physical mass only
    total_force = aero.force + config.mass * gravity_body(state.phi, state.theta)

    if config.mass_per_axis is not None:
        vel_dot = translational_eom_anisotropic(total_force, config.mass_per_axis,
                                                velocity, omega)
    else:
        vel_dot = translational_eom(total_force, config.mass, velocity, omega)

    omega_dot = rotational_eom(aero.moment, config.inertia, omega)
    euler_dot = euler_rates(state.p, state.q, state.r, state.phi, state.theta)
    pos_dot = body_to_inertial_velocity(state.u, state.v, state.w,
                                        state.phi, state.theta, state.psi)

    state_dot = np.zeros(12)
    state_dot[0:3] = pos_dot
    state_dot[3:6] = vel_dot
    state_dot[6:9] = euler_dot
    state_dot[9:12] = omega_dot
    return state_dot


def forward_euler(state: SimState, state_dot: np.ndarray, dt: float) -> SimState:
    """state + dt * state_dot as a new state."""
    new_state = SimState()
    new_state.from_array(state.to_array() + dt * np.asarray(state_dot))
    return new_state


def rk4_step(state: SimState, config: SimConfig, dt: float) -> SimState:
    """One classic RK4 step (four derivative evaluations)."""
    k1 = compute_derivatives(state, config)
    k2 = compute_derivatives(forward_euler(state, k1, dt / 2), config)
    k3 = compute_derivatives(forward_euler(state, k2, dt / 2), config)
    k4 = compute_derivatives(forward_euler(state, k3, dt), config)
    return forward_euler(state, (k1 + 2 * k2 + 2 * k3 + k4) / 6.0, dt)


def simulate(state: SimState, config: SimConfig, dt: float, steps: int) -> SimState:
    """Advance ``steps`` forward Euler steps and return the final state."""
    current = state
    for _ in range(steps):
        current = forward_euler(current, compute_derivatives(current, config), dt)
    return current


class EulerIntegrator:
    """
    Forward Euler integrator (fixed time step).

    First order; useful as a cheap reference for RK4.
    """

    def __init__(self, dt: float = 0.01):
        if dt <= 0:
            raise ValueError(f"Time step must be positive, got {dt}")
        self.dt = dt

    def step(self, state: SimState, derivative_func: Callable) -> SimState:
        """
        Advance state by one time step.

        Parameters:
        -----------
        state : SimState
            Current state
        derivative_func : Callable
            Function that computes state_dot = f(state), shape (12,)

        Returns:
        --------
        new_state : SimState
            State at t + dt
        """
        return forward_euler(state, derivative_func(state), self.dt)

    def integrate(self, state0: SimState, t_span: Tuple[float, float],
                  derivative_func: Callable) -> Tuple[np.ndarray, np.ndarray]:
        """
        Integrate from t0 to tf.

        Returns:
        --------
        t_history : np.ndarray
            Time points
        state_history : np.ndarray, shape (n_steps, 12)
            State at each time point
        """
        t0, tf = t_span
        n_steps = int(round((tf - t0) / self.dt)) + 1

        t_history = t0 + self.dt * np.arange(n_steps)
        state_history = np.zeros((n_steps, 12))

        state_current = state0.copy()
        state_history[0, :] = state_current.to_array()

        for i in range(1, n_steps):
            state_current = self.step(state_current, derivative_func)
            state_history[i, :] = state_current.to_array()

        return t_history, state_history


class RK4Integrator(EulerIntegrator):
    """
    4th-order Runge-Kutta integrator (fixed time step).

    Four derivative evaluations per step, weighted 1:2:2:1.
    """

    def step(self, state: SimState, derivative_func: Callable) -> SimState:
        dt = self.dt

        k1 = derivative_func(state)
        k2 = derivative_func(forward_euler(state, k1, dt / 2))
        k3 = derivative_func(forward_euler(state, k2, dt / 2))
        k4 = derivative_func(forward_euler(state, k3, dt))

        return forward_euler(state, (k1 + 2 * k2 + 2 * k3 + k4) / 6.0, dt)


INTEGRATORS = {
    'euler': EulerIntegrator,
    'rk4': RK4Integrator,
}


def make_integrator(name: str, dt: float):
    """Integrator instance by name ('euler' or 'rk4')."""
    try:
        cls = INTEGRATORS[name.lower()]
    except KeyError:
        raise ValueError(f"Unknown integrator: {name}. Choose from {sorted(INTEGRATORS)}")
    return cls(dt)


def simulate_history(state: SimState, config: SimConfig, dt: float, duration: float,
                     method: str = 'rk4') -> pd.DataFrame:
    """
    Integrate for ``duration`` seconds and tabulate the trajectory.

    Returns:
    --------
    history : pd.DataFrame
        Column 't' plus one column per state variable, and derived
        'airspeed', 'alpha_deg', 'altitude'
    """
    if duration <= 0:
        raise ValueError(f"Duration must be positive, got {duration}")

    integrator = make_integrator(method, dt)
    t, states = integrator.integrate(state, (0.0, duration),
                                     lambda s: compute_derivatives(s, config))

    history = pd.DataFrame(states, columns=list(STATE_NAMES))
    history.insert(0, 't', t)
    history['airspeed'] = np.sqrt(history['u'] ** 2 + history['v'] ** 2 + history['w'] ** 2)
    history['alpha_deg'] = np.degrees(np.arctan2(history['w'], history['u']))
    history['altitude'] = -history['z']
    return history


if __name__ == "__main__":
    from glidesim.core.composite_frame import build_composite_frame, frame_to_sim_config
    from glidesim.core.polar import default_controls
    from glidesim.polars.registry import canopy_frame_config

    frame = build_composite_frame(canopy_frame_config('wingsuit'), deploy=1.0, pilot_pitch=0.0)
    config = frame_to_sim_config(frame, default_controls())

    state0 = SimState(z=-1000.0, u=11.8, w=1.7, theta=np.radians(-6.0))
    history = simulate_history(state0, config, dt=0.01, duration=5.0)

    print("=== Ibex UL glide, 5 s RK4 ===")
    print(history.iloc[::50][['t', 'x', 'z', 'airspeed', 'alpha_deg']].to_string(index=False))
