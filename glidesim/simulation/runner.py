"""
Fixed-timestep simulation runner.

Advances the rigid-body state in real time: each advance(elapsed) call
integrates whole RK4 steps of DT out of an accumulator, at most
MAX_STEPS_PER_ADVANCE per call, and reports the result as a FlightState.
Optional throttle input (pitch, yaw, roll sticks) is passed through a
deadzone into the control bundle.
"""

import logging
from dataclasses import replace
from typing import Optional, Tuple

import numpy as np
from archimedes import struct

# Handle imports
try:
    from ..core.composite_frame import (
        CompositeFrameConfig, build_composite_frame, frame_needs_rebuild, frame_to_sim_config,
    )
    from ..core.integrator import rk4_step
    from ..core.polar import SegmentControls, default_controls
    from ..core.state import SimState, SimConfig
except ImportError:
    from glidesim.core.composite_frame import (
        CompositeFrameConfig, build_composite_frame, frame_needs_rebuild, frame_to_sim_config,
    )
    from glidesim.core.integrator import rk4_step
    from glidesim.core.polar import SegmentControls, default_controls
    from glidesim.core.state import SimState, SimConfig

logger = logging.getLogger(__name__)

DT = 1.0 / 200.0
MAX_STEPS_PER_ADVANCE = 10
DEFAULT_DEADZONE = 0.08
START_ALTITUDE = 2000.0  # m


@struct(frozen=True)
class FlightState:
    """
    Flight condition in display units.

    Angles in degrees, rates in deg/s, airspeed in m/s.
    """

    airspeed: float = 10.0
    alpha_deg: float = 0.0
    beta_deg: float = 0.0
    roll_deg: float = 0.0
    pitch_deg: float = 0.0
    yaw_deg: float = 0.0
    phi_dot_degps: float = 0.0
    theta_dot_degps: float = 0.0
    psi_dot_degps: float = 0.0
    rho: float = 1.225
    delta: float = 0.0
    dirty: float = 0.0


def flight_state_to_sim_state(fs: FlightState, altitude: float = START_ALTITUDE) -> SimState:
    """
    Body velocity from airspeed and flow angles; rates map directly to p, q, r.

    u = V cos(alpha) cos(beta), v = V sin(beta), w = V sin(alpha) cos(beta)
    """
    alpha = np.radians(fs.alpha_deg)
    beta = np.radians(fs.beta_deg)
    V = fs.airspeed
    return SimState(
        x=0.0, y=0.0, z=-altitude,
        u=float(V * np.cos(alpha) * np.cos(beta)),
        v=float(V * np.sin(beta)),
        w=float(V * np.sin(alpha) * np.cos(beta)),
        phi=float(np.radians(fs.roll_deg)),
        theta=float(np.radians(fs.pitch_deg)),
        psi=float(np.radians(fs.yaw_deg)),
        p=float(np.radians(fs.phi_dot_degps)),
        q=float(np.radians(fs.theta_dot_degps)),
        r=float(np.radians(fs.psi_dot_degps)),
    )


def sim_state_to_flight_state(sim: SimState, base: FlightState) -> FlightState:
    """Display state from a sim state; flow angles are zero below 0.1 m/s."""
    V = sim.airspeed
    if V > 0.1:
        alpha = np.arctan2(sim.w, sim.u)
        beta = np.arcsin(np.clip(sim.v / V, -1.0, 1.0))
    else:
        alpha = beta = 0.0
    return replace(
        base,
        airspeed=V,
        alpha_deg=float(np.degrees(alpha)),
        beta_deg=float(np.degrees(beta)),
        roll_deg=float(np.degrees(sim.phi)),
        pitch_deg=float(np.degrees(sim.theta)),
        yaw_deg=float(np.degrees(sim.psi)),
        phi_dot_degps=float(np.degrees(sim.p)),
        theta_dot_degps=float(np.degrees(sim.q)),
        psi_dot_degps=float(np.degrees(sim.r)),
    )


def apply_deadzone(value: float, deadzone: float = DEFAULT_DEADZONE) -> float:
    """Zero inside the deadzone, rescaled to reach +-1 at full deflection."""
    if abs(value) < deadzone:
        return 0.0
    return float(np.sign(value) * (abs(value) - deadzone) / (1 - deadzone))


class SimRunner:
    """
    Real-time RK4 loop over a composite frame or a fixed configuration.

    Parameters
    ----------
    initial : FlightState
        Starting flight condition (placed at START_ALTITUDE)
    frame_config : CompositeFrameConfig, optional
        Vehicle recipe; the frame is rebuilt when deploy or pilot pitch in
        the controls drift beyond tolerance
    controls : SegmentControls, optional
        Live controls, defaults to neutral
    sim_config : SimConfig, optional
        Fixed configuration used when no frame_config is given
    use_apparent_mass : bool
        Use effective (physical + apparent) mass and inertia from the frame
    deadzone : float
        Throttle stick deadzone
    """

    def __init__(self, initial: FlightState,
                 frame_config: Optional[CompositeFrameConfig] = None,
                 controls: Optional[SegmentControls] = None,
                 sim_config: Optional[SimConfig] = None,
                 use_apparent_mass: bool = True,
                 deadzone: float = DEFAULT_DEADZONE):
        if frame_config is None and sim_config is None:
            raise ValueError("SimRunner needs a frame_config or a sim_config")

        self.base_state = initial
        self.state = flight_state_to_sim_state(initial)
        self.frame_config = frame_config
        self.controls = controls if controls is not None else (
            sim_config.controls if sim_config is not None else default_controls())
        self.use_apparent_mass = use_apparent_mass
        self.deadzone = deadzone

        self.frame = None
        self._fixed_config = sim_config
        self.time = 0.0
        self.steps = 0
        self._accumulator = 0.0

        if frame_config is not None:
            self._rebuild_frame()

    @property
    def altitude(self) -> float:
        return -self.state.z

    @property
    def speed(self) -> float:
        return self.state.airspeed

    def _rebuild_frame(self):
        self.frame = build_composite_frame(self.frame_config, self.controls.deploy,
                                           self.controls.pilot_pitch)

    def set_controls(self, controls: SegmentControls):
        self.controls = controls

    def current_config(self) -> SimConfig:
        """Per-step configuration for the live controls."""
        if self.frame_config is None:
            return replace(self._fixed_config, controls=self.controls)

        if frame_needs_rebuild(self.frame, self.controls.deploy, self.controls.pilot_pitch):
            logger.debug(f"Rebuilding frame: deploy {self.frame.deploy:.3f} -> "
                         f"{self.controls.deploy:.3f}, pilot pitch {self.frame.pilot_pitch:.2f} -> "
                         f"{self.controls.pilot_pitch:.2f} deg")
            self._rebuild_frame()
        return frame_to_sim_config(self.frame, self.controls, self.use_apparent_mass)

    def advance(self, elapsed: float,
                throttle: Optional[Tuple[float, float, float]] = None) -> FlightState:
        """
        Integrate the wall-clock interval ``elapsed`` (s).

        Parameters
        ----------
        elapsed : float
            Time since the previous call, clamped to MAX_STEPS_PER_ADVANCE * DT
        throttle : tuple, optional
            (pitch, yaw, roll) stick values in [-1, 1]

        Returns
        -------
        FlightState
            Updated display state
        """
        max_elapsed = MAX_STEPS_PER_ADVANCE * DT
        if elapsed > max_elapsed:
            logger.warning(f"Frame time {elapsed:.3f} s clamped to {max_elapsed:.3f} s")
            elapsed = max_elapsed

        if throttle is not None:
            pitch, yaw, roll = (apply_deadzone(v, self.deadzone) for v in throttle)
            self.controls = replace(self.controls, pitch_throttle=pitch,
                                    yaw_throttle=yaw, roll_throttle=roll)

        config = self.current_config()

        self._accumulator += max(elapsed, 0.0)
        n = 0
        while self._accumulator >= DT - 1e-12 and n < MAX_STEPS_PER_ADVANCE:
            self.state = rk4_step(self.state, config, DT)
            self._accumulator -= DT
            self.time += DT
            n += 1
        self.steps += n

        return sim_state_to_flight_state(self.state, self.base_state)
