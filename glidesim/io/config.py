"""
Simulation Configuration System

YAML run configuration: which vehicle to fly, the atmosphere, the initial
flight condition, control settings and integration parameters.
"""

import logging
from dataclasses import fields, replace
from typing import Dict, Any, Optional

import numpy as np
import pandas as pd
import yaml

# Handle imports
try:
    from ..core.aero import refresh_segments
    from ..core.composite_frame import (
        CompositeFrameConfig, build_composite_frame, frame_to_sim_config,
    )
    from ..core.inertia import compute_center_of_mass, compute_inertia
    from ..core.integrator import INTEGRATORS, make_integrator, simulate_history
    from ..core.polar import SegmentControls, default_controls
    from ..core.segments import make_lifting_body_segment
    from ..core.state import SimState, SimConfig
    from ..environment.atmosphere import density_at
    from ..polars.registry import (
        CONTINUOUS_POLARS, canopy_frame_config, get_polar, has_aero_segments, make_aero_segments,
    )
    from ..simulation.runner import (
        DT, START_ALTITUDE, FlightState, SimRunner, flight_state_to_sim_state,
    )
except ImportError:
    from glidesim.core.aero import refresh_segments
    from glidesim.core.composite_frame import (
        CompositeFrameConfig, build_composite_frame, frame_to_sim_config,
    )
    from glidesim.core.inertia import compute_center_of_mass, compute_inertia
    from glidesim.core.integrator import INTEGRATORS, make_integrator, simulate_history
    from glidesim.core.polar import SegmentControls, default_controls
    from glidesim.core.segments import make_lifting_body_segment
    from glidesim.core.state import SimState, SimConfig
    from glidesim.environment.atmosphere import density_at
    from glidesim.polars.registry import (
        CONTINUOUS_POLARS, canopy_frame_config, get_polar, has_aero_segments, make_aero_segments,
    )
    from glidesim.simulation.runner import (
        DT, START_ALTITUDE, FlightState, SimRunner, flight_state_to_sim_state,
    )

logger = logging.getLogger(__name__)

# Polars flown as a composite canopy frame
CANOPY_POLARS = ('ibexul',)

CONTROL_NAMES = tuple(f.name for f in fields(SegmentControls))

# YAML initial_state key -> FlightState field
INITIAL_STATE_KEYS = {
    'airspeed': 'airspeed',
    'alpha': 'alpha_deg',
    'beta': 'beta_deg',
    'roll': 'roll_deg',
    'pitch': 'pitch_deg',
    'yaw': 'yaw_deg',
    'roll_rate': 'phi_dot_degps',
    'pitch_rate': 'theta_dot_degps',
    'yaw_rate': 'psi_dot_degps',
}


class SimulationConfig:
    """
    Simulation run loaded from a configuration dictionary.

    Attributes
    ----------
    polar_key : str
        Registry key of the vehicle polar
    pilot_type : str
        Pilot under the canopy ('wingsuit' or 'slick')
    use_apparent_mass : bool
        Include canopy apparent mass and inertia
    height : float
        Pilot height used to scale normalized positions (m)
    altitude : float
        Initial altitude (m)
    rho : float
        Air density (kg/m^3), from the ISA at ``altitude`` unless given
    initial_state : dict
        Initial flight condition (m/s, deg, deg/s)
    controls : dict
        Control settings by SegmentControls field name
    dt, duration : float
        Integration step and run length (s)
    integrator : str
        'rk4' or 'euler'
    """

    def __init__(self, config_dict: Dict[str, Any]):
        """
        Initialize simulation configuration from dictionary.

        Parameters
        ----------
        config_dict : dict
            Configuration dictionary (typically from YAML)

        Raises
        ------
        ValueError
            On an unknown polar, control or integrator, or a non-positive
            dt or duration
        """
        self.raw_config = config_dict if config_dict is not None else {}
        self._parse_config()

    def _parse_config(self):
        """Parse and validate configuration dictionary."""
        vehicle = self.raw_config.get('vehicle', {})
        self.polar_key = vehicle.get('polar', 'ibexul')
        self.pilot_type = vehicle.get('pilot_type', 'wingsuit')
        self.use_apparent_mass = bool(vehicle.get('apparent_mass', True))
        self.height = float(vehicle.get('height', 1.875))

        if self.polar_key not in CONTINUOUS_POLARS:
            raise ValueError(f"Unknown polar: {self.polar_key}. "
                             f"Choose from {sorted(CONTINUOUS_POLARS)}")

        environment = self.raw_config.get('environment', {})
        self.altitude = float(environment.get('altitude', START_ALTITUDE))
        rho = environment.get('rho')
        self.rho = float(rho) if rho is not None else density_at(self.altitude)

        self.initial_state = dict(self.raw_config.get('initial_state', {}))
        for key in self.initial_state:
            if key not in INITIAL_STATE_KEYS:
                raise ValueError(f"Unknown initial_state entry: {key}. "
                                 f"Choose from {list(INITIAL_STATE_KEYS)}")

        self.controls = dict(self.raw_config.get('controls', {}))
        for key in self.controls:
            if key not in CONTROL_NAMES:
                raise ValueError(f"Unknown control: {key}")

        simulation = self.raw_config.get('simulation', {})
        self.dt = float(simulation.get('dt', DT))
        self.duration = float(simulation.get('duration', 10.0))
        self.integrator = str(simulation.get('integrator', 'rk4')).lower()

        if self.dt <= 0:
            raise ValueError(f"Time step must be positive, got {self.dt}")
        if self.duration <= 0:
            raise ValueError(f"Duration must be positive, got {self.duration}")
        if self.integrator not in INTEGRATORS:
            raise ValueError(f"Unknown integrator: {self.integrator}. "
                             f"Choose from {sorted(INTEGRATORS)}")

    @property
    def is_canopy(self) -> bool:
        return self.polar_key in CANOPY_POLARS

    def create_controls(self) -> SegmentControls:
        """Control bundle with the configured settings over neutral defaults."""
        return replace(default_controls(), **{k: float(v) for k, v in self.controls.items()})

    def create_frame_config(self) -> Optional[CompositeFrameConfig]:
        """
        Composite frame recipe for canopy vehicles.

        Returns
        -------
        CompositeFrameConfig or None
            None for vehicles that are not flown as a composite frame
        """
        if not self.is_canopy:
            return None
        return canopy_frame_config(self.pilot_type, self.height, self.rho)

    def create_sim_config(self, controls: Optional[SegmentControls] = None) -> SimConfig:
        """
        Per-step configuration for the configured vehicle.

        Canopies go through the composite frame at the configured deploy and
        pilot pitch. Segmented vehicles use their own segment list with the
        polar's mass model. Lumped polars fly as one lifting body at the CG.
        """
        if controls is None:
            controls = self.create_controls()

        if self.is_canopy:
            frame = build_composite_frame(self.create_frame_config(), controls.deploy,
                                          controls.pilot_pitch)
            return frame_to_sim_config(frame, controls, self.use_apparent_mass)

        polar = get_polar(self.polar_key)
        if has_aero_segments(self.polar_key):
            segments = make_aero_segments(self.polar_key)
        else:
            segments = [make_lifting_body_segment(self.polar_key, (0.0, 0.0, 0.0), polar)]

        if len(polar.mass_segments) > 0:
            cg = compute_center_of_mass(polar.mass_segments, self.height, polar.m)
        else:
            cg = np.zeros(3)
        inertia = compute_inertia(polar.inertia_segments, self.height, polar.m)

        logger.debug(f"{self.polar_key}: {len(segments)} segments, mass {polar.m} kg, "
                     f"Iyy {inertia.Iyy:.2f} kg*m^2")

        return SimConfig(
            segments=refresh_segments(segments, controls),
            controls=controls,
            cg=cg,
            inertia=inertia,
            mass=polar.m,
            height=self.height,
            rho=self.rho,
        )

    def create_flight_state(self) -> FlightState:
        kwargs = {INITIAL_STATE_KEYS[k]: float(v) for k, v in self.initial_state.items()}
        controls = self.create_controls()
        return FlightState(rho=self.rho, delta=controls.delta, dirty=controls.dirty, **kwargs)

    def create_initial_state(self) -> SimState:
        """Initial rigid-body state at the configured altitude."""
        return flight_state_to_sim_state(self.create_flight_state(), self.altitude)

    def create_integrator(self):
        return make_integrator(self.integrator, self.dt)

    def create_runner(self) -> SimRunner:
        """Real-time runner; canopies rebuild their frame as controls change."""
        frame_config = self.create_frame_config()
        controls = self.create_controls()
        if frame_config is not None:
            runner = SimRunner(self.create_flight_state(), frame_config=frame_config,
                               controls=controls, use_apparent_mass=self.use_apparent_mass)
        else:
            runner = SimRunner(self.create_flight_state(),
                               sim_config=self.create_sim_config(controls), controls=controls)
        runner.state = self.create_initial_state()
        return runner

    def run(self) -> pd.DataFrame:
        """
        Integrate the configured run.

        Returns
        -------
        pd.DataFrame
            Trajectory history (see simulate_history)
        """
        logger.info(f"Running {self.polar_key} for {self.duration} s "
                    f"({self.integrator}, dt={self.dt})")
        return simulate_history(self.create_initial_state(), self.create_sim_config(),
                                self.dt, self.duration, self.integrator)

    def __repr__(self):
        return (f"SimulationConfig(polar='{self.polar_key}', "
                f"pilot_type='{self.pilot_type}', "
                f"altitude={self.altitude}, "
                f"rho={self.rho:.4f}, "
                f"integrator='{self.integrator}')")


def load_simulation_config(yaml_file: str) -> SimulationConfig:
    """
    Load simulation configuration from YAML file.

    Parameters
    ----------
    yaml_file : str
        Path to YAML configuration file

    Returns
    -------
    SimulationConfig
        Loaded configuration

    Examples
    --------
    >>> config = load_simulation_config('runs/ibex_glide.yaml')
    >>> history = config.run()
    """
    with open(yaml_file, 'r') as f:
        config_dict = yaml.safe_load(f)

    logger.info(f"Loaded configuration from {yaml_file}")
    return SimulationConfig(config_dict)


def save_simulation_config(config: SimulationConfig, yaml_file: str):
    """
    Save simulation configuration to YAML file.

    Parameters
    ----------
    config : SimulationConfig
        Configuration to save
    yaml_file : str
        Output YAML file path
    """
    with open(yaml_file, 'w') as f:
        yaml.dump(config.raw_config, f, default_flow_style=False, sort_keys=False)

    logger.info(f"Configuration saved to: {yaml_file}")


def create_example_config() -> Dict[str, Any]:
    """
    Create example configuration dictionary: an Ibex UL with a wingsuit pilot.

    Returns
    -------
    dict
        Example configuration
    """
    config = {
        'vehicle': {
            'polar': 'ibexul',
            'pilot_type': 'wingsuit',
            'apparent_mass': True,
            'height': 1.875,      # m
        },
        'environment': {
            'altitude': 1000.0,   # m, rho from the ISA
        },
        'initial_state': {
            'airspeed': 12.0,     # m/s
            'alpha': 8.0,         # deg
            'beta': 0.0,
            'roll': 0.0,
            'pitch': -4.0,
            'yaw': 0.0,
        },
        'controls': {
            'brake_left': 0.0,
            'brake_right': 0.0,
            'deploy': 1.0,
        },
        'simulation': {
            'dt': 0.005,          # s
            'duration': 5.0,      # s
            'integrator': 'rk4',
        },
    }

    return config


if __name__ == "__main__":
    config = SimulationConfig(create_example_config())
    print(config)

    history = config.run()
    print(history.iloc[::100][['t', 'x', 'altitude', 'airspeed', 'alpha_deg']]
          .round(3).to_string(index=False))
