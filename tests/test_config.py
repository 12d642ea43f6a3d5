"""
Simulation Configuration Tests

Tests for YAML run configuration: parsing, validation, vehicle assembly
and round trips through files.
"""

import pytest
import numpy as np
import os
import sys

# Add package to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from glidesim.io.config import (
    SimulationConfig, create_example_config, load_simulation_config, save_simulation_config,
)
from glidesim.core.integrator import RK4Integrator, EulerIntegrator
from glidesim.environment.atmosphere import density_at
from glidesim.polars.library import A5_SEGMENTS_POLAR
from glidesim.simulation.runner import DT, START_ALTITUDE, SimRunner


class TestParsing:
    """Test parsing and defaults."""

    def test_example(self):
        config = SimulationConfig(create_example_config())
        assert config.polar_key == 'ibexul'
        assert config.pilot_type == 'wingsuit'
        assert config.is_canopy
        assert config.altitude == 1000.0
        assert config.rho == pytest.approx(density_at(1000.0))
        assert config.dt == 0.005
        assert config.integrator == 'rk4'

    def test_defaults(self):
        config = SimulationConfig({})
        assert config.polar_key == 'ibexul'
        assert config.altitude == START_ALTITUDE
        assert config.dt == DT
        assert config.duration == 10.0
        assert config.use_apparent_mass

    def test_none(self):
        assert SimulationConfig(None).raw_config == {}

    def test_explicit_density(self):
        config = SimulationConfig({'environment': {'altitude': 3000.0, 'rho': 1.1}})
        assert config.rho == 1.1

    def test_repr(self):
        assert "polar='ibexul'" in repr(SimulationConfig({}))


class TestValidation:
    """Test rejected configurations."""

    def test_unknown_polar(self):
        with pytest.raises(ValueError, match="Unknown polar"):
            SimulationConfig({'vehicle': {'polar': 'glider'}})

    def test_unknown_initial_state(self):
        with pytest.raises(ValueError, match="Unknown initial_state entry"):
            SimulationConfig({'initial_state': {'mach': 0.1}})

    def test_unknown_control(self):
        with pytest.raises(ValueError, match="Unknown control"):
            SimulationConfig({'controls': {'throttle': 1.0}})

    def test_unknown_integrator(self):
        with pytest.raises(ValueError, match="Unknown integrator"):
            SimulationConfig({'simulation': {'integrator': 'verlet'}})

    def test_bad_time_step(self):
        with pytest.raises(ValueError, match="Time step must be positive"):
            SimulationConfig({'simulation': {'dt': 0.0}})
        with pytest.raises(ValueError, match="Duration must be positive"):
            SimulationConfig({'simulation': {'duration': -1.0}})


class TestFactories:
    """Test objects built from the configuration."""

    def test_controls(self):
        config = SimulationConfig({'controls': {'brake_left': 0.5, 'dirty': 1}})
        controls = config.create_controls()
        assert controls.brake_left == 0.5
        assert controls.dirty == 1.0
        assert controls.deploy == 1.0

    def test_initial_state(self):
        config = SimulationConfig({
            'environment': {'altitude': 1500.0},
            'initial_state': {'airspeed': 20.0, 'alpha': 90.0, 'pitch': -30.0},
        })
        state = config.create_initial_state()
        assert state.altitude == 1500.0
        assert state.u == pytest.approx(0.0, abs=1e-12)
        assert state.w == pytest.approx(20.0)
        assert state.theta == pytest.approx(np.radians(-30.0))

    def test_flight_state_carries_density(self):
        config = SimulationConfig({'environment': {'rho': 1.0}, 'controls': {'delta': 0.3}})
        fs = config.create_flight_state()
        assert fs.rho == 1.0
        assert fs.delta == pytest.approx(0.3)

    def test_integrator(self):
        assert isinstance(SimulationConfig({}).create_integrator(), RK4Integrator)
        config = SimulationConfig({'simulation': {'integrator': 'euler', 'dt': 0.02}})
        integrator = config.create_integrator()
        assert isinstance(integrator, EulerIntegrator)
        assert integrator.dt == 0.02

    def test_integrator_name_case(self):
        """Integrator names are matched without regard to case."""
        config = SimulationConfig({'simulation': {'integrator': 'RK4'}})
        assert config.integrator == 'rk4'
        assert isinstance(config.create_integrator(), RK4Integrator)
        assert isinstance(SimulationConfig({'simulation': {'integrator': 'Euler'}})
                          .create_integrator(), EulerIntegrator)

    def test_canopy_sim_config(self):
        config = SimulationConfig(create_example_config())
        sim = config.create_sim_config()
        assert len(sim.segments) == 16
        assert sim.mass_per_axis is not None
        assert sim.rho == pytest.approx(config.rho)

    def test_canopy_without_apparent_mass(self):
        config = SimulationConfig({'vehicle': {'apparent_mass': False}})
        assert config.create_sim_config().mass_per_axis is None

    def test_segmented_sim_config(self):
        config = SimulationConfig({'vehicle': {'polar': 'a5segments'}})
        assert not config.is_canopy
        assert config.create_frame_config() is None
        sim = config.create_sim_config()
        assert len(sim.segments) == 6
        assert sim.mass == A5_SEGMENTS_POLAR.m
        assert sim.inertia.Iyy > 0.0

    def test_lumped_sim_config(self):
        """Polars without a mass model fly as one body at the origin."""
        config = SimulationConfig({'vehicle': {'polar': 'slicksin'}})
        sim = config.create_sim_config()
        assert len(sim.segments) == 1
        assert sim.segments[0].kind == 'lifting_body'
        assert np.allclose(sim.cg, 0.0)
        assert sim.inertia.Iyy == 0.0

    def test_runner(self):
        config = SimulationConfig({
            'vehicle': {'polar': 'aurafive'},
            'environment': {'altitude': 800.0},
            'initial_state': {'airspeed': 30.0, 'alpha': 10.0},
        })
        runner = config.create_runner()
        assert isinstance(runner, SimRunner)
        assert runner.frame is None
        assert runner.altitude == 800.0
        assert runner.speed == pytest.approx(30.0)

    def test_canopy_runner(self):
        runner = SimulationConfig(create_example_config()).create_runner()
        assert runner.frame is not None
        assert runner.altitude == 1000.0


class TestRun:
    """Test a short configured run."""

    def test_run(self):
        config = SimulationConfig({
            'vehicle': {'polar': 'aurafive'},
            'initial_state': {'airspeed': 35.0, 'alpha': 8.0, 'pitch': -5.0},
            'simulation': {'dt': 0.01, 'duration': 0.2, 'integrator': 'rk4'},
        })
        history = config.run()
        assert len(history) == 21
        assert np.all(np.isfinite(history.to_numpy()))
        assert history['altitude'].iloc[-1] < history['altitude'].iloc[0]


class TestYaml:
    """Test saving and loading YAML files."""

    def test_round_trip(self, tmp_path):
        path = tmp_path / 'run.yaml'
        original = SimulationConfig(create_example_config())
        save_simulation_config(original, str(path))

        loaded = load_simulation_config(str(path))
        assert loaded.raw_config == original.raw_config
        assert loaded.altitude == original.altitude
        assert loaded.create_controls() == original.create_controls()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_simulation_config(str(tmp_path / 'missing.yaml'))


if __name__ == "__main__":
    pytest.main([__file__, '-v'])
