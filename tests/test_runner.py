"""
Simulation Runner Tests

Tests for the fixed-timestep real-time loop, display-state conversions
and throttle input shaping.
"""

import pytest
import numpy as np
import os
import sys

# Add package to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from glidesim.core.inertia import InertiaComponents
from glidesim.core.polar import SegmentControls, default_controls
from glidesim.core.state import SimState, SimConfig
from glidesim.polars.registry import canopy_frame_config
from glidesim.simulation.runner import (
    DT, MAX_STEPS_PER_ADVANCE, START_ALTITUDE, FlightState, SimRunner, apply_deadzone,
    flight_state_to_sim_state, sim_state_to_flight_state,
)


@pytest.fixture
def free_fall_runner():
    config = SimConfig(segments=[], controls=default_controls(), cg=np.zeros(3),
                       inertia=InertiaComponents(Ixx=10.0, Iyy=10.0, Izz=10.0), mass=80.0)
    return SimRunner(FlightState(airspeed=0.0), sim_config=config)


class TestDeadzone:
    """Test throttle shaping."""

    def test_inside_deadzone(self):
        assert apply_deadzone(0.05) == 0.0
        assert apply_deadzone(-0.05) == 0.0

    def test_full_deflection(self):
        assert apply_deadzone(1.0) == pytest.approx(1.0)
        assert apply_deadzone(-1.0) == pytest.approx(-1.0)

    def test_rescaled(self):
        assert apply_deadzone(0.54) == pytest.approx(0.5)


class TestConversions:
    """Test display state <-> sim state."""

    def test_to_sim_state(self):
        fs = FlightState(airspeed=20.0, alpha_deg=10.0, pitch_deg=-5.0, theta_dot_degps=3.0)
        sim = flight_state_to_sim_state(fs)
        assert sim.altitude == START_ALTITUDE
        assert sim.airspeed == pytest.approx(20.0)
        assert np.degrees(sim.alpha) == pytest.approx(10.0)
        assert sim.q == pytest.approx(np.radians(3.0))

    def test_round_trip(self):
        fs = FlightState(airspeed=25.0, alpha_deg=6.0, beta_deg=-3.0, roll_deg=15.0,
                         pitch_deg=-8.0, yaw_deg=40.0, psi_dot_degps=5.0, rho=1.1)
        back = sim_state_to_flight_state(flight_state_to_sim_state(fs, 1000.0), fs)
        assert back.airspeed == pytest.approx(25.0)
        assert back.alpha_deg == pytest.approx(6.0)
        assert back.beta_deg == pytest.approx(-3.0)
        assert back.yaw_deg == pytest.approx(40.0)
        assert back.psi_dot_degps == pytest.approx(5.0)
        assert back.rho == 1.1

    def test_flow_angles_zero_at_rest(self):
        back = sim_state_to_flight_state(SimState(w=0.01), FlightState())
        assert back.alpha_deg == 0.0
        assert back.beta_deg == 0.0


class TestSimRunner:
    """Test stepping and frame management."""

    def test_requires_vehicle(self):
        with pytest.raises(ValueError, match="frame_config or a sim_config"):
            SimRunner(FlightState())

    def test_long_frame_clamped(self, free_fall_runner):
        free_fall_runner.advance(1.0)
        assert free_fall_runner.steps == MAX_STEPS_PER_ADVANCE
        assert free_fall_runner.time == pytest.approx(MAX_STEPS_PER_ADVANCE * DT)

    def test_whole_steps(self, free_fall_runner):
        free_fall_runner.advance(3 * DT)
        assert free_fall_runner.steps == 3

    def test_accumulator_carries_remainder(self, free_fall_runner):
        free_fall_runner.advance(DT / 2)
        assert free_fall_runner.steps == 0
        free_fall_runner.advance(DT / 2)
        assert free_fall_runner.steps == 1

    def test_falls(self, free_fall_runner):
        fs = free_fall_runner.advance(MAX_STEPS_PER_ADVANCE * DT)
        assert free_fall_runner.altitude < START_ALTITUDE
        assert fs.airspeed == pytest.approx(9.80665 * MAX_STEPS_PER_ADVANCE * DT)
        assert fs.alpha_deg == pytest.approx(90.0)

    def test_throttle(self, free_fall_runner):
        free_fall_runner.advance(DT, throttle=(0.05, 1.0, -0.54))
        controls = free_fall_runner.controls
        assert controls.pitch_throttle == 0.0
        assert controls.yaw_throttle == pytest.approx(1.0)
        assert controls.roll_throttle == pytest.approx(-0.5)

    def test_fixed_config_follows_controls(self, free_fall_runner):
        free_fall_runner.set_controls(SegmentControls(brake_left=0.7))
        assert free_fall_runner.current_config().controls.brake_left == 0.7


class TestFrameRunner:
    """Test composite frame rebuilds."""

    @pytest.fixture
    def runner(self):
        return SimRunner(FlightState(airspeed=12.0, alpha_deg=8.0),
                         frame_config=canopy_frame_config('wingsuit'))

    def test_initial_frame(self, runner):
        assert runner.frame is not None
        assert runner.frame.deploy == 1.0

    def test_rebuild_on_deploy(self, runner):
        first = runner.frame
        runner.set_controls(SegmentControls(deploy=0.5))
        config = runner.current_config()
        assert runner.frame is not first
        assert runner.frame.deploy == 0.5
        assert config.mass_per_axis == pytest.approx(runner.frame.effective_mass)

    def test_no_rebuild_within_tolerance(self, runner):
        first = runner.frame
        runner.set_controls(SegmentControls(deploy=0.9995))
        runner.current_config()
        assert runner.frame is first

    def test_advance(self, runner):
        fs = runner.advance(4 * DT)
        assert runner.steps == 4
        assert np.isfinite(fs.airspeed)


if __name__ == "__main__":
    pytest.main([__file__, '-v'])
