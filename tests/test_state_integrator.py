"""
State Vector and Integrator Tests

Tests for SimState, the derivative function and the fixed-step
integrators.
"""

import pytest
import numpy as np
import os
import sys

# Add package to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from glidesim.core.eom import G
from glidesim.core.inertia import InertiaComponents
from glidesim.core.integrator import (
    EulerIntegrator, RK4Integrator, compute_derivatives, forward_euler, rk4_step,
    simulate, make_integrator, simulate_history,
)
from glidesim.core.polar import default_controls
from glidesim.core.state import SimState, SimConfig, STATE_NAMES
from glidesim.io.config import SimulationConfig


@pytest.fixture
def free_fall_config():
    """No aerodynamic segments: gravity only."""
    return SimConfig(segments=[], controls=default_controls(), cg=np.zeros(3),
                     inertia=InertiaComponents(Ixx=10.0, Iyy=10.0, Izz=10.0), mass=80.0)


class TestSimState:
    """Test state vector conversions and derived quantities."""

    def test_array_round_trip(self):
        values = np.arange(12, dtype=float) * 0.1
        state = SimState()
        state.from_array(values)
        assert state.to_array() == pytest.approx(values)
        assert state.q == pytest.approx(1.0)

    def test_copy_is_independent(self):
        state = SimState(u=10.0)
        clone = state.copy()
        clone.u = 20.0
        assert state.u == 10.0

    def test_flow_angles(self):
        state = SimState(u=10.0, v=0.0, w=10.0)
        assert state.alpha == pytest.approx(np.pi / 4)
        assert state.beta == pytest.approx(0.0)
        assert state.airspeed == pytest.approx(np.sqrt(200.0))

    def test_flow_angles_at_rest(self):
        state = SimState()
        assert state.alpha == 0.0
        assert state.beta == 0.0

    def test_altitude(self):
        assert SimState(z=-1500.0).altitude == 1500.0

    def test_inertial_velocity(self):
        state = SimState(u=10.0, psi=np.pi / 2)
        assert state.velocity_inertial == pytest.approx([0.0, 10.0, 0.0], abs=1e-12)

    def test_is_finite(self):
        assert SimState(u=1.0).is_finite()
        assert not SimState(u=float('nan')).is_finite()

    def test_state_names(self):
        assert len(STATE_NAMES) == 12


class TestDerivatives:
    """Test the full derivative function."""

    def test_free_fall(self, free_fall_config):
        state_dot = compute_derivatives(SimState(), free_fall_config)
        assert state_dot[5] == pytest.approx(G)
        assert state_dot[3] == pytest.approx(0.0)
        assert np.allclose(state_dot[9:12], 0.0)

    def test_position_rate(self, free_fall_config):
        state_dot = compute_derivatives(SimState(u=12.0), free_fall_config)
        assert state_dot[0:3] == pytest.approx([12.0, 0.0, 0.0])

    def test_equal_axis_masses_match_scalar(self, free_fall_config):
        state = SimState(u=10.0, w=2.0, q=0.3)
        scalar = compute_derivatives(state, free_fall_config)
        free_fall_config.mass_per_axis = np.array([80.0, 80.0, 80.0])
        per_axis = compute_derivatives(state, free_fall_config)
        assert per_axis == pytest.approx(scalar)


class TestIntegrators:
    """Test fixed-step integration."""

    def test_invalid_dt(self):
        with pytest.raises(ValueError, match="Time step must be positive"):
            EulerIntegrator(dt=0.0)
        with pytest.raises(ValueError):
            RK4Integrator(dt=-0.01)

    def test_constant_derivative(self):
        """Constant derivative integrates exactly with either method."""
        rate = np.zeros(12)
        rate[0] = 2.0
        for integrator in (EulerIntegrator(dt=0.1), RK4Integrator(dt=0.1)):
            t, states = integrator.integrate(SimState(), (0.0, 1.0), lambda s: rate)
            assert len(t) == 11
            assert states[-1, 0] == pytest.approx(2.0)

    def test_rk4_exponential_decay(self):
        """RK4 tracks exp(-t) far better than Euler."""
        def decay(s):
            return -s.to_array()

        state0 = SimState(x=1.0)
        _, euler_states = EulerIntegrator(dt=0.1).integrate(state0, (0.0, 1.0), decay)
        _, rk4_states = RK4Integrator(dt=0.1).integrate(state0, (0.0, 1.0), decay)

        exact = np.exp(-1.0)
        assert abs(rk4_states[-1, 0] - exact) < 1e-5
        assert abs(euler_states[-1, 0] - exact) > 1e-3

    def test_convergence_order(self):
        """Halving dt cuts Euler error ~2x and RK4 error ~16x."""
        def decay(s):
            return -s.to_array()

        def endpoint_error(integrator_cls, dt):
            _, states = integrator_cls(dt=dt).integrate(SimState(x=1.0), (0.0, 1.0), decay)
            return abs(states[-1, 0] - np.exp(-1.0))

        euler_ratio = endpoint_error(EulerIntegrator, 0.1) / endpoint_error(EulerIntegrator, 0.05)
        rk4_ratio = endpoint_error(RK4Integrator, 0.1) / endpoint_error(RK4Integrator, 0.05)
        assert euler_ratio == pytest.approx(2.0, rel=0.1)
        assert rk4_ratio == pytest.approx(16.0, rel=0.15)

    def test_make_integrator(self):
        assert isinstance(make_integrator('RK4', 0.01), RK4Integrator)
        assert isinstance(make_integrator('euler', 0.01), EulerIntegrator)
        with pytest.raises(ValueError, match="Unknown integrator"):
            make_integrator('verlet', 0.01)

    def test_free_fall_rk4(self, free_fall_config):
        """w grows as g t, z as g t^2 / 2."""
        state = SimState()
        for _ in range(10):
            state = rk4_step(state, free_fall_config, 0.1)
        assert state.w == pytest.approx(G)
        assert state.z == pytest.approx(0.5 * G)

    def test_simulate_euler(self, free_fall_config):
        final = simulate(SimState(), free_fall_config, 0.1, 10)
        assert final.w == pytest.approx(G)

    def test_forward_euler_returns_new_state(self):
        state = SimState(u=1.0)
        stepped = forward_euler(state, np.ones(12), 0.5)
        assert stepped is not state
        assert state.u == 1.0
        assert stepped.u == pytest.approx(1.5)


class TestVehicleFreeFall:
    """Drop real vehicles from rest."""

    @pytest.mark.parametrize("vehicle", [
        {'polar': 'a5segments'},
        {'polar': 'ibexul', 'apparent_mass': False},
    ])
    def test_airspeed_tracks_gravity(self, vehicle):
        """Airspeed grows every step and stays near g t while drag is small."""
        config = SimulationConfig({'vehicle': vehicle, 'initial_state': {'airspeed': 0.0}})
        sim_config = config.create_sim_config()
        state = config.create_initial_state()
        assert state.airspeed == 0.0

        dt = 0.01
        speeds = [0.0]
        for _ in range(20):
            state = rk4_step(state, sim_config, dt)
            speeds.append(state.airspeed)

        assert state.is_finite()
        assert all(b > a for a, b in zip(speeds, speeds[1:]))
        assert speeds[-1] == pytest.approx(G * 0.2, rel=0.05)
        assert speeds[-1] <= G * 0.2 * 1.001


class TestSimulateHistory:
    """Test the tabulated run."""

    def test_columns_and_rows(self, free_fall_config):
        history = simulate_history(SimState(z=-100.0, u=10.0), free_fall_config, 0.01, 1.0)
        assert len(history) == 101
        for col in ('t', 'airspeed', 'alpha_deg', 'altitude') + STATE_NAMES:
            assert col in history.columns
        assert history['t'].iloc[-1] == pytest.approx(1.0)
        assert history['altitude'].iloc[-1] == pytest.approx(100.0 - 0.5 * G)

    def test_invalid_duration(self, free_fall_config):
        with pytest.raises(ValueError, match="Duration must be positive"):
            simulate_history(SimState(), free_fall_config, 0.01, 0.0)


if __name__ == "__main__":
    pytest.main([__file__, '-v'])
