"""
Real-time fixed-timestep simulation runner.
"""

from .runner import FlightState, SimRunner, flight_state_to_sim_state, sim_state_to_flight_state

__all__ = ['FlightState', 'SimRunner', 'flight_state_to_sim_state', 'sim_state_to_flight_state']
