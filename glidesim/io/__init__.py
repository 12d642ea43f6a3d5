"""
YAML run configuration.
"""

from .config import (
    SimulationConfig,
    load_simulation_config,
    save_simulation_config,
    create_example_config
)

__all__ = [
    'SimulationConfig',
    'load_simulation_config',
    'save_simulation_config',
    'create_example_config'
]
