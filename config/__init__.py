"""
Configuration management package

Provides dataclass configuration for the building, fleet, dispatch
controller and call traffic, plus YAML loading.
"""

from .dispatch import DispatchConfig, ALLOCATION_STRATEGIES

from .simulation import (
    SimulationConfig,
    BuildingConfig,
    ElevatorConfig,
    TrafficConfig
)

from .config_loader import (
    ConfigLoader,
    load_simulation_config,
    save_simulation_config
)

__all__ = [
    # Dispatch
    'DispatchConfig',
    'ALLOCATION_STRATEGIES',

    # Simulation
    'SimulationConfig',
    'BuildingConfig',
    'ElevatorConfig',
    'TrafficConfig',

    # Loader
    'ConfigLoader',
    'load_simulation_config',
    'save_simulation_config',
]
