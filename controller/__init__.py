"""
Elevator Dispatch Controller

This package assigns floor calls to elevators, queues calls the fleet
cannot serve yet, and drains that queue as elevators free up.
"""

__version__ = "0.1.0"

from .dispatch_controller import DispatchController
from .exceptions import InvalidFloorError
from .simulation_state import SimulationState

__all__ = ['DispatchController', 'InvalidFloorError', 'SimulationState']
