"""
Elevator Simulator - Dispatch simulation engine

This package provides the simulated elevator fleet, floor call buttons,
pending request queue and trip timers, plus the SimPy infrastructure
they run on.
"""

__version__ = "0.1.0"

from .core.elevator import ElevatorRecord
from .core.fleet_registry import FleetRegistry
from .core.hall_button import HallButton
from .core.request_queue import PendingRequestQueue
from .core.trip_timer import TripTimer
from .core.entity import Entity

from .infrastructure.message_broker import MessageBroker
from .infrastructure.realtime_env import RealtimeEnvironment

__all__ = [
    'ElevatorRecord',
    'FleetRegistry',
    'HallButton',
    'PendingRequestQueue',
    'TripTimer',
    'Entity',
    'MessageBroker',
    'RealtimeEnvironment',
]
