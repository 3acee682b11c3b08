"""Core dispatch entities"""

from .entity import Entity
from .elevator import ElevatorRecord, UP, DOWN, NO_DIRECTION
from .fleet_registry import FleetRegistry
from .hall_button import HallButton
from .request_queue import PendingRequestQueue
from .trip_timer import TripTimer

__all__ = [
    'Entity',
    'ElevatorRecord',
    'UP',
    'DOWN',
    'NO_DIRECTION',
    'FleetRegistry',
    'HallButton',
    'PendingRequestQueue',
    'TripTimer',
]
