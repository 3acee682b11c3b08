"""
Trip Timer

Drives one elevator trip with two independent clocks:
- a one-shot completion after the full travel time (authoritative, fires arrival)
- a periodic countdown of remaining_seconds (cosmetic ETA only)
"""

from typing import Callable, Optional

import simpy
from simpy.events import Interrupt

from .entity import Entity
from .fleet_registry import FleetRegistry


class TripTimer(Entity):
    """
    Timer for a single dispatched trip.

    States: IN_TRANSIT -> ARRIVED
    """

    def __init__(self, env: simpy.Environment, registry: FleetRegistry, elevator_id: int,
                 floor: int, travel_seconds: float, tick_interval: float = 1.0,
                 on_arrival: Optional[Callable[['TripTimer'], None]] = None):
        """
        Args:
            env: SimPy environment
            registry: Fleet registry holding the elevator's record
            elevator_id: Elevator making the trip
            floor: Destination floor
            travel_seconds: Time until arrival
            tick_interval: Period of the ETA countdown
            on_arrival: Called with this timer once the trip completes
        """
        if travel_seconds < 0:
            raise ValueError("travel_seconds cannot be negative")
        if tick_interval <= 0:
            raise ValueError("tick_interval must be positive")

        super().__init__(env, f"TripTimer_{elevator_id}_to_{floor}")
        self.registry = registry
        self.elevator_id = elevator_id
        self.floor = floor
        self.travel_seconds = travel_seconds
        self.tick_interval = tick_interval
        self.on_arrival = on_arrival
        self.set_state("IN_TRANSIT")

        self.countdown_process = None
        if travel_seconds > 0:
            self.countdown_process = self.env.process(self._countdown())

    def run(self):
        yield self.env.timeout(self.travel_seconds)

        # The countdown must not touch the record once the car is idle
        if self.countdown_process is not None and self.countdown_process.is_alive:
            self.countdown_process.interrupt("arrived")

        self.set_state("ARRIVED")
        if self.on_arrival is not None:
            self.on_arrival(self)

    def _countdown(self):
        try:
            while True:
                yield self.env.timeout(self.tick_interval)
                self.registry.update(self.elevator_id, lambda record: record.countdown(self.tick_interval))
        except Interrupt:
            print(f"{self.env.now:.2f} [TripTimer] Countdown for Elevator_{self.elevator_id} stopped.")
