"""
Mutable state owned by one DispatchController.

Nothing here is module-global, so several controllers (e.g. one per test)
can run side by side.
"""

from dataclasses import dataclass
from typing import List

import simpy

from config.simulation import SimulationConfig
from simulator.core.fleet_registry import FleetRegistry
from simulator.core.hall_button import HallButton
from simulator.core.request_queue import PendingRequestQueue
from simulator.infrastructure.message_broker import MessageBroker


@dataclass
class SimulationState:
    registry: FleetRegistry
    hall_buttons: List[HallButton]
    pending: PendingRequestQueue
    processing: bool = False  # latch: a drained request is being re-dispatched

    @classmethod
    def create(cls, env: simpy.Environment, broker: MessageBroker,
               config: SimulationConfig) -> 'SimulationState':
        """Fresh state: every car idle at its start floor, no calls anywhere"""
        registry = FleetRegistry(
            env,
            config.elevator.num_elevators,
            broker=broker,
            initial_floors=config.elevator.initial_floors
        )
        hall_buttons = [HallButton(env, floor, broker) for floor in range(config.building.num_floors)]
        return cls(
            registry=registry,
            hall_buttons=hall_buttons,
            pending=PendingRequestQueue(env)
        )

    @property
    def waiting(self) -> List[bool]:
        return [button.waiting for button in self.hall_buttons]

    @property
    def arrived(self) -> List[bool]:
        return [button.arrived for button in self.hall_buttons]
