from typing import List, Optional

import simpy

from config.simulation import SimulationConfig, is_floor_index
from simulator.core.elevator import ElevatorRecord
from simulator.core.trip_timer import TripTimer
from simulator.infrastructure.message_broker import MessageBroker
from .algorithms import create_allocation_strategy
from .exceptions import InvalidFloorError
from .interfaces.allocation_strategy import IAllocationStrategy
from .simulation_state import SimulationState


class DispatchController:
    """
    Dispatch controller that assigns floor calls to elevators

    Lifecycle of a call:
        Requested -> Assigned -> InTransit -> Arrived -> Reset
        Requested -> Queued -> (re-dispatched when drained)

    Draining of the pending request queue is paced by a processing latch:
    the latch is taken when a queued floor is popped and is only released
    when some floor finishes its post-arrival reset. While it is held, newly
    queued floors wait even if an elevator has become idle; direct calls are
    never gated by it.
    """
    def __init__(self, env: simpy.Environment, broker: MessageBroker,
                 config: SimulationConfig = None,
                 strategy: IAllocationStrategy = None,
                 name: str = "Dispatch"):
        self.env = env
        self.broker = broker
        self.config = config if config is not None else SimulationConfig()
        self.name = name

        self.num_floors = self.config.building.num_floors
        self.seconds_per_floor = self.config.elevator.seconds_per_floor
        self.reset_delay = self.config.dispatch.reset_delay
        self.tick_interval = self.config.dispatch.tick_interval

        self.strategy = strategy if strategy is not None else create_allocation_strategy(
            self.config.dispatch.allocation_strategy)
        self.state = SimulationState.create(env, broker, self.config)
        self.state.pending.subscribe(self._drain)

        print(f"{self.env.now:.2f} [{self.name}] Using strategy: {self.strategy.get_strategy_name()}")
        print(f"{self.env.now:.2f} [{self.name}] {len(self.state.registry)} elevators, {self.num_floors} floors.")

    # --- External interface ---

    def call_elevator(self, floor: int) -> bool:
        """
        Entry point for a floor call

        Args:
            floor: Floor index (0 = ground)

        Returns:
            bool: True if the call was accepted, False if it was a no-op
                  (floor already waiting/arrived, or an idle car is parked there)

        Raises:
            InvalidFloorError: If floor is not an integer in range
        """
        self._validate_floor(floor)

        reason = self._rejection_reason(floor)
        if reason is not None:
            print(f"{self.env.now:.2f} [{self.name}] Call for floor {floor} ignored ({reason}).")
            self.broker.put("dispatch/rejected", {
                "timestamp": self.env.now,
                "floor": floor,
                "reason": reason
            })
            return False

        print(f"{self.env.now:.2f} [{self.name}] Calling elevator for floor {floor}.")
        self.state.hall_buttons[floor].press()
        self.broker.put("dispatch/call", {
            "timestamp": self.env.now,
            "floor": floor
        })
        self._dispatch(floor, from_queue=False)
        return True

    def is_call_enabled(self, floor: int) -> bool:
        """Whether a call control for ``floor`` should be enabled"""
        self._validate_floor(floor)
        return self._rejection_reason(floor) is None

    def get_state(self) -> dict:
        """Observable state for rendering"""
        return {
            "timestamp": self.env.now,
            "waiting": self.state.waiting,
            "arrived": self.state.arrived,
            "pending": self.state.pending.items(),
            "processing": self.state.processing,
            "elevators": [record.to_status() for record in self.state.registry.snapshot()]
        }

    @property
    def waiting(self) -> List[bool]:
        return self.state.waiting

    @property
    def arrived(self) -> List[bool]:
        return self.state.arrived

    @property
    def pending(self) -> List[int]:
        return self.state.pending.items()

    @property
    def elevators(self):
        return self.state.registry.snapshot()

    # --- Call lifecycle ---

    def _validate_floor(self, floor):
        if not is_floor_index(floor, self.num_floors):
            raise InvalidFloorError(floor, self.num_floors)

    def _rejection_reason(self, floor: int) -> Optional[str]:
        button = self.state.hall_buttons[floor]
        if button.arrived:
            return "arrived"
        if button.waiting:
            return "waiting"
        if self.state.registry.idle_at(floor) is not None:
            return "elevator_present"
        return None

    def _dispatch(self, floor: int, from_queue: bool) -> Optional[TripTimer]:
        """Assign ``floor`` to the best idle elevator, or queue it"""
        selected = self.strategy.select_elevator(floor, self.state.registry.idle())

        if selected is None:
            print(f"{self.env.now:.2f} [{self.name}] No elevators available. Adding floor {floor} to pending requests.")
            self.broker.put("dispatch/queued", {
                "timestamp": self.env.now,
                "floor": floor,
                "from_queue": from_queue
            })
            self.state.pending.push(floor)
            return None

        return self._start_trip(selected, floor, from_queue)

    def _start_trip(self, elevator: ElevatorRecord, floor: int, from_queue: bool) -> TripTimer:
        travel_seconds = elevator.distance_to(floor) * self.seconds_per_floor
        self.state.registry.update(elevator.id, lambda record: record.start_trip(floor, travel_seconds))

        print(f"{self.env.now:.2f} [{self.name}] {elevator.name} assigned to floor {floor}. Travel time: {travel_seconds:.2f}s")
        self.broker.put("dispatch/assigned", {
            "timestamp": self.env.now,
            "floor": floor,
            "elevator_id": elevator.id,
            "from_floor": elevator.current_floor,
            "travel_seconds": travel_seconds,
            "from_queue": from_queue
        })

        timer = TripTimer(
            self.env, self.state.registry, elevator.id, floor, travel_seconds,
            tick_interval=self.tick_interval,
            on_arrival=self._handle_arrival
        )
        return timer

    def _handle_arrival(self, timer: TripTimer):
        print(f"{self.env.now:.2f} [{self.name}] Elevator_{timer.elevator_id} arrived at floor {timer.floor}.")
        self.state.registry.update(timer.elevator_id, lambda record: record.arrive())
        self.state.hall_buttons[timer.floor].mark_arrived(timer.elevator_id)
        self.env.process(self._reset_floor(timer.floor))

    def _reset_floor(self, floor: int):
        yield self.env.timeout(self.reset_delay)
        self.state.hall_buttons[floor].reset()

        # Releasing the latch here paces draining to one request per reset
        self.state.processing = False
        self._drain()

    def _drain(self):
        """Re-dispatch the head of the pending queue unless one is already in flight"""
        if self.state.processing or len(self.state.pending) == 0:
            return

        self.state.processing = True
        floor = self.state.pending.pop()
        print(f"{self.env.now:.2f} [{self.name}] Processing pending request for floor {floor}.")
        self._dispatch(floor, from_queue=True)
