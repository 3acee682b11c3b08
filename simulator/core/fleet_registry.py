"""
Fleet Registry

Owns every ElevatorRecord. All state changes go through update(), which
replaces a single record as a whole and reports the new status.
"""

from typing import Callable, Dict, List, Optional, Tuple

import simpy

from .elevator import ElevatorRecord
from ..infrastructure.message_broker import MessageBroker


class FleetRegistry:
    """
    Collection of all elevators, indexed by integer id (0..num_elevators-1).

    The simulation runs on a single SimPy thread of control, so each update()
    call is one uninterrupted read-modify-write of one record.
    """

    def __init__(self, env: simpy.Environment, num_elevators: int,
                 broker: MessageBroker = None, initial_floors: Optional[List[int]] = None):
        if num_elevators < 1:
            raise ValueError("num_elevators must be at least 1")
        if initial_floors is None:
            initial_floors = [0] * num_elevators
        if len(initial_floors) != num_elevators:
            raise ValueError(f"initial_floors length ({len(initial_floors)}) must match num_elevators ({num_elevators})")

        self.env = env
        self.broker = broker
        self._records: Dict[int, ElevatorRecord] = {
            elevator_id: ElevatorRecord(id=elevator_id, current_floor=floor)
            for elevator_id, floor in enumerate(initial_floors)
        }

    def __len__(self):
        return len(self._records)

    def snapshot(self) -> Tuple[ElevatorRecord, ...]:
        """All records in id order. Records are frozen, so the tuple is immutable."""
        return tuple(self._records[elevator_id] for elevator_id in sorted(self._records))

    def idle(self) -> List[ElevatorRecord]:
        """Records of elevators that are not moving, in id order"""
        return [record for record in self.snapshot() if record.is_idle]

    def get(self, elevator_id: int) -> ElevatorRecord:
        if elevator_id not in self._records:
            raise ValueError(f"Unknown elevator id {elevator_id}")
        return self._records[elevator_id]

    def idle_at(self, floor: int) -> Optional[ElevatorRecord]:
        """First idle elevator parked at ``floor``, if any"""
        for record in self.idle():
            if record.current_floor == floor:
                return record
        return None

    def update(self, elevator_id: int,
               mutator: Callable[[ElevatorRecord], ElevatorRecord]) -> ElevatorRecord:
        """
        Replace one elevator's record with ``mutator(current_record)``.

        Args:
            elevator_id: Target elevator
            mutator: Pure function returning the new record

        Returns:
            The stored record

        Raises:
            ValueError: If the id is unknown or the mutator changes the id
        """
        current = self.get(elevator_id)
        updated = mutator(current)
        if updated.id != elevator_id:
            raise ValueError(f"Mutator changed elevator id {elevator_id} -> {updated.id}")
        self._records[elevator_id] = updated

        if updated != current:
            self._report_status(updated)
        return updated

    def _report_status(self, record: ElevatorRecord):
        if self.broker is None:
            return
        status_message = record.to_status()
        status_message["timestamp"] = self.env.now
        self.broker.put(f"elevator/{record.id}/status", status_message)
