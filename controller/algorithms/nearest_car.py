"""
Nearest Idle Car Strategy

Distance-based elevator allocation restricted to idle elevators.
"""

from typing import Optional, Sequence

from simulator.core.elevator import ElevatorRecord
from ..interfaces.allocation_strategy import IAllocationStrategy


class NearestIdleCarStrategy(IAllocationStrategy):
    """
    Nearest idle car allocation strategy

    Selection Logic:
    - Moving elevators are never candidates, however close they are
    - Among idle elevators, pick the one with the smallest floor distance
    - Ties go to the first candidate in fleet order (lowest id)

    Usage:
        strategy = NearestIdleCarStrategy()
        selected = strategy.select_elevator(floor, registry.idle())
    """

    def select_elevator(
        self,
        floor: int,
        idle_elevators: Sequence[ElevatorRecord]
    ) -> Optional[ElevatorRecord]:
        best_elevator = None
        best_distance = float('inf')

        for elevator in sorted(idle_elevators, key=lambda record: record.id):
            if elevator.is_moving:
                continue

            distance = elevator.distance_to(floor)
            # Strict comparison keeps the lowest id on ties
            if distance < best_distance:
                best_distance = distance
                best_elevator = elevator

        return best_elevator

    def get_strategy_name(self) -> str:
        """Return strategy name"""
        return "Nearest Idle Car (Distance-based)"
