"""
Allocation Strategy Interface

Defines how an elevator is chosen for a floor call.
"""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from simulator.core.elevator import ElevatorRecord


class IAllocationStrategy(ABC):
    """
    Interface for elevator allocation strategies

    A strategy only chooses; it never mutates the fleet. Returning None is
    the normal "fleet saturated" answer and sends the call to the pending
    request queue.
    """

    @abstractmethod
    def select_elevator(
        self,
        floor: int,
        idle_elevators: Sequence[ElevatorRecord]
    ) -> Optional[ElevatorRecord]:
        """
        Select the best elevator for a call at ``floor``

        Args:
            floor: Floor where the call was made
            idle_elevators: Candidate (not moving) elevators in id order

        Returns:
            ElevatorRecord of the chosen elevator, or None if no candidate
        """
        pass

    @abstractmethod
    def get_strategy_name(self) -> str:
        """
        Get the name of this strategy (for logging)
        """
        pass
