"""
Elevator car record.

An elevator is never mutated in place: every transition produces a new
ElevatorRecord which the FleetRegistry swaps in as a whole.
"""

from dataclasses import dataclass, replace
from typing import Optional

# Direction values
UP = "UP"
DOWN = "DOWN"
NO_DIRECTION = "NO_DIRECTION"
DIRECTIONS = (UP, DOWN, NO_DIRECTION)


@dataclass(frozen=True)
class ElevatorRecord:
    """
    Snapshot of one car.

    Invariant: is_moving, destination is not None and direction != NO_DIRECTION
    are either all true or all false. remaining_seconds is only set while moving.
    """
    id: int
    current_floor: int = 0
    is_moving: bool = False
    direction: str = NO_DIRECTION
    destination: Optional[int] = None
    remaining_seconds: Optional[float] = None

    def __post_init__(self):
        if self.direction not in DIRECTIONS:
            raise ValueError(f"Invalid direction '{self.direction}' for elevator {self.id}")

        has_destination = self.destination is not None
        has_direction = self.direction != NO_DIRECTION
        if not (self.is_moving == has_destination == has_direction):
            raise ValueError(
                f"Elevator {self.id}: is_moving={self.is_moving}, destination={self.destination}, "
                f"direction={self.direction} are inconsistent"
            )

        if self.remaining_seconds is not None:
            if not self.is_moving:
                raise ValueError(f"Elevator {self.id}: remaining_seconds set on an idle car")
            if self.remaining_seconds < 0:
                raise ValueError(f"Elevator {self.id}: remaining_seconds cannot be negative")

    @property
    def name(self) -> str:
        return f"Elevator_{self.id}"

    @property
    def is_idle(self) -> bool:
        return not self.is_moving

    def distance_to(self, floor: int) -> int:
        return abs(self.current_floor - floor)

    def start_trip(self, floor: int, travel_seconds: float) -> 'ElevatorRecord':
        """Record for a car that has just been dispatched to ``floor``."""
        return replace(
            self,
            is_moving=True,
            direction=UP if floor > self.current_floor else DOWN,
            destination=floor,
            remaining_seconds=travel_seconds,
        )

    def countdown(self, seconds: float) -> 'ElevatorRecord':
        """Record with the ETA reduced by ``seconds``, clamped at zero."""
        if not self.is_moving or not self.remaining_seconds:
            return self
        return replace(self, remaining_seconds=max(0, self.remaining_seconds - seconds))

    def arrive(self) -> 'ElevatorRecord':
        """Record for a car that has reached its destination and is idle there."""
        return replace(
            self,
            current_floor=self.destination,
            is_moving=False,
            direction=NO_DIRECTION,
            destination=None,
            remaining_seconds=None,
        )

    def to_status(self) -> dict:
        """Plain-dict view used for status messages and rendering."""
        return {
            "id": self.id,
            "current_floor": self.current_floor,
            "is_moving": self.is_moving,
            "direction": self.direction,
            "destination": self.destination,
            "remaining_seconds": self.remaining_seconds,
        }
