"""
Dispatch Controller Configuration

Control-logic settings: which allocation strategy picks elevators and how
the controller paces floor resets and ETA countdowns.
"""

from dataclasses import dataclass

ALLOCATION_STRATEGIES = ("NearestIdleCar",)


@dataclass
class DispatchConfig:
    """Dispatch controller settings"""
    allocation_strategy: str = "NearestIdleCar"
    reset_delay: float = 2.0  # seconds between arrival and floor reset
    tick_interval: float = 1.0  # seconds between ETA countdown ticks

    def __post_init__(self):
        if not self.allocation_strategy:
            raise ValueError("allocation_strategy cannot be empty")
        if self.allocation_strategy not in ALLOCATION_STRATEGIES:
            raise ValueError(f"Unknown allocation strategy: {self.allocation_strategy}")
        if self.reset_delay < 0:
            raise ValueError("reset_delay cannot be negative")
        if self.tick_interval <= 0:
            raise ValueError("tick_interval must be positive")

    @classmethod
    def from_dict(cls, data: dict) -> 'DispatchConfig':
        """Create DispatchConfig from dictionary"""
        return cls(
            allocation_strategy=data.get('allocation_strategy', 'NearestIdleCar'),
            reset_delay=data.get('reset_delay', 2.0),
            tick_interval=data.get('tick_interval', 1.0)
        )

    def to_dict(self) -> dict:
        return {
            'allocation_strategy': self.allocation_strategy,
            'reset_delay': self.reset_delay,
            'tick_interval': self.tick_interval
        }
