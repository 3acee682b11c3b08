"""
Simulation Configuration

Building and fleet dimensions, travel timing and the call traffic fed into
the dispatch controller.
"""

from dataclasses import dataclass, field
from typing import Dict, Any, List, Optional

from .dispatch import DispatchConfig


def is_floor_index(value, num_floors: int) -> bool:
    """True for a plain int (not bool) in 0..num_floors-1"""
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return 0 <= value < num_floors


@dataclass
class BuildingConfig:
    """Building specifications (floors are numbered 0..num_floors-1)"""
    num_floors: int = 10

    def __post_init__(self):
        if self.num_floors < 2:
            raise ValueError("num_floors must be at least 2")


@dataclass
class ElevatorConfig:
    """Fleet specifications"""
    num_elevators: int = 6
    seconds_per_floor: float = 1.0
    initial_floors: Optional[List[int]] = None  # Start floor per elevator (None = all at 0)

    def __post_init__(self):
        if self.num_elevators < 1:
            raise ValueError("num_elevators must be at least 1")
        if self.seconds_per_floor <= 0:
            raise ValueError("seconds_per_floor must be positive")

        if self.initial_floors is not None:
            if len(self.initial_floors) != self.num_elevators:
                raise ValueError(f"initial_floors list length ({len(self.initial_floors)}) must match num_elevators ({self.num_elevators})")


@dataclass
class TrafficConfig:
    """Call traffic configuration"""
    simulation_duration: float = 60.0  # seconds
    call_generation_rate: float = 0.0  # random calls per second (0 = scripted calls only)
    calls: Optional[List[Dict[str, Any]]] = None  # Scripted calls: [{'time': float, 'floor': int}]

    def __post_init__(self):
        if self.simulation_duration <= 0:
            raise ValueError("simulation_duration must be positive")
        if self.call_generation_rate < 0:
            raise ValueError("call_generation_rate cannot be negative")

        if self.calls is not None:
            for call in self.calls:
                if 'time' not in call or 'floor' not in call:
                    raise ValueError(f"Scripted call {call} must define 'time' and 'floor'")
                if call['time'] < 0:
                    raise ValueError(f"Scripted call time cannot be negative: {call}")


@dataclass
class SimulationConfig:
    """
    Complete simulation configuration

    Combines building, fleet, dispatch and traffic settings. Defaults give
    the reference setup: 10 floors, 6 elevators, 1 second per floor and a
    2 second reset after arrival.
    """
    building: BuildingConfig = field(default_factory=BuildingConfig)
    elevator: ElevatorConfig = field(default_factory=ElevatorConfig)
    dispatch: DispatchConfig = field(default_factory=DispatchConfig)
    traffic: TrafficConfig = field(default_factory=TrafficConfig)

    # Simulation control
    random_seed: Optional[int] = None
    realtime_factor: float = 0.0  # 0.0 = as fast as possible, 1.0 = realtime
    verbose: bool = True

    def __post_init__(self):
        if self.realtime_factor < 0:
            raise ValueError("realtime_factor cannot be negative")

    @classmethod
    def from_dict(cls, data: dict) -> 'SimulationConfig':
        """Create SimulationConfig from dictionary"""
        sim_data = data.get('simulation', data)

        building_data = sim_data.get('building', {})
        building = BuildingConfig(
            num_floors=building_data.get('num_floors', 10)
        )

        elevator_data = sim_data.get('elevator', {})
        elevator = ElevatorConfig(
            num_elevators=elevator_data.get('num_elevators', 6),
            seconds_per_floor=elevator_data.get('seconds_per_floor', 1.0),
            initial_floors=elevator_data.get('initial_floors')
        )

        dispatch = DispatchConfig.from_dict(sim_data.get('dispatch', {}))

        traffic_data = sim_data.get('traffic', {})
        traffic = TrafficConfig(
            simulation_duration=traffic_data.get('simulation_duration', 60.0),
            call_generation_rate=traffic_data.get('call_generation_rate', 0.0),
            calls=traffic_data.get('calls')
        )

        return cls(
            building=building,
            elevator=elevator,
            dispatch=dispatch,
            traffic=traffic,
            random_seed=sim_data.get('random_seed'),
            realtime_factor=sim_data.get('realtime_factor', 0.0),
            verbose=sim_data.get('verbose', True)
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization"""
        result = {
            'simulation': {
                'building': {
                    'num_floors': self.building.num_floors
                },
                'elevator': {
                    'num_elevators': self.elevator.num_elevators,
                    'seconds_per_floor': self.elevator.seconds_per_floor
                },
                'dispatch': self.dispatch.to_dict(),
                'traffic': {
                    'simulation_duration': self.traffic.simulation_duration,
                    'call_generation_rate': self.traffic.call_generation_rate
                },
                'realtime_factor': self.realtime_factor,
                'verbose': self.verbose
            }
        }

        if self.elevator.initial_floors is not None:
            result['simulation']['elevator']['initial_floors'] = list(self.elevator.initial_floors)
        if self.traffic.calls is not None:
            result['simulation']['traffic']['calls'] = [dict(call) for call in self.traffic.calls]
        if self.random_seed is not None:
            result['simulation']['random_seed'] = self.random_seed

        return result

    def validate(self):
        """Validate configuration consistency"""
        num_floors = self.building.num_floors

        if self.elevator.initial_floors is not None:
            for floor in self.elevator.initial_floors:
                if not is_floor_index(floor, num_floors):
                    raise ValueError(f"elevator.initial_floors entry {floor!r} must be an integer between 0 and {num_floors - 1}")

        if self.traffic.calls is not None:
            for call in self.traffic.calls:
                if not is_floor_index(call['floor'], num_floors):
                    raise ValueError(f"traffic.calls floor {call['floor']!r} must be an integer between 0 and {num_floors - 1}")
