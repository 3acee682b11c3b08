"""
Nearest Idle Car strategy tests
"""

import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

import pytest

from controller.algorithms import NearestIdleCarStrategy, create_allocation_strategy
from simulator.core.elevator import ElevatorRecord


def idle_car(elevator_id, floor):
    return ElevatorRecord(id=elevator_id, current_floor=floor)


def test_picks_minimal_distance():
    strategy = NearestIdleCarStrategy()
    cars = [idle_car(0, 0), idle_car(1, 5), idle_car(2, 9)]

    assert strategy.select_elevator(3, cars).id == 1
    assert strategy.select_elevator(8, cars).id == 2
    assert strategy.select_elevator(1, cars).id == 0


def test_tie_goes_to_lowest_id():
    strategy = NearestIdleCarStrategy()
    cars = [idle_car(0, 2), idle_car(1, 6)]
    assert strategy.select_elevator(4, cars).id == 0

    # Iteration order of the input does not change the outcome
    assert strategy.select_elevator(4, list(reversed(cars))).id == 0


def test_moving_cars_are_never_candidates():
    strategy = NearestIdleCarStrategy()
    moving = idle_car(0, 4).start_trip(9, 5.0)
    far_idle = idle_car(1, 0)

    assert strategy.select_elevator(4, [moving, far_idle]).id == 1
    assert strategy.select_elevator(4, [moving]) is None


def test_empty_fleet_returns_none():
    assert NearestIdleCarStrategy().select_elevator(3, []) is None


def test_factory_builds_known_strategy():
    assert isinstance(create_allocation_strategy("NearestIdleCar"), NearestIdleCarStrategy)
    with pytest.raises(ValueError):
        create_allocation_strategy("Zoning")
