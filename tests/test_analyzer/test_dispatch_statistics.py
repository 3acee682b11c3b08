"""
Dispatch statistics tests, including a full run through the runner
"""

import json
import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

import pytest
import simpy

from analyzer.statistics import DispatchStatistics
from config import BuildingConfig, ElevatorConfig, SimulationConfig, TrafficConfig
from controller import DispatchController
from main import run_simulation
from simulator.infrastructure.message_broker import MessageBroker


def test_service_times_and_trip_counts():
    env = simpy.Environment()
    broker = MessageBroker(env, verbose=False)
    statistics = DispatchStatistics(env, broker.get_broadcast_pipe())
    env.process(statistics.start_listening())
    config = SimulationConfig(elevator=ElevatorConfig(num_elevators=2, initial_floors=[0, 5]))
    controller = DispatchController(env, broker, config)

    controller.call_elevator(3)   # car 1, 2 seconds
    controller.call_elevator(9)   # car 0, 9 seconds
    controller.call_elevator(3)   # duplicate
    env.run(until=15)

    summary = statistics.get_summary()
    assert summary["accepted_calls"] == 2
    assert summary["rejected_calls"] == 1
    assert summary["served_calls"] == 2
    assert summary["open_calls"] == 0
    assert summary["trips_per_elevator"] == {0: 1, 1: 1}
    assert summary["service_time_mean"] == pytest.approx(5.5)
    assert summary["service_time_max"] == pytest.approx(9.0)
    assert [entry["data"]["current_floor"] for entry in statistics.event_log
            if entry["type"] == "elevator_status" and entry["data"]["id"] == 1][-1] == 3


def test_queued_calls_are_counted_once():
    env = simpy.Environment()
    broker = MessageBroker(env, verbose=False)
    statistics = DispatchStatistics(env, broker.get_broadcast_pipe())
    env.process(statistics.start_listening())
    controller = DispatchController(env, broker, SimulationConfig(elevator=ElevatorConfig(num_elevators=1)))

    controller.call_elevator(4)
    controller.call_elevator(2)
    env.run(until=20)

    summary = statistics.get_summary()
    assert summary["queued_calls"] == 1
    assert summary["requeued_calls"] == 1
    assert summary["served_calls"] == 2
    # 4s to floor 4, reset at 6, then 2s back down to floor 2
    assert sorted(service for _, _, service in statistics.service_times) == [4.0, 8.0]


def test_empty_summary_has_no_service_times():
    env = simpy.Environment()
    statistics = DispatchStatistics(env, simpy.Store(env))
    summary = statistics.get_summary()
    assert summary["served_calls"] == 0
    assert summary["service_time_mean"] is None


def test_run_simulation_with_scripted_calls(tmp_path):
    config = SimulationConfig(
        building=BuildingConfig(num_floors=10),
        elevator=ElevatorConfig(num_elevators=1),
        traffic=TrafficConfig(
            simulation_duration=40.0,
            calls=[
                {'time': 0.0, 'floor': 5},
                {'time': 1.0, 'floor': 2},
                {'time': 1.0, 'floor': 8},
            ]
        ),
        verbose=False
    )
    log_path = tmp_path / "dispatch_log.jsonl"

    controller, statistics = run_simulation(config, event_log_path=str(log_path))

    assert statistics.get_summary()["served_calls"] == 3
    assert controller.pending == []
    assert controller.elevators[0].current_floor == 8

    lines = log_path.read_text(encoding='utf-8').splitlines()
    assert json.loads(lines[0])["type"] == "metadata"
    event_types = {json.loads(line)["type"] for line in lines[1:]}
    assert {"call", "call_queued", "trip_started", "arrived", "floor_reset"} <= event_types


def test_random_traffic_is_reproducible():
    def run_once():
        config = SimulationConfig(
            traffic=TrafficConfig(simulation_duration=60.0, call_generation_rate=0.5),
            random_seed=11,
            verbose=False
        )
        _, statistics = run_simulation(config)
        return statistics.get_summary()

    first = run_once()
    second = run_once()
    assert first == second
    assert first["accepted_calls"] > 0


def test_run_simulation_rejects_float_scripted_floor():
    config = SimulationConfig.from_dict({'traffic': {'calls': [{'time': 1, 'floor': 5.0}]}, 'verbose': False})

    with pytest.raises(ValueError, match="traffic.calls floor 5.0"):
        run_simulation(config)
