import random
import sys

import simpy

# Configuration
from config import SimulationConfig, load_simulation_config

# Simulator components
from simulator.infrastructure.message_broker import MessageBroker
from simulator.infrastructure.realtime_env import RealtimeEnvironment

# Controller
from controller.dispatch_controller import DispatchController

# Analyzer
from analyzer.statistics import DispatchStatistics

DEFAULT_CONFIG_PATH = "scenarios/simulation/reference.yaml"


def run_simulation(config: SimulationConfig = None, event_log_path=None):
    """
    Set up and run the entire simulation

    Args:
        config: Simulation configuration (reference setup if None)
        event_log_path: Optional JSON Lines file for the event log

    Returns:
        (DispatchController, DispatchStatistics) after the run
    """
    if config is None:
        config = SimulationConfig()
    config.validate()

    if config.random_seed is not None:
        random.seed(config.random_seed)
        print(f"Random seed fixed to {config.random_seed} for reproducible results")

    print("\n--- Simulation Setup ---")
    if config.realtime_factor > 0:
        env = RealtimeEnvironment(speed_factor=config.realtime_factor)
        print(f"Realtime pacing enabled (x{config.realtime_factor})")
    else:
        env = simpy.Environment()
    broker = MessageBroker(env, verbose=config.verbose)

    statistics = DispatchStatistics(env, broker.get_broadcast_pipe())
    statistics.set_simulation_metadata(config.to_dict())
    env.process(statistics.start_listening())

    controller = DispatchController(env, broker, config)

    if config.traffic.calls:
        env.process(scripted_calls(env, controller, config.traffic.calls))
    if config.traffic.call_generation_rate > 0:
        env.process(random_call_generator(env, controller, config.traffic.call_generation_rate))

    print("\n--- Simulation Start ---")
    env.run(until=config.traffic.simulation_duration)
    print(f"\n--- Simulation End ({env.now:.2f}s) ---")

    statistics.print_summary()
    if event_log_path:
        statistics.save_event_log(event_log_path)

    return controller, statistics


def scripted_calls(env, controller, calls):
    """Issue the configured calls at their scheduled times"""
    for call in sorted(calls, key=lambda c: c['time']):
        delay = call['time'] - env.now
        if delay > 0:
            yield env.timeout(delay)
        controller.call_elevator(call['floor'])


def random_call_generator(env, controller, generation_rate):
    """
    Continuous call generation with exponential inter-arrival times

    Only floors whose call control is enabled are pressed, like a person
    who sees the button is already lit and walks away.
    """
    print(f"--- Continuous Call Generation (Rate: {generation_rate} calls/sec) ---")
    while True:
        yield env.timeout(random.expovariate(generation_rate))

        floor = random.randrange(controller.num_floors)
        if controller.is_call_enabled(floor):
            controller.call_elevator(floor)
        else:
            print(f"{env.now:.2f} [CallGen] Floor {floor} call control disabled. Skipped.")


def main(argv=None):
    """Command-line entry: main.py [config.yaml] [event_log.jsonl]"""
    argv = sys.argv[1:] if argv is None else argv
    config_path = argv[0] if len(argv) > 0 else DEFAULT_CONFIG_PATH
    event_log_path = argv[1] if len(argv) > 1 else None

    print("--- Loading Configuration ---")
    config = load_simulation_config(config_path)
    print(f"Simulation Config: {config_path}")

    run_simulation(config, event_log_path=event_log_path)
    return 0


if __name__ == '__main__':
    sys.exit(main())
