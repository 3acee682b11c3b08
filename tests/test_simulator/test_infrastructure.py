"""
MessageBroker and RealtimeEnvironment tests
"""

import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

import pytest
import simpy

from simulator.infrastructure.message_broker import MessageBroker
from simulator.infrastructure.realtime_env import RealtimeEnvironment


def test_subscriber_receives_topic_messages():
    env = simpy.Environment()
    broker = MessageBroker(env, verbose=False)
    received = []

    def listener():
        while True:
            message = yield broker.get("floor/3/arrived")
            received.append((env.now, message))

    def publisher():
        yield env.timeout(2)
        broker.put("floor/3/arrived", {"floor": 3})
        broker.put("floor/4/arrived", {"floor": 4})

    env.process(listener())
    env.process(publisher())
    env.run(until=5)

    assert received == [(2, {"floor": 3})]


def test_unsubscribed_topics_only_reach_broadcast():
    env = simpy.Environment()
    broker = MessageBroker(env, verbose=False)
    pipe = broker.get_broadcast_pipe()

    broker.put("dispatch/call", {"floor": 1})

    assert "dispatch/call" not in broker.topics
    assert pipe.items == [{"topic": "dispatch/call", "message": {"floor": 1}}]
    assert broker.get_current_time() == 0


def test_publishing_without_a_recorder_buffers_nothing():
    env = simpy.Environment()
    broker = MessageBroker(env, verbose=False)

    for floor in range(100):
        assert broker.put("dispatch/call", {"floor": floor}) is None

    assert broker.broadcast_pipe is None
    assert broker.topics == {}

    # Only messages published after the pipe is requested are kept
    pipe = broker.get_broadcast_pipe()
    broker.put("dispatch/call", {"floor": 1})
    assert broker.get_broadcast_pipe() is pipe
    assert len(pipe.items) == 1


def test_realtime_environment_runs_and_validates_speed():
    env = RealtimeEnvironment(speed_factor=1000.0)
    ticks = []

    def ticker():
        for _ in range(3):
            yield env.timeout(1)
            ticks.append(env.now)

    env.process(ticker())
    env.run()
    assert ticks == [1, 2, 3]

    env.set_speed(0.0)
    assert env.get_speed() == 0.0
    with pytest.raises(ValueError):
        env.set_speed(-1)
    with pytest.raises(ValueError):
        RealtimeEnvironment(speed_factor=-0.5)
