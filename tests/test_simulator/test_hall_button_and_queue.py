"""
Hall button and pending request queue tests
"""

import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

import simpy

from simulator.core.hall_button import HallButton
from simulator.core.request_queue import PendingRequestQueue
from simulator.infrastructure.message_broker import MessageBroker


def test_press_is_idempotent_until_reset():
    env = simpy.Environment()
    button = HallButton(env, 3)

    assert button.is_enabled()
    assert button.press() is True
    assert button.waiting
    assert button.press() is False

    button.mark_arrived(elevator_id=0)
    assert button.arrived and button.waiting
    assert not button.is_enabled()

    button.reset()
    assert not button.waiting
    assert not button.arrived
    assert button.press() is True


def test_button_publishes_arrival_and_reset():
    env = simpy.Environment()
    broker = MessageBroker(env, verbose=False)
    pipe = broker.get_broadcast_pipe()
    button = HallButton(env, 6, broker)

    button.press()
    button.mark_arrived(elevator_id=2)
    button.reset()

    topics = [item['topic'] for item in pipe.items]
    assert topics == ["floor/6/arrived", "floor/6/reset"]
    assert pipe.items[0]['message']['elevator_id'] == 2


def test_queue_is_fifo_and_deduplicates():
    env = simpy.Environment()
    queue = PendingRequestQueue(env)

    assert queue.push(4) is True
    assert queue.push(1) is True
    assert queue.push(4) is False
    assert queue.items() == [4, 1]
    assert 1 in queue

    assert queue.pop() == 4
    assert queue.pop() == 1
    assert queue.pop() is None
    assert len(queue) == 0


def test_queue_notifies_observers_on_change_only():
    env = simpy.Environment()
    queue = PendingRequestQueue(env)
    seen = []
    queue.subscribe(lambda: seen.append(queue.items()))

    queue.push(2)
    queue.push(2)  # duplicate, no change
    queue.push(5)
    queue.pop()
    queue.pop()
    queue.pop()  # empty, no change

    assert seen == [[2], [2, 5], [5], []]
