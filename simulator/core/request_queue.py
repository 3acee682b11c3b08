"""
Pending Request Queue

FIFO of floors whose calls could not be assigned when they were made.
Observers are notified on every change, which is how the dispatch controller
learns that there is something to drain.
"""

from collections import deque
from typing import Callable, Deque, List, Optional

import simpy


class PendingRequestQueue:
    """
    Ordered, duplicate-free queue of floor numbers.
    """

    def __init__(self, env: simpy.Environment):
        self.env = env
        self._floors: Deque[int] = deque()
        self._observers: List[Callable[[], None]] = []

    def __len__(self):
        return len(self._floors)

    def __contains__(self, floor: int) -> bool:
        return floor in self._floors

    def items(self) -> List[int]:
        """Queued floors, head first"""
        return list(self._floors)

    def subscribe(self, callback: Callable[[], None]):
        """Call ``callback()`` after every push or pop that changes the queue"""
        self._observers.append(callback)

    def push(self, floor: int) -> bool:
        """
        Append a floor unless it is already queued.

        Returns:
            bool: True if the floor was added
        """
        if floor in self._floors:
            print(f"{self.env.now:.2f} [Queue] Floor {floor} already pending. Skipped.")
            return False
        self._floors.append(floor)
        print(f"{self.env.now:.2f} [Queue] Floor {floor} added. Pending: {list(self._floors)}")
        self._notify()
        return True

    def pop(self) -> Optional[int]:
        """Remove and return the head floor, or None when empty"""
        if not self._floors:
            return None
        floor = self._floors.popleft()
        print(f"{self.env.now:.2f} [Queue] Floor {floor} taken. Pending: {list(self._floors)}")
        self._notify()
        return floor

    def _notify(self):
        for callback in list(self._observers):
            callback()
