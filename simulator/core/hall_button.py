import simpy

from ..infrastructure.message_broker import MessageBroker


class HallButton:
    """
    Call button of one floor, holding the floor's waiting/arrived lamps.

    A floor can carry at most one request: once pressed the button stays
    disabled until reset() runs after an elevator has arrived.
    """
    def __init__(self, env: simpy.Environment, floor: int, broker: MessageBroker = None):
        """
        Args:
            env (simpy.Environment): SimPy environment
            floor (int): Floor where the button is installed
            broker (MessageBroker): Message broker for arrival/reset notifications
        """
        self.env = env
        self.floor = floor
        self.broker = broker
        self.waiting = False
        self.arrived = False

    def is_lit(self):
        """Check if the floor currently has a request in progress"""
        return self.waiting or self.arrived

    def is_enabled(self):
        return not self.is_lit()

    def press(self):
        """
        Register a call at this floor.

        Returns:
            bool: True if newly registered, False if already lit
        """
        if self.is_lit():
            print(f"{self.env.now:.2f} [HallButton] Floor {self.floor} already lit. Press ignored.")
            return False
        self.waiting = True
        print(f"{self.env.now:.2f} [HallButton] Button pressed at floor {self.floor}. Waiting.")
        return True

    def mark_arrived(self, elevator_id=None):
        """Turn on the arrival lamp"""
        self.arrived = True
        print(f"{self.env.now:.2f} [HallButton] Floor {self.floor} marked as arrived.")
        if self.broker:
            self.broker.put(f"floor/{self.floor}/arrived", {
                "timestamp": self.env.now,
                "floor": self.floor,
                "elevator_id": elevator_id,
            })

    def reset(self):
        """Clear both lamps, re-enabling calls for this floor"""
        self.waiting = False
        self.arrived = False
        print(f"{self.env.now:.2f} [HallButton] Resetting states for floor {self.floor}.")
        if self.broker:
            self.broker.put(f"floor/{self.floor}/reset", {
                "timestamp": self.env.now,
                "floor": self.floor,
            })
