"""
Wall-clock paced SimPy environment.

Used by the runner when ``realtime_factor`` is set, so a human can follow the
dispatch trace as it happens.
"""

import simpy
import time


class RealtimeEnvironment(simpy.Environment):
    """
    simpy.Environment that sleeps between steps to track wall-clock time.

    Args:
        speed_factor (float): simulated seconds per real second
            (1.0 = real time, 2.0 = twice as fast, 0.0 = no pacing)
    """

    def __init__(self, speed_factor=1.0, initial_time=0):
        super().__init__(initial_time=initial_time)
        if speed_factor < 0:
            raise ValueError("speed_factor cannot be negative")
        self.speed_factor = speed_factor
        self._anchor()

    def _anchor(self):
        self.real_start_time = time.monotonic()
        self.sim_start_time = self.now

    def step(self):
        """Process the next event, then sleep until real time catches up."""
        super().step()

        if self.speed_factor > 0:
            target = self.real_start_time + (self.now - self.sim_start_time) / self.speed_factor
            delay = target - time.monotonic()
            if delay > 0:
                time.sleep(delay)

    def set_speed(self, speed_factor):
        """Change the pacing mid-run; timing is re-anchored at the current instant."""
        if speed_factor < 0:
            raise ValueError("speed_factor cannot be negative")
        self.speed_factor = speed_factor
        self._anchor()

    def get_speed(self):
        return self.speed_factor
