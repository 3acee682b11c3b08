import json
import re
from datetime import datetime

import numpy as np


class DispatchStatistics:
    """
    Independent "recorder" that listens to every broker broadcast.

    Keeps a JSON Lines compatible event log and derives dispatch metrics:
    service time per call (call accepted -> elevator arrived), queued calls,
    rejected calls and trips per elevator.
    """
    def __init__(self, env, broadcast_pipe):
        self.env = env
        self.broadcast_pipe = broadcast_pipe

        self.event_log = []  # [{'time', 'type', 'data'}]
        self.simulation_metadata = {}

        self.call_times = {}  # floor -> time the open call was accepted
        self.service_times = []  # [(floor, call_time, service_time)]
        self.queued_calls = 0
        self.requeued_calls = 0
        self.rejected_calls = 0
        self.accepted_calls = 0
        self.trips_per_elevator = {}  # elevator_id -> trip count

    def set_simulation_metadata(self, metadata):
        """
        Set simulation metadata (written as the first line of the event log).

        Args:
            metadata (dict): Simulation configuration
        """
        self.simulation_metadata = {
            "format_version": "1.0",
            "timestamp": datetime.now().isoformat(),
            "config": metadata
        }

    def _add_event_log(self, event_type, event_data):
        self.event_log.append({
            "time": self.env.now,
            "type": event_type,
            "data": event_data
        })

    def start_listening(self):
        """
        Main process: consume the broadcast pipe forever.
        """
        while True:
            data = yield self.broadcast_pipe.get()
            self.record(data.get('topic', ''), data.get('message', {}))

    def record(self, topic, message):
        """Update metrics from one published message"""
        if topic == 'dispatch/call':
            self.accepted_calls += 1
            self.call_times[message['floor']] = message['timestamp']
            self._add_event_log('call', message)
            return

        if topic == 'dispatch/rejected':
            self.rejected_calls += 1
            self._add_event_log('call_rejected', message)
            return

        if topic == 'dispatch/queued':
            if message.get('from_queue'):
                self.requeued_calls += 1
            else:
                self.queued_calls += 1
            self._add_event_log('call_queued', message)
            return

        if topic == 'dispatch/assigned':
            elevator_id = message['elevator_id']
            self.trips_per_elevator[elevator_id] = self.trips_per_elevator.get(elevator_id, 0) + 1
            self._add_event_log('trip_started', message)
            return

        if re.search(r'elevator/(\d+)/status', topic):
            self._add_event_log('elevator_status', message)
            return

        arrived_match = re.search(r'floor/(\d+)/arrived', topic)
        if arrived_match:
            floor = int(arrived_match.group(1))
            call_time = self.call_times.pop(floor, None)
            if call_time is not None:
                self.service_times.append((floor, call_time, message['timestamp'] - call_time))
            self._add_event_log('arrived', message)
            return

        if re.search(r'floor/(\d+)/reset', topic):
            self._add_event_log('floor_reset', message)

    def get_summary(self) -> dict:
        """Aggregate metrics as a plain dict"""
        durations = np.array([service for _, _, service in self.service_times], dtype=float)
        summary = {
            "accepted_calls": self.accepted_calls,
            "rejected_calls": self.rejected_calls,
            "queued_calls": self.queued_calls,
            "requeued_calls": self.requeued_calls,
            "served_calls": len(self.service_times),
            "open_calls": len(self.call_times),
            "trips_per_elevator": dict(sorted(self.trips_per_elevator.items())),
            "service_time_mean": None,
            "service_time_p95": None,
            "service_time_max": None,
        }
        if durations.size:
            summary["service_time_mean"] = float(np.mean(durations))
            summary["service_time_p95"] = float(np.percentile(durations, 95))
            summary["service_time_max"] = float(np.max(durations))
        return summary

    def print_summary(self):
        summary = self.get_summary()
        print("\n" + "=" * 60)
        print("   DISPATCH SUMMARY")
        print("=" * 60)
        print(f"  Accepted calls:  {summary['accepted_calls']:>6}")
        print(f"  Rejected calls:  {summary['rejected_calls']:>6}")
        print(f"  Queued calls:    {summary['queued_calls']:>6}")
        print(f"  Served calls:    {summary['served_calls']:>6}")
        print(f"  Still open:      {summary['open_calls']:>6}")

        if summary["service_time_mean"] is not None:
            print(f"\nService Time (call to arrival):")
            print(f"  Average: {summary['service_time_mean']:>6.2f} seconds")
            print(f"  P95:     {summary['service_time_p95']:>6.2f} seconds")
            print(f"  Max:     {summary['service_time_max']:>6.2f} seconds")

        if summary["trips_per_elevator"]:
            print(f"\nTrips per elevator:")
            for elevator_id, trips in summary["trips_per_elevator"].items():
                print(f"  Elevator_{elevator_id}: {trips:>4}")
        print("=" * 60)

    def save_event_log(self, filename='dispatch_log.jsonl'):
        """
        Save the event log to a JSON Lines file.

        Args:
            filename (str): Output path
        """
        print(f"\n{self.env.now:.2f} [Stats] Saving event log to {filename}...")

        with open(filename, 'w', encoding='utf-8') as f:
            if self.simulation_metadata:
                f.write(json.dumps({
                    "type": "metadata",
                    "data": self.simulation_metadata
                }) + '\n')

            for event in self.event_log:
                f.write(json.dumps(event, ensure_ascii=False) + '\n')

        print(f"{self.env.now:.2f} [Stats] Event log saved: {len(self.event_log)} events written to {filename}")
        return filename
