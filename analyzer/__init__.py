"""
Elevator Dispatch Analyzer

Records every message published on the broker and reports dispatch
metrics (service times, queued calls, trips per elevator).
"""

__version__ = "0.1.0"

from .statistics import DispatchStatistics

__all__ = ['DispatchStatistics']
