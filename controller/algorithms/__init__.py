"""Allocation strategy implementations"""

from .nearest_car import NearestIdleCarStrategy

__all__ = ['NearestIdleCarStrategy', 'create_allocation_strategy']


def create_allocation_strategy(name: str):
    """
    Build an allocation strategy from its configured name

    Raises:
        ValueError: If the name is unknown
    """
    if name == "NearestIdleCar":
        return NearestIdleCarStrategy()
    raise ValueError(f"Unknown allocation strategy: {name}")
