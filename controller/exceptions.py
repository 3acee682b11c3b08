"""Exceptions raised by the dispatch controller"""


class InvalidFloorError(ValueError):
    """A call named a floor outside the building's range"""

    def __init__(self, floor, num_floors: int):
        # Keep both values in args: SimPy re-raises process errors as type(exc)(*exc.args)
        super().__init__(floor, num_floors)
        self.floor = floor
        self.num_floors = num_floors

    def __str__(self):
        return f"Invalid floor {self.floor!r}: must be an integer between 0 and {self.num_floors - 1}"
