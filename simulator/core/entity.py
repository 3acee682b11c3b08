import simpy
from abc import ABC, abstractmethod
import itertools


class Entity(ABC):
    """
    Abstract base class for timed actors in the SimPy simulation.

    The constructor registers run() as a SimPy process, so an entity starts
    acting as soon as it exists. Subclasses describe their lifecycle with
    string states and move between them via set_state().
    """
    _entity_id_counter = itertools.count()

    def __init__(self, env: simpy.Environment, name: str = None):
        """
        Args:
            env: The SimPy simulation environment this entity belongs to.
            name: Entity name. Auto-generated from class name and ID when omitted.
        """
        self.env = env
        self.entity_id: int = next(self._entity_id_counter)
        self.name: str = name if name is not None else f"{self.__class__.__name__}_{self.entity_id}"

        # Concrete classes override this before or right after construction
        self.state: str = "initial_state"

        self._process = self.env.process(self.run())

    @abstractmethod
    def run(self):
        """
        Generator serving as the main SimPy process body of the entity.

        Use ``yield self.env.timeout(...)`` to advance simulation time.
        """
        pass

    def set_state(self, new_state: str):
        """
        Transition the entity's state.

        Args:
            new_state: Target state
        """
        if self.state != new_state:
            old_state = self.state
            self.state = new_state
            self._on_state_changed(old_state, new_state)

    def get_state(self) -> str:
        return self.state

    def _on_state_changed(self, old_state: str, new_state: str):
        """Hook called after every state transition. Logs by default."""
        print(f"{self.env.now:.2f} [{self.name}] {old_state} -> {new_state}")

    @property
    def process(self) -> simpy.Process:
        """
        The SimPy process running run(); can be awaited or interrupted.
        """
        return self._process
