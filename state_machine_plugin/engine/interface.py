from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, List, Optional, Type

from ..domain.models import GraphDescriptor


class StateMachineEngine(ABC):
    """
    Abstract Base Class interface that defines the contract any transition engine
    (pytransitions, a hand-written machine, a remote workflow service, etc.)
    must satisfy to be driven by the plugin.

    The plugin only references the engine; it never creates, copies or owns it.
    """

    @property
    @abstractmethod
    def current_state(self) -> Any:
        """The engine's current state value."""
        pass

    @property
    def trigger_type(self) -> Optional[Type[Enum]]:
        """
        The closed enumeration all trigger values belong to, or None when
        triggers are open-ended tokens or objects.
        """
        return None

    @abstractmethod
    def permitted_triggers(self) -> List[Any]:
        """
        Triggers that can be fired from the current state right now, guards evaluated.
        """
        pass

    @abstractmethod
    def can_fire(self, trigger: Any) -> bool:
        """
        Whether the trigger is permitted from the current state. Must not mutate.
        """
        pass

    @abstractmethod
    async def fire(self, trigger: Any) -> None:
        """
        Fires the trigger, running exit/entry actions.
        Raises EngineRejectionError if the transition cannot be taken.
        """
        pass

    @abstractmethod
    def get_info(self) -> GraphDescriptor:
        """
        A fresh structural snapshot: states, initial state and outgoing transitions.
        """
        pass
