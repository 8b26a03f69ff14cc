"""
Binding for the pytransitions library.

Wraps a configured `transitions.Machine` and one of its models so the plugin can
drive it. Triggers are the machine's event names, or members of an optional
trigger Enum whose member names match the event names.
"""

import logging
from enum import Enum
from typing import Any, List, Optional, Type

from transitions import Machine, MachineError

from ...domain.models import GraphDescriptor, StateInfo, TransitionInfo
from ...exceptions import EngineRejectionError
from ..interface import StateMachineEngine

logger = logging.getLogger(__name__)


class TransitionsEngine(StateMachineEngine):
    """
    Adapts a synchronous `transitions.Machine`.

    Guards are evaluated through the model's `may_<trigger>` checks, which also
    run any `prepare` callbacks configured on the transition.
    """

    def __init__(
        self,
        machine: Machine,
        model: Any = None,
        trigger_type: Optional[Type[Enum]] = None,
        include_auto_transitions: bool = False,
    ):
        if not machine.models:
            raise ValueError("Machine has no model attached.")
        self.machine = machine
        # Machines created without a model act as their own model
        self.model = model if model is not None else machine.models[0]
        self._trigger_type = trigger_type
        self.include_auto_transitions = include_auto_transitions

    @property
    def current_state(self) -> Any:
        return self.machine.get_model_state(self.model).value

    @property
    def trigger_type(self) -> Optional[Type[Enum]]:
        return self._trigger_type

    def permitted_triggers(self) -> List[Any]:
        state_name = self._current_state_name()
        return [
            self._to_trigger(event_name)
            for event_name in self._event_names()
            if state_name in self.machine.events[event_name].transitions
            and self._may(event_name)
        ]

    def can_fire(self, trigger: Any) -> bool:
        event_name = self._to_event_name(trigger)
        if event_name not in self._event_names():
            return False
        if self._current_state_name() not in self.machine.events[event_name].transitions:
            return False
        return self._may(event_name)

    async def fire(self, trigger: Any) -> None:
        event_name = self._to_event_name(trigger)
        source = self._current_state_name()
        event = self.machine.events.get(event_name)

        if event is None or source not in event.transitions:
            if event is not None:
                # Let the machine report it (honours ignore_invalid_triggers)
                try:
                    event.trigger(self.model)
                except MachineError as e:
                    raise EngineRejectionError(e.value) from e
            raise EngineRejectionError(
                f"No valid leaving transitions are permitted from state '{source}' "
                f"for trigger '{event_name}'."
            )

        try:
            fired = event.trigger(self.model)
        except MachineError as e:
            raise EngineRejectionError(e.value) from e

        if not fired:
            raise EngineRejectionError(
                f"Trigger '{event_name}' is valid for transition from state '{source}' "
                f"but guard conditions are not met."
            )

        logger.debug(f"Fired '{event_name}': {source} -> {self._current_state_name()}")

    def get_info(self) -> GraphDescriptor:
        event_names = self._event_names()
        states = []
        for state_name, state in self.machine.states.items():
            transitions = []
            for event_name in event_names:
                for transition in self.machine.events[event_name].transitions.get(state_name, []):
                    # Internal transitions (dest=None) stay on their source
                    dest_name = transition.dest if transition.dest is not None else state_name
                    transitions.append(
                        TransitionInfo(
                            trigger=self._to_trigger(event_name),
                            destination=self.machine.states[dest_name].value,
                            guards=[self._describe_condition(c) for c in transition.conditions],
                        )
                    )
            states.append(StateInfo(state=state.value, transitions=transitions))

        initial = self.machine.initial
        initial_state = self.machine.states[initial].value if initial in self.machine.states else None
        return GraphDescriptor(states=states, initial_state=initial_state)

    # ==========================================================================
    # Helpers
    # ==========================================================================

    def _current_state_name(self) -> str:
        return self.machine.get_model_state(self.model).name

    def _event_names(self) -> List[str]:
        """Configured event names in declaration order, auto transitions hidden by default."""
        hidden = set()
        if self.machine.auto_transitions and not self.include_auto_transitions:
            hidden = {f"to_{state_name}" for state_name in self.machine.states}
        return [name for name in self.machine.events if name not in hidden]

    def _may(self, event_name: str) -> bool:
        checker = getattr(self.model, f"may_{event_name}", None)
        if checker is None:
            return False
        return bool(checker())

    def _to_trigger(self, event_name: str) -> Any:
        if self._trigger_type is None:
            return event_name
        return self._trigger_type.__members__.get(event_name, event_name)

    @staticmethod
    def _to_event_name(trigger: Any) -> str:
        if isinstance(trigger, Enum):
            return trigger.name
        return str(trigger)

    @staticmethod
    def _describe_condition(condition) -> str:
        func = condition.func
        label = func if isinstance(func, str) else getattr(func, "__name__", repr(func))
        return label if condition.target else f"not {label}"
