"""
Domain Layer - Structural Graph Snapshot

This module defines the read-only snapshot of an automaton's shape that every
engine hands to the adapter: the ordered states, the initial state and, per
state, the outgoing transitions with their guard descriptions. The snapshot is
built fresh by the engine on every request and is never cached by the adapter.
"""

from dataclasses import dataclass, field
from typing import Any, Iterator, List, Optional


@dataclass(frozen=True)
class TransitionInfo:
    """
    A single configured edge leaving a state.

    Attributes:
        trigger: The engine's trigger value (enum member, token or custom object).
        destination: The engine's state value the edge leads to. Internal and
            reentrant transitions point back at their own source.
        guards: Human-readable guard descriptions ("has_key", "not is_locked").
    """
    trigger: Any
    destination: Any
    guards: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class StateInfo:
    """
    A state node together with its outgoing transitions, in configuration order.
    """
    state: Any
    transitions: List[TransitionInfo] = field(default_factory=list)


@dataclass(frozen=True)
class GraphDescriptor:
    """
    Structural snapshot of the whole machine.

    Attributes:
        states: Every configured state in the engine's natural order.
        initial_state: The state the machine started in, when the engine knows it.
    """
    states: List[StateInfo] = field(default_factory=list)
    initial_state: Optional[Any] = None

    def iter_transitions(self) -> Iterator[tuple]:
        """Yields (source, transition) pairs across all states, in order."""
        for state_info in self.states:
            for transition in state_info.transitions:
                yield state_info.state, transition
