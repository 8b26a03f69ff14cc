"""
Introspection Reporter.

Read-only snapshots of the machine rendered as strings. Every call queries the
engine afresh, so results follow the machine as it moves.
"""

from typing import List

from ..domain.naming import render_name
from ..engine.interface import StateMachineEngine
from .catalog import build_trigger_catalog


class IntrospectionReporter:
    def __init__(self, engine: StateMachineEngine):
        self.engine = engine

    def current_state_name(self) -> str:
        return render_name(self.engine.current_state)

    def list_states(self) -> List[str]:
        """All states of the structural graph, in the engine's order."""
        return [render_name(s.state) for s in self.engine.get_info().states]

    def list_permitted_triggers(self) -> List[str]:
        """Triggers permitted from the current state right now."""
        return _unique(render_name(t) for t in self.engine.permitted_triggers())

    def list_all_triggers(self) -> List[str]:
        """
        The whole trigger catalog rendered as names. Always a superset of
        list_permitted_triggers(), even for engines whose graph omits a trigger
        they currently permit.
        """
        names = [render_name(t) for t in build_trigger_catalog(self.engine)]
        return _unique(names + self.list_permitted_triggers())


def _unique(names) -> List[str]:
    return list(dict.fromkeys(names))
