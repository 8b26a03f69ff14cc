"""
Description Generator.

Produces the Mermaid graph and the usage guide a caller (human or agent) reads
to discover the automaton's shape. Both are built from fresh engine queries on
every call.
"""

from typing import Optional

from ..engine.interface import StateMachineEngine
from ..names import FunctionName
from ..operations.introspection import IntrospectionReporter
from .graph import build_mermaid_graph
from .loader import DocumentTemplate, render


class DescriptionGenerator:
    def __init__(self, engine: StateMachineEngine, reporter: Optional[IntrospectionReporter] = None):
        self.engine = engine
        self.reporter = reporter or IntrospectionReporter(engine)

    def render_graph(self) -> str:
        return build_mermaid_graph(self.engine.get_info())

    def render_usage_guide(self, include_graph: bool = True) -> str:
        """
        Instructions naming the Transition, GetCurrentState and FireTrigger
        operations, then the current state, the available states and permitted
        triggers, and optionally the Mermaid graph.
        """
        return render(
            DocumentTemplate.USAGE_GUIDE,
            transition_function=FunctionName.TRANSITION,
            current_state_function=FunctionName.GET_CURRENT_STATE,
            fire_function=FunctionName.FIRE_TRIGGER,
            current_state=self.reporter.current_state_name(),
            states=self.reporter.list_states(),
            permitted_triggers=self.reporter.list_permitted_triggers(),
            graph=self.render_graph() if include_graph else None,
        )
