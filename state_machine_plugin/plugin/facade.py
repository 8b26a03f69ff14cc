"""
State Machine Plugin - Adapter Facade

The single entry point a restricted caller (typically an LLM through function
calling) uses to drive and inspect a state machine. Every operation takes and
returns primitive values; every failure except a setup mistake comes back as a
descriptive string.

The facade is stateless glue: all state lives in the referenced engine.
"""

import inspect
import logging
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from pydantic import ValidationError

from ..config import settings
from ..description.generator import DescriptionGenerator
from ..description.messages import render_outcome
from ..engine.interface import StateMachineEngine
from ..exceptions import ConfigurationError
from ..names import FunctionName
from ..operations.introspection import IntrospectionReporter
from ..operations.invoker import TransitionInvoker
from ..operations.resolver import TriggerResolver
from .functions import (
    PLUGIN_FUNCTION_ATTR,
    CanFireTriggerArguments,
    FireTriggerArguments,
    PluginFunctionMetadata,
    TransitionArguments,
    plugin_function,
)

logger = logging.getLogger(__name__)

FunctionResult = Union[str, List[str]]


class StateMachinePlugin:
    def __init__(self, engine: StateMachineEngine, include_graph: Optional[bool] = None):
        if engine is None:
            raise ConfigurationError("A state machine engine is required to build the plugin.")
        self.engine = engine
        self.reporter = IntrospectionReporter(engine)
        self.resolver = TriggerResolver(engine)
        self.invoker = TransitionInvoker(engine, self.resolver, self.reporter)
        self.describer = DescriptionGenerator(engine, self.reporter)
        self.include_graph = (
            settings.INCLUDE_GRAPH_IN_DOCUMENTATION if include_graph is None else include_graph
        )

    # ==========================================================================
    # Exposed Operations
    # ==========================================================================

    @plugin_function(
        FunctionName.GET_CURRENT_STATE,
        "Gets the current state of the state machine.",
    )
    def get_current_state(self) -> str:
        return self.reporter.current_state_name()

    @plugin_function(
        FunctionName.FIRE_TRIGGER,
        "Directly fires the specified trigger to transition the state machine without additional checks.",
        FireTriggerArguments,
    )
    async def fire_trigger(self, trigger_name: str) -> str:
        outcome = await self.invoker.force(trigger_name)
        return render_outcome(outcome)

    @plugin_function(
        FunctionName.TRANSITION,
        "Transitions the state machine to a new state by executing the specified trigger.",
        TransitionArguments,
    )
    async def transition(self, trigger_name: str) -> str:
        outcome = await self.invoker.attempt(trigger_name)
        return render_outcome(outcome)

    @plugin_function(
        FunctionName.CAN_FIRE_TRIGGER,
        "Checks if a specified trigger can be executed from the current state, "
        "without actually performing the transition.",
        CanFireTriggerArguments,
    )
    def can_fire_trigger(self, trigger_name: str) -> str:
        return render_outcome(self.invoker.check(trigger_name))

    @plugin_function(
        FunctionName.GET_STATES,
        "Returns all possible states of the state machine as a list of strings.",
    )
    def get_states(self) -> List[str]:
        return self.reporter.list_states()

    @plugin_function(
        FunctionName.GET_MERMAID_GRAPH,
        "Visualizes the state machine as a Mermaid graph for understanding all possible states and transitions.",
    )
    def get_mermaid_graph(self) -> str:
        return self.describer.render_graph()

    @plugin_function(
        FunctionName.GET_PERMITTED_TRIGGERS,
        "Returns all triggers that are permitted to be executed from the current state.",
    )
    def get_permitted_triggers(self) -> List[str]:
        return self.reporter.list_permitted_triggers()

    @plugin_function(
        FunctionName.GET_ALL_TRIGGERS,
        "Returns all possible triggers defined for the state machine, regardless of the current state.",
    )
    def get_all_triggers(self) -> List[str]:
        return self.reporter.list_all_triggers()

    @plugin_function(
        FunctionName.GET_STATE_MACHINE_DOCUMENTATION,
        "Returns detailed instructions for using this plugin, including available states, "
        "triggers, and usage tips.",
    )
    def get_state_machine_documentation(self) -> str:
        return self.describer.render_usage_guide(include_graph=self.include_graph)

    # ==========================================================================
    # Dispatch by Name
    # ==========================================================================

    @property
    def functions(self) -> Dict[str, Tuple[PluginFunctionMetadata, Callable]]:
        """Exposed operations by name, in declaration order."""
        found = {}
        for cls in reversed(type(self).__mro__):
            for attr_name, attr in vars(cls).items():
                metadata = getattr(attr, PLUGIN_FUNCTION_ATTR, None)
                if metadata is not None:
                    found[metadata.name] = (metadata, getattr(self, attr_name))
        return found

    async def invoke(
        self, function_name: str, arguments: Optional[Dict[str, Any]] = None
    ) -> FunctionResult:
        """
        Invoke an exposed operation by its name with a plain arguments mapping.

        Raises ConfigurationError if no operation has that name; invalid
        arguments are reported as an error string.
        """
        functions = self.functions
        if function_name not in functions:
            raise ConfigurationError(
                f"Function '{function_name}' not found in state machine plugin. "
                f"Available functions: {', '.join(functions)}"
            )
        metadata, method = functions[function_name]

        args = []
        if metadata.arguments is not None:
            try:
                parsed = metadata.arguments.model_validate(arguments or {})
            except ValidationError as e:
                problems = "; ".join(
                    f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
                    for err in e.errors()
                )
                logger.warning(f"Invalid arguments for {function_name}: {problems}")
                return f"Error: Invalid arguments for {function_name}: {problems}"
            args.append(parsed.triggerName)

        logger.debug(f"Invoking {function_name} with {arguments}")
        result = method(*args)
        if inspect.isawaitable(result):
            result = await result
        return result
