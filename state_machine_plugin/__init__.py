"""
State Machine Plugin

Lets an external controller, typically an LLM agent, drive and introspect a
finite-state machine through named, string-based operations: trigger name
resolution, guarded and forced transitions, and machine descriptions
(states, permitted triggers, Mermaid graph, usage guide).
"""

from state_machine_plugin.config import DEFAULT_PLUGIN_NAME
from state_machine_plugin.domain import (
    GraphDescriptor,
    NamedValue,
    StateInfo,
    TransitionInfo,
    render_name,
)
from state_machine_plugin.engine import StateMachineEngine, TransitionsEngine
from state_machine_plugin.exceptions import (
    ConfigurationError,
    EngineRejectionError,
    StateMachinePluginError,
)
from state_machine_plugin.names import FunctionName
from state_machine_plugin.schemas import OutcomeStatus, TransitionOutcome
from state_machine_plugin.plugin import (
    PluginRegistry,
    StateMachinePlugin,
    invoke_tool_call,
    to_openai_tools,
)

__all__ = [
    "DEFAULT_PLUGIN_NAME",
    # Domain Layer
    "GraphDescriptor",
    "NamedValue",
    "StateInfo",
    "TransitionInfo",
    "render_name",
    # Engine Layer
    "StateMachineEngine",
    "TransitionsEngine",
    # Errors
    "ConfigurationError",
    "EngineRejectionError",
    "StateMachinePluginError",
    # Schemas
    "FunctionName",
    "OutcomeStatus",
    "TransitionOutcome",
    # Plugin Layer
    "PluginRegistry",
    "StateMachinePlugin",
    "invoke_tool_call",
    "to_openai_tools",
]
