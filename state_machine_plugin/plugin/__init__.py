"""
Plugin Layer - Adapter Facade, Named Registry and Tool Calling

Exposes a state machine as named, string-in / string-out operations, keeps
named plugin instances, and bridges them to OpenAI function calling.
"""

from state_machine_plugin.plugin.facade import StateMachinePlugin
from state_machine_plugin.plugin.functions import PluginFunctionMetadata, plugin_function
from state_machine_plugin.plugin.registry import PluginRegistry
from state_machine_plugin.plugin.tools import invoke_tool_call, to_openai_tools

__all__ = [
    "StateMachinePlugin",
    "PluginFunctionMetadata",
    "plugin_function",
    "PluginRegistry",
    "invoke_tool_call",
    "to_openai_tools",
]
