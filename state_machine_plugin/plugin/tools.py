"""
OpenAI tool-calling interop.

Exposes a registered plugin's operations as chat-completions tool definitions
and routes the model's tool calls back to the registry. Tool names take the
form "<plugin><separator><function>", e.g. "StateMachinePlugin-Transition".
"""

import json
import logging
from typing import List, Optional, Tuple

from openai.types.chat import (
    ChatCompletionMessageToolCall,
    ChatCompletionToolMessageParam,
    ChatCompletionToolParam,
)

from ..config import settings
from ..exceptions import ConfigurationError
from .registry import PluginRegistry

logger = logging.getLogger(__name__)


def to_openai_tools(
    registry: PluginRegistry, plugin_name: Optional[str] = None
) -> List[ChatCompletionToolParam]:
    """Tool definitions for every operation of the named plugin."""
    plugin = registry.get_state_machine_plugin(plugin_name)
    name = plugin_name or registry.default_plugin_name
    tools = []
    for metadata, _ in plugin.functions.values():
        tools.append({
            "type": "function",
            "function": {
                "name": f"{name}{settings.TOOL_NAME_SEPARATOR}{metadata.name}",
                "description": metadata.description,
                "parameters": metadata.parameters_schema(),
            },
        })
    return tools


def split_tool_name(tool_name: str) -> Tuple[Optional[str], str]:
    """
    Returns (plugin_name, function_name). A bare function name addresses the
    registry's default plugin, signalled by a None plugin name.
    """
    plugin_name, separator, function_name = tool_name.rpartition(settings.TOOL_NAME_SEPARATOR)
    if not separator:
        return None, tool_name
    return plugin_name, function_name


async def invoke_tool_call(
    registry: PluginRegistry, tool_call: ChatCompletionMessageToolCall
) -> ChatCompletionToolMessageParam:
    """
    Execute one tool call and wrap the result as a `role="tool"` message.
    List results are JSON-encoded. Malformed arguments and unknown tool names come
    back as an error string.
    """
    plugin_name, function_name = split_tool_name(tool_call.function.name)

    try:
        arguments = json.loads(tool_call.function.arguments or "{}")
    except json.JSONDecodeError as e:
        logger.warning(f"Tool call {tool_call.id} has malformed arguments: {e}")
        content = f"Error: Tool call arguments are not valid JSON: {e}"
    else:
        if not isinstance(arguments, dict):
            content = "Error: Tool call arguments must be a JSON object."
        else:
            content = await _run(registry, plugin_name, function_name, arguments)

    return {"role": "tool", "tool_call_id": tool_call.id, "content": content}


async def _run(registry: PluginRegistry, plugin_name: Optional[str], function_name: str, arguments) -> str:
    # Tool names come from the model, so an unknown plugin or function is reported back to it
    try:
        result = await registry.invoke(plugin_name, function_name, arguments)
    except ConfigurationError as e:
        logger.warning(f"Tool call rejected: {e}")
        return f"Error: {e}"
    return result if isinstance(result, str) else json.dumps(result)
