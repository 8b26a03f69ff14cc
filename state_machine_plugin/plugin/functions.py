"""
Plugin function metadata.

Marks facade methods as named, caller-invocable operations and describes their
arguments with Pydantic models, so the same metadata drives both dispatch and
the JSON schemas handed to a function-calling LLM.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Type

from pydantic import BaseModel, Field

PLUGIN_FUNCTION_ATTR = "__plugin_function__"


class TriggerArguments(BaseModel):
    """Arguments shared by every operation that takes a trigger name."""
    triggerName: str = Field(
        ...,
        description="The name of the trigger, Must be a valid trigger name."
    )


class TransitionArguments(TriggerArguments):
    triggerName: str = Field(
        ...,
        description="The name of the trigger to execute, Must be a valid trigger name."
    )


class FireTriggerArguments(TriggerArguments):
    triggerName: str = Field(
        ...,
        description="The name of the trigger to fire directly, Must be a valid trigger name."
    )


class CanFireTriggerArguments(TriggerArguments):
    triggerName: str = Field(
        ...,
        description="The name of the trigger to check, Must be a valid trigger name."
    )


@dataclass(frozen=True)
class PluginFunctionMetadata:
    """
    Attributes:
        name: Exposed operation name (e.g. "Transition").
        description: What the operation does, shown to the caller.
        arguments: Pydantic model of the operation's arguments, None if it takes none.
    """
    name: str
    description: str
    arguments: Optional[Type[TriggerArguments]] = None

    def parameters_schema(self) -> Dict[str, Any]:
        """JSON schema of the arguments object."""
        if self.arguments is None:
            return {"type": "object", "properties": {}}
        return self.arguments.model_json_schema()


def plugin_function(
    name: str, description: str, arguments: Optional[Type[TriggerArguments]] = None
) -> Callable:
    """Decorator exposing a facade method under `name`."""
    def decorator(func: Callable) -> Callable:
        setattr(func, PLUGIN_FUNCTION_ATTR, PluginFunctionMetadata(name, description, arguments))
        return func
    return decorator
