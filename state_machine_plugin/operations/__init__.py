"""
Operations Layer - Trigger Resolution, Invocation and Introspection

Turns untyped trigger names into engine trigger values, fires them with
structured outcome reporting, and reports the machine's current shape.
"""

from state_machine_plugin.operations.catalog import build_trigger_catalog
from state_machine_plugin.operations.resolver import TriggerResolver
from state_machine_plugin.operations.introspection import IntrospectionReporter
from state_machine_plugin.operations.invoker import TransitionInvoker

__all__ = [
    "build_trigger_catalog",
    "TriggerResolver",
    "IntrospectionReporter",
    "TransitionInvoker",
]
