"""
Domain Layer - Structural Snapshot and Value Naming

Defines the read-only graph snapshot engines expose to the adapter and the
single naming capability used to render states and triggers as text.
"""

from state_machine_plugin.domain.models import (
    GraphDescriptor,
    StateInfo,
    TransitionInfo,
)
from state_machine_plugin.domain.naming import NamedValue, render_name

__all__ = [
    "GraphDescriptor",
    "StateInfo",
    "TransitionInfo",
    "NamedValue",
    "render_name",
]
