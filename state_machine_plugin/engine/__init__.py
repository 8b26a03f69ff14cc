"""
Engine Layer - Transition Engine Contract and Bindings

Defines the StateMachineEngine contract the plugin drives, and the binding for
the pytransitions library.
"""

from state_machine_plugin.engine.interface import StateMachineEngine
from state_machine_plugin.engine.adapters.transitions_adapter import TransitionsEngine

__all__ = [
    "StateMachineEngine",
    "TransitionsEngine",
]
