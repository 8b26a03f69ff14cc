from state_machine_plugin.engine.adapters.transitions_adapter import TransitionsEngine

__all__ = ["TransitionsEngine"]
