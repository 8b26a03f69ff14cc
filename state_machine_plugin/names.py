"""
Operation name constants.

The names under which the plugin's operations are exposed to callers. Pure
constants, shared by the facade and the usage guide.
"""


class FunctionName:
    """Exposed operation names. Use these instead of raw strings."""

    GET_CURRENT_STATE = "GetCurrentState"
    TRANSITION = "Transition"
    FIRE_TRIGGER = "FireTrigger"
    CAN_FIRE_TRIGGER = "CanFireTrigger"
    GET_STATES = "GetStates"
    GET_PERMITTED_TRIGGERS = "GetPermittedTriggers"
    GET_ALL_TRIGGERS = "GetAllTriggers"
    GET_MERMAID_GRAPH = "GetMermaidGraph"
    GET_STATE_MACHINE_DOCUMENTATION = "GetStateMachineDocumentation"
