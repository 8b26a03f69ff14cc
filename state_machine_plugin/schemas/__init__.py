"""
Schemas - Structured Outcome Models

Defines the Pydantic models that carry transition results from the invoker to
the plugin facade before they are rendered as text.
"""

from state_machine_plugin.schemas.outcomes import OutcomeStatus, TransitionOutcome

__all__ = [
    "OutcomeStatus",
    "TransitionOutcome",
]
