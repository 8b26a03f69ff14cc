"""
Schemas - Transition Outcome Models

This module defines the tagged result of one transition attempt. Rejected
transitions are reported as values, never raised across the plugin boundary,
so a caller that can only read returned text can react to every failure mode.
"""
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field

class OutcomeStatus(str, Enum):
    """
    What happened to a single Transition / FireTrigger / CanFireTrigger request.

    SUCCESS: The trigger fired; the machine is now in `new_state`.
    PERMITTED: Dry run only: the trigger could fire from the current state.
    GUARD_REJECTED: The trigger is known but not permitted from the current state.
    UNKNOWN_TRIGGER: The name did not resolve to any known trigger.
    EMPTY_INPUT: No trigger name was given.
    ENGINE_REJECTED: An unguarded fire was refused by the engine itself.
    """
    SUCCESS = "SUCCESS"
    PERMITTED = "PERMITTED"
    GUARD_REJECTED = "GUARD_REJECTED"
    UNKNOWN_TRIGGER = "UNKNOWN_TRIGGER"
    EMPTY_INPUT = "EMPTY_INPUT"
    ENGINE_REJECTED = "ENGINE_REJECTED"

class TransitionOutcome(BaseModel):
    """
    Ephemeral result of one attempt. Built per call, rendered to text by the
    description layer, never retained.
    """
    status: OutcomeStatus
    attempted_name: Optional[str] = Field(
        None,
        description="The raw trigger name the caller supplied."
    )
    trigger: Optional[str] = Field(
        None,
        description="Rendered name of the resolved trigger."
    )
    current_state: Optional[str] = Field(
        None,
        description="State the machine was in when the request was rejected or checked."
    )
    new_state: Optional[str] = Field(
        None,
        description="State the machine reached after a successful fire."
    )
    forced: bool = Field(
        False,
        description="True when the fire skipped the permitted-trigger pre-check."
    )
    permitted_triggers: List[str] = Field(default_factory=list)
    known_triggers: List[str] = Field(default_factory=list)
    detail: Optional[str] = Field(
        None,
        description="The engine's own rejection message, reported verbatim."
    )

    @property
    def succeeded(self) -> bool:
        return self.status in (OutcomeStatus.SUCCESS, OutcomeStatus.PERMITTED)
