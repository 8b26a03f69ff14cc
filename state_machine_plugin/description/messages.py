"""
Caller-facing messages for transition outcomes.

Every outcome, failures included, becomes plain text that names the current
state and what would have worked, so a caller limited to reading returned
values can recover.
"""

from ..schemas.outcomes import OutcomeStatus, TransitionOutcome

# =============================================================================
# TEMPLATES
# =============================================================================

EMPTY_INPUT = "Error: Trigger name cannot be empty."

UNKNOWN_TRIGGER = "Error: '{name}' is not a valid trigger name. Available triggers: {known}"

GUARD_REJECTED = "Trigger '{trigger}' cannot be executed from state {state}. Permitted triggers: {permitted}"

ENGINE_REJECTED = "Error: Cannot fire trigger '{trigger}' from state {state}. Details: {detail}"

TRANSITIONED = "Trigger '{trigger}' executed, transitioned to state: {state}"

FORCE_FIRED = "Successfully fired trigger '{trigger}', transitioned to state: {state}"

PERMITTED = "Trigger '{trigger}' can be executed from state {state}."

SEPARATOR = ", "


# =============================================================================
# BUILDER FUNCTIONS
# =============================================================================

def render_outcome(outcome: TransitionOutcome) -> str:
    """Render a TransitionOutcome as the text returned to the caller."""
    match outcome.status:
        case OutcomeStatus.EMPTY_INPUT:
            return EMPTY_INPUT
        case OutcomeStatus.UNKNOWN_TRIGGER:
            return UNKNOWN_TRIGGER.format(
                name=outcome.attempted_name,
                known=SEPARATOR.join(outcome.known_triggers),
            )
        case OutcomeStatus.GUARD_REJECTED:
            return GUARD_REJECTED.format(
                trigger=outcome.trigger,
                state=outcome.current_state,
                permitted=SEPARATOR.join(outcome.permitted_triggers),
            )
        case OutcomeStatus.ENGINE_REJECTED:
            return ENGINE_REJECTED.format(
                trigger=outcome.trigger,
                state=outcome.current_state,
                detail=outcome.detail,
            )
        case OutcomeStatus.PERMITTED:
            return PERMITTED.format(trigger=outcome.trigger, state=outcome.current_state)
        case OutcomeStatus.SUCCESS:
            template = FORCE_FIRED if outcome.forced else TRANSITIONED
            return template.format(trigger=outcome.trigger, state=outcome.new_state)
    raise ValueError(f"Unhandled outcome status: {outcome.status}")
