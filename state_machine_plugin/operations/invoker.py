"""
Transition Invoker.

Wraps the engine's can-fire / fire operations with input validation and
reports every attempt as a TransitionOutcome value.

The invoker holds no lock. At most one in-flight fire per engine is the
caller's responsibility; cancellation raised while awaiting the engine
propagates unchanged.
"""

import logging
from typing import Any, Optional, Tuple

from ..domain.naming import render_name
from ..engine.interface import StateMachineEngine
from ..exceptions import EngineRejectionError
from ..schemas.outcomes import OutcomeStatus, TransitionOutcome
from .introspection import IntrospectionReporter
from .resolver import TriggerResolver

logger = logging.getLogger(__name__)


class TransitionInvoker:
    def __init__(
        self,
        engine: StateMachineEngine,
        resolver: Optional[TriggerResolver] = None,
        reporter: Optional[IntrospectionReporter] = None,
    ):
        self.engine = engine
        self.resolver = resolver or TriggerResolver(engine)
        self.reporter = reporter or IntrospectionReporter(engine)

    async def attempt(self, trigger_name: str) -> TransitionOutcome:
        """
        Guarded fire: only fires when the trigger is permitted from the current state.
        """
        trigger, rejection = self._resolve(trigger_name)
        if rejection:
            return rejection

        if not self.engine.can_fire(trigger):
            return self._guard_rejected(trigger_name, trigger)

        try:
            await self.engine.fire(trigger)
        except EngineRejectionError as e:
            return self._engine_rejected(trigger_name, trigger, e)

        return self._fired(trigger_name, trigger, forced=False)

    async def force(self, trigger_name: str) -> TransitionOutcome:
        """
        Unguarded fire: skips the permitted-trigger check and lets the engine decide.
        """
        trigger, rejection = self._resolve(trigger_name)
        if rejection:
            return rejection

        try:
            await self.engine.fire(trigger)
        except EngineRejectionError as e:
            return self._engine_rejected(trigger_name, trigger, e)

        return self._fired(trigger_name, trigger, forced=True)

    def check(self, trigger_name: str) -> TransitionOutcome:
        """
        Dry run: reports whether the trigger could fire now. Never mutates the engine.
        """
        trigger, rejection = self._resolve(trigger_name)
        if rejection:
            return rejection

        if not self.engine.can_fire(trigger):
            return self._guard_rejected(trigger_name, trigger)

        return TransitionOutcome(
            status=OutcomeStatus.PERMITTED,
            attempted_name=trigger_name,
            trigger=render_name(trigger),
            current_state=self.reporter.current_state_name(),
        )

    # ==========================================================================
    # Outcome Construction
    # ==========================================================================

    def _resolve(self, trigger_name: str) -> Tuple[Any, Optional[TransitionOutcome]]:
        if not trigger_name or not trigger_name.strip():
            logger.warning("Rejected request with an empty trigger name")
            return None, TransitionOutcome(status=OutcomeStatus.EMPTY_INPUT)

        trigger = self.resolver.resolve(trigger_name)
        if trigger is None:
            logger.warning(f"Unknown trigger name '{trigger_name}'")
            return None, TransitionOutcome(
                status=OutcomeStatus.UNKNOWN_TRIGGER,
                attempted_name=trigger_name,
                known_triggers=self.reporter.list_all_triggers(),
            )
        return trigger, None

    def _guard_rejected(self, trigger_name: str, trigger: Any) -> TransitionOutcome:
        current_state = self.reporter.current_state_name()
        logger.warning(f"Trigger '{render_name(trigger)}' not permitted from state {current_state}")
        return TransitionOutcome(
            status=OutcomeStatus.GUARD_REJECTED,
            attempted_name=trigger_name,
            trigger=render_name(trigger),
            current_state=current_state,
            permitted_triggers=self.reporter.list_permitted_triggers(),
        )

    def _engine_rejected(
        self, trigger_name: str, trigger: Any, error: EngineRejectionError
    ) -> TransitionOutcome:
        current_state = self.reporter.current_state_name()
        logger.warning(f"Engine rejected trigger '{render_name(trigger)}' from state {current_state}: {error}")
        return TransitionOutcome(
            status=OutcomeStatus.ENGINE_REJECTED,
            attempted_name=trigger_name,
            trigger=render_name(trigger),
            current_state=current_state,
            permitted_triggers=self.reporter.list_permitted_triggers(),
            detail=str(error),
        )

    def _fired(self, trigger_name: str, trigger: Any, forced: bool) -> TransitionOutcome:
        new_state = self.reporter.current_state_name()
        logger.info(f"Trigger '{render_name(trigger)}' fired, machine is now in state {new_state}")
        return TransitionOutcome(
            status=OutcomeStatus.SUCCESS,
            attempted_name=trigger_name,
            trigger=render_name(trigger),
            new_state=new_state,
            forced=forced,
        )
