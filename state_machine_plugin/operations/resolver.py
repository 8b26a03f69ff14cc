"""
Trigger Resolver.

Turns a caller-supplied string into the engine's typed trigger value,
independent of whether triggers are enum members, plain tokens or custom
objects.
"""

import logging
from enum import Enum
from typing import Any, Optional

from ..domain.naming import render_name
from ..engine.interface import StateMachineEngine
from .catalog import build_trigger_catalog

logger = logging.getLogger(__name__)


class TriggerResolver:
    def __init__(self, engine: StateMachineEngine):
        self.engine = engine

    def resolve(self, name: str) -> Optional[Any]:
        """
        Find the trigger matching `name`, case-insensitively. Returns None if not found.

        Resolution order (first match wins):
        1. A member of the closed trigger enumeration with that name.
        2. A catalog entry whose rendered name equals `name`, or whose rendered
           name's first whitespace-delimited token equals it. This accepts "Go"
           for a trigger rendered as "Go (to B)".
        """
        wanted = (name or "").strip().casefold()
        if not wanted:
            return None

        member = self._resolve_enum_member(wanted)
        if member is not None:
            return member

        matches = [
            trigger
            for trigger in build_trigger_catalog(self.engine)
            if self._matches(render_name(trigger), wanted)
        ]
        if not matches:
            return None

        if len(matches) > 1:
            # Leading tokens of trigger names should be unique; the first one wins.
            logger.warning(
                f"Trigger name '{name}' is ambiguous, it matches "
                f"{[render_name(t) for t in matches]}. Using '{render_name(matches[0])}'."
            )
        return matches[0]

    def _resolve_enum_member(self, wanted: str) -> Optional[Any]:
        trigger_type = self.engine.trigger_type
        if not (isinstance(trigger_type, type) and issubclass(trigger_type, Enum)):
            return None
        for member_name, member in trigger_type.__members__.items():
            if member_name.casefold() == wanted:
                return member
        return None

    @staticmethod
    def _matches(rendered: str, wanted: str) -> bool:
        if rendered.casefold() == wanted:
            return True
        tokens = rendered.split()
        return bool(tokens) and tokens[0].casefold() == wanted
