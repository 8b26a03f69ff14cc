"""
Trigger Catalog.

The set of every trigger the machine knows about, recomputed on every query
because the engine may be reconfigured between calls.
"""

import logging
from enum import Enum
from typing import Any, List

from ..engine.interface import StateMachineEngine

logger = logging.getLogger(__name__)


def build_trigger_catalog(engine: StateMachineEngine) -> List[Any]:
    """
    Collect all known trigger values, de-duplicated, in discovery order.

    1. Every trigger on any transition of the structural graph.
    2. Every member of the trigger enumeration, when the trigger type is a closed Enum.
    3. Only if nothing was found so far: the triggers permitted right now.
    """
    # dict keeps insertion order and drops duplicates
    catalog = {}

    for _, transition in engine.get_info().iter_transitions():
        catalog.setdefault(transition.trigger, None)

    trigger_type = engine.trigger_type
    if isinstance(trigger_type, type) and issubclass(trigger_type, Enum):
        for member in trigger_type:
            catalog.setdefault(member, None)

    if not catalog:
        for trigger in engine.permitted_triggers():
            catalog.setdefault(trigger, None)

    logger.debug(f"Trigger catalog built with {len(catalog)} entries")
    return list(catalog)
