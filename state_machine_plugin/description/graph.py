"""
Mermaid rendering of the structural graph.

Nodes are states, edges are configured transitions labeled with their trigger
name (and guard descriptions, if any).
"""

import logging
import re
from typing import Dict, Iterable

from ..domain.models import GraphDescriptor, TransitionInfo
from ..domain.naming import render_name

logger = logging.getLogger(__name__)

MERMAID_HEADER = "stateDiagram-v2"
INDENT = "    "


def build_mermaid_graph(info: GraphDescriptor) -> str:
    """
    Render a `stateDiagram-v2` diagram with one edge statement per declared
    transition, in state order, and no edge for anything undeclared.
    """
    lines = [MERMAID_HEADER]
    node_ids = _assign_node_ids(_node_names(info))

    # Names that are not their own Mermaid identifier get a quoted alias
    for name, node_id in node_ids.items():
        if node_id != name:
            lines.append(f'{INDENT}state "{name}" as {node_id}')

    connected = set()
    edge_count = 0
    for source, transition in info.iter_transitions():
        source_id = node_ids[render_name(source)]
        target_id = node_ids[render_name(transition.destination)]
        connected.update((source_id, target_id))
        lines.append(f"{INDENT}{source_id} --> {target_id} : {_edge_label(transition)}")
        edge_count += 1

    # States without any edge are still nodes
    for state_info in info.states:
        node_id = node_ids[render_name(state_info.state)]
        if node_id not in connected:
            lines.append(f"{INDENT}{node_id}")

    if info.initial_state is not None:
        lines.append(f"{INDENT}[*] --> {node_ids[render_name(info.initial_state)]}")

    logger.debug(f"Rendered Mermaid graph: {len(info.states)} states, {edge_count} transitions")
    return "\n".join(lines)


def _node_names(info: GraphDescriptor) -> Iterable[str]:
    """Declared states first, then any destination or initial state not declared."""
    for state_info in info.states:
        yield render_name(state_info.state)
    for _, transition in info.iter_transitions():
        yield render_name(transition.destination)
    if info.initial_state is not None:
        yield render_name(info.initial_state)


def _assign_node_ids(names: Iterable[str]) -> Dict[str, str]:
    """
    Map each distinct name to a unique identifier. Non-word characters become
    underscores; an identifier already taken gets a numeric suffix.
    """
    node_ids: Dict[str, str] = {}
    taken = set()
    for name in names:
        if name in node_ids:
            continue
        base = re.sub(r"\W", "_", name) or "_"
        node_id = base
        suffix = 2
        while node_id in taken:
            node_id = f"{base}_{suffix}"
            suffix += 1
        taken.add(node_id)
        node_ids[name] = node_id
    return node_ids


def _edge_label(transition: TransitionInfo) -> str:
    label = render_name(transition.trigger)
    if transition.guards:
        label += f" [{', '.join(transition.guards)}]"
    return label
