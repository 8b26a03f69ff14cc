"""
Description Layer - Graphs, Usage Guides and Outcome Messages

Renders the machine's structure as a Mermaid diagram, composes the usage guide
injected as caller context, and turns transition outcomes into text.
"""

from state_machine_plugin.description.generator import DescriptionGenerator
from state_machine_plugin.description.graph import build_mermaid_graph
from state_machine_plugin.description.messages import render_outcome

__all__ = [
    "DescriptionGenerator",
    "build_mermaid_graph",
    "render_outcome",
]
