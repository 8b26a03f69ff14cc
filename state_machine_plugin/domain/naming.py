"""
Value naming.

States and triggers are opaque engine values. The adapter only ever needs their
stable string form, which it obtains through one explicit capability instead of
type inspection scattered across the code base.
"""

from enum import Enum
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class NamedValue(Protocol):
    """
    Capability implemented by custom trigger or state objects that want to
    control how they are shown to a caller (e.g. "Go (to B)").
    """

    def render_name(self) -> str:
        ...


def render_name(value: Any) -> str:
    """
    Stable string rendering of a state or trigger value.

    Custom objects render through their own render_name(), enum members render
    as their member name and anything else (plain string tokens included)
    through str().
    """
    if isinstance(value, NamedValue):
        return value.render_name()
    if isinstance(value, Enum):
        return value.name
    return str(value)
