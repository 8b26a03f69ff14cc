"""
Shared fixtures: real pytransitions machines wrapped in TransitionsEngine, plus
a small in-test engine whose triggers carry annotated names ("Go (to B)").
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List

import pytest
from transitions import Machine

from state_machine_plugin import (
    EngineRejectionError,
    GraphDescriptor,
    PluginRegistry,
    StateInfo,
    StateMachineEngine,
    StateMachinePlugin,
    TransitionInfo,
    TransitionsEngine,
)


class SimpleState(Enum):
    A = "a"
    B = "b"
    C = "c"


class SimpleTrigger(Enum):
    Go = "go"
    Back = "back"
    Reset = "reset"


class LightState(Enum):
    Off = 0
    On = 1
    Blinking = 2
    Broken = 3


class Door:
    """Model for a guarded machine: unlocking needs a key."""

    def __init__(self):
        self.has_key = False
        self.jammed = False

    def key_present(self):
        return self.has_key

    def is_jammed(self):
        return self.jammed


def build_simple_machine(initial: SimpleState = SimpleState.A) -> Machine:
    return Machine(
        states=SimpleState,
        transitions=[
            {"trigger": "Go", "source": SimpleState.A, "dest": SimpleState.B},
            {"trigger": "Back", "source": SimpleState.B, "dest": SimpleState.A},
        ],
        initial=initial,
        auto_transitions=False,
    )


@pytest.fixture
def simple_engine() -> TransitionsEngine:
    return TransitionsEngine(build_simple_machine(), trigger_type=SimpleTrigger)


@pytest.fixture
def simple_plugin(simple_engine) -> StateMachinePlugin:
    return StateMachinePlugin(simple_engine)


@pytest.fixture
def light_engine() -> TransitionsEngine:
    machine = Machine(
        states=LightState,
        transitions=[
            {"trigger": "Toggle", "source": LightState.Off, "dest": LightState.On},
            {"trigger": "Toggle", "source": LightState.On, "dest": LightState.Off},
            {"trigger": "StartBlinking", "source": LightState.On, "dest": LightState.Blinking},
            {"trigger": "StopBlinking", "source": LightState.Blinking, "dest": LightState.On},
            {"trigger": "Toggle", "source": LightState.Blinking, "dest": LightState.Off},
            {"trigger": "Fix", "source": LightState.Broken, "dest": LightState.Off},
            {
                "trigger": "PowerOutage",
                "source": [LightState.Off, LightState.On, LightState.Blinking],
                "dest": LightState.Broken,
            },
        ],
        initial=LightState.Off,
        auto_transitions=False,
    )
    return TransitionsEngine(machine)


@pytest.fixture
def door() -> Door:
    return Door()


@pytest.fixture
def door_engine(door) -> TransitionsEngine:
    machine = Machine(
        model=door,
        states=["locked", "closed", "opened"],
        transitions=[
            {"trigger": "unlock", "source": "locked", "dest": "closed", "conditions": "key_present"},
            {"trigger": "push", "source": "closed", "dest": "opened", "unless": "is_jammed"},
            {"trigger": "shut", "source": "opened", "dest": "closed"},
            {"trigger": "lock", "source": "closed", "dest": "locked"},
        ],
        initial="locked",
    )
    return TransitionsEngine(machine, model=door)


@pytest.fixture
def registry() -> PluginRegistry:
    return PluginRegistry()


# =============================================================================
# In-test engine with annotated trigger objects
# =============================================================================

@dataclass(frozen=True)
class Route:
    name: str
    target: str

    def render_name(self) -> str:
        return f"{self.name} (to {self.target})"


class RouteEngine(StateMachineEngine):
    """Minimal engine over a {state: [Route, ...]} table."""

    def __init__(self, routes: Dict[str, List[Route]], initial: str):
        self.routes = routes
        self.state = initial
        self.initial = initial
        self.fired = []

    @property
    def current_state(self):
        return self.state

    def permitted_triggers(self):
        return list(self.routes.get(self.state, []))

    def can_fire(self, trigger) -> bool:
        return trigger in self.routes.get(self.state, [])

    async def fire(self, trigger) -> None:
        if trigger not in self.routes.get(self.state, []):
            raise EngineRejectionError(f"No route '{trigger.name}' from {self.state}")
        self.fired.append(trigger)
        self.state = trigger.target

    def get_info(self) -> GraphDescriptor:
        return GraphDescriptor(
            states=[
                StateInfo(
                    state=state,
                    transitions=[TransitionInfo(trigger=r, destination=r.target) for r in routes],
                )
                for state, routes in self.routes.items()
            ],
            initial_state=self.initial,
        )


@pytest.fixture
def route_engine() -> RouteEngine:
    return RouteEngine(
        routes={
            "A": [Route("Go", "B")],
            "B": [Route("Return", "A"), Route("Jump", "C")],
            "C": [],
        },
        initial="A",
    )
