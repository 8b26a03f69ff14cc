"""
Plugin Registry - Named State Machine Plugins

Maps string identifiers to state machine plugins so a caller can address one
of several machines by name. Setup mistakes (empty names, missing plugins)
raise ConfigurationError; everything a plugin returns is passed through as is.
"""

import logging
from typing import Any, Dict, Iterator, List, Optional

from ..config import settings
from ..engine.interface import StateMachineEngine
from ..exceptions import ConfigurationError
from ..names import FunctionName
from .facade import FunctionResult, StateMachinePlugin

logger = logging.getLogger(__name__)


class PluginRegistry:
    def __init__(self, default_plugin_name: str = settings.DEFAULT_PLUGIN_NAME):
        self.default_plugin_name = _require_name(default_plugin_name)
        self._plugins: Dict[str, StateMachinePlugin] = {}

    def add_state_machine(
        self,
        engine: StateMachineEngine,
        plugin_name: Optional[str] = None,
        include_graph: Optional[bool] = None,
    ) -> StateMachinePlugin:
        """
        Wraps the engine in a StateMachinePlugin and registers it.
        Re-registering an existing name replaces the previous plugin.
        """
        if engine is None:
            raise ConfigurationError("A state machine engine is required to register a plugin.")
        plugin = StateMachinePlugin(engine, include_graph=include_graph)
        return self.add_plugin(plugin, plugin_name)

    def add_plugin(
        self, plugin: StateMachinePlugin, plugin_name: Optional[str] = None
    ) -> StateMachinePlugin:
        name = self._resolve_name(plugin_name)
        if name in self._plugins:
            logger.info(f"Replacing state machine plugin '{name}'")
        else:
            logger.info(f"Registered state machine plugin '{name}'")
        self._plugins[name] = plugin
        return plugin

    def get_state_machine_plugin(self, plugin_name: Optional[str] = None) -> StateMachinePlugin:
        name = self._resolve_name(plugin_name)
        plugin = self._plugins.get(name)
        if plugin is None:
            raise ConfigurationError(
                f"StateMachine plugin with name '{name}' not found. "
                f"Add it first with PluginRegistry.add_state_machine(engine, plugin_name='{name}')."
            )
        return plugin

    def remove(self, plugin_name: str) -> bool:
        """Removes the named plugin. Returns False if there was nothing to remove."""
        name = _require_name(plugin_name)
        if self._plugins.pop(name, None) is None:
            return False
        logger.info(f"Removed state machine plugin '{name}'")
        return True

    @property
    def names(self) -> List[str]:
        return list(self._plugins)

    def __contains__(self, plugin_name: object) -> bool:
        return isinstance(plugin_name, str) and plugin_name.strip() in self._plugins

    def __len__(self) -> int:
        return len(self._plugins)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._plugins))

    # ==========================================================================
    # Invocation by Name
    # ==========================================================================

    async def invoke(
        self,
        plugin_name: Optional[str],
        function_name: str,
        arguments: Optional[Dict[str, Any]] = None,
    ) -> FunctionResult:
        plugin = self.get_state_machine_plugin(plugin_name)
        return await plugin.invoke(function_name, arguments)

    async def get_current_state(self, plugin_name: Optional[str] = None) -> str:
        return await self.invoke(plugin_name, FunctionName.GET_CURRENT_STATE)

    async def try_fire_trigger(self, trigger_name: str, plugin_name: Optional[str] = None) -> str:
        """Guarded transition through the named plugin."""
        return await self.invoke(
            plugin_name, FunctionName.TRANSITION, {"triggerName": trigger_name}
        )

    async def fire_trigger(self, trigger_name: str, plugin_name: Optional[str] = None) -> str:
        """Unguarded fire through the named plugin."""
        return await self.invoke(
            plugin_name, FunctionName.FIRE_TRIGGER, {"triggerName": trigger_name}
        )

    async def get_state_machine_documentation(self, plugin_name: Optional[str] = None) -> str:
        return await self.invoke(plugin_name, FunctionName.GET_STATE_MACHINE_DOCUMENTATION)

    def _resolve_name(self, plugin_name: Optional[str]) -> str:
        if plugin_name is None:
            return self.default_plugin_name
        return _require_name(plugin_name)


def _require_name(plugin_name: Optional[str]) -> str:
    """Surrounding whitespace is not part of a plugin name."""
    name = (plugin_name or "").strip()
    if not name:
        raise ConfigurationError("Plugin name cannot be null or empty")
    return name
