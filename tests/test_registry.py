"""
Test suite for the named plugin registry and its settings.

Tests cover:
- Registration, lookup, replacement and removal
- Setup errors
- Convenience calls by plugin name
"""

import pytest

from state_machine_plugin import (
    DEFAULT_PLUGIN_NAME,
    ConfigurationError,
    PluginRegistry,
    StateMachinePlugin,
    TransitionsEngine,
)
from state_machine_plugin.config import Settings

from .conftest import build_simple_machine


class TestRegistration:
    """Tests for adding and looking up plugins."""

    def test_default_name(self, registry, simple_engine):
        plugin = registry.add_state_machine(simple_engine)

        assert registry.default_plugin_name == DEFAULT_PLUGIN_NAME
        assert registry.names == [DEFAULT_PLUGIN_NAME]
        assert registry.get_state_machine_plugin() is plugin

    def test_named_plugins_are_independent(self, registry, simple_engine, light_engine):
        simple = registry.add_state_machine(simple_engine, plugin_name="Simple")
        light = registry.add_state_machine(light_engine, plugin_name="Light")

        assert registry.get_state_machine_plugin("Simple") is simple
        assert registry.get_state_machine_plugin("Light") is light
        assert len(registry) == 2
        assert list(registry) == ["Simple", "Light"]
        assert "Light" in registry

    def test_missing_plugin(self, registry):
        with pytest.raises(ConfigurationError) as exc_info:
            registry.get_state_machine_plugin("Game")

        assert str(exc_info.value) == (
            "StateMachine plugin with name 'Game' not found. "
            "Add it first with PluginRegistry.add_state_machine(engine, plugin_name='Game')."
        )

    def test_configuration_error_is_value_error(self, registry):
        with pytest.raises(ValueError):
            registry.get_state_machine_plugin()

    @pytest.mark.parametrize("name", ["", "   "])
    def test_empty_name(self, registry, simple_engine, name):
        with pytest.raises(ConfigurationError, match="Plugin name cannot be null or empty"):
            registry.add_state_machine(simple_engine, plugin_name=name)
        with pytest.raises(ConfigurationError, match="Plugin name cannot be null or empty"):
            registry.get_state_machine_plugin(name)

    def test_missing_engine(self, registry):
        with pytest.raises(ConfigurationError):
            registry.add_state_machine(None)

    def test_replace(self, registry, simple_engine, light_engine):
        registry.add_state_machine(simple_engine, plugin_name="Game")
        replacement = registry.add_state_machine(light_engine, plugin_name="Game")

        assert registry.get_state_machine_plugin("Game") is replacement
        assert len(registry) == 1

    def test_names_are_stripped(self, registry, simple_engine, light_engine):
        """Surrounding whitespace does not create a separate plugin."""
        registry.add_state_machine(simple_engine, plugin_name=" Game ")
        replacement = registry.add_state_machine(light_engine, plugin_name="Game")

        assert registry.names == ["Game"]
        assert registry.get_state_machine_plugin("  Game") is replacement
        assert " Game " in registry
        assert registry.remove("Game ") is True
        assert len(registry) == 0

    def test_add_plugin(self, registry, simple_engine):
        plugin = StateMachinePlugin(simple_engine, include_graph=False)
        assert registry.add_plugin(plugin, "Game") is plugin
        assert registry.get_state_machine_plugin("Game").include_graph is False

    def test_remove(self, registry, simple_engine):
        registry.add_state_machine(simple_engine, plugin_name="Game")

        assert registry.remove("Game") is True
        assert registry.remove("Game") is False
        assert "Game" not in registry


class TestConvenienceCalls:
    """Tests for invoking operations through the registry."""

    @pytest.mark.asyncio
    async def test_calls_by_name(self, registry):
        registry.add_state_machine(
            TransitionsEngine(build_simple_machine()), plugin_name="Game"
        )

        assert await registry.get_current_state("Game") == "A"
        assert await registry.try_fire_trigger("Back", "Game") == (
            "Trigger 'Back' cannot be executed from state A. Permitted triggers: Go"
        )
        assert await registry.try_fire_trigger("Go", "Game") == (
            "Trigger 'Go' executed, transitioned to state: B"
        )
        assert await registry.fire_trigger("Back", "Game") == (
            "Successfully fired trigger 'Back', transitioned to state: A"
        )
        assert "**Current State**: A" in await registry.get_state_machine_documentation("Game")

    @pytest.mark.asyncio
    async def test_default_plugin(self, registry, simple_engine):
        registry.add_state_machine(simple_engine)
        assert await registry.invoke(None, "GetStates") == ["A", "B", "C"]

    @pytest.mark.asyncio
    async def test_missing_plugin(self, registry):
        with pytest.raises(ConfigurationError):
            await registry.get_current_state("Game")


class TestSettings:
    """Tests for environment configuration."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("STATE_MACHINE_PLUGIN_DEFAULT_PLUGIN_NAME", raising=False)
        config = Settings(_env_file=None)

        assert config.DEFAULT_PLUGIN_NAME == "StateMachinePlugin"
        assert config.INCLUDE_GRAPH_IN_DOCUMENTATION is True
        assert config.TOOL_NAME_SEPARATOR == "-"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("STATE_MACHINE_PLUGIN_DEFAULT_PLUGIN_NAME", "Game")
        monkeypatch.setenv("STATE_MACHINE_PLUGIN_INCLUDE_GRAPH_IN_DOCUMENTATION", "false")
        config = Settings(_env_file=None)

        assert config.DEFAULT_PLUGIN_NAME == "Game"
        assert config.INCLUDE_GRAPH_IN_DOCUMENTATION is False

    def test_registry_takes_explicit_default(self, simple_engine):
        registry = PluginRegistry(default_plugin_name="Game")
        plugin = registry.add_state_machine(simple_engine)
        assert registry.get_state_machine_plugin("Game") is plugin
