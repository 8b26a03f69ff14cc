"""
Plugin Exceptions

ConfigurationError is the only error that reaches calling code: it signals a
setup mistake (missing plugin, empty identifier). EngineRejectionError is raised
by engines and is turned into a returned message by the transition invoker.
"""


class StateMachinePluginError(Exception):
    """Base class for every error raised by this package."""
    pass


class ConfigurationError(StateMachinePluginError, ValueError):
    """Raised when a plugin name is empty or no plugin is registered under it."""
    pass


class EngineRejectionError(StateMachinePluginError):
    """
    Raised by an engine when fire() cannot take a transition, e.g. because no
    transition is configured for the trigger from the current state.
    The message is the engine's own detail and is reported verbatim.
    """
    pass
