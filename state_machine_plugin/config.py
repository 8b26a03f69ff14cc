from pydantic_settings import BaseSettings, SettingsConfigDict

# Name used when a single state machine is registered without an explicit name
DEFAULT_PLUGIN_NAME = "StateMachinePlugin"


class Settings(BaseSettings):
    # Registry
    DEFAULT_PLUGIN_NAME: str = DEFAULT_PLUGIN_NAME

    # Documentation
    INCLUDE_GRAPH_IN_DOCUMENTATION: bool = True

    # Tool calling: "<plugin><separator><function>"
    TOOL_NAME_SEPARATOR: str = "-"

    # Loads from a .env file in the root directory, e.g. STATE_MACHINE_PLUGIN_DEFAULT_PLUGIN_NAME=Game
    model_config = SettingsConfigDict(
        env_prefix="STATE_MACHINE_PLUGIN_", env_file=".env", extra="ignore"
    )

# Singleton instance
settings = Settings()
