"""Configuration dependency for FastAPI."""

from ..config import Config, config

__all__ = ["ConfigDependency", "config_dependency"]


class ConfigDependency:
    """Provides the application configuration.

    Defaults to the global configuration. The application factory replaces it
    with the configuration the application was created with.
    """

    def __init__(self) -> None:
        self._config = config

    async def __call__(self) -> Config:
        return self._config

    def set_config(self, new_config: Config) -> None:
        """Replace the configuration returned by the dependency."""
        self._config = new_config


config_dependency = ConfigDependency()
"""The dependency that will return the current configuration."""
