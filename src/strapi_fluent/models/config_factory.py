"""Factory helpers for building StrapiConfig instances.

Wraps pydantic validation failures in ConfigurationError so callers deal
with a single exception type regardless of where settings came from.
"""

import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from ..exceptions import ConfigurationError
from .config import StrapiConfig

logger = logging.getLogger(__name__)


class ConfigFactory:
    """Build StrapiConfig from arguments, mappings or the environment."""

    @staticmethod
    def create(**kwargs: Any) -> StrapiConfig:
        """Create a config from keyword arguments.

        Environment variables still fill in anything not passed explicitly.

        Raises:
            ConfigurationError: If the resulting settings are invalid
        """
        try:
            return StrapiConfig(**kwargs)
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

    @staticmethod
    def from_dict(values: dict[str, Any]) -> StrapiConfig:
        """Create a config from a plain mapping."""
        return ConfigFactory.create(**values)

    @staticmethod
    def from_environment_only() -> StrapiConfig:
        """Create a config from ``STRAPI_*`` environment variables, ignoring .env files."""
        try:
            return StrapiConfig(_env_file=None)  # type: ignore[call-arg]
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

    @staticmethod
    def from_env_file(env_file: str | Path, required: bool = False) -> StrapiConfig:
        """Create a config from a specific .env file.

        Args:
            env_file: Path to the .env file
            required: Raise if the file does not exist, instead of falling
                back to environment variables

        Raises:
            ConfigurationError: If the file is required but missing, or the
                settings are invalid
        """
        path = Path(env_file)
        if not path.is_file():
            if required:
                raise ConfigurationError(f".env file not found: {path}")
            logger.debug(f"{path} not found, using environment variables only")
            return ConfigFactory.from_environment_only()

        try:
            return StrapiConfig(_env_file=path)  # type: ignore[call-arg]
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e


def load_config(env_file: str | Path | None = None) -> StrapiConfig:
    """Load configuration from an optional .env file and the environment."""
    if env_file is None:
        return ConfigFactory.from_environment_only()
    return ConfigFactory.from_env_file(env_file)
