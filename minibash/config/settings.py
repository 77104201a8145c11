"""
Configuration settings for the application.
"""

import logging
import os

from dotenv import load_dotenv

from minibash.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()

_TRUE_VALUES = {"1", "true", "yes"}


def _get_env(key: str, default: str) -> str:
    """Get an environment variable with a default value."""
    return os.getenv(key, default)


def validate_port(port: int, source: str) -> int:
    """
    Check that a TCP port is usable for binding.

    Args:
        port: Port number
        source: Where the value came from, used in the error message

    Returns:
        The port, unchanged

    Raises:
        ConfigurationError: If the port is outside 1-65535
    """
    if not 0 < port < 65536:
        raise ConfigurationError(f"{source} out of range: {port}")
    return port


class Settings:
    """Application settings shared by every command, loaded from environment variables."""

    def __init__(self):
        self.log_level: int = self._get_log_level("MINIBASH_LOG_LEVEL", "WARNING")

    def _get_log_level(self, key: str, default: str) -> int:
        """Get a logging level name from the environment, raise error if unknown."""
        name = _get_env(key, default).strip().upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            raise ConfigurationError(f"Invalid log level in {key}: {name}")
        return level


class ServerSettings:
    """HTTP server settings, loaded from environment variables when serving."""

    def __init__(self):
        self.host: str = _get_env("MINIBASH_HOST", "127.0.0.1")
        self.port: int = self._get_port("MINIBASH_PORT", "8000")
        self.reload: bool = (
            _get_env("MINIBASH_RELOAD", "0").strip().lower() in _TRUE_VALUES
        )

    def _get_port(self, key: str, default: str) -> int:
        """Get a TCP port from the environment, raise error if invalid."""
        value = _get_env(key, default)
        try:
            port = int(value)
        except ValueError:
            raise ConfigurationError(f"{key} must be an integer, got: {value}")
        return validate_port(port, key)
