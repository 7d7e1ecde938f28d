"""
Base configuration for project-path-checker.

Shared settings and helper functions for both hosts (CLI, MCP).
Every setting can be provided as PROJECT_PATH_CHECKER_<NAME> in the
environment or in a .env file.
"""

from __future__ import annotations

import os
import pathlib
from typing import Literal, TypeVar

import lazy_object_proxy
import pydantic
import pydantic_settings

from project_path_checker.services.rules import DEFAULT_MAX_PATH_LENGTH
from project_path_checker.services.simulation import SimulationOptions

T = TypeVar('T', bound='BasePathCheckerSettings')


class BasePathCheckerSettings(pydantic_settings.BaseSettings):
    """Shared configuration across hosts (CLI, MCP)."""

    model_config = pydantic_settings.SettingsConfigDict(
        env_prefix='PROJECT_PATH_CHECKER_',
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=True,  # Fail fast on misconfiguration
        extra='forbid',  # Reject unknown environment variables
    )

    # Application metadata
    APP_NAME: str = 'Project Path Checker'
    VERSION: str = '0.9.1'

    # Rules
    MAX_PATH_LENGTH: int = DEFAULT_MAX_PATH_LENGTH

    # Reporting
    LANGUAGE: Literal['en', 'fr'] | None = None  # None = follow the process locale
    SHOW_POSITIVE_MESSAGES: bool = True

    # Simulated locations (for trying out the warnings)
    SIMULATE_DESKTOP: bool = False
    SIMULATE_DOCUMENTS: bool = False
    SIMULATE_ONEDRIVE: bool = False
    SIMULATE_ACCENTED_PATH: bool = False
    SIMULATE_LONG_PATH: bool = False

    @pydantic.field_validator('MAX_PATH_LENGTH')
    @classmethod
    def validate_max_path_length(cls, v: int) -> int:
        """Validate the maximum path length is positive."""
        if v <= 0:
            raise ValueError('MAX_PATH_LENGTH must be greater than 0')
        return v

    @pydantic.model_validator(mode='after')
    def validate_simulations(self) -> BasePathCheckerSettings:
        """Desktop and Documents simulations are mutually exclusive."""
        if self.SIMULATE_DESKTOP and self.SIMULATE_DOCUMENTS:
            raise ValueError('SIMULATE_DESKTOP and SIMULATE_DOCUMENTS cannot both be enabled')
        return self

    def simulation_options(self) -> SimulationOptions:
        return SimulationOptions(
            desktop=self.SIMULATE_DESKTOP,
            documents=self.SIMULATE_DOCUMENTS,
            onedrive=self.SIMULATE_ONEDRIVE,
            accented_path=self.SIMULATE_ACCENTED_PATH,
            long_path=self.SIMULATE_LONG_PATH,
        )


class CheckerSettings(BasePathCheckerSettings):
    """CLI configuration."""

    pass  # No CLI-specific settings; flags override the shared ones per run


def get_settings(settings_class: type[T], env_file: str | None = None) -> T:
    """
    Factory for creating settings with dynamic .env file loading.

    LOAD_ENV_FILE environment variable specifies custom .env file path.
    When unset, loads from environment variables (and ./.env) only.

    Args:
        settings_class: Settings class to instantiate
        env_file: Optional path to .env file (overrides LOAD_ENV_FILE)

    Returns:
        Settings instance

    Raises:
        FileNotFoundError: If specified .env file doesn't exist
    """
    env_file_path = env_file or os.getenv('LOAD_ENV_FILE')

    if not env_file_path:
        return settings_class()  # No explicit .env file

    resolved_path = pathlib.Path(env_file_path).resolve()
    if not resolved_path.exists():
        raise FileNotFoundError(f'Environment file not found: {resolved_path}')

    return settings_class(_env_file=resolved_path)


def lazy_settings(settings_class: type[T]) -> T:
    """
    Lazy settings - defers instantiation until first access.

    Args:
        settings_class: Settings class to instantiate

    Returns:
        Proxy that instantiates settings on first access
    """
    return lazy_object_proxy.Proxy(lambda: get_settings(settings_class))
