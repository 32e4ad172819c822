"""Core module providing configuration, logging, and base exceptions.

Exports:
    Exceptions:
        TacticalCoreError: Base exception for all application errors.
        ConfigurationError: Configuration-related errors.
        ValidationError: Precondition violations by calling code.
        DuplicateActorError, ActorNotFoundError: Hostile registry errors.
        UnknownWeaponPresetError: Unknown weapon preset requested.
        MissionProviderError: Remote mission generator failures.

    Configuration:
        Settings: Main application settings class.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging: Set up application logging.
        get_logger: Get a configured logger instance.
        bind_context: Add context to log entries.
        clear_context: Clear logging context.
"""

from __future__ import annotations

from tactical_core.core.config import (
    HostileDefaults,
    MissionSettings,
    PlayerSettings,
    Settings,
    SimulationSettings,
    clear_settings_cache,
    get_settings,
)
from tactical_core.core.exceptions import (
    ActorNotFoundError,
    ConfigurationError,
    DuplicateActorError,
    MissionProviderError,
    SimulationError,
    TacticalCoreError,
    UnknownWeaponPresetError,
    ValidationError,
    WeaponError,
)
from tactical_core.core.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)


__all__ = [
    # Exceptions
    "TacticalCoreError",
    "ConfigurationError",
    "ValidationError",
    "SimulationError",
    "DuplicateActorError",
    "ActorNotFoundError",
    "WeaponError",
    "UnknownWeaponPresetError",
    "MissionProviderError",
    # Configuration
    "Settings",
    "SimulationSettings",
    "HostileDefaults",
    "PlayerSettings",
    "MissionSettings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
]
