"""Configuration management for the tactical combat core.

This module provides centralized configuration using pydantic-settings,
supporting environment variables, .env files, and runtime overrides.
Engine components never read settings behind the caller's back: the
values here only fill in defaults that callers did not pass explicitly.

Example:
    >>> from tactical_core.core.config import get_settings
    >>> settings = get_settings()
    >>> settings.simulation.hysteresis_factor
    1.5

Environment Variables:
    TACTICAL_CORE_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    TACTICAL_CORE_DEBUG: Log at DEBUG whatever the level says
    TACTICAL_CORE_JSON_LOGS: Emit JSON log lines
    TACTICAL_CORE_SIM_NOMINAL_TICK_RATE: Ticks per second the speed unit is scaled to
    TACTICAL_CORE_HOSTILE_DETECTION_RANGE: Default hostile detection radius
    TACTICAL_CORE_PLAYER_MAX_AMMO: Initial player ammo capacity
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tactical_core.core.exceptions import ConfigurationError


class SimulationSettings(BaseSettings):
    """Tunables of the hostile behavior model.

    Attributes:
        nominal_tick_rate: Speed is expressed in units per tick at this rate.
        hysteresis_factor: Multiple of detection range beyond which an
            aggressive hostile calms down.
        waypoint_tolerance: Distance under which a patrol waypoint counts
            as reached.
        squad_size: Number of hostiles placed by a squad spawn.
        squad_radius: Radius of the circle a squad is placed on.
        squad_health_base: Minimum health of a squad member.
        squad_health_jitter: Random health added on top of the base.
        squad_speed_base: Minimum speed of a squad member.
        squad_speed_jitter: Random speed added on top of the base.
    """

    model_config = SettingsConfigDict(
        env_prefix="TACTICAL_CORE_SIM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    nominal_tick_rate: float = Field(default=60.0, gt=0, description="Nominal ticks per second")
    hysteresis_factor: float = Field(default=1.5, ge=1.0, description="De-escalation multiplier")
    waypoint_tolerance: float = Field(default=5.0, gt=0, description="Waypoint reach distance")
    squad_size: int = Field(default=3, ge=1, le=64, description="Hostiles per squad")
    squad_radius: float = Field(default=50.0, ge=0, description="Squad placement radius")
    squad_health_base: float = Field(default=50.0, gt=0)
    squad_health_jitter: float = Field(default=50.0, ge=0)
    squad_speed_base: float = Field(default=1.5, gt=0)
    squad_speed_jitter: float = Field(default=1.0, ge=0)


class HostileDefaults(BaseSettings):
    """Default stats for hostiles whose config leaves them unset.

    Attributes:
        health: Starting and maximum health.
        detection_range: Radius at which the player is noticed.
        attack_range: Radius at which the hostile can attack.
        speed: Units moved per nominal tick.
        guard_health: Health of a patrolling guard.
        guard_detection_range: Detection radius of a patrolling guard.
        guard_speed: Speed of a patrolling guard.
    """

    model_config = SettingsConfigDict(
        env_prefix="TACTICAL_CORE_HOSTILE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    health: float = Field(default=100.0, gt=0)
    detection_range: float = Field(default=150.0, gt=0)
    attack_range: float = Field(default=50.0, gt=0)
    speed: float = Field(default=2.0, gt=0)
    guard_health: float = Field(default=100.0, gt=0)
    guard_detection_range: float = Field(default=200.0, gt=0)
    guard_speed: float = Field(default=1.5, gt=0)

    @model_validator(mode="after")
    def validate_ranges(self) -> "HostileDefaults":
        """Ensure hostiles can be detected before they can attack.

        Returns:
            Self if validation passes.

        Raises:
            ConfigurationError: If attack_range exceeds detection_range.
        """
        if self.attack_range > self.detection_range:
            raise ConfigurationError(
                f"attack_range ({self.attack_range}) must not exceed "
                f"detection_range ({self.detection_range})",
                config_key="attack_range",
            )
        return self


class PlayerSettings(BaseSettings):
    """Values of the initial player snapshot.

    Attributes:
        max_health: Starting and maximum health.
        max_ammo: Starting and maximum ammo.
        player_level: Starting level.
        equipped_weapon: Preset id of the starting weapon.
    """

    model_config = SettingsConfigDict(
        env_prefix="TACTICAL_CORE_PLAYER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    max_health: int = Field(default=100, ge=1)
    max_ammo: int = Field(default=30, ge=0)
    player_level: int = Field(default=1, ge=1)
    equipped_weapon: str = Field(default="rifle", min_length=1)


class MissionSettings(BaseSettings):
    """Fallback mission tuning.

    Attributes:
        level_reward_step: Fractional reward bonus per level above 1.
    """

    model_config = SettingsConfigDict(
        env_prefix="TACTICAL_CORE_MISSION_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    level_reward_step: float = Field(default=0.2, ge=0, description="Reward bonus per level")


class Settings(BaseSettings):
    """Main application settings container.

    Attributes:
        debug: Log at DEBUG regardless of ``log_level``.
        log_level: Logging verbosity level.
        json_logs: Render logs as JSON instead of console output.
        simulation: Hostile behavior tunables.
        hostile: Default hostile stats.
        player: Initial player snapshot values.
        mission: Fallback mission tuning.
    """

    model_config = SettingsConfigDict(
        env_prefix="TACTICAL_CORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    debug: bool = Field(default=False, description="Force DEBUG logging")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    json_logs: bool = Field(default=False, description="Emit JSON log lines")

    simulation: SimulationSettings = Field(default_factory=SimulationSettings)
    hostile: HostileDefaults = Field(default_factory=HostileDefaults)
    player: PlayerSettings = Field(default_factory=PlayerSettings)
    mission: MissionSettings = Field(default_factory=MissionSettings)

    @property
    def effective_log_level(self) -> str:
        """Log level after applying the debug switch."""
        return "DEBUG" if self.debug else self.log_level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the application settings singleton.

    Returns:
        The application Settings instance.

    Raises:
        ConfigurationError: If configuration is missing or invalid.
    """
    try:
        return Settings()
    except ConfigurationError:
        raise
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load application settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access."""
    get_settings.cache_clear()


__all__ = [
    "SimulationSettings",
    "HostileDefaults",
    "PlayerSettings",
    "MissionSettings",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
