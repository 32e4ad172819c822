"""Custom exception hierarchy for the tactical combat core.

Only programmer errors are raised as exceptions: spawning a duplicate
hostile id, asking for a weapon preset that does not exist, passing a
negative damage amount. Rejected gameplay operations (firing on cooldown,
firing an empty magazine, completing a mission that is not active) are
ordinary return values and never show up here.

Example:
    >>> from tactical_core.core.exceptions import DuplicateActorError
    >>> raise DuplicateActorError("Hostile already registered", actor_id="guard_1")
"""

from __future__ import annotations

from typing import Any


class TacticalCoreError(Exception):
    """Base exception for all tactical core errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary containing additional error context.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """Initialize the base exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary containing additional error context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the exception message with optional details.

        Returns:
            Formatted error message including any provided details.
        """
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} [{detail_str}]"
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# =============================================================================
# Configuration & Validation Exceptions
# =============================================================================


class ConfigurationError(TacticalCoreError):
    """Raised when application configuration is invalid."""

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error with config key context.

        Args:
            message: Human-readable error description.
            config_key: The configuration key that caused the error.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if config_key:
            combined_details["config_key"] = config_key
        super().__init__(message, details=combined_details)


class ValidationError(TacticalCoreError):
    """Raised when an argument violates a documented precondition.

    This covers negative damage or heal amounts and malformed patrol
    routes handed to the engine by calling code.
    """

    def __init__(
        self,
        message: str,
        *,
        field_name: str | None = None,
        invalid_value: Any | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize validation error with field context.

        Args:
            message: Human-readable error description.
            field_name: Name of the field that failed validation.
            invalid_value: The value that failed validation.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if field_name:
            combined_details["field_name"] = field_name
        if invalid_value is not None:
            combined_details["invalid_value"] = invalid_value
        super().__init__(message, details=combined_details)


# =============================================================================
# Simulation Domain Exceptions
# =============================================================================


class SimulationError(TacticalCoreError):
    """Base exception for hostile simulation errors."""

    def __init__(
        self,
        message: str,
        *,
        actor_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize simulation error with actor context.

        Args:
            message: Human-readable error description.
            actor_id: Identifier of the hostile actor involved.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if actor_id:
            combined_details["actor_id"] = actor_id
        super().__init__(message, details=combined_details)


class DuplicateActorError(SimulationError):
    """Raised when a hostile is spawned under an id that is already live."""


class ActorNotFoundError(SimulationError):
    """Raised when a hostile id is required but not registered."""


# =============================================================================
# Weapon Domain Exceptions
# =============================================================================


class WeaponError(TacticalCoreError):
    """Base exception for weapon construction errors."""


class UnknownWeaponPresetError(WeaponError):
    """Raised when a named weapon preset is not in the reference table."""

    def __init__(
        self,
        message: str,
        *,
        preset: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize unknown preset error.

        Args:
            message: Human-readable error description.
            preset: The preset name that was requested.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if preset:
            combined_details["preset"] = preset
        super().__init__(message, details=combined_details)


# =============================================================================
# Mission Domain Exceptions
# =============================================================================


class MissionProviderError(TacticalCoreError):
    """Raised by mission providers when the remote generator is unusable.

    Mission resolution catches this and substitutes a fallback mission,
    so it never reaches the player state store.
    """

    def __init__(
        self,
        message: str,
        *,
        provider: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize mission provider error.

        Args:
            message: Human-readable error description.
            provider: Name of the provider that failed.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if provider:
            combined_details["provider"] = provider
        super().__init__(message, details=combined_details)


__all__ = [
    "TacticalCoreError",
    "ConfigurationError",
    "ValidationError",
    "SimulationError",
    "DuplicateActorError",
    "ActorNotFoundError",
    "WeaponError",
    "UnknownWeaponPresetError",
    "MissionProviderError",
]
