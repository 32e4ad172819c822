"""Weapon fire control: ammunition, fire-rate gate, reload and ballistics.

``WeaponSystem.fire`` reports a tagged ``FireOutcome`` instead of calling
back into the UI, so a caller can tell an empty-magazine click apart from
a shot that was merely on cooldown.

Reloading spans real time and is split in two phases: ``reload`` starts
it and returns a ``ReloadTicket`` immediately, ``tick`` finishes it once
the clock has passed the ticket's completion time. Every accessor and
``fire`` tick first, so a finished reload is never observed late.
"""

from __future__ import annotations

import math
import random
from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from tactical_core.core.constants import (
    DAMAGE_BOUNDS,
    DEFAULT_GENERATED_STATS,
    DEFAULT_WEAPON_CATEGORY,
    DEFAULT_WEAPON_NAME,
    FIRE_RATE_BOUNDS,
    MAGAZINE_SIZE_BOUNDS,
    RECOIL_BOUNDS,
    RECOIL_HORIZONTAL_SCALE,
    RECOIL_VERTICAL_SCALE,
    RELOAD_TIME_BOUNDS_MS,
    SPREAD_BOUNDS,
)
from tactical_core.core.exceptions import UnknownWeaponPresetError, ValidationError
from tactical_core.core.logging import get_logger
from tactical_core.engine.clock import Clock, SystemClock, clock_ms
from tactical_core.engine.numeric import clamp, round_half_up
from tactical_core.models.enums import WeaponCategory
from tactical_core.models.weapons import PRESET_WEAPONS, WeaponConfig, WeaponStats


logger = get_logger(__name__)


class FireOutcome(StrEnum):
    """Result of a trigger pull."""

    FIRED = "fired"
    """A round was spent."""

    COOLDOWN = "cooldown"
    """Rejected by the fire-rate gate."""

    EMPTY = "empty"
    """Rejected because the magazine is empty; play the dry-fire cue."""

    RELOADING = "reloading"
    """Rejected because a reload is in progress."""

    @property
    def succeeded(self) -> bool:
        return self is FireOutcome.FIRED


@dataclass(frozen=True)
class ReloadTicket:
    """Handle returned by ``WeaponSystem.reload``.

    Attributes:
        started: False if a reload was already running and this call was a no-op.
        completes_at: Clock time (seconds) at which the magazine is refilled.
    """

    started: bool
    completes_at: float


@dataclass(frozen=True)
class RecoilOffset:
    """Reticle kick after a shot. ``y`` is never positive (always upward)."""

    x: float
    y: float


class WeaponSystem:
    """Runtime state of one equipped weapon.

    Example:
        >>> weapon = WeaponFactory.create_preset("rifle")
        >>> weapon.fire()
        <FireOutcome.FIRED: 'fired'>
        >>> weapon.current_ammo
        29
    """

    def __init__(
        self,
        config: WeaponConfig,
        *,
        clock: Clock | None = None,
        rng: random.Random | None = None,
    ) -> None:
        """Create a weapon with a full magazine.

        Args:
            config: Validated weapon configuration.
            clock: Time source for the fire-rate gate and reload.
            rng: Random source for damage spread and recoil.
        """
        self._config = config
        self._clock = clock or SystemClock()
        self._rng = rng or random.Random()
        self._current_ammo = config.stats.magazine_size
        self._is_reloading = False
        self._reload_completes_ms = 0
        self._last_fire_ms: int | None = None

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def config(self) -> WeaponConfig:
        return self._config

    @property
    def stats(self) -> WeaponStats:
        return self._config.stats

    @property
    def magazine_size(self) -> int:
        return self._config.stats.magazine_size

    @property
    def fire_interval_ms(self) -> float:
        return self._config.stats.fire_interval_ms

    @property
    def current_ammo(self) -> int:
        self.tick()
        return self._current_ammo

    @property
    def is_reloading(self) -> bool:
        self.tick()
        return self._is_reloading

    @property
    def last_fire_time(self) -> float | None:
        if self._last_fire_ms is None:
            return None
        return self._last_fire_ms / 1000.0

    # -------------------------------------------------------------------------
    # Firing
    # -------------------------------------------------------------------------

    def fire(self) -> FireOutcome:
        """Pull the trigger.

        Rejections are checked in order: reloading, fire-rate gate, empty
        magazine. Only ``FIRED`` has side effects.
        """
        self.tick()

        if self._is_reloading:
            return FireOutcome.RELOADING

        # Timestamps are whole milliseconds.
        now_ms = clock_ms(self._clock)
        if (
            self._last_fire_ms is not None
            and now_ms - self._last_fire_ms < self.fire_interval_ms
        ):
            return FireOutcome.COOLDOWN

        if self._current_ammo <= 0:
            logger.debug("Weapon empty", weapon=self._config.name)
            return FireOutcome.EMPTY

        self._current_ammo -= 1
        self._last_fire_ms = now_ms
        logger.debug("Weapon fired", weapon=self._config.name, ammo=self._current_ammo)
        return FireOutcome.FIRED

    # -------------------------------------------------------------------------
    # Reloading
    # -------------------------------------------------------------------------

    def reload(self) -> ReloadTicket:
        """Start a reload, or return the running one unchanged.

        Returns:
            Ticket describing when the magazine will be full.
        """
        self.tick()

        if self._is_reloading:
            return ReloadTicket(started=False, completes_at=self._reload_completes_ms / 1000.0)

        self._is_reloading = True
        reload_ms = math.ceil(self._config.stats.reload_time)
        self._reload_completes_ms = clock_ms(self._clock) + reload_ms
        logger.info(
            "Reload started",
            weapon=self._config.name,
            reload_ms=reload_ms,
        )
        return ReloadTicket(started=True, completes_at=self._reload_completes_ms / 1000.0)

    def tick(self) -> bool:
        """Finish a due reload.

        Returns:
            True only on the call that completes a reload.
        """
        if not self._is_reloading or clock_ms(self._clock) < self._reload_completes_ms:
            return False

        self._current_ammo = self._config.stats.magazine_size
        self._is_reloading = False
        logger.info("Reload complete", weapon=self._config.name, ammo=self._current_ammo)
        return True

    # -------------------------------------------------------------------------
    # Ballistics
    # -------------------------------------------------------------------------

    def calculate_damage(self) -> int:
        """Roll the damage of one hit.

        Spread only ever reduces damage, by a random fraction up to ``spread``.
        """
        stats = self._config.stats
        return round_half_up(stats.damage * (1 - self._rng.random() * stats.spread))

    def recoil_offset(self) -> RecoilOffset:
        """Roll the reticle kick of one shot."""
        recoil = self._config.stats.recoil
        return RecoilOffset(
            x=(self._rng.random() - 0.5) * recoil * RECOIL_HORIZONTAL_SCALE,
            y=-self._rng.random() * recoil * RECOIL_VERTICAL_SCALE,
        )

    def __repr__(self) -> str:
        return (
            f"WeaponSystem(name={self._config.name!r}, ammo={self._current_ammo}, "
            f"reloading={self._is_reloading})"
        )


# =============================================================================
# Factory
# =============================================================================


_STAT_ALIASES: dict[str, tuple[str, ...]] = {
    "damage": ("damage",),
    "fire_rate": ("fire_rate", "fireRate"),
    "recoil": ("recoil",),
    "spread": ("spread",),
    "magazine_size": ("magazine_size", "magazineSize"),
    "reload_time": ("reload_time", "reloadTime"),
}


def _read_stat(raw: Mapping[str, Any], name: str) -> float:
    for key in _STAT_ALIASES[name]:
        if key in raw and raw[key] is not None:
            value = raw[key]
            break
    else:
        return float(DEFAULT_GENERATED_STATS[name])

    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(
            "Weapon stat must be numeric",
            field_name=name,
            invalid_value=value,
        )
    if math.isnan(value):
        return float(DEFAULT_GENERATED_STATS[name])
    return float(value)


def _resolve_category(value: Any) -> WeaponCategory:
    if not value:
        return WeaponCategory(DEFAULT_WEAPON_CATEGORY)
    try:
        return WeaponCategory(value)
    except ValueError:
        logger.warning("Unknown weapon category, using default", category=value)
        return WeaponCategory(DEFAULT_WEAPON_CATEGORY)


class WeaponFactory:
    """Builds ``WeaponSystem`` instances from presets or external data."""

    @staticmethod
    def preset_names() -> list[str]:
        return list(PRESET_WEAPONS)

    @staticmethod
    def preset_config(name: str) -> WeaponConfig | None:
        return PRESET_WEAPONS.get(name)

    @classmethod
    def create_preset(
        cls,
        name: str,
        *,
        clock: Clock | None = None,
        rng: random.Random | None = None,
    ) -> WeaponSystem:
        """Instantiate a preset from the reference table.

        Raises:
            UnknownWeaponPresetError: If ``name`` is not a preset id.
        """
        config = PRESET_WEAPONS.get(name)
        if config is None:
            raise UnknownWeaponPresetError(
                f"Unknown preset weapon: {name}",
                preset=name,
                details={"available": cls.preset_names()},
            )
        return WeaponSystem(config, clock=clock, rng=rng)

    @classmethod
    def create_from_config(
        cls,
        raw: Mapping[str, Any],
        *,
        clock: Clock | None = None,
        rng: random.Random | None = None,
    ) -> WeaponSystem:
        """Instantiate a weapon from external data after clamping it."""
        return WeaponSystem(cls.validate_config(raw), clock=clock, rng=rng)

    @classmethod
    def create_generated(
        cls,
        stats: Mapping[str, Any],
        name: str,
        category: WeaponCategory | str,
        *,
        clock: Clock | None = None,
        rng: random.Random | None = None,
    ) -> WeaponSystem:
        """Instantiate a weapon from partial generated stats.

        Missing stats are taken from the generated-weapon baseline by
        ``validate_config``.
        """
        raw = {"name": name, "category": category, "stats": dict(stats)}
        return cls.create_from_config(raw, clock=clock, rng=rng)

    @staticmethod
    def validate_config(raw: Mapping[str, Any]) -> WeaponConfig:
        """Clamp an external weapon config into the allowed ranges.

        Accepts both snake_case and camelCase stat keys and ``type`` as an
        alias for ``category``. Stats that are missing or NaN take the
        generated-weapon baseline value.

        Raises:
            ValidationError: If a stat is present but not numeric.
        """
        raw_stats = raw.get("stats") or {}
        if not isinstance(raw_stats, Mapping):
            raise ValidationError("Weapon stats must be a mapping", field_name="stats")

        # Clamp first: floor() rejects inf.
        magazine = math.floor(clamp(_read_stat(raw_stats, "magazine_size"), *MAGAZINE_SIZE_BOUNDS))
        stats = WeaponStats(
            damage=clamp(_read_stat(raw_stats, "damage"), *DAMAGE_BOUNDS),
            fire_rate=clamp(_read_stat(raw_stats, "fire_rate"), *FIRE_RATE_BOUNDS),
            recoil=clamp(_read_stat(raw_stats, "recoil"), *RECOIL_BOUNDS),
            spread=clamp(_read_stat(raw_stats, "spread"), *SPREAD_BOUNDS),
            magazine_size=int(magazine),
            reload_time=clamp(_read_stat(raw_stats, "reload_time"), *RELOAD_TIME_BOUNDS_MS),
        )
        return WeaponConfig(
            name=raw.get("name") or DEFAULT_WEAPON_NAME,
            category=_resolve_category(raw.get("category") or raw.get("type")),
            stats=stats,
        )


__all__ = [
    "FireOutcome",
    "ReloadTicket",
    "RecoilOffset",
    "WeaponSystem",
    "WeaponFactory",
]
