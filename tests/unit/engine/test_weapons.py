"""Tests for weapon fire control and the weapon factory."""

from __future__ import annotations

import math
import random

import pytest

from tactical_core.core.exceptions import UnknownWeaponPresetError, ValidationError
from tactical_core.engine.clock import ManualClock
from tactical_core.engine.weapons import FireOutcome, WeaponFactory, WeaponSystem
from tactical_core.models.enums import WeaponCategory


def _empty_magazine(weapon: WeaponSystem, clock: ManualClock) -> None:
    for _ in range(weapon.magazine_size):
        assert weapon.fire() == FireOutcome.FIRED
        clock.advance_ms(math.ceil(weapon.fire_interval_ms))


class TestFireOutcome:
    """Tests for FireOutcome enum."""

    def test_values(self) -> None:
        assert FireOutcome.FIRED == "fired"
        assert FireOutcome.COOLDOWN == "cooldown"
        assert FireOutcome.EMPTY == "empty"
        assert FireOutcome.RELOADING == "reloading"

    def test_succeeded(self) -> None:
        assert FireOutcome.FIRED.succeeded is True
        assert FireOutcome.EMPTY.succeeded is False


class TestFiring:
    """Tests for the fire-rate gate and ammunition."""

    def test_new_weapon_is_full(self, rifle: WeaponSystem) -> None:
        assert rifle.current_ammo == 30
        assert rifle.is_reloading is False
        assert rifle.last_fire_time is None

    def test_first_shot_never_gated(self, rifle: WeaponSystem) -> None:
        assert rifle.fire() == FireOutcome.FIRED
        assert rifle.current_ammo == 29

    def test_rapid_fire_is_rate_limited(self, rifle: WeaponSystem) -> None:
        outcomes = [rifle.fire() for _ in range(31)]

        assert outcomes[0] == FireOutcome.FIRED
        assert outcomes[1:] == [FireOutcome.COOLDOWN] * 30
        assert rifle.current_ammo == 29

    def test_gate_opens_exactly_at_interval(
        self, rifle: WeaponSystem, clock: ManualClock
    ) -> None:
        rifle.fire()

        clock.set(0.124)
        assert rifle.fire() == FireOutcome.COOLDOWN

        clock.set(0.125)
        assert rifle.fire() == FireOutcome.FIRED
        assert rifle.last_fire_time == 0.125

    def test_gate_on_large_clock_offset(self, rng: random.Random) -> None:
        clock = ManualClock(start=12345.678)
        rifle = WeaponFactory.create_preset("rifle", clock=clock, rng=rng)

        outcomes = []
        for _ in range(30):
            outcomes.append(rifle.fire())
            clock.advance_ms(125)

        assert outcomes == [FireOutcome.FIRED] * 30
        assert rifle.current_ammo == 0

    def test_fractional_interval_gate(self, rng: random.Random) -> None:
        clock = ManualClock(start=1.0)
        pistol = WeaponFactory.create_preset("pistol", clock=clock, rng=rng)
        pistol.fire()

        # 1000 / 3 ms between shots
        clock.advance_ms(333)
        assert pistol.fire() == FireOutcome.COOLDOWN

        clock.advance_ms(1)
        assert pistol.fire() == FireOutcome.FIRED
        assert pistol.last_fire_time == 1.334

    def test_empty_magazine(self, rifle: WeaponSystem, clock: ManualClock) -> None:
        _empty_magazine(rifle, clock)

        assert rifle.current_ammo == 0
        assert rifle.fire() == FireOutcome.EMPTY
        assert rifle.current_ammo == 0

    def test_rejected_shot_keeps_last_fire_time(self, rifle: WeaponSystem) -> None:
        rifle.fire()
        first = rifle.last_fire_time

        rifle.fire()

        assert rifle.last_fire_time == first


class TestReload:
    """Tests for the two-phase reload."""

    def test_reload_completes_after_duration(
        self, rifle: WeaponSystem, clock: ManualClock
    ) -> None:
        _empty_magazine(rifle, clock)
        started_at = clock.now()

        ticket = rifle.reload()

        assert ticket.started is True
        assert ticket.completes_at == pytest.approx(started_at + 2.0)
        assert rifle.is_reloading is True
        assert rifle.fire() == FireOutcome.RELOADING

        clock.advance_ms(1999)
        assert rifle.is_reloading is True
        assert rifle.current_ammo == 0

        clock.set(ticket.completes_at)
        assert rifle.current_ammo == 30
        assert rifle.is_reloading is False
        assert rifle.fire() == FireOutcome.FIRED

    def test_reload_is_idempotent(self, rifle: WeaponSystem, clock: ManualClock) -> None:
        first = rifle.reload()
        clock.advance_ms(500)

        second = rifle.reload()

        assert second.started is False
        assert second.completes_at == first.completes_at

    def test_tick_reports_completion_once(
        self, rifle: WeaponSystem, clock: ManualClock
    ) -> None:
        assert rifle.tick() is False

        ticket = rifle.reload()
        assert rifle.tick() is False

        clock.set(ticket.completes_at)
        assert rifle.tick() is True
        assert rifle.tick() is False

    def test_partial_magazine_refilled(self, rifle: WeaponSystem, clock: ManualClock) -> None:
        rifle.fire()
        ticket = rifle.reload()

        clock.set(ticket.completes_at + 1)

        assert rifle.current_ammo == 30

    def test_reload_allowed_on_full_magazine(self, rifle: WeaponSystem) -> None:
        assert rifle.reload().started is True


class TestBallistics:
    """Tests for damage and recoil rolls."""

    def test_damage_within_spread(self, rifle: WeaponSystem) -> None:
        # 35 damage, 0.08 spread: (32.2, 35]
        rolls = [rifle.calculate_damage() for _ in range(200)]

        assert all(isinstance(roll, int) for roll in rolls)
        assert min(rolls) >= 32
        assert max(rolls) <= 35

    def test_zero_spread_is_exact(self, clock: ManualClock, rng: random.Random) -> None:
        weapon = WeaponFactory.create_from_config(
            {"name": "Test", "stats": {"damage": 40, "spread": 0}},
            clock=clock,
            rng=rng,
        )
        assert weapon.calculate_damage() == 40

    def test_recoil_bounds(self, rifle: WeaponSystem) -> None:
        for _ in range(200):
            kick = rifle.recoil_offset()
            assert -2.0 <= kick.x < 2.0
            assert -6.0 < kick.y <= 0.0

    def test_same_seed_same_rolls(self, clock: ManualClock) -> None:
        first = WeaponFactory.create_preset("shotgun", clock=clock, rng=random.Random(7))
        second = WeaponFactory.create_preset("shotgun", clock=clock, rng=random.Random(7))

        assert [first.calculate_damage() for _ in range(10)] == [
            second.calculate_damage() for _ in range(10)
        ]


class TestWeaponFactory:
    """Tests for WeaponFactory."""

    def test_preset_names(self) -> None:
        assert WeaponFactory.preset_names() == ["pistol", "rifle", "shotgun", "sniper"]

    def test_preset_config(self) -> None:
        assert WeaponFactory.preset_config("sniper").name == "M24 Sniper"
        assert WeaponFactory.preset_config("railgun") is None

    def test_create_preset(self, clock: ManualClock, rng: random.Random) -> None:
        sniper = WeaponFactory.create_preset("sniper", clock=clock, rng=rng)

        assert sniper.magazine_size == 5
        assert sniper.fire_interval_ms == 2000

    def test_unknown_preset(self) -> None:
        with pytest.raises(UnknownWeaponPresetError) as exc_info:
            WeaponFactory.create_preset("railgun")

        assert exc_info.value.details["preset"] == "railgun"
        assert "rifle" in exc_info.value.details["available"]

    def test_validate_clamps_out_of_range_stats(self) -> None:
        config = WeaponFactory.validate_config(
            {
                "name": "Broken",
                "category": "pistol",
                "stats": {
                    "damage": 500,
                    "fireRate": 100,
                    "recoil": -1,
                    "spread": 2,
                    "magazineSize": 0.5,
                    "reloadTime": 50,
                },
            }
        )

        assert config.name == "Broken"
        assert config.category == WeaponCategory.PISTOL
        assert config.stats.damage == 200
        assert config.stats.fire_rate == 20
        assert config.stats.recoil == 0
        assert config.stats.spread == 1
        assert config.stats.magazine_size == 1
        assert config.stats.reload_time == 500

    def test_validate_clamps_low_values(self) -> None:
        stats = WeaponFactory.validate_config(
            {"stats": {"damage": 0, "fire_rate": 0, "magazine_size": 1000, "reload_time": 9000}}
        ).stats

        assert stats.damage == 1
        assert stats.fire_rate == 0.1
        assert stats.magazine_size == 100
        assert stats.reload_time == 5000

    def test_validate_floors_magazine(self) -> None:
        stats = WeaponFactory.validate_config({"stats": {"magazine_size": 45.7}}).stats
        assert stats.magazine_size == 45

    def test_validate_infinite_magazine(self) -> None:
        stats = WeaponFactory.validate_config({"stats": {"magazineSize": math.inf}}).stats
        assert stats.magazine_size == 100

    def test_validate_defaults(self) -> None:
        config = WeaponFactory.validate_config({})

        assert config.name == "Unknown Weapon"
        assert config.category == WeaponCategory.RIFLE
        assert config.stats.damage == 30
        assert config.stats.fire_rate == 5
        assert config.stats.recoil == 0.3
        assert config.stats.spread == 0.1
        assert config.stats.magazine_size == 20
        assert config.stats.reload_time == 2000

    def test_nan_stat_uses_default(self) -> None:
        stats = WeaponFactory.validate_config({"stats": {"damage": math.nan}}).stats
        assert stats.damage == 30

    def test_non_numeric_stat_rejected(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            WeaponFactory.validate_config({"stats": {"damage": "lots"}})
        assert exc_info.value.details["field_name"] == "damage"

    def test_boolean_stat_rejected(self) -> None:
        with pytest.raises(ValidationError):
            WeaponFactory.validate_config({"stats": {"spread": True}})

    def test_non_mapping_stats_rejected(self) -> None:
        with pytest.raises(ValidationError):
            WeaponFactory.validate_config({"stats": [1, 2, 3]})

    def test_type_alias_for_category(self) -> None:
        config = WeaponFactory.validate_config({"type": "sniper"})
        assert config.category == WeaponCategory.SNIPER

    def test_unknown_category_falls_back(self) -> None:
        config = WeaponFactory.validate_config({"category": "laser"})
        assert config.category == WeaponCategory.RIFLE

    def test_create_generated_fills_missing_stats(
        self, clock: ManualClock, rng: random.Random
    ) -> None:
        weapon = WeaponFactory.create_generated(
            {"fireRate": 12, "magazineSize": 40},
            "Prototype",
            WeaponCategory.SHOTGUN,
            clock=clock,
            rng=rng,
        )

        assert weapon.config.name == "Prototype"
        assert weapon.config.category == WeaponCategory.SHOTGUN
        assert weapon.stats.fire_rate == 12
        assert weapon.magazine_size == 40
        assert weapon.stats.damage == 30
        assert weapon.current_ammo == 40
