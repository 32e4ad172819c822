"""Pytest configuration and shared fixtures.

This module provides common fixtures for the tactical core test suite.
Time is driven by ``ManualClock`` and randomness by a seeded
``random.Random`` so every scenario is deterministic.
"""

from __future__ import annotations

import random
from typing import TYPE_CHECKING

import pytest

from tactical_core.core.config import HostileDefaults, PlayerSettings, SimulationSettings
from tactical_core.engine.clock import ManualClock
from tactical_core.engine.player_state import PlayerStateStore, create_initial_player_state
from tactical_core.engine.registry import HostileRegistry
from tactical_core.engine.weapons import WeaponFactory, WeaponSystem
from tactical_core.models.player import Mission


if TYPE_CHECKING:
    from collections.abc import Generator


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset the settings cache before and after each test."""
    from tactical_core.core.config import clear_settings_cache

    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def simulation_settings() -> SimulationSettings:
    """Behavior tunables with their documented defaults."""
    return SimulationSettings()


@pytest.fixture
def hostile_defaults() -> HostileDefaults:
    """Default hostile stats."""
    return HostileDefaults()


# =============================================================================
# Engine Fixtures
# =============================================================================


@pytest.fixture
def clock() -> ManualClock:
    """A manual clock starting at t=0."""
    return ManualClock()


@pytest.fixture
def rng() -> random.Random:
    """A seeded random source for reproducible tests."""
    return random.Random(42)


@pytest.fixture
def registry(
    clock: ManualClock,
    hostile_defaults: HostileDefaults,
    simulation_settings: SimulationSettings,
) -> HostileRegistry:
    """An empty hostile registry on the manual clock."""
    return HostileRegistry(
        clock=clock,
        defaults=hostile_defaults,
        simulation=simulation_settings,
    )


@pytest.fixture
def rifle(clock: ManualClock, rng: random.Random) -> WeaponSystem:
    """The rifle preset on the manual clock."""
    return WeaponFactory.create_preset("rifle", clock=clock, rng=rng)


@pytest.fixture
def store() -> PlayerStateStore:
    """A player state store with the default initial snapshot."""
    return PlayerStateStore(create_initial_player_state(PlayerSettings()))


# =============================================================================
# Model Fixtures
# =============================================================================


@pytest.fixture
def sample_mission() -> Mission:
    """A mission worth 750 points."""
    return Mission(
        id="mission_test_1",
        title="Intel Recovery",
        objective="Locate and retrieve the encrypted data drive.",
        reward=750,
        target_npc="Intel Officer",
    )
