"""Tactical Core - combat simulation layer of a mobile action game.

The package owns the parts of the game with real state and timing rules:

- Hostile actors driven by an idle/patrol/aggressive state machine.
- Weapon fire control with fire-rate gating, timed reloads and
  randomized damage and recoil.
- The authoritative player state, updated by a pure reducer over intents.

Rendering, input, haptics and the remote mission service are external;
the core only implements the mission service's contract and fallbacks.

Example:
    >>> from tactical_core import HostileRegistry, Position, create_patrolling_guard
    >>> registry = HostileRegistry()
    >>> guard = create_patrolling_guard(
    ...     registry, "guard_1", [Position(x=0, y=0), Position(x=100, y=0)]
    ... )
    >>> registry.update_all(Position(x=1000, y=1000))

Modules:
    core: Configuration, logging, and base exceptions.
    models: Pydantic V2 schemas for hostiles, weapons, player and missions.
    engine: Clock, hostile behaviors, registry, weapons, player state store.
    missions: Mission provider contract and fallback tables.
"""

from __future__ import annotations

# Core
from tactical_core.core.config import Settings, get_settings
from tactical_core.core.exceptions import TacticalCoreError
from tactical_core.core.logging import configure_logging, get_logger

# Engine
from tactical_core.engine import (
    FireOutcome,
    HostileBehavior,
    HostileRegistry,
    ManualClock,
    PlayerStateStore,
    ReloadTicket,
    SystemClock,
    WeaponFactory,
    WeaponSystem,
    create_enemy_squad,
    create_initial_player_state,
    create_patrolling_guard,
    reduce_player_state,
)

# Missions
from tactical_core.missions import MissionGenerator, MissionProvider, MissionRequest

# Models
from tactical_core.models import (
    BehaviorState,
    HostileActor,
    HostileConfig,
    Mission,
    PlayerState,
    Position,
    WeaponCategory,
    WeaponConfig,
    WeaponStats,
)


__version__ = "0.1.0"
__all__ = [
    "__version__",
    # Core
    "TacticalCoreError",
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    # Models
    "BehaviorState",
    "Position",
    "HostileActor",
    "HostileConfig",
    "WeaponCategory",
    "WeaponConfig",
    "WeaponStats",
    "Mission",
    "PlayerState",
    # Engine
    "SystemClock",
    "ManualClock",
    "HostileBehavior",
    "HostileRegistry",
    "create_enemy_squad",
    "create_patrolling_guard",
    "FireOutcome",
    "ReloadTicket",
    "WeaponSystem",
    "WeaponFactory",
    "PlayerStateStore",
    "create_initial_player_state",
    "reduce_player_state",
    # Missions
    "MissionGenerator",
    "MissionProvider",
    "MissionRequest",
]
