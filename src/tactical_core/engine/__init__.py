"""Simulation engine for the tactical combat core.

Submodules:
    clock: Injectable time source (system and manual clocks).
    hostile: Per-actor hostile behavior state machine.
    registry: Keyed store of live hostiles plus squad/guard spawners.
    weapons: Weapon fire control, reload and ballistics.
    player_state: Player state reducer and store.
"""

from __future__ import annotations

from tactical_core.engine.clock import Clock, ManualClock, SystemClock
from tactical_core.engine.hostile import HostileBehavior
from tactical_core.engine.player_state import (
    PlayerStateStore,
    create_initial_player_state,
    reduce_player_state,
)
from tactical_core.engine.registry import (
    HostileRegistry,
    create_enemy_squad,
    create_patrolling_guard,
)
from tactical_core.engine.weapons import (
    FireOutcome,
    RecoilOffset,
    ReloadTicket,
    WeaponFactory,
    WeaponSystem,
)


__all__ = [
    # Clock
    "Clock",
    "SystemClock",
    "ManualClock",
    # Hostiles
    "HostileBehavior",
    "HostileRegistry",
    "create_enemy_squad",
    "create_patrolling_guard",
    # Weapons
    "FireOutcome",
    "ReloadTicket",
    "RecoilOffset",
    "WeaponSystem",
    "WeaponFactory",
    # Player state
    "PlayerStateStore",
    "create_initial_player_state",
    "reduce_player_state",
]
