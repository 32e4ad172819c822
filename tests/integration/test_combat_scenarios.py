"""Integration tests for end-to-end combat scenarios.

Drives hostiles, the equipped weapon and the player store together on a
manual clock, the way a game loop would.
"""

from __future__ import annotations

import random

import pytest

from tactical_core.engine.clock import ManualClock
from tactical_core.engine.player_state import PlayerStateStore
from tactical_core.engine.registry import (
    HostileRegistry,
    create_enemy_squad,
    create_patrolling_guard,
)
from tactical_core.engine.weapons import FireOutcome, WeaponFactory, WeaponSystem
from tactical_core.missions.generator import MissionGenerator
from tactical_core.models.enums import BehaviorState
from tactical_core.models.geometry import Position
from tactical_core.models.intents import (
    AddScore,
    CompleteMission,
    Move,
    Reload,
    SetMission,
    Shoot,
)
from tactical_core.models.player import Mission


class TestReferenceScenarios:
    """The four reference scenarios."""

    def test_guard_patrols_route(self, registry: HostileRegistry, clock: ManualClock) -> None:
        """A guard far from the player walks its route and stays on patrol."""
        route = [Position(x=0, y=0), Position(x=100, y=0)]
        guard = create_patrolling_guard(registry, "guard_1", route)
        player = Position(x=1000, y=1000)

        clock.advance(0.1)
        registry.update_all(player)

        assert guard.state == BehaviorState.PATROL
        assert guard.position.y == pytest.approx(0)
        assert 0 <= guard.position.x <= 100

        clock.advance(0.1)
        registry.update_all(player)

        # 1.5 units/tick * 0.1 s * 60 ticks/s towards the second waypoint
        assert guard.state == BehaviorState.PATROL
        assert guard.position.x == pytest.approx(9)
        assert guard.position.y == pytest.approx(0)

    def test_rifle_rapid_fire_is_gated_by_cooldown(self, rifle: WeaponSystem) -> None:
        """31 trigger pulls in the same instant fire exactly once."""
        outcomes = [rifle.fire() for _ in range(31)]

        assert outcomes.count(FireOutcome.FIRED) == 1
        assert outcomes.count(FireOutcome.COOLDOWN) == 30
        assert FireOutcome.EMPTY not in outcomes
        assert rifle.current_ammo == 29

    def test_rifle_spaced_fire_empties_magazine(
        self, rifle: WeaponSystem, clock: ManualClock
    ) -> None:
        """Pulls spaced by the fire interval drain the magazine, then click empty."""
        outcomes = []
        for _ in range(31):
            outcomes.append(rifle.fire())
            clock.advance_ms(125)

        assert outcomes[:30] == [FireOutcome.FIRED] * 30
        assert outcomes[30] == FireOutcome.EMPTY
        assert rifle.current_ammo == 0

    def test_shoot_with_empty_ammo(self, store: PlayerStateStore) -> None:
        """Shooting with no ammo leaves ammo at zero."""
        store.dispatch_many([Shoot()] * 30)
        assert store.state.ammo == 0
        empty = store.state

        result = store.dispatch(Shoot())

        assert result.ammo == 0
        assert result is empty

    def test_mission_completion_awards_reward(
        self, store: PlayerStateStore, sample_mission: Mission
    ) -> None:
        """Completing a mission adds exactly its reward and clears it."""
        store.dispatch(AddScore(amount=40))

        store.dispatch(SetMission(mission=sample_mission))
        store.dispatch(CompleteMission())

        assert store.state.score == 40 + sample_mission.reward
        assert store.state.current_mission is None


class TestEngagement:
    """A full engagement against a squad."""

    def test_clear_squad(
        self,
        registry: HostileRegistry,
        rifle: WeaponSystem,
        store: PlayerStateStore,
        clock: ManualClock,
        rng: random.Random,
    ) -> None:
        squad = create_enemy_squad(registry, Position(x=300, y=0), rng=rng)
        registry.update_all(store.state.position)
        assert registry.aggressive_actors() == []

        store.dispatch(Move(dx=150, dy=0))
        registry.update_all(store.state.position)
        assert registry.aggressive_actors()

        kills = 0
        for _ in range(200):
            clock.advance_ms(rifle.fire_interval_ms)
            player = store.state.position
            registry.update_all(player)

            targets = registry.alive_actors()
            if not targets:
                break
            target = min(targets, key=lambda actor: actor.position.distance_to(player))

            outcome = rifle.fire()
            if outcome == FireOutcome.EMPTY:
                rifle.reload()
                store.dispatch(Reload())
                continue
            if outcome != FireOutcome.FIRED:
                continue

            store.dispatch(Shoot())
            if registry.require(target.id).take_damage(rifle.calculate_damage()):
                kills += 1
                store.dispatch(AddScore(amount=100))

        assert kills == len(squad)
        assert registry.alive_actors() == []
        assert registry.aggressive_actors() == []
        assert all(not member.can_attack() for member in squad)
        assert store.state.score == 100 * len(squad)
        assert store.state.ammo == rifle.current_ammo

    def test_reload_mid_fight(self, clock: ManualClock, rng: random.Random) -> None:
        pistol = WeaponFactory.create_preset("pistol", clock=clock, rng=rng)
        fired = 0
        reloads = 0
        for _ in range(100):
            outcome = pistol.fire()
            if outcome == FireOutcome.FIRED:
                fired += 1
            elif outcome == FireOutcome.EMPTY:
                pistol.reload()
                reloads += 1
            clock.advance(0.5)

        # 15 rounds, 1.5 s reloads, 1/3 s fire interval sampled every 0.5 s
        assert reloads >= 2
        assert fired >= 30
        assert 0 <= pistol.current_ammo <= pistol.magazine_size

    def test_fallback_mission_into_store(
        self, store: PlayerStateStore, rng: random.Random
    ) -> None:
        generator = MissionGenerator(rng=rng)

        mission = generator.generate_for_player(store.state)
        store.dispatch(SetMission(mission=mission))
        store.dispatch(CompleteMission())

        assert store.state.score == mission.reward
        assert mission.reward > 0
