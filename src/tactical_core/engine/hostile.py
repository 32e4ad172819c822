"""Per-actor hostile behavior state machine.

Each ``HostileBehavior`` owns one ``HostileActor`` record and advances it
once per simulation tick given only the player's position:

    idle        -> aggressive   player within detection range
    patrol      -> aggressive   player within detection range (checked first)
    patrol                      walk the waypoint route cyclically
    aggressive  -> patrol/idle  player beyond hysteresis x detection range
    aggressive                  chase until within attack range, then hold

Death is tracked through health, not state. A defeated hostile keeps its
last state; ``can_attack`` and the registry queries filter it out.
"""

from __future__ import annotations

from tactical_core.core.config import HostileDefaults, SimulationSettings, get_settings
from tactical_core.core.exceptions import ValidationError
from tactical_core.core.logging import get_logger
from tactical_core.engine.clock import Clock, SystemClock
from tactical_core.models.enums import BehaviorState
from tactical_core.models.geometry import Position
from tactical_core.models.hostile import HostileActor, HostileConfig


logger = get_logger(__name__)


class HostileBehavior:
    """Finite-state controller for a single hostile actor.

    Example:
        >>> guard = HostileBehavior("guard_1", Position(x=0, y=0), HostileConfig(name="Guard"))
        >>> guard.update(Position(x=100, y=0))
        >>> guard.state
        <BehaviorState.AGGRESSIVE: 'aggressive'>
    """

    def __init__(
        self,
        actor_id: str,
        position: Position,
        config: HostileConfig,
        *,
        clock: Clock | None = None,
        defaults: HostileDefaults | None = None,
        simulation: SimulationSettings | None = None,
    ) -> None:
        """Create a hostile at ``position``.

        Args:
            actor_id: Unique identifier of the actor.
            position: Spawn position.
            config: Spawn configuration; unset stats come from ``defaults``.
            clock: Time source for movement deltas.
            defaults: Default hostile stats. Read from settings if omitted.
            simulation: Behavior tunables. Read from settings if omitted.
        """
        if defaults is None or simulation is None:
            settings = get_settings()
            defaults = defaults or settings.hostile
            simulation = simulation or settings.simulation

        self._clock = clock or SystemClock()
        self._simulation = simulation

        health = config.health if config.health is not None else defaults.health
        self._actor = HostileActor(
            id=actor_id,
            name=config.name,
            state=BehaviorState.PATROL if config.patrol_points else BehaviorState.IDLE,
            position=position,
            health=health,
            max_health=health,
            detection_range=config.detection_range or defaults.detection_range,
            attack_range=config.attack_range or defaults.attack_range,
            speed=config.speed or defaults.speed,
            patrol_points=config.patrol_points,
            current_patrol_index=0,
        )

        now = self._clock.now()
        self._last_update_time = now
        self._state_entered_at = now

    # -------------------------------------------------------------------------
    # Read-only accessors
    # -------------------------------------------------------------------------

    @property
    def id(self) -> str:
        return self._actor.id

    @property
    def name(self) -> str:
        return self._actor.name

    @property
    def state(self) -> BehaviorState:
        return self._actor.state

    @property
    def position(self) -> Position:
        """Current position. ``Position`` is frozen, so this is safe to share."""
        return self._actor.position

    @property
    def health(self) -> float:
        return self._actor.health

    @property
    def max_health(self) -> float:
        return self._actor.max_health

    @property
    def is_alive(self) -> bool:
        return self._actor.is_alive

    @property
    def time_in_state(self) -> float:
        """Seconds since the last state transition."""
        return self._clock.now() - self._state_entered_at

    def snapshot(self) -> HostileActor:
        """Return a deep copy of the actor record.

        Mutating the returned model has no effect on this controller.
        """
        return self._actor.model_copy(deep=True)

    # -------------------------------------------------------------------------
    # Tick
    # -------------------------------------------------------------------------

    def update(self, player_position: Position) -> None:
        """Advance the state machine by one tick.

        Args:
            player_position: Where the player is this tick.
        """
        now = self._clock.now()
        delta_seconds = max(0.0, now - self._last_update_time)
        self._last_update_time = now

        distance = self._actor.position.distance_to(player_position)

        if self._actor.state == BehaviorState.IDLE:
            self._handle_idle(distance)
        elif self._actor.state == BehaviorState.PATROL:
            self._handle_patrol(distance, delta_seconds)
        elif self._actor.state == BehaviorState.AGGRESSIVE:
            self._handle_aggressive(player_position, distance, delta_seconds)

    def _handle_idle(self, distance: float) -> None:
        if distance <= self._actor.detection_range:
            self._transition_to(BehaviorState.AGGRESSIVE)

    def _handle_patrol(self, distance: float, delta_seconds: float) -> None:
        if distance <= self._actor.detection_range:
            self._transition_to(BehaviorState.AGGRESSIVE)
            return

        route = self._actor.patrol_points
        if not route:
            return

        target = route[self._actor.current_patrol_index]
        if self._actor.position.distance_to(target) < self._simulation.waypoint_tolerance:
            self._actor.current_patrol_index = (self._actor.current_patrol_index + 1) % len(route)
        else:
            self._move_towards(target, delta_seconds)

    def _handle_aggressive(
        self,
        player_position: Position,
        distance: float,
        delta_seconds: float,
    ) -> None:
        if distance > self._actor.detection_range * self._simulation.hysteresis_factor:
            fallback = BehaviorState.PATROL if self._actor.has_patrol_route else BehaviorState.IDLE
            self._transition_to(fallback)
            return

        if distance > self._actor.attack_range:
            self._move_towards(player_position, delta_seconds)

    def _move_towards(self, target: Position, delta_seconds: float) -> None:
        step = self._actor.speed * delta_seconds * self._simulation.nominal_tick_rate
        self._actor.position = self._actor.position.step_towards(target, step)

    def _transition_to(self, new_state: BehaviorState) -> None:
        if self._actor.state == new_state:
            return
        old_state = self._actor.state
        self._actor.state = new_state
        self._state_entered_at = self._clock.now()
        logger.debug(
            "Hostile state changed",
            actor_id=self._actor.id,
            from_state=old_state.value,
            to_state=new_state.value,
        )

    # -------------------------------------------------------------------------
    # Combat
    # -------------------------------------------------------------------------

    def take_damage(self, amount: float) -> bool:
        """Apply damage and provoke the hostile.

        Args:
            amount: Non-negative damage.

        Returns:
            True if the hostile is now at zero health.

        Raises:
            ValidationError: If ``amount`` is negative.
        """
        if amount < 0:
            raise ValidationError(
                "Damage amount must be non-negative",
                field_name="amount",
                invalid_value=amount,
            )

        was_alive = self._actor.is_alive
        self._actor.health = max(0.0, self._actor.health - amount)
        self._transition_to(BehaviorState.AGGRESSIVE)

        defeated = self._actor.health <= 0
        if defeated and was_alive:
            logger.info("Hostile defeated", actor_id=self._actor.id, name=self._actor.name)
        return defeated

    def heal(self, amount: float) -> None:
        """Restore health up to the maximum. Does not change state.

        Raises:
            ValidationError: If ``amount`` is negative.
        """
        if amount < 0:
            raise ValidationError(
                "Heal amount must be non-negative",
                field_name="amount",
                invalid_value=amount,
            )
        self._actor.health = min(self._actor.max_health, self._actor.health + amount)

    def is_in_attack_range(self, player_position: Position) -> bool:
        return self._actor.position.distance_to(player_position) <= self._actor.attack_range

    def can_attack(self) -> bool:
        """True while aggressive and alive."""
        return self._actor.state == BehaviorState.AGGRESSIVE and self._actor.is_alive

    def __repr__(self) -> str:
        return (
            f"HostileBehavior(id={self._actor.id!r}, state={self._actor.state.value!r}, "
            f"health={self._actor.health!r})"
        )


__all__ = ["HostileBehavior"]
