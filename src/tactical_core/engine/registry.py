"""Registry of live hostile actors.

The registry is the only owner of ``HostileBehavior`` instances. It is a
plain object passed to whatever drives the tick loop; there is no
module-level registry. All query helpers return ``HostileActor``
snapshots, never the live controllers.
"""

from __future__ import annotations

import math
import random
from collections.abc import Iterator, Sequence

from tactical_core.core.config import HostileDefaults, SimulationSettings, get_settings
from tactical_core.core.exceptions import ActorNotFoundError, DuplicateActorError, ValidationError
from tactical_core.core.logging import get_logger
from tactical_core.engine.clock import Clock, SystemClock, clock_ms
from tactical_core.engine.hostile import HostileBehavior
from tactical_core.models.enums import BehaviorState
from tactical_core.models.geometry import Position
from tactical_core.models.hostile import HostileActor, HostileConfig


logger = get_logger(__name__)


class HostileRegistry:
    """Keyed store of hostile behaviors.

    Example:
        >>> registry = HostileRegistry()
        >>> hostile = registry.spawn("h1", Position(x=10, y=0), HostileConfig(name="Hostile"))
        >>> registry.update_all(Position(x=0, y=0))
        >>> [actor.state for actor in registry.aggressive_actors()]
        [<BehaviorState.AGGRESSIVE: 'aggressive'>]
    """

    def __init__(
        self,
        *,
        clock: Clock | None = None,
        defaults: HostileDefaults | None = None,
        simulation: SimulationSettings | None = None,
    ) -> None:
        """Initialize an empty registry.

        Args:
            clock: Time source shared by every spawned hostile.
            defaults: Default hostile stats. Read from settings if omitted.
            simulation: Behavior tunables. Read from settings if omitted.
        """
        if defaults is None or simulation is None:
            settings = get_settings()
            defaults = defaults or settings.hostile
            simulation = simulation or settings.simulation

        self._clock = clock or SystemClock()
        self._defaults = defaults
        self._simulation = simulation
        self._hostiles: dict[str, HostileBehavior] = {}

    @property
    def defaults(self) -> HostileDefaults:
        return self._defaults

    @property
    def simulation(self) -> SimulationSettings:
        return self._simulation

    @property
    def clock(self) -> Clock:
        return self._clock

    def __len__(self) -> int:
        return len(self._hostiles)

    def __contains__(self, actor_id: object) -> bool:
        return actor_id in self._hostiles

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._hostiles))

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def spawn(self, actor_id: str, position: Position, config: HostileConfig) -> HostileBehavior:
        """Create and register a hostile.

        Args:
            actor_id: Unique id for the hostile.
            position: Spawn position.
            config: Spawn configuration.

        Returns:
            The live behavior controller.

        Raises:
            DuplicateActorError: If ``actor_id`` is already registered.
        """
        if actor_id in self._hostiles:
            raise DuplicateActorError("Hostile id already registered", actor_id=actor_id)

        behavior = HostileBehavior(
            actor_id,
            position,
            config,
            clock=self._clock,
            defaults=self._defaults,
            simulation=self._simulation,
        )
        self._hostiles[actor_id] = behavior

        logger.info(
            "Hostile spawned",
            actor_id=actor_id,
            name=config.name,
            state=behavior.state.value,
            x=position.x,
            y=position.y,
        )
        return behavior

    def remove(self, actor_id: str) -> bool:
        """Unregister a hostile.

        Returns:
            True if it was registered.
        """
        removed = self._hostiles.pop(actor_id, None)
        if removed is None:
            return False
        logger.info("Hostile removed", actor_id=actor_id)
        return True

    def get(self, actor_id: str) -> HostileBehavior | None:
        return self._hostiles.get(actor_id)

    def require(self, actor_id: str) -> HostileBehavior:
        """Like ``get`` but raise if the hostile is not registered.

        Raises:
            ActorNotFoundError: If ``actor_id`` is unknown.
        """
        behavior = self._hostiles.get(actor_id)
        if behavior is None:
            raise ActorNotFoundError("Hostile not registered", actor_id=actor_id)
        return behavior

    def update_all(self, player_position: Position) -> None:
        """Tick every hostile against the same player position.

        Hostiles never read each other's state, so the order does not
        affect the outcome.
        """
        for behavior in list(self._hostiles.values()):
            behavior.update(player_position)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def all_actors(self) -> list[HostileActor]:
        return [behavior.snapshot() for behavior in self._hostiles.values()]

    def alive_actors(self) -> list[HostileActor]:
        return [actor for actor in self.all_actors() if actor.is_alive]

    def aggressive_actors(self) -> list[HostileActor]:
        """Snapshots of hostiles that are aggressive and alive."""
        return [
            actor
            for actor in self.all_actors()
            if actor.state == BehaviorState.AGGRESSIVE and actor.is_alive
        ]

    def actors_in_range(self, point: Position, radius: float) -> list[HostileActor]:
        """Snapshots of hostiles within ``radius`` of ``point``, boundary included."""
        return [actor for actor in self.all_actors() if actor.position.distance_to(point) <= radius]


# =============================================================================
# Convenience spawners
# =============================================================================


def create_enemy_squad(
    registry: HostileRegistry,
    center: Position,
    *,
    size: int | None = None,
    radius: float | None = None,
    rng: random.Random | None = None,
) -> list[HostileBehavior]:
    """Spawn a squad evenly spaced on a circle around ``center``.

    Health and speed of each member are drawn from the squad band in the
    registry's simulation settings.

    Args:
        registry: Registry to spawn into.
        center: Circle center.
        size: Number of members. Defaults to ``squad_size``.
        radius: Circle radius. Defaults to ``squad_radius``.
        rng: Random source for stat jitter.

    Returns:
        The spawned behaviors, in placement order.
    """
    sim = registry.simulation
    size = sim.squad_size if size is None else size
    radius = sim.squad_radius if radius is None else radius
    rng = rng or random.Random()

    if size < 1:
        raise ValidationError("Squad size must be at least 1", field_name="size", invalid_value=size)

    stamp = clock_ms(registry.clock)
    squad: list[HostileBehavior] = []
    for i in range(size):
        angle = (i / size) * math.pi * 2
        position = Position(
            x=center.x + math.cos(angle) * radius,
            y=center.y + math.sin(angle) * radius,
        )
        config = HostileConfig(
            name=f"Hostile {i + 1}",
            health=sim.squad_health_base + rng.random() * sim.squad_health_jitter,
            speed=sim.squad_speed_base + rng.random() * sim.squad_speed_jitter,
        )
        actor_id = f"enemy_{stamp}_{i}"
        suffix = 1
        while actor_id in registry:
            actor_id = f"enemy_{stamp}_{i}_{suffix}"
            suffix += 1
        squad.append(registry.spawn(actor_id, position, config))

    logger.info("Enemy squad spawned", size=size, center_x=center.x, center_y=center.y)
    return squad


def create_patrolling_guard(
    registry: HostileRegistry,
    actor_id: str,
    patrol_points: Sequence[Position],
) -> HostileBehavior:
    """Spawn a guard standing on the first waypoint of its route.

    Raises:
        ValidationError: If ``patrol_points`` is empty.
        DuplicateActorError: If ``actor_id`` is already registered.
    """
    if not patrol_points:
        raise ValidationError(
            "A patrolling guard needs at least one waypoint",
            field_name="patrol_points",
        )

    defaults = registry.defaults
    config = HostileConfig(
        name="Guard",
        health=defaults.guard_health,
        detection_range=defaults.guard_detection_range,
        speed=defaults.guard_speed,
        patrol_points=tuple(patrol_points),
    )
    return registry.spawn(actor_id, patrol_points[0], config)


__all__ = [
    "HostileRegistry",
    "create_enemy_squad",
    "create_patrolling_guard",
]
