"""Authoritative player state: a pure reducer and the store around it.

``reduce_player_state`` never mutates its input. Transitions that change
nothing (shooting with no ammo, completing a mission when none is active,
unknown intents) return the very same snapshot object, so callers can use
identity to detect a no-op.

Ammo here is the HUD-level counter. Real-time reload pacing belongs to
``WeaponSystem``; ``Reload`` refills instantly.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from tactical_core.core.config import PlayerSettings, get_settings
from tactical_core.core.logging import get_logger
from tactical_core.models.geometry import Position
from tactical_core.models.intents import (
    AddScore,
    CompleteMission,
    EquipWeapon,
    Heal,
    Move,
    PlayerIntent,
    Reload,
    Reset,
    SetMission,
    Shoot,
    TakeDamage,
)
from tactical_core.models.player import PlayerState


logger = get_logger(__name__)

StateListener = Callable[[PlayerState, PlayerState, PlayerIntent], None]


def create_initial_player_state(settings: PlayerSettings | None = None) -> PlayerState:
    """Build the fixed starting snapshot."""
    settings = settings or get_settings().player
    return PlayerState(
        health=settings.max_health,
        max_health=settings.max_health,
        ammo=settings.max_ammo,
        max_ammo=settings.max_ammo,
        player_level=settings.player_level,
        position=Position(x=0, y=0),
        current_mission=None,
        equipped_weapon_id=settings.equipped_weapon,
        score=0,
    )


def reduce_player_state(
    state: PlayerState,
    intent: PlayerIntent,
    *,
    initial: PlayerState | None = None,
) -> PlayerState:
    """Compute the next player snapshot.

    Args:
        state: Current snapshot.
        intent: Intent to apply.
        initial: Snapshot restored by ``Reset``. Defaults to
            ``create_initial_player_state()``.

    Returns:
        The next snapshot, or ``state`` itself when nothing changes.
    """
    if isinstance(intent, Shoot):
        if state.ammo <= 0:
            return state
        return state.model_copy(update={"ammo": state.ammo - 1})

    if isinstance(intent, Reload):
        return state.model_copy(update={"ammo": state.max_ammo})

    if isinstance(intent, TakeDamage):
        return state.model_copy(update={"health": max(0, state.health - intent.amount)})

    if isinstance(intent, Heal):
        return state.model_copy(
            update={"health": min(state.max_health, state.health + intent.amount)}
        )

    if isinstance(intent, Move):
        return state.model_copy(update={"position": state.position.offset(intent.dx, intent.dy)})

    if isinstance(intent, SetMission):
        return state.model_copy(update={"current_mission": intent.mission})

    if isinstance(intent, CompleteMission):
        if state.current_mission is None:
            return state
        return state.model_copy(
            update={
                "score": state.score + state.current_mission.reward,
                "current_mission": None,
            }
        )

    if isinstance(intent, EquipWeapon):
        return state.model_copy(update={"equipped_weapon_id": intent.weapon_id})

    if isinstance(intent, AddScore):
        return state.model_copy(update={"score": state.score + intent.amount})

    if isinstance(intent, Reset):
        return initial if initial is not None else create_initial_player_state()

    logger.debug("Ignoring unknown intent", intent=type(intent).__name__)
    return state


class PlayerStateStore:
    """Holds the current player snapshot and applies intents to it.

    Example:
        >>> store = PlayerStateStore()
        >>> store.dispatch(TakeDamage(amount=30)).health
        70
        >>> store.dispatch(Reset()) == store.initial_state
        True
    """

    def __init__(self, initial: PlayerState | None = None) -> None:
        """Initialize the store.

        Args:
            initial: Starting snapshot, also restored by ``Reset``.
        """
        self._initial = initial or create_initial_player_state()
        self._state = self._initial
        self._listeners: list[StateListener] = []

    @property
    def state(self) -> PlayerState:
        return self._state

    @property
    def initial_state(self) -> PlayerState:
        return self._initial

    def dispatch(self, intent: PlayerIntent) -> PlayerState:
        """Apply an intent and notify listeners if the snapshot changed.

        Returns:
            The new current snapshot.
        """
        previous = self._state
        self._state = reduce_player_state(previous, intent, initial=self._initial)

        if isinstance(intent, Reset):
            logger.info("Player state reset")

        if self._state is not previous:
            for listener in list(self._listeners):
                listener(previous, self._state, intent)
        return self._state

    def dispatch_many(self, intents: Iterable[PlayerIntent]) -> PlayerState:
        """Apply intents in order and return the final snapshot."""
        for intent in intents:
            self.dispatch(intent)
        return self._state

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a change listener.

        Args:
            listener: Called with ``(previous, current, intent)`` after
                every dispatch that produced a new snapshot.

        Returns:
            A callable that unsubscribes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe


__all__ = [
    "StateListener",
    "create_initial_player_state",
    "reduce_player_state",
    "PlayerStateStore",
]
