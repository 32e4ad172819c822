"""Mission resolution with fallback substitution.

``MissionGenerator`` asks a ``MissionProvider`` for a generated mission and
substitutes a local fallback whenever the provider fails, times out, or
answers with an absent or malformed mission. The player state store only
ever receives a valid ``Mission``.
"""

from __future__ import annotations

import random
from collections.abc import Mapping
from typing import Any
from uuid import uuid4

from pydantic import ValidationError as PydanticValidationError

from tactical_core.core.config import MissionSettings, get_settings
from tactical_core.core.constants import MIN_PLAYER_LEVEL
from tactical_core.core.exceptions import MissionProviderError
from tactical_core.core.logging import get_logger
from tactical_core.missions.fallback import fallback_mission
from tactical_core.missions.provider import MissionProvider, MissionRequest
from tactical_core.models.geometry import Position
from tactical_core.models.player import Mission, PlayerState


logger = get_logger(__name__)


class MissionGenerator:
    """Resolves missions from a provider, falling back to local missions.

    Example:
        >>> generator = MissionGenerator(provider=None, rng=random.Random(7))
        >>> mission = generator.generate(1, Position(x=0, y=0))
        >>> mission.id.startswith("fallback_")
        True
    """

    def __init__(
        self,
        provider: MissionProvider | None = None,
        *,
        rng: random.Random | None = None,
        settings: MissionSettings | None = None,
    ) -> None:
        """Initialize the generator.

        Args:
            provider: Remote mission source. Without one, every mission is
                a fallback.
            rng: Random source for fallback selection.
            settings: Fallback tuning. Read from settings if omitted.
        """
        self._provider = provider
        self._rng = rng or random.Random()
        self._settings = settings or get_settings().mission

    def generate(self, player_level: int, position: Position) -> Mission:
        """Produce a mission for a player at ``position``.

        Never raises for provider failures; those yield a fallback.
        """
        level = max(MIN_PLAYER_LEVEL, player_level)
        request = MissionRequest(player_level=level, coordinates=position)

        if self._provider is None:
            logger.debug("No mission provider configured, using fallback")
            return self._fallback(level)

        try:
            body = self._provider.fetch_mission(request)
        except (MissionProviderError, TimeoutError, OSError, ValueError) as exc:
            # ValueError covers undecodable bodies, e.g. json.JSONDecodeError.
            logger.warning("Mission generation failed, using fallback", error=str(exc))
            return self._fallback(level)

        mission = self._parse(body)
        if mission is None:
            logger.warning("Mission payload unusable, using fallback", player_level=level)
            return self._fallback(level)

        logger.info("Mission generated", mission_id=mission.id, reward=mission.reward)
        return mission

    def generate_for_player(self, state: PlayerState) -> Mission:
        """Shortcut using the level and position of a player snapshot."""
        return self.generate(state.player_level, state.position)

    def _fallback(self, player_level: int) -> Mission:
        return fallback_mission(
            player_level,
            rng=self._rng,
            level_step=self._settings.level_reward_step,
        )

    @staticmethod
    def _parse(body: Mapping[str, Any] | None) -> Mission | None:
        if not isinstance(body, Mapping):
            return None
        payload = body.get("mission")
        if not isinstance(payload, Mapping) or not payload:
            return None

        data = dict(payload)
        if not data.get("id"):
            data["id"] = f"mission_{uuid4().hex[:12]}"
        try:
            return Mission.model_validate(data)
        except PydanticValidationError as exc:
            logger.debug("Rejected malformed mission payload", errors=exc.error_count())
            return None


__all__ = ["MissionGenerator"]
