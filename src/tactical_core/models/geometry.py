"""Plane coordinates used by every positioned entity."""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field


class Position(BaseModel):
    """An immutable point on the play field.

    Positions are frozen, so handing one out never exposes the owner's
    internal state.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    x: float = Field(default=0.0, description="Horizontal coordinate")
    y: float = Field(default=0.0, description="Vertical coordinate")

    def distance_to(self, other: Position) -> float:
        """Euclidean distance to another position."""
        return math.hypot(other.x - self.x, other.y - self.y)

    def offset(self, dx: float, dy: float) -> Position:
        """Return a new position displaced by ``(dx, dy)``."""
        return Position(x=self.x + dx, y=self.y + dy)

    def step_towards(self, target: Position, max_distance: float) -> Position:
        """Move up to ``max_distance`` towards ``target`` without overshooting.

        Returns ``self`` unchanged when already on the target.
        """
        distance = self.distance_to(target)
        if distance <= 0:
            return self
        ratio = min(max_distance / distance, 1.0)
        return Position(
            x=self.x + (target.x - self.x) * ratio,
            y=self.y + (target.y - self.y) * ratio,
        )


__all__ = ["Position"]
