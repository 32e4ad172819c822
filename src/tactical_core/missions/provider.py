"""Contract of the remote mission generator.

The transport itself (HTTP client, retries, timeouts) lives outside this
package. A provider only has to turn a ``MissionRequest`` into the raw
response body and raise ``MissionProviderError`` when it cannot.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field

from tactical_core.models.geometry import Position


class MissionRequest(BaseModel):
    """Payload sent to the mission generator.

    Attributes:
        player_level: Level of the requesting player.
        coordinates: Where the player currently is.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    player_level: int = Field(ge=1, description="Player level")
    coordinates: Position = Field(default_factory=Position)

    def to_payload(self) -> dict[str, Any]:
        """Wire representation expected by the generator endpoint."""
        return {
            "playerLevel": self.player_level,
            "coordinates": {"x": self.coordinates.x, "y": self.coordinates.y},
        }


@runtime_checkable
class MissionProvider(Protocol):
    """Anything that can fetch a generated mission.

    ``fetch_mission`` returns the decoded response body, expected to look
    like ``{"mission": {"id": ..., "title": ..., "objective": ...,
    "reward": ..., "targetNPC": ...}}``. It may return ``None`` when the
    generator answered without a mission, and should raise
    ``MissionProviderError`` on transport failures or timeouts. A body that
    cannot be decoded may surface as ``ValueError`` (``json.JSONDecodeError``).
    """

    def fetch_mission(self, request: MissionRequest) -> Mapping[str, Any] | None:
        ...


__all__ = [
    "MissionRequest",
    "MissionProvider",
]
