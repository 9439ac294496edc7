"""Game events that can be recorded in the game state."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union

from .pests import PestType


class GameEventKind(Enum):
    """Kinds of game event."""

    BLIGHT_SPOTTED = "BlightSpotted"
    MARKET_CRASH = "MarketCrash"
    BUMPER_HARVEST = "BumperHarvest"
    PEST_INFESTATION = "PestInfestation"


@dataclass(frozen=True)
class GameEvent:
    """An event; a pest infestation also carries the pest type."""

    kind: GameEventKind
    pest_type: Optional[PestType] = None

    def __post_init__(self) -> None:
        if self.kind is GameEventKind.PEST_INFESTATION:
            if self.pest_type is None:
                raise ValueError("a pest infestation event needs a pest type")
        elif self.pest_type is not None:
            raise ValueError(f"{self.kind.value} events carry no pest type")

    def to_dict(self) -> Union[str, dict[str, Any]]:
        """Serialize as a bare name, or a one-entry mapping for infestations."""
        if self.pest_type is not None:
            return {self.kind.value: self.pest_type.value}
        return self.kind.value

    @classmethod
    def from_dict(cls, data: Union[str, dict[str, Any]]) -> GameEvent:
        if isinstance(data, str):
            return cls(GameEventKind(data))
        if isinstance(data, dict) and len(data) == 1:
            ((name, payload),) = data.items()
            return cls(GameEventKind(name), PestType(payload))
        raise ValueError(f"malformed game event: {data!r}")