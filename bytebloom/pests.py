"""Pests that can infest garden tiles."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class PestType(Enum):
    """Kinds of pest."""

    APHIDS = "Aphids"
    SPIDER_MITES = "SpiderMites"
    WHITEFLIES = "Whiteflies"

    def __str__(self) -> str:
        return self.value


@dataclass
class Pest:
    """A pest living on a tile, with how badly the tile is infested."""

    pest_type: PestType
    infestation_level: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "pest_type": self.pest_type.value,
            "infestation_level": self.infestation_level,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Pest:
        return cls(
            pest_type=PestType(data["pest_type"]),
            infestation_level=float(data["infestation_level"]),
        )