"""The garden: soil, tiles, plots and the whole game state."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from .economy import Market
from .events import GameEvent
from .pests import Pest
from .plant import Plant
from .weather import Weather


class SoilType(Enum):
    """Kinds of soil."""

    SAND = "Sand"
    CLAY = "Clay"
    LOAM = "Loam"


@dataclass
class Nutrients:
    """Nitrogen, phosphorus and potassium levels, each from 0 to 1."""

    nitrogen: float
    phosphorus: float
    potassium: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "nitrogen": self.nitrogen,
            "phosphorus": self.phosphorus,
            "potassium": self.potassium,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Nutrients:
        return cls(
            nitrogen=float(data["nitrogen"]),
            phosphorus=float(data["phosphorus"]),
            potassium=float(data["potassium"]),
        )


@dataclass
class Soil:
    """The soil of one tile."""

    soil_type: SoilType
    soil_moisture: float
    soil_nutrients: Nutrients
    soil_ph: float
    weeds: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "soil_type": self.soil_type.value,
            "soil_moisture": self.soil_moisture,
            "soil_nutrients": self.soil_nutrients.to_dict(),
            "soil_ph": self.soil_ph,
            "weeds": self.weeds,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Soil:
        return cls(
            soil_type=SoilType(data["soil_type"]),
            soil_moisture=float(data["soil_moisture"]),
            soil_nutrients=Nutrients.from_dict(data["soil_nutrients"]),
            soil_ph=float(data["soil_ph"]),
            weeds=float(data["weeds"]),
        )


@dataclass
class Tile:
    """One square of a plot, possibly holding a plant and a pest."""

    soil: Soil
    plant: Optional[Plant] = None
    pest: Optional[Pest] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "soil": self.soil.to_dict(),
            "plant": self.plant.to_dict() if self.plant is not None else None,
            "pest": self.pest.to_dict() if self.pest is not None else None,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Tile:
        plant = data.get("plant")
        pest = data.get("pest")
        return cls(
            soil=Soil.from_dict(data["soil"]),
            plant=Plant.from_dict(plant) if plant is not None else None,
            pest=Pest.from_dict(pest) if pest is not None else None,
        )


@dataclass
class Grid:
    """Rows of tiles, indexed as tiles[y][x]."""

    tiles: list[list[Tile]] = field(default_factory=list)

    def get_tile(self, x: int, y: int) -> Optional[Tile]:
        """The tile at (x, y), or None when the coordinates are off the grid."""
        if x < 0 or y < 0:
            return None
        try:
            return self.tiles[y][x]
        except IndexError:
            return None

    def to_dict(self) -> dict[str, Any]:
        return {"tiles": [[tile.to_dict() for tile in row] for row in self.tiles]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Grid:
        return cls(
            tiles=[[Tile.from_dict(tile) for tile in row] for row in data["tiles"]]
        )


@dataclass
class Plot:
    """A grid placed at a position in the garden."""

    x: int
    y: int
    grid: Grid

    def to_dict(self) -> dict[str, Any]:
        return {"x": self.x, "y": self.y, "grid": self.grid.to_dict()}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Plot:
        return cls(x=int(data["x"]), y=int(data["y"]), grid=Grid.from_dict(data["grid"]))


@dataclass
class MainGameState:
    """Everything that makes up a saved game."""

    plots: dict[tuple[int, int], Plot] = field(default_factory=dict)
    tick_counter: int = 0
    inventory: dict[str, int] = field(default_factory=dict)
    wallet: float = 0.0
    market: Market = field(default_factory=Market)
    current_weather: Weather = Weather.SUNNY
    events: list[GameEvent] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """A JSON-ready mapping; plots become a list of [[x, y], plot] pairs."""
        return {
            "plots": [[list(key), plot.to_dict()] for key, plot in self.plots.items()],
            "tick_counter": self.tick_counter,
            "inventory": dict(self.inventory),
            "wallet": self.wallet,
            "market": self.market.to_dict(),
            "current_weather": self.current_weather.value,
            "events": [event.to_dict() for event in self.events],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MainGameState:
        plots = {
            (int(key[0]), int(key[1])): Plot.from_dict(plot)
            for key, plot in data["plots"]
        }
        return cls(
            plots=plots,
            tick_counter=int(data["tick_counter"]),
            inventory={name: int(count) for name, count in data["inventory"].items()},
            wallet=float(data["wallet"]),
            market=Market.from_dict(data["market"]),
            current_weather=Weather(data["current_weather"]),
            events=[GameEvent.from_dict(event) for event in data["events"]],
        )


def _uniform(rng: Any, low: float, high: float) -> float:
    return low + (high - low) * rng.random()


def create_grid(width: int, height: int, rng: Optional[random.Random] = None) -> Grid:
    """A grid of empty loam tiles with randomised moisture, nutrients and pH."""
    source = rng or random

    def new_tile() -> Tile:
        moisture = _uniform(source, 0.3, 0.7)
        nutrients = Nutrients(
            nitrogen=_uniform(source, 0.3, 0.7),
            phosphorus=_uniform(source, 0.3, 0.7),
            potassium=_uniform(source, 0.3, 0.7),
        )
        return Tile(
            soil=Soil(
                soil_type=SoilType.LOAM,
                soil_moisture=moisture,
                soil_nutrients=nutrients,
                soil_ph=_uniform(source, 6.0, 7.5),
            )
        )

    return Grid(tiles=[[new_tile() for _ in range(width)] for _ in range(height)])