"""Plants, their genetics and their life cycle."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class LifeCycleStage(Enum):
    """Stages a plant passes through as it ages."""

    SEED = "Seed"
    SPROUT = "Sprout"
    GROWING = "Growing"
    MATURE = "Mature"
    FRUITING = "Fruiting"
    WITHERING = "Withering"


@dataclass(frozen=True)
class PlantGenetics:
    """Inherited traits of a plant species."""

    growth_time: int
    yield_range: tuple[int, int]
    ideal_moisture_range: tuple[float, float]
    nutrient_consumption: tuple[float, float, float]
    light_req: float
    pest_resistance: float
    disease_resistance: float
    genetic_stability: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "growth_time": self.growth_time,
            "yield_range": list(self.yield_range),
            "ideal_moisture_range": list(self.ideal_moisture_range),
            "nutrient_consumption": list(self.nutrient_consumption),
            "light_req": self.light_req,
            "pest_resistance": self.pest_resistance,
            "disease_resistance": self.disease_resistance,
            "genetic_stability": self.genetic_stability,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PlantGenetics:
        low_yield, high_yield = data["yield_range"]
        low_moisture, high_moisture = data["ideal_moisture_range"]
        nitrogen, phosphorus, potassium = data["nutrient_consumption"]
        return cls(
            growth_time=int(data["growth_time"]),
            yield_range=(int(low_yield), int(high_yield)),
            ideal_moisture_range=(float(low_moisture), float(high_moisture)),
            nutrient_consumption=(float(nitrogen), float(phosphorus), float(potassium)),
            light_req=float(data["light_req"]),
            pest_resistance=float(data["pest_resistance"]),
            disease_resistance=float(data["disease_resistance"]),
            genetic_stability=float(data["genetic_stability"]),
        )


@dataclass
class Plant:
    """A single plant growing on a tile."""

    species: str
    genetics: PlantGenetics
    maturity_age: int
    wither_time: int
    life_cycle_stage: LifeCycleStage = LifeCycleStage.SEED
    age: int = 0
    growth_progress: float = 0.0
    health: float = 1.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "species": self.species,
            "genetics": self.genetics.to_dict(),
            "life_cycle_stage": self.life_cycle_stage.value,
            "age": self.age,
            "maturity_age": self.maturity_age,
            "wither_time": self.wither_time,
            "growth_progress": self.growth_progress,
            "health": self.health,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Plant:
        return cls(
            species=data["species"],
            genetics=PlantGenetics.from_dict(data["genetics"]),
            life_cycle_stage=LifeCycleStage(data["life_cycle_stage"]),
            age=int(data["age"]),
            maturity_age=int(data["maturity_age"]),
            wither_time=int(data["wither_time"]),
            growth_progress=float(data["growth_progress"]),
            health=float(data["health"]),
        )


def create_plant(species: str, rng: Optional[random.Random] = None) -> Plant:
    """Create a new seed of the named species, or of a random known species."""
    from .plant_definitions import PLANTS, find_plant

    template = find_plant(species)
    if template is None:
        template = (rng or random).choice(PLANTS)
    return Plant(
        species=template.species,
        genetics=template.genetics,
        maturity_age=template.maturity_age,
        wither_time=template.wither_time,
    )