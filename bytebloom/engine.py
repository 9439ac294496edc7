"""The simulation engine: starting a game, player actions and game ticks."""

from __future__ import annotations

import random
from dataclasses import replace
from typing import Any, Optional

from . import economy
from .garden import MainGameState, Plot, Tile, create_grid
from .pests import Pest, PestType
from .plant import LifeCycleStage, Plant, create_plant
from .weather import Weather

HOME_PLOT = (0, 0)
STARTING_WALLET = 100.0
GRID_SIZE = 10

_WEATHER_CHOICES = (Weather.SUNNY, Weather.CLOUDY, Weather.RAINY, Weather.HEATWAVE)
_PEST_TYPES = (PestType.APHIDS, PestType.SPIDER_MITES, PestType.WHITEFLIES)
_MOISTURE_CHANGE = {
    Weather.SUNNY: -0.05,
    Weather.RAINY: 0.2,
    Weather.HEATWAVE: -0.1,
    Weather.CLOUDY: 0.0,
}
_PLANT_WATER_USE = 0.01
_WATERING_AMOUNT = 0.2
_SPREAD_CHANCE = 0.2
_APPEAR_CHANCE = 0.1
_NEW_PEST_LEVEL = 0.1
_INFESTATION_GROWTH = 0.05
_PEST_DAMAGE = 0.1


class GardenError(Exception):
    """A player action that cannot be carried out on the garden."""


def _clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return min(max(value, low), high)


def _tile(game_state: MainGameState, x: int, y: int) -> Tile:
    plot = game_state.plots.get(HOME_PLOT)
    if plot is None:
        raise GardenError(f"There is no plot at {HOME_PLOT}")
    tile = plot.grid.get_tile(x, y)
    if tile is None:
        raise GardenError(f"Invalid coordinates: ({x}, {y})")
    return tile


def new_game(rng: Optional[random.Random] = None) -> MainGameState:
    """A fresh game with one 10x10 plot at the origin and 100 in the wallet."""
    plot = Plot(x=0, y=0, grid=create_grid(GRID_SIZE, GRID_SIZE, rng))
    return MainGameState(
        plots={HOME_PLOT: plot},
        tick_counter=0,
        inventory={},
        wallet=STARTING_WALLET,
        market=economy.Market(),
        current_weather=Weather.SUNNY,
        events=[],
    )


def plant_seed(game_state: MainGameState, x: int, y: int, seed: str) -> Plant:
    """Plant a seed of the named species on an empty tile and return it."""
    tile = _tile(game_state, x, y)
    if tile.plant is not None:
        raise GardenError(f"There is already a plant at ({x}, {y})")
    tile.plant = create_plant(seed)
    return tile.plant


def harvest(
    game_state: MainGameState, x: int, y: int, rng: Optional[random.Random] = None
) -> tuple[str, int]:
    """Harvest a fruiting plant into the inventory; return species and yield."""
    tile = _tile(game_state, x, y)
    plant = tile.plant
    if plant is None:
        raise GardenError(f"There is no plant at ({x}, {y})")
    if plant.life_cycle_stage is not LifeCycleStage.FRUITING:
        raise GardenError(f"The plant at ({x}, {y}) is not ready to be harvested.")
    low, high = plant.genetics.yield_range
    amount = (rng or random).randint(low, high)
    game_state.inventory[plant.species] = (
        game_state.inventory.get(plant.species, 0) + amount
    )
    tile.plant = None
    return plant.species, amount


def water_tile(game_state: MainGameState, x: int, y: int) -> float:
    """Water a tile and return its new moisture."""
    soil = _tile(game_state, x, y).soil
    soil.soil_moisture = _clamp(soil.soil_moisture + _WATERING_AMOUNT)
    return soil.soil_moisture


def fertilize_tile(game_state: MainGameState, x: int, y: int, npk_mix: str) -> None:
    """Add an "N,P,K" mix such as "0.1,0.1,0.1" to a tile's nutrients."""
    nutrients = _tile(game_state, x, y).soil.soil_nutrients
    parts = npk_mix.split(",")
    try:
        nitrogen, phosphorus, potassium = (float(part.strip()) for part in parts)
    except ValueError:
        raise GardenError(
            "Invalid NPK mix format. Please use a format like '0.1,0.1,0.1'."
        ) from None
    nutrients.nitrogen = _clamp(nutrients.nitrogen + nitrogen)
    nutrients.phosphorus = _clamp(nutrients.phosphorus + phosphorus)
    nutrients.potassium = _clamp(nutrients.potassium + potassium)


def apply_pesticide(game_state: MainGameState, x: int, y: int) -> None:
    """Remove the pest from a tile."""
    tile = _tile(game_state, x, y)
    if tile.pest is None:
        raise GardenError(f"No pest to remove at ({x}, {y})")
    tile.pest = None


def _neighbours(x: int, y: int, width: int, height: int) -> list[tuple[int, int]]:
    candidates = []
    if x > 0:
        candidates.append((x - 1, y))
    if x < width - 1:
        candidates.append((x + 1, y))
    if y > 0:
        candidates.append((x, y - 1))
    if y < height - 1:
        candidates.append((x, y + 1))
    return candidates


def process_pests(state: MainGameState, rng: Any = None) -> list[str]:
    """Grow, spread and spawn pests; return messages describing what happened."""
    source = rng or random
    messages: list[str] = []
    for plot in state.plots.values():
        tiles = plot.grid.tiles
        updates: list[tuple[int, int, Pest]] = []
        arrivals: list[tuple[int, int, Pest]] = []
        for y, row in enumerate(tiles):
            for x, tile in enumerate(row):
                if tile.pest is not None:
                    updates.append(
                        (
                            x,
                            y,
                            replace(
                                tile.pest,
                                infestation_level=tile.pest.infestation_level
                                + _INFESTATION_GROWTH,
                            ),
                        )
                    )
                    if source.random() < _SPREAD_CHANCE:
                        candidates = _neighbours(x, y, len(row), len(tiles))
                        if candidates:
                            nx, ny = source.choice(candidates)
                            target = plot.grid.get_tile(nx, ny)
                            if (
                                target is not None
                                and target.plant is not None
                                and target.pest is None
                            ):
                                arrivals.append((nx, ny, replace(tile.pest)))
                elif tile.plant is not None and source.random() < _APPEAR_CHANCE:
                    pest_type = _PEST_TYPES[source.randrange(len(_PEST_TYPES))]
                    arrivals.append((x, y, Pest(pest_type, _NEW_PEST_LEVEL)))
                    messages.append(f"A pest has appeared: {pest_type} at ({x}, {y})")

        for x, y, pest in updates:
            tile = tiles[y][x]
            if tile.plant is not None:
                tile.plant.health -= pest.infestation_level * _PEST_DAMAGE
                messages.append(
                    f"Pest at ({x}, {y}) is damaging the plant. "
                    f"Plant health: {tile.plant.health}"
                )
            tile.pest = pest
        for x, y, pest in arrivals:
            tiles[y][x].pest = pest
            messages.append(f"Pest has spread to ({x}, {y})")
    return messages


def process_weather(state: MainGameState, rng: Any = None) -> Weather:
    """Pick the next weather at random and return it."""
    state.current_weather = (rng or random).choice(_WEATHER_CHOICES)
    return state.current_weather


def _stage_for(plant: Plant) -> LifeCycleStage:
    if plant.age >= plant.wither_time:
        return LifeCycleStage.WITHERING
    if plant.age >= plant.maturity_age:
        return LifeCycleStage.FRUITING
    if plant.age >= plant.maturity_age // 2:
        return LifeCycleStage.GROWING
    if plant.age > 0:
        return LifeCycleStage.SPROUT
    return plant.life_cycle_stage


def process_plants(state: MainGameState) -> None:
    """Advance the growth and life cycle of every plant."""
    for plot in state.plots.values():
        for row in plot.grid.tiles:
            for tile in row:
                plant = tile.plant
                if plant is None:
                    continue
                growth_rate = 1.0
                if state.current_weather is Weather.HEATWAVE:
                    growth_rate *= 0.5
                low, high = plant.genetics.ideal_moisture_range
                if not low <= tile.soil.soil_moisture <= high:
                    growth_rate *= 0.8
                plant.growth_progress += growth_rate
                if plant.growth_progress >= 1.0:
                    plant.age += 1
                    plant.growth_progress -= 1.0
                plant.life_cycle_stage = _stage_for(plant)


def process_environment(state: MainGameState) -> None:
    """Apply the weather and plant consumption to every tile's soil."""
    change = _MOISTURE_CHANGE[state.current_weather]
    for plot in state.plots.values():
        for row in plot.grid.tiles:
            for tile in row:
                soil = tile.soil
                nutrients = soil.soil_nutrients
                soil.soil_moisture += change
                if tile.plant is not None:
                    nitrogen, phosphorus, potassium = (
                        tile.plant.genetics.nutrient_consumption
                    )
                    soil.soil_moisture -= _PLANT_WATER_USE
                    nutrients.nitrogen -= nitrogen
                    nutrients.phosphorus -= phosphorus
                    nutrients.potassium -= potassium
                soil.soil_moisture = _clamp(soil.soil_moisture)
                nutrients.nitrogen = _clamp(nutrients.nitrogen)
                nutrients.phosphorus = _clamp(nutrients.phosphorus)
                nutrients.potassium = _clamp(nutrients.potassium)


def run_game_tick(
    state: MainGameState, weather: Optional[Weather] = None, rng: Any = None
) -> list[str]:
    """Advance the game by one tick; return the pest messages of the tick."""
    state.tick_counter += 1
    if weather is not None:
        state.current_weather = weather
    else:
        process_weather(state, rng)
    process_environment(state)
    process_plants(state)
    messages = process_pests(state, rng)
    economy.update_market_prices(state.market, rng)
    return messages


def forecast(
    game_state: MainGameState, ticks: int, rng: Any = None
) -> list[tuple[int, Weather]]:
    """A random weather outlook for the next ticks, as (tick, weather) pairs."""
    source = rng or random
    return [
        (game_state.tick_counter + offset, source.choice(_WEATHER_CHOICES))
        for offset in range(1, ticks + 1)
    ]