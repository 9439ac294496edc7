import json
import random

import pytest

from bytebloom import engine
from bytebloom.events import GameEvent, GameEventKind
from bytebloom.pests import Pest, PestType
from bytebloom.saveload import load_game, save_game
from bytebloom.weather import Weather


def test_save_and_load(tmp_path):
    game_state = engine.new_game(random.Random(1))
    engine.plant_seed(game_state, 0, 0, "tomato")
    filename = tmp_path / "test_game.json"

    save_game(game_state, filename)
    loaded = load_game(filename)

    assert list(game_state.plots) == list(loaded.plots)


def test_round_trip_preserves_everything(tmp_path):
    game_state = engine.new_game(random.Random(2))
    engine.plant_seed(game_state, 1, 2, "Azure Fern")
    game_state.plots[(0, 0)].grid.tiles[2][1].pest = Pest(PestType.SPIDER_MITES, 0.25)
    game_state.inventory["corn"] = 4
    game_state.wallet = 42.5
    game_state.tick_counter = 7
    game_state.current_weather = Weather.RAINY
    game_state.events = [
        GameEvent(GameEventKind.MARKET_CRASH),
        GameEvent(GameEventKind.PEST_INFESTATION, PestType.APHIDS),
    ]
    game_state.market.supply_demand["corn"] = 0.96
    filename = tmp_path / "full.json"

    save_game(game_state, filename)
    loaded = load_game(filename)

    assert loaded == game_state
    assert loaded.plots[(0, 0)].grid.tiles[2][1].plant.species == "Azure Fern"


def test_saved_file_is_json_with_plot_pairs(tmp_path):
    game_state = engine.new_game(random.Random(3))
    filename = tmp_path / "save.json"
    save_game(game_state, str(filename))
    data = json.loads(filename.read_text(encoding="utf-8"))
    assert data["plots"][0][0] == [0, 0]
    assert data["wallet"] == 100.0
    assert data["current_weather"] == "Sunny"


def test_save_overwrites_existing_file(tmp_path):
    filename = tmp_path / "save.json"
    first = engine.new_game(random.Random(4))
    save_game(first, filename)
    second = engine.new_game(random.Random(5))
    second.tick_counter = 99
    save_game(second, filename)
    assert load_game(filename).tick_counter == 99


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_game(tmp_path / "missing.json")


def test_load_malformed_file(tmp_path):
    filename = tmp_path / "bad.json"
    filename.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError):
        load_game(filename)