"""The command line: parse a command, apply it to the game and show the garden."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from . import economy, engine, saveload
from .engine import HOME_PLOT, GardenError
from .garden import MainGameState
from .plant import LifeCycleStage, create_plant
from .tui import draw_ui

DEFAULT_SAVE = "default_save.json"

_VIEW_SYMBOLS = {
    LifeCycleStage.SEED: "s",
    LifeCycleStage.SPROUT: "p",
    LifeCycleStage.GROWING: "P",
    LifeCycleStage.MATURE: "P",
    LifeCycleStage.FRUITING: "P",
    LifeCycleStage.WITHERING: "x",
}


def _unsigned(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"{value} is not a non-negative integer")
    return number


def _add_coordinates(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("x", type=_unsigned)
    parser.add_argument("y", type=_unsigned)


def build_parser() -> argparse.ArgumentParser:
    """The argument parser for every game command."""
    parser = argparse.ArgumentParser(prog="bytebloom", description="A garden simulation game.")
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("new", help="Starts a new game")
    save = commands.add_parser("save", help="Saves the game state")
    save.add_argument("filename", help="The filename to save the game to")
    load = commands.add_parser("load", help="Loads the game state")
    load.add_argument("filename", help="The filename to load the game from")

    view = commands.add_parser("view", help="Views the garden")
    view.add_argument("--from", dest="from_", required=True)
    view.add_argument("--to", required=True)

    plant = commands.add_parser("plant", help="Plants a seed")
    _add_coordinates(plant)
    plant.add_argument("--seed", required=True)

    _add_coordinates(commands.add_parser("water", help="Waters a tile"))

    fertilize = commands.add_parser("fertilize", help="Fertilizes a tile")
    _add_coordinates(fertilize)
    fertilize.add_argument("--npk-mix", dest="npk_mix", required=True)

    _add_coordinates(commands.add_parser("harvest", help="Harvests a mature plant"))
    _add_coordinates(commands.add_parser("pesticide", help="Applies pesticide to a tile"))

    market = commands.add_parser("market", help="Trades at the market")
    market_commands = market.add_subparsers(dest="market_command", required=True)
    buy = market_commands.add_parser("buy", help="Buys an item from the market")
    buy.add_argument("item")
    buy.add_argument("quantity", type=_unsigned)
    sell = market_commands.add_parser("sell", help="Sells an item to the market")
    sell.add_argument("item")
    sell.add_argument("quantity", type=_unsigned)
    market_commands.add_parser("view", help="Shows market prices")

    forecast = commands.add_parser("forecast", help="Forecasts the weather")
    forecast.add_argument("ticks", type=_unsigned, help="The number of ticks to forecast")
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse the command line; exits with a usage message on bad input."""
    return build_parser().parse_args(argv)


def view_garden(game_state: MainGameState) -> str:
    """The home plot as rows of symbols; empty when there is no home plot."""
    plot = game_state.plots.get(HOME_PLOT)
    if plot is None:
        return ""
    return "".join(
        "".join(
            f"{_VIEW_SYMBOLS[tile.plant.life_cycle_stage] if tile.plant else '.'} "
            for tile in row
        )
        + "\n"
        for row in plot.grid.tiles
    )


def _handle_market(args: argparse.Namespace, game_state: MainGameState) -> list[str]:
    if args.market_command == "view":
        return [economy.view_market(game_state.market)]
    trade = economy.buy_item if args.market_command == "buy" else economy.sell_item
    verb, noun = ("Bought", "buying") if args.market_command == "buy" else ("Sold", "selling")
    try:
        game_state.wallet = trade(
            game_state.inventory, game_state.wallet, game_state.market,
            args.item, args.quantity,
        )
    except economy.MarketError as error:
        return [f"Error {noun} item: {error}"]
    return [f"{verb} {args.quantity} {args.item}(s)."]


def handle_command(args: argparse.Namespace, game_state: MainGameState) -> list[str]:
    """Apply a parsed command to the game and return the lines to show."""
    command = args.command
    if command in ("new", "load", "save"):
        return []
    if command == "view":
        text = view_garden(game_state)
        return [text.rstrip("\n")] if text else []
    if command == "market":
        return _handle_market(args, game_state)
    if command == "forecast":
        outlook = engine.forecast(game_state, args.ticks)
        return ["Weather forecast:"] + [f"Tick {tick}: {weather}" for tick, weather in outlook]

    x, y = args.x, args.y
    try:
        if command == "plant":
            engine.plant_seed(game_state, x, y, args.seed)
            return [f"Planted a {args.seed} at ({x}, {y})"]
        if command == "water":
            moisture = engine.water_tile(game_state, x, y)
            return [f"Watered tile ({x}, {y}). New moisture: {moisture}"]
        if command == "fertilize":
            engine.fertilize_tile(game_state, x, y, args.npk_mix)
            return [f"Fertilized tile ({x}, {y})."]
        if command == "harvest":
            species, amount = engine.harvest(game_state, x, y)
            return [f"Harvested {amount} of {species} from ({x}, {y})"]
        if command == "pesticide":
            engine.apply_pesticide(game_state, x, y)
            return [f"Applied pesticide to tile ({x}, {y})"]
    except GardenError as error:
        return [str(error)]
    raise ValueError(f"unknown command: {command}")


def _load_default() -> Optional[MainGameState]:
    try:
        return saveload.load_game(DEFAULT_SAVE)
    except OSError:
        return None


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run one command, then show the garden until the player quits."""
    print("Hello from ByteBloom Gardens!")
    args = parse_args(argv)

    if args.command == "save":
        game_state = _load_default() or engine.new_game()
        saveload.save_game(game_state, args.filename)
        print(f"Game saved to {args.filename}")
        return 0

    if args.command == "new":
        print("Starting a new game.")
        game_state = engine.new_game()
    elif args.command == "load":
        print(f"Loading game from {args.filename}.")
        try:
            game_state = saveload.load_game(args.filename)
        except OSError as error:
            print(f"Failed to load game from specified file: {error}")
            return 1
    else:
        loaded = _load_default()
        if loaded is None:
            print("No saved game found, starting a new one.")
            loaded = engine.new_game()
        game_state = loaded

    for line in handle_command(args, game_state):
        print(line)

    tomato = create_plant("tomato")
    print(f"Created a plant: {tomato.species}")
    print(f"The price of corn is: {economy.get_market_price('corn'):g}")

    try:
        draw_ui(game_state)
    except OSError as error:
        print(f"Error drawing UI: {error}")
    return 0