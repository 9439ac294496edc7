# bytebloom

A small gardening simulation. A game starts with a 10×10 plot of loamy soil
and a wallet of 100. You plant seeds, water and fertilize tiles, remove pests,
harvest plants once they fruit, and trade produce on a market whose prices
drift over time.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The command

Each run of `bytebloom` carries out one command. Except for `new` and `load`,
the game is read from `default_save.json` in the current directory, or a new
game is started when that file cannot be read. After the command has run, a
full-screen garden view opens; press `q` to leave it.

```
bytebloom new                          # start a fresh game
bytebloom plant 3 4 --seed "Sunpetal"  # plant a seed at x=3, y=4
bytebloom water 3 4                    # add 0.2 moisture to a tile
bytebloom fertilize 3 4 --npk-mix 0.1,0.1,0.1
bytebloom pesticide 3 4                # remove a pest from a tile
bytebloom harvest 3 4                  # harvest a fruiting plant
bytebloom view --from 0 --to 9         # print the garden as text
bytebloom forecast 5                   # random weather for the next 5 ticks
bytebloom market view                  # list market prices
bytebloom market buy tomato 2
bytebloom market sell tomato 1
bytebloom save mygarden.json           # write the default save (or a new game) to a file
bytebloom load mygarden.json           # open a saved file
```

Coordinates and quantities must be non-negative integers. Actions that cannot
be done (an occupied or empty tile, coordinates off the grid, a plant that is
not fruiting, a bad NPK mix, too little money or stock) print a message
instead of changing the game. `load` exits with status 1 when the file cannot
be read.

Seeds are named after the varieties in the catalogue, such as
"Crimson Bloom", "Azure Fern" or "Golden Pine". An unknown seed name gives a
random variety from the catalogue.

`view` prints `s` for a seed, `p` for a sprout, `P` for a growing, mature or
fruiting plant, `x` for a withering one and `.` for an empty tile. The
full-screen view uses `s`, `p`, `P` growing, `M` mature, `F` fruiting, `x`
and `.`, with the tick counter and wallet in a status bar below. The
full-screen view needs the `curses` module; where it is missing, an error is
printed instead.

## What the command does not do

- It never writes the game back after a command: planting, watering,
  trading and the rest change only the game held in memory for that run.
  `save` writes the default save (or a fresh game) to another file, and
  `load` does not make the loaded file the default.
- It never advances time. Plants grow, pests spread and prices move only
  when `bytebloom.engine.run_game_tick` is called from Python.
- The `--from` and `--to` options of `view` are required but have no effect.

## How the garden behaves

Each tick picks a weather type (sunny, cloudy, rainy or heatwave) that changes
soil moisture. Plants use water and nutrients, and grow more slowly in a
heatwave or when moisture is outside their ideal range. Pests can appear on
planted tiles, grow worse, spread to neighbouring plants and damage them.
Market prices change a little every tick, and selling many of one item pushes
its price down for a while.

## Using it as a library

```python
import random

from bytebloom.engine import new_game, plant_seed, run_game_tick, GardenError
from bytebloom.saveload import save_game, load_game
from bytebloom.weather import Weather

rng = random.Random(7)
state = new_game(rng)
plant_seed(state, 0, 0, "Crimson Bloom")
messages = run_game_tick(state, Weather.SUNNY, rng)  # pest messages of the tick
save_game(state, "garden.json")
restored = load_game("garden.json")
```

Player actions live in `bytebloom.engine` (`plant_seed`, `water_tile`,
`fertilize_tile`, `apply_pesticide`, `harvest`, `forecast`) and raise
`GardenError` when they cannot be done. Trading lives in `bytebloom.economy`:
`buy_item` and `sell_item` return the new wallet balance and raise
`MarketError`. Functions that use chance take an optional `random.Random`.