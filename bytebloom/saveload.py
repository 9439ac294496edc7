"""Saving and loading games as JSON files."""

from __future__ import annotations

import json
import os
from typing import Union

from .garden import MainGameState

PathLike = Union[str, "os.PathLike[str]"]


def save_game(game_state: MainGameState, filename: PathLike) -> None:
    """Write the game state to a JSON file, replacing any existing file."""
    serialized = json.dumps(game_state.to_dict())
    with open(filename, "w", encoding="utf-8") as handle:
        handle.write(serialized)


def load_game(filename: PathLike) -> MainGameState:
    """Read a game state from a JSON file written by save_game."""
    with open(filename, encoding="utf-8") as handle:
        data = json.load(handle)
    return MainGameState.from_dict(data)