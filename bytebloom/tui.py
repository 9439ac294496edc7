"""A full-screen terminal view of the garden and the player's status."""

from __future__ import annotations

from typing import Any

from .garden import MainGameState
from .plant import LifeCycleStage
from .engine import HOME_PLOT

_STAGE_SYMBOLS = {
    LifeCycleStage.SEED: "s",
    LifeCycleStage.SPROUT: "p",
    LifeCycleStage.GROWING: "P",
    LifeCycleStage.MATURE: "M",
    LifeCycleStage.FRUITING: "F",
    LifeCycleStage.WITHERING: "x",
}

_GARDEN_TITLE = "Garden View"
_STATUS_TITLE = "Command/Status Bar"
_QUIT_KEY = ord("q")


def render_garden(game_state: MainGameState) -> str:
    """The home plot as rows of stage symbols, or a notice that it is missing."""
    plot = game_state.plots.get(HOME_PLOT)
    if plot is None:
        return "No plot found."
    return "".join(
        "".join(
            f"{_STAGE_SYMBOLS[tile.plant.life_cycle_stage] if tile.plant else '.'} "
            for tile in row
        )
        + "\n"
        for row in plot.grid.tiles
    )


def status_line(game_state: MainGameState) -> str:
    """The tick counter and the wallet balance."""
    return f"Tick: {game_state.tick_counter} | Money: ${game_state.wallet:.2f}"


def _draw_box(curses: Any, screen: Any, top: int, left: int, height: int,
              width: int, title: str, text: str) -> None:
    if height < 2 or width < 2:
        return
    try:
        window = screen.derwin(height, width, top, left)
        window.box()
        window.addnstr(0, 1, title, width - 2)
        for row, line in enumerate(text.splitlines()[: height - 2], start=1):
            window.addnstr(row, 1, line, width - 2)
    except curses.error:
        pass


def _draw(curses: Any, screen: Any, game_state: MainGameState) -> None:
    screen.erase()
    rows, cols = screen.getmaxyx()
    inner_rows, inner_cols = rows - 2, cols - 2
    garden_rows = inner_rows * 80 // 100
    status_rows = inner_rows - garden_rows
    _draw_box(curses, screen, 1, 1, garden_rows, inner_cols,
              _GARDEN_TITLE, render_garden(game_state))
    _draw_box(curses, screen, 1 + garden_rows, 1, status_rows, inner_cols,
              _STATUS_TITLE, status_line(game_state))
    screen.refresh()


def draw_ui(game_state: MainGameState) -> None:
    """Show the garden full-screen until the player presses q.

    Raises OSError when the terminal cannot host the interface.
    """
    try:
        import curses
    except ImportError as error:
        raise OSError("terminal interface is not available") from error

    def run_app(screen: Any) -> None:
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        while True:
            _draw(curses, screen, game_state)
            if screen.getch() == _QUIT_KEY:
                return

    try:
        curses.wrapper(run_app)
    except curses.error as error:
        raise OSError(str(error)) from error