"""Console front end: board rendering and keyboard input for human players."""
from __future__ import annotations

import random
import re
from functools import partial
from typing import Callable, Dict, Iterator, Optional

from .bots import BOTS, DecisionFn, random_decision
from .engine import GameStage, create_game
from .game import (
    BOARD_SIZE,
    DARK,
    EMPTY,
    LIGHT,
    SIDE_NAMES,
    Board,
    Coordinate,
    opponent,
    score,
    winner,
    within_boundaries,
)
from .players import (
    PlayerConstructor,
    create_automated_player,
    create_human_player,
    create_random_player,
)

RENDER_SYMBOLS = {DARK: "D", LIGHT: "L", EMPTY: "X"}

PROMPT = "Type a position (two numbers delimited with space) or type quit: "


class QuitGame(Exception):
    """Raised when a human player asks to leave the game."""


def render_board(board: Board) -> str:
    """Return ``board`` as text, one line per ``y`` with ``x`` running left to right."""
    lines = [
        "".join(RENDER_SYMBOLS[board[x][y]] for x in range(BOARD_SIZE))
        for y in range(BOARD_SIZE)
    ]
    return "\n".join(lines) + "\n"


def parse_input(text: str) -> Optional[Coordinate]:
    """Turn a line such as ``"2 3"`` into a coordinate.

    Exactly two numbers within the board are accepted; anything else yields
    ``None``.
    """
    numbers = [int(n) for n in re.findall(r"\d+", text)]
    if len(numbers) != 2 or not within_boundaries(numbers):
        return None
    return numbers[0], numbers[1]


def take_input(
    side: int,
    read: Optional[Callable[[], str]] = None,
    write: Callable[[str], None] = print,
) -> Coordinate:
    """Prompt until a well formed position is entered."""
    if read is None:
        read = input
    write(f"It's {SIDE_NAMES[side]}'s turn.")
    while True:
        write(PROMPT)
        text = read().strip()
        if text == "quit":
            raise QuitGame(SIDE_NAMES[side])
        position = parse_input(text)
        if position is not None:
            return position
        write("Invalid input. Try again.")


def lazy_input(
    side: int, input_fn: Callable[[int], Coordinate] = take_input
) -> Iterator[Coordinate]:
    """Endless stream of positions, read only when the next one is needed."""
    while True:
        yield input_fn(side)


def result_message(board: Board) -> str:
    side = winner(board)
    if side is None:
        return "It's a tie!"
    return f"{SIDE_NAMES[side]} wins!"


def _bot_constructor(
    decide: DecisionFn, rng: Optional[random.Random]
) -> PlayerConstructor:
    if decide is random_decision:
        return partial(create_random_player, rng=rng)
    return partial(create_automated_player, decide=decide)


def build_players(
    rng: Optional[random.Random] = None,
    input_fn: Callable[[int], Coordinate] = take_input,
) -> Dict[str, PlayerConstructor]:
    """Return the player constructors selectable by name.

    ``human`` reads from the console; every entry of ``BOTS`` becomes a
    computer player under the same name.
    """
    players: Dict[str, PlayerConstructor] = {
        "human": lambda side: create_human_player(side, lazy_input(side, input_fn)),
    }
    for name, decide in BOTS.items():
        players[name] = _bot_constructor(decide, rng)
    return players


def play_game(
    dark: PlayerConstructor,
    light: PlayerConstructor,
    write: Callable[[str], None] = print,
) -> GameStage:
    """Play a game in the console and return its final stage."""
    stage = None
    for stage in create_game(dark, light):
        if stage.passed:
            write(f"{SIDE_NAMES[opponent(stage.side)]} has no valid move and passes.")
        write(render_board(stage.board))
    assert stage is not None
    dark_count, light_count = score(stage.board)
    write("Game finished!")
    write(f"dark {dark_count} - light {light_count}")
    write(result_message(stage.board))
    return stage
