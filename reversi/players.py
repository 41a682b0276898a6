"""Players produce one move per turn for the engine.

Every player exposes ``next_move(board)`` returning the chosen coordinate (or
``None`` to pass) together with the player to consult on its next turn.
Automated players are never changed. Human players share one input stream
between successive states, so an earlier state does not replay its moves.
"""
from __future__ import annotations

import random
from functools import partial
from typing import Callable, Iterable, Iterator, Optional, Tuple, Union

from .bots import DecisionFn, History, greedy_decision, random_decision
from .game import Board, Coordinate, SIDE_NAMES


class HumanPlayer:
    """A player driven by an external stream of coordinates.

    The stream is expected to yield in-bounds coordinates forever; parsing and
    re-prompting happen upstream. The board is ignored. Every state returned
    by ``next_move`` reads from the same stream, which is consumed as it goes.
    """

    retries_illegal_moves = True
    asked_without_moves = False

    def __init__(self, side: int, inputs: Iterator[Coordinate]) -> None:
        self.side = side
        self.inputs = inputs

    def next_move(self, board: Board) -> Tuple[Optional[Coordinate], "HumanPlayer"]:
        try:
            move = next(self.inputs)
        except StopIteration:
            raise RuntimeError(f"input for {SIDE_NAMES[self.side]} ran out") from None
        return tuple(move), HumanPlayer(self.side, self.inputs)

    def __repr__(self) -> str:
        return f"HumanPlayer({SIDE_NAMES[self.side]})"


class AutomatedPlayer:
    """A player that delegates to ``decide(side, history, board)``.

    ``history`` holds the boards this player was asked about on earlier turns,
    oldest first.
    """

    retries_illegal_moves = False
    asked_without_moves = True

    def __init__(self, side: int, decide: DecisionFn, history: History = ()) -> None:
        self.side = side
        self.decide = decide
        self.history = history

    def next_move(self, board: Board) -> Tuple[Optional[Coordinate], "AutomatedPlayer"]:
        move = self.decide(self.side, self.history, board)
        return move, AutomatedPlayer(self.side, self.decide, self.history + (board,))

    def __repr__(self) -> str:
        decide = getattr(self.decide, "func", self.decide)
        name = getattr(decide, "__name__", repr(decide))
        return f"AutomatedPlayer({SIDE_NAMES[self.side]}, {name})"


Player = Union[HumanPlayer, AutomatedPlayer]
PlayerConstructor = Callable[[int], Player]


def create_human_player(side: int, inputs: Iterable[Coordinate]) -> HumanPlayer:
    return HumanPlayer(side, iter(inputs))


def create_automated_player(side: int, decide: DecisionFn) -> AutomatedPlayer:
    return AutomatedPlayer(side, decide)


def create_random_player(side: int, rng: Optional[random.Random] = None) -> AutomatedPlayer:
    if rng is None:
        return AutomatedPlayer(side, random_decision)
    return AutomatedPlayer(side, partial(random_decision, rng=rng))


def create_greedy_player(side: int) -> AutomatedPlayer:
    return AutomatedPlayer(side, greedy_decision)
