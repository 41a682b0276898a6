"""Turn sequencing for a game of Reversi.

``create_game`` produces the game as a lazy stream of ``GameStage`` values.
A stage is only computed when the consumer asks for it, so a renderer can show
each board before the next player is consulted.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from functools import cached_property
from typing import Iterator, Optional

from .game import (
    CLASSIC_BOARD,
    DARK,
    LIGHT,
    SIDE_NAMES,
    Board,
    Coordinate,
    IllegalMoveError,
    is_game_finished,
    is_valid_move,
    make_move,
    opponent,
    valid_moves,
    winner,
)
from .players import Player, PlayerConstructor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameStage:
    """Snapshot of the board and both players at one point of the game."""

    board: Board
    dark: Player
    light: Player
    # Side to move next.
    side: int = DARK
    # Number of stages produced before this one.
    turn: int = 0
    # Square played to reach this stage; ``None`` at the start and after a pass.
    last_move: Optional[Coordinate] = None
    passed: bool = False

    def player(self, side: int) -> Player:
        return self.dark if side == DARK else self.light

    @cached_property
    def finished(self) -> bool:
        return is_game_finished(self.board)

    @property
    def winner(self) -> Optional[int]:
        return winner(self.board)


def _with_player(stage: GameStage, side: int, player: Player) -> GameStage:
    if side == DARK:
        return replace(stage, dark=player)
    return replace(stage, light=player)


def _pass(stage: GameStage, player: Player) -> GameStage:
    logger.debug("turn %d: %s passes", stage.turn, SIDE_NAMES[stage.side])
    stage = _with_player(stage, stage.side, player)
    return replace(
        stage,
        side=opponent(stage.side),
        turn=stage.turn + 1,
        last_move=None,
        passed=True,
    )


def next_stage(stage: GameStage) -> GameStage:
    """Play a single turn and return the resulting stage.

    A side without a legal move passes. Automated players are still shown
    the board and must answer ``None``; human players are not prompted.
    Automated players that answer with an illegal move raise
    ``IllegalMoveError``; human players are asked again.
    """
    if stage.finished:
        raise ValueError("the game is already finished")
    side, board = stage.side, stage.board
    player = stage.player(side)
    if not valid_moves(side, board):
        if player.asked_without_moves:
            move, player = player.next_move(board)
            if move is not None:
                raise IllegalMoveError(side, move)
        return _pass(stage, player)

    while True:
        move, player = player.next_move(board)
        if move is None:
            return _pass(stage, player)
        if is_valid_move(side, board, move):
            break
        if not player.retries_illegal_moves:
            raise IllegalMoveError(side, move)
        logger.warning("%s cannot play %s, asking again", SIDE_NAMES[side], move)

    new_board = make_move(side, board, move)
    assert new_board is not None
    logger.debug("turn %d: %s plays %s", stage.turn, SIDE_NAMES[side], move)
    stage = _with_player(stage, side, player)
    return replace(
        stage,
        board=new_board,
        side=opponent(side),
        turn=stage.turn + 1,
        last_move=move,
        passed=False,
    )


def create_game(
    dark_constructor: PlayerConstructor,
    light_constructor: PlayerConstructor,
    initial_board: Board = CLASSIC_BOARD,
) -> Iterator[GameStage]:
    """Yield every stage of a game, starting with the initial one.

    The last stage yielded is the one where neither side can move.
    """
    stage = GameStage(
        board=initial_board,
        dark=dark_constructor(DARK),
        light=light_constructor(LIGHT),
    )
    yield stage
    while not stage.finished:
        stage = next_stage(stage)
        yield stage


def play_out(
    dark_constructor: PlayerConstructor,
    light_constructor: PlayerConstructor,
    initial_board: Board = CLASSIC_BOARD,
) -> GameStage:
    """Run a game to the end and return its final stage."""
    stage = None
    for stage in create_game(dark_constructor, light_constructor, initial_board):
        pass
    assert stage is not None
    logger.info("game finished after %d turns", stage.turn)
    return stage
