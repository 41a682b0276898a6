import random
import sys
from pathlib import Path

import pytest

# Ensure project root is on path
sys.path.append(str(Path(__file__).resolve().parents[1]))

from reversi.bots import greedy_decision
from reversi.game import CLASSIC_BOARD, DARK, LIGHT, make_move, valid_moves
from reversi.players import (
    AutomatedPlayer,
    HumanPlayer,
    create_automated_player,
    create_greedy_player,
    create_human_player,
    create_random_player,
)


def test_human_player_consumes_one_input_per_turn():
    player = create_human_player(DARK, [(2, 3), (5, 5)])
    move, player = player.next_move(CLASSIC_BOARD)
    assert move == (2, 3)
    # The board is not looked at.
    move, player = player.next_move(None)
    assert move == (5, 5)
    assert isinstance(player, HumanPlayer)
    assert player.side == DARK


def test_human_player_out_of_input():
    player = create_human_player(LIGHT, [])
    with pytest.raises(RuntimeError):
        player.next_move(CLASSIC_BOARD)


def test_automated_player_keeps_history():
    seen = []

    def decide(side, history, board):
        seen.append(history)
        return valid_moves(side, board)[0]

    player = create_automated_player(DARK, decide)
    assert player.history == ()
    move, next_player = player.next_move(CLASSIC_BOARD)
    assert move == (2, 3)
    assert next_player.history == (CLASSIC_BOARD,)
    # The original player is unchanged.
    assert player.history == ()

    board = make_move(DARK, CLASSIC_BOARD, move)
    _, last_player = next_player.next_move(board)
    assert last_player.history == (CLASSIC_BOARD, board)
    assert seen == [(), (CLASSIC_BOARD,)]


def test_greedy_player():
    player = create_greedy_player(LIGHT)
    assert isinstance(player, AutomatedPlayer)
    assert player.decide is greedy_decision
    move, _ = player.next_move(CLASSIC_BOARD)
    assert move == (2, 4)


def test_random_player_uses_given_rng():
    player = create_random_player(DARK, random.Random(3))
    expected = random.Random(3).choice(valid_moves(DARK, CLASSIC_BOARD))
    move, _ = player.next_move(CLASSIC_BOARD)
    assert move == expected
    assert "random_decision" in repr(player)


def test_human_states_share_the_input_stream():
    first = create_human_player(DARK, [(2, 3), (5, 4)])
    _, second = first.next_move(CLASSIC_BOARD)
    assert second.inputs is first.inputs
    # Asking the earlier state again continues where the stream left off.
    move, _ = first.next_move(CLASSIC_BOARD)
    assert move == (5, 4)
