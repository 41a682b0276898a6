import random
import sys
from pathlib import Path

# Ensure project root is on path
sys.path.append(str(Path(__file__).resolve().parents[1]))

from reversi.bots import BOTS, greedy_decision, random_decision
from reversi.game import CLASSIC_BOARD, DARK, LIGHT, board_from_rows, empty_board, put_at, valid_moves


def test_registry_names():
    assert BOTS == {"random": random_decision, "greedy": greedy_decision}


def test_random_picks_a_legal_move():
    for seed in range(10):
        move = random_decision(DARK, (), CLASSIC_BOARD, rng=random.Random(seed))
        assert move in valid_moves(DARK, CLASSIC_BOARD)


def test_random_is_reproducible_with_seed():
    first = random_decision(LIGHT, (), CLASSIC_BOARD, rng=random.Random(7))
    second = random_decision(LIGHT, (), CLASSIC_BOARD, rng=random.Random(7))
    assert first == second


def test_greedy_breaks_ties_in_scan_order():
    # Every opening move flips exactly one disc.
    assert greedy_decision(DARK, (), CLASSIC_BOARD) == (2, 3)


def test_greedy_prefers_bigger_capture():
    board = empty_board()
    board = put_at(board, DARK, (0, 0))
    board = put_at(board, LIGHT, (0, 1))
    board = put_at(board, DARK, (7, 0))
    board = put_at(board, LIGHT, (7, 1))
    board = put_at(board, LIGHT, (7, 2))
    # (0, 2) flips one disc, (7, 3) flips two.
    assert valid_moves(DARK, board) == [(0, 2), (7, 3)]
    assert greedy_decision(DARK, (), board) == (7, 3)


def test_no_move_available():
    board = board_from_rows([[DARK] * 8] * 8)
    assert random_decision(LIGHT, (), board) is None
    assert greedy_decision(LIGHT, (), board) is None
