"""Decision functions for computer players."""
from __future__ import annotations

import random
from typing import Callable, Dict, Optional, Tuple

from .game import Board, Coordinate, pieces_to_flip, valid_moves

History = Tuple[Board, ...]
DecisionFn = Callable[[int, History, Board], Optional[Coordinate]]


def random_decision(
    side: int, history: History, board: Board, rng: Optional[random.Random] = None
) -> Optional[Coordinate]:
    """Pick any legal move with equal probability.

    ``rng`` defaults to the module level generator so ``random.seed`` applies.
    """
    moves = valid_moves(side, board)
    if not moves:
        return None
    if rng is None:
        return random.choice(moves)
    return rng.choice(moves)


def greedy_decision(side: int, history: History, board: Board) -> Optional[Coordinate]:
    """Return the legal move capturing the largest number of pieces.

    Equal captures are settled in favour of the earliest square in row-major
    order, which is the order ``valid_moves`` lists them in.
    """
    moves = valid_moves(side, board)
    if not moves:
        return None
    return max(moves, key=lambda m: len(pieces_to_flip(side, board, m)))


BOTS: Dict[str, DecisionFn] = {
    "random": random_decision,
    "greedy": greedy_decision,
}
