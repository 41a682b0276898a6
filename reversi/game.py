"""Reversi game logic.

Boards are immutable: every update returns a new board and leaves its input
untouched, so boards can be shared freely between game stages and players.
"""
from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple

BOARD_SIZE = 8

# Cell values. A side is either DARK or LIGHT and its opponent is ``-side``.
EMPTY = 0
DARK = 1
LIGHT = -1

SIDE_NAMES = {DARK: "dark", LIGHT: "light"}

Coordinate = Tuple[int, int]
Board = Tuple[Tuple[int, ...], ...]

OFFSETS: List[Coordinate] = [
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
]


class IllegalMoveError(ValueError):
    """Raised when a player insists on a move the rules do not allow."""

    def __init__(self, side: int, move: Coordinate) -> None:
        super().__init__(f"illegal move {move} for {SIDE_NAMES.get(side, side)}")
        self.side = side
        self.move = move


def opponent(side: int) -> int:
    return -side


def within_boundaries(coord: Sequence[int]) -> bool:
    return all(0 <= value < BOARD_SIZE for value in coord)


def get_at(board: Board, coord: Coordinate) -> int:
    """Return the cell at ``coord``.

    Negative indices would silently wrap around, so anything outside the
    board is rejected up front.
    """
    if not within_boundaries(coord):
        raise IndexError(f"position {coord} is outside the board")
    x, y = coord
    return board[x][y]


def put_at(board: Board, cell: int, coord: Coordinate) -> Board:
    """Return a copy of ``board`` with ``cell`` placed at ``coord``."""
    if not within_boundaries(coord):
        raise IndexError(f"position {coord} is outside the board")
    x, y = coord
    row = board[x]
    new_row = row[:y] + (cell,) + row[y + 1:]
    return board[:x] + (new_row,) + board[x + 1:]


def empty_board() -> Board:
    return tuple((EMPTY,) * BOARD_SIZE for _ in range(BOARD_SIZE))


def classic_board() -> Board:
    """Return the standard opening position.

    ::

        L | D
        -----
        D | L
    """
    mid = BOARD_SIZE // 2
    board = empty_board()
    board = put_at(board, LIGHT, (mid - 1, mid - 1))
    board = put_at(board, LIGHT, (mid, mid))
    board = put_at(board, DARK, (mid - 1, mid))
    board = put_at(board, DARK, (mid, mid - 1))
    return board


CLASSIC_BOARD = classic_board()


def board_from_rows(rows: Iterable[Iterable[int]]) -> Board:
    """Build a board from nested lists indexed ``rows[x][y]``."""
    board = tuple(tuple(row) for row in rows)
    if len(board) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in board):
        raise ValueError(f"board must be {BOARD_SIZE}x{BOARD_SIZE}")
    for row in board:
        for cell in row:
            if cell not in (EMPTY, DARK, LIGHT):
                raise ValueError(f"unknown cell value {cell!r}")
    return board


def all_coordinates() -> List[Coordinate]:
    return [(x, y) for x in range(BOARD_SIZE) for y in range(BOARD_SIZE)]


def generate_line(start: Coordinate, offset: Coordinate) -> List[Coordinate]:
    """Return the ray from ``start`` (inclusive) stepping by ``offset``."""
    x, y = start
    dx, dy = offset
    line = []
    while within_boundaries((x, y)):
        line.append((x, y))
        x += dx
        y += dy
    return line


def flippable_positions(side: int, board: Board, line: Sequence[Coordinate]) -> List[Coordinate]:
    """Return the opponent pieces captured along ``line``.

    The first element of ``line`` is the square being played and is skipped.
    The run of opponent pieces after it only flips when it is closed off by a
    piece of ``side``; running into an empty square or off the board captures
    nothing.
    """
    other = opponent(side)
    run: List[Coordinate] = []
    for coord in line[1:]:
        cell = get_at(board, coord)
        if cell == other:
            run.append(coord)
            continue
        if cell == side and run:
            return run
        break
    return []


def pieces_to_flip(side: int, board: Board, move: Coordinate) -> List[Coordinate]:
    if get_at(board, move) != EMPTY:
        return []
    captured: List[Coordinate] = []
    for offset in OFFSETS:
        captured.extend(flippable_positions(side, board, generate_line(move, offset)))
    return captured


def is_valid_move(side: int, board: Board, move: Coordinate) -> bool:
    if not within_boundaries(move) or get_at(board, move) != EMPTY:
        return False
    return bool(pieces_to_flip(side, board, move))


def make_move(side: int, board: Board, move: Coordinate) -> Optional[Board]:
    """Place a piece for ``side`` at ``move``.

    Returns the updated board, or ``None`` if the move is not legal.
    """
    if not is_valid_move(side, board, move):
        return None
    captured = pieces_to_flip(side, board, move)
    new_board = put_at(board, side, move)
    for coord in captured:
        new_board = put_at(new_board, side, coord)
    return new_board


def valid_moves(side: int, board: Board) -> List[Coordinate]:
    return [coord for coord in all_coordinates() if is_valid_move(side, board, coord)]


def is_game_finished(board: Board) -> bool:
    """A game ends once neither side can move, whoever's turn it is."""
    return not valid_moves(DARK, board) and not valid_moves(LIGHT, board)


def score(board: Board) -> Tuple[int, int]:
    dark = sum(cell == DARK for row in board for cell in row)
    light = sum(cell == LIGHT for row in board for cell in row)
    return dark, light


def winner(board: Board) -> Optional[int]:
    """Return the side with more pieces on a finished board.

    ``None`` means the game is tied. Asking for the winner of a game that is
    still in progress is an error.
    """
    if not is_game_finished(board):
        raise ValueError("the game is not finished yet")
    dark, light = score(board)
    if dark > light:
        return DARK
    if light > dark:
        return LIGHT
    return None
