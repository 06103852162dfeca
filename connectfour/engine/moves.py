from typing import List

from connectfour.engine.constants import COLUMN_ORDER, FULL
from connectfour.engine.board import Board, clone_board, lowest_empty_row, place_piece, check_win


def valid_moves(board: Board) -> List[int]:
    """Returns the non-full columns, center column first then alternating outward."""
    return [c for c in COLUMN_ORDER if lowest_empty_row(board, c) != FULL]


def would_win(board: Board, col: int, player: int) -> bool:
    """Checks whether dropping `player` into `col` wins, without touching `board`."""
    if lowest_empty_row(board, col) == FULL:
        return False

    next_board = clone_board(board)
    row = place_piece(next_board, col, player)
    return check_win(next_board, col, row, player)
