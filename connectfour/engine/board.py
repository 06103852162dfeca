from typing import List, Sequence

from connectfour.engine.constants import ROWS, COLS, MAX_MOVES, EMPTY, FULL, CONNECT, DIRECTIONS

Board = List[List[int]]

SYMBOLS = {EMPTY: ".", 1: "X", 2: "O"}


def create_board() -> Board:
    """
    Board uses (col, row) indexing, one list per column.
    Row 0 is the BOTTOM of the board.
    Row 5 is the TOP of the board.
    Values: 0=Empty, 1=Player1, 2=Player2
    """
    return [[EMPTY for _ in range(ROWS)] for _ in range(COLS)]


def clone_board(board: Board) -> Board:
    return [column[:] for column in board]


def lowest_empty_row(board: Board, col: int) -> int:
    """Returns the first empty row of the column scanning bottom-up, or FULL."""
    for r in range(ROWS):
        if board[col][r] == EMPTY:
            return r
    return FULL


def place_piece(board: Board, col: int, player: int) -> int:
    """
    Drops a piece into the specified column (mutates the board).
    Returns the row where it landed, or FULL if the column had no room.
    """
    row = lowest_empty_row(board, col)
    if row == FULL:
        return FULL

    board[col][row] = player
    return row


def check_win(board: Board, col: int, row: int, player: int) -> bool:
    """
    Checks for 4-in-a-row through the piece just placed at (col, row).
    The cell is assumed to hold `player`; only the latest placement should be checked.
    """
    for dc, dr in DIRECTIONS:
        count = 1
        # Check positive direction
        c, r = col + dc, row + dr
        while 0 <= c < COLS and 0 <= r < ROWS and board[c][r] == player:
            count += 1
            c, r = c + dc, r + dr
        # Check negative direction
        c, r = col - dc, row - dr
        while 0 <= c < COLS and 0 <= r < ROWS and board[c][r] == player:
            count += 1
            c, r = c - dc, r - dr

        if count >= CONNECT:
            return True
    return False


def count_pieces(board: Board) -> int:
    return sum(1 for column in board for cell in column if cell != EMPTY)


def is_full(board: Board) -> bool:
    return count_pieces(board) == MAX_MOVES


def check_draw(board: Board) -> bool:
    """Returns True if the board is completely full."""
    return is_full(board)


# --- Formatting for console / debug output ---

def render_board(board: Board) -> str:
    """Generates an ASCII grid representation, top row first."""
    header = " " + " ".join(str(c) for c in range(COLS))
    rows_str = []
    for r in range(ROWS - 1, -1, -1):
        row_cells = [SYMBOLS[board[c][r]] for c in range(COLS)]
        rows_str.append("|" + "|".join(row_cells) + "|")
    return header + "\n" + "\n".join(rows_str)


def board_from_rows(rows: Sequence[Sequence[int]]) -> Board:
    """
    Converts a row-major matrix (Row 0=Top, as drawn on screen) to a Board.
    Gravity is not checked: the matrix must already be a legal position.
    """
    if len(rows) != ROWS or any(len(r) != COLS for r in rows):
        raise ValueError(f"Expected a {ROWS}x{COLS} matrix")

    board = create_board()
    for screen_row, cells in enumerate(rows):
        logical_row = (ROWS - 1) - screen_row
        for c, val in enumerate(cells):
            board[c][logical_row] = int(val)
    return board
