# connectfour/engine/constants.py

# --- Board Dimensions ---
ROWS = 6
COLS = 7
MAX_MOVES = ROWS * COLS
CENTER = COLS // 2

# --- Cell Values ---
EMPTY = 0

# Returned by lowest_empty_row / place_piece when a column has no room left
FULL = -1

# A line needs this many pieces to win
CONNECT = 4

# Direction vectors as (col_delta, row_delta): Horizontal, Vertical, Diagonal /, Diagonal \
DIRECTIONS = [(1, 0), (0, 1), (1, 1), (1, -1)]

# --- Optimization ---
# Search center columns first to maximize Alpha-Beta pruning efficiency
COLUMN_ORDER = [CENTER + (i + 1) // 2 * (-1 if i % 2 else 1) for i in range(COLS)]
