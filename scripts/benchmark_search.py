#!/usr/bin/env python3
"""
Alpha-Beta Search Benchmark

Runs the CPU's root search on a handful of positions, once with alpha-beta
pruning and once as plain minimax, and reports node counts for each depth.
Pruning must never change the chosen column; any disagreement is reported.

Exit Codes:
  0: Pruned and unpruned searches agree everywhere
  1: At least one position/depth picked a different column
"""

import math
import sys
import time
from typing import List, Tuple

from connectfour.core.config import EngineConfig
from connectfour.engine.board import Board, create_board, place_piece, clone_board
from connectfour.engine.moves import valid_moves
from connectfour.engine.search import MinimaxSearch
from connectfour.models.enums import Player

# --- Configuration ---
DEPTHS = [2, 3, 4, 5]


def build_position(columns: List[int]) -> Board:
    """Plays alternating moves (Player 1 first) into the given columns."""
    board = create_board()
    player = Player.ONE
    for col in columns:
        place_piece(board, col, player)
        player = player.opponent
    return board


POSITIONS = {
    "empty": [],
    "opening": [3, 3, 2],
    "midgame": [3, 2, 3, 3, 4, 4, 2, 5],
    "crowded": [0, 1, 0, 1, 6, 5, 6, 5, 3, 3, 2, 4],
}


def root_search(board: Board, depth: int, prune: bool) -> Tuple[int, int]:
    """Root loop of the move selector without the win/block shortcuts."""
    search = MinimaxSearch(EngineConfig(depth=depth), Player.TWO, prune=prune)
    best_col, best_score = None, -math.inf

    for col in valid_moves(board):
        next_board = clone_board(board)
        place_piece(next_board, col, Player.TWO)
        score = search.minimax(next_board, depth - 1, -math.inf, math.inf, False)
        if score > best_score:
            best_col, best_score = col, score

    return best_col, search.nodes


def main():
    print(f"{'POSITION':<10} | {'DEPTH':<5} | {'PRUNED':>9} | {'MINIMAX':>9} | {'MOVE':<7} | {'TIME':>7}")
    print("-" * 64)

    failures = []
    for name, columns in POSITIONS.items():
        board = build_position(columns)
        for depth in DEPTHS:
            start_time = time.time()
            pruned_col, pruned_nodes = root_search(board, depth, prune=True)
            elapsed = round(time.time() - start_time, 3)
            full_col, full_nodes = root_search(board, depth, prune=False)

            same = pruned_col == full_col
            move = f"{pruned_col}" if same else f"{pruned_col}!={full_col}"
            print(f"{name:<10} | {depth:<5} | {pruned_nodes:>9} | {full_nodes:>9} | {move:<7} | {elapsed:>6}s")

            if not same:
                failures.append((name, depth))

    print("-" * 64)
    if failures:
        print(f"Pruning changed the decision for: {failures}")
        sys.exit(1)
    print("Pruned search agrees with plain minimax on every position.")
    sys.exit(0)


if __name__ == "__main__":
    main()
