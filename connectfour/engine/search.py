import logging
import math
from typing import Optional

from connectfour.core.config import EngineConfig, DEFAULT_CONFIG
from connectfour.engine.constants import COLS, FULL
from connectfour.engine.board import Board, clone_board, place_piece, check_win, lowest_empty_row
from connectfour.engine.evaluation import evaluate
from connectfour.engine.moves import valid_moves
from connectfour.models.enums import Player

logger = logging.getLogger(__name__)


class MinimaxSearch:
    """
    Depth-bounded minimax with alpha-beta pruning (fail-soft).
    Scores are always from the perspective of `player` (the maximizing side).
    Every explored branch works on its own clone; the caller's board is never written.
    """

    def __init__(self, config: Optional[EngineConfig] = None, player: int = Player.TWO, prune: bool = True):
        self.config = config or DEFAULT_CONFIG
        self.player = Player(player)
        self.opponent = self.player.opponent
        self.prune = prune
        self.nodes = 0

    def reset(self):
        self.nodes = 0

    def minimax(self, board: Board, depth: int, alpha: float, beta: float, maximizing: bool) -> int:
        self.nodes += 1
        moves = valid_moves(board)

        # 1. Board full: draw, whatever depth is left
        if not moves:
            return 0

        # 2. Horizon reached
        if depth == 0:
            return evaluate(board, self.player, self.config)

        # 3. Recursive Search
        mover = self.player if maximizing else self.opponent
        best = -math.inf if maximizing else math.inf

        for col in moves:  # 3, 2, 4, 1...
            next_board = clone_board(board)
            row = place_piece(next_board, col, mover)

            # Immediate win short-circuits: shallower results weigh more
            if check_win(next_board, col, row, mover):
                if maximizing:
                    return self.config.win_score + depth
                return -self.config.win_score - depth

            score = self.minimax(next_board, depth - 1, alpha, beta, not maximizing)

            if maximizing:
                best = max(best, score)
                alpha = max(alpha, score)
            else:
                best = min(best, score)
                beta = min(beta, score)

            if self.prune and beta <= alpha:
                break  # Remaining siblings cannot change the parent's choice

        return best

    def analyze(self, board: Board) -> dict:
        """
        Root report: scores EVERY column with a full window.
        The player to move at the root is `self.player`.
        """
        self.reset()
        depth = max(self.config.depth - 1, 0)

        move_scores = {}
        best_score = None
        best_move = None

        for col in range(COLS):
            if lowest_empty_row(board, col) == FULL:
                move_scores[col] = None
                continue

            next_board = clone_board(board)
            row = place_piece(next_board, col, self.player)
            if check_win(next_board, col, row, self.player):
                score = self.config.win_score + self.config.depth
            else:
                score = self.minimax(next_board, depth, -math.inf, math.inf, False)
            move_scores[col] = score

        # Pick in search order so ties resolve toward the center
        for col in valid_moves(board):
            if best_score is None or move_scores[col] > best_score:
                best_score = move_scores[col]
                best_move = col

        logger.debug(f"Analysis: scores={move_scores} nodes={self.nodes}")

        return {
            "best_move": best_move,
            "best_score": best_score,
            "scores": move_scores,  # Map {0: -40, 1: 38, ...}
            "nodes_explored": self.nodes,
        }
