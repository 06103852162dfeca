import logging
import math
from typing import Optional

from connectfour.core.config import EngineConfig, DEFAULT_CONFIG
from connectfour.engine.board import Board, clone_board, place_piece
from connectfour.engine.moves import valid_moves, would_win
from connectfour.engine.search import MinimaxSearch
from connectfour.models.enums import Player

logger = logging.getLogger(__name__)


class NoLegalMoveError(ValueError):
    """Raised when a move is requested on a board with no open column."""


def choose_move(board: Board, config: Optional[EngineConfig] = None, player: int = Player.TWO) -> int:
    """
    Picks the column the CPU (`player`) should play. The board is not modified.

    1. Take an immediate win if there is one.
    2. Otherwise block the opponent's immediate win.
    3. Otherwise run minimax on every candidate and keep the best (first one on ties).
    """
    config = config or DEFAULT_CONFIG
    player = Player(player)
    moves = valid_moves(board)

    if not moves:
        raise NoLegalMoveError("No valid moves available")

    # Quick check: can CPU win immediately?
    for col in moves:
        if would_win(board, col, player):
            logger.debug(f"Winning move found: {col}")
            return col

    # Quick check: must CPU block opponent's immediate win?
    for col in moves:
        if would_win(board, col, player.opponent):
            logger.debug(f"Blocking move found: {col}")
            return col

    search = MinimaxSearch(config, player)
    depth = max(config.depth - 1, 0)
    best_col = moves[0]
    best_score = -math.inf

    for col in moves:
        next_board = clone_board(board)
        place_piece(next_board, col, player)

        # Immediate wins were ruled out above; opponent replies next
        score = search.minimax(next_board, depth, -math.inf, math.inf, False)
        logger.debug(f"Column {col}: score {score}")

        if score > best_score:
            best_score = score
            best_col = col

    logger.debug(f"Selected move: {best_col} with score: {best_score} ({search.nodes} nodes)")
    return best_col
