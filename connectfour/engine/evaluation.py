from typing import Optional, Tuple

from connectfour.core.config import EngineConfig, DEFAULT_CONFIG
from connectfour.engine.constants import ROWS, COLS, CENTER, EMPTY, CONNECT, DIRECTIONS
from connectfour.engine.board import Board
from connectfour.models.enums import Player


def count_patterns(board: Board, player: int) -> Tuple[int, int]:
    """
    Counts open 4-cell windows for `player`.
    Returns (twos, threes): windows with exactly 2 (or 3) of the player's pieces
    and only empty cells otherwise. Windows touching an opponent piece never count.
    """
    twos = 0
    threes = 0

    for col in range(COLS):
        for row in range(ROWS):
            for dc, dr in DIRECTIONS:
                # Window must fit entirely on the grid
                end_c = col + dc * (CONNECT - 1)
                end_r = row + dr * (CONNECT - 1)
                if not (0 <= end_c < COLS and 0 <= end_r < ROWS):
                    continue

                player_count = 0
                empty_count = 0
                for i in range(CONNECT):
                    cell = board[col + dc * i][row + dr * i]
                    if cell == player:
                        player_count += 1
                    elif cell == EMPTY:
                        empty_count += 1

                if player_count + empty_count != CONNECT:
                    continue
                if player_count == 3:
                    threes += 1
                elif player_count == 2:
                    twos += 1

    return twos, threes


def evaluate(board: Board, player: int = Player.TWO, config: Optional[EngineConfig] = None) -> int:
    """
    Static score of the position from `player`'s perspective.
    Positive favours `player`, negative favours the opponent, 0 for an empty board.
    """
    config = config or DEFAULT_CONFIG
    opponent = Player(player).opponent
    score = 0

    # Center column control - pieces in center are more valuable
    weighted_columns = [
        (CENTER, config.center_weight),
        (CENTER - 1, config.adjacent_weight),
        (CENTER + 1, config.adjacent_weight),
    ]
    for col, weight in weighted_columns:
        for cell in board[col]:
            if cell == player:
                score += weight
            elif cell == opponent:
                score -= weight

    # Pattern-based evaluation
    own_twos, own_threes = count_patterns(board, player)
    opp_twos, opp_threes = count_patterns(board, opponent)

    score += own_threes * config.three_weight + own_twos * config.two_weight
    score -= opp_threes * config.three_weight + opp_twos * config.two_weight

    return score
