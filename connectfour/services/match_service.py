"""
Match Service - Headless Round Controller

Owns the live board for a sequence of rounds between two players and is the only
place that mutates it. It handles:
- Turn alternation and move validation
- Win / draw detection after every placement
- CPU turns (delegated to the minimax move selector)
- Turn-timer forfeits, scores, and round restarts

Front-ends (console, GUI) drive it and only render what it reports.
"""

import logging
import time
from typing import Dict, List, Optional

from connectfour.core.config import EngineConfig, DEFAULT_CONFIG
from connectfour.core.events import GameEvents
from connectfour.engine.constants import COLS, FULL
from connectfour.engine.board import create_board, clone_board, place_piece, check_win, check_draw
from connectfour.engine.cpu import choose_move
from connectfour.engine.moves import valid_moves
from connectfour.models.enums import GameMode, MatchStatus, Player
from connectfour.schemas.match_schema import MoveRecord, MatchSnapshot

logger = logging.getLogger(__name__)

# In CPU mode the human always plays first seat
CPU_PLAYER = Player.TWO


class InvalidMoveError(ValueError):
    """Raised when a move cannot be played in the current state of the round."""


class Match:
    def __init__(self, mode: GameMode = GameMode.PVP, config: Optional[EngineConfig] = None,
                 events: Optional[GameEvents] = None):
        self.mode = GameMode(mode)
        self.config = config or DEFAULT_CONFIG
        self.events = events or GameEvents()
        self.scores: Dict[Player, int] = {Player.ONE: 0, Player.TWO: 0}
        self.round_starting_player = Player.ONE
        self._new_round()

    def _new_round(self):
        self.board = create_board()
        self.current_player = self.round_starting_player
        self.status = MatchStatus.IN_PROGRESS
        self.winner: Optional[Player] = None
        self.history: List[MoveRecord] = []

    @property
    def is_over(self) -> bool:
        return self.status != MatchStatus.IN_PROGRESS

    def is_cpu_turn(self) -> bool:
        return self.mode == GameMode.CPU and self.current_player == CPU_PLAYER and not self.is_over

    def player_name(self, player: Player) -> str:
        if self.mode == GameMode.CPU:
            return "CPU" if player == CPU_PLAYER else "You"
        return f"Player {int(player)}"

    def play(self, col: int) -> MoveRecord:
        """
        Drops the current (human) player's piece into `col`.
        Raises InvalidMoveError if the round is over, it is the CPU's turn,
        or the column is unplayable.
        """
        if self.is_cpu_turn():
            raise InvalidMoveError("Not your turn")
        return self._play(col)

    def _play(self, col: int, duration: float = 0.0) -> MoveRecord:
        if self.is_over:
            raise InvalidMoveError("Round is over")
        if not isinstance(col, int) or not 0 <= col < COLS:
            raise InvalidMoveError(f"Invalid move: column {col} is out of bounds")

        player = self.current_player
        row = place_piece(self.board, col, player)
        if row == FULL:
            raise InvalidMoveError(f"Invalid move: column {col} is full")

        record = MoveRecord(player=player, column=col, row=row, duration=duration)
        self.history.append(record)
        logger.info(f"{self.player_name(player)} played column {col} (row {row})")

        if check_win(self.board, col, row, player):
            self._finish(player)
        elif check_draw(self.board):
            self._finish(None)
        else:
            self.current_player = player.opponent

        return record

    def play_cpu(self) -> MoveRecord:
        """Lets the CPU choose and play its move. Only valid on the CPU's turn."""
        if not self.is_cpu_turn():
            raise InvalidMoveError("Not the CPU's turn")

        start_time = time.time()
        col = choose_move(self.board, self.config, CPU_PLAYER)
        duration = round(time.time() - start_time, 3)

        return self._play(col, duration=duration)

    def forfeit(self, player: Optional[Player] = None):
        """
        Turn timer expired: the opponent of `player` (default: player to move) wins.
        The timer only runs on human turns, so the CPU seat cannot forfeit.
        """
        if self.is_over:
            raise InvalidMoveError("Round is over")

        loser = Player(player) if player is not None else self.current_player
        if self.mode == GameMode.CPU and loser == CPU_PLAYER:
            raise InvalidMoveError("The CPU has no turn timer")

        logger.info(f"{self.player_name(loser)} ran out of time")
        self._finish(loser.opponent)

    def _finish(self, winner: Optional[Player]):
        if winner is None:
            self.status = MatchStatus.DRAW
            logger.info("Round ended in a draw")
        else:
            self.status = MatchStatus.WON
            self.winner = winner
            self.scores[winner] += 1
            logger.info(f"{self.player_name(winner)} wins the round")

        self.events.notify_complete(self, winner)

    def restart(self):
        """
        Clears the board for a new round. Scores are preserved.
        The starting player alternates only if the previous round had ended.
        """
        if self.is_over:
            self.round_starting_player = self.round_starting_player.opponent
        self._new_round()

    def snapshot(self) -> MatchSnapshot:
        return MatchSnapshot(
            mode=self.mode,
            status=self.status,
            board=clone_board(self.board),
            current_player=self.current_player,
            winner=self.winner,
            scores={int(p): s for p, s in self.scores.items()},
            valid_moves=[] if self.is_over else valid_moves(self.board),
            last_move=self.history[-1] if self.history else None,
        )
