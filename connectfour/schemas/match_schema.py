from pydantic import BaseModel, ConfigDict
from typing import Dict, List, Optional

class MoveRecord(BaseModel):
    model_config = ConfigDict(extra='ignore')

    player: int
    column: int
    row: int

    # Seconds spent choosing the move (CPU only)
    duration: Optional[float] = 0.0

class MatchSnapshot(BaseModel):
    mode: str
    status: str
    board: List[List[int]]  # Column-major, row 0 = bottom
    current_player: int
    winner: Optional[int] = None
    scores: Dict[int, int]
    valid_moves: List[int]
    last_move: Optional[MoveRecord] = None
