from enum import IntEnum, StrEnum

class Player(IntEnum):
    ONE = 1
    TWO = 2

    @property
    def opponent(self) -> "Player":
        return Player.TWO if self is Player.ONE else Player.ONE

class GameMode(StrEnum):
    PVP = "pvp"
    CPU = "cpu"

class MatchStatus(StrEnum):
    IN_PROGRESS = "IN_PROGRESS"
    WON = "WON"
    DRAW = "DRAW"
