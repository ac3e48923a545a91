"""The two sides of an Othello game"""

from enum import Enum
from typing import Self


class Player(Enum):
    BLACK = "black"
    WHITE = "white"

    @classmethod
    def from_name(cls, name: str) -> Self:
        """Accepts 'black' / 'white' in any casing."""
        return cls[name.upper()]

    def opponent(self) -> "Player":
        return Player.WHITE if self == Player.BLACK else Player.BLACK

    def sign(self, value: int) -> int:
        """Scores are seen from Black's side: positive favours Black, negative favours White."""
        return value if self == Player.BLACK else -value


# Characters used by the position notation (see notation.py)
PLAYER_TO_CHAR: dict[Player, str] = {
    Player.BLACK: "B",
    Player.WHITE: "W",
}

CHAR_TO_PLAYER: dict[str, Player] = {value: key for key, value in PLAYER_TO_CHAR.items()}

AVAILABLE_PLAYER_NAMES = [player.name for player in Player]
