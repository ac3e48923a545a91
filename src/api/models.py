"""Requests and Response models"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color, Status

PieceColor = str
PlayerName = str

FILE_NAMES = "abcdefgh"
RANK_NAMES = "12345678"


# --- REQUEST MODELS ---
class CreateGameRequest(BaseModel):
    player_name: str
    color: Color
    versus_computer: bool = False


class JoinGameRequest(BaseModel):
    game_id: UUID
    player_name: str


class LegalMovesRequest(BaseModel):
    game_id: UUID
    player_name: str


class MoveRequest(BaseModel):
    game_id: UUID
    player_name: str
    square: str

    @field_validator("square")
    @classmethod
    def validate_square(cls, value: str) -> str:
        def _is_algebraic_notation(value: str) -> bool:
            if len(value) != 2:
                return False
            return value[0].lower() in FILE_NAMES and value[1] in RANK_NAMES

        if not _is_algebraic_notation(value):
            raise InvalidRequestError(
                f"Cannot interpret square: {value!r} as a valid square name."
            )
        return value.lower()


class SuggestMoveRequest(BaseModel):
    game_id: UUID
    player_name: str
    depth: Optional[int] = None

    @field_validator("depth")
    @classmethod
    def validate_depth(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value < 1:
            raise InvalidRequestError(f"Search depth must be at least 1, got {value}.")
        return value


class GetGameRequest(BaseModel):
    game_id: UUID


class DeleteGameRequest(BaseModel):
    game_id: UUID


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    game_id: UUID
    players: dict[PieceColor, PlayerName]
    position: str
    player_to_move: Optional[Color]
    status: Status
    winner: Optional[Color]
    score: dict[PieceColor, int]
    move_history: list[str]


class LegalMovesResponse(BaseModel):
    game_id: UUID
    player_name: str
    color: Color
    legal_moves: list[str]


class SuggestMoveResponse(BaseModel):
    game_id: UUID
    player_name: str
    square: Optional[str]
