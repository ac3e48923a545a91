from uuid import UUID, uuid4

import pytest
from pydantic import ValidationError

from src.api.models import (
    CreateGameRequest,
    GameResponse,
    MoveRequest,
    SuggestMoveRequest,
)
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color, Status


@pytest.fixture
def mock_id() -> UUID:
    return uuid4()


# -- Validation - CreateGameRequest --
def test_versus_computer_is_optional() -> None:
    request = CreateGameRequest(
        player_name="don't hate the player, hate the name.", color=Color.BLACK
    )
    assert request.versus_computer is False


def test_color_from_plain_string() -> None:
    request = CreateGameRequest(player_name="someone", color="white")
    assert request.color == Color.WHITE


def test_unknown_color() -> None:
    """Only black and white pieces in this game"""
    with pytest.raises(ValidationError):
        _ = CreateGameRequest(player_name="someone", color="red")


# -- Validation - MoveRequest --
@pytest.mark.parametrize("square", ["a1", "h8", "e6"])
def test_valid_square_names(mock_id: UUID, square: str) -> None:
    """Test that MoveRequest accepts correctly written square names."""
    request = MoveRequest(game_id=mock_id, player_name="bladiblidiboo", square=square)
    assert request.square == square


def test_square_names_are_lowercased(mock_id: UUID) -> None:
    request = MoveRequest(game_id=mock_id, player_name="bladiblidiboo", square="F5")
    assert request.square == "f5"


@pytest.mark.parametrize(
    "square",
    [
        "nonsense",  # anything more than two characters.
        "11",  # First character is not a letter
        "aa",  # second character is not a number
        "i1",  # file beyond h
        "a9",  # row beyond 8
        "a0",  # rows start at 1
    ],
)
def test_invalid_square(mock_id: UUID, square: str) -> None:
    """Test that an exception is raised when using invalid square name."""
    with pytest.raises(InvalidRequestError):
        _ = MoveRequest(game_id=mock_id, player_name="bladiblidiboo", square=square)


# -- Validation - SuggestMoveRequest --
def test_depth_is_optional(mock_id: UUID) -> None:
    request = SuggestMoveRequest(game_id=mock_id, player_name="hint please")
    assert request.depth is None


def test_explicit_depth(mock_id: UUID) -> None:
    request = SuggestMoveRequest(game_id=mock_id, player_name="hint please", depth=4)
    assert request.depth == 4


@pytest.mark.parametrize("depth", [0, -3])
def test_invalid_depth(mock_id: UUID, depth: int) -> None:
    with pytest.raises(InvalidRequestError):
        _ = SuggestMoveRequest(game_id=mock_id, player_name="hint please", depth=depth)


# -- Response models --
def test_game_response_serializes_enums(mock_id: UUID) -> None:
    response = GameResponse(
        game_id=mock_id,
        players={"black": "one", "white": "two"},
        position="8/8/8/3WB3/3BW3/8/8/8",
        player_to_move=Color.BLACK,
        status=Status.IN_PROGRESS,
        winner=None,
        score={"black": 2, "white": 2},
        move_history=[],
    )
    dumped = response.model_dump(mode="json")
    assert dumped["player_to_move"] == "black"
    assert dumped["status"] == "in progress"
    assert dumped["winner"] is None
