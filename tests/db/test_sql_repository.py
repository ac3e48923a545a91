"""Unit tests for src/db/sql_repository.py"""

from uuid import uuid4

from sqlalchemy.orm import Session

from src.core.models import GameModel
from src.core.shared_types import Status
from src.db.sql_repository import SQLGameRepository

START = "8/8/8/3WB3/3BW3/8/8/8"


def test_create_game(db_session_repo: Session) -> None:
    """Conversion from a GameModel to DBGame for a new entry to the database."""
    # Mock game data
    model = GameModel(
        position=START,
        player_to_move="black",
        moves=[],
        registered_players={"white": "player_white", "black": "player_black"},
        status=Status.IN_PROGRESS,
    )

    repo = SQLGameRepository(db_session_repo)
    record_in_db, _ = repo.create_game(model)
    assert isinstance(record_in_db, GameModel)
    assert record_in_db == model


def test_get_game_by_id(db_session_repo: Session) -> None:
    """Create a game, then fetch it from db."""
    model = GameModel(
        position="8/8/8/3WB3/3BB3/4B3/8/8",
        player_to_move="white",
        moves=["e6"],
        registered_players={"white": "player_white", "black": "player_black"},
        status=Status.IN_PROGRESS,
    )

    repo = SQLGameRepository(db_session_repo)
    expected_game, game_id = repo.create_game(model)
    game_found = repo.get_game(game_id)
    assert isinstance(game_found, GameModel)
    assert game_found == expected_game


def test_nobody_to_move_is_stored(db_session_repo: Session) -> None:
    """A finished game has no side to move"""
    model = GameModel(
        position="BB6/8/8/8/8/8/8/8",
        player_to_move=None,
        moves=[],
        registered_players={"white": "player_white", "black": "player_black"},
        status=Status.FINISHED,
    )

    repo = SQLGameRepository(db_session_repo)
    _, game_id = repo.create_game(model)
    game_found = repo.get_game(game_id)
    assert game_found is not None
    assert game_found.player_to_move is None
    assert game_found.status == Status.FINISHED


def test_get_unknown_game(db_session_repo: Session) -> None:
    """
    Should return None if ID does not match anything in database.

    NOTE with an empty database, any id is a valid test case.
    """
    repo = SQLGameRepository(db_session_repo)
    assert repo.get_game(uuid4()) is None

    # Now do it with creating a game, but retrieving from the wrong ID
    model = GameModel(
        position=START,
        player_to_move="black",
        moves=[],
        registered_players={"white": "player_white"},
        status=Status.WAITING_FOR_PLAYERS,
    )
    repo.create_game(model)
    assert repo.get_game(uuid4()) is None


def test_update_game(db_session_repo: Session) -> None:
    """
    Update an earlier created record.
    """
    # Create new record
    new = GameModel(
        position=START,
        player_to_move="black",
        moves=[],
        registered_players={"white": "player_white"},
        status=Status.WAITING_FOR_PLAYERS,
    )

    repo = SQLGameRepository(db_session_repo)
    _, game_id = repo.create_game(new)

    # Update data and check if recorded data matches the data after the update
    after = GameModel(
        position=START,
        player_to_move="black",
        moves=[],
        registered_players={"white": "player_white", "black": "player_black"},
        status=Status.IN_PROGRESS,
    )
    updated_game = repo.update_game(game_id, after)
    assert updated_game is not None
    assert updated_game == after


def test_consecutive_game_updates(db_session_repo: Session) -> None:
    """Tests that we can successfully make multiple updates to the same game."""

    new = GameModel(
        position=START,
        player_to_move="black",
        moves=[],
        registered_players={"black": "player_black"},
        status=Status.WAITING_FOR_PLAYERS,
    )

    repo = SQLGameRepository(db_session_repo)
    _, game_id = repo.create_game(new)

    # make some updates "loosely simulate real scenario"
    first_update = GameModel(
        position=START,
        player_to_move="black",
        moves=[],
        registered_players={"white": "player_white", "black": "player_black"},
        status=Status.IN_PROGRESS,
    )

    second_update = GameModel(
        position="8/8/8/3WB3/3BB3/4B3/8/8",
        player_to_move="white",
        moves=["e6"],
        registered_players={"white": "player_white", "black": "player_black"},
        status=Status.IN_PROGRESS,
    )

    third_update = GameModel(
        position="8/8/8/3WB3/3BW3/4BW2/8/8",
        player_to_move="black",
        moves=["e6", "f6"],
        registered_players={"white": "player_white", "black": "player_black"},
        status=Status.IN_PROGRESS,
    )

    repo.update_game(game_id, first_update)
    repo.update_game(game_id, second_update)
    repo.update_game(game_id, third_update)

    # now fetch it from db and assert (a little more explicit here, just for good measure)
    after_all_updates = repo.get_game(game_id)
    assert after_all_updates is not None
    assert after_all_updates == third_update
    assert after_all_updates.moves == ["e6", "f6"]


def test_attempt_updating_unknown_game(db_session_repo: Session) -> None:
    """the update_game() method should break early and return None"""

    repo = SQLGameRepository(db_session_repo)
    after = GameModel(
        position=START,
        player_to_move="black",
        moves=[],
        registered_players={"white": "player_white", "black": "player_black"},
        status=Status.IN_PROGRESS,
    )
    assert repo.update_game(uuid4(), after) is None


def test_delete_game(db_session_repo: Session) -> None:
    """Record of the game should no longer exist after deletion"""
    model = GameModel(
        position=START,
        player_to_move="black",
        moves=[],
        registered_players={"white": "player_white", "black": "player_black"},
        status=Status.IN_PROGRESS,
    )

    repo = SQLGameRepository(db_session_repo)
    created_game, game_id = repo.create_game(model)
    deleted_game = repo.delete_game(game_id)

    # the correct game should be deleted
    assert deleted_game == created_game

    # The game should no longer be available in db
    assert repo.get_game(game_id) is None


def test_attempt_deleting_unknown_game(db_session_repo: Session) -> None:
    """the delete_game() method should break early and return None"""
    repo = SQLGameRepository(db_session_repo)
    assert repo.delete_game(uuid4()) is None
