"""Orchestration of communication from API router to business logic and persistence layers (and the reverse direction)."""

import logging
from typing import Optional
from uuid import UUID

from src.api.models import (
    CreateGameRequest,
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    JoinGameRequest,
    LegalMovesRequest,
    LegalMovesResponse,
    MoveRequest,
    SuggestMoveRequest,
    SuggestMoveResponse,
)
from src.core.config import Settings, get_settings
from src.core.exceptions import (
    GameOverError,
    GameStateError,
    InvalidRequestError,
    NotYourTurnError,
    RepositoryError,
)
from src.core.models import GameModel
from src.core.shared_types import Color, Status
from src.db.repository import GameRepository
from src.othello.game import Game
from src.othello.player import Player
from src.othello.square import Square
from src.othello.virtual_player import Minimax, VirtualPlayer

logger = logging.getLogger(__name__)

# Name registered in the seat taken by the computer opponent
COMPUTER_NAME = "computer"


class OthelloService:
    """Orchestration of layers for Othello game."""

    def __init__(
        self,
        repository: GameRepository,
        virtual_player: Optional[VirtualPlayer] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self.repo = repository
        self.settings = settings or get_settings()
        self.virtual_player = virtual_player or Minimax(self.settings.search_depth)

    # -- API routes logic ---
    def create_new_game(self, request: CreateGameRequest) -> GameResponse:
        """First player requested to create a new game."""
        if request.player_name == COMPUTER_NAME:
            raise GameStateError(f"The name {COMPUTER_NAME!r} is reserved.")

        # Use info in CreateGameRequest to create a new Game
        game = Game.new_game(player=request.player_name, color=request.color.value)

        # Against the computer the second seat is taken right away (and it may have the first move)
        if request.versus_computer:
            game.register_player(COMPUTER_NAME)
            self._play_computer_turns(game)

        # Store the GameModel in the repository
        _, game_id = self.repo.create_game(game.to_model())
        logger.info("Created game %s for %s.", game_id, request.player_name)

        # Return a GameResponse
        return self._create_game_response(game_id, game)

    def join_game(self, request: JoinGameRequest) -> GameResponse:
        """Second player requested to join a game."""
        if request.player_name == COMPUTER_NAME:
            raise GameStateError(f"The name {COMPUTER_NAME!r} is reserved.")

        # Retrieve persisted GameModel from repository and create a new Game instance from it
        game = Game.from_model(self._fetch_game(request.game_id))

        # Register the requested player
        game.register_player(request.player_name)

        # store in repository
        self.repo.update_game(request.game_id, game.to_model())
        logger.info("%s joined game %s.", request.player_name, request.game_id)

        return self._create_game_response(request.game_id, game)

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        """
        Retrieve current game state.
        ----
        Used in "polling" loop by frontend to check when it is the player's turn for instance.
        """
        game = Game.from_model(self._fetch_game(request.game_id))
        return self._create_game_response(request.game_id, game)

    def legal_moves(self, request: LegalMovesRequest) -> LegalMovesResponse:
        """
        Retrieve set of legal moves.
        ----
        1. Check if the game is in progress and it is your turn
        2. Yes? Return the squares you could play on.
        """
        game = Game.from_model(self._fetch_game(request.game_id))
        self._assert_in_progress(game)
        color = game.color_of(request.player_name)
        self._assert_your_turn(game, color)

        return LegalMovesResponse(
            game_id=request.game_id,
            player_name=request.player_name,
            color=Color(color.value),
            legal_moves=[square.to_algebraic() for square in game.legal_moves(color)],
        )

    def make_move(self, request: MoveRequest) -> GameResponse:
        """Make a move attempt. When playing the computer, it answers straight away."""

        game = Game.from_model(self._fetch_game(request.game_id))
        self._assert_in_progress(game)

        # Attempt the move (the Game checks turn order and validity)
        color = game.color_of(request.player_name)
        square = Square.from_algebraic(request.square)
        game.play(color, square.x, square.y)
        logger.info(
            "Game %s: %s played %s.", request.game_id, color.value, request.square
        )

        self._play_computer_turns(game)

        # store in repository
        self.repo.update_game(request.game_id, game.to_model())

        return self._create_game_response(request.game_id, game)

    def suggest_move(self, request: SuggestMoveRequest) -> SuggestMoveResponse:
        """A hint: the move the search would play in your place."""
        # no pruning: every extra ply multiplies the work
        if request.depth and request.depth > self.settings.max_search_depth:
            raise InvalidRequestError(
                f"Search depth {request.depth} exceeds the maximum of {self.settings.max_search_depth}."
            )
        game = Game.from_model(self._fetch_game(request.game_id))
        self._assert_in_progress(game)
        color = game.color_of(request.player_name)
        self._assert_your_turn(game, color)

        virtual_player = (
            Minimax(request.depth) if request.depth else self.virtual_player
        )
        square = virtual_player.compute_move(game.board, color)
        return SuggestMoveResponse(
            game_id=request.game_id,
            player_name=request.player_name,
            square=square.to_algebraic() if square else None,
        )

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to delete a Game record."""
        if self.repo.delete_game(request.game_id) is None:
            raise RepositoryError(f"Game with game_id={request.game_id} not found.")
        logger.info("Deleted game %s.", request.game_id)

    # -- Internal helpers --
    def _play_computer_turns(self, game: Game) -> None:
        """Keep letting the computer move for as long as it holds the turn (the human may be blocked)."""
        while (
            game.player is not None
            and game.players.get(game.player) == COMPUTER_NAME
            and game.lifecycle_status == Status.IN_PROGRESS
        ):
            square = self.virtual_player.compute_move(game.board, game.player)
            # for the typechecker: whoever holds the turn has a legal move
            assert square is not None
            logger.info("Computer (%s) plays %s.", game.player.value, square.to_algebraic())
            game.play(game.player, square.x, square.y)

    def _assert_in_progress(self, game: Game) -> None:
        status = game.lifecycle_status
        if status == Status.FINISHED:
            raise GameOverError("None of the players can move, the game is over.")
        if status != Status.IN_PROGRESS:
            raise GameStateError(f"Game is not in progress. status: {status}")

    def _assert_your_turn(self, game: Game, color: Player) -> None:
        if game.player != color:
            raise NotYourTurnError(
                f"It is not your turn. Waiting for {game.player.value if game.player else 'nobody'} to make a move first."
            )

    def _create_game_response(self, game_id: UUID, game: Game) -> GameResponse:
        """Convert the Game into a GameResponse (for game with given ID.)"""
        black, white = game.count_pieces()
        winner = game.winner()
        return GameResponse(
            game_id=game_id,
            players={color.value: name for color, name in game.players.items()},
            position=game.board.to_text(),
            player_to_move=Color(game.player.value) if game.player else None,
            status=game.lifecycle_status,
            winner=Color(winner.value) if winner else None,
            score={Color.BLACK.value: black, Color.WHITE.value: white},
            move_history=[move.to_algebraic() for move in game.moves],
        )

    def _fetch_game(self, game_id: UUID) -> GameModel:
        """Attempt to find the game in the repository and raise error if it fails."""
        game_model = self.repo.get_game(game_id)
        if game_model is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        return game_model
