"""
The Game class will be the entrypoint into the domain layer for the service layer.
It is responsible for orchestrating all the business logic required to play a turn of Othello -->
passes this information to the service layer, which can then pass it onwards to the API layer.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Self

from src.core.exceptions import (
    GameOverError,
    GameStateError,
    IllegalMoveError,
    NotYourTurnError,
    OutOfRangeError,
)
from src.core.models import GameModel
from src.core.shared_types import Status
from src.othello.board import Board
from src.othello.game_status import GameStatus
from src.othello.player import AVAILABLE_PLAYER_NAMES, Player
from src.othello.square import Square

logger = logging.getLogger(__name__)


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board
    player: Optional[Player]  # side to move. None once nobody can move anymore
    status: GameStatus
    moves: list[Square] = field(default_factory=list)
    players: dict[Player, str] = field(default_factory=dict)

    @classmethod
    def new(cls) -> Self:
        """Standard starting position, Black moves first."""
        board = Board.new_start()
        return cls(
            board=board, player=Player.BLACK, status=GameStatus.evaluate_board(board)
        )

    @classmethod
    def new_game(cls, player: str, color: str) -> Self:
        """To start a new game with the player using the pieces with the indicated color."""
        if color.upper() not in AVAILABLE_PLAYER_NAMES:
            raise GameStateError(
                f"Cannot create new game. Color {color} not in {','.join([c.lower() for c in AVAILABLE_PLAYER_NAMES])}."
            )
        game = cls.new()
        game.players = {Player.from_name(color): player}
        return game

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Define how to construct a Game from the information the Service layer actually has"""

        # Validation
        if model.status not in [status.value for status in Status]:
            raise GameStateError(
                f"Invalid status code: {model.status!r}. \nPick one from {','.join([status.value for status in Status])}"
            )
        color_names = [model.player_to_move, *model.registered_players.keys()]
        for color_name in color_names:
            if color_name is not None and color_name.upper() not in AVAILABLE_PLAYER_NAMES:
                raise GameStateError(f"Invalid color: {color_name!r}")
        try:
            moves = [Square.from_algebraic(move) for move in model.moves]
        except OutOfRangeError as err:
            raise GameStateError(f"Invalid move history: {model.moves!r}") from err

        # create the Game
        board = Board.from_text(model.position)
        player = (
            Player.from_name(model.player_to_move)
            if model.player_to_move is not None
            else None
        )
        players = {
            Player.from_name(color): name
            for color, name in model.registered_players.items()
        }
        return cls(board, player, GameStatus.evaluate_board(board), moves, players)

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""
        return GameModel(
            position=self.board.to_text(),
            player_to_move=self.player.value if self.player else None,
            moves=[move.to_algebraic() for move in self.moves],
            registered_players={
                color.value: name for color, name in self.players.items()
            },
            status=self.lifecycle_status.value,
        )

    # --- PLAYING ---
    def play(self, player: Player, x: int, y: int) -> None:
        """
        Attempt to make a move
        -----

        1. nobody can move anymore? --> game over
        2. not your turn? --> refuse
        3. let the board decide if the move is valid
        4. replace the board, recompute the status, hand the turn over
        """
        if self.player is None or self.status.game_over():
            raise GameOverError("None of the players can move, the game is over.")

        if player != self.player:
            raise NotYourTurnError(
                f"It's the turn of {self.player.value}, not {player.value}."
            )

        new_board = self.board.play(player, x, y)
        if new_board is None:
            raise IllegalMoveError(f"The move {Square(x, y).to_algebraic()} is invalid.")

        self.board = new_board
        self.moves.append(Square(x, y))
        self._update_status()
        self._advance_turn(player)

    def legal_moves(self, player: Player) -> list[Square]:
        return self.board.legal_moves(player)

    # --- QUERIES ---
    def game_over(self) -> bool:
        return self.status.game_over()

    def winner(self) -> Optional[Player]:
        return self.status.winner()

    def count_pieces(self) -> tuple[int, int]:
        """(black, white)"""
        return self.status.black_pieces, self.status.white_pieces

    # --- PLAYERS / LIFECYCLE ---
    @property
    def lifecycle_status(self) -> Status:
        if self.game_over():
            return Status.FINISHED
        if len(self.players) < 2:
            return Status.WAITING_FOR_PLAYERS
        return Status.IN_PROGRESS

    @property
    def winner_name(self) -> Optional[str]:
        winner = self.winner()
        if winner is None:
            return None
        return self.players.get(winner)

    def register_player(self, player: str) -> None:
        """Registering the 2nd player to an open game"""
        if len(self.players) != 1:
            raise GameStateError(
                f"Cannot join this game. Game is not accepting new players. status: {self.lifecycle_status}"
            )
        if player in self.players.values():
            raise GameStateError(f"Player {player!r} is already registered to this game.")

        opponent_color = next(iter(self.players))
        self.players[opponent_color.opponent()] = player

    def color_of(self, player: str) -> Player:
        """Which pieces is this player playing with?"""
        for color, name in self.players.items():
            if name == player:
                return color
        raise GameStateError(f"Player {player!r} is not registered to this game.")

    # -- PRIVATE HELPERS ---
    def _update_status(self) -> None:
        self.status = GameStatus.evaluate_board(self.board)

    def _advance_turn(self, last_player: Player) -> None:
        """
        Opponent moves next if able. Otherwise the same player moves again if able.
        If neither can move, nobody has the turn anymore.
        """
        if self.status.can_player_move(last_player.opponent()):
            self.player = last_player.opponent()
        elif self.status.can_player_move(last_player):
            logger.info(
                "%s cannot move, %s plays again.",
                last_player.opponent().value,
                last_player.value,
            )
            self.player = last_player
        else:
            logger.info("Game over. Pieces (black, white): %s", self.count_pieces())
            self.player = None
