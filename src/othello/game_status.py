"""Snapshot of who can still move, the piece counts, and whether (and by whom) the game was won."""

from dataclasses import dataclass
from typing import Optional, Self

from src.othello.board import Board
from src.othello.player import Player
from src.othello.square import BOARD_DIMENSIONS

NUM_CELLS = BOARD_DIMENSIONS[0] * BOARD_DIMENSIONS[1]


@dataclass(frozen=True)
class GameStatus:
    black_can_move: bool
    white_can_move: bool
    black_pieces: int
    white_pieces: int

    @classmethod
    def evaluate_board(cls, board: Board) -> Self:
        """
        Always computed from scratch for the given board (never updated move by move).

        NOTE: On a full board nobody can move, so probing every cell is skipped.
        """
        black_pieces, white_pieces = board.count_pieces()
        black_can_move = False
        white_can_move = False
        if black_pieces + white_pieces != NUM_CELLS:
            black_can_move = board.can_player_move(Player.BLACK)
            white_can_move = board.can_player_move(Player.WHITE)
        return cls(black_can_move, white_can_move, black_pieces, white_pieces)

    def can_player_move(self, player: Player) -> bool:
        return self.black_can_move if player == Player.BLACK else self.white_can_move

    def game_over(self) -> bool:
        return not self.black_can_move and not self.white_can_move

    def winner(self) -> Optional[Player]:
        """Only once the game is over, and only if the piece counts differ"""
        if not self.game_over() or self.black_pieces == self.white_pieces:
            return None
        return Player.BLACK if self.black_pieces > self.white_pieces else Player.WHITE
