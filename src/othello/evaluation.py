"""
Heuristic evaluation of a board position.

Scores are seen from Black's side: positive means Black is doing better, negative means White is.
"""

from typing import Callable

from src.othello.board import Board
from src.othello.game_status import GameStatus
from src.othello.player import Player
from src.othello.square import BOARD_DIMENSIONS

# game is over and there is a winner
SCORE_MAX = 2**31 - 1
# game is over and no winner
SCORE_DRAW = 0
# bonus when the opponent cannot move the next turn
SCORE_OPPONENT_BLOCKED = 4

# Scores according to the cell a piece stands on
SCORE_INSIDE = 1
SCORE_BORDER = 4
SCORE_CORNER = 8

EvaluationFn = Callable[[Board, Player], int]


def evaluate_position(board: Board, last_player: Player) -> int:
    """`last_player` is the player who made the move leading to this board."""
    status = GameStatus.evaluate_board(board)
    if status.game_over():
        winner = status.winner()
        return winner.sign(SCORE_MAX) if winner is not None else SCORE_DRAW

    evaluation = sum(
        piece.sign(cell_weight(x, y))
        for x, y, piece in board.iter_cells()
        if piece is not None
    )

    if not status.can_player_move(last_player.opponent()):
        evaluation += last_player.sign(SCORE_OPPONENT_BLOCKED)

    return evaluation


def cell_weight(x: int, y: int) -> int:
    if is_corner(x, y):
        return SCORE_CORNER
    if is_border(x, y):
        return SCORE_BORDER
    return SCORE_INSIDE


def is_corner(x: int, y: int) -> bool:
    last_column, last_row = BOARD_DIMENSIONS[0] - 1, BOARD_DIMENSIONS[1] - 1
    return x in (0, last_column) and y in (0, last_row)


def is_border(x: int, y: int) -> bool:
    last_column, last_row = BOARD_DIMENSIONS[0] - 1, BOARD_DIMENSIONS[1] - 1
    return x in (0, last_column) or y in (0, last_row)
