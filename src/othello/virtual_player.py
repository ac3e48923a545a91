"""
Computer opponents

Key idea: strategy pattern. Anything implementing `VirtualPlayer` can pick moves for the Service,
the Board and the Game do not need to know which search is behind it.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Protocol

from src.othello.board import Board
from src.othello.evaluation import EvaluationFn, evaluate_position
from src.othello.player import Player
from src.othello.square import Square, grid

logger = logging.getLogger(__name__)


class VirtualPlayer(Protocol):
    def compute_move(self, board: Board, me: Player) -> Optional[Square]:
        """The square to play on, or None if `me` has no legal move"""
        ...


@dataclass
class BestMove:
    """Candidate found while searching. Only lives inside one level of the recursion."""

    x: int
    y: int
    evaluation: int


class Minimax:
    """
    Fixed-depth minimax search.
    ----
    Every legal move is explored up to `depth` plies (no pruning). The leaves get scored by `evaluate`.
    When the player to move is blocked the same player moves again. When both are blocked the line ends early.
    """

    def __init__(self, depth: int, evaluate: EvaluationFn = evaluate_position) -> None:
        if depth < 1:
            raise ValueError(f"Search depth must be a positive integer, got {depth}.")
        self.depth = depth
        self.evaluate = evaluate

    def compute_move(self, board: Board, me: Player) -> Optional[Square]:
        best_move = self._search(board, me, 1)
        if best_move is None:
            logger.debug("No legal move for %s.", me.value)
            return None

        logger.debug(
            "%s plays (%d, %d), evaluation %d at depth %d.",
            me.value,
            best_move.x,
            best_move.y,
            best_move.evaluation,
            self.depth,
        )
        return Square(best_move.x, best_move.y)

    def _search(
        self, board: Board, current_player: Player, depth: int
    ) -> Optional[BestMove]:
        """Best move for `current_player` on this board, carrying the evaluation of the line it leads to"""
        best_move: Optional[BestMove] = None
        for square in grid():
            board_after_move = board.play(current_player, square.x, square.y)
            if board_after_move is None:
                continue

            evaluation = self._evaluate_line(board_after_move, current_player, depth)
            candidate = BestMove(square.x, square.y, evaluation)
            best_move = self._best_move_for_player(current_player, best_move, candidate)
        return best_move

    def _evaluate_line(
        self, board_after_move: Board, current_player: Player, depth: int
    ) -> int:
        """
        Score of the position reached after the move.
        ---

        1. max depth reached? --> evaluate
        2. determine who moves next (opponent, else yourself again)
        3. nobody can move? --> the game is blocked, evaluate
        4. otherwise follow the best reply of the next player
        """
        if depth == self.depth:
            return self.evaluate(board_after_move, current_player)

        opponent = current_player.opponent()
        if board_after_move.can_player_move(opponent):
            next_player = opponent
        elif board_after_move.can_player_move(current_player):
            next_player = current_player
        else:
            return self.evaluate(board_after_move, current_player)

        inner_best_move = self._search(board_after_move, next_player, depth + 1)
        # for the typechecker: next_player was picked because it has a legal move
        assert inner_best_move is not None
        return inner_best_move.evaluation

    @staticmethod
    def _best_move_for_player(
        current_player: Player, best_move: Optional[BestMove], candidate: BestMove
    ) -> BestMove:
        """Strictly better replaces the best move. On a tie the first one found stays."""
        if best_move is None:
            return candidate
        if current_player.sign(candidate.evaluation) > current_player.sign(
            best_move.evaluation
        ):
            return candidate
        return best_move
