"""The Game board implements all rules that affect the `position` (in Othello: which cells are owned by whom)"""

from dataclasses import dataclass
from typing import Iterator, Optional, Self

from src.core.exceptions import OutOfRangeError
from src.othello.notation import Cells, position_from_text, position_to_text
from src.othello.player import Player
from src.othello.square import BOARD_DIMENSIONS, Heading, Square, grid, ray


@dataclass
class Board:
    """
    8x8 grid of cells, indexed as cells[x][y]. A cell is either empty (None) or owned by a Player.

    NOTE: `play()` never changes the board it is called on. It hands back a new Board instead,
    so the search can explore many moves starting from the same position.
    """

    cells: Cells

    @classmethod
    def new_empty(cls) -> Self:
        return cls([[None] * BOARD_DIMENSIONS[1] for _ in range(BOARD_DIMENSIONS[0])])

    @classmethod
    def new_start(cls) -> Self:
        """Two diagonal pairs on the four center cells. White on the main diagonal."""
        board = cls.new_empty()
        board.set_piece(3, 3, Player.WHITE)
        board.set_piece(4, 4, Player.WHITE)
        board.set_piece(3, 4, Player.BLACK)
        board.set_piece(4, 3, Player.BLACK)
        return board

    @classmethod
    def from_text(cls, position: str) -> Self:
        """Construct a board from its text encoding (see notation.py)"""
        return cls(position_from_text(position))

    def to_text(self) -> str:
        return position_to_text(self.cells)

    def copy(self) -> Self:
        return type(self)([column[:] for column in self.cells])

    # --- ACCESSORS ---
    def get_piece(self, x: int, y: int) -> Optional[Player]:
        self._check_coordinates(x, y)
        return self.cells[x][y]

    def set_piece(self, x: int, y: int, piece: Optional[Player]) -> None:
        self._check_coordinates(x, y)
        self.cells[x][y] = piece

    def iter_cells(self) -> Iterator[tuple[int, int, Optional[Player]]]:
        """All 64 cells, in the fixed order of `grid()`"""
        for square in grid():
            yield square.x, square.y, self.cells[square.x][square.y]

    def count_pieces(self) -> tuple[int, int]:
        """(black, white)"""
        black = sum(column.count(Player.BLACK) for column in self.cells)
        white = sum(column.count(Player.WHITE) for column in self.cells)
        return black, white

    # --- MOVES ---
    def play(self, player: Player, x: int, y: int) -> Optional[Self]:
        """
        Attempt to place a piece of `player` on (x, y).
        ----
        Returns the board after the move, or None when the move is not allowed:
        * the cell is already occupied
        * no line of opponent pieces gets sandwiched between the new piece and one of your own.

        NOTE: An invalid move is a normal outcome (the search tries dozens of them per ply), only coordinates outside the board raise.
        """
        self._check_coordinates(x, y)
        if self.cells[x][y] is not None:
            return None

        origin = Square(x, y)
        captures = [
            (heading, end)
            for heading in Heading
            if (end := self._capture_end(origin, heading, player)) is not None
        ]
        if not captures:
            return None

        new_board = self.copy()
        new_board.cells[x][y] = player
        for heading, end in captures:
            new_board._flip_towards(origin, end, heading.reversed(), player)
        return new_board

    def can_player_move(self, player: Player) -> bool:
        return any(
            self.play(player, square.x, square.y) is not None for square in grid()
        )

    def legal_moves(self, player: Player) -> list[Square]:
        return [
            square
            for square in grid()
            if self.play(player, square.x, square.y) is not None
        ]

    def _capture_end(
        self, origin: Square, heading: Heading, player: Player
    ) -> Optional[Square]:
        """
        Walk away from the origin over the opponent's pieces.
        Returns the square of your own piece closing the line, if the line can be captured.
        """
        opponent = player.opponent()
        seen_opponent = False
        for square in ray(origin, heading):
            piece = self.cells[square.x][square.y]
            if piece == opponent:
                seen_opponent = True
                continue
            if piece == player and seen_opponent:
                return square
            # empty cell, or your own piece directly next to the origin
            return None
        # ran into the edge of the board
        return None

    def _flip_towards(
        self, origin: Square, end: Square, heading: Heading, player: Player
    ) -> None:
        """Walk back from the closing piece to the origin, flipping everything in between"""
        for square in ray(end, heading):
            if square == origin:
                break
            self.cells[square.x][square.y] = player

    def _check_coordinates(self, x: int, y: int) -> None:
        if not Square(x, y).is_within_bounds():
            raise OutOfRangeError(f"Coordinates ({x}, {y}) are out of range.")
