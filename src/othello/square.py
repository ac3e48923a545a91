"""
A square on the board, plus the geometry shared by the capture rule and the search.

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Iterator

from src.core.exceptions import OutOfRangeError

# Othello is always played on 8x8. Kept as a constant so nothing below hardcodes the 8
BOARD_DIMENSIONS = (8, 8)

FILE_LETTERS = "abcdefgh"
RANK_DIGITS = "12345678"


@dataclass(frozen=True)
class Square:
    """x is the column (left-to-right), y is the row (top-to-bottom). Both zero-based."""

    x: int
    y: int

    @classmethod
    def from_algebraic(cls, sq: str) -> Square:
        """Algebraic notation: 'a1' - 'h8' get converted to (0,0) - (7,7)"""
        if len(sq) != 2 or sq[1] not in RANK_DIGITS:
            raise OutOfRangeError(f"Cannot interpret {sq!r} as a square.")
        square = cls(ord(sq[0].lower()) - ord("a"), int(sq[1]) - 1)
        if not square.is_within_bounds():
            raise OutOfRangeError(f"Square {sq!r} is not on the board.")
        return square

    def to_algebraic(self) -> str:
        return f"{FILE_LETTERS[self.x]}{self.y + 1}"

    def is_within_bounds(self) -> bool:
        return (0 <= self.x < BOARD_DIMENSIONS[0]) and (0 <= self.y < BOARD_DIMENSIONS[1])


def grid() -> Iterator[Square]:
    """
    All squares of the board in the one fixed order used everywhere: x outer, y inner.

    NOTE: the search breaks ties by this order, so do not change it.
    """
    for x in range(BOARD_DIMENSIONS[0]):
        for y in range(BOARD_DIMENSIONS[1]):
            yield Square(x, y)


class Heading(Enum):
    """The eight compass directions a line of pieces can run in. Values are (dx, dy)."""

    NORTH = (0, -1)
    NORTH_EAST = (1, -1)
    EAST = (1, 0)
    SOUTH_EAST = (1, 1)
    SOUTH = (0, 1)
    SOUTH_WEST = (-1, 1)
    WEST = (-1, 0)
    NORTH_WEST = (-1, -1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    def reversed(self) -> Heading:
        return Heading((-self.dx, -self.dy))


@lru_cache(maxsize=None)
def ray(origin: Square, heading: Heading) -> tuple[Square, ...]:
    """
    Raycasting
    -----

    ---
    The squares seen when walking from `origin` (excluded) along `heading` until the edge of the board.
    Walking the ray of the reversed heading from any of these squares leads back to the origin.

    ---
    Pure function of its arguments, so the result is cached: the search asks for the same rays over and over.
    """
    squares: list[Square] = []
    x, y = origin.x, origin.y
    while True:
        x += heading.dx
        y += heading.dy
        square = Square(x, y)
        if not square.is_within_bounds():
            break
        squares.append(square)
    return tuple(squares)
