"""
Text encoding of a board position, so a game can be stored and restored.

Borrowed from the piece placement part of FEN:
* rows are separated by slashes, the top row (y = 0) comes first
* within a row, read left-to-right (x = 0 first)
* 'B' is a black piece, 'W' a white piece
* a digit denotes that many consecutive empty cells

ex) the standard starting position reads
8/8/8/3WB3/3BW3/8/8/8
"""

from typing import Optional

from src.core.exceptions import InvalidPositionError
from src.othello.player import CHAR_TO_PLAYER, PLAYER_TO_CHAR, Player
from src.othello.square import BOARD_DIMENSIONS

# Indexed as cells[x][y], same as the Board
Cells = list[list[Optional[Player]]]

STARTING_POSITION = "8/8/8/3WB3/3BW3/8/8/8"
EMPTY_POSITION = "/".join(["8"] * BOARD_DIMENSIONS[1])
# a run of empty cells is never longer than a row
EMPTY_RUN_DIGITS = "12345678"


def is_valid_position(position: str) -> bool:
    """Every row should be present and describe exactly the width of the board."""
    num_columns, num_rows = BOARD_DIMENSIONS
    rows = position.split("/")
    if len(rows) != num_rows:
        return False

    for row in rows:
        column_count = 0
        for character in row:
            if character in EMPTY_RUN_DIGITS:
                column_count += int(character)
            elif character in CHAR_TO_PLAYER:
                column_count += 1
            else:
                # immediately invalidate if the character is anything else
                return False
        if column_count != num_columns:
            return False
    return True


def position_from_text(position: str) -> Cells:
    """Parse the position into a grid of cells"""
    if not is_valid_position(position):
        raise InvalidPositionError(f"Invalid board position: {position!r}")

    num_columns, num_rows = BOARD_DIMENSIONS
    cells: Cells = [[None] * num_rows for _ in range(num_columns)]
    for y, row in enumerate(position.split("/")):
        x = 0
        for character in row:
            if character in EMPTY_RUN_DIGITS:
                x += int(character)
            else:
                cells[x][y] = CHAR_TO_PLAYER[character]
                x += 1
    return cells


def position_to_text(cells: Cells) -> str:
    """Reverse operation: write the text encoding of a grid of cells"""
    return "/".join(_row_to_text(cells, y) for y in range(BOARD_DIMENSIONS[1]))


def _row_to_text(cells: Cells, y: int) -> str:
    characters: list[str] = []
    empty_count = 0
    for x in range(BOARD_DIMENSIONS[0]):
        piece = cells[x][y]
        if piece is None:
            empty_count += 1
            continue

        if empty_count > 0:
            characters.append(str(empty_count))
            empty_count = 0
        characters.append(PLAYER_TO_CHAR[piece])

    # an entirely empty row still gets its number
    if empty_count > 0:
        characters.append(str(empty_count))
    return "".join(characters)
