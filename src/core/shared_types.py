"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    WAITING_FOR_PLAYERS = "waiting for players"
    IN_PROGRESS = "in progress"
    FINISHED = "finished"


# --- NOTE: the domain layer uses src/othello/player.py. Values are kept identical so conversion is a simple lookup by value.
class Color(StrEnum):
    BLACK = "black"
    WHITE = "white"
