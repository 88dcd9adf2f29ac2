# converters/moves.py
from __future__ import annotations

from enum import Enum
from typing import List, Sequence

from schemas.schemas_path import Coordinate

from .contracts import MoveSequence


class Move(str, Enum):
    UP = "U"
    DOWN = "D"
    LEFT = "L"
    RIGHT = "R"


class InvalidMoveGeometry(AssertionError):
    """Two consecutive positions are not one orthogonal unit step apart."""

    def __init__(self, from_coord: Coordinate, to_coord: Coordinate) -> None:
        self.from_coord = from_coord
        self.to_coord = to_coord
        super().__init__(
            f"Not a single orthogonal unit step: {list(from_coord.as_pair())} -> {list(to_coord.as_pair())}"
        )


class MoveEncodingError(ValueError):
    pass


SEPARATOR = " "


def encode_move(a: Coordinate, b: Coordinate) -> Move:
    """
    Direction of the unit step a -> b.

    Row delta wins: +1 is D, -1 is U. With no row delta the column delta
    decides: +1 is R, -1 is L.
    """
    di = b.row - a.row
    dj = b.column - a.column

    if not (abs(di) == 1 or abs(dj) == 1):
        raise InvalidMoveGeometry(a, b)
    if abs(di) == 1 and abs(dj) == 1:
        raise InvalidMoveGeometry(a, b)
    if not (abs(di) == 0 or abs(dj) == 0):
        raise InvalidMoveGeometry(a, b)

    if di == 1:
        return Move.DOWN
    if di == -1:
        return Move.UP
    # Fallback arms: the geometry checks above leave only unit steps, so
    # neither MoveEncodingError is reachable from a validated Coordinate pair.
    if di != 0:
        raise MoveEncodingError("Invalid iDifference")

    if dj == 1:
        return Move.RIGHT
    if dj == -1:
        return Move.LEFT
    raise MoveEncodingError("Invalid jDifference")


def assemble_sequence(path: Sequence[Coordinate]) -> MoveSequence:
    """
    One move per consecutive pair, each followed by a separator. On reaching
    the last position exactly one trailing character is cut off (a no-op when
    nothing was accumulated). Empty and single-position paths give "".
    """
    moves: List[str] = []
    text = ""
    for i, current in enumerate(path):
        if i + 1 == len(path):
            # last position has no successor
            text = text[:-1]
            break

        move = encode_move(current, path[i + 1])
        moves.append(move.value)
        text = text + move.value + SEPARATOR

    return MoveSequence(moves=tuple(moves), text=text)
