# converters/result_loader.py
from __future__ import annotations

from typing import List

from schemas.schemas_path import Coordinate

from .io_utils import PathLike, read_json


class ResultFormatError(ValueError):
    """Solver result file is not a JSON array of positions."""


def _require(cond: bool, msg: str) -> None:
    if not cond:
        raise ResultFormatError(msg)


def load_solution_path(path: PathLike) -> List[Coordinate]:
    """
    Load a solver result file: a top-level JSON array of [row, column] pairs.

    Fails closed on a missing file, malformed JSON, a non-array top level or
    any element that is not a pair of numbers. Every position is validated
    here, before any move is encoded.
    """
    raw = read_json(path)
    _require(isinstance(raw, list), f"{path} must contain a JSON array, got {type(raw).__name__}")
    return [Coordinate.from_pair(pair) for pair in raw]
