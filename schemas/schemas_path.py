# schemas/schemas_path.py
from __future__ import annotations

from typing import Any, Tuple, Union

from pydantic import BaseModel, ConfigDict, StrictFloat, StrictInt, TypeAdapter


# JSON numbers only: booleans and numeric strings are rejected.
GridNumber = Union[StrictInt, StrictFloat]

# Wire shape of one position in a solver result file: [row, column]
_PAIR = TypeAdapter(Tuple[GridNumber, GridNumber])


class Coordinate(BaseModel):
    """One (row, column) position of a solution path; row grows downward."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    row: GridNumber
    column: GridNumber

    @classmethod
    def from_pair(cls, pair: Any) -> "Coordinate":
        """Build from a 2-element array; anything else raises pydantic.ValidationError."""
        row, column = _PAIR.validate_python(pair)
        return cls(row=row, column=column)

    def as_pair(self) -> Tuple[GridNumber, GridNumber]:
        return (self.row, self.column)
