# converters/io_utils.py
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Union


PathLike = Union[str, Path]


def read_json(path: PathLike) -> Any:
    """
    JSON reader (fail-closed).
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"JSON file not found: {p}")
    try:
        return json.loads(p.read_text(encoding="utf-8"), parse_constant=_reject_constant)
    except ValueError as e:
        raise ValueError(f"Invalid JSON in {p}: {e}") from e


def _reject_constant(name: str) -> Any:
    # NaN, Infinity and -Infinity are not JSON
    raise ValueError(f"non-standard JSON constant {name!r}")


def write_text(path: PathLike, text: str) -> None:
    """
    Write `text` verbatim, overwriting any existing file.

    Single best-effort write: no temp file + rename, so a failure mid-write
    can leave a partial file behind. No trailing newline is added.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8", newline="") as f:
        f.write(text)
