# converters/ingest.py
from __future__ import annotations

from pathlib import Path
from typing import List, Union

from .contracts import LineRecord


def read_line_records(path: Union[str, Path]) -> List[LineRecord]:
    """
    Read a text file in one pass, in file order.

    Bytes that are not valid UTF-8 decode to U+FFFD rather than failing.
    Universal newlines: "\\n", "\\r\\n" and "\\r" all end a line. A terminator on
    the last line does not produce an extra empty record; blank lines in the
    middle of the file are kept as empty records.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Input text file not found: {p}")

    records: List[LineRecord] = []
    with p.open("r", encoding="utf-8", errors="replace", newline=None) as f:
        for line_no, raw_line in enumerate(f, start=1):
            text = raw_line[:-1] if raw_line.endswith("\n") else raw_line
            records.append(LineRecord(line_no=line_no, text=text))
    return records
