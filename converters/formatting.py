# converters/formatting.py
from __future__ import annotations

from typing import List, Sequence, Tuple

from .contracts import DigitSubstitution, LineRecord, PatchConfig


def format_line(text: str) -> str:
    """'1 0 2' -> '[1,0,2],' (no check that tokens are numeric)."""
    return "[" + text.replace(" ", ",") + "],"


def format_lines(records: Sequence[LineRecord]) -> List[str]:
    formatted: List[str] = []
    for r in records:
        formatted.append(format_line(r.text))
    return formatted


def assemble_document(formatted: Sequence[str]) -> str:
    """
    Join formatted rows with newlines, drop the last trailing comma and wrap
    the whole thing in brackets. Zero rows gives "[]".
    """
    body = "\n".join(formatted)
    return "[" + body[:-1] + "]"


def patch_digits(
    document: str,
    cfg: PatchConfig = PatchConfig(),
) -> Tuple[str, List[DigitSubstitution]]:
    """
    Apply cfg.substitutions in order, first occurrence only, each on the
    already-patched string. Not token-aware: a "3" inside "13" counts.

    Returns the patched document and the substitutions that actually fired.
    """
    applied: List[DigitSubstitution] = []
    for sub in cfg.substitutions:
        if sub.old in document:
            document = document.replace(sub.old, sub.new, 1)
            applied.append(sub)
            print(f"Replaced {sub.old} by {sub.new}")
    return document, applied
