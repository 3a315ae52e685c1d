"""Operations on strings and on lists of equal-width string rows."""

from __future__ import annotations

from typing import Sequence


def reverse_string(s: str) -> str:
    return s[::-1]


def rotated_strings(rows: Sequence[str]) -> list[str]:
    """Return the columns of ``rows``: row i of the result is column i read top to bottom."""
    if not rows:
        raise ValueError("rows must not be empty")
    return ["".join(row[i] for row in rows) for i in range(len(rows[0]))]


def mirrored_strings(rows: Sequence[str], vertical: bool, horizontal: bool) -> list[str]:
    """Mirror rows top-to-bottom (vertical) and/or each row left-to-right (horizontal)."""
    result = list(reversed(rows)) if vertical else list(rows)
    if horizontal:
        result = [reverse_string(row) for row in result]
    return result