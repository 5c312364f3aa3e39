"""
Reader for the plain-text game format.

The first blank-line separated group holds the draws; each following group is
one 5x5 board. Numbers are any run of digits, so commas and runs of spaces are
both accepted as separators.
"""
from __future__ import annotations

import re
from typing import List, Tuple

from .board import CELL_COUNT
from .errors import ParseError

_GROUP_SEP = re.compile(r"\r?\n(?:[ \t]*\r?\n)+")
_NUMBER = re.compile(r"\d+")


def _numbers(text: str) -> List[int]:
    return [int(m.group(0)) for m in _NUMBER.finditer(text)]


def parse_game(text: str) -> Tuple[List[int], List[List[int]]]:
    """Splits serialized game text into the draw sequence and the board grids."""
    groups = _GROUP_SEP.split(text.strip())
    if len(groups) < 2:
        raise ParseError("input had no boards")

    draws = _numbers(groups[0])
    if not draws:
        raise ParseError("input had no draws", group=0)

    grids: List[List[int]] = []
    for i, group in enumerate(groups[1:], start=1):
        grid = _numbers(group)
        if len(grid) != CELL_COUNT:
            raise ParseError(f"board had {len(grid)} numbers (not {CELL_COUNT})", group=i)
        grids.append(grid)
    return draws, grids


def read_game(path: str) -> Tuple[List[int], List[List[int]]]:
    """Reads and parses a game file."""
    try:
        with open(path, 'rb') as f:
            raw = f.read()
    except OSError as e:
        raise ParseError(f'failed to read "{path}": {e.strerror or e}') from e
    return parse_game(raw.decode('utf-8', errors='replace'))
