"""Exceptions raised by the bingo engine and its input reader."""

from __future__ import annotations

from typing import Optional


class BingoError(Exception):
    """Base class for every error the engine raises."""


class InvalidBoardSize(BingoError, ValueError):
    """A board was built from something other than exactly 25 numbers."""

    def __init__(self, count: int, expected: int = 25) -> None:
        super().__init__(f"board had {count} numbers (not {expected})")
        self.count = count
        self.expected = expected


class ParseError(BingoError, ValueError):
    """Serialized game text could not be turned into draws and boards."""

    def __init__(self, message: str, group: Optional[int] = None) -> None:
        if group is not None:
            message = f"group {group}: {message}"
        super().__init__(message)
        self.group = group
