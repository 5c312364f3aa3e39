from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Set, Tuple

from .errors import InvalidBoardSize

BOARD_SIZE = 5
CELL_COUNT = BOARD_SIZE * BOARD_SIZE


class Board:
    """A 5x5 bingo board: fixed numbers plus the cells marked so far."""

    def __init__(self, numbers: Iterable[int]) -> None:
        values = tuple(int(n) for n in numbers)
        if len(values) != CELL_COUNT:
            raise InvalidBoardSize(len(values), CELL_COUNT)
        self.numbers: Tuple[int, ...] = values  # row-major
        # Duplicates resolve to the last index holding the number.
        self.index_of: Dict[int, int] = {n: i for i, n in enumerate(values)}
        self.marked: Set[int] = set()
        self._won = False

    @property
    def has_won(self) -> bool:
        return self._won

    def index(self, r: int, c: int) -> int:
        """Calculates the 1D index for a given row and column."""
        return r * BOARD_SIZE + c

    def at(self, r: int, c: int) -> int:
        return self.numbers[self.index(r, c)]

    def is_marked(self, r: int, c: int) -> bool:
        return self.index(r, c) in self.marked

    def rows(self) -> List[Tuple[int, ...]]:
        return [self.numbers[r * BOARD_SIZE:(r + 1) * BOARD_SIZE] for r in range(BOARD_SIZE)]

    def mark(self, number: int) -> bool:
        """
        Marks the cell holding `number`, if any.
        Returns True only on the call that completes this board's first row or column.
        """
        idx = self.index_of.get(number)
        if idx is None:
            return False
        self.marked.add(idx)
        if self._won:
            return False
        self._won = self._line_complete()
        return self._won

    def _line_complete(self) -> bool:
        row_counts = [0] * BOARD_SIZE
        col_counts = [0] * BOARD_SIZE
        for idx in self.marked:
            row_counts[idx // BOARD_SIZE] += 1
            col_counts[idx % BOARD_SIZE] += 1
        return BOARD_SIZE in row_counts or BOARD_SIZE in col_counts

    def unmarked_numbers(self) -> List[int]:
        """Numbers on cells not yet marked, in board order."""
        return [n for i, n in enumerate(self.numbers) if i not in self.marked]

    def copy(self) -> 'Board':
        other = Board(self.numbers)
        other.marked = set(self.marked)
        other._won = self._won
        return other

    def pretty(self, highlight: Optional[int] = None) -> str:
        """Renders the grid; marked cells are bracketed and `highlight` is starred."""
        width = max(len(str(n)) for n in self.numbers)
        lines: List[str] = []
        for r in range(BOARD_SIZE):
            row: List[str] = []
            for c in range(BOARD_SIZE):
                n = self.at(r, c)
                cell = str(n).rjust(width)
                if self.is_marked(r, c):
                    cell = f"[{cell}]" if n != highlight else f"*{cell}*"
                else:
                    cell = f" {cell} "
                row.append(cell)
            lines.append(" ".join(row))
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Board(marked={len(self.marked)}, has_won={self._won})"
