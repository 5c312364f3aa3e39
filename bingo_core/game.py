from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from .board import Board
from .parse import parse_game

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Win:
    """A board's win: the draw that completed it and the board itself."""
    number: int
    board: Board
    draw_index: int
    board_index: int  # position in the game's declared board order

    @property
    def score(self) -> int:
        return score(self.number, self.board)


def score(number: int, board: Board) -> int:
    """Winning number times the sum of the board's unmarked numbers."""
    return number * sum(board.unmarked_numbers())


class Game:
    """An ordered draw sequence played against a fixed list of boards."""

    def __init__(self, draws: Iterable[int], boards: Iterable[Board]) -> None:
        self.draws: Tuple[int, ...] = tuple(int(d) for d in draws)
        self.boards: List[Board] = list(boards)

    @classmethod
    def from_grids(cls, draws: Iterable[int], grids: Iterable[Sequence[int]]) -> 'Game':
        return cls(draws, [Board(g) for g in grids])

    @classmethod
    def from_text(cls, text: str) -> 'Game':
        draws, grids = parse_game(text)
        return cls.from_grids(draws, grids)

    def copy(self) -> 'Game':
        return Game(self.draws, [b.copy() for b in self.boards])

    def play_to_first_win(self) -> Optional[Win]:
        """
        Replays draws until some board completes a row or column.
        Boards are marked in declaration order, so on a shared draw the earliest
        declared board is the one reported. Returns None if no board ever wins.
        """
        for draw_index, number in enumerate(self.draws):
            for board_index, board in enumerate(self.boards):
                if board.mark(number):
                    logger.debug("board %d won first on draw %d (%d)", board_index, draw_index, number)
                    return Win(number, board, draw_index, board_index)
        return None

    def play_to_last_win(self) -> Optional[Win]:
        """
        Replays draws, removing each board from play as soon as it wins, and
        reports the win of the single board left in play.

        If the remaining boards all win on the same draw, play ends with no
        board ever being the only one left; that run reports None, as does
        running out of draws.
        """
        in_play: List[Tuple[int, Board]] = list(enumerate(self.boards))
        for draw_index, number in enumerate(self.draws):
            if not in_play:
                break
            last_standing = len(in_play) == 1
            kept = 0
            for board_index, board in in_play:
                if board.mark(number):
                    if last_standing:
                        logger.debug("board %d won last on draw %d (%d)", board_index, draw_index, number)
                        return Win(number, board, draw_index, board_index)
                    continue
                in_play[kept] = (board_index, board)
                kept += 1
            del in_play[kept:]
            if not in_play:
                logger.info("final boards all won on draw %d (%d); no last winner", draw_index, number)
        return None


def play_to_first_win(draws: Iterable[int], boards: Iterable[Board]) -> Optional[Win]:
    return Game(draws, boards).play_to_first_win()


def play_to_last_win(draws: Iterable[int], boards: Iterable[Board]) -> Optional[Win]:
    return Game(draws, boards).play_to_last_win()
