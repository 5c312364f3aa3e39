from __future__ import annotations

# Facade module that re-exports the bingo engine.
# Used by the Flask app and tests; the modules themselves live under bingo_core/*.

import sys

from bingo_core.board import BOARD_SIZE, CELL_COUNT, Board
from bingo_core.errors import BingoError, InvalidBoardSize, ParseError
from bingo_core.game import (
    Game,
    Win,
    score,
    play_to_first_win,
    play_to_last_win,
)
from bingo_core.parse import parse_game, read_game


def main() -> None:
    # CLI driver delegated to bingo_core.cli
    from bingo_core.cli import main as _main
    sys.exit(_main())


if __name__ == '__main__':
    main()
