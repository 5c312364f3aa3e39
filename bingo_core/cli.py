from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .config import configure_logging, get_settings
from .errors import BingoError
from .game import Game, Win
from .parse import read_game


def _print_win(win: Win, prefix: str, show_board: bool) -> None:
    unmarked_sum = sum(win.board.unmarked_numbers())
    if prefix:
        print(f"{prefix} winning number:\t{win.number}")
        print(f"{prefix} winning board sum:\t{unmarked_sum}")
    else:
        print(f"Winning number:\t\t{win.number}")
        print(f"Winning board sum:\t{unmarked_sum}")
    print(f"Product:\t\t{win.number * unmarked_sum}")
    if show_board:
        print(f"Board {win.board_index} after draw {win.draw_index}:")
        print(win.board.pretty(highlight=win.number))


def main(argv: Optional[List[str]] = None) -> int:
    settings = get_settings()
    parser = argparse.ArgumentParser(description='Play a bingo game to its first and last winning boards')
    parser.add_argument('path', nargs='?', default=settings.input_path, help='Game file (draws, then boards)')
    parser.add_argument('--mode', choices=['first', 'last', 'both'], default='both', help='Which winner to report')
    parser.add_argument('--show-board', action='store_true', help='Print the winning board with marks')
    parser.add_argument('--log-level', default=settings.log_level, help='Logging level name')
    args = parser.parse_args(argv)

    configure_logging(args.log_level)

    try:
        draws, grids = read_game(args.path)
        game = Game.from_grids(draws, grids)
    except BingoError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    missing = False
    if args.mode in ('first', 'both'):
        win = game.copy().play_to_first_win()
        if win is None:
            print('There was no winner!')
            missing = True
        else:
            _print_win(win, '', args.show_board)

    if args.mode in ('last', 'both'):
        if args.mode == 'both':
            print()
        win = game.copy().play_to_last_win()
        if win is None:
            print("There wasn't a last winner!")
            missing = True
        else:
            _print_win(win, 'Last', args.show_board)

    return 2 if missing else 0


if __name__ == '__main__':
    sys.exit(main())
