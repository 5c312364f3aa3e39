"""
Bingo core Python package.

This package holds the board and playback logic, kept apart from the CLI and
the Flask app so it can be tested on its own.
Modules:
- board.py: Board
- game.py: Game, Win, first-win and last-win playback
- parse.py: text -> (draws, boards)
- errors.py, config.py, cli.py
"""
