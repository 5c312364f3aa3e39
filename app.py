from __future__ import annotations

import logging
import os
import sys
from typing import Any, Dict, List, Optional, Tuple

from flask import Flask, jsonify, request

# Ensure package imports work when executed directly from repo root
if __package__ in (None, ""):
    sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

from game import BingoError, Game, Win, parse_game  # noqa: E402
from bingo_core.config import configure_logging, get_settings  # noqa: E402

MODES = ("first", "last", "both")

configure_logging(get_settings().log_level)
logger = logging.getLogger(__name__)

app = Flask(__name__)


def _win_to_json(w: Optional[Win]) -> Optional[Dict[str, Any]]:
    if w is None:
        return None
    return {
        "number": int(w.number),
        "drawIndex": int(w.draw_index),
        "boardIndex": int(w.board_index),
        "unmarked": w.board.unmarked_numbers(),
        "score": int(w.score),
    }


def _ints(values: List[Any], what: str) -> List[int]:
    # bool is an int subclass; JSON true/false are not numbers here
    for v in values:
        if not isinstance(v, int) or isinstance(v, bool):
            raise ValueError(f"{what} must hold integers, got {v!r}")
    return list(values)


def _json_to_inputs(body: Dict[str, Any]) -> Tuple[List[int], List[List[int]]]:
    text = body.get("text")
    if isinstance(text, str):
        return parse_game(text)
    draws = body.get("draws")
    boards = body.get("boards")
    if not isinstance(draws, list) or not isinstance(boards, list):
        raise ValueError("text, or draws and boards, required")
    if not draws or not boards:
        raise ValueError("at least one draw and one board required")
    if not all(isinstance(b, list) for b in boards):
        raise ValueError("each board must be a list of integers")
    return _ints(draws, "draws"), [_ints(b, f"board {i}") for i, b in enumerate(boards)]


@app.get("/api/health")
def api_health() -> Any:
    return jsonify({"ok": True})


@app.post("/api/play")
def api_play() -> Any:
    body = request.get_json(force=True, silent=True)
    if not isinstance(body, dict):
        return jsonify({"ok": False, "error": "JSON object required"}), 400
    mode = str(body.get("mode", "both"))
    if mode not in MODES:
        return jsonify({"ok": False, "error": f"mode must be one of {', '.join(MODES)}"}), 400
    try:
        draws, grids = _json_to_inputs(body)
        game = Game.from_grids(draws, grids)
    except BingoError as e:
        return jsonify({"ok": False, "error": str(e)}), 400
    except (TypeError, ValueError) as e:
        return jsonify({"ok": False, "error": f"bad input: {e}"}), 400

    out: Dict[str, Any] = {"ok": True}
    if mode in ("first", "both"):
        out["first"] = _win_to_json(game.copy().play_to_first_win())
    if mode in ("last", "both"):
        out["last"] = _win_to_json(game.copy().play_to_last_win())
    logger.debug("played %d draws against %d boards", len(game.draws), len(game.boards))
    return jsonify(out)


if __name__ == "__main__":
    app.run(host="127.0.0.1", port=int(os.getenv("PORT", "5000")), debug=False)
