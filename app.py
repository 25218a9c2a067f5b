from __future__ import annotations

import os
import sys
from typing import Any, Dict, List

from flask import Flask, jsonify, request

# Ensure package imports work when executed directly from repo root
if __package__ in (None, ""):
    sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

from gaps_core.board import Board  # noqa: E402
from gaps_core.cards import Card  # noqa: E402
from gaps_core.catalog import CATALOG  # noqa: E402
from gaps_core.deal import clear_unfinished, deal, new_board  # noqa: E402
from gaps_core.logging_utils import get_logger, setup_logging  # noqa: E402
from gaps_core.moves import apply_move, finalized_cards, is_solved, movable_cards  # noqa: E402

log = get_logger(__name__)

app = Flask(__name__)


def _card_to_json(card: Card, r: int, c: int) -> Dict[str, Any]:
    return {
        "key": card.key,
        "rank": None if card.is_blank() else card.rank,
        "suit": None if card.is_blank() else card.suit,
        "symbol": card.symbol,
        "color": card.color,
        "blank": card.is_blank(),
        "row": r,
        "column": c,
    }


def _sorted_keys(cards) -> List[str]:
    return sorted(c.key for c in cards)


def state_to_json(b: Board) -> Dict[str, Any]:
    return {
        "stock": [c.key for c in b.stock],
        "rows": [[c.key for c in row] for row in b.rows],
        "dealCount": int(b.deal_count),
    }


def json_to_state(obj: Dict[str, Any]) -> Board:
    board = Board(
        stock=tuple(CATALOG.from_key(str(k)) for k in obj["stock"]),
        rows=tuple(tuple(CATALOG.from_key(str(k)) for k in row) for row in obj["rows"]),
        deal_count=int(obj.get("dealCount", 0)),
    )
    board.validate()
    return board


def view_to_json(b: Board) -> Dict[str, Any]:
    return {
        "rows": [[_card_to_json(card, r, c) for c, card in enumerate(row)] for r, row in enumerate(b.rows)],
        "movable": _sorted_keys(movable_cards(b)),
        "finalized": _sorted_keys(finalized_cards(b)),
        "dealCount": int(b.deal_count),
        "needsDeal": b.needs_deal(),
        "solved": is_solved(b),
    }


def _ok(b: Board) -> Any:
    return jsonify({"ok": True, "state": state_to_json(b), "view": view_to_json(b)})


def _bad(message: str, status: int = 400, **extra: Any) -> Any:
    payload: Dict[str, Any] = {"ok": False, "error": message}
    payload.update(extra)
    return jsonify(payload), status


def _state_from_body(body: Any) -> Board:
    if not isinstance(body, dict):
        raise ValueError("body must be a JSON object")
    s_in = body.get("state")
    if not s_in:
        raise ValueError("missing state")
    return json_to_state(s_in)


@app.post("/api/new")
def api_new() -> Any:
    return _ok(new_board())


@app.post("/api/view")
def api_view() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    try:
        board = _state_from_body(body)
    except (KeyError, TypeError, ValueError) as e:
        return _bad(f"bad state: {e}")
    return _ok(board)


@app.post("/api/deal")
def api_deal() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    try:
        board = _state_from_body(body)
        seed = body.get("seed", None)
        seed = int(seed) if seed is not None else None
    except (KeyError, TypeError, ValueError) as e:
        return _bad(f"bad state: {e}")
    next_board = deal(board, seed=seed)
    if next_board is board:
        return _bad("Deal blocked", movable=_sorted_keys(movable_cards(board)))
    log.info("deal #%d", next_board.deal_count)
    return _ok(next_board)


@app.post("/api/move")
def api_move() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    try:
        board = _state_from_body(body)
        card = CATALOG.from_key(str(body["card"]))
    except (KeyError, TypeError, ValueError) as e:
        return _bad(f"bad state: {e}")
    next_board = apply_move(board, card)
    if next_board is board:
        return _bad("Illegal move", movable=_sorted_keys(movable_cards(board)))
    return _ok(next_board)


@app.post("/api/clear")
def api_clear() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    try:
        board = _state_from_body(body)
    except (KeyError, TypeError, ValueError) as e:
        return _bad(f"bad state: {e}")
    return _ok(clear_unfinished(board))


# Entrypoint for "python app.py"
if __name__ == "__main__":
    setup_logging()
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=debug)
