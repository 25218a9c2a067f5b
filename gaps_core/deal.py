from __future__ import annotations

import random
from typing import List, Optional

from .board import ROW_COUNT, ROW_LENGTH, Board
from .cards import Card
from .catalog import CATALOG, Catalog
from .logging_utils import get_logger
from .moves import finalized_prefix_length, movable_cards

log = get_logger(__name__)


def new_board(catalog: Catalog = CATALOG) -> Board:
    """Creates an undealt board: every card in the stock, all rows empty."""
    return Board(stock=tuple(catalog.all()), rows=((),) * ROW_COUNT, deal_count=0, catalog=catalog)


def clear_unfinished(board: Board) -> Board:
    """Cuts every row back to its finalized run and returns the cut tails to the stock."""
    stock: List[Card] = list(board.stock)
    rows = []
    for row in board.rows:
        keep = finalized_prefix_length(board, row)
        rows.append(row[:keep])
        stock.extend(row[keep:])
    return board.with_rows(rows, stock=stock)


def deal(board: Board, rng: Optional[random.Random] = None, seed: Optional[int] = None) -> Board:
    """Recycles unfinished cards, shuffles the stock and refills every row to 13 cards.

    Dealing is refused while any legal move remains; the board is then returned as is.
    """
    blocking = movable_cards(board)
    if blocking:
        log.debug("deal blocked by %d movable cards", len(blocking))
        return board
    rng = rng or random.Random(seed)
    cleared = clear_unfinished(board)
    stock = list(cleared.stock)
    rng.shuffle(stock)
    rows = []
    for row in cleared.rows:
        need = ROW_LENGTH - len(row)
        rows.append(row + tuple(stock[:need]))
        del stock[:need]
    dealt = cleared.with_rows(rows, stock=stock, deal_count=board.deal_count + 1)
    log.debug("deal #%d placed %d cards", dealt.deal_count, len(cleared.stock) - len(stock))
    return dealt
