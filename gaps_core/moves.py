from __future__ import annotations

from typing import FrozenSet, List, Optional, Set

from .board import Board, Row
from .cards import Card, Coord
from .logging_utils import get_logger

log = get_logger(__name__)

FIRST_RANK = "2"
LAST_RANK = "K"


def finalized_prefix_length(board: Board, row: Row) -> int:
    """Length of the same-suit ascending run that starts with a 2 at the head of the row."""
    if not row or row[0].rank != FIRST_RANK:
        return 0
    length = 1
    while length < len(row) and row[length] == board.catalog.successor(row[length - 1]):
        length += 1
    return length


def finalized_cards(board: Board) -> FrozenSet[Card]:
    """Cards locked into a completed run; moves never displace them."""
    out: Set[Card] = set()
    for row in board.rows:
        out.update(row[:finalized_prefix_length(board, row)])
    return frozenset(out)


def movable_cards(board: Board) -> FrozenSet[Card]:
    """Cards that some blank currently on the board would accept."""
    out: Set[Card] = set()
    for r, c in board.blank_positions():
        if c == 0:
            # a 2 may always head a row
            out.update(board.catalog.by_rank(FIRST_RANK))
            continue
        left = board.at(r, c - 1)
        if left is None or left.is_blank() or left.rank == LAST_RANK:
            continue
        nxt = board.catalog.successor(left)
        if nxt is not None:
            out.add(nxt)
    return frozenset(out)


def _swap(board: Board, a: Coord, b: Coord) -> Board:
    rows = [list(row) for row in board.rows]
    (ar, ac), (br, bc) = a, b
    rows[ar][ac], rows[br][bc] = rows[br][bc], rows[ar][ac]
    return board.with_rows(rows)


def _move_two(board: Board, pos: Coord) -> Optional[Coord]:
    """Picks the column-0 blank a 2 at `pos` should move into."""
    first_column: List[Coord] = sorted((r, c) for r, c in board.blank_positions() if c == 0)
    if not first_column:
        return None
    row, column = pos
    if column != 0:
        return first_column[0]
    # already heading a row: step down to the next blank, wrapping to the top
    below = [coord for coord in first_column if coord[0] > row]
    return below[0] if below else first_column[0]


def _move_ranked(board: Board, card: Card) -> Optional[Coord]:
    """Finds the blank right of the card's predecessor, if there is one."""
    prev = board.catalog.predecessor(card)
    if prev is None:
        return None
    prev_pos = board.position_of(prev)
    if prev_pos is None:
        return None
    r, c = prev_pos
    dest = board.at(r, c + 1)
    if dest is None or not dest.is_blank():
        return None
    return (r, c + 1)


def apply_move(board: Board, card: Card) -> Board:
    """Moves a card into the blank it is eligible for, swapping the two.

    Illegal moves leave the board untouched and return it unchanged.
    """
    pos = board.position_of(card)
    dest: Optional[Coord] = None
    if pos is not None and not card.is_blank():
        if card.rank == FIRST_RANK:
            dest = _move_two(board, pos)
        else:
            dest = _move_ranked(board, card)
    if pos is None or dest is None:
        log.debug("ignored move of %s", card.key)
        return board
    log.debug("move %s %s -> %s", card.key, pos, dest)
    return _swap(board, pos, dest)


def is_solved(board: Board) -> bool:
    """True once the stock is empty, nothing can move and every ranked card is finalized."""
    if board.needs_deal() or movable_cards(board):
        return False
    ranked = sum(1 for card in board.catalog.all() if not card.is_blank())
    return len(finalized_cards(board)) == ranked
