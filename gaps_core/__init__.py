"""
Gaps core Python package.

Pure rules engine for the Gaps patience game: 52 slots in a 4x13 grid,
the four Aces replaced by blanks that cards are moved into.
Modules:
- cards.py: Card, Coord, rank and suit tables
- catalog.py: Catalog (the fixed 52-card universe), CATALOG
- board.py: Board (immutable game-state snapshot)
- deal.py: new_board, clear_unfinished, deal
- moves.py: movable_cards, finalized_cards, apply_move, is_solved
"""
from .cards import BLANK, RANKS, SUITS, Card, Coord
from .catalog import CATALOG, Catalog, CatalogError
from .board import Board
from .deal import clear_unfinished, deal, new_board
from .moves import apply_move, finalized_cards, finalized_prefix_length, is_solved, movable_cards

__all__ = [
    "BLANK",
    "RANKS",
    "SUITS",
    "Card",
    "Coord",
    "CATALOG",
    "Catalog",
    "CatalogError",
    "Board",
    "new_board",
    "clear_unfinished",
    "deal",
    "movable_cards",
    "finalized_cards",
    "finalized_prefix_length",
    "apply_move",
    "is_solved",
]
