from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from .cards import Card, Coord
from .catalog import CATALOG, Catalog

ROW_COUNT = 4
ROW_LENGTH = 13

Row = Tuple[Card, ...]


@dataclass(frozen=True)
class Board:
    """Immutable snapshot of a game: undealt stock, dealt rows and the deal counter.

    A card's position is wherever it sits in `rows`; cards in `stock` have none.
    Every transition builds a new Board, so older snapshots stay valid.
    """
    stock: Tuple[Card, ...]
    rows: Tuple[Row, ...] = ((),) * ROW_COUNT
    deal_count: int = 0
    catalog: Catalog = field(default=CATALOG, compare=False, repr=False)

    def at(self, r: int, c: int) -> Optional[Card]:
        """Gets the card at a given row and column, None past the end of the row."""
        row = self.rows[r]
        if 0 <= c < len(row):
            return row[c]
        return None

    def cells(self) -> Iterable[Tuple[Coord, Card]]:
        """Iterates over all occupied cells in row-major order."""
        for r, row in enumerate(self.rows):
            for c, card in enumerate(row):
                yield (r, c), card

    def position_of(self, card: Card) -> Optional[Coord]:
        for coord, placed in self.cells():
            if placed == card:
                return coord
        return None

    def blank_positions(self) -> List[Coord]:
        """Coordinates of the blanks currently on the board."""
        return [coord for coord, card in self.cells() if card.is_blank()]

    def needs_deal(self) -> bool:
        return len(self.stock) != 0

    def with_rows(self, rows: Iterable[Iterable[Card]], stock: Optional[Iterable[Card]] = None,
                  deal_count: Optional[int] = None) -> 'Board':
        return Board(
            stock=self.stock if stock is None else tuple(stock),
            rows=tuple(tuple(row) for row in rows),
            deal_count=self.deal_count if deal_count is None else deal_count,
            catalog=self.catalog,
        )

    def validate(self) -> None:
        """Raises ValueError unless every catalog card sits exactly once in stock or rows."""
        if len(self.rows) != ROW_COUNT:
            raise ValueError(f"Expected {ROW_COUNT} rows, got {len(self.rows)}")
        for r, row in enumerate(self.rows):
            if len(row) > ROW_LENGTH:
                raise ValueError(f"Row {r} holds {len(row)} cards, more than {ROW_LENGTH}")
        placed = list(self.stock) + [card for _, card in self.cells()]
        if len(placed) != len(self.catalog):
            raise ValueError(f"Expected {len(self.catalog)} cards, got {len(placed)}")
        if len(set(placed)) != len(placed):
            raise ValueError("A card appears more than once")
        unknown = [card.key for card in placed if card not in self.catalog]
        if unknown:
            raise ValueError(f"Unknown cards: {', '.join(unknown)}")

    def pretty(self) -> str:
        """Generates a human-readable grid: one line per row, blanks shown as '--'."""
        lines: List[str] = []
        for row in self.rows:
            cells = ["--" if card.is_blank() else card.key for card in row]
            lines.append(" ".join(cell.rjust(3) for cell in cells))
        return "\n".join(lines)
