from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

Coord = Tuple[int, int]  # (row, column)

RANKS: Tuple[str, ...] = ("2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K")
# suit -> (symbol, color)
SUITS: Dict[str, Tuple[str, str]] = {
    "C": ("♣", "black"),
    "D": ("♦", "red"),
    "H": ("♥", "red"),
    "S": ("♠", "black"),
}
BLANK = "B"  # rank marker and pseudo-suit shared by the four blanks
BLANK_COUNT = 4


@dataclass(frozen=True)
class Card:
    """One board slot: a ranked playing card, or one of the four blanks."""
    rank: str
    suit: str
    slot: int = 0  # tells the blanks apart; always 0 for ranked cards

    @staticmethod
    def blank(slot: int) -> 'Card':
        return Card(rank=BLANK, suit=BLANK, slot=slot)

    def is_blank(self) -> bool:
        return self.rank == BLANK

    @property
    def key(self) -> str:
        if self.is_blank():
            return f"{BLANK}{self.slot}"
        return f"{self.rank}{self.suit}"

    @property
    def symbol(self) -> Optional[str]:
        if self.is_blank():
            return None
        return SUITS[self.suit][0]

    @property
    def color(self) -> Optional[str]:
        if self.is_blank():
            return None
        return SUITS[self.suit][1]

    def __str__(self) -> str:
        return self.key
