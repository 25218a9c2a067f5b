from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Tuple

from .cards import BLANK, BLANK_COUNT, RANKS, SUITS, Card


class CatalogError(ValueError):
    """Raised when a catalog does not hold exactly 48 ranked cards and 4 blanks."""


def standard_cards() -> List[Card]:
    """Ranked cards suit by suit in RANKS order, followed by the blanks."""
    cards = [Card(rank=r, suit=s) for s in SUITS for r in RANKS]
    cards.extend(Card.blank(i) for i in range(BLANK_COUNT))
    return cards


class Catalog:
    """The fixed universe of cards for one game, with per-suit rank links.

    Successor and predecessor links are computed once here, so every lookup
    afterwards is a dict access.
    """

    def __init__(self, cards: Optional[Iterable[Card]] = None):
        self._cards: Tuple[Card, ...] = tuple(standard_cards() if cards is None else cards)
        self._validate()
        self._by_key: Dict[str, Card] = {c.key: c for c in self._cards}
        self._blanks: Tuple[Card, ...] = tuple(sorted((c for c in self._cards if c.is_blank()), key=lambda c: c.slot))
        self._successor: Dict[Card, Card] = {}
        self._predecessor: Dict[Card, Card] = {}
        for suit in SUITS:
            run = [self._by_key[f"{r}{suit}"] for r in RANKS]
            for lower, upper in zip(run, run[1:]):
                self._successor[lower] = upper
                self._predecessor[upper] = lower

    def _validate(self) -> None:
        if len(set(self._cards)) != len(self._cards):
            raise CatalogError("Duplicate cards in catalog")
        ranked = [c for c in self._cards if not c.is_blank()]
        expected = {(r, s) for s in SUITS for r in RANKS}
        if len(ranked) != len(expected) or {(c.rank, c.suit) for c in ranked} != expected:
            raise CatalogError(f"Expected {len(expected)} ranked cards, got {len(ranked)}")
        if any(c.slot != 0 for c in ranked):
            raise CatalogError("Ranked cards must use slot 0")
        blanks = [c for c in self._cards if c.is_blank()]
        if any(c.suit != BLANK for c in blanks) or len(blanks) != BLANK_COUNT \
                or {c.slot for c in blanks} != set(range(BLANK_COUNT)):
            raise CatalogError(f"Expected {BLANK_COUNT} blanks, got {len(blanks)}")

    def __len__(self) -> int:
        return len(self._cards)

    def __contains__(self, card: object) -> bool:
        return isinstance(card, Card) and self._by_key.get(card.key) == card

    def all(self) -> List[Card]:
        return list(self._cards)

    def by_rank(self, rank: str) -> List[Card]:
        if rank == BLANK:
            return list(self._blanks)
        return [c for c in self._cards if c.rank == rank]

    def blanks(self) -> List[Card]:
        return list(self._blanks)

    def successor(self, card: Card) -> Optional[Card]:
        return self._successor.get(card)

    def predecessor(self, card: Card) -> Optional[Card]:
        return self._predecessor.get(card)

    def from_key(self, key: str) -> Card:
        return self._by_key[key]


CATALOG = Catalog()
