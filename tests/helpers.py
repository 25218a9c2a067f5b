from gaps_core import CATALOG, RANKS, Board


def make_board(rows, deal_count=0):
    """Builds a board from row keys ('2C', 'B0', ...); every other card goes to the stock."""
    placed = [tuple(CATALOG.from_key(k) for k in row) for row in rows]
    while len(placed) < 4:
        placed.append(())
    used = {card for row in placed for card in row}
    stock = tuple(card for card in CATALOG.all() if card not in used)
    return Board(stock=stock, rows=tuple(placed), deal_count=deal_count)


def sorted_rows():
    """The solved layout: each row 2..K of one suit followed by a blank."""
    return [[f"{r}{suit}" for r in RANKS] + [f"B{i}"] for i, suit in enumerate("CDHS")]


def assert_invariants(test, board):
    test.assertEqual(52, len(board.stock) + sum(len(row) for row in board.rows))
    seen = set()
    for (r, c), card in board.cells():
        test.assertEqual((r, c), board.position_of(card))
        test.assertIs(card, board.rows[r][c])
        seen.add(card)
    for card in board.stock:
        test.assertIsNone(board.position_of(card))
        seen.add(card)
    test.assertEqual(52, len(seen))
