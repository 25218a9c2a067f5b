from __future__ import annotations

import argparse
import random
from typing import Optional

from .board import Board
from .catalog import CATALOG
from .deal import clear_unfinished, deal, new_board
from .logging_utils import setup_logging
from .moves import apply_move, finalized_cards, is_solved, movable_cards


def _keys(cards) -> str:
    return " ".join(sorted(c.key for c in cards)) or "(none)"


def show(board: Board) -> None:
    print()
    print(board.pretty())
    print(f"Deals: {board.deal_count}  Finalized: {len(finalized_cards(board))}")
    print('Movable:', _keys(movable_cards(board)))


def step(board: Board, command: str, rng: random.Random) -> Optional[Board]:
    """Applies one typed command. Returns None on quit."""
    cmd = command.strip()
    if cmd.lower() in ('q', 'quit'):
        return None
    if cmd.lower() in ('d', 'deal'):
        nxt = deal(board, rng=rng)
        if nxt is board:
            print('Cannot deal while moves remain.')
        return nxt
    if cmd.lower() in ('c', 'clear'):
        return clear_unfinished(board)
    try:
        card = CATALOG.from_key(cmd.upper())
    except KeyError:
        print('Could not parse. Enter a card like 7H or 10S, deal, clear or quit.')
        return board
    nxt = apply_move(board, card)
    if nxt is board:
        print('Illegal move. Try again.')
    return nxt


def main() -> None:
    parser = argparse.ArgumentParser(description='Gaps patience in the terminal')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for deals')
    parser.add_argument('--log-level', default=None, help='Logging level (default: $LOG_LEVEL or INFO)')
    args = parser.parse_args()

    if args.log_level:
        setup_logging(args.log_level)
    else:
        setup_logging()

    rng = random.Random(args.seed)
    board: Optional[Board] = deal(new_board(), rng=rng)
    while board is not None:
        show(board)
        if is_solved(board):
            print(f"Solved in {board.deal_count} deals!")
            break
        board = step(board, input('Card to move, deal, clear or quit: '), rng)


if __name__ == '__main__':
    main()
