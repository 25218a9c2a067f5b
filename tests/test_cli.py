import io
import random
import sys
import unittest
from contextlib import redirect_stdout
from unittest.mock import patch

from gaps_core import CATALOG
from gaps_core import cli

from helpers import make_board


class TestCli(unittest.TestCase):
    def _step(self, board, command):
        buf = io.StringIO()
        with redirect_stdout(buf):
            nxt = cli.step(board, command, random.Random(0))
        return nxt, buf.getvalue()

    def test_given_card_key_when_stepping_then_move_applied(self):
        board = make_board([["2C", "B0"], ["3C"]])
        nxt, out = self._step(board, " 3c ")
        self.assertEqual(nxt.position_of(CATALOG.from_key("3C")), (0, 1))
        self.assertEqual(out, "")

    def test_given_illegal_or_garbage_input_when_stepping_then_board_kept_and_message(self):
        board = make_board([["2C", "B0"], ["3C"]])
        nxt, out = self._step(board, "4C")
        self.assertIs(nxt, board)
        self.assertIn("Illegal move", out)
        nxt, out = self._step(board, "hello")
        self.assertIs(nxt, board)
        self.assertIn("Could not parse", out)

    def test_given_deal_clear_and_quit_when_stepping_then_dispatched(self):
        board = make_board([["2C", "B0"], ["3C"]])
        nxt, out = self._step(board, "deal")
        self.assertIs(nxt, board)
        self.assertIn("Cannot deal", out)
        nxt, _ = self._step(board, "c")
        self.assertEqual([len(row) for row in nxt.rows], [1, 0, 0, 0])
        nxt, _ = self._step(board, "QUIT")
        self.assertIsNone(nxt)

    def test_given_seed_when_running_main_then_prints_board_and_exits_on_quit(self):
        buf = io.StringIO()
        with patch.object(sys, "argv", ["gaps", "--seed", "3"]), \
                patch("builtins.input", side_effect=["q"]), \
                patch.object(cli, "setup_logging"), \
                redirect_stdout(buf):
            cli.main()
        out = buf.getvalue()
        self.assertIn("Deals: 1", out)
        self.assertIn("Movable:", out)


if __name__ == "__main__":
    unittest.main()
