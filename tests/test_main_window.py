import unittest

from PySide6.QtTest import QTest

from helpers import qt_app
from tictactoe.board import Mark
from tictactoe.config import TIE, HUMAN_WINS, AI_WINS
from tictactoe.session import GameSession
from tictactoe.ui.board_widget import CellAnchor
from tictactoe.ui.main_window import TicTacToeWindow, outcome_message


def setUpModule():
    global app
    app = qt_app()


class TestOutcomeMessage(unittest.TestCase):
    def test_messages(self) -> None:
        self.assertEqual(outcome_message(TIE), "Tie")
        self.assertEqual(outcome_message(HUMAN_WINS), "Player wins")
        self.assertEqual(outcome_message(AI_WINS), "AI wins")
        with self.assertRaises(ValueError):
            outcome_message(2)


class TestWindow(unittest.TestCase):
    def setUp(self) -> None:
        self.session = GameSession(0)
        self.window = TicTacToeWindow(self.session)

    def test_new_game_arms_board(self) -> None:
        self.assertFalse(self.window.board_widget.accepts_clicks())
        self.window.new_game()
        self.assertTrue(self.window.board_widget.accepts_clicks())
        self.assertIsInstance(self.session.anchor(1, 1), CellAnchor)
        self.assertEqual(self.window.message_label.text(), "Your turn.")

    def test_click_places_marks_and_turns_off_cells(self) -> None:
        self.window.new_game()
        self.window.board_widget.cell_clicked.emit(1, 1)
        self.assertEqual(self.window.message_label.text(), "AI is thinking...")
        QTest.qWait(20)
        self.assertFalse(self.session.anchor(1, 1).enabled)
        self.assertFalse(self.session.anchor(0, 0).enabled)
        self.assertTrue(self.session.anchor(2, 2).enabled)
        self.assertIs(self.session.board.get(0, 0), Mark.AI)
        self.assertEqual(self.window.message_label.text(), "Your turn.")

    def test_rejected_click_shows_error(self) -> None:
        self.window.board_widget.cell_clicked.emit(0, 0)
        self.assertIn("start a new game", self.window.message_label.text())

    def test_end_message_and_input_off(self) -> None:
        self.window.new_game()
        self.session.board.place(1, 0, Mark.HUMAN)
        self.session.board.place(1, 1, Mark.HUMAN)
        self.window.board_widget.cell_clicked.emit(1, 2)
        self.assertEqual(self.window.message_label.text(), "Player wins")
        self.assertFalse(self.window.board_widget.accepts_clicks())


if __name__ == "__main__":
    unittest.main()
