import itertools
import unittest

from helpers import board_from
from tictactoe.board import Board, Mark
from tictactoe.strategist import MoveStrategist, CORNER_POSITIONS, EDGE_POSITIONS


class TestPriorities(unittest.TestCase):
    def setUp(self) -> None:
        self.ai = MoveStrategist()

    def test_center_taken_by_human_goes_to_first_corner(self) -> None:
        board = board_from("...", ".O.", "...")
        self.assertEqual(self.ai.choose_move(board, 1, 1), (0, 0))

    def test_empty_center_is_claimed(self) -> None:
        board = board_from("O..", "...", "...")
        self.assertEqual(self.ai.choose_move(board, 0, 0), (1, 1))

    def test_center_held_by_ai_goes_to_first_free_edge(self) -> None:
        board = board_from("O..", ".X.", "..O")
        self.assertEqual(self.ai.choose_move(board, 2, 2), (0, 1))
        board = board_from("OO.", ".X.", "X.O")
        # row 0 is actionable first
        self.assertEqual(self.ai.choose_move(board, 0, 1), (0, 2))

    def test_edge_order(self) -> None:
        board = board_from("OXO", ".X.", "O..")
        # row 2 and column 0 answered before edges: col 0 O . O
        self.assertEqual(self.ai.choose_move(board, 2, 0), (1, 0))
        board = board_from("OX.", ".XO", ".O.")
        self.assertEqual(self.ai.choose_move(board, 2, 1), (1, 0))

    def test_corner_order(self) -> None:
        board = board_from("X..", ".O.", "...")
        self.assertEqual(self.ai.positional_move(board), (2, 2))
        board = board_from("X..", ".O.", "..X")
        self.assertEqual(self.ai.positional_move(board), (0, 2))
        board = board_from("X.X", ".O.", "..X")
        self.assertEqual(self.ai.positional_move(board), (2, 0))

    def test_falls_back_to_edges_when_corners_are_gone(self) -> None:
        board = board_from("XOX", ".O.", "O.X")
        self.assertEqual(self.ai.positional_move(board), (1, 2))

    def test_falls_back_to_corners_when_edges_are_gone(self) -> None:
        board = board_from(".O.", "OXO", ".X.")
        self.assertEqual(self.ai.positional_move(board), (0, 0))

    def test_row_before_column_before_diagonals(self) -> None:
        # human just played (1,0), row 1 is answered first
        board = board_from("X..", "OO.", "X.X")
        self.assertEqual(self.ai.choose_move(board, 1, 0), (1, 2))
        # column 0 actionable, row 1 not
        board = board_from("O..", "OX.", "...")
        self.assertEqual(self.ai.choose_move(board, 1, 0), (2, 0))

    def test_diagonal_block(self) -> None:
        board = board_from("O.X", ".O.", "...")
        self.assertEqual(self.ai.choose_move(board, 1, 1), (2, 2))
        board = board_from("..O", "X..", "...")
        board.place(1, 1, Mark.HUMAN)
        self.assertEqual(self.ai.choose_move(board, 1, 1), (2, 0))

    def test_takes_own_win_in_scoped_column(self) -> None:
        # ai has two in column 2 and that column is the one being checked
        board = board_from("O.X", "..X", "O..")
        self.assertEqual(self.ai.choose_move(board, 0, 2), (2, 2))

    def test_takes_diagonal_win(self) -> None:
        board = board_from("X.O", "OX.", "O..")
        self.assertEqual(self.ai.choose_move(board, 0, 2), (2, 2))

    def test_full_board_returns_none(self) -> None:
        board = board_from("OXO", "OXX", "XOO")
        self.assertIsNone(self.ai.choose_move(board, 2, 2))


class TestNeverIllegal(unittest.TestCase):
    def test_move_is_always_an_empty_cell(self) -> None:
        ai = MoveStrategist()
        cells = [(r, c) for r in range(3) for c in range(3)]
        # every board with n human marks and n-1 ai marks, human moved last
        for n in range(1, 5):
            for humans in itertools.combinations(cells, n):
                rest = [cell for cell in cells if cell not in humans]
                for ais in itertools.combinations(rest, n - 1):
                    board = Board()
                    for r, c in humans:
                        board.place(r, c, Mark.HUMAN)
                    for r, c in ais:
                        board.place(r, c, Mark.AI)
                    for last in humans:
                        move = ai.choose_move(board, *last)
                        self.assertIsNotNone(move)
                        self.assertIs(board.get(*move), Mark.EMPTY)

    def test_positional_lists(self) -> None:
        self.assertEqual(CORNER_POSITIONS, ((0, 0), (2, 2), (0, 2), (2, 0)))
        self.assertEqual(EDGE_POSITIONS, ((0, 1), (1, 2), (2, 1), (1, 0)))


if __name__ == "__main__":
    unittest.main()
