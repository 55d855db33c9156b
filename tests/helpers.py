import os

from tictactoe.board import Board, Mark

SYMBOLS = {'O': Mark.HUMAN, 'X': Mark.AI, '.': Mark.EMPTY}


def board_from(*rows):
    """
    build a Board from three strings like "OX."
    """
    board = Board()
    for r, row in enumerate(rows):
        for c, ch in enumerate(row):
            mark = SYMBOLS[ch]
            if mark is not Mark.EMPTY:
                board.place(r, c, mark)
    return board


def qt_app():
    """
    one QApplication for every test module, no display needed
    """
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    from PySide6.QtWidgets import QApplication
    return QApplication.instance() or QApplication([])
