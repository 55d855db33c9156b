from enum import Enum

from .config import BOARD_SIZE, HUMAN_SYMBOL, AI_SYMBOL
from .errors import InvalidCoordinate, CellOccupied


class Mark(Enum):
    """
    what a cell holds
    """
    EMPTY = ''
    HUMAN = HUMAN_SYMBOL
    AI = AI_SYMBOL


class Board:
    """
    3x3 grid of marks, row-major, (row, col) in [0, 3)

    a cell goes from EMPTY to a mark once and stays that way until
    the board is thrown away
    """
    size = BOARD_SIZE

    def __init__(self):
        self._cells = [[Mark.EMPTY for _ in range(self.size)]
                       for _ in range(self.size)]

    def _check(self, row, col):
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise InvalidCoordinate(row, col)

    def place(self, row, col, mark):
        """
        put mark on an empty cell
        raises InvalidCoordinate / CellOccupied, board untouched on error
        """
        if mark is Mark.EMPTY:
            raise ValueError("cannot place an empty mark")
        self._check(row, col)
        current = self._cells[row][col]
        if current is not Mark.EMPTY:
            raise CellOccupied(row, col, current)
        self._cells[row][col] = mark

    def get(self, row, col):
        self._check(row, col)
        return self._cells[row][col]

    def is_full(self):
        return all(cell is not Mark.EMPTY for row in self._cells for cell in row)

    def empty_cells(self):
        # row-major order
        return [(r, c) for r in range(self.size) for c in range(self.size)
                if self._cells[r][c] is Mark.EMPTY]

    def rows(self):
        """
        read-only snapshot for painting
        """
        return tuple(tuple(row) for row in self._cells)

    def __str__(self):
        return "\n".join(
            "".join(f"[{cell.value or '_'}]" for cell in row)
            for row in self._cells
        )
