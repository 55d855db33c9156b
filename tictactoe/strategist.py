import logging

from .board import Mark
from .line_scanner import Scope, scan_for_actionable

log = logging.getLogger(__name__)

# fallback spots when no line needs an answer
# corners stop the center-then-corner fork, edges stop the three corner fork
CORNER_POSITIONS = ((0, 0), (2, 2), (0, 2), (2, 0))
EDGE_POSITIONS = ((0, 1), (1, 2), (2, 1), (1, 0))
CENTER = (1, 1)


class MoveStrategist:
    """
    picks the ai move right after the human moved at (row, col)

    order: human's row, human's column, diagonals, then the fixed
    positional lists. no lookahead.
    """
    def __init__(self, mark=Mark.AI):
        self.mark = mark

    def choose_move(self, board, row, col):
        """
        returns (row, col) to play, or None when the board is full (tie)
        """
        for scope in (Scope.row(row), Scope.column(col), Scope.diagonals()):
            coord = scan_for_actionable(board, scope)
            if coord is not None:
                log.debug("answering line %s at %s", scope, coord)
                return coord
        coord = self.positional_move(board)
        log.debug("positional move %s", coord)
        return coord

    def positional_move(self, board):
        center = board.get(*CENTER)
        if center is Mark.EMPTY:
            return CENTER
        if center is self.mark:
            order = (EDGE_POSITIONS, CORNER_POSITIONS)
        else:
            order = (CORNER_POSITIONS, EDGE_POSITIONS)
        for positions in order:
            for pos in positions:
                if board.get(*pos) is Mark.EMPTY:
                    return pos
        return None
