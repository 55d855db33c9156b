"""
line scanning over a Board: completed lines (wins) and lines one move
away from completion (win or block spots)

scans only look at the lines inside the scope they are given. the turn
controller re-checks the row, column and diagonals of the latest move,
so a full line anywhere else is not reported until a later move touches it.
"""
import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from .board import Mark

log = logging.getLogger(__name__)

Coord = Tuple[int, int]

MAIN_DIAGONAL = ((0, 0), (1, 1), (2, 2))
ANTI_DIAGONAL = ((0, 2), (1, 1), (2, 0))


@dataclass(frozen=True)
class Scope:
    """
    subset of lines a scan looks at: one row, one column or both diagonals
    """
    kind: str                   # 'row', 'column' or 'diagonals'
    index: int = 0              # row/col number, unused for diagonals

    @classmethod
    def row(cls, index):
        return cls('row', index)

    @classmethod
    def column(cls, index):
        return cls('column', index)

    @classmethod
    def diagonals(cls):
        return cls('diagonals')

    def lines(self):
        if self.kind == 'row':
            return (tuple((self.index, c) for c in range(3)),)
        if self.kind == 'column':
            return (tuple((r, self.index) for r in range(3)),)
        if self.kind == 'diagonals':
            return (MAIN_DIAGONAL, ANTI_DIAGONAL)
        raise ValueError(f"unknown scope kind: {self.kind}")


# fixed tie-break order for full-board completion scans
FULL_BOARD = (
    tuple(Scope.row(i) for i in range(3))
    + tuple(Scope.column(i) for i in range(3))
    + (Scope.diagonals(),)
)


def move_scopes(row, col):
    """
    scopes touched by a move at (row, col), in scan order
    """
    return (Scope.row(row), Scope.column(col), Scope.diagonals())


@dataclass(frozen=True)
class LineState:
    cells: Tuple[Coord, ...]
    human_count: int
    ai_count: int
    empty: Optional[Coord]      # set only when exactly one cell is empty

    @property
    def is_actionable(self):
        # two of a kind plus one hole: win or block
        return self.empty is not None and (self.human_count == 2 or self.ai_count == 2)

    @property
    def winner(self):
        if self.human_count == 3:
            return Mark.HUMAN
        if self.ai_count == 3:
            return Mark.AI
        return None


def evaluate_line(board, line):
    human = ai = 0
    empties = []
    for row, col in line:
        mark = board.get(row, col)
        if mark is Mark.HUMAN:
            human += 1
        elif mark is Mark.AI:
            ai += 1
        else:
            empties.append((row, col))
    empty = empties[0] if len(empties) == 1 else None
    return LineState(tuple(line), human, ai, empty)


def find_completed_line(board, scopes=None):
    """
    first LineState with three equal marks, or None
    """
    for scope in (FULL_BOARD if scopes is None else scopes):
        for line in scope.lines():
            state = evaluate_line(board, line)
            if state.winner is not None:
                log.debug("completed line %s in %s", state.cells, scope)
                return state
    return None


def scan_for_completion(board, scopes=None):
    """
    mark owning a completed line, or None

    without scopes every line is checked: rows 0-2, columns 0-2, main
    diagonal, anti-diagonal. the first hit wins; this order only matters
    for boards that can't come out of a real game (two winners).
    """
    state = find_completed_line(board, scopes)
    return state.winner if state else None


def find_actionable(board, scope):
    """
    first actionable LineState in scope, or None
    """
    for line in scope.lines():
        state = evaluate_line(board, line)
        if state.is_actionable:
            log.debug("actionable %s in %s (human=%d ai=%d)",
                      state.empty, scope, state.human_count, state.ai_count)
            return state
    return None


def scan_for_actionable(board, scope):
    """
    empty cell of the first actionable line in scope, or None
    """
    state = find_actionable(board, scope)
    return state.empty if state else None
