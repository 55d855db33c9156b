import logging
from enum import Enum

from PySide6.QtCore import QObject, QTimer, Signal, Slot

from .board import Board, Mark
from .config import THINKING_DELAY_MS, TIE, HUMAN_WINS, AI_WINS
from .errors import NotYourTurn, SessionNotStarted, BoardStateError
from .line_scanner import find_completed_line, move_scopes
from .strategist import MoveStrategist

log = logging.getLogger(__name__)


class GameState(Enum):
    NOT_STARTED = "not started"
    AWAITING_HUMAN = "awaiting human"
    AWAITING_AI = "awaiting ai"       # thinking delay running
    ENDED = "ended"


class TurnController(QObject):
    """
    turn state machine: human move -> thinking delay -> ai move -> ...

    owns the board. every placement is followed by a completion scan of
    the move's row, column and both diagonals plus a full-board check.
    """
    session_started = Signal()
    mark_placed = Signal(int, int, object)  # row, col, Mark
    game_ended = Signal(int)                # -1 tie, 0 human, 1 ai

    def __init__(self, thinking_delay_ms=THINKING_DELAY_MS, parent=None):
        super().__init__(parent)
        self.thinking_delay_ms = thinking_delay_ms
        self.strategist = MoveStrategist(Mark.AI)
        self._board = Board()
        self._state = GameState.NOT_STARTED
        self._generation = 0        # bumped on start, stale ai moves check it
        self._last_human_move = None
        self._outcome = None
        self._winning_line = None
        self._anchors = {}

    @property
    def state(self):
        return self._state

    @property
    def board(self):
        return self._board

    @property
    def outcome(self):
        return self._outcome

    @property
    def winning_line(self):
        return self._winning_line

    @property
    def is_human_turn(self):
        return self._state is GameState.AWAITING_HUMAN

    @Slot()
    def start(self):
        """
        fresh board, human to move, drops any pending ai move
        """
        self._generation += 1
        self._board = Board()
        self._anchors = {}
        self._last_human_move = None
        self._outcome = None; self._winning_line = None
        self._state = GameState.AWAITING_HUMAN
        log.info("session %d started", self._generation)
        self.session_started.emit()

    def register_anchor(self, row, col, handle):
        # ui handle per cell, opaque to us
        self._board.get(row, col)   # range check
        self._anchors[(row, col)] = handle

    def anchor(self, row, col):
        return self._anchors.get((row, col))

    @Slot(int, int)
    def submit_human_move(self, row, col):
        if self._state is GameState.NOT_STARTED:
            raise SessionNotStarted()
        if self._state is GameState.AWAITING_AI:
            raise NotYourTurn("wait for the ai to move")
        if self._state is GameState.ENDED:
            raise NotYourTurn("game is over, start a new game")

        self._place(row, col, Mark.HUMAN)
        self._last_human_move = (row, col)
        if self._check_end(row, col):
            return
        self._state = GameState.AWAITING_AI
        generation = self._generation
        QTimer.singleShot(self.thinking_delay_ms,
                          lambda: self._play_ai_move(generation))

    def _play_ai_move(self, generation):
        if generation != self._generation or self._state is not GameState.AWAITING_AI:
            log.warning("dropping ai move from session %d", generation)
            return
        coord = self.strategist.choose_move(self._board, *self._last_human_move)
        if coord is None:
            raise BoardStateError("ai asked to move on a full board")
        row, col = coord
        self._place(row, col, Mark.AI)
        if not self._check_end(row, col):
            self._state = GameState.AWAITING_HUMAN

    def _place(self, row, col, mark):
        self._board.place(row, col, mark)
        log.info("%s placed at (%d, %d)", mark.name.lower(), row, col)
        log.debug("board:\n%s", self._board)
        self.mark_placed.emit(row, col, mark)

    def _check_end(self, row, col):
        """
        scoped win scan + full board check, ends the session if terminal
        """
        line = find_completed_line(self._board, move_scopes(row, col))
        if line is not None:
            self._winning_line = line.cells
            self._finish(HUMAN_WINS if line.winner is Mark.HUMAN else AI_WINS)
            return True
        if self._board.is_full():
            self._finish(TIE)
            return True
        return False

    def _finish(self, outcome):
        self._state = GameState.ENDED
        self._outcome = outcome
        log.info("session %d ended with outcome %d", self._generation, outcome)
        self.game_ended.emit(outcome)
