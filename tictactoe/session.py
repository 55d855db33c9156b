from .config import THINKING_DELAY_MS
from .game_logic import TurnController


class GameSession:
    """
    process-wide entry point for the ui: start, human moves, notifications

    signals are the controller's own:
      session_started()            new game, ui should register anchors
      mark_placed(row, col, mark)  draw mark, disable that cell
      game_ended(code)             -1 tie, 0 human wins, 1 ai wins
    """
    _instance = None

    def __init__(self, thinking_delay_ms=THINKING_DELAY_MS):
        self.controller = TurnController(thinking_delay_ms)
        self.session_started = self.controller.session_started
        self.mark_placed = self.controller.mark_placed
        self.game_ended = self.controller.game_ended

    @classmethod
    def instance(cls, thinking_delay_ms=THINKING_DELAY_MS):
        # delay only applies on first call
        if cls._instance is None:
            cls._instance = cls(thinking_delay_ms)
        return cls._instance

    @property
    def board(self):
        return self.controller.board

    @property
    def state(self):
        return self.controller.state

    @property
    def outcome(self):
        return self.controller.outcome

    def start(self):
        self.controller.start()

    def submit_human_move(self, row, col):
        self.controller.submit_human_move(row, col)

    def register_anchor(self, row, col, handle):
        self.controller.register_anchor(row, col, handle)

    def anchor(self, row, col):
        return self.controller.anchor(row, col)
