import logging

from ..board import Mark
from ..config import OUTCOME_MESSAGES, TIE, HUMAN_WINS
from ..errors import GameError
from ..session import GameSession
from ..ui.board_widget import BoardWidget

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, Slot

log = logging.getLogger(__name__)


def outcome_message(code):
    """
    end-of-game text for an outcome code (-1 tie, 0 player, 1 ai)
    """
    try:
        return OUTCOME_MESSAGES[code]
    except KeyError:
        raise ValueError(f"unknown outcome code: {code}") from None


class TicTacToeWindow(QMainWindow):
    """
    main window UI, human vs ai
    """
    def __init__(self, session=None):
        """
        init session, ui widgets, signals
        """
        super().__init__()
        self.session = session or GameSession.instance()
        self.board_widget = BoardWidget(self.session, parent=self)
        self.session.session_started.connect(self._on_session_started)
        self.session.mark_placed.connect(self._on_mark_placed)
        self.session.game_ended.connect(self._on_game_ended)

        self._setup_ui()
        self._update_message("Press New Game to play.")

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle("Tic-Tac-Toe vs AI")
        self.setStyleSheet("QMainWindow { background-color: #222; }")
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)

        self._create_bottom_controls()     # status + buttons
        self.main_layout.addWidget(self.controls_bottom_widget)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        new_action = QAction("New Game", self)
        new_action.triggered.connect(self.new_game)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        game_menu.addAction(new_action)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_bottom_controls(self):
        # status label + new game button
        self.controls_bottom_widget = QWidget()
        hl = QHBoxLayout(self.controls_bottom_widget)
        self.controls_bottom_widget.setStyleSheet("background: transparent;")
        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(12); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self.message_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.message_label.setWordWrap(True)
        self.new_game_button = QPushButton("New Game")
        self.new_game_button.clicked.connect(self.new_game)
        hl.addWidget(self.message_label); hl.addStretch(1)
        hl.addWidget(self.new_game_button)

    @Slot(str)
    def _update_message(self, text, is_error=False,
                         is_success=False, is_turn=False):
        # set message text + style
        style = "color: #eee;"
        if is_error:   style = "color: #ff8a8a; font-weight: bold;"
        elif is_success: style = "color: lime; font-weight: bold;"
        elif is_turn:    style = "color: #8acaff; font-weight: bold;"
        self.message_label.setStyleSheet(style)
        self.message_label.setText(text)

    @Slot()
    def new_game(self):
        self.session.start()

    @Slot()
    def _on_session_started(self):
        self._update_message("Your turn.", is_turn=True)

    @Slot(int, int, object)
    def _on_mark_placed(self, r, c, mark):
        # status only, the board widget draws
        if self.session.outcome is not None:
            return
        if mark is Mark.HUMAN:
            self._update_message("AI is thinking...")
        else:
            self._update_message("Your turn.", is_turn=True)

    @Slot(int)
    def _on_game_ended(self, outcome):
        ok = outcome in (TIE, HUMAN_WINS)
        self._update_message(outcome_message(outcome), is_success=ok, is_error=not ok)

    @Slot(int, int)
    def _on_cell_clicked(self, r, c):
        try:
            self.session.submit_human_move(r, c)
        except GameError as e:
            log.warning("move (%d, %d) rejected: %s", r, c, e)
            self._update_message(str(e), is_error=True)
