import sys
import argparse
import logging

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt
from PySide6.QtGui import QPalette, QColor

from tictactoe.config import THINKING_DELAY_MS
from tictactoe.session import GameSession
from tictactoe.ui.main_window import TicTacToeWindow

# -----------------------------------------------------------------------------
# PALETTE SETUP
# -----------------------------------------------------------------------------

DARK_PALETTE = {
    QPalette.Window: QColor(53, 53, 53),
    QPalette.WindowText: Qt.white,
    QPalette.Base: QColor(35, 35, 35),
    QPalette.AlternateBase: QColor(53, 53, 53),
    QPalette.Text: Qt.white,
    QPalette.Button: QColor(66, 66, 66),
    QPalette.ButtonText: Qt.white,
    QPalette.Highlight: QColor(42, 130, 218),
    QPalette.HighlightedText: Qt.white,
}
DISABLED_COLOR = QColor(127, 127, 127)


def apply_default_palette(app: QApplication):
    """
    Apply the dark theme palette.
    """
    palette = QPalette()
    for role, color in DARK_PALETTE.items():
        palette.setColor(role, color)
    for role in (QPalette.Text, QPalette.ButtonText, QPalette.WindowText):
        palette.setColor(QPalette.Disabled, role, DISABLED_COLOR)
    app.setPalette(palette)


def parse_args(argv=None):
    ap = argparse.ArgumentParser(description="Tic-tac-toe against a heuristic AI")
    ap.add_argument("--delay", type=int, default=THINKING_DELAY_MS,
                    help="AI thinking time in milliseconds")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return ap.parse_args(argv)

# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

def run(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s: %(message)s")
    app = QApplication(sys.argv[:1])
    app.setStyle('Fusion')
    apply_default_palette(app)

    window = TicTacToeWindow(GameSession.instance(args.delay))
    window.show()
    window.new_game()
    return app.exec()


if __name__ == '__main__':
    sys.exit(run())
