from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import Qt, QSize, Signal, Slot, QPointF, QRectF, QRect
from PySide6.QtGui import QPainter, QColor, QPen, QFont

from ..board import Mark
from ..config import BOARD_BACKGROUND, GRID_LINE_COLOR, HUMAN_COLOR, AI_COLOR


class CellAnchor:
    """
    per-cell handle registered with the session, knows where the cell is drawn
    """
    def __init__(self, widget, row, col):
        self.widget = widget
        self.row = row; self.col = col
        self.enabled = True

    def turn_off(self):
        # cell is marked, no more clicks
        self.enabled = False

    def rect(self):
        w, h = self.widget.width(), self.widget.height()
        side = min(w, h)
        ox, oy = (w-side)/2, (h-side)/2
        cell = side / 3
        return QRectF(ox + self.col*cell, oy + self.row*cell, cell, cell)


class BoardWidget(QWidget):
    """
    custom widget to draw and click on tic-tac-toe board
    """
    cell_clicked = Signal(int, int)  # emits row, col on click

    def __init__(self, session, parent=None):
        super().__init__(parent)
        self.session = session      # reference to game session
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(150, 150))
        self._accept_clicks = False     # armed on session start
        session.session_started.connect(self._on_session_started)
        session.mark_placed.connect(self._on_mark_placed)
        session.game_ended.connect(self._on_game_ended)

    def set_accept_clicks(self, accept):
        # enable/disable user input
        self._accept_clicks = accept

    def accepts_clicks(self):
        return self._accept_clicks

    @Slot()
    def _on_session_started(self):
        # hand one anchor per cell to the session, then arm input
        for r in range(3):
            for c in range(3):
                self.session.register_anchor(r, c, CellAnchor(self, r, c))
        self.set_accept_clicks(True)
        self.update()

    @Slot(int, int, object)
    def _on_mark_placed(self, row, col, mark):
        anchor = self.session.anchor(row, col)
        if anchor is not None:
            anchor.turn_off()
        self.update()

    @Slot(int)
    def _on_game_ended(self, outcome):
        self.set_accept_clicks(False)
        self.update()

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def paintEvent(self, event):
        """
        draw grid, X/O marks, and highlight winner
        """
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            w, h = self.width(), self.height()
            side = min(w, h)
            offset_x, offset_y = (w-side)/2, (h-side)/2
            # background
            painter.fillRect(self.rect(), QColor(BOARD_BACKGROUND))
            cell_size = side / 3
            # grid lines
            painter.setPen(QPen(QColor(GRID_LINE_COLOR), 2))
            for i in range(1, 3):
                x = offset_x + i*cell_size
                painter.drawLine(int(x), int(offset_y), int(x), int(offset_y+side))
                y = offset_y + i*cell_size
                painter.drawLine(int(offset_x), int(y), int(offset_x+side), int(y))
            # draw marks at their anchors
            for r, row in enumerate(self.session.board.rows()):
                for c, mark in enumerate(row):
                    anchor = self.session.anchor(r, c)
                    if mark is Mark.EMPTY or anchor is None: continue
                    center = anchor.rect().center()
                    cx, cy = center.x(), center.y()
                    rad = cell_size/2 * 0.7
                    if mark is Mark.AI:
                        painter.setPen(QPen(QColor(AI_COLOR), 4))
                        # two crossing lines
                        painter.drawLine(QPointF(cx-rad, cy-rad), QPointF(cx+rad, cy+rad))
                        painter.drawLine(QPointF(cx+rad, cy-rad), QPointF(cx-rad, cy+rad))
                    else:
                        painter.setPen(QPen(QColor(HUMAN_COLOR), 4))
                        painter.drawEllipse(QPointF(cx, cy), rad, rad)
            # if someone won, draw their symbol in center
            line = self.session.controller.winning_line
            if line is not None:
                win = self.session.board.get(*line[0])
                font = QFont("Arial", max(1, int(side*0.6)), QFont.Bold)
                painter.setFont(font)
                color = QColor(AI_COLOR) if win is Mark.AI else QColor(HUMAN_COLOR)
                painter.setPen(QPen(color, 10, Qt.SolidLine, Qt.RoundCap, Qt.RoundJoin))
                rect = QRect(int(offset_x), int(offset_y), int(side), int(side))
                painter.drawText(rect, Qt.AlignCenter, win.value)
        finally:
            painter.end()

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board cell and emit
        """
        if not self._accept_clicks:
            return
        w, h = self.width(), self.height()
        side = min(w, h)
        ox, oy = (w-side)/2, (h-side)/2
        x, y = event.position().x(), event.position().y()
        # only inside grid
        if not (ox <= x < ox+side and oy <= y < oy+side):
            return
        cell = side / 3
        if cell <= 0: return
        col = int((x-ox)//cell); row = int((y-oy)//cell)
        # clamp to valid range
        row = max(0, min(row, 2)); col = max(0, min(col, 2))
        anchor = self.session.anchor(row, col)
        if anchor is not None and not anchor.enabled:
            return
        self.cell_clicked.emit(row, col)  # notify main window
