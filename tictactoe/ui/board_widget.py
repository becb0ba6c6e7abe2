from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import Qt, QSize, Signal, QPointF, QRectF
from PySide6.QtGui import QPainter, QColor, QPen, QBrush

from ..config import (
    BOARD_SIZE, PRIMARY_COLOR, ACCENT_COLOR, GRID_COLOR,
    CELL_COLOR, WINNING_CELL_COLOR,
)
from ..game_logic import Mark

class BoardWidget(QWidget):
    """
    custom widget to draw and click on tic-tac-toe board
    """
    cell_clicked = Signal(int, int)  # emits row, col on click

    def __init__(self, engine, parent=None):
        super().__init__(parent)
        self.engine = engine  # reference to game state
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(180, 180))
        self.setAccessibleName("Tic Tac Toe board")

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def _geometry(self):
        # square board centred in the widget: (offset_x, offset_y, cell)
        w, h = self.width(), self.height()
        side = min(w, h)
        return (w-side)/2, (h-side)/2, side / BOARD_SIZE

    def cell_at(self, x, y):
        """
        map widget coords to (row, col), or None outside the grid
        """
        ox, oy, cell = self._geometry()
        if cell <= 0:
            return None
        side = cell * BOARD_SIZE
        if not (ox <= x < ox+side and oy <= y < oy+side):
            return None
        col = int((x-ox)//cell); row = int((y-oy)//cell)
        # clamp to valid range
        row = max(0, min(row, BOARD_SIZE-1)); col = max(0, min(col, BOARD_SIZE-1))
        return row, col

    def paintEvent(self, event):
        """
        draw cells, X/O marks, and highlight the winning line
        """
        snap = self.engine.snapshot()
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            ox, oy, cell = self._geometry()
            gap = max(2.0, cell * 0.04)
            winning = set(snap.winning_line)
            for r in range(BOARD_SIZE):
                for c in range(BOARD_SIZE):
                    rect = QRectF(ox + c*cell + gap/2, oy + r*cell + gap/2,
                                  cell - gap, cell - gap)
                    bg = WINNING_CELL_COLOR if (r, c) in winning else CELL_COLOR
                    painter.setPen(QPen(QColor(GRID_COLOR), 1))
                    painter.setBrush(QBrush(QColor(bg)))
                    painter.drawRoundedRect(rect, gap*2, gap*2)
                    self._draw_mark(painter, snap.board[r][c], rect)
        finally:
            painter.end()

    def _draw_mark(self, painter, mark, rect):
        if mark is Mark.EMPTY:
            return
        cx, cy = rect.center().x(), rect.center().y()
        rad = rect.width()/2 * 0.55
        painter.setBrush(Qt.NoBrush)
        if mark is Mark.X:
            painter.setPen(QPen(QColor(PRIMARY_COLOR), max(3.0, rect.width()*0.07)))
            # two crossing lines
            painter.drawLine(QPointF(cx-rad, cy-rad), QPointF(cx+rad, cy+rad))
            painter.drawLine(QPointF(cx+rad, cy-rad), QPointF(cx-rad, cy+rad))
        else:
            painter.setPen(QPen(QColor(ACCENT_COLOR), max(3.0, rect.width()*0.07)))
            painter.drawEllipse(QPointF(cx, cy), rad, rad)

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board cell and emit
        """
        # filled cells and finished rounds take no input
        if self.engine.is_round_over:
            return
        pos = event.position()
        hit = self.cell_at(pos.x(), pos.y())
        if hit is None:
            return
        row, col = hit
        if not self.engine.is_cell_empty(row, col):
            return
        self.cell_clicked.emit(row, col)  # notify main window
