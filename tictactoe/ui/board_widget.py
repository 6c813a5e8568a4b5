import logging

from PySide6.QtWidgets import QWidget, QGridLayout, QPushButton, QSizePolicy
from PySide6.QtCore import QSize, Signal

from ..game_logic import winning_line
from . import theme

logger = logging.getLogger(__name__)


class BoardWidget(QWidget):
    """
    3x3 grid of cell buttons for the tic-tac-toe board
    """
    cell_clicked = Signal(int, int)  # emits row, col on click

    def __init__(self, game_logic, parent=None):
        super().__init__(parent)
        self.game_logic = game_logic  # reference to game state
        self.setMinimumSize(QSize(240, 240))
        self._buttons = {}
        grid = QGridLayout(self)
        grid.setSpacing(5)
        size = self.game_logic.board_size
        for r in range(size):
            for c in range(size):
                btn = QPushButton("", self)
                btn.setAccessibleName(f"Cell {r + 1},{c + 1}")
                btn.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
                btn.setMinimumSize(QSize(72, 72))
                # bind coords now, not at call time
                btn.clicked.connect(lambda _=False, row=r, col=c: self._on_button_clicked(row, col))
                grid.addWidget(btn, r, c)
                self._buttons[(r, c)] = btn
        self.refresh()

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def cell_button(self, row, col):
        return self._buttons[(row, col)]

    def _on_button_clicked(self, row, col):
        logger.debug("cell (%d, %d) clicked", row, col)
        self.cell_clicked.emit(row, col)  # main window decides what happens

    def refresh(self):
        """
        project marks, clickability and winning line onto the buttons
        """
        board = self.game_logic.board
        line = set(winning_line(board) or ())
        for (r, c), btn in self._buttons.items():
            mark = board[r][c]
            btn.setText(mark.value if mark else "")
            btn.setEnabled(self.game_logic.is_cell_clickable(r, c))
            btn.setStyleSheet(theme.cell_style(mark, highlighted=(r, c) in line))
