import logging

from ..game_logic import GameLogic, Result
from ..ui.board_widget import BoardWidget
from . import theme

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QPushButton, QLabel, QMenuBar, QMenu
)
from PySide6.QtGui import QAction
from PySide6.QtCore import Qt, Slot

logger = logging.getLogger(__name__)


class TicTacToeWindow(QMainWindow):
    """
    main window: owns the game state, wires clicks to it and
    re-renders after every change
    """
    def __init__(self):
        super().__init__()
        self.game_logic = GameLogic()
        self.board_widget = BoardWidget(self.game_logic, parent=self)
        self._setup_ui()
        self.refresh()

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle("Tic Tac Toe")
        self.setStyleSheet(theme.WINDOW_STYLE)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)
        self.main_layout.setContentsMargins(24, 32, 24, 24)

        self._create_menu_bar()

        self.status_label = QLabel("")
        self.status_label.setAlignment(Qt.AlignCenter)
        self.main_layout.addWidget(self.status_label)

        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)

        self.score_label = QLabel("")
        self.score_label.setAlignment(Qt.AlignCenter)
        self.score_label.setStyleSheet(
            f"color: {theme.SECONDARY}; font-size: 17px; font-weight: 600;")
        self.main_layout.addWidget(self.score_label)

        # always clickable, only the label changes
        self.reset_button = QPushButton("")
        self.reset_button.setAccessibleName("Restart game")
        self.reset_button.setStyleSheet(theme.RESET_BUTTON_STYLE)
        self.reset_button.clicked.connect(self.reset_game)
        self.main_layout.addWidget(self.reset_button, alignment=Qt.AlignCenter)

        footer = QLabel("Minimalist Tic Tac Toe · Qt")
        footer.setAlignment(Qt.AlignCenter)
        footer.setStyleSheet(f"color: {theme.FOOTER_TEXT}; font-size: 13px;")
        self.main_layout.addWidget(footer)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        new_action = QAction("New Game", self)
        new_action.triggered.connect(self.reset_game)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        game_menu.addAction(new_action)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _status_color(self):
        result = self.game_logic.result
        if result is Result.DRAW:
            return theme.SECONDARY
        if result.winner is not None:
            return theme.player_color(result.winner)
        return theme.player_color(self.game_logic.current_player)

    def refresh(self):
        """
        redraw everything from game state; safe to call any number of times
        """
        self.status_label.setText(self.game_logic.status_text())
        self.status_label.setStyleSheet(theme.status_style(self._status_color()))
        self.score_label.setText(self.game_logic.score_text())
        self.reset_button.setText(self.game_logic.reset_label())
        self.board_widget.refresh()

    @Slot(int, int)
    def _on_cell_clicked(self, r, c):
        # occupied cells and finished games are no-ops
        if not self.game_logic.apply_move(r, c):
            return
        if self.game_logic.game_over:
            logger.info("%s", self.game_logic.status_text())
        self.refresh()

    @Slot()
    def reset_game(self):
        # new board, same score
        self.game_logic.reset()
        logger.info("new game, %s", self.game_logic.score_text())
        self.refresh()
