import os

import pytest

# widget tests run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def window(qapp):
    from tictactoe.ui.main_window import TicTacToeWindow
    win = TicTacToeWindow()
    yield win
    win.close()
    win.deleteLater()
