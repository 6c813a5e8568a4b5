import logging
import sys

from PySide6.QtWidgets import QApplication
from PySide6.QtGui import QPalette, QColor
from tictactoe.ui.main_window import TicTacToeWindow
from tictactoe.ui import theme

# -----------------------------------------------------------------------------
# COLOR CONSTANTS
# -----------------------------------------------------------------------------

WINDOW_COLOR = QColor(theme.BACKGROUND)
WINDOW_TEXT_COLOR = QColor(theme.SECONDARY)
BASE_COLOR = QColor(theme.BACKGROUND)
ALT_BASE_COLOR = QColor(245, 247, 250)
TEXT_COLOR = QColor(theme.SECONDARY)
BUTTON_COLOR = QColor(theme.BACKGROUND)
BUTTON_TEXT_COLOR = QColor(theme.SECONDARY)
HIGHLIGHT_COLOR = QColor(theme.PRIMARY)
HIGHLIGHTED_TEXT_COLOR = QColor(theme.BACKGROUND)

DISABLED_TEXT_COLOR = QColor(160, 160, 160)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_LEVEL = logging.INFO

# -----------------------------------------------------------------------------
# PALETTE SETUP
# -----------------------------------------------------------------------------

def apply_default_palette(app: QApplication):
    """
    Apply the light theme palette using predefined constants.
    """
    palette = QPalette()
    palette.setColor(QPalette.Window, WINDOW_COLOR)
    palette.setColor(QPalette.WindowText, WINDOW_TEXT_COLOR)
    palette.setColor(QPalette.Base, BASE_COLOR)
    palette.setColor(QPalette.AlternateBase, ALT_BASE_COLOR)
    palette.setColor(QPalette.Text, TEXT_COLOR)
    palette.setColor(QPalette.Button, BUTTON_COLOR)
    palette.setColor(QPalette.ButtonText, BUTTON_TEXT_COLOR)
    palette.setColor(QPalette.Highlight, HIGHLIGHT_COLOR)
    palette.setColor(QPalette.HighlightedText, HIGHLIGHTED_TEXT_COLOR)
    # Disabled roles
    palette.setColor(QPalette.Disabled, QPalette.Text, DISABLED_TEXT_COLOR)
    palette.setColor(QPalette.Disabled, QPalette.WindowText, DISABLED_TEXT_COLOR)
    app.setPalette(palette)

# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

def run():
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
    app = QApplication(sys.argv)
    app.setStyle('Fusion')

    apply_default_palette(app)

    window = TicTacToeWindow()
    window.show()
    return app.exec()


if __name__ == '__main__':
    sys.exit(run())
