from ..game_logic import Player

# -----------------------------------------------------------------------------
# COLOR CONSTANTS
# -----------------------------------------------------------------------------

PRIMARY = "#1976d2"     # X marks, buttons
SECONDARY = "#424242"   # body text
ACCENT = "#fbc02d"      # O marks
BACKGROUND = "#ffffff"
GRID_TINT = "#d6e6f7"   # primary at low alpha, pre-blended on white
FOOTER_TEXT = "#bbbbbb"

PLAYER_COLORS = {Player.X: PRIMARY, Player.O: ACCENT}


def player_color(player):
    # empty cells fall back to body text color
    return PLAYER_COLORS.get(player, SECONDARY)


def cell_style(mark, highlighted=False):
    """
    stylesheet for one board cell
    """
    color = player_color(mark)
    border = color if mark else GRID_TINT
    background = "#fff8e1" if highlighted else BACKGROUND
    return (f"QPushButton {{ background: {background}; color: {color};"
            f" border: 2px solid {border}; border-radius: 12px;"
            f" font-size: 36px; font-weight: 800; }}"
            f" QPushButton:disabled {{ color: {color}; }}")


def status_style(color):
    return f"color: {color}; font-size: 20px; font-weight: 700; letter-spacing: 1.5px;"


RESET_BUTTON_STYLE = (
    f"QPushButton {{ background: {PRIMARY}; color: #fff; border: none;"
    f" border-radius: 10px; padding: 10px 34px; font-weight: 700; font-size: 16px; }}"
    f" QPushButton:hover {{ background: #1565c0; }}"
)

WINDOW_STYLE = f"QMainWindow {{ background-color: {BACKGROUND}; }}"
