import logging
from enum import Enum

logger = logging.getLogger(__name__)

BOARD_SIZE = 3   # fixed 3x3 grid
EMPTY = ''       # blank cell


class Player(str, Enum):
    X = 'X'
    O = 'O'

    @property
    def other(self):
        return Player.O if self is Player.X else Player.X


class Result(Enum):
    IN_PROGRESS = 'in_progress'
    X_WINS = 'x_wins'
    O_WINS = 'o_wins'
    DRAW = 'draw'

    @property
    def winner(self):
        # player who won, or None for draw/in progress
        return {Result.X_WINS: Player.X, Result.O_WINS: Player.O}.get(self)

    @property
    def is_terminal(self):
        return self is not Result.IN_PROGRESS


def _build_lines(n):
    rows = [tuple((r, c) for c in range(n)) for r in range(n)]
    cols = [tuple((r, c) for r in range(n)) for c in range(n)]
    diags = [tuple((i, i) for i in range(n)),
             tuple((i, n - 1 - i) for i in range(n))]
    return tuple(rows + cols + diags)


# 3 rows, 3 cols, 2 diags
LINES = _build_lines(BOARD_SIZE)


def empty_board():
    """
    fresh all-empty board (tuple of row tuples)
    """
    return tuple(tuple(EMPTY for _ in range(BOARD_SIZE))
                 for _ in range(BOARD_SIZE))


def _line_owned_by(board, line, player):
    return all(board[r][c] == player for r, c in line)


def winning_line(board):
    """
    first completed line, X lines before O lines; None if nobody won
    """
    for player in (Player.X, Player.O):
        for line in LINES:
            if _line_owned_by(board, line, player):
                return line
    return None


def evaluate_result(board):
    """
    map a board to X_WINS, O_WINS, DRAW or IN_PROGRESS
    """
    # X checked first so an illegal double-win board still has one answer
    for player, result in ((Player.X, Result.X_WINS), (Player.O, Result.O_WINS)):
        if any(_line_owned_by(board, line, player) for line in LINES):
            return result
    if all(cell != EMPTY for row in board for cell in row):
        return Result.DRAW
    return Result.IN_PROGRESS


class GameLogic:
    """
    tic-tac-toe rules and state for one hot-seat session

    the board is replaced on every accepted move, never edited in place.
    score survives reset(); everything else goes back to the start.
    """
    def __init__(self):
        self.board_size = BOARD_SIZE
        self.score = {Player.X: 0, Player.O: 0}   # kept across resets
        self.reset()

    def reset(self):
        """
        clear board and flags, keep the score
        """
        self.board = empty_board()
        self.current_player = Player.X
        self.result = Result.IN_PROGRESS
        self.move_count = 0
        logger.debug("board reset, score X=%d O=%d",
                     self.score[Player.X], self.score[Player.O])

    @property
    def game_over(self):
        return self.result.is_terminal

    def is_cell_empty(self, row, col):
        """
        true if coords valid and cell blank
        """
        if 0 <= row < self.board_size and 0 <= col < self.board_size:
            return self.board[row][col] == EMPTY
        return False

    def is_cell_clickable(self, row, col):
        return not self.game_over and self.is_cell_empty(row, col)

    def apply_move(self, row, col):
        """
        place current player's mark at (row, col)
        returns False (and changes nothing) if the move is not allowed
        """
        if not self.is_cell_clickable(row, col):
            logger.debug("ignored move at (%d, %d)", row, col)
            return False
        player = self.current_player
        self.board = tuple(
            tuple(player if (r, c) == (row, col) else cell
                  for c, cell in enumerate(cells))
            for r, cells in enumerate(self.board))
        self.move_count += 1
        self.current_player = player.other
        logger.debug("player %s played (%d, %d)", player.value, row, col)
        self.recompute_result()
        return True

    def recompute_result(self):
        """
        derive result from the board; score bumps only on the
        transition into a win, so repeat calls never double count
        """
        previous = self.result
        self.result = evaluate_result(self.board)
        winner = self.result.winner
        if winner is not None and previous is Result.IN_PROGRESS:
            self.score[winner] += 1
            logger.info("player %s wins, score X=%d O=%d", winner.value,
                        self.score[Player.X], self.score[Player.O])
        elif self.result is Result.DRAW and previous is Result.IN_PROGRESS:
            logger.info("game drawn after %d moves", self.move_count)
        return self.result

    # -- text shown by the ui --

    def status_text(self):
        if self.result is Result.DRAW:
            return "It's a Draw!"
        if self.result.winner is not None:
            return f"Player {self.result.winner.value} Wins!"
        return f"Player {self.current_player.value}'s turn"

    def reset_label(self):
        return "Restart Game" if self.game_over else "Reset Board"

    def score_text(self):
        return f"X {self.score[Player.X]}  vs  O {self.score[Player.O]}"
