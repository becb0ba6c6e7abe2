import logging
from dataclasses import dataclass, field
from enum import Enum

from .config import BOARD_SIZE

log = logging.getLogger(__name__)


class Mark(Enum):
    """
    contents of one board cell
    """
    EMPTY = ''
    X = 'X'
    O = 'O'


class Player(Enum):
    """
    the two sides, X always opens a round
    """
    X = 'X'
    O = 'O'

    def opposite(self):
        return Player.O if self is Player.X else Player.X

    @property
    def mark(self):
        return Mark(self.value)


class Phase(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


class MoveResult(Enum):
    """
    outcome of apply_move: 'win', 'draw', 'continue', or 'invalid'
    """
    WIN = "win"
    DRAW = "draw"
    CONTINUE = "continue"
    INVALID = "invalid"


@dataclass(frozen=True)
class Status:
    """
    round status, winner only set when phase is WON
    """
    phase: Phase = Phase.IN_PROGRESS
    winner: Player = None

    @classmethod
    def in_progress(cls):
        return cls(Phase.IN_PROGRESS)

    @classmethod
    def won(cls, player):
        return cls(Phase.WON, player)

    @classmethod
    def draw(cls):
        return cls(Phase.DRAW)

    @property
    def is_terminal(self):
        return self.phase is not Phase.IN_PROGRESS


# every line that wins, checked in this order: rows, columns, main diag, anti-diag
WINNING_LINES = (
    ((0, 0), (0, 1), (0, 2)),
    ((1, 0), (1, 1), (1, 2)),
    ((2, 0), (2, 1), (2, 2)),
    ((0, 0), (1, 0), (2, 0)),
    ((0, 1), (1, 1), (2, 1)),
    ((0, 2), (1, 2), (2, 2)),
    ((0, 0), (1, 1), (2, 2)),
    ((0, 2), (1, 1), (2, 0)),
)


def empty_board():
    return [[Mark.EMPTY for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)]


def check_board(board):
    """
    scan rows, cols, diags for 3 in a row.

    returns (status, winning_line); the first matching line in
    WINNING_LINES order is reported, a full board without one is a draw.
    """
    for line in WINNING_LINES:
        (r0, c0), (r1, c1), (r2, c2) = line
        first = board[r0][c0]
        if first is not Mark.EMPTY and first == board[r1][c1] == board[r2][c2]:
            return Status.won(Player(first.value)), line
    if all(cell is not Mark.EMPTY for row in board for cell in row):
        return Status.draw(), ()
    return Status.in_progress(), ()


def winning_line(board):
    """
    cells of the completed line, or () if none
    """
    return check_board(board)[1]


@dataclass
class Score:
    """
    wins per player, survives new rounds
    """
    x: int = 0
    o: int = 0

    def __getitem__(self, player):
        return self.x if player is Player.X else self.o

    def record_win(self, player):
        if player is Player.X:
            self.x += 1
        else:
            self.o += 1

    def reset(self):
        self.x = 0; self.o = 0

    def as_dict(self):
        return {Player.X: self.x, Player.O: self.o}


@dataclass
class GameSession:
    """
    everything the engine owns: the current round plus the score
    """
    board: list = field(default_factory=empty_board)
    current_player: Player = Player.X
    status: Status = field(default_factory=Status.in_progress)
    winning_line: tuple = ()
    score: Score = field(default_factory=Score)

    def new_round(self):
        # fresh round, score kept
        self.board = empty_board()
        self.current_player = Player.X
        self.status = Status.in_progress()
        self.winning_line = ()


@dataclass(frozen=True)
class GameSnapshot:
    """
    read-only copy of the observable state, taken after every engine call
    """
    board: tuple
    current_player: Player
    status: Status
    score: dict
    winning_line: tuple

    @property
    def is_round_over(self):
        return self.status.is_terminal


def _valid_coord(value):
    # bool is an int subclass, keep it out
    return isinstance(value, int) and not isinstance(value, bool) \
        and 0 <= value < BOARD_SIZE


class GameEngine:
    """
    tic-tac-toe rules and state

    all mutation goes through apply_move, start_new_round and reset_score.
    """
    def __init__(self):
        self._session = GameSession()

    # ------------------------------------------------------------------
    # observable state
    # ------------------------------------------------------------------

    @property
    def board(self):
        return tuple(tuple(row) for row in self._session.board)

    @property
    def current_player(self):
        return self._session.current_player

    @property
    def status(self):
        return self._session.status

    @property
    def winning_line(self):
        return self._session.winning_line

    @property
    def score(self):
        return self._session.score.as_dict()

    @property
    def is_round_over(self):
        return self._session.status.is_terminal

    def is_cell_empty(self, row, col):
        """
        true if coords valid and cell blank
        """
        if _valid_coord(row) and _valid_coord(col):
            return self._session.board[row][col] is Mark.EMPTY
        return False

    def empty_cells(self):
        return [(r, c) for r in range(BOARD_SIZE) for c in range(BOARD_SIZE)
                if self._session.board[r][c] is Mark.EMPTY]

    def snapshot(self):
        return GameSnapshot(
            board=self.board,
            current_player=self.current_player,
            status=self.status,
            score=self.score,
            winning_line=self.winning_line,
        )

    # ------------------------------------------------------------------
    # operations
    # ------------------------------------------------------------------

    def apply_move(self, row, col):
        """
        place the current player's mark, then check the result.

        rejected moves (round over, cell taken, bad coords) change nothing.
        """
        s = self._session
        if s.status.is_terminal:
            log.debug("move (%r, %r) ignored, round is over", row, col)
            return MoveResult.INVALID
        if not self.is_cell_empty(row, col):
            log.debug("move (%r, %r) ignored, cell taken or off board", row, col)
            return MoveResult.INVALID

        player = s.current_player
        s.board[row][col] = player.mark
        log.debug("%s plays (%d, %d)", player.value, row, col)

        status, line = check_board(s.board)
        if status.phase is Phase.WON:
            # status and score move together, player stays put
            s.status = status; s.winning_line = line
            s.score.record_win(player)
            log.info("player %s wins, score X=%d O=%d",
                     player.value, s.score.x, s.score.o)
            return MoveResult.WIN
        if status.phase is Phase.DRAW:
            s.status = status
            log.info("round drawn")
            return MoveResult.DRAW
        s.current_player = player.opposite()
        return MoveResult.CONTINUE

    def start_new_round(self):
        """
        clear board and reset flags, score untouched
        """
        self._session.new_round()
        log.debug("new round started")

    def reset_score(self):
        self._session.score.reset()
        log.info("score reset")
        self.start_new_round()
