import datetime
import logging

from ..config import (
    WINDOW_TITLE, FOOTER_TEXT, PRIMARY_COLOR, ACCENT_COLOR,
    SECONDARY_COLOR, TEXT_COLOR,
)
from ..game_logic import GameEngine, Phase, Player
from ..ui.board_widget import BoardWidget

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QSizePolicy
)
from PySide6.QtGui import QFont
from PySide6.QtCore import Qt, Slot

log = logging.getLogger(__name__)


def player_color(player):
    return PRIMARY_COLOR if player is Player.X else ACCENT_COLOR


def status_message(snapshot):
    """
    status line text for a snapshot
    """
    status = snapshot.status
    if status.phase is Phase.WON:
        return f"Player {status.winner.value} wins!"
    if status.phase is Phase.DRAW:
        return "It's a draw!"
    return f"Next: {snapshot.current_player.value}"


class TicTacToeWindow(QMainWindow):
    """
    main window UI and game flow
    """
    def __init__(self, engine=None):
        """
        init state, ui widgets, signals
        """
        super().__init__()
        self.engine = engine if engine is not None else GameEngine()
        self.board_widget = BoardWidget(self.engine, parent=self)
        self._setup_ui()
        self.refresh()

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle(WINDOW_TITLE)
        self.setStyleSheet(f"""
            QMainWindow {{ background-color: {SECONDARY_COLOR}; }}
            QLabel {{ color: {TEXT_COLOR}; }}
            QPushButton {{
                color: #fff; border: none; border-radius: 6px;
                padding: 8px 16px; font-weight: bold;
            }}
            QPushButton:disabled {{ background-color: #b8b8b8; }}
        """)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self.title_label = QLabel(WINDOW_TITLE)
        f = QFont(); f.setPointSize(22); f.setBold(True); self.title_label.setFont(f)
        self.title_label.setAlignment(Qt.AlignCenter)
        self.title_label.setStyleSheet(f"color: {PRIMARY_COLOR};")
        self.main_layout.addWidget(self.title_label)

        self._create_scoreboard()          # X / O wins
        self.main_layout.addWidget(self.scoreboard_widget)
        self._create_controls()            # new game + reset score
        self.main_layout.addWidget(self.controls_widget)

        self.status_label = QLabel("")
        f = QFont(); f.setPointSize(14); self.status_label.setFont(f)
        self.status_label.setAlignment(Qt.AlignCenter)
        self.main_layout.addWidget(self.status_label)

        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)

        year = datetime.date.today().year
        self.footer_label = QLabel(FOOTER_TEXT.format(year=year))
        self.footer_label.setAlignment(Qt.AlignCenter)
        self.footer_label.setStyleSheet("color: #888; font-size: 11px;")
        self.main_layout.addWidget(self.footer_label)
        self.resize(420, 600)

    def _create_scoreboard(self):
        # one label per player
        self.scoreboard_widget = QWidget()
        hl = QHBoxLayout(self.scoreboard_widget)
        f = QFont(); f.setPointSize(14); f.setBold(True)
        self.score_labels = {}
        for player in (Player.X, Player.O):
            lbl = QLabel("")
            lbl.setFont(f)
            lbl.setAlignment(Qt.AlignCenter)
            lbl.setStyleSheet(f"color: {player_color(player)};")
            lbl.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
            self.score_labels[player] = lbl
            hl.addWidget(lbl)

    def _create_controls(self):
        # start new game only once the round has ended, reset always
        self.controls_widget = QWidget()
        hl = QHBoxLayout(self.controls_widget)
        self.new_game_button = QPushButton("Start New Game")
        self.new_game_button.setAccessibleName("Start new game")
        self.new_game_button.setStyleSheet(f"background-color: {PRIMARY_COLOR};")
        self.new_game_button.clicked.connect(self.start_new_game)
        self.reset_score_button = QPushButton("Reset Score")
        self.reset_score_button.setAccessibleName("Reset score")
        self.reset_score_button.setStyleSheet(f"background-color: {ACCENT_COLOR};")
        self.reset_score_button.clicked.connect(self.reset_score)
        hl.addStretch(1)
        hl.addWidget(self.new_game_button)
        hl.addSpacing(12)
        hl.addWidget(self.reset_score_button)
        hl.addStretch(1)

    def refresh(self):
        """
        redraw everything from a fresh snapshot
        """
        snap = self.engine.snapshot()
        for player, lbl in self.score_labels.items():
            lbl.setText(f"{player.value}: {snap.score[player]}")
        self.status_label.setText(status_message(snap))
        if snap.status.phase is Phase.WON:
            color = player_color(snap.status.winner)
        elif snap.status.phase is Phase.DRAW:
            color = PRIMARY_COLOR
        else:
            color = player_color(snap.current_player)
        self.status_label.setStyleSheet(f"color: {color}; font-weight: bold;")
        self.new_game_button.setEnabled(snap.is_round_over)
        self.board_widget.update()

    @Slot(int, int)
    def _on_cell_clicked(self, r, c):
        res = self.engine.apply_move(r, c)
        log.debug("click (%d, %d) -> %s", r, c, res.value)
        self.refresh()

    @Slot()
    def start_new_game(self):
        self.engine.start_new_round()
        self.refresh()

    @Slot()
    def reset_score(self):
        self.engine.reset_score()
        self.refresh()
