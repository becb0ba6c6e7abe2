"""
Pytest fixtures for tic-tac-toe tests.
"""

import os

import pytest

# no display needed for the widget tests
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from ..game_logic import GameEngine


def play(engine, moves):
    """Apply (row, col) moves in order, return the list of results."""
    return [engine.apply_move(r, c) for r, c in moves]


# X takes the top row on its third move
X_TOP_ROW_WIN = [(0, 0), (1, 1), (0, 1), (2, 2), (0, 2)]

# ends as [[X,O,X],[X,O,O],[O,X,X]]
DRAW_GAME = [(0, 0), (0, 1), (0, 2), (1, 1), (1, 0),
             (1, 2), (2, 1), (2, 0), (2, 2)]


@pytest.fixture
def engine() -> GameEngine:
    """A fresh engine, X to move."""
    return GameEngine()


@pytest.fixture
def won_engine(engine) -> GameEngine:
    """Engine whose round X has just won."""
    play(engine, X_TOP_ROW_WIN)
    return engine


@pytest.fixture
def drawn_engine(engine) -> GameEngine:
    """Engine whose round ended in a draw."""
    play(engine, DRAW_GAME)
    return engine


@pytest.fixture(scope="session")
def qapp():
    """One QApplication for every widget test."""
    from PySide6.QtWidgets import QApplication
    app = QApplication.instance() or QApplication([])
    yield app
