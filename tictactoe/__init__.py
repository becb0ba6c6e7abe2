"""
Minimal Tic Tac Toe

Two players share one window and alternate marking a 3x3 grid.
The engine in game_logic decides win, draw, or continuation and
keeps the score across rounds; the Qt window under ui only renders it.
"""

__version__ = "1.0.0"
