import logging

# -----------------------------------------------------------------------------
# GAME
# -----------------------------------------------------------------------------

BOARD_SIZE = 3               # fixed 3x3 grid

# -----------------------------------------------------------------------------
# COLOR CONSTANTS
# -----------------------------------------------------------------------------

PRIMARY_COLOR = "#1e90ff"    # X, title, score for X
ACCENT_COLOR = "#ff4500"     # O, reset button, score for O
SECONDARY_COLOR = "#f5f5f5"  # window background
TEXT_COLOR = "#222222"
GRID_COLOR = "#d0d0d0"
CELL_COLOR = "#ffffff"
WINNING_CELL_COLOR = "#ffe08a"
DISABLED_TEXT_COLOR = "#9a9a9a"

# -----------------------------------------------------------------------------
# TEXT
# -----------------------------------------------------------------------------

WINDOW_TITLE = "Tic Tac Toe"
FOOTER_TEXT = "Modern Minimal Tic Tac Toe © {year}"

# -----------------------------------------------------------------------------
# LOGGING
# -----------------------------------------------------------------------------

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
LOG_LEVEL = logging.INFO
