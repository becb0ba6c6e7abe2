import sys
import logging

from PySide6.QtWidgets import QApplication
from PySide6.QtGui import QPalette, QColor
from tictactoe.config import (
    SECONDARY_COLOR, TEXT_COLOR, PRIMARY_COLOR, CELL_COLOR,
    DISABLED_TEXT_COLOR, LOG_FORMAT, LOG_LEVEL,
)
from tictactoe.ui.main_window import TicTacToeWindow

# -----------------------------------------------------------------------------
# PALETTE SETUP
# -----------------------------------------------------------------------------

def apply_default_palette(app: QApplication):
    """
    Apply the light minimal palette from the config colors.
    """
    palette = QPalette()
    # Standard roles
    palette.setColor(QPalette.Window, QColor(SECONDARY_COLOR))
    palette.setColor(QPalette.WindowText, QColor(TEXT_COLOR))
    palette.setColor(QPalette.Base, QColor(CELL_COLOR))
    palette.setColor(QPalette.AlternateBase, QColor(SECONDARY_COLOR))
    palette.setColor(QPalette.Text, QColor(TEXT_COLOR))
    palette.setColor(QPalette.Button, QColor(PRIMARY_COLOR))
    palette.setColor(QPalette.ButtonText, QColor("#ffffff"))
    palette.setColor(QPalette.Highlight, QColor(PRIMARY_COLOR))
    palette.setColor(QPalette.HighlightedText, QColor("#ffffff"))
    # Disabled roles
    palette.setColor(QPalette.Disabled, QPalette.Text, QColor(DISABLED_TEXT_COLOR))
    palette.setColor(QPalette.Disabled, QPalette.ButtonText, QColor(DISABLED_TEXT_COLOR))
    palette.setColor(QPalette.Disabled, QPalette.WindowText, QColor(DISABLED_TEXT_COLOR))
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
