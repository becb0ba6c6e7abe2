"""
Qt view: board widget and main window.
"""
