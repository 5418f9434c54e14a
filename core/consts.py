"""
Board size limits shared by the core and the GUI.
"""

DEFAULT_BOARD_SIZE = 9
MIN_BOARD_SIZE = 3
MAX_BOARD_SIZE = 19
