"""
Coordinate formatting helper shared by the status bar and the board figure.
"""


def coordinate_to_string(row: int, col: int) -> str:
    """Convert a coordinate to the 'row,col' string shown to the user."""
    return f"{row},{col}"
