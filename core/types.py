"""
Shared types for the Tsumego board creator.
Separated to avoid circular imports between modules.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class Player(Enum):
    """The two sides that can own a stone."""
    BLACK = "black"
    WHITE = "white"

    def other(self) -> "Player":
        return Player.WHITE if self is Player.BLACK else Player.BLACK


class Mode(Enum):
    """Board interaction phases."""
    SETUP = "setup"   # Free, unnumbered placement
    PLAY = "play"     # Alternating, numbered placement


@dataclass(frozen=True)
class StoneKind:
    """
    A stone on the board: either a numbered play stone or a setup marker.

    Both variants wrap a plain Player; ``as_player()`` drops the distinction
    for anything that only cares about colour.
    """
    player: Player
    setup: bool = False

    @classmethod
    def owned_by(cls, player: Player) -> "StoneKind":
        return cls(player, setup=False)

    @classmethod
    def setup_marker(cls, player: Player) -> "StoneKind":
        return cls(player, setup=True)

    @classmethod
    def from_player(cls, player: Player) -> "StoneKind":
        """Setup stone version of a player."""
        return cls.setup_marker(player)

    def as_player(self) -> Player:
        return self.player

    def __str__(self):
        kind = "setup" if self.setup else "play"
        return f"{self.player.value} ({kind})"


@dataclass
class Point:
    """One board intersection: an optional stone and an optional move number."""
    owner: Optional[StoneKind] = None
    move_number: Optional[int] = None

    def is_empty(self) -> bool:
        return self.owner is None

    def is_setup_stone(self) -> bool:
        return self.owner is not None and self.owner.setup

    def is_play_stone(self) -> bool:
        return self.owner is not None and not self.owner.setup

    def clear(self) -> None:
        self.owner = None
        self.move_number = None


class OutOfRangeError(IndexError):
    """Raised when a coordinate falls outside the board."""
    def __init__(self, row: int, col: int, size: int):
        super().__init__(f"Point ({row}, {col}) is outside a {size}x{size} board")
        self.row = row
        self.col = col
        self.size = size


class ValidationError:
    """Represents a validation error with severity and description."""
    def __init__(self, severity: str, message: str, location: Optional[Tuple[int, int]] = None):
        self.severity = severity  # "error", "warning", "info"
        self.message = message
        self.location = location

    def __str__(self):
        loc_str = f" at {self.location}" if self.location else ""
        return f"{self.severity.upper()}: {self.message}{loc_str}"
