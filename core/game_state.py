"""
GameState - turn, mode and board state for the Tsumego board creator.

Two phases share one board:
- SETUP: clicks toggle unnumbered setup stones for the current player.
- PLAY: clicks place numbered stones on empty points and alternate turns.

All board mutation goes through this class so the numbering invariants hold:
move numbers are dense 1..last_move_number, sit only on play stones, and
never exist in SETUP mode.
"""
import logging
from typing import Dict, List, Optional, Tuple

from core.board_grid import BoardGrid
from core.consts import DEFAULT_BOARD_SIZE
from core.types import Mode, Player, Point, StoneKind, ValidationError

logger = logging.getLogger(__name__)


class GameState:
    """
    Board editor/player state.

    Responsibilities:
        - Dispatch point clicks according to the current mode
        - Number play-mode stones and alternate the player to move
        - Roll recorded moves back to the setup position, or reset everything

    Attributes (read-only properties):
        size: Board side length
        current_player: Player placing the next stone
        last_move_number: Number of the most recent play stone (0 if none)
        mode: Mode.SETUP or Mode.PLAY
        show_numbers: Whether move numbers should be displayed
    """

    def __init__(self, size: int = DEFAULT_BOARD_SIZE):
        self._grid = BoardGrid(size)
        self._current_player: Player = Player.BLACK
        self._last_move_number: int = 0
        self._mode: Mode = Mode.SETUP
        self._show_numbers: bool = True

    # =============================================================================
    # READ ACCESSORS
    # =============================================================================

    @property
    def size(self) -> int:
        return self._grid.size

    @property
    def current_player(self) -> Player:
        return self._current_player

    @property
    def last_move_number(self) -> int:
        return self._last_move_number

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def show_numbers(self) -> bool:
        return self._show_numbers

    def point_at(self, row: int, col: int) -> Point:
        """
        Get a copy of the point at (row, col).

        Raises:
            OutOfRangeError: if (row, col) is off the board
        """
        point = self._grid.get(row, col)
        return Point(point.owner, point.move_number)

    def has_recorded_moves(self) -> bool:
        """True if any play-mode stones are on the board."""
        return self._last_move_number != 0

    def is_valid(self, row: int, col: int) -> bool:
        """Verifies if a play stone can be placed at (row, col)."""
        return self._grid.get(row, col).owner is None

    def last_move(self) -> Optional[Tuple[int, int]]:
        """Location of the most recently numbered stone, if any."""
        if not self.has_recorded_moves():
            return None
        for coord, point in self._grid.points():
            if point.move_number == self._last_move_number:
                return coord
        return None

    # =============================================================================
    # BOARD INTERACTION
    # =============================================================================

    def handle_click(self, row: int, col: int) -> bool:
        """
        Handle a click on (row, col) according to the current mode.

        Returns:
            True if the board changed, False if the click was rejected
        """
        if self._mode == Mode.SETUP:
            self._toggle_setup_stone(row, col)
            return True

        if not self.is_valid(row, col):
            logger.debug("Rejected play at (%d, %d): point occupied", row, col)
            return False

        point = self._grid.get(row, col)
        point.owner = StoneKind.owned_by(self._current_player)
        self._last_move_number += 1
        point.move_number = self._last_move_number
        self._toggle_player()
        return True

    def _toggle_player(self) -> None:
        self._current_player = self._current_player.other()

    def _toggle_setup_stone(self, row: int, col: int) -> None:
        """Toggle the current player's setup stone, overwriting anything else."""
        point = self._grid.get(row, col)
        marker = StoneKind.setup_marker(self._current_player)
        if point.owner == marker:
            point.owner = None
        else:
            point.owner = marker
        point.move_number = None

    # =============================================================================
    # COMMANDS
    # =============================================================================

    def set_mode(self, new_mode: Mode) -> None:
        """
        Switch between SETUP and PLAY.

        Leaving PLAY always clears recorded moves so that SETUP never holds
        numbered stones.
        """
        if not isinstance(new_mode, Mode):
            raise TypeError(f"Expected Mode, got {new_mode!r}")
        if new_mode == self._mode:
            return

        if new_mode == Mode.SETUP:
            self.reset_to_setup()
        else:
            self._mode = Mode.PLAY
        logger.debug("Mode switched to %s", self._mode.value)

    def set_current_player(self, player: Player) -> None:
        """Choose who places the next stone; the board is left untouched."""
        if not isinstance(player, Player):
            raise TypeError(f"Expected Player, got {player!r}")
        self._current_player = player

    def set_show_numbers(self, show: bool) -> None:
        self._show_numbers = bool(show)

    def reset(self) -> None:
        """Completely reset the board, turn, mode and display settings."""
        self._current_player = Player.BLACK
        self._last_move_number = 0
        self._mode = Mode.SETUP
        self._show_numbers = True
        self._grid.clear()
        logger.debug("Full reset")

    def reset_to_setup(self) -> None:
        """Remove every play stone and return to SETUP; setup stones stay."""
        self._mode = Mode.SETUP
        self._last_move_number = 0
        for _, point in self._grid.points():
            if point.move_number is not None:
                point.clear()
        logger.debug("Recorded moves cleared")

    def handle_reset(self) -> str:
        """
        Reset button policy: clear recorded moves if there are any,
        otherwise reset everything.

        Returns:
            "moves" if only recorded moves were cleared, "full" otherwise
        """
        if self.has_recorded_moves():
            self.reset_to_setup()
            return "moves"
        self.reset()
        return "full"

    # =============================================================================
    # ANALYSIS
    # =============================================================================

    def get_statistics(self) -> Dict[str, int]:
        """
        Count stones on the board by colour and kind.

        Returns:
            Dict with black/white setup and played counts, empty points and moves
        """
        stats = {
            "black_setup": 0,
            "white_setup": 0,
            "black_played": 0,
            "white_played": 0,
            "empty": 0,
            "moves": self._last_move_number,
        }
        for _, point in self._grid.points():
            if point.owner is None:
                stats["empty"] += 1
                continue
            colour = "black" if point.owner.as_player() is Player.BLACK else "white"
            kind = "setup" if point.owner.setup else "played"
            stats[f"{colour}_{kind}"] += 1
        return stats

    def validate(self) -> List[ValidationError]:
        """
        Check the numbering invariants.

        Returns:
            List of ValidationError objects (empty when consistent)
        """
        errors: List[ValidationError] = []
        numbers: List[int] = []

        for coord, point in self._grid.points():
            if point.move_number is None:
                continue
            numbers.append(point.move_number)
            if not point.is_play_stone():
                errors.append(ValidationError(
                    "error", f"Move {point.move_number} is not on a play stone", location=coord))
            if self._mode == Mode.SETUP:
                errors.append(ValidationError(
                    "error", f"Move {point.move_number} present in setup mode", location=coord))

        if sorted(numbers) != list(range(1, len(numbers) + 1)):
            errors.append(ValidationError("error", f"Move numbers are not dense: {sorted(numbers)}"))
        if len(numbers) != self._last_move_number:
            errors.append(ValidationError(
                "error",
                f"Move counter is {self._last_move_number} but {len(numbers)} stones are numbered"))

        return errors

    def as_array(self):
        """Occupancy matrix of the board (see BoardGrid.as_array)."""
        return self._grid.as_array()

    def pretty(self) -> str:
        """Text diagram: X/O play stones, x/o setup stones, '.' empty."""
        symbols = {
            (Player.BLACK, False): "X",
            (Player.WHITE, False): "O",
            (Player.BLACK, True): "x",
            (Player.WHITE, True): "o",
        }
        lines: List[str] = []
        for row in range(self.size):
            cells: List[str] = []
            for col in range(self.size):
                owner = self._grid.get(row, col).owner
                cells.append("." if owner is None else symbols[(owner.player, owner.setup)])
            lines.append(" ".join(cells))
        return "\n".join(lines)
