"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their state
(hidden/revealed/flagged/questioned), content (mine/number) and whether
the position belongs to the active board shape.
"""
from enum import Enum
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = "hidden"
    REVEALED = "revealed"
    FLAGGED = "flagged"
    QUESTIONED = "questioned"


# Observation codes shared with the environment and renderer
OBS_INACTIVE = -3
OBS_FLAGGED = -2
OBS_HIDDEN = -1
OBS_MINE = 9


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        row: Row index on the board.
        col: Column index on the board.
        is_mine: Whether this cell contains a mine.
        neighbor_mines: Count of mines in neighboring cells (0-8).
        state: Current visual state.
        exists: False for positions outside the active board shape.
    """

    row: int = 0
    col: int = 0
    is_mine: bool = False
    neighbor_mines: int = 0
    state: CellState = CellState.HIDDEN
    exists: bool = True

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Returns:
            True if cell was revealed, False if it is not hidden or
            lies outside the board shape.
        """
        if not self.exists or self.state != CellState.HIDDEN:
            return False
        self.state = CellState.REVEALED
        return True

    def cycle_mark(self) -> bool:
        """
        Advance the marker cycle HIDDEN -> FLAGGED -> QUESTIONED -> HIDDEN.

        Returns:
            True if the marker changed, False if cell is revealed or
            lies outside the board shape.
        """
        if not self.exists or self.state == CellState.REVEALED:
            return False
        if self.state == CellState.HIDDEN:
            self.state = CellState.FLAGGED
        elif self.state == CellState.FLAGGED:
            self.state = CellState.QUESTIONED
        elif self.state == CellState.QUESTIONED:
            self.state = CellState.HIDDEN
        else:
            self.state = CellState.FLAGGED
        return True

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return self.state == CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.state == CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    @property
    def is_questioned(self) -> bool:
        """Check if cell carries a question mark."""
        return self.state == CellState.QUESTIONED

    def to_observation(self) -> int:
        """
        Convert cell to an observation value.

        Returns:
            -3: Position outside the board shape
            -2: Flagged cell
            -1: Hidden or questioned cell
            0-8: Revealed cell with neighbor mine count
            9: Revealed mine (game over state)
        """
        if not self.exists:
            return OBS_INACTIVE
        if self.state == CellState.FLAGGED:
            return OBS_FLAGGED
        if self.state != CellState.REVEALED:
            return OBS_HIDDEN
        if self.is_mine:
            return OBS_MINE
        return self.neighbor_mines
