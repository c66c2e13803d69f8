"""
Board module for Minesweeper game.

Implements the board engine: board construction, mine placement,
neighbor counts, reveal propagation, the flag cycle, chord reveals and
game state evaluation. Every operation takes a Board value and returns a
new Board, leaving its input untouched; no-ops return the input itself.
"""
import copy
import random
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Iterator, List, Optional, Tuple

import numpy as np

from .cell import Cell, CellState
from .shapes import (
    BoardShape,
    adjust_mine_count,
    cell_exists,
    count_active_cells,
    get_neighbors,
)


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    NOT_STARTED = "not_started"
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


class Difficulty(Enum):
    """Difficulty presets."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    CUSTOM = "custom"


@dataclass
class GameConfig:
    """
    Configuration for a Minesweeper game.

    Attributes:
        rows: Number of rows in the grid.
        cols: Number of columns in the grid.
        mines: Mine count for the full rectangle; scaled for other shapes.
        board_shape: Shape of the playing surface.
    """

    rows: int = 9
    cols: int = 9
    mines: int = 10
    board_shape: BoardShape = BoardShape.RECTANGLE

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows < 1 or self.cols < 1:
            raise ValueError("Board dimensions must be positive")
        if self.mines < 0:
            raise ValueError("Number of mines cannot be negative")
        # First click clears a 3x3 area and at least one safe cell must remain
        max_mines = self.active_cells - 9
        if max(self.mines, self.effective_mines) > max_mines:
            raise ValueError(f"Too many mines (max {max(max_mines, 0)})")

    @property
    def active_cells(self) -> int:
        """Number of cells inside the board shape."""
        return count_active_cells(self.rows, self.cols, self.board_shape)

    @property
    def effective_mines(self) -> int:
        """Mine count after scaling to the board shape."""
        return adjust_mine_count(
            self.mines, self.rows, self.cols, self.board_shape
        )


# Preset difficulty levels
DIFFICULTY_CONFIGS = {
    Difficulty.EASY: GameConfig(9, 9, 10),
    Difficulty.MEDIUM: GameConfig(16, 16, 40),
    Difficulty.HARD: GameConfig(16, 30, 99),
    Difficulty.CUSTOM: GameConfig(16, 16, 40),
}


def config_for(
    difficulty: Difficulty, shape: BoardShape = BoardShape.RECTANGLE
) -> GameConfig:
    """Get the preset configuration for a difficulty on a given shape."""
    return replace(DIFFICULTY_CONFIGS[difficulty], board_shape=shape)


# ============================================================================
# Board Value
# ============================================================================

@dataclass
class Board:
    """
    Snapshot of a Minesweeper grid.

    The grid is always rows x cols; positions outside the board shape
    hold cells with exists=False. The shape travels with the board so
    every engine call uses the same neighbor policy.
    """

    rows: int
    cols: int
    shape: BoardShape = BoardShape.RECTANGLE
    cells: List[List[Cell]] = field(default_factory=list, repr=False)
    mines_placed: bool = False

    def copy(self) -> "Board":
        """Deep copy of the board."""
        return copy.deepcopy(self)

    def in_bounds(self, row: int, col: int) -> bool:
        """Check if position is within the grid."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if out of bounds."""
        if not self.in_bounds(row, col):
            return None
        return self.cells[row][col]

    def neighbors(self, row: int, col: int) -> List[Tuple[int, int]]:
        """Shape neighbors of a position that are active cells."""
        return [
            (neighbor_row, neighbor_col)
            for neighbor_row, neighbor_col in get_neighbors(
                self.shape, row, col, self.rows, self.cols
            )
            if self.cells[neighbor_row][neighbor_col].exists
        ]

    def active_cells(self) -> Iterator[Cell]:
        """Iterate over cells inside the board shape, row by row."""
        for row in self.cells:
            for cell in row:
                if cell.exists:
                    yield cell

    def active_positions(self) -> List[Tuple[int, int]]:
        """Positions of all active cells."""
        return [(cell.row, cell.col) for cell in self.active_cells()]

    @property
    def active_count(self) -> int:
        """Number of active cells."""
        return sum(1 for _ in self.active_cells())

    @property
    def mine_count(self) -> int:
        """Number of mines on the board."""
        return sum(1 for cell in self.active_cells() if cell.is_mine)

    def count_state(self, state: CellState) -> int:
        """Count active cells in the given state."""
        return sum(1 for cell in self.active_cells() if cell.state == state)

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array.

        Returns:
            2D int8 array of Cell.to_observation() values.
        """
        obs = np.zeros((self.rows, self.cols), dtype=np.int8)
        for row in range(self.rows):
            for col in range(self.cols):
                obs[row, col] = self.cells[row][col].to_observation()
        return obs


# ============================================================================
# Construction (Low-level)
# ============================================================================

def create_empty_board(
    rows: int, cols: int, shape: BoardShape = BoardShape.RECTANGLE
) -> Board:
    """Create a board with every cell hidden and no mines."""
    cells = [
        [
            Cell(
                row=row,
                col=col,
                exists=cell_exists(shape, row, col, rows, cols),
            )
            for col in range(cols)
        ]
        for row in range(rows)
    ]
    return Board(rows=rows, cols=cols, shape=shape, cells=cells)


def place_mines(
    board: Board,
    mine_count: int,
    exclude_row: Optional[int] = None,
    exclude_col: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> Board:
    """
    Place mines randomly on the active cells.

    When an exclusion anchor is given, neither the anchor nor its shape
    neighbors receive a mine. Mines are placed only once per board.

    Args:
        board: Board without mines.
        mine_count: Mines to place; capped by the candidate count.
        exclude_row: Row of the first click.
        exclude_col: Column of the first click.
        rng: Random source, for reproducible layouts.

    Returns:
        New board with mines placed.
    """
    if board.mines_placed:
        return board

    excluded = set()
    if exclude_row is not None and exclude_col is not None:
        excluded.add((exclude_row, exclude_col))
        excluded.update(
            get_neighbors(
                board.shape, exclude_row, exclude_col, board.rows, board.cols
            )
        )

    candidates = [
        position for position in board.active_positions()
        if position not in excluded
    ]
    # random.shuffle is a Fisher-Yates shuffle
    (rng or random).shuffle(candidates)

    new_board = board.copy()
    for row, col in candidates[:min(mine_count, len(candidates))]:
        new_board.cells[row][col].is_mine = True
    new_board.mines_placed = True
    return new_board


def calculate_neighbor_mines(board: Board) -> Board:
    """Compute neighbor mine counts for every active non-mine cell."""
    new_board = board.copy()
    for cell in new_board.active_cells():
        if not cell.is_mine:
            cell.neighbor_mines = _count_adjacent_mines(
                new_board, cell.row, cell.col
            )
    return new_board


def _count_adjacent_mines(board: Board, row: int, col: int) -> int:
    """Count mines adjacent to a specific cell."""
    count = 0
    for neighbor_row, neighbor_col in board.neighbors(row, col):
        if board.cells[neighbor_row][neighbor_col].is_mine:
            count += 1
    return count


def _count_adjacent_flags(board: Board, row: int, col: int) -> int:
    """Count flagged cells adjacent to position."""
    count = 0
    for neighbor_row, neighbor_col in board.neighbors(row, col):
        if board.cells[neighbor_row][neighbor_col].is_flagged:
            count += 1
    return count


def _flood_reveal(board: Board, row: int, col: int) -> None:
    """Reveal a cell in place, cascading through empty regions."""
    stack = [(row, col)]
    while stack:
        current_row, current_col = stack.pop()
        cell = board.cells[current_row][current_col]
        if not cell.reveal():
            continue
        if cell.is_mine or cell.neighbor_mines > 0:
            continue
        for neighbor_row, neighbor_col in board.neighbors(
            current_row, current_col
        ):
            if board.cells[neighbor_row][neighbor_col].is_hidden:
                stack.append((neighbor_row, neighbor_col))


def _is_playable(board: Board, row: int, col: int) -> bool:
    """Check that a position is in bounds and inside the shape."""
    cell = board.get_cell(row, col)
    return cell is not None and cell.exists


# ============================================================================
# Game Actions (Mid-level)
# ============================================================================

def reveal_cell(board: Board, row: int, col: int) -> Board:
    """
    Reveal a cell at the given position.

    If the cell is empty (no neighbor mines), its connected empty region
    and the numbered border around it are revealed too.

    Args:
        board: Current board.
        row: Row index to reveal.
        col: Column index to reveal.

    Returns:
        New board, or the same board if the cell cannot be revealed.
    """
    if not _is_playable(board, row, col):
        return board
    if not board.cells[row][col].is_hidden:
        return board

    new_board = board.copy()
    _flood_reveal(new_board, row, col)
    return new_board


def toggle_flag(board: Board, row: int, col: int) -> Board:
    """Cycle the marker HIDDEN -> FLAGGED -> QUESTIONED -> HIDDEN."""
    if not _is_playable(board, row, col):
        return board
    if board.cells[row][col].is_revealed:
        return board

    new_board = board.copy()
    new_board.cells[row][col].cycle_mark()
    return new_board


def chord_reveal(board: Board, row: int, col: int) -> Board:
    """
    Chord action: reveal all hidden neighbors if the flag count matches.

    Only applies to a revealed, numbered, non-mine cell. A mismatched
    flag count leaves the board unchanged.

    Args:
        board: Current board.
        row: Row index of the numbered cell.
        col: Column index of the numbered cell.

    Returns:
        New board, or the same board when the chord does not apply.
    """
    if not _is_playable(board, row, col):
        return board
    cell = board.cells[row][col]
    if not cell.is_revealed or cell.is_mine or cell.neighbor_mines == 0:
        return board
    if _count_adjacent_flags(board, row, col) != cell.neighbor_mines:
        return board

    new_board = board.copy()
    for neighbor_row, neighbor_col in new_board.neighbors(row, col):
        if new_board.cells[neighbor_row][neighbor_col].is_hidden:
            _flood_reveal(new_board, neighbor_row, neighbor_col)
    return new_board


def reveal_all_mines(board: Board) -> Board:
    """Reveal every mine, used to show the field after a loss."""
    new_board = board.copy()
    for cell in new_board.active_cells():
        if cell.is_mine:
            cell.state = CellState.REVEALED
    return new_board


def flag_remaining_mines(board: Board) -> Board:
    """Flag every hidden or questioned mine, used after a win."""
    new_board = board.copy()
    for cell in new_board.active_cells():
        if cell.is_mine and cell.state in (
            CellState.HIDDEN, CellState.QUESTIONED
        ):
            cell.state = CellState.FLAGGED
    return new_board


# ============================================================================
# State Evaluation (High-level)
# ============================================================================

def check_game_state(board: Board, config: GameConfig) -> GameState:
    """
    Derive the game state from a board snapshot.

    A revealed mine loses immediately. The game is won when every
    non-mine active cell is revealed. A board with no mines placed and
    nothing revealed has not started.

    Args:
        board: Board snapshot.
        config: Configuration the board was built from.

    Returns:
        Current game state.
    """
    revealed = 0
    active = 0
    for cell in board.active_cells():
        active += 1
        if cell.is_revealed:
            if cell.is_mine:
                return GameState.LOST
            revealed += 1

    if not board.mines_placed and revealed == 0:
        return GameState.NOT_STARTED
    if revealed == active - config.effective_mines:
        return GameState.WON
    return GameState.PLAYING


def get_mines_left(board: Board, total_mines: int) -> int:
    """Mines minus flags; negative when over-flagged."""
    return total_mines - board.count_state(CellState.FLAGGED)
