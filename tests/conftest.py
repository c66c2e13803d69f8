"""
Pytest configuration and shared fixtures.
"""
import random
import sys
from pathlib import Path
from typing import Callable, Iterable, Tuple

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minefield import (
    Board,
    BoardShape,
    Cell,
    GameConfig,
    calculate_neighbor_mines,
    create_empty_board,
)


# ============================================================================
# Board Fixtures
# ============================================================================

def build_board(
    rows: int,
    cols: int,
    mines: Iterable[Tuple[int, int]] = (),
    shape: BoardShape = BoardShape.RECTANGLE,
) -> Board:
    """Build a board with mines at fixed positions and counts computed."""
    board = create_empty_board(rows, cols, shape)
    for row, col in mines:
        board.cells[row][col].is_mine = True
    board.mines_placed = True
    return calculate_neighbor_mines(board)


@pytest.fixture
def board_factory() -> Callable[..., Board]:
    """Factory for boards with known mine layouts."""
    return build_board


@pytest.fixture
def empty_board() -> Board:
    """Create a 9x9 board before the first click."""
    return create_empty_board(9, 9)


@pytest.fixture
def mineless_board() -> Board:
    """Create a 5x5 board with no mines for cascade testing."""
    return build_board(5, 5)


@pytest.fixture
def corner_mine_board() -> Board:
    """Create a 3x3 board with a single mine in the top-left corner."""
    return build_board(3, 3, [(0, 0)])


@pytest.fixture
def wall_board() -> Board:
    """5x5 board with a full column of mines down the middle."""
    return build_board(5, 5, [(row, 2) for row in range(5)])


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for reproducible mine layouts."""
    return random.Random(1234)


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


@pytest.fixture
def inactive_cell() -> Cell:
    """Create a cell outside the board shape."""
    return Cell(exists=False)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def easy_config() -> GameConfig:
    """Easy difficulty configuration."""
    return GameConfig(9, 9, 10)


@pytest.fixture
def hexagon_config() -> GameConfig:
    """Easy dimensions on a hexagon board."""
    return GameConfig(9, 9, 10, BoardShape.HEXAGON)


# ============================================================================
# Time Fixtures
# ============================================================================

class FakeClock:
    """Manually advanced clock."""

    def __init__(self) -> None:
        self.now = 100.0

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()
