"""
Unit tests for Cell class.

Tests cell state management, reveal/marker behavior, and observation conversion.
"""
import pytest
from minefield import Cell, CellState


# ============================================================================
# Cell Initialization Tests
# ============================================================================

class TestCellInitialization:
    """Test cell creation and default values."""

    def test_default_cell_is_not_mine(self) -> None:
        """New cell should not be a mine by default."""
        cell = Cell()
        assert cell.is_mine is False

    def test_default_cell_is_hidden(self) -> None:
        """New cell should be hidden by default."""
        cell = Cell()
        assert cell.state == CellState.HIDDEN
        assert cell.is_hidden is True

    def test_default_cell_has_zero_neighbor_mines(self) -> None:
        """New cell should have 0 neighbor mines by default."""
        assert Cell().neighbor_mines == 0

    def test_default_cell_exists(self) -> None:
        """Cells belong to the board shape unless told otherwise."""
        assert Cell().exists is True

    def test_cell_keeps_position(self) -> None:
        cell = Cell(row=3, col=7)
        assert (cell.row, cell.col) == (3, 7)


# ============================================================================
# Cell Reveal Tests
# ============================================================================

class TestCellReveal:
    """Test cell reveal behavior."""

    def test_reveal_hidden_cell_returns_true(self, hidden_cell: Cell) -> None:
        """Revealing a hidden cell should succeed."""
        assert hidden_cell.reveal() is True
        assert hidden_cell.is_revealed is True

    def test_reveal_already_revealed_returns_false(
        self, hidden_cell: Cell
    ) -> None:
        """Revealing an already revealed cell should fail."""
        hidden_cell.reveal()
        assert hidden_cell.reveal() is False

    def test_reveal_flagged_cell_returns_false(self, hidden_cell: Cell) -> None:
        """Cannot reveal a flagged cell."""
        hidden_cell.cycle_mark()
        assert hidden_cell.reveal() is False
        assert hidden_cell.is_flagged is True

    def test_reveal_questioned_cell_returns_false(
        self, hidden_cell: Cell
    ) -> None:
        """Question marks also protect a cell from reveals."""
        hidden_cell.cycle_mark()
        hidden_cell.cycle_mark()
        assert hidden_cell.reveal() is False

    def test_reveal_inactive_cell_returns_false(
        self, inactive_cell: Cell
    ) -> None:
        """Cells outside the shape can never be revealed."""
        assert inactive_cell.reveal() is False
        assert inactive_cell.is_hidden is True


# ============================================================================
# Cell Marker Tests
# ============================================================================

class TestCellMarker:
    """Test the flag/question marker cycle."""

    def test_first_mark_flags_cell(self, hidden_cell: Cell) -> None:
        assert hidden_cell.cycle_mark() is True
        assert hidden_cell.state == CellState.FLAGGED

    def test_second_mark_questions_cell(self, hidden_cell: Cell) -> None:
        hidden_cell.cycle_mark()
        hidden_cell.cycle_mark()
        assert hidden_cell.state == CellState.QUESTIONED
        assert hidden_cell.is_questioned is True

    def test_third_mark_returns_to_hidden(self, hidden_cell: Cell) -> None:
        """HIDDEN -> FLAGGED -> QUESTIONED -> HIDDEN."""
        for _ in range(3):
            hidden_cell.cycle_mark()
        assert hidden_cell.state == CellState.HIDDEN

    def test_mark_revealed_cell_returns_false(self, hidden_cell: Cell) -> None:
        """Cannot mark a revealed cell."""
        hidden_cell.reveal()
        assert hidden_cell.cycle_mark() is False
        assert hidden_cell.is_revealed is True

    def test_mark_inactive_cell_returns_false(
        self, inactive_cell: Cell
    ) -> None:
        assert inactive_cell.cycle_mark() is False


# ============================================================================
# Cell Observation Tests
# ============================================================================

class TestCellObservation:
    """Test cell observation values."""

    def test_hidden_cell_observation_is_negative_one(
        self, hidden_cell: Cell
    ) -> None:
        assert hidden_cell.to_observation() == -1

    def test_flagged_cell_observation_is_negative_two(
        self, hidden_cell: Cell
    ) -> None:
        hidden_cell.cycle_mark()
        assert hidden_cell.to_observation() == -2

    def test_questioned_cell_observation_is_hidden(
        self, hidden_cell: Cell
    ) -> None:
        hidden_cell.cycle_mark()
        hidden_cell.cycle_mark()
        assert hidden_cell.to_observation() == -1

    def test_inactive_cell_observation_is_negative_three(
        self, inactive_cell: Cell
    ) -> None:
        assert inactive_cell.to_observation() == -3

    @pytest.mark.parametrize("count", range(0, 9))
    def test_revealed_cell_observation_matches_neighbor_count(
        self, count: int
    ) -> None:
        """Revealed cell returns its neighbor mine count."""
        cell = Cell(neighbor_mines=count)
        cell.reveal()
        assert cell.to_observation() == count

    def test_revealed_mine_observation_is_nine(self, mine_cell: Cell) -> None:
        mine_cell.reveal()
        assert mine_cell.to_observation() == 9
