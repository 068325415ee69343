"""
Unit tests for Cell class.

Tests the mark cycle and the commit rules.
"""
import pytest
from minefield import Cell, CellState


# ============================================================================
# Cell Initialization Tests
# ============================================================================

class TestCellInitialization:
    """Test cell creation and default values."""

    def test_default_cell_is_unmarked(self) -> None:
        """New cell should be unopened with no mark."""
        cell = Cell()
        assert cell.state == CellState.NO_MARK
        assert cell.is_unopened is True
        assert cell.is_marked is False

    def test_default_cell_has_no_commit_mark(self) -> None:
        """New cell should not remember a commit mark."""
        assert Cell().committed_from is None


# ============================================================================
# Mark Cycle Tests
# ============================================================================

class TestToggleMark:
    """Test the secondary action cycle."""

    def test_unmarked_becomes_safe(self, unmarked_cell: Cell) -> None:
        """First toggle marks the cell safe."""
        assert unmarked_cell.toggle_mark() is True
        assert unmarked_cell.state == CellState.MARKED_SAFE

    def test_safe_becomes_mine(self, safe_marked_cell: Cell) -> None:
        """Second toggle marks the cell as a mine."""
        assert safe_marked_cell.toggle_mark() is True
        assert safe_marked_cell.state == CellState.MARKED_MINE

    def test_mine_becomes_unmarked(self, mine_marked_cell: Cell) -> None:
        """Third toggle clears the mark."""
        assert mine_marked_cell.toggle_mark() is True
        assert mine_marked_cell.state == CellState.NO_MARK

    def test_full_cycle_repeats(self, unmarked_cell: Cell) -> None:
        """The cycle has period three."""
        seen = []
        for _ in range(6):
            unmarked_cell.toggle_mark()
            seen.append(unmarked_cell.state)
        assert seen == [
            CellState.MARKED_SAFE,
            CellState.MARKED_MINE,
            CellState.NO_MARK,
        ] * 2

    def test_revealed_cell_cannot_be_marked(
        self, safe_marked_cell: Cell
    ) -> None:
        """Toggling a revealed cell does nothing."""
        safe_marked_cell.commit()
        assert safe_marked_cell.toggle_mark() is False
        assert safe_marked_cell.state == CellState.REVEALED


# ============================================================================
# Commit Tests
# ============================================================================

class TestCommit:
    """Test the primary action."""

    def test_unmarked_cell_cannot_commit(self, unmarked_cell: Cell) -> None:
        """Committing requires a mark."""
        assert unmarked_cell.commit() is None
        assert unmarked_cell.state == CellState.NO_MARK

    @pytest.mark.parametrize("toggles,mark", [
        (1, CellState.MARKED_SAFE),
        (2, CellState.MARKED_MINE),
    ])
    def test_marked_cell_commits(self, toggles: int, mark: CellState) -> None:
        """Committing a marked cell reveals it and records the mark."""
        cell = Cell()
        for _ in range(toggles):
            cell.toggle_mark()
        assert cell.commit() == mark
        assert cell.is_revealed is True
        assert cell.is_unopened is False
        assert cell.committed_from == mark

    def test_revealed_cell_cannot_commit_again(
        self, mine_marked_cell: Cell
    ) -> None:
        """Revealed is terminal."""
        mine_marked_cell.commit()
        assert mine_marked_cell.commit() is None
        assert mine_marked_cell.committed_from == CellState.MARKED_MINE
