"""
Cell module for the mark-first Minesweeper variant.

Represents the player's annotation of one board position: unopened with no
mark, unopened with a safe or mine mark, or revealed.
"""
from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible annotation states of a cell."""

    NO_MARK = auto()
    MARKED_SAFE = auto()
    MARKED_MINE = auto()
    REVEALED = auto()


# Secondary action cycle: no mark -> safe -> mine -> no mark
_NEXT_MARK = {
    CellState.NO_MARK: CellState.MARKED_SAFE,
    CellState.MARKED_SAFE: CellState.MARKED_MINE,
    CellState.MARKED_MINE: CellState.NO_MARK,
}


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Annotation state of a single cell in the grid.

    Whether the cell holds a mine is owned by the board; the cell only
    remembers which mark it was committed from so a revealed cell can be
    displayed correctly.

    Attributes:
        state: Current annotation state.
        committed_from: Mark held when the cell was revealed, else None.
    """

    state: CellState = CellState.NO_MARK
    committed_from: Optional[CellState] = None

    def toggle_mark(self) -> bool:
        """
        Advance the mark to the next state in the cycle.

        Returns:
            True if the mark changed, False if the cell is revealed.
        """
        if self.state == CellState.REVEALED:
            return False
        self.state = _NEXT_MARK[self.state]
        return True

    def commit(self) -> Optional[CellState]:
        """
        Reveal this cell.

        Only a marked cell can be revealed.

        Returns:
            The mark the cell was committed from, or None if the cell was
            unmarked or already revealed.
        """
        if not self.is_marked:
            return None
        self.committed_from = self.state
        self.state = CellState.REVEALED
        return self.committed_from

    @property
    def is_unopened(self) -> bool:
        """Check if cell has not been revealed."""
        return self.state != CellState.REVEALED

    @property
    def is_marked(self) -> bool:
        """Check if cell carries a safe or mine mark."""
        return self.state in (CellState.MARKED_SAFE, CellState.MARKED_MINE)

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.state == CellState.REVEALED
