"""
Board module for the mark-first Minesweeper variant.

Implements board configuration, randomized mine placement, and the
read-only queries (is-mine, neighbor count) the game session is built on.
"""
import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence, Tuple

import numpy as np


logger = logging.getLogger(__name__)


# ============================================================================
# Configuration
# ============================================================================

class InvalidConfiguration(ValueError):
    """Raised when board dimensions or mine count are out of range."""


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Total mines to place.
    """

    width: int = 9
    height: int = 9
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise InvalidConfiguration("Board dimensions must be positive")
        if self.num_mines < 0:
            raise InvalidConfiguration("Number of mines cannot be negative")
        if self.num_mines > self.total_cells:
            raise InvalidConfiguration(
                f"Too many mines (max {self.total_cells})"
            )

    @property
    def total_cells(self) -> int:
        """Number of cells on the board."""
        return self.width * self.height


@dataclass(frozen=True)
class CellClue:
    """Diagnostic view of a single board position."""

    row: int
    col: int
    is_mine: bool
    neighbor_count: int


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper mine layout.

    The layout is a flat row-major array (index = row * width + col) holding
    1 for a mine and 0 for an empty cell. It is generated once and is
    read-only afterwards.
    """

    config: BoardConfig = field(default_factory=lambda: BoardConfig())
    seed: Optional[int] = None
    _layout: Optional[np.ndarray] = field(
        default=None, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        """Create the random generator used for mine placement."""
        self._rng = np.random.default_rng(self.seed)

    @classmethod
    def from_layout(
        cls, config: BoardConfig, layout: Sequence[int]
    ) -> "Board":
        """
        Build an already generated board from a fixed layout.

        Args:
            config: Board configuration the layout must match.
            layout: Row-major sequence of 0/1 values.

        Returns:
            Board holding the given layout.
        """
        raw = np.asarray(layout).reshape(-1)
        if raw.size != config.total_cells:
            raise InvalidConfiguration(
                f"Layout has {raw.size} cells, expected {config.total_cells}"
            )
        if not np.isin(raw, (0, 1)).all():
            raise InvalidConfiguration("Layout values must be 0 or 1")

        # Own copy; the caller's array must not alias the frozen layout
        cells = np.array(raw, dtype=np.int8)
        if int(cells.sum()) != config.num_mines:
            raise InvalidConfiguration(
                f"Layout has {int(cells.sum())} mines, "
                f"expected {config.num_mines}"
            )

        board = cls(config)
        board._freeze(cells)
        return board

    # ========================================================================
    # Generation (Low-level)
    # ========================================================================

    def generate(self) -> None:
        """
        Place the mines.

        Lays out num_mines ones followed by zeros, then applies a
        Fisher-Yates shuffle so every arrangement with the configured
        mine count is equally likely.
        """
        if self._layout is not None:
            raise RuntimeError("Board layout has already been generated")

        cells = np.zeros(self.config.total_cells, dtype=np.int8)
        cells[: self.config.num_mines] = 1

        for i in range(cells.size - 1, 0, -1):
            j = int(self._rng.integers(0, i + 1))
            cells[i], cells[j] = cells[j], cells[i]

        self._freeze(cells)
        logger.debug(
            "Generated %dx%d board with %d mines",
            self.config.width,
            self.config.height,
            self.config.num_mines,
        )

    def _freeze(self, cells: np.ndarray) -> None:
        """Store the layout and make it read-only."""
        cells.flags.writeable = False
        self._layout = cells

    def _require_layout(self) -> np.ndarray:
        if self._layout is None:
            raise RuntimeError("Board layout has not been generated")
        return self._layout

    # ========================================================================
    # Queries (Mid-level)
    # ========================================================================

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    @property
    def is_generated(self) -> bool:
        """Check whether the layout exists."""
        return self._layout is not None

    @property
    def layout(self) -> np.ndarray:
        """Read-only flat layout (1 = mine, 0 = empty)."""
        return self._require_layout()

    def is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.config.height and 0 <= col < self.config.width

    def is_mine(self, row: int, col: int) -> bool:
        """
        Check whether a position holds a mine.

        Out-of-bounds positions are never mines, so neighbor scans near the
        edges need no special-casing.
        """
        layout = self._require_layout()
        if not self.is_valid_position(row, col):
            return False
        return bool(layout[row * self.config.width + col] == 1)

    def count_neighbor_mines(self, row: int, col: int) -> int:
        """
        Count mines in the 3x3 block centered on a position.

        This is the number of mined in-bounds 8-neighbors plus 1 when the
        position itself is a mine, giving a value in [0, 9].
        """
        count = 0
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if self.is_mine(row + delta_row, col + delta_col):
                    count += 1
        return count

    def get_neighbors(self, row: int, col: int) -> List[Tuple[int, int]]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for in-bounds neighbors.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self.is_valid_position(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    # ========================================================================
    # Diagnostics (High-level)
    # ========================================================================

    def iter_clues(self) -> Iterator[CellClue]:
        """Yield is-mine and neighbor count for every position, row-major."""
        for row in range(self.config.height):
            for col in range(self.config.width):
                yield CellClue(
                    row=row,
                    col=col,
                    is_mine=self.is_mine(row, col),
                    neighbor_count=self.count_neighbor_mines(row, col),
                )

    def mine_map(self) -> np.ndarray:
        """Get mine positions as a 2D boolean array."""
        layout = self._require_layout()
        return layout.reshape(self.config.height, self.config.width) == 1

    def clue_map(self) -> np.ndarray:
        """Get neighbor counts for every position as a 2D int8 array."""
        clues = np.zeros((self.config.height, self.config.width), dtype=np.int8)
        for clue in self.iter_clues():
            clues[clue.row, clue.col] = clue.neighbor_count
        return clues
