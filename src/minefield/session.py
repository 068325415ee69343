"""
Game session module for the mark-first Minesweeper variant.

A session owns one board plus the player's annotation of every cell, and
applies the two actions: toggling a mark (secondary) and committing a
marked cell (primary). Committing is only possible from a marked cell, and
only a wrong guess loses the game.
"""
import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator, List, Optional

import numpy as np

from .board import Board, BoardConfig, CellClue, InvalidConfiguration
from .cell import Cell, CellState


logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameStatus(Enum):
    """Overall state of a session. There is no winning state."""

    IN_PROGRESS = auto()
    LOST = auto()


class ActionOutcome(Enum):
    """Result of a single action handler call."""

    IGNORED = auto()
    MARKED = auto()
    REVEALED = auto()
    GAME_LOST = auto()


# Observation codes for unopened and mine-drawn cells; revealed cells
# otherwise show their neighbor count (0-9).
OBS_NO_MARK = -1
OBS_MARKED_SAFE = -2
OBS_MARKED_MINE = -3
OBS_MINE = -4


@dataclass(frozen=True)
class ActionResult:
    """
    What a caller needs to render a cell after an action.

    Attributes:
        outcome: Result of the action.
        row: Row index of the cell.
        col: Column index of the cell.
        state: Cell state after the action, None for out-of-bounds cells.
        neighbor_count: Displayed count, set on REVEALED and GAME_LOST.
        is_mine: Whether the cell holds a mine, set on REVEALED and
            GAME_LOST.
        shows_mine: True when the cell is drawn as a mine instead of a count.
    """

    outcome: ActionOutcome
    row: int
    col: int
    state: Optional[CellState] = None
    neighbor_count: Optional[int] = None
    is_mine: Optional[bool] = None
    shows_mine: bool = False

    @property
    def is_loss(self) -> bool:
        return self.outcome == ActionOutcome.GAME_LOST


# ============================================================================
# Game Session
# ============================================================================

class GameSession:
    """
    One game: a generated board, the cell annotations, and the status.

    Action table per cell:

        state        | toggle_mark   | commit
        -------------+---------------+--------------------------
        NO_MARK      | MARKED_SAFE   | ignored
        MARKED_SAFE  | MARKED_MINE   | revealed, lost on a mine
        MARKED_MINE  | NO_MARK       | revealed, lost on no mine
        REVEALED     | ignored       | ignored
    """

    def __init__(
        self,
        width: int,
        height: int,
        num_mines: int,
        seed: Optional[int] = None,
        board: Optional[Board] = None,
    ) -> None:
        """
        Create a session, generating its board unless one is given.

        Args:
            width: Number of columns.
            height: Number of rows.
            num_mines: Total mines to place.
            seed: Random seed for reproducible layouts.
            board: Already generated board to play on; its configuration
                must match width, height and num_mines.

        Raises:
            InvalidConfiguration: If the dimensions or mine count are
                out of range, or do not match the given board.
            RuntimeError: If the given board has not been generated.
        """
        config = BoardConfig(width, height, num_mines)
        if board is None:
            board = Board(config, seed=seed)
            board.generate()
        elif board.config != config:
            raise InvalidConfiguration(
                f"Board is {board.width}x{board.height} with "
                f"{board.config.num_mines} mines, expected {width}x{height} "
                f"with {num_mines}"
            )
        elif not board.is_generated:
            raise RuntimeError("Board layout has not been generated")

        self._board = board
        self._cells: List[List[Cell]] = [
            [Cell() for _ in range(board.width)]
            for _ in range(board.height)
        ]
        self._status = GameStatus.IN_PROGRESS
        self._unopened = board.config.total_cells

    @classmethod
    def from_board(cls, board: Board) -> "GameSession":
        """Create a session over an already generated board."""
        return cls(
            board.width, board.height, board.config.num_mines, board=board
        )

    # ========================================================================
    # Actions
    # ========================================================================

    def toggle_mark(self, row: int, col: int) -> ActionResult:
        """
        Secondary action: cycle the mark on an unopened cell.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            MARKED with the new state, or IGNORED for revealed cells,
            out-of-bounds positions and finished sessions.
        """
        cell = self._actionable_cell(row, col)
        if cell is None or not cell.toggle_mark():
            return self._ignored(row, col)

        logger.debug("Cell (%d, %d) marked %s", row, col, cell.state.name)
        return ActionResult(ActionOutcome.MARKED, row, col, state=cell.state)

    def commit(self, row: int, col: int) -> ActionResult:
        """
        Primary action: reveal a marked cell and judge the guess.

        A cell marked safe loses the game if it holds a mine; a cell
        marked mine loses the game if it does not. A correctly marked
        mine is revealed and play continues.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            REVEALED or GAME_LOST with the display data, or IGNORED for
            unmarked or revealed cells, out-of-bounds positions and
            finished sessions.
        """
        cell = self._actionable_cell(row, col)
        if cell is None:
            return self._ignored(row, col)

        mark = cell.commit()
        if mark is None:
            return self._ignored(row, col)

        self._unopened -= 1
        is_mine = self._board.is_mine(row, col)
        neighbor_count = self._board.count_neighbor_mines(row, col)

        if mark == CellState.MARKED_SAFE:
            lost = is_mine
        else:
            lost = not is_mine

        if lost:
            self._status = GameStatus.LOST
            logger.info(
                "Game lost at (%d, %d): cell %s a mine",
                row,
                col,
                "is" if is_mine else "is not",
            )
            outcome = ActionOutcome.GAME_LOST
        else:
            logger.debug("Cell (%d, %d) revealed", row, col)
            outcome = ActionOutcome.REVEALED

        return ActionResult(
            outcome,
            row,
            col,
            state=cell.state,
            neighbor_count=neighbor_count,
            is_mine=is_mine,
            shows_mine=self._shows_mine(cell, is_mine),
        )

    def _actionable_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get the cell if an action on it may have an effect."""
        if self._status != GameStatus.IN_PROGRESS:
            return None
        return self.get_cell(row, col)

    def _ignored(self, row: int, col: int) -> ActionResult:
        cell = self.get_cell(row, col)
        state = cell.state if cell is not None else None
        return ActionResult(ActionOutcome.IGNORED, row, col, state=state)

    @staticmethod
    def _shows_mine(cell: Cell, is_mine: bool) -> bool:
        # Only a mine committed as safe is drawn as a mine; every other
        # revealed cell shows its count.
        return is_mine and cell.committed_from == CellState.MARKED_SAFE

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def board(self) -> Board:
        return self._board

    @property
    def config(self) -> BoardConfig:
        return self._board.config

    @property
    def status(self) -> GameStatus:
        """Get current session status."""
        return self._status

    @property
    def is_in_progress(self) -> bool:
        """Check if the session still accepts actions."""
        return self._status == GameStatus.IN_PROGRESS

    @property
    def is_lost(self) -> bool:
        """Check if the session was lost."""
        return self._status == GameStatus.LOST

    @property
    def unopened_count(self) -> int:
        """Number of cells not yet revealed."""
        return self._unopened

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self._board.is_valid_position(row, col):
            return None
        return self._cells[row][col]

    def cell_state(self, row: int, col: int) -> Optional[CellState]:
        """Get the annotation state at position, or None if invalid."""
        cell = self.get_cell(row, col)
        return cell.state if cell is not None else None

    def reveal_all(self) -> Iterator[CellClue]:
        """
        Diagnostic view of the whole board.

        Yields is-mine and neighbor count for every position without
        changing any cell state. Meant for inspection tooling, not play.
        """
        return self._board.iter_clues()

    def get_observation(self) -> np.ndarray:
        """
        Get the visible state as a numpy array.

        Returns:
            2D int8 array where:
                -1 = no mark
                -2 = marked safe
                -3 = marked mine
                -4 = revealed, drawn as a mine
                0-9 = revealed with neighbor count
        """
        obs = np.zeros((self.config.height, self.config.width), dtype=np.int8)
        for row in range(self.config.height):
            for col in range(self.config.width):
                obs[row, col] = self._observe(row, col)
        return obs

    def _observe(self, row: int, col: int) -> int:
        cell = self._cells[row][col]
        if cell.state == CellState.NO_MARK:
            return OBS_NO_MARK
        if cell.state == CellState.MARKED_SAFE:
            return OBS_MARKED_SAFE
        if cell.state == CellState.MARKED_MINE:
            return OBS_MARKED_MINE
        if self._shows_mine(cell, self._board.is_mine(row, col)):
            return OBS_MINE
        return self._board.count_neighbor_mines(row, col)
